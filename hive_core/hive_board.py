import numpy as np

from hive_core.hex_coordinate import HexCoordinate


class HiveBoard:
    """Stacks of pieces keyed by hex coordinate; the last piece is on top."""

    def __init__(self):
        self.reset()

    def reset(self):
        self._pieces = {}

    def place_piece(self, position, piece):
        self._pieces.setdefault(HexCoordinate.of(position), []).append(piece)

    def remove_piece(self, position):
        position = HexCoordinate.of(position)
        stack = self._pieces.get(position)
        if not stack:
            return None
        piece = stack.pop()
        if len(stack) == 0:
            del self._pieces[position]
        return piece

    def get_stack(self, position):
        return tuple(self._pieces.get(HexCoordinate.of(position), ()))

    def stack_height(self, position):
        return len(self._pieces.get(HexCoordinate.of(position), ()))

    def get_top_piece(self, position):
        stack = self._pieces.get(HexCoordinate.of(position))
        if not stack:
            return None
        return stack[-1]

    def is_occupied(self, position):
        return bool(self._pieces.get(HexCoordinate.of(position)))

    def is_empty(self):
        return len(self._pieces) == 0

    def neighbor_pieces(self, position):
        pieces = []
        for neighbor in HexCoordinate.of(position).neighbors():
            piece = self.get_top_piece(neighbor)
            if piece is not None:
                pieces.append(piece)
        return pieces

    def get_bounds(self):
        """Returns (min_q, max_q, min_r, max_r) over occupied coordinates.

        An empty board gives all zeros; check is_empty() to tell it apart
        from a board holding a single stack at the origin.
        """
        if self.is_empty():
            return 0, 0, 0, 0
        positions = np.array(list(self._pieces.keys()))
        min_q, min_r = np.min(positions, axis=0)
        max_q, max_r = np.max(positions, axis=0)
        return int(min_q), int(max_q), int(min_r), int(max_r)

    def all_coordinates(self):
        return list(self._pieces.keys())

    def piece_count(self):
        return sum(len(stack) for stack in self._pieces.values())

    def copy_to(self, other):
        other.reset()
        for position, pieces in self._pieces.items():
            for piece in pieces:
                other.place_piece(position, piece)

    def copy(self):
        board = HiveBoard()
        self.copy_to(board)
        return board

    def __str__(self):
        if self.is_empty():
            return 'Empty board'
        lines = ['Board ({} pieces):'.format(self.piece_count())]
        for position, pieces in self._pieces.items():
            lines.append('  ({},{}): {}'.format(
                position.q, position.r, ', '.join(piece.short_code() for piece in pieces)))
        return '\n'.join(lines) + '\n'
