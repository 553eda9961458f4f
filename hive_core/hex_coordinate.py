import operator
from collections import namedtuple

from hive_core.utils import NEIGHBORS_DIRECTION, target_position, hex_distance


class HexCoordinate(namedtuple('HexCoordinate', ['q', 'r'])):
    """Axial (q, r) position; q is the column and r the row."""
    __slots__ = ()

    def __new__(cls, q=0, r=0):
        try:
            q, r = operator.index(q), operator.index(r)
        except TypeError:
            raise ValueError("Hex coordinates must be integers: ({!r}, {!r})".format(q, r))
        return super().__new__(cls, q, r)

    @classmethod
    def of(cls, position):
        if isinstance(position, HexCoordinate):
            return position
        try:
            q, r = position
        except (TypeError, ValueError):
            raise ValueError("Not a hex coordinate: {!r}".format(position))
        return cls(q, r)

    def __add__(self, direction):
        return HexCoordinate(*target_position(self, direction))

    def equals(self, other):
        return self.q == other[0] and self.r == other[1]

    def neighbor(self, direction_index):
        return self + NEIGHBORS_DIRECTION[direction_index % len(NEIGHBORS_DIRECTION)]

    def neighbors(self):
        return [self + direction for direction in NEIGHBORS_DIRECTION]

    def distance(self, other):
        return hex_distance(self, other)

    def is_adjacent(self, other):
        return self.distance(other) == 1

    def __repr__(self):
        return '({}, {})'.format(self.q, self.r)
