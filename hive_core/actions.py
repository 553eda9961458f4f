from collections import namedtuple
from enum import Enum

from hive_core.commands import CommandType, parse_command, parse_piece_string


class ErrorKind(Enum):
    SYNTAX = 'syntax'
    NOT_FOUND = 'not_found'


class CommandResult(namedtuple('CommandResult', ['success', 'message', 'error_kind', 'piece'])):
    __slots__ = ()

    @classmethod
    def ok(cls, piece):
        return cls(True, None, None, piece)

    @classmethod
    def failure(cls, error_kind, message):
        return cls(False, message, error_kind, None)

    def __bool__(self):
        return self.success


class Action:
    def __init__(self, command):
        self.command = command

    def activate(self, board):
        raise NotImplementedError()

    def _piece(self):
        try:
            return parse_piece_string(self.command.piece), None
        except ValueError as e:
            return None, CommandResult.failure(ErrorKind.SYNTAX, str(e))


class PlaceAction(Action):
    def activate(self, board):
        piece, error = self._piece()
        if error is not None:
            return error
        # Any cell is accepted, occupied or not; placement rules are not checked.
        board.place_piece(self.command.to_coord, piece)
        return CommandResult.ok(piece)

    def __repr__(self):
        return 'Place {} at {}'.format(self.command.piece, self.command.to_coord)


class MoveAction(Action):
    def activate(self, board):
        _, error = self._piece()
        if error is not None:
            return error
        from_coord = self.command.from_coord
        piece = board.remove_piece(from_coord)
        if piece is None:
            return CommandResult.failure(ErrorKind.NOT_FOUND, 'No piece at {}'.format(from_coord))
        board.place_piece(self.command.to_coord, piece)
        return CommandResult.ok(piece)

    def __repr__(self):
        return 'Move {} {} -> {}'.format(self.command.piece, self.command.from_coord, self.command.to_coord)


ACTIONS = {
    CommandType.PLACE: PlaceAction,
    CommandType.MOVE: MoveAction,
}


def action_for(command):
    return ACTIONS[command.command_type](command)


class CommandInterpreter:
    """Applies player commands to a board.

    Every call returns a CommandResult. On failure the board is left exactly
    as it was.
    """

    def __init__(self, debug=False):
        self.debug = debug
        self.history = []

    def execute(self, board, text):
        return self._report(text, self.apply(board, parse_command(text)))

    def apply(self, board, command):
        if command.command_type == CommandType.INVALID:
            return CommandResult.failure(ErrorKind.SYNTAX, command.error)
        return action_for(command).activate(board)

    def _report(self, text, result):
        if result.success:
            self.history.append(text.strip())
        if self.debug:
            print(text.strip(), '->', 'ok' if result.success else result.message)
        return result
