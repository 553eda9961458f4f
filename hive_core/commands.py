"""Text commands typed by a player.

Two forms are understood, with a case-insensitive keyword:

    place <piece> <q> <r>
    move <piece> <from_q> <from_r> <to_q> <to_r>

Parsing only checks syntax. It never looks at a board.
"""
import re
from collections import namedtuple
from enum import Enum

from hive_core.game_piece import GamePiece, GamePieceType, PieceColor
from hive_core.hex_coordinate import HexCoordinate

PIECE_CODE_PATTERN = re.compile(r'[WB][QAGSB][1-9]?')
INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')

PLACE_USAGE = 'Place command format: place <piece> <q> <r>'
MOVE_USAGE = 'Move command format: move <piece> <from_q> <from_r> <to_q> <to_r>'


class CommandType(Enum):
    PLACE = 'place'
    MOVE = 'move'
    INVALID = 'invalid'


class Command(namedtuple('Command', ['command_type', 'piece', 'from_coord', 'to_coord', 'error'])):
    __slots__ = ()

    @classmethod
    def place(cls, piece, to_coord):
        return cls(CommandType.PLACE, piece, None, to_coord, None)

    @classmethod
    def move(cls, piece, from_coord, to_coord):
        return cls(CommandType.MOVE, piece, from_coord, to_coord, None)

    @classmethod
    def invalid(cls, error):
        return cls(CommandType.INVALID, None, None, None, error)

    def is_valid(self):
        return self.command_type != CommandType.INVALID


class _FieldError(Exception):
    pass


def is_valid_piece(piece):
    return PIECE_CODE_PATTERN.fullmatch(piece) is not None


def parse_piece_string(piece):
    if not is_valid_piece(piece):
        raise ValueError("invalid piece format: {}".format(piece))
    number = int(piece[2]) if len(piece) == 3 else 0
    return GamePiece(GamePieceType.from_letter(piece[1]), PieceColor.from_letter(piece[0]), number)


def _parse_int(token, field):
    if INTEGER_PATTERN.fullmatch(token) is None:
        raise _FieldError('Invalid {} coordinate: {}'.format(field, token))
    return int(token)


def _parse_coord(parts, start, q_field, r_field):
    return HexCoordinate(_parse_int(parts[start], q_field), _parse_int(parts[start + 1], r_field))


def _check_piece(piece):
    if not is_valid_piece(piece):
        raise _FieldError('Invalid piece: {}. Use format like WQ, BA1, WS2'.format(piece))
    return piece


def _parse_place(parts):
    if len(parts) < 4:
        return Command.invalid(PLACE_USAGE)
    piece = parts[1].upper()
    to_coord = _parse_coord(parts, 2, 'q', 'r')
    return Command.place(_check_piece(piece), to_coord)


def _parse_move(parts):
    if len(parts) < 6:
        return Command.invalid(MOVE_USAGE)
    piece = parts[1].upper()
    from_coord = _parse_coord(parts, 2, 'from_q', 'from_r')
    to_coord = _parse_coord(parts, 4, 'to_q', 'to_r')
    return Command.move(_check_piece(piece), from_coord, to_coord)


COMMAND_PARSERS = {
    CommandType.PLACE.value: _parse_place,
    CommandType.MOVE.value: _parse_move,
}


def parse_command(text):
    parts = text.split()
    if len(parts) == 0:
        return Command.invalid('Empty command')

    keyword = parts[0].lower()
    parser = COMMAND_PARSERS.get(keyword)
    if parser is None:
        return Command.invalid('Unknown command: {}'.format(keyword))
    try:
        return parser(parts)
    except _FieldError as e:
        return Command.invalid(str(e))
