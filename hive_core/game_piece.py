from collections import namedtuple
from enum import Enum


class GamePieceType(Enum):
    QUEEN_BEE = 'Q'
    SOLDIER_ANT = 'A'
    GRASSHOPPER = 'G'
    SPIDER = 'S'
    BEETLE = 'B'

    @classmethod
    def from_letter(cls, letter):
        return cls(letter.upper())


class PieceColor(Enum):
    WHITE = 'W'
    BLACK = 'B'

    @classmethod
    def from_letter(cls, letter):
        return cls(letter.upper())


PieceInfo = namedtuple('PieceInfo', ['name', 'symbol', 'quantity'])

PIECE_INFO = [
    PieceInfo('Queen Bee', GamePieceType.QUEEN_BEE, 1),
    PieceInfo('Ant', GamePieceType.SOLDIER_ANT, 3),
    PieceInfo('Grasshopper', GamePieceType.GRASSHOPPER, 3),
    PieceInfo('Spider', GamePieceType.SPIDER, 2),
    PieceInfo('Beetle', GamePieceType.BEETLE, 2),
]

# Quantities are reference data for a standard set; nothing enforces them.
PIECE_COUNT = {info.symbol: info.quantity for info in PIECE_INFO}


def all_piece_types():
    return list(PIECE_INFO)


class GamePiece(namedtuple('GamePiece', ['piece_type', 'color', 'number'], defaults=(0,))):
    __slots__ = ()

    def short_code(self):
        # Digit dropped for any instance 0, not only queens, so every
        # grammar code (WA, WQ5) formats back to itself. See DESIGN.md.
        code = self.color.value + self.piece_type.value
        if self.number == 0:
            return code
        return code + str(self.number)

    def __str__(self):
        return self.short_code()

    def __repr__(self):
        return '{}[{}]#{}'.format(self.piece_type.name.lower(), self.color.name.lower(), self.number)
