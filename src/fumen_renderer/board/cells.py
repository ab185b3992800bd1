"""Cell colours and piece identities used on board pages."""

from enum import Enum, IntEnum

from ..constants import BOARD_WIDTH


class CellColor(IntEnum):
    """Colour of one board cell. The value is its palette index."""

    EMPTY = 0
    I = 1
    L = 2
    O = 3
    Z = 4
    T = 5
    J = 6
    S = 7
    GRAY = 8


class PieceType(IntEnum):
    """The seven tetrominoes, valued like their matching cell colour."""

    I = 1
    L = 2
    O = 3
    Z = 4
    T = 5
    J = 6
    S = 7

    @property
    def color(self) -> CellColor:
        return CellColor(self.value)


class Rotation(Enum):
    """Rotation state of a piece, clockwise from spawn."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


EMPTY_ROW: tuple[CellColor, ...] = (CellColor.EMPTY,) * BOARD_WIDTH
