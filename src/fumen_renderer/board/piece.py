"""Active piece placements and their shape table."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .cells import PieceType, Rotation

Offset = tuple[int, int]

# Cells of each piece in its spawn orientation, relative to the rotation centre.
_NORTH_OFFSETS: dict[PieceType, tuple[Offset, ...]] = {
    PieceType.I: ((-1, 0), (0, 0), (1, 0), (2, 0)),
    PieceType.O: ((0, 0), (1, 0), (0, 1), (1, 1)),
    PieceType.T: ((-1, 0), (0, 0), (1, 0), (0, 1)),
    PieceType.L: ((-1, 0), (0, 0), (1, 0), (1, 1)),
    PieceType.J: ((-1, 0), (0, 0), (1, 0), (-1, 1)),
    PieceType.S: ((-1, 0), (0, 0), (0, 1), (1, 1)),
    PieceType.Z: ((-1, 1), (0, 1), (0, 0), (1, 0)),
}


def _rotate(offset: Offset, rotation: Rotation) -> Offset:
    x, y = offset
    if rotation is Rotation.EAST:
        return y, -x
    if rotation is Rotation.SOUTH:
        return -x, -y
    if rotation is Rotation.WEST:
        return -y, x
    return x, y


PIECE_OFFSETS: Mapping[tuple[PieceType, Rotation], tuple[Offset, ...]] = MappingProxyType(
    {
        (kind, rotation): tuple(_rotate(offset, rotation) for offset in offsets)
        for kind, offsets in _NORTH_OFFSETS.items()
        for rotation in Rotation
    }
)


@dataclass(frozen=True, slots=True)
class PiecePlacement:
    """A tetromino placed on the board, anchored at its rotation centre."""

    kind: PieceType
    rotation: Rotation
    x: int
    y: int

    def cells(self) -> tuple[Offset, ...]:
        """Absolute (column, row) cells occupied by this placement."""
        return tuple(
            (self.x + dx, self.y + dy)
            for dx, dy in PIECE_OFFSETS[(self.kind, self.rotation)]
        )

    @property
    def top(self) -> int:
        """Highest row this placement reaches."""
        return max(y for _, y in self.cells())

    def __repr__(self) -> str:
        return f"PiecePlacement({self.kind.name} {self.rotation.name} x={self.x} y={self.y})"
