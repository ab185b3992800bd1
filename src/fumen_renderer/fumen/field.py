"""Mutable playfield used while replaying fumen pages."""

from ..board import BoardPage, CellColor, PiecePlacement
from ..constants import BOARD_WIDTH, FUMEN_FIELD_HEIGHT
from .errors import FumenError


class Field:
    """Playfield plus garbage row; rows are stored bottom-up."""

    def __init__(
        self,
        rows: list[list[int]] | None = None,
        garbage: list[int] | None = None,
    ):
        self.rows = rows or [[0] * BOARD_WIDTH for _ in range(FUMEN_FIELD_HEIGHT)]
        self.garbage = garbage or [0] * BOARD_WIDTH

    def copy(self) -> "Field":
        return Field([row[:] for row in self.rows], self.garbage[:])

    def add(self, x: int, y: int, delta: int) -> None:
        """Shift the cell at (x, y) by ``delta``; row -1 is the garbage row."""
        row = self.garbage if y < 0 else self.rows[y]
        value = row[x] + delta
        if not 0 <= value <= CellColor.GRAY:
            raise FumenError(f"Invalid block value {value} at ({x}, {y})")
        row[x] = value

    def put(self, piece: PiecePlacement) -> None:
        for x, y in piece.cells():
            if not (0 <= x < BOARD_WIDTH and 0 <= y < FUMEN_FIELD_HEIGHT):
                raise FumenError(f"{piece!r} does not fit on the field")
            self.rows[y][x] = piece.kind.color

    def clear_lines(self) -> None:
        kept = [row for row in self.rows if not all(row)]
        cleared = len(self.rows) - len(kept)
        self.rows = kept + [[0] * BOARD_WIDTH for _ in range(cleared)]

    def rise(self) -> None:
        """Push the garbage row into the bottom of the field."""
        self.rows = [self.garbage] + self.rows[:-1]
        self.garbage = [0] * BOARD_WIDTH

    def mirror(self) -> None:
        self.rows = [row[::-1] for row in self.rows]

    def to_page(self, piece: PiecePlacement | None, comment: str | None) -> BoardPage:
        return BoardPage.from_rows(
            self.rows, garbage_row=self.garbage, piece=piece, comment=comment
        )
