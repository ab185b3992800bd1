"""Immutable board pages: one frame of a board animation."""

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..constants import BOARD_WIDTH, MAX_BOARD_HEIGHT
from .cells import EMPTY_ROW, CellColor
from .piece import PiecePlacement

Row = tuple[CellColor, ...]


@dataclass(frozen=True)
class BoardPage:
    """
    One board state.

    ``field`` holds rows bottom-up: ``field[0]`` is the floor row. The garbage
    row sits logically just below row 0.
    """

    field: tuple[Row, ...] = ()
    garbage_row: Row = EMPTY_ROW
    piece: PiecePlacement | None = None
    comment: str | None = None

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Sequence[int]],
        garbage_row: Sequence[int] | None = None,
        piece: PiecePlacement | None = None,
        comment: str | None = None,
    ) -> "BoardPage":
        """Build a page from plain integer rows, bottom row first."""
        field = tuple(_to_row(row) for row in rows)
        if len(field) > MAX_BOARD_HEIGHT:
            raise ValueError(
                f"Board pages hold at most {MAX_BOARD_HEIGHT} rows, got {len(field)}"
            )
        return cls(
            field=field,
            garbage_row=_to_row(garbage_row) if garbage_row is not None else EMPTY_ROW,
            piece=piece,
            comment=comment,
        )

    @classmethod
    def from_diagram(
        cls,
        diagram: str,
        piece: PiecePlacement | None = None,
        comment: str | None = None,
    ) -> "BoardPage":
        """
        Build a page from a text picture of the board, top row first.

        Each line is one row of ``BOARD_WIDTH`` characters: ``_`` or ``.`` for
        an empty cell, a piece letter (``IJLOSTZ``) or ``X`` for gray. A final
        line starting with ``!`` is read as the garbage row.
        """
        lines = [line.strip() for line in diagram.strip().splitlines() if line.strip()]
        garbage = None
        if lines and lines[-1].startswith("!"):
            garbage = [_DIAGRAM_CELLS[ch] for ch in lines.pop()[1:]]
        rows = [[_DIAGRAM_CELLS[ch] for ch in line] for line in reversed(lines)]
        return cls.from_rows(rows, garbage_row=garbage, piece=piece, comment=comment)

    def filled_cells(self) -> Iterable[tuple[int, int, CellColor]]:
        """Yield (x, y, colour) for every non-empty field cell."""
        for y, row in enumerate(self.field):
            for x, color in enumerate(row):
                if color:
                    yield x, y, color


_DIAGRAM_CELLS: dict[str, CellColor] = {
    "_": CellColor.EMPTY,
    ".": CellColor.EMPTY,
    "X": CellColor.GRAY,
    **{name: CellColor[name] for name in "IJLOSTZ"},
}


def _to_row(values: Sequence[int]) -> Row:
    row = tuple(CellColor(value) for value in values)
    if len(row) != BOARD_WIDTH:
        raise ValueError(f"Board rows must have {BOARD_WIDTH} cells, got {len(row)}")
    return row
