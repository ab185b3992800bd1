"""Extent and piece-cell extraction consumed by the rasterizer."""

from typing import Iterable

from .cells import CellColor
from .page import BoardPage


def page_extent(page: BoardPage) -> int:
    """
    Highest occupied row index of a page, counting the active piece.

    Empty rows above the stack do not extend the board. A completely empty
    page has extent 0.
    """
    extent = 0
    for y in range(len(page.field) - 1, -1, -1):
        if any(page.field[y]):
            extent = y
            break
    if page.piece is not None:
        extent = max(extent, page.piece.top)
    return extent


def piece_cells(page: BoardPage) -> list[tuple[int, int, CellColor]]:
    """Absolute cells and colour of the page's active piece."""
    if page.piece is None:
        return []
    color = page.piece.kind.color
    return [(x, y, color) for x, y in page.piece.cells()]


def has_garbage(page: BoardPage) -> bool:
    return any(page.garbage_row)


def sequence_has_garbage(pages: Iterable[BoardPage]) -> bool:
    """Whether any page needs the garbage strip; applies to the whole sequence."""
    return any(has_garbage(page) for page in pages)
