"""Indexed-colour rasterization of board pages."""

from ..board import BoardPage, piece_cells
from ..constants import BOARD_WIDTH, GARBAGE_MARKER_INDEX, GARBAGE_STRIP_HEIGHT
from .errors import GeometryError
from .geometry import CanvasGeometry

GARBAGE_ROW = -1


def new_buffer(geometry: CanvasGeometry) -> bytearray:
    """Background-filled pixel buffer for one frame."""
    return bytearray(geometry.buffer_length)


def fill_tile(buffer: bytearray, geometry: CanvasGeometry, x: int, y: int, color: int) -> None:
    """
    Paint board cell (x, y) into ``buffer`` with palette index ``color``.

    Row -1 is the garbage row. When the canvas has a garbage strip it is drawn
    as a marker band ``GARBAGE_STRIP_HEIGHT`` pixels tall in the marker colour,
    with the full cell-coloured tile shifted down by the same amount.
    """
    if not 0 <= x < BOARD_WIDTH:
        raise GeometryError(f"Column {x} is outside the board")
    size = geometry.block_size
    width = geometry.width
    top = geometry.tile_top(y)
    garbage = y == GARBAGE_ROW and geometry.has_garbage_strip
    shift = GARBAGE_STRIP_HEIGHT if garbage else 0
    if top < 0 or top + size + shift > geometry.height:
        raise GeometryError(f"Row {y} is outside the {geometry.board_rows}-row canvas")

    left = top * width + x * size
    if garbage:
        marker = bytes((GARBAGE_MARKER_INDEX,)) * size
        for iy in range(min(GARBAGE_STRIP_HEIGHT, size)):
            start = left + iy * width
            buffer[start:start + size] = marker
        left += shift * width

    span = bytes((color,)) * size
    for iy in range(size):
        start = left + iy * width
        buffer[start:start + size] = span


def rasterize_page(page: BoardPage, geometry: CanvasGeometry) -> bytearray:
    """Render one page: board cells, then the garbage strip, then the piece."""
    buffer = new_buffer(geometry)
    for x, y, color in page.filled_cells():
        fill_tile(buffer, geometry, x, y, color)
    if geometry.has_garbage_strip:
        for x, color in enumerate(page.garbage_row):
            fill_tile(buffer, geometry, x, GARBAGE_ROW, color)
    for x, y, color in piece_cells(page):
        fill_tile(buffer, geometry, x, y, color)
    return buffer


__all__ = [
    "GARBAGE_ROW",
    "fill_tile",
    "new_buffer",
    "rasterize_page",
]
