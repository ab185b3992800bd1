"""Canvas geometry shared by every frame of an animation."""

from dataclasses import dataclass
from typing import Sequence

from ..board import BoardPage, page_extent, sequence_has_garbage
from ..constants import BOARD_WIDTH, GARBAGE_STRIP_HEIGHT


@dataclass(frozen=True)
class CanvasGeometry:
    """
    Pixel layout of the canvas.

    ``board_rows`` counts ordinary board rows. With a garbage strip the canvas
    gains one more tile row for the garbage band plus the fixed-height marker
    strip, so the strip keeps its thickness at any block size.
    """

    block_size: int
    board_rows: int
    has_garbage_strip: bool = False

    @classmethod
    def from_pages(cls, pages: Sequence[BoardPage], block_size: int) -> "CanvasGeometry":
        """Compute one geometry covering every page of the sequence."""
        if not pages:
            raise ValueError("Cannot compute a canvas for an empty page sequence")
        return cls(
            block_size=block_size,
            board_rows=1 + max(page_extent(page) for page in pages),
            has_garbage_strip=sequence_has_garbage(pages),
        )

    @property
    def tile_rows(self) -> int:
        return self.board_rows + int(self.has_garbage_strip)

    @property
    def width(self) -> int:
        return BOARD_WIDTH * self.block_size

    @property
    def height(self) -> int:
        strip = GARBAGE_STRIP_HEIGHT if self.has_garbage_strip else 0
        return self.tile_rows * self.block_size + strip

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def buffer_length(self) -> int:
        return self.width * self.height

    def tile_top(self, y: int) -> int:
        """Top pixel row of board row ``y``; row 0 is drawn lowest, -1 is garbage."""
        return (self.board_rows - y - 1) * self.block_size
