"""Terminal previews of board pages."""

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from .board import BoardPage, CellColor, page_extent, piece_cells
from .constants import BOARD_WIDTH, DEFAULT_PALETTE
from .render import CanvasGeometry, RenderOptions

_CELL = "  "


def _style(index: int, palette: Sequence[tuple[int, int, int]]) -> str:
    r, g, b = palette[index]
    return f"on #{r:02x}{g:02x}{b:02x}"


class BoardConsolePrinter:
    """Prints page statistics and a coloured preview of a board."""

    def __init__(
        self,
        console: Console | None = None,
        palette: Sequence[tuple[int, int, int]] = DEFAULT_PALETTE,
    ):
        self.console = console or Console()
        self.palette = palette

    def display_stats(
        self, pages: Sequence[BoardPage], geometry: CanvasGeometry, options: RenderOptions
    ) -> None:
        """Print page count, canvas size and playback speed."""
        self.console.print(f"[bold]Pages:[/bold] {len(pages)}")
        self.console.print(f"[bold]Canvas:[/bold] {geometry.width}x{geometry.height}px")
        if geometry.has_garbage_strip:
            self.console.print("[bold]Garbage strip:[/bold] yes")
        self.console.print(f"[bold]Speed:[/bold] {options.speed:g}x")
        comment = pages[0].comment if pages else None
        if comment:
            self.console.print(f"[bold]Comment:[/bold] {escape(comment)}")

    def display_board(self, page: BoardPage) -> None:
        """Print the page as coloured blocks, top row first, active piece included."""
        cells = {(x, y): color for x, y, color in page.filled_cells()}
        for x, y, color in piece_cells(page):
            cells[(x, y)] = color

        for y in range(page_extent(page), -1, -1):
            line = Text()
            for x in range(BOARD_WIDTH):
                line.append(_CELL, style=_style(cells.get((x, y), CellColor.EMPTY), self.palette))
            self.console.print(line)

        if any(page.garbage_row):
            line = Text()
            for color in page.garbage_row:
                line.append(_CELL, style=_style(color, self.palette))
            self.console.print(line)
