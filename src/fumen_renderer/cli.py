"""CLI interface for fumen-renderer."""

import dataclasses
import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .animation_pipeline import decode_message, encode_animation
from .board import BoardPage
from .console_printer import BoardConsolePrinter
from .fumen import FumenError
from .output import supported_output_formats
from .render import CanvasGeometry, RenderConfig, RenderError, parse_render_options

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()
DEFAULT_OUTPUT_PATH = "fumen.gif"


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    message: str = typer.Argument(
        None, help="Text containing fumen data (v115@...), or '-' to read stdin"
    ),
    out: str = typer.Option(
        DEFAULT_OUTPUT_PATH,
        "--output",
        "-o",
        help=f"Output file ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    options: str = typer.Option(
        None,
        "--options",
        help="Render options such as 'speed=2'; defaults to the text after the fumen data",
    ),
    block_size: int | None = typer.Option(
        None,
        "--block-size",
        min=1,
        help="Pixel size of one board cell",
    ),
    preview: bool = typer.Option(
        True,
        "--preview/--no-preview",
        help="Print the final board to the terminal",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """
    Render fumen board data as an animated image.

    Text after the fumen data is read as render options, the same way a chat
    message would carry them.

    Examples:
      fumen-renderer "v115@vhAAgH"

      fumen-renderer "v115@vhBVQJAAA speed=2" -o tspin.gif
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console)],
        )

    try:
        if message == "-":
            message = sys.stdin.read()
        if not message:
            raise CLIError("Fumen data is required")

        pages, trailing_options = _decode(message)
        render_options = parse_render_options(options if options is not None else trailing_options)
        config = _load_config(block_size)

        printer = BoardConsolePrinter(console, palette=config.palette)
        printer.display_stats(
            pages, CanvasGeometry.from_pages(pages, config.block_size), render_options
        )
        if preview:
            printer.display_board(pages[-1])

        _generate_output(pages, out, render_options, config)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _decode(message: str) -> tuple[list[BoardPage], str]:
    """Find and decode the fumen data in a message."""
    try:
        decoded = decode_message(message)
    except FumenError as e:
        raise CLIError(f"Invalid fumen data: {e}")
    if decoded is None:
        raise CLIError("No fumen data found (expected text containing v115@...)")
    if not decoded[0]:
        raise CLIError("Fumen data contains no pages")
    return decoded


def _load_config(block_size: int | None) -> RenderConfig:
    """Load render settings from the environment, then apply CLI overrides."""
    try:
        config = RenderConfig.from_env()
    except ValueError as e:
        raise CLIError(str(e))
    if block_size is not None:
        config = dataclasses.replace(config, block_size=block_size)
    return config


def _generate_output(pages, output_path: str, render_options, config: RenderConfig) -> None:
    """Render pages into the format named by the output path and save them."""
    ext = Path(output_path).suffix[1:].upper()
    console.print(f"\n[bold blue]Generating {ext} animation...[/bold blue]")
    try:
        encoded = encode_animation(
            pages, output_path, options=render_options, config=config
        )
    except ValueError as e:
        raise CLIError(str(e))
    except RenderError as e:
        raise CLIError(f"Failed to render animation: {e}")

    console.print(f"[bold blue]Saving to {output_path}...[/bold blue]")
    try:
        with open(output_path, "wb") as f:
            f.write(encoded)
    except OSError as e:
        raise CLIError(f"Failed to save file '{output_path}': {e}")
    console.print(f"[green]✓[/green] {ext} saved to {output_path}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
