"""Board page sequence to animated image rendering."""

import asyncio
import logging
import struct
from typing import Iterable

from ..board import BoardPage
from ..output import GifOutputProvider, OutputProvider
from .config import RenderConfig
from .errors import EncodingError, RenderError
from .geometry import CanvasGeometry
from .options import RenderOptions, frame_delay, parse_render_options
from .raster_animation import generate_raster_frames

logger = logging.getLogger(__name__)


def render(
    pages: Iterable[BoardPage],
    options: str | RenderOptions | None = None,
    config: RenderConfig | None = None,
    provider: OutputProvider | None = None,
) -> bytes:
    """
    Render a page sequence into one animated image.

    Every frame shares a single canvas sized for the tallest page, and the
    garbage strip is reserved on every frame as soon as one page needs it.

    Args:
        pages: Board pages, one frame each, in playback order
        options: Option text such as ``"speed=2"`` or parsed options
        config: Block size, palette and base delay; defaults when omitted
        provider: Output format; GIF when omitted

    Returns:
        The encoded animation

    Raises:
        RenderError: If there is nothing to render or a cell is off-canvas
        EncodingError: If the image writer rejects the frames
    """
    config = config or RenderConfig.default()
    if not isinstance(options, RenderOptions):
        options = parse_render_options(options)
    page_list = list(pages)
    if not page_list:
        raise RenderError("Cannot render an empty page sequence")

    geometry = CanvasGeometry.from_pages(page_list, config.block_size)
    delay = frame_delay(options, config.base_delay)
    logger.debug(
        "Rendering %d pages on a %dx%d canvas (garbage strip: %s, delay: %d)",
        len(page_list),
        geometry.width,
        geometry.height,
        geometry.has_garbage_strip,
        delay,
    )

    target_provider = provider or GifOutputProvider()
    frames = generate_raster_frames(page_list, geometry, config.palette_bytes)
    try:
        # Pillow takes milliseconds; GIF stores hundredths of a second.
        encoded = target_provider.encode(frames, frame_duration=delay * 10)
    except (ValueError, OSError, struct.error) as e:
        raise EncodingError(f"Failed to encode animation: {e}") from e

    if not encoded:
        raise EncodingError("Image writer produced no output")
    logger.debug("Encoded %d bytes", len(encoded))
    return encoded


async def render_async(
    pages: Iterable[BoardPage],
    options: str | RenderOptions | None = None,
    config: RenderConfig | None = None,
    provider: OutputProvider | None = None,
) -> bytes:
    """Run :func:`render` on a worker thread so the event loop stays responsive."""
    return await asyncio.to_thread(render, list(pages), options, config, provider)
