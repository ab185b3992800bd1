"""Raster (Pillow) animation frame generators built on top of page rasterization."""

from typing import Iterable, Iterator

from PIL import Image

from ..board import BoardPage
from .errors import EncodingError
from .geometry import CanvasGeometry
from .raster import rasterize_page


def frame_from_buffer(buffer: bytearray, geometry: CanvasGeometry, palette: bytes) -> Image.Image:
    """Wrap a rasterized pixel buffer as a palette image."""
    if len(buffer) != geometry.buffer_length:
        raise EncodingError(
            f"Frame buffer holds {len(buffer)} pixels, canvas needs {geometry.buffer_length}"
        )
    try:
        frame = Image.frombytes("P", geometry.size, bytes(buffer))
        frame.putpalette(palette)
    except ValueError as e:
        raise EncodingError(f"Could not build frame: {e}") from e
    return frame


def generate_raster_frames(
    pages: Iterable[BoardPage], geometry: CanvasGeometry, palette: bytes
) -> Iterator[Image.Image]:
    """Render raster frame payloads for each page, in order."""
    for page in pages:
        yield frame_from_buffer(rasterize_page(page, geometry), geometry, palette)
