"""Raster animation encoder: canvas geometry, rasterization and rendering."""

from .config import RenderConfig
from .errors import EncodingError, GeometryError, RenderError
from .geometry import CanvasGeometry
from .options import RenderOptions, frame_delay, parse_render_options
from .raster import GARBAGE_ROW, fill_tile, new_buffer, rasterize_page
from .raster_animation import frame_from_buffer, generate_raster_frames
from .renderer import render, render_async

__all__ = [
    "CanvasGeometry",
    "EncodingError",
    "GARBAGE_ROW",
    "GeometryError",
    "RenderConfig",
    "RenderError",
    "RenderOptions",
    "fill_tile",
    "frame_delay",
    "frame_from_buffer",
    "generate_raster_frames",
    "new_buffer",
    "parse_render_options",
    "rasterize_page",
    "render",
    "render_async",
]
