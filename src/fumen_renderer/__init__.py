"""Render Tetris board pages as animated indexed-colour images."""

from .animation_pipeline import decode_message, encode_animation, render_message
from .board import BoardPage, CellColor, PiecePlacement, PieceType, Rotation
from .fumen import FumenError, decode_fumen, find_fumen
from .render import (
    EncodingError,
    RenderConfig,
    RenderError,
    RenderOptions,
    parse_render_options,
    render,
    render_async,
)

__all__ = [
    "BoardPage",
    "CellColor",
    "EncodingError",
    "FumenError",
    "PiecePlacement",
    "PieceType",
    "RenderConfig",
    "RenderError",
    "RenderOptions",
    "Rotation",
    "decode_fumen",
    "decode_message",
    "encode_animation",
    "find_fumen",
    "parse_render_options",
    "render",
    "render_async",
    "render_message",
]
