"""Board model: cells, pieces, pages and the extent adapter."""

from .adapter import has_garbage, page_extent, piece_cells, sequence_has_garbage
from .cells import EMPTY_ROW, CellColor, PieceType, Rotation
from .page import BoardPage
from .piece import PIECE_OFFSETS, PiecePlacement

__all__ = [
    "BoardPage",
    "CellColor",
    "EMPTY_ROW",
    "PIECE_OFFSETS",
    "PiecePlacement",
    "PieceType",
    "Rotation",
    "has_garbage",
    "page_extent",
    "piece_cells",
    "sequence_has_garbage",
]
