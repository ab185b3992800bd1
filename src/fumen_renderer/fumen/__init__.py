"""Fumen (v115) board data decoding."""

from .decoder import FUMEN_PATTERN, decode_fumen, find_fumen, split_message, unescape
from .errors import FumenError

__all__ = [
    "FUMEN_PATTERN",
    "FumenError",
    "decode_fumen",
    "find_fumen",
    "split_message",
    "unescape",
]
