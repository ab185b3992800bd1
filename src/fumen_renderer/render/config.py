"""Rendering configuration."""

import os
from dataclasses import dataclass

from ..constants import BASE_FRAME_DELAY, DEFAULT_BLOCK_SIZE, DEFAULT_PALETTE, PALETTE_SIZE

BLOCK_SIZE_ENV = "FUMEN_RENDERER_BLOCK_SIZE"
BASE_DELAY_ENV = "FUMEN_RENDERER_BASE_DELAY"


@dataclass(frozen=True)
class RenderConfig:
    """Block size, palette and timing shared by every frame of a render."""

    block_size: int = DEFAULT_BLOCK_SIZE
    palette: tuple[tuple[int, int, int], ...] = DEFAULT_PALETTE
    base_delay: int = BASE_FRAME_DELAY

    def __post_init__(self) -> None:
        if self.block_size < 1:
            raise ValueError(f"Block size must be positive, got {self.block_size}")
        if self.base_delay < 1:
            raise ValueError(f"Base delay must be positive, got {self.base_delay}")
        if len(self.palette) != PALETTE_SIZE:
            raise ValueError(
                f"Palette must have exactly {PALETTE_SIZE} colors, got {len(self.palette)}"
            )

    @classmethod
    def default(cls) -> "RenderConfig":
        return cls()

    @classmethod
    def from_env(cls) -> "RenderConfig":
        """
        Build a config from environment variables, falling back to defaults.

        Reads ``FUMEN_RENDERER_BLOCK_SIZE`` and ``FUMEN_RENDERER_BASE_DELAY``.

        Raises:
            ValueError: If a variable is set but is not a positive integer
        """
        return cls(
            block_size=_env_int(BLOCK_SIZE_ENV, DEFAULT_BLOCK_SIZE),
            base_delay=_env_int(BASE_DELAY_ENV, BASE_FRAME_DELAY),
        )

    @property
    def palette_bytes(self) -> bytes:
        """Flat RGB palette in the layout Pillow's ``putpalette`` expects."""
        return bytes(channel for color in self.palette for channel in color)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
