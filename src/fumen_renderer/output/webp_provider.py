"""WebP output provider."""

from io import BytesIO
from typing import Iterator

from PIL import Image

from .base import OutputProvider


class WebPOutputProvider(OutputProvider):
    """Output provider for lossless animated WebP."""

    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        # WebP has no palette mode; expand indices to their RGB colours.
        frame_list = [frame.convert("RGB") for frame in frames]
        if not frame_list:
            return b""

        buffer = BytesIO()
        frame_list[0].save(
            buffer,
            format="webp",
            save_all=True,
            append_images=frame_list[1:],
            duration=frame_duration,
            loop=0,
            lossless=True,
            quality=100,
            method=4,
        )
        return buffer.getvalue()
