"""GIF output provider."""

from typing import Iterator

from PIL import GifImagePlugin, Image

from .base import OutputProvider

GIF_TRAILER = b";"
# Keep each frame in place for the next one to draw over.
DISPOSAL_NONE = 1


class GifOutputProvider(OutputProvider):
    """
    Output provider for GIF format.

    Every frame is written as a full-canvas image at offset (0, 0) that
    indexes the global colour table, one frame per input image with repeats
    included. The stream is assembled block by block from Pillow's header and
    frame encoders.
    """

    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        frame_list = list(frames)
        if not frame_list:
            return b""

        first = frame_list[0]
        size = first.size
        header, _ = GifImagePlugin.getheader(
            first, info={"loop": 0, "duration": frame_duration}
        )
        blocks = list(header)
        for frame in frame_list:
            if frame.size != size or frame.mode != "P":
                raise ValueError(
                    f"GIF frames must be {size[0]}x{size[1]} palette images, "
                    f"got {frame.mode} {frame.size[0]}x{frame.size[1]}"
                )
            blocks.extend(
                GifImagePlugin.getdata(
                    frame,
                    offset=(0, 0),
                    duration=frame_duration,
                    disposal=DISPOSAL_NONE,
                )
            )
        blocks.append(GIF_TRAILER)
        return b"".join(blocks)
