"""Tests for output providers."""

from io import BytesIO

import pytest
from PIL import Image

from fumen_renderer.constants import DEFAULT_PALETTE
from fumen_renderer.output import (
    GifOutputProvider,
    WebPOutputProvider,
    media_type_for_output_format,
    output_path_for_format,
    resolve_output_provider,
    supported_output_formats,
)

PALETTE = bytes(channel for color in DEFAULT_PALETTE for channel in color)


def create_test_frame(index: int = 1) -> Image.Image:
    """Helper to create an indexed test frame filled with one palette entry."""
    img = Image.new("P", (10, 10), index)
    img.putpalette(PALETTE)
    return img


def test_gif_provider_encodes_frames():
    """GifOutputProvider should encode frames to GIF format."""
    provider = GifOutputProvider()
    frames = [create_test_frame(1), create_test_frame(4)]

    result = provider.encode(iter(frames), frame_duration=100)

    assert result.startswith(b"GIF89")
    image = Image.open(BytesIO(result))
    assert image.n_frames == 2
    assert image.getpixel((0, 0)) == 1


def test_gif_provider_keeps_palette_order():
    """GIF output must not reorder or trim the palette."""
    provider = GifOutputProvider()

    result = provider.encode(iter([create_test_frame(9)]), frame_duration=100)

    image = Image.open(BytesIO(result))
    assert bytes(image.getpalette()[:30]) == PALETTE
    assert image.getpixel((5, 5)) == 9


def test_gif_provider_keeps_repeated_frames():
    """Identical consecutive frames are each written out, never merged."""
    provider = GifOutputProvider()
    frames = [create_test_frame(1), create_test_frame(1), create_test_frame(4)]

    result = provider.encode(iter(frames), frame_duration=100)

    image = Image.open(BytesIO(result))
    assert image.n_frames == 3
    for index in range(3):
        image.seek(index)
        assert image.info["duration"] == 100


def test_gif_provider_rejects_mismatched_frames():
    """All frames must share the first frame's size."""
    small = Image.new("P", (5, 5), 1)
    small.putpalette(PALETTE)

    with pytest.raises(ValueError, match="10x10 palette images"):
        GifOutputProvider().encode(iter([create_test_frame(1), small]), frame_duration=100)


def test_gif_provider_empty_frames():
    """GifOutputProvider should handle empty frame list."""
    provider = GifOutputProvider()
    result = provider.encode(iter([]), frame_duration=100)

    # Empty result for empty frames
    assert result == b""


def test_webp_provider_encodes_frames():
    """WebPOutputProvider should encode indexed frames to WebP format."""
    provider = WebPOutputProvider()
    frames = [create_test_frame(1), create_test_frame(4)]

    result = provider.encode(iter(frames), frame_duration=100)

    # WebP files start with RIFF....WEBP
    assert result.startswith(b"RIFF")
    assert b"WEBP" in result


def test_webp_provider_empty_frames():
    """WebPOutputProvider should handle empty frame list."""
    provider = WebPOutputProvider()
    result = provider.encode(iter([]), frame_duration=100)

    assert result == b""


def test_resolve_gif_provider():
    """resolve_output_provider should return GifOutputProvider for .gif files."""
    provider = resolve_output_provider("output.gif")

    assert isinstance(provider, GifOutputProvider)


def test_resolve_webp_provider():
    """resolve_output_provider should return WebPOutputProvider for .webp files."""
    provider = resolve_output_provider("output.webp")

    assert isinstance(provider, WebPOutputProvider)


def test_resolve_unsupported_format():
    """resolve_output_provider should raise ValueError for unsupported formats."""
    with pytest.raises(ValueError, match="Unsupported output format"):
        resolve_output_provider("output.mp4")


def test_resolve_case_insensitive():
    """resolve_output_provider should handle uppercase extensions."""
    assert isinstance(resolve_output_provider("output.GIF"), GifOutputProvider)
    assert isinstance(resolve_output_provider("output.WEBP"), WebPOutputProvider)


def test_format_lookups():
    """Format names map to media types and synthetic paths."""
    assert supported_output_formats() == ("gif", "webp")
    assert media_type_for_output_format("GIF") == "image/gif"
    assert output_path_for_format("webp") == "fumen.webp"
    with pytest.raises(ValueError, match="Invalid format"):
        media_type_for_output_format("svg")
