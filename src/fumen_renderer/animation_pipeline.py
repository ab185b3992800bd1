"""Shared animation orchestration used by CLI and web app entry points."""

from typing import Sequence

from .board import BoardPage
from .fumen import decode_fumen, split_message
from .output import resolve_output_provider
from .output.base import OutputProvider
from .render import RenderConfig, RenderOptions, render


def decode_message(text: str) -> tuple[list[BoardPage], str] | None:
    """
    Decode the fumen data in a message.

    Returns:
        The pages and the option text trailing the data, or None when the
        message holds no fumen data

    Raises:
        FumenError: If fumen data is present but cannot be decoded
    """
    found = split_message(text)
    if found is None:
        return None
    data, option_text = found
    return decode_fumen(data), option_text


def render_message(text: str, config: RenderConfig | None = None) -> bytes | None:
    """Render the fumen found in a message as a GIF, honouring trailing options."""
    decoded = decode_message(text)
    if decoded is None:
        return None
    pages, option_text = decoded
    return render(pages, option_text, config)


def encode_animation(
    pages: Sequence[BoardPage],
    output_path: str,
    *,
    options: str | RenderOptions | None = None,
    config: RenderConfig | None = None,
    provider: OutputProvider | None = None,
) -> bytes:
    """Encode animation bytes for the given pages, format chosen by output path."""
    target_provider = provider or resolve_output_provider(output_path)
    return render(pages, options, config, provider=target_provider)
