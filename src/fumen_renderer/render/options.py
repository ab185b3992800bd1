"""Render option strings such as ``speed=2.0``."""

import math
import re
from dataclasses import dataclass

from ..constants import DEFAULT_SPEED, MAX_FRAME_DELAY, MIN_FRAME_DELAY

_OPTION_PATTERN = re.compile(r"([A-Za-z_]\w*)=(\S+)")


@dataclass(frozen=True)
class RenderOptions:
    """Options a caller may append to a render request."""

    speed: float = DEFAULT_SPEED


def parse_render_options(text: str | None) -> RenderOptions:
    """
    Parse ``key=value`` tokens out of free text.

    Only ``speed`` is interpreted. Unknown keys are ignored, and a speed that
    is not a positive finite number falls back to the default, so option
    strings written for newer versions never break a render.
    """
    speed = DEFAULT_SPEED
    for key, value in _OPTION_PATTERN.findall(text or ""):
        if key.lower() != "speed":
            continue
        try:
            parsed = float(value)
        except ValueError:
            continue
        if math.isfinite(parsed) and parsed > 0:
            speed = parsed
    return RenderOptions(speed=speed)


def frame_delay(options: RenderOptions, base_delay: int) -> int:
    """Per-frame delay in hundredths of a second for the given speed."""
    delay = math.floor(base_delay / options.speed + 0.5)
    return max(MIN_FRAME_DELAY, min(MAX_FRAME_DELAY, delay))
