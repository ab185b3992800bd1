"""Tests for render option parsing and frame timing."""

from fumen_renderer.constants import BASE_FRAME_DELAY, MAX_FRAME_DELAY
from fumen_renderer.render import RenderOptions, frame_delay, parse_render_options


def test_defaults_without_options():
    """Missing option text means normal speed."""
    assert parse_render_options("") == RenderOptions(speed=1.0)
    assert parse_render_options(None) == RenderOptions(speed=1.0)


def test_speed_is_parsed():
    """A speed token sets the multiplier."""
    assert parse_render_options("speed=2.0").speed == 2.0
    assert parse_render_options("speed=0.5").speed == 0.5


def test_unknown_keys_are_ignored():
    """Tokens other than speed are skipped without error."""
    options = parse_render_options("color=red speed=3 loop=no")

    assert options.speed == 3.0


def test_malformed_speed_falls_back_to_default():
    """Unparseable or non-positive speeds are treated as absent."""
    for text in ("speed=foo", "speed=-1", "speed=0", "speed=nan", "speed=inf"):
        assert parse_render_options(text).speed == 1.0


def test_options_found_in_free_text():
    """Options may trail arbitrary message text."""
    assert parse_render_options("look at this speed=4 please").speed == 4.0


def test_speed_scales_delay():
    """Doubling the speed halves the delay."""
    delay = frame_delay(parse_render_options("speed=2.0"), BASE_FRAME_DELAY)

    assert delay == round(BASE_FRAME_DELAY / 2)


def test_unparseable_speed_matches_no_options():
    """speed=foo yields the same delay as no options at all."""
    default = frame_delay(parse_render_options(""), BASE_FRAME_DELAY)

    assert frame_delay(parse_render_options("speed=foo"), BASE_FRAME_DELAY) == default
    assert default == BASE_FRAME_DELAY


def test_delay_rounds_half_up():
    """Fractional delays round to the nearest hundredth, halves upward."""
    assert frame_delay(RenderOptions(speed=3.0), 50) == 17
    assert frame_delay(RenderOptions(speed=4.0), 50) == 13


def test_delay_is_clamped_to_gif_range():
    """Extreme speeds stay within what a GIF frame can store."""
    assert frame_delay(RenderOptions(speed=1000.0), 50) == 1
    assert frame_delay(RenderOptions(speed=0.0001), 50) == MAX_FRAME_DELAY
