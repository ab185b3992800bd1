"""Render failures."""


class RenderError(Exception):
    """A render call failed; no output was produced."""


class GeometryError(RenderError):
    """A cell fell outside the canvas computed for the page sequence."""


class EncodingError(RenderError):
    """The image writer rejected a frame or could not finish the stream."""
