"""Fumen decoding errors."""


class FumenError(ValueError):
    """Fumen data is malformed, truncated or of an unsupported version."""
