"""Base-64 value stream underlying fumen data."""

from .errors import FumenError

ENCODE_TABLE = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_DECODE_TABLE = {char: index for index, char in enumerate(ENCODE_TABLE)}
RADIX = len(ENCODE_TABLE)


class ValueReader:
    """Reads little-endian multi-character values from fumen body text."""

    def __init__(self, body: str):
        try:
            self._values = [_DECODE_TABLE[char] for char in body]
        except KeyError as e:
            raise FumenError(f"Invalid character in fumen data: {e.args[0]!r}") from None
        self._position = 0

    def poll(self, count: int) -> int:
        """Consume ``count`` characters and return their combined value."""
        end = self._position + count
        if end > len(self._values):
            raise FumenError("Fumen data ended unexpectedly")
        value = 0
        for digit in reversed(self._values[self._position:end]):
            value = value * RADIX + digit
        self._position = end
        return value

    def is_empty(self) -> bool:
        return self._position >= len(self._values)
