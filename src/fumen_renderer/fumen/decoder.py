"""Decoder for v115 fumen board data."""

import logging
import re
from dataclasses import dataclass

from ..board import BoardPage, PiecePlacement, PieceType, Rotation
from ..constants import BOARD_WIDTH, FUMEN_FIELD_HEIGHT
from .errors import FumenError
from .field import Field
from .values import ValueReader

logger = logging.getLogger(__name__)

FUMEN_PATTERN = re.compile(r"[vmd]115@[0-9A-Za-z+/?]+")
_PREFIX_PATTERN = re.compile(r"^[vmd]115@")
_ESCAPE_PATTERN = re.compile(r"%u([0-9A-Fa-f]{4})|%([0-9A-Fa-f]{2})")

FIELD_BLOCKS = (FUMEN_FIELD_HEIGHT + 1) * BOARD_WIDTH
UNCHANGED_FIELD = 8 * FIELD_BLOCKS + FIELD_BLOCKS - 1

COMMENT_TABLE = "".join(chr(code) for code in range(32, 127))
COMMENT_RADIX = len(COMMENT_TABLE) + 1
COMMENT_CHARS_PER_VALUE = 4

_ROTATIONS = (Rotation.SOUTH, Rotation.EAST, Rotation.NORTH, Rotation.WEST)

# Fumen anchors some orientations one cell away from the rotation centre.
_ANCHOR_SHIFTS: dict[tuple[PieceType, Rotation], tuple[int, int]] = {
    (PieceType.O, Rotation.WEST): (1, -1),
    (PieceType.O, Rotation.SOUTH): (1, 0),
    (PieceType.O, Rotation.NORTH): (0, -1),
    (PieceType.I, Rotation.SOUTH): (1, 0),
    (PieceType.I, Rotation.WEST): (0, -1),
    (PieceType.S, Rotation.NORTH): (0, -1),
    (PieceType.S, Rotation.EAST): (-1, 0),
    (PieceType.Z, Rotation.NORTH): (0, -1),
    (PieceType.Z, Rotation.WEST): (1, 0),
}


@dataclass(frozen=True)
class Action:
    """The per-page action word."""

    piece: PiecePlacement | None
    rise: bool
    mirror: bool
    color: bool
    comment: bool
    lock: bool


def find_fumen(text: str) -> re.Match[str] | None:
    """Locate fumen data anywhere in free text, such as a chat message or URL."""
    return FUMEN_PATTERN.search(text)


def split_message(text: str) -> tuple[str, str] | None:
    """
    Split a message into fumen data and the option text that follows it.

    Returns:
        ``(data, trailing_text)``, or None when the text holds no fumen data
    """
    match = find_fumen(text)
    if match is None:
        return None
    return match.group(0), text[match.end():].strip()


def decode_fumen(data: str) -> list[BoardPage]:
    """
    Decode fumen data into board pages.

    Args:
        data: Fumen text starting with its version prefix, e.g. ``v115@vhAAgH``

    Returns:
        One page per fumen page, each holding the field before its piece locks

    Raises:
        FumenError: If the data is malformed or not v115
    """
    data = data.strip()
    if not _PREFIX_PATTERN.match(data):
        raise FumenError(f"Unsupported fumen version: {data[:5]!r}")
    reader = ValueReader(data[5:].replace("?", ""))

    pages: list[BoardPage] = []
    field = Field()
    repeat_count = 0
    comment: str | None = None
    while not reader.is_empty():
        if repeat_count > 0:
            repeat_count -= 1
        else:
            field = field.copy()
            if _read_field_diff(reader, field):
                repeat_count = reader.poll(1)

        action = _decode_action(reader.poll(3))
        if action.comment:
            comment = _read_comment(reader)
        pages.append(field.to_page(action.piece, comment))

        if action.lock:
            field = field.copy()
            if action.piece is not None:
                field.put(action.piece)
            field.clear_lines()
            if action.rise:
                field.rise()
            if action.mirror:
                field.mirror()

    logger.debug("Decoded %d fumen pages", len(pages))
    return pages


def _read_field_diff(reader: ValueReader, field: Field) -> bool:
    """Apply one page's run-length field diff; True when nothing changed."""
    index = 0
    unchanged = False
    while index < FIELD_BLOCKS:
        value = reader.poll(2)
        if value == UNCHANGED_FIELD:
            unchanged = True
        delta = value // FIELD_BLOCKS - 8
        for _ in range(value % FIELD_BLOCKS + 1):
            if index >= FIELD_BLOCKS:
                raise FumenError("Field data overruns the playfield")
            if delta:
                x = index % BOARD_WIDTH
                y = FUMEN_FIELD_HEIGHT - index // BOARD_WIDTH - 1
                field.add(x, y, delta)
            index += 1
    return unchanged


def _decode_action(value: int) -> Action:
    piece_value = value % 8
    value //= 8
    rotation = _ROTATIONS[value % 4]
    value //= 4
    location = value % FIELD_BLOCKS
    value //= FIELD_BLOCKS
    flags = []
    for _ in range(5):
        flags.append(bool(value % 2))
        value //= 2
    rise, mirror, color, comment, unlocked = flags

    piece = None
    if piece_value:
        kind = PieceType(piece_value)
        dx, dy = _ANCHOR_SHIFTS.get((kind, rotation), (0, 0))
        x = location % BOARD_WIDTH + dx
        y = FUMEN_FIELD_HEIGHT - location // BOARD_WIDTH - 1 + dy
        piece = PiecePlacement(kind, rotation, x, y)
    return Action(piece, rise, mirror, color, comment, not unlocked)


def _read_comment(reader: ValueReader) -> str:
    length = reader.poll(2)
    chars: list[str] = []
    for _ in range((length + COMMENT_CHARS_PER_VALUE - 1) // COMMENT_CHARS_PER_VALUE):
        value = reader.poll(5)
        for _ in range(COMMENT_CHARS_PER_VALUE):
            code = value % COMMENT_RADIX
            if code >= len(COMMENT_TABLE):
                raise FumenError("Invalid character in fumen comment")
            chars.append(COMMENT_TABLE[code])
            value //= COMMENT_RADIX
    return unescape("".join(chars[:length]))


def unescape(text: str) -> str:
    """Undo the ``%XX`` / ``%uXXXX`` escaping fumen applies to comments."""
    return _ESCAPE_PATTERN.sub(lambda m: chr(int(m.group(1) or m.group(2), 16)), text)
