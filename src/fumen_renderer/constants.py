"""Global constants for the application."""

# Board dimensions
BOARD_WIDTH = 10  # Columns on every board page
MAX_BOARD_HEIGHT = 40  # Tallest field a page may carry
FUMEN_FIELD_HEIGHT = 23  # Rows above the garbage row in v115 fumen data

# Rendering settings
DEFAULT_BLOCK_SIZE = 16  # Pixel edge length of one board cell
BASE_FRAME_DELAY = 50  # Hundredths of a second per frame at speed 1.0
MIN_FRAME_DELAY = 1  # Smallest delay a GIF frame may carry
MAX_FRAME_DELAY = 0xFFFF  # GIF delays are unsigned 16-bit
DEFAULT_SPEED = 1.0

# Garbage strip
GARBAGE_STRIP_HEIGHT = 2  # Pixels, independent of block size
GARBAGE_MARKER_INDEX = 9  # Palette index of the marker band

# Global palette, one RGB triple per palette index
DEFAULT_PALETTE: tuple[tuple[int, int, int], ...] = (
    (0x40, 0x40, 0x40),  # 0 background
    (0x00, 0xFF, 0xFF),  # 1 I
    (0xFF, 0x80, 0x00),  # 2 L
    (0xFF, 0xFF, 0x00),  # 3 O
    (0xFF, 0x00, 0x00),  # 4 Z
    (0x80, 0x00, 0xFF),  # 5 T
    (0x00, 0x20, 0xFF),  # 6 J
    (0x00, 0xFF, 0x00),  # 7 S
    (0x80, 0x80, 0x80),  # 8 gray
    (0x10, 0x10, 0x10),  # 9 garbage marker
)
PALETTE_SIZE = len(DEFAULT_PALETTE)
