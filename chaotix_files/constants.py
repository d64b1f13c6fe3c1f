"""
Chaotix sprite art format constants.
"""

TRANSPARENT_INDEX = 0


class UnpackedFormat:
    HEADER_LEN = 8
    ROW_HEADER_LEN = 4
    MARKER = 0x00
    TERMINATOR_LEN = 2


class PackedFormat:
    HEADER_LEN = 9
    MARKER = 0x42
    MARKER_OFFSET = 2
    BASE_PALETTE_INDEX = 0


MIN_BIT_WIDTH = 1
MAX_BIT_WIDTH = 8
