"""
Exceptions raised while decoding or converting sprite art.

All of them derive from ValueError so callers that only care about
"bad input" can keep catching that.
"""


class SpriteFormatError(ValueError):
    """Base class for sprite art parsing errors."""


class FormatError(SpriteFormatError):
    """Packed art does not carry the expected compression marker."""

    def __init__(self, expected: int, found: int):
        self.expected = expected
        self.found = found
        super().__init__(
            f"Compression marker should be 0x{expected:02X} but found 0x{found:02X}"
        )


class TruncatedInputError(SpriteFormatError):
    """Input ended before a complete field could be read."""

    def __init__(self, offset: int, needed: int = 1):
        self.offset = offset
        self.needed = needed
        super().__init__(
            f"Unexpected end of data at offset 0x{offset:X} ({needed} more byte(s) needed)"
        )


class MalformedRowError(SpriteFormatError):
    """A row run is inconsistent with the sprite header."""

    def __init__(self, start_x: int, end_x: int, y: int, reason: str = ""):
        self.start_x = start_x
        self.end_x = end_x
        self.y = y
        if not reason:
            reason = f"row start {start_x} is more than row end {end_x}"
        super().__init__(f"Malformed row at y={y}: {reason}")
