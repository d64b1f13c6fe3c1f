"""
Bitstream reader/writer for the packed art format.

Fields are 1-8 bits wide and are stored most significant bit first. The
game's decoder bit-reverses every byte before shifting bits out of its low
end, and the encoder mirrors that, so both classes keep the same
reversed-register layout to stay byte compatible.
"""

from .constants import MIN_BIT_WIDTH, MAX_BIT_WIDTH
from .errors import TruncatedInputError

_REVERSED_BITS = bytes(int(f"{b:08b}"[::-1], 2) for b in range(256))


def reverse_bits(value: int) -> int:
    """Reverse the bit order of a byte (bit 0 <-> bit 7, ...)."""
    return _REVERSED_BITS[value & 0xFF]


def _check_width(width: int) -> None:
    if not MIN_BIT_WIDTH <= width <= MAX_BIT_WIDTH:
        raise ValueError(
            f"Bit width must be in range [{MIN_BIT_WIDTH}, {MAX_BIT_WIDTH}], got {width}"
        )


class BitReader:
    """Reads fixed width unsigned fields from a byte sequence."""

    def __init__(self, data: bytes, offset: int = 0):
        self.data = data
        self.offset = offset
        self._register = 0
        self._remaining = 0

    def read(self, width: int) -> int:
        _check_width(width)

        value = 0
        shift = width
        while shift > 0:
            shift -= 1
            if self._remaining == 0:
                if self.offset >= len(self.data):
                    raise TruncatedInputError(self.offset)
                self._register = reverse_bits(self.data[self.offset])
                self.offset += 1
                self._remaining = 8

            value |= (self._register & 1) << shift
            self._register >>= 1
            self._remaining -= 1

        return value


class BitWriter:
    """Accumulates fixed width unsigned fields into bytes."""

    def __init__(self):
        self.buffer = bytearray()
        self._register = 0
        self._remaining = 8

    def write(self, width: int, value: int) -> None:
        _check_width(width)

        bits = reverse_bits(value) >> (8 - width)
        for _ in range(width):
            if self._remaining == 0:
                self.buffer.append(self._register)
                self._register = 0
                self._remaining = 8

            self._register = ((self._register << 1) | (bits & 1)) & 0xFF
            bits >>= 1
            self._remaining -= 1

    def flush(self) -> None:
        """Zero-fill the current byte and emit it.

        Same result as the format's trailing write of (9 - remaining) zero
        bits: the partial byte is completed and the extra bit that would
        start a new byte is never emitted.
        """
        if self._remaining == 8:
            return
        self.buffer.append((self._register << self._remaining) & 0xFF)
        self._register = 0
        self._remaining = 8

    def getvalue(self) -> bytes:
        return bytes(self.buffer)
