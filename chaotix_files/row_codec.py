"""
Row-run ("unpacked") sprite art encoding and decoding.

Layout:
    0x00  int16 LE  initial X (left edge, always even)
    0x02  uint8     compression marker (0x00)
    0x03  int8      final X (inclusive)
    0x04  int8, 0   initial Y (high byte of a word)
    0x06  int8, 0   final Y (inclusive, high byte of a word)
    rows: int8 start X, int8 end X, int8 Y, 0, (end X - start X) pixel bytes
    terminator: a row with start X == end X (written as a zero word),
    then zero padding to a multiple of 4 bytes.

Runs are rounded to even columns in world coordinates. For a sprite at an
odd X this gives different bytes from tools that round image-local columns,
but every pixel keeps its world position.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from data import (
    DEBUG,
    STRICT_ROWS,
    UNPACKED_ALIGNMENT,
    read_int16,
    read_int8,
    read_uint8,
    write_int16,
    write_int8,
    write_uint8,
    read_y_word,
    write_y_word,
    pad_to_alignment,
)
from .constants import UnpackedFormat
from .errors import MalformedRowError, SpriteFormatError, TruncatedInputError
from .pixel_buffer import new_buffer


@dataclass
class RowRun:
    """Horizontal span of one scanline, in sprite world coordinates."""

    start_x: int
    end_x: int
    y: int
    pixels: bytes = b""

    def is_sentinel(self) -> bool:
        return self.start_x == self.end_x


@dataclass
class UnpackedHeader:
    """Sprite bounds as stored in the unpacked header. Final values are inclusive."""

    initial_x: int
    marker: int
    final_x: int
    initial_y: int
    final_y: int

    @property
    def width(self) -> int:
        return self.final_x - self.initial_x + 1

    @property
    def height(self) -> int:
        return self.final_y - self.initial_y + 1


def ensure_available(data: bytes, offset: int, count: int) -> None:
    available = len(data) - offset
    if available < count:
        raise TruncatedInputError(offset, count - max(available, 0))


def _check_signed_byte(value: int, name: str) -> None:
    if not -128 <= value <= 127:
        raise ValueError(f"{name} {value} does not fit in a signed byte")


def find_row_runs(image: np.ndarray, x: int, y: int) -> List[RowRun]:
    """Collect one even-aligned run per scanline that has a visible pixel.

    Runs start on an even world column and have an even length; columns
    added by that rounding that fall outside the image are transparent.
    """
    height, width = image.shape
    runs = []

    for row_idx in range(height):
        row = image[row_idx]
        used = np.flatnonzero(row)
        if used.size == 0:
            continue

        first = x + int(used[0])
        last = x + int(used[-1]) + 1

        start = first & ~1
        end = last if (last - start) % 2 == 0 else last + 1

        run = np.zeros(end - start, dtype=np.uint8)
        lo, hi = max(start, x), min(end, x + width)
        run[lo - start : hi - start] = row[lo - x : hi - x]

        runs.append(RowRun(start, end, y + row_idx, run.tobytes()))

    return runs


def encode_unpacked(image: np.ndarray, x: int, y: int) -> bytes:
    """Encode a pixel buffer placed at (x, y) into unpacked art bytes."""
    height, width = image.shape

    left = x & ~1
    right = x + width
    if right & 1:
        right += 1
    top = y
    bottom = y + height

    _check_signed_byte(left, "Left edge")
    _check_signed_byte(right, "Right edge")
    _check_signed_byte(top, "Top edge")
    _check_signed_byte(bottom - 1, "Bottom edge")

    result = bytearray()
    result.extend(write_int16(left))
    result.extend(write_uint8(UnpackedFormat.MARKER))
    result.extend(write_int8(right - 1))
    result.extend(write_y_word(top))
    result.extend(write_y_word(bottom - 1))

    runs = find_row_runs(image, x, y)
    for run in runs:
        result.extend(write_int8(run.start_x))
        result.extend(write_int8(run.end_x))
        result.extend(write_y_word(run.y))
        result.extend(run.pixels)

    result.extend(write_int16(0))

    pad_to_alignment(result, UNPACKED_ALIGNMENT)

    if DEBUG:
        print(
            f"[DEBUG] Encoded {width}x{height} sprite at ({x}, {y}): "
            f"{len(runs)} row(s), {len(result)} bytes"
        )

    return bytes(result)


def read_unpacked_header(data: bytes, offset: int = 0) -> UnpackedHeader:
    ensure_available(data, offset, UnpackedFormat.HEADER_LEN)
    return UnpackedHeader(
        initial_x=read_int16(data, offset),
        marker=read_uint8(data, offset + 2),
        final_x=read_int8(data, offset + 3),
        initial_y=read_y_word(data, offset + 4),
        final_y=read_y_word(data, offset + 6),
    )


def iter_row_runs(
    data: bytes, offset: int = 0, strict_rows: bool = STRICT_ROWS
) -> Iterator[RowRun]:
    """Yield the rows following an unpacked header.

    The terminating sentinel row (start X == end X) is yielded last.

    A row whose end X precedes its start X raises MalformedRowError when
    strict_rows is set; otherwise it is yielded with no pixels.
    """
    pos = offset + UnpackedFormat.HEADER_LEN

    while True:
        ensure_available(data, pos, 2)
        start_x = read_int8(data, pos)
        end_x = read_int8(data, pos + 1)
        pos += 2

        if start_x == end_x:
            yield RowRun(start_x, end_x, 0)
            return

        ensure_available(data, pos, 2)
        row_y = read_y_word(data, pos)
        pos += 2

        count = end_x - start_x
        if count < 0:
            if strict_rows:
                raise MalformedRowError(start_x, end_x, row_y)
            yield RowRun(start_x, end_x, row_y)
            continue

        ensure_available(data, pos, count)
        pixels = bytes(data[pos : pos + count])
        pos += count

        yield RowRun(start_x, end_x, row_y, pixels)


def decode_unpacked(
    data: bytes, offset: int = 0, strict_rows: bool = STRICT_ROWS
) -> Tuple[np.ndarray, int, int]:
    """Decode unpacked art bytes into (pixel buffer, x, y)."""
    header = read_unpacked_header(data, offset)

    if header.width < 0 or header.height < 0:
        raise SpriteFormatError(
            f"Invalid sprite bounds: X {header.initial_x}..{header.final_x}, "
            f"Y {header.initial_y}..{header.final_y}"
        )

    image = new_buffer(header.width, header.height)

    for run in iter_row_runs(data, offset, strict_rows):
        if run.is_sentinel():
            break

        count = len(run.pixels)
        if count == 0:
            continue

        local_x = run.start_x - header.initial_x
        local_y = run.y - header.initial_y
        if (
            local_x < 0
            or local_y < 0
            or local_y >= header.height
            or local_x + count > header.width
        ):
            raise MalformedRowError(
                run.start_x, run.end_x, run.y, reason="row lies outside sprite bounds"
            )

        image[local_y, local_x : local_x + count] = np.frombuffer(
            run.pixels, dtype=np.uint8
        )

    return image, header.initial_x, header.initial_y
