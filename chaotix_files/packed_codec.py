"""
Packed ("compressed") sprite art.

Header:
    0x00  int16 LE  size of the unpacked art (without trailing padding)
    0x02  uint8     compression marker (0x42)
    0x03  uint8     base X (left edge, signed byte)
    0x04  uint8     bit count for X fields
    0x05  uint8     base Y (top edge, signed byte)
    0x06  uint8     bit count for Y fields
    0x07  uint8     base palette color index
    0x08  uint8     bit count for palette color entries

The bitstream that follows stores the same rows as the unpacked format,
with every coordinate relative to the base X/Y and every field squeezed to
its category's bit count: width, height, then per row start X, end X
(stop when equal), Y offset and the row's pixels. The stream is flushed to
a whole byte and the art padded to an even length.
"""

from dataclasses import dataclass, field
from typing import List

from data import (
    DEBUG,
    STRICT_ROWS,
    PACKED_ALIGNMENT,
    read_uint8,
    write_int16,
    write_uint16,
    write_uint8,
    write_y_word,
    pad_to_alignment,
)
from .bit_widths import FieldKind, PackedField, select_bit_widths
from .bitstream import BitReader, BitWriter
from .constants import (
    PackedFormat,
    UnpackedFormat,
    MIN_BIT_WIDTH,
    MAX_BIT_WIDTH,
)
from .errors import FormatError, MalformedRowError, SpriteFormatError
from .row_codec import ensure_available, iter_row_runs, read_unpacked_header


@dataclass
class PackedLayout:
    """Fields of an unpacked art block, rebased for the packed bitstream."""

    base_x: int
    base_y: int
    size: int
    fields: List[PackedField] = field(default_factory=list)


def _sign_extend_byte(value: int) -> int:
    return value - 0x100 if value & 0x80 else value


def is_packed(data: bytes, offset: int = 0) -> bool:
    """Check the compression marker byte of a sprite art block."""
    marker_pos = offset + PackedFormat.MARKER_OFFSET
    return len(data) > marker_pos and data[marker_pos] == PackedFormat.MARKER


def collect_packed_fields(
    unpacked: bytes, offset: int = 0, strict_rows: bool = STRICT_ROWS
) -> PackedLayout:
    """Read unpacked art into the ordered list of tagged packed fields."""
    header = read_unpacked_header(unpacked, offset)

    if header.marker != UnpackedFormat.MARKER:
        print(
            f"[WARNING] Compression marker is 0x{header.marker:02X}, not 0x00. "
            f"Are you sure this is unpacked art?"
        )

    base_x = header.initial_x & 0xFF
    base_y = header.initial_y & 0xFF

    layout = PackedLayout(base_x=base_x, base_y=base_y, size=UnpackedFormat.HEADER_LEN)
    fields = layout.fields

    fields.append((FieldKind.X, (header.final_x - base_x) & 0xFF))
    fields.append((FieldKind.Y, (header.final_y - base_y) & 0xFF))

    for run in iter_row_runs(unpacked, offset, strict_rows):
        fields.append((FieldKind.X, (run.start_x - base_x) & 0xFF))
        fields.append((FieldKind.X, (run.end_x - base_x) & 0xFF))

        if run.is_sentinel():
            layout.size += UnpackedFormat.TERMINATOR_LEN
            break

        fields.append((FieldKind.Y, (run.y - base_y) & 0xFF))
        fields.extend((FieldKind.COLOR, pixel) for pixel in run.pixels)
        layout.size += UnpackedFormat.ROW_HEADER_LEN + len(run.pixels)

    return layout


def pack_sprite_art(unpacked: bytes, strict_rows: bool = STRICT_ROWS) -> bytes:
    """Convert unpacked art into packed art."""
    layout = collect_packed_fields(unpacked, 0, strict_rows)
    bits = select_bit_widths(layout.fields)

    if DEBUG:
        print(
            f"[DEBUG] Selected bit counts: x={bits[FieldKind.X]}, "
            f"y={bits[FieldKind.Y]}, color={bits[FieldKind.COLOR]}"
        )

    result = bytearray()
    result.extend(write_uint16(layout.size & 0xFFFF))
    result.extend(write_uint8(PackedFormat.MARKER))
    result.extend(write_uint8(layout.base_x))
    result.extend(write_uint8(bits[FieldKind.X]))
    result.extend(write_uint8(layout.base_y))
    result.extend(write_uint8(bits[FieldKind.Y]))
    result.extend(write_uint8(PackedFormat.BASE_PALETTE_INDEX))
    result.extend(write_uint8(bits[FieldKind.COLOR]))

    writer = BitWriter()
    for kind, value in layout.fields:
        writer.write(bits[kind], value)
    writer.flush()
    result.extend(writer.getvalue())

    pad_to_alignment(result, PACKED_ALIGNMENT)

    return bytes(result)


def unpack_sprite_art(
    packed: bytes, offset: int = 0, strict_rows: bool = STRICT_ROWS
) -> bytes:
    """Convert packed art starting at offset back into unpacked art.

    The result carries no trailing alignment padding.
    """
    ensure_available(packed, offset, PackedFormat.HEADER_LEN)

    marker = read_uint8(packed, offset + 2)
    if marker != PackedFormat.MARKER:
        raise FormatError(PackedFormat.MARKER, marker)

    left = read_uint8(packed, offset + 3)
    bits_x = read_uint8(packed, offset + 4)
    top = read_uint8(packed, offset + 5)
    bits_y = read_uint8(packed, offset + 6)
    palette_index = read_uint8(packed, offset + 7)
    bits_color = read_uint8(packed, offset + 8)

    for name, width in (("X", bits_x), ("Y", bits_y), ("color", bits_color)):
        if not MIN_BIT_WIDTH <= width <= MAX_BIT_WIDTH:
            raise SpriteFormatError(f"Invalid {name} bit count {width}")

    reader = BitReader(packed, offset + PackedFormat.HEADER_LEN)

    width = reader.read(bits_x)
    height = reader.read(bits_y)

    result = bytearray()
    result.extend(write_int16(_sign_extend_byte(left)))
    result.extend(write_uint8(UnpackedFormat.MARKER))
    result.extend(write_uint8((left + width) & 0xFF))
    result.extend(write_y_word(top))
    result.extend(write_y_word(top + height))

    rows = 0
    while True:
        start_x = reader.read(bits_x)
        end_x = reader.read(bits_x)

        result.extend(write_uint8((start_x + left) & 0xFF))
        result.extend(write_uint8((end_x + left) & 0xFF))

        if start_x == end_x:
            break

        y = reader.read(bits_y)
        result.extend(write_y_word(y + top))

        count = end_x - start_x
        if count < 0:
            if strict_rows:
                raise MalformedRowError(
                    _sign_extend_byte((start_x + left) & 0xFF),
                    _sign_extend_byte((end_x + left) & 0xFF),
                    _sign_extend_byte((y + top) & 0xFF),
                )
            count = 0

        for _ in range(count):
            result.append((reader.read(bits_color) + palette_index) & 0xFF)

        rows += 1

    if DEBUG:
        print(f"[DEBUG] Unpacked {rows} row(s) into {len(result)} bytes")

    return bytes(result)
