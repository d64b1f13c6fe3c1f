"""
Chaotix sprite art module for loading, saving, packing and editing sprites.
"""

from .sprite_io import load_sprite, save_sprite, load_sprite_file, save_sprite_file
from .sprite import Sprite, Rect, compose_sprites
from .row_codec import (
    RowRun,
    UnpackedHeader,
    find_row_runs,
    encode_unpacked,
    decode_unpacked,
    read_unpacked_header,
    iter_row_runs,
)
from .packed_codec import (
    PackedLayout,
    is_packed,
    collect_packed_fields,
    pack_sprite_art,
    unpack_sprite_art,
)
from .bitstream import BitReader, BitWriter, reverse_bits
from .bit_widths import FieldKind, minimal_bit_width, select_bit_widths
from .errors import (
    SpriteFormatError,
    FormatError,
    TruncatedInputError,
    MalformedRowError,
)
from .constants import (
    PackedFormat,
    UnpackedFormat,
    TRANSPARENT_INDEX,
)

__all__ = [
    # IO functions
    "load_sprite",
    "save_sprite",
    "load_sprite_file",
    "save_sprite_file",
    # Sprite classes
    "Sprite",
    "Rect",
    "compose_sprites",
    # Unpacked art
    "RowRun",
    "UnpackedHeader",
    "find_row_runs",
    "encode_unpacked",
    "decode_unpacked",
    "read_unpacked_header",
    "iter_row_runs",
    # Packed art
    "PackedLayout",
    "is_packed",
    "collect_packed_fields",
    "pack_sprite_art",
    "unpack_sprite_art",
    # Bitstream
    "BitReader",
    "BitWriter",
    "reverse_bits",
    "FieldKind",
    "minimal_bit_width",
    "select_bit_widths",
    # Errors
    "SpriteFormatError",
    "FormatError",
    "TruncatedInputError",
    "MalformedRowError",
    # Constants
    "PackedFormat",
    "UnpackedFormat",
    "TRANSPARENT_INDEX",
]
