"""
Core configuration, constants, and utils
"""

from .config import (
    DEBUG,
    STRICT_ROWS,
    CURRENT_VERSION,
)

from .utils import (
    read_uint8,
    read_int8,
    read_int16,
    write_uint8,
    write_int8,
    write_int16,
    write_uint16,
    read_y_word,
    write_y_word,
    pad_to_alignment,
    read_file_to_bytes,
    write_bytes_to_file,
    string_value_to_int,
    validate_path_exists_and_is_dir,
    write_xml_file,
)

from .constants import (
    SEPARATOR_LINE_LENGTH,
    UNPACKED_ALIGNMENT,
    PACKED_ALIGNMENT,
)

__all__ = [
    # Config
    "DEBUG",
    "STRICT_ROWS",
    "CURRENT_VERSION",
    # Byte fields
    "read_uint8",
    "read_int8",
    "read_int16",
    "write_uint8",
    "write_int8",
    "write_int16",
    "write_uint16",
    "read_y_word",
    "write_y_word",
    "pad_to_alignment",
    # Files
    "read_file_to_bytes",
    "write_bytes_to_file",
    "string_value_to_int",
    "validate_path_exists_and_is_dir",
    "write_xml_file",
    # Constants
    "SEPARATOR_LINE_LENGTH",
    "UNPACKED_ALIGNMENT",
    "PACKED_ALIGNMENT",
]
