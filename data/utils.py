import struct
import xml.etree.ElementTree as ET
from pathlib import Path

# Multi-byte sprite art fields are little-endian
_INT16 = struct.Struct("<h")
_UINT16 = struct.Struct("<H")


def read_uint8(data: bytes, offset: int) -> int:
    return data[offset]


def read_int8(data: bytes, offset: int) -> int:
    return struct.unpack_from("b", data, offset)[0]


def read_int16(data: bytes, offset: int) -> int:
    return _INT16.unpack_from(data, offset)[0]


def write_uint8(value: int) -> bytes:
    return struct.pack("B", value)


def write_int8(value: int) -> bytes:
    return struct.pack("b", value)


def write_int16(value: int) -> bytes:
    return _INT16.pack(value)


def write_uint16(value: int) -> bytes:
    return _UINT16.pack(value)


def read_y_word(data: bytes, offset: int) -> int:
    """Y coordinates sit in the high byte of a word, so only the first byte counts."""
    return read_int8(data, offset)


def write_y_word(value: int) -> bytes:
    return bytes([value & 0xFF, 0])


def pad_to_alignment(buffer: bytearray, alignment: int) -> None:
    """Append zero bytes until len(buffer) is a multiple of alignment."""
    remainder = len(buffer) % alignment
    if remainder:
        buffer.extend(bytes(alignment - remainder))


def read_file_to_bytes(filepath: Path) -> bytes:
    with open(filepath, "rb") as f:
        return f.read()


def write_bytes_to_file(filepath: Path, data: bytes) -> None:
    with open(filepath, "wb") as f:
        f.write(data)


def string_value_to_int(value: str) -> int:
    try:
        if value.strip().lower().lstrip("+-").startswith("0x"):
            return int(value, 16)
        return int(value)
    except ValueError as e:
        raise ValueError(f"Could not parse value '{value}': {e}")


def validate_path_exists_and_is_dir(path: Path, path_description: str = "Path") -> bool:
    if not path.exists():
        print(f"[ERROR] {path_description} does not exist: {path}\n")
        return False

    if not path.is_dir():
        print(f"[ERROR] Path is not a directory: {path}\n")
        return False

    return True


def write_xml_file(root: ET.Element, output_path: Path) -> None:
    tree = ET.ElementTree(root)
    ET.indent(tree, space="    ")
    tree.write(output_path, encoding="utf-8", xml_declaration=True)
