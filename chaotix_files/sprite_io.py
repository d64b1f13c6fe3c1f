"""
Sprite art I/O: loading and saving sprites as unpacked or packed art.
"""

from pathlib import Path
from typing import Optional, Union

from data import STRICT_ROWS, read_file_to_bytes, write_bytes_to_file
from .packed_codec import is_packed, pack_sprite_art, unpack_sprite_art
from .row_codec import decode_unpacked, encode_unpacked
from .sprite import Sprite


def load_sprite(
    data: bytes, offset: int = 0, packed: bool = False, strict_rows: bool = STRICT_ROWS
) -> Sprite:
    """
    Load a sprite from art bytes.

    Args:
        data: Raw bytes holding the sprite art
        offset: Position of the art within data
        packed: True if the art is in packed format
        strict_rows: Reject rows whose end X precedes their start X

    Returns:
        Sprite object
    """
    if packed:
        data = unpack_sprite_art(data, offset, strict_rows)
        offset = 0

    image, x, y = decode_unpacked(data, offset, strict_rows)
    return Sprite(image, (x, y))


def save_sprite(sprite: Sprite, packed: bool = False) -> bytes:
    """
    Convert a sprite to art bytes.

    Args:
        sprite: Sprite to convert
        packed: If True, return packed art, otherwise unpacked art

    Returns:
        Art bytes
    """
    if sprite.is_empty():
        raise ValueError("Cannot save an empty sprite.")

    unpacked = encode_unpacked(sprite.image, sprite.x, sprite.y)
    if packed:
        return pack_sprite_art(unpacked)
    return unpacked


def load_sprite_file(
    sprite_input: Union[Path, bytes],
    packed: Optional[bool] = None,
    strict_rows: bool = STRICT_ROWS,
) -> Sprite:
    """
    Load a sprite from an art file path or raw file bytes.

    Args:
        sprite_input: Either Path to the art file or its raw bytes
        packed: Art format; None detects it from the compression marker

    Returns:
        Sprite object
    """
    if isinstance(sprite_input, (bytes, bytearray)):
        rawdata = bytes(sprite_input)
    else:
        rawdata = read_file_to_bytes(sprite_input)

    if packed is None:
        packed = is_packed(rawdata)

    return load_sprite(rawdata, 0, packed, strict_rows)


def save_sprite_file(sprite: Sprite, output_path: Path, packed: bool = False) -> bytes:
    """
    Write a sprite to an art file.

    Args:
        sprite: Sprite to write
        output_path: Destination file path
        packed: If True, write packed art

    Returns:
        The bytes written
    """
    art_bytes = save_sprite(sprite, packed)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    write_bytes_to_file(output_path, art_bytes)

    return art_bytes
