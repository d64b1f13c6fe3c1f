from pathlib import Path
from typing import Tuple

from chaotix_files import Sprite, is_packed, load_sprite_file
from data import read_file_to_bytes
from external_files import read_external_files

SPRITE_FILE_SUFFIX = ".bin"


def validate_external_input(folder_or_sprite_path: Path) -> Tuple[Sprite, bool]:
    """Load a sprite from an art file or an external files folder.

    Args:
        folder_or_sprite_path: Path to folder (with external files) or art file

    Returns:
        Tuple of (sprite, packed) where packed is the art format of the source
    """
    print("[VALIDATING] Loading sprite...\n")

    if folder_or_sprite_path.is_file():
        rawdata = read_file_to_bytes(folder_or_sprite_path)
        packed = is_packed(rawdata)
        sprite = load_sprite_file(rawdata, packed)
        art_format = "packed" if packed else "unpacked"
        print(f"[OK] Loaded {art_format} sprite art: {folder_or_sprite_path}\n")
    else:
        sprite, packed = read_external_files(folder_or_sprite_path)
        print("[OK] Loaded sprite from external files\n")

    return sprite, packed
