"""
Wrapper functions for reading and writing all external files (XML, palette, and image).
"""

from pathlib import Path
from typing import Optional, Tuple

import numpy as np

from chaotix_files import Sprite
from .constants import ExternalFiles
from .spriteinfo_xml import read_spriteinfo_xml, write_spriteinfo_xml
from .palette import read_palette, write_palette
from .images import export_sprite_image, import_sprite_image


def read_external_files(sprite_dir: Path) -> Tuple[Sprite, bool]:
    """Read all external files (XML, palette, and image) for a sprite.

    Args:
        sprite_dir: Directory containing sprite external files

    Returns:
        Tuple of (sprite, packed) where packed is the art format recorded in spriteinfo.xml
    """
    offset_x, offset_y, packed = read_spriteinfo_xml(
        sprite_dir / ExternalFiles.SPRITEINFO_FILE
    )

    img_path = sprite_dir / ExternalFiles.IMAGE_FILE
    if not img_path.exists():
        raise FileNotFoundError(f"{img_path.name} not found.")

    image = import_sprite_image(img_path)

    return Sprite(image, (offset_x, offset_y)), packed


def write_external_files(
    sprite: Sprite,
    output_dir: Path,
    packed: bool = False,
    palette: Optional[np.ndarray] = None,
) -> None:
    """Write all external files (XML, palette, and image) for a sprite.

    Args:
        sprite: Sprite to export
        output_dir: Output directory path
        packed: Art format to record for regeneration
        palette: Optional flattened RGB palette; the palette file is only written when given
    """
    if palette is None:
        palette = np.array([], dtype=np.uint8)

    output_dir.mkdir(parents=True, exist_ok=True)

    write_spriteinfo_xml(sprite, output_dir / ExternalFiles.SPRITEINFO_FILE, packed)

    if palette.size > 0:
        write_palette(palette, output_dir / ExternalFiles.PALETTE_FILE)

    img_path = output_dir / ExternalFiles.IMAGE_FILE
    export_sprite_image(sprite, img_path, palette)

    print(f"[OK] Sprite image saved to: {img_path}")
