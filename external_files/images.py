"""
Indexed PNG export and import for sprite pixel buffers.
"""

import numpy as np
from pathlib import Path
from PIL import Image
from chaotix_files import Sprite


def export_sprite_image(sprite: Sprite, img_path: Path, palette: np.ndarray) -> None:
    """Save the sprite's pixel buffer as an indexed PNG.

    Args:
        sprite: Sprite with a non-empty image
        img_path: Output PNG path
        palette: Flattened RGB palette; may be empty
    """
    if sprite.is_empty() or sprite.width == 0 or sprite.height == 0:
        raise ValueError("Cannot export a sprite with no pixels.")

    img = Image.fromarray(np.ascontiguousarray(sprite.image, dtype=np.uint8))

    if palette.size > 0:
        img.putpalette(palette.tolist())
    else:
        img.putpalette([0, 0, 0])

    # Always 8-bit, a short palette would otherwise shrink the stored indices
    img.save(img_path, "PNG", bits=8)


def import_sprite_image(img_path: Path) -> np.ndarray:
    """Load an indexed PNG as a pixel buffer.

    Returns:
        np.uint8 array shaped (height, width) of palette indices
    """
    with Image.open(img_path) as img:
        if img.mode != "P":
            img = img.convert("P")

        return np.array(img, dtype=np.uint8)
