from pathlib import Path
from typing import List

from chaotix_files import Sprite, load_sprite_file, save_sprite_file
from data import SEPARATOR_LINE_LENGTH


def compose_sprite_files(
    sprite_paths: List[Path], output_path: Path, packed: bool = False, trim: bool = True
) -> Sprite:
    """Compose several sprite art files into one and save it.

    Later files are drawn over earlier ones where they overlap.

    Args:
        sprite_paths: Art files, packed or unpacked, in drawing order
        output_path: Destination art file
        packed: If True, write packed art
        trim: If True, crop transparent borders before saving

    Returns:
        The composed sprite
    """
    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[INFO] Composing {len(sprite_paths)} sprite(s)")
    print("=" * SEPARATOR_LINE_LENGTH)
    print()

    sprites = []
    for path in sprite_paths:
        sprite = load_sprite_file(path)
        print(f"[OK] Loaded {path.name}: {sprite.width}x{sprite.height} at ({sprite.x}, {sprite.y})")
        sprites.append(sprite)

    composed = Sprite.compose(sprites)
    if trim:
        composed = composed.trim()

    save_sprite_file(composed, output_path, packed)
    print(
        f"\n[OK] Composed sprite ({composed.width}x{composed.height} at "
        f"({composed.x}, {composed.y})) saved to: {output_path}"
    )

    return composed
