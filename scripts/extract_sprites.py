#!/usr/bin/env python3
"""
Extract sprite art file(s) to external files.

Usage:
    python scripts/extract_sprites.py <sprite.bin>                      # Single art file
    python scripts/extract_sprites.py <a.bin> <b.bin>                    # Multiple art files
    python scripts/extract_sprites.py <folder>                          # All .bin files in folder
    python scripts/extract_sprites.py <sprite.bin> --palette art.pal    # Colorize the PNG
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from converters import (
    sprite_transform_process_single,
    sprite_transform_process_multiple,
    SPRITE_FILE_SUFFIX,
)
from external_files import read_palette


def main():
    parser = argparse.ArgumentParser(
        description="Extract sprite art file(s) to external files"
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Sprite art file(s) or folder containing art files",
    )
    parser.add_argument(
        "--palette",
        type=Path,
        default=None,
        help="JASC-PAL palette applied to the exported image",
    )

    args = parser.parse_args()

    palette = None
    if args.palette is not None:
        try:
            palette = read_palette(args.palette)
        except (OSError, ValueError) as e:
            print(f"[ERROR] Could not read palette {args.palette}: {e}")
            sys.exit(1)

    for path_str in args.paths:
        input_path = Path(path_str).resolve()

        if not input_path.exists():
            print(f"[ERROR] Path does not exist: {input_path}")
            continue

        if input_path.is_file():
            if not input_path.suffix.lower() == SPRITE_FILE_SUFFIX:
                print(f"[ERROR] File is not a sprite art file: {input_path}")
                continue
            sprite_transform_process_single(input_path, palette)
        else:
            sprite_transform_process_multiple(input_path, generate=False, palette=palette)


if __name__ == "__main__":
    main()
