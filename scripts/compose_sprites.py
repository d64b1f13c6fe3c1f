#!/usr/bin/env python3
"""
Compose several sprite art files into one.

Usage:
    python scripts/compose_sprites.py body.bin arm.bin -o full.bin
    python scripts/compose_sprites.py body.bin arm.bin -o full.bin --packed --no-trim
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from converters import compose_sprite_files


def main():
    parser = argparse.ArgumentParser(
        description="Compose sprite art files (later files drawn on top)"
    )
    parser.add_argument("paths", nargs="+", help="Sprite art files in drawing order")
    parser.add_argument(
        "-o", "--output", type=Path, required=True, help="Output art file"
    )
    parser.add_argument(
        "--packed", action="store_true", help="Write the result in packed format"
    )
    parser.add_argument(
        "--no-trim",
        action="store_true",
        help="Keep transparent borders of the composed sprite",
    )

    args = parser.parse_args()

    paths = [Path(p).resolve() for p in args.paths]
    missing = [p for p in paths if not p.is_file()]
    if missing:
        for path in missing:
            print(f"[ERROR] File does not exist: {path}")
        sys.exit(1)

    try:
        compose_sprite_files(paths, args.output.resolve(), args.packed, not args.no_trim)
    except (OSError, ValueError) as e:
        print(f"[ERROR] Error during composition: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
