#!/usr/bin/env python3
"""
Generate sprite art file(s) from extracted folder(s).

Usage:
    python scripts/generate_sprites.py <extracted_folder>        # Single folder
    python scripts/generate_sprites.py <folder1> <folder2>       # Multiple folders
    python scripts/generate_sprites.py <parent_folder>           # All subfolders
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from converters import sprite_transform_process_single, sprite_transform_process_multiple
from external_files.constants import ExternalFiles


def is_extracted_folder(folder: Path) -> bool:
    """Check if folder looks like an extracted sprite folder."""
    return (folder / ExternalFiles.SPRITEINFO_FILE).exists()


def main():
    parser = argparse.ArgumentParser(
        description="Generate sprite art file(s) from extracted folder(s)"
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Extracted folder(s) or parent folder containing extracted folders",
    )

    args = parser.parse_args()

    for path_str in args.paths:
        input_path = Path(path_str).resolve()

        if not input_path.exists():
            print(f"[ERROR] Path does not exist: {input_path}")
            continue

        if not input_path.is_dir():
            print(f"[ERROR] Path is not a directory: {input_path}")
            continue

        if is_extracted_folder(input_path):
            sprite_transform_process_single(input_path)
        else:
            sprite_transform_process_multiple(input_path, generate=True)


if __name__ == "__main__":
    main()
