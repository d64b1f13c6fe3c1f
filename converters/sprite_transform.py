from pathlib import Path
from typing import Optional

import numpy as np

from chaotix_files import save_sprite_file
from external_files import write_external_files
from data import SEPARATOR_LINE_LENGTH, validate_path_exists_and_is_dir
from external_files.constants import ExternalFiles
from .utils import validate_external_input, SPRITE_FILE_SUFFIX


def sprite_transform_main(data, palette: Optional[np.ndarray] = None) -> Path:
    """Transform between a sprite art file and external files.

    Args:
        data: Tuple containing (sprite, packed, path)
        palette: Optional palette for the exported image
    """
    sprite, packed, path = data

    if path.is_dir():
        # Generate art file from folder
        print("[START] Generating sprite art...")
        output_path = path / f"{path.name}{SPRITE_FILE_SUFFIX}"
        save_sprite_file(sprite, output_path, packed)
        print(f"\n[OK] Sprite art generated successfully at: {output_path}")
        return output_path
    else:
        # Extract art file to folder
        print("[START] Extracting sprite art...")
        output_dir = path.parent / f"{path.stem}_extracted"
        write_external_files(sprite, output_dir, packed, palette)
        print(f"\n[OK] Sprite art extracted successfully to: {output_dir}")
        return output_dir


def sprite_transform_process_single(
    path: Path, palette: Optional[np.ndarray] = None
) -> bool:
    """Process a single folder or sprite art file.

    Args:
        path: Path to folder (for art generation) or art file (for extraction)
        palette: Optional palette used when extracting

    Returns:
        True if successful, False otherwise
    """
    if not path.exists():
        print(f"[ERROR] Path does not exist: {path}")
        return False

    is_folder = path.is_dir()
    is_art_file = path.is_file() and path.suffix.lower() == SPRITE_FILE_SUFFIX

    if not is_folder and not is_art_file:
        print(f"[ERROR] Path must be a folder or {SPRITE_FILE_SUFFIX} file: {path}")
        return False

    print("=" * SEPARATOR_LINE_LENGTH)
    if is_folder:
        print(f"[INFO] Processing folder: {path}")
        print("[INFO] Operation: Generate sprite art")
    else:
        print(f"[INFO] Processing sprite art file: {path}")
        print("[INFO] Operation: Extract sprite art")
    print("=" * SEPARATOR_LINE_LENGTH)
    print()

    try:
        sprite, packed = validate_external_input(path)

        data = (sprite, packed, path)
        sprite_transform_main(data, palette)

        return True

    except Exception as e:
        print(f"[ERROR] Error during processing: {str(e)}")
        return False


def sprite_transform_process_multiple(
    parent_folder: Path, generate: bool = True, palette: Optional[np.ndarray] = None
) -> int:
    """Process multiple folders or sprite art files in a parent folder.

    Args:
        parent_folder: Folder containing subfolders or art files
        generate: If True, generate art from folders; if False, extract art files
        palette: Optional palette used when extracting

    Returns:
        Number of items processed successfully
    """
    if not validate_path_exists_and_is_dir(parent_folder, "Parent folder"):
        return 0

    if generate:
        # Only folders holding a spriteinfo.xml are sprite folders
        items = sorted(
            f
            for f in parent_folder.iterdir()
            if (f / ExternalFiles.SPRITEINFO_FILE).is_file()
        )
        operation = "generate"
    else:
        items = sorted(parent_folder.glob(f"*{SPRITE_FILE_SUFFIX}"))
        operation = "extract"

    if not items:
        print(f"[ERROR] Nothing to {operation} in: {parent_folder}")
        return 0

    print(f"[INFO] {len(items)} sprite(s) to {operation} in {parent_folder}\n")

    failed_items = [
        item_path.name
        for item_path in items
        if not sprite_transform_process_single(item_path, palette)
    ]
    success_count = len(items) - len(failed_items)

    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[SUMMARY] {success_count}/{len(items)} sprite(s) done")
    if failed_items:
        print(f"[ERROR] Failed: {', '.join(failed_items)}")
    print("=" * SEPARATOR_LINE_LENGTH)

    return success_count
