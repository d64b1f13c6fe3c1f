"""
JASC-PAL palette reading and writing functions.
"""

from pathlib import Path
from typing import List

import numpy as np

from data import read_file_to_bytes, write_bytes_to_file
from .constants import JascPalette


def write_palette(palette: np.ndarray, output_path: Path) -> None:
    """Export a flattened RGB palette to JASC-PAL format.

    Entries past the 256th are dropped.
    """
    colors = palette[: (palette.size // 3) * 3].reshape(-1, 3)[: JascPalette.MAX_COLORS]

    lines = [JascPalette.MAGIC, JascPalette.VERSION, str(len(colors))]
    lines.extend(" ".join(str(int(c)) for c in rgb) for rgb in colors)

    write_bytes_to_file(output_path, ("\n".join(lines) + "\n").encode("ascii"))


def _parse_color_entry(line: str, line_num: int) -> List[int]:
    parts = line.split()
    # An optional fourth column holds alpha, which sprite palettes do not use
    if len(parts) not in (3, 4):
        raise ValueError(
            f"Invalid color entry at line {line_num}: expected 3 or 4 values"
        )

    try:
        rgb = [int(part) for part in parts[:3]]
    except ValueError:
        raise ValueError(
            f"Invalid color entry at line {line_num}: values must be integers, got '{line}'"
        )

    if any(not 0 <= value <= 255 for value in rgb):
        raise ValueError(
            f"Invalid color entry at line {line_num}: values must be 0-255, got '{line}'"
        )

    return rgb


def _parse_color_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        raise ValueError(f"Invalid JASC-PAL file: bad color count '{value}'")
    if count < 0:
        raise ValueError(f"Invalid JASC-PAL file: negative color count {count}")
    return count


def read_palette(palette_path: Path) -> np.ndarray:
    """Import a JASC-PAL palette.

    Returns:
        Flattened np.uint8 array (n_colors * 3) of RGB values
    """
    lines = [
        line.strip()
        for line in read_file_to_bytes(palette_path).decode("ascii").strip().splitlines()
    ]

    if len(lines) < 3:
        raise ValueError("Invalid JASC-PAL file: too few lines")
    if lines[0] != JascPalette.MAGIC:
        raise ValueError("Invalid JASC-PAL file: missing header")
    if lines[1] != JascPalette.VERSION:
        raise ValueError(f"Unsupported JASC-PAL version: {lines[1]}")

    num_colors = _parse_color_count(lines[2])
    if num_colors > JascPalette.MAX_COLORS:
        raise ValueError(
            f"Invalid palette: {num_colors} colors exceeds maximum of {JascPalette.MAX_COLORS}"
        )

    entries = lines[3 : 3 + num_colors]
    if len(entries) < num_colors:
        raise ValueError(
            f"Invalid JASC-PAL file: expected {num_colors} colors, got {len(entries)}"
        )

    colors = []
    for idx, line in enumerate(entries):
        colors.extend(_parse_color_entry(line, idx + 4))

    return np.array(colors, dtype=np.uint8)
