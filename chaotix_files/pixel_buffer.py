"""
Indexed pixel buffer helpers.

Buffers are np.uint8 arrays shaped (height, width); index 0 is transparent.
"""

import numpy as np

from .constants import TRANSPARENT_INDEX


def new_buffer(width: int, height: int) -> np.ndarray:
    return np.zeros((height, width), dtype=np.uint8)


def _clip(dest: np.ndarray, src: np.ndarray, x: int, y: int):
    """Return matching (dest, src) slices for src drawn at (x, y), or None."""
    dest_h, dest_w = dest.shape
    src_h, src_w = src.shape

    x0, y0 = max(x, 0), max(y, 0)
    x1, y1 = min(x + src_w, dest_w), min(y + src_h, dest_h)
    if x0 >= x1 or y0 >= y1:
        return None

    dest_view = dest[y0:y1, x0:x1]
    src_view = src[y0 - y : y1 - y, x0 - x : x1 - x]
    return dest_view, src_view


def draw_bitmap(dest: np.ndarray, src: np.ndarray, x: int, y: int) -> None:
    """Copy src into dest at (x, y). src must lie inside dest."""
    src_h, src_w = src.shape
    dest_h, dest_w = dest.shape
    if x < 0 or y < 0 or x + src_w > dest_w or y + src_h > dest_h:
        raise ValueError(
            f"Bitmap {src_w}x{src_h} at ({x}, {y}) does not fit in {dest_w}x{dest_h}"
        )
    dest[y : y + src_h, x : x + src_w] = src


def draw_bitmap_composited(dest: np.ndarray, src: np.ndarray, x: int, y: int) -> None:
    """Like draw_bitmap, but transparent source pixels keep the destination."""
    src_h, src_w = src.shape
    dest_h, dest_w = dest.shape
    if x < 0 or y < 0 or x + src_w > dest_w or y + src_h > dest_h:
        raise ValueError(
            f"Bitmap {src_w}x{src_h} at ({x}, {y}) does not fit in {dest_w}x{dest_h}"
        )
    region = dest[y : y + src_h, x : x + src_w]
    mask = src != TRANSPARENT_INDEX
    region[mask] = src[mask]


def draw_bitmap_bounded(dest: np.ndarray, src: np.ndarray, x: int, y: int) -> None:
    """Copy the part of src that overlaps dest when drawn at (x, y)."""
    views = _clip(dest, src, x, y)
    if views is None:
        return
    dest_view, src_view = views
    dest_view[...] = src_view


def flip_buffer(buffer: np.ndarray, h_flip: bool, v_flip: bool) -> np.ndarray:
    """Flip in place and return the same array."""
    if h_flip:
        buffer[...] = buffer[:, ::-1].copy()
    if v_flip:
        buffer[...] = buffer[::-1, :].copy()
    return buffer
