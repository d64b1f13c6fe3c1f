"""Common helpers for the test suite."""

from typing import List, Tuple

import numpy as np

from chaotix_files import Sprite


def make_image(rows: List[List[int]]) -> np.ndarray:
    """Build a pixel buffer from nested lists of palette indices."""
    return np.array(rows, dtype=np.uint8)


def make_sprite(rows: List[List[int]], offset: Tuple[int, int] = (0, 0)) -> Sprite:
    return Sprite(make_image(rows), offset)


def random_image(seed: int, width: int, height: int, max_index: int = 15) -> np.ndarray:
    """Random sparse pixel buffer, roughly half transparent, with a blank row."""
    rng = np.random.default_rng(seed)
    image = rng.integers(1, max_index + 1, size=(height, width), dtype=np.uint8)
    image[rng.random((height, width)) < 0.5] = 0
    if height > 2:
        image[height // 2, :] = 0
    image[0, 0] = max_index
    return image


def world_pixels(sprite: Sprite) -> dict:
    """Map of (world x, world y) -> index for every visible pixel."""
    ys, xs = np.nonzero(sprite.image)
    return {
        (sprite.x + int(x), sprite.y + int(y)): int(sprite.image[y, x])
        for y, x in zip(ys, xs)
    }
