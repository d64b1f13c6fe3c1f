"""
Sprite data structures: an indexed pixel buffer placed at a signed offset.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from data import DEBUG
from .pixel_buffer import (
    new_buffer,
    draw_bitmap,
    draw_bitmap_composited,
    draw_bitmap_bounded,
    flip_buffer,
)


@dataclass(frozen=True)
class Rect:
    """Axis aligned rectangle; right and bottom are exclusive."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersects(self, other: "Rect") -> bool:
        """True if the rectangles overlap; touching edges do not count."""
        if self.is_empty() or other.is_empty():
            return False
        return (
            other.x < self.right
            and self.x < other.right
            and other.y < self.bottom
            and self.y < other.bottom
        )


class Sprite:
    """Indexed pixel buffer with a placement offset.

    image is a np.uint8 array shaped (height, width), or None for an empty
    sprite, which has no size and takes no part in composition.
    """

    def __init__(self, image: Optional[np.ndarray] = None, offset: Tuple[int, int] = (0, 0)):
        self.image = image
        self.x, self.y = offset

    @classmethod
    def empty(cls) -> "Sprite":
        return cls(None, (0, 0))

    def is_empty(self) -> bool:
        return self.image is None

    def copy(self) -> "Sprite":
        image = None if self.image is None else self.image.copy()
        return Sprite(image, self.offset)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.x, self.y

    @offset.setter
    def offset(self, value: Tuple[int, int]) -> None:
        self.x, self.y = value

    @property
    def width(self) -> int:
        return 0 if self.image is None else self.image.shape[1]

    @property
    def height(self) -> int:
        return 0 if self.image is None else self.image.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def bounds(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def __repr__(self) -> str:
        return f"Sprite(offset=({self.x}, {self.y}), size={self.width}x{self.height})"

    @classmethod
    def compose(cls, sprites: Iterable["Sprite"]) -> "Sprite":
        """Draw several sprites into one, in order, over their combined bounds.

        A sprite that overlaps an earlier one is drawn composited so its
        transparent pixels keep what is already there; any other sprite
        is copied as is.
        """
        sprites = [spr for spr in sprites if not spr.is_empty()]

        left = right = top = bottom = 0
        for idx, spr in enumerate(sprites):
            if idx == 0:
                left, right, top, bottom = spr.left, spr.right, spr.top, spr.bottom
            else:
                left = min(spr.left, left)
                right = max(spr.right, right)
                top = min(spr.top, top)
                bottom = max(spr.bottom, bottom)

        image = new_buffer(right - left, bottom - top)

        for idx, spr in enumerate(sprites):
            bounds = spr.bounds
            overlaps = any(bounds.intersects(prev.bounds) for prev in sprites[:idx])
            if overlaps:
                draw_bitmap_composited(image, spr.image, spr.x - left, spr.y - top)
            else:
                draw_bitmap(image, spr.image, spr.x - left, spr.y - top)

        if DEBUG:
            print(
                f"[DEBUG] Composed {len(sprites)} sprite(s) into "
                f"{right - left}x{bottom - top} at ({left}, {top})"
            )

        return cls(image, (left, top))

    def used_range(self) -> Rect:
        """Smallest rectangle, in image coordinates, holding every visible pixel.

        Width or height is 0 when nothing is visible.
        """
        if self.image is None:
            return Rect()

        cols = np.flatnonzero(self.image.any(axis=0))
        rows = np.flatnonzero(self.image.any(axis=1))
        if cols.size == 0 or rows.size == 0:
            return Rect(self.width, self.height, 0, 0)

        x0, x1 = int(cols[0]), int(cols[-1]) + 1
        y0, y1 = int(rows[0]), int(rows[-1]) + 1
        return Rect(x0, y0, x1 - x0, y1 - y0)

    def crop(self, rect: Rect) -> "Sprite":
        """Cut out rect (image coordinates) as a new sprite.

        The full image returns this sprite itself and a zero area rect
        returns an empty sprite.
        """
        if rect == Rect(0, 0, self.width, self.height):
            return self
        if rect.is_empty():
            return Sprite.empty()

        image = new_buffer(rect.width, rect.height)
        if self.image is not None:
            draw_bitmap_bounded(image, self.image, -rect.x, -rect.y)
        return Sprite(image, (self.x + rect.x, self.y + rect.y))

    def trim(self) -> "Sprite":
        """Crop away transparent borders.

        Fully transparent sprites come back untouched so they stay
        selectable.
        """
        used = self.used_range()
        if used.is_empty():
            return self
        return self.crop(used)

    def flip(self, h_flip: bool, v_flip: bool) -> "Sprite":
        """Mirror the sprite in place around its own origin."""
        if self.image is not None:
            flip_buffer(self.image, h_flip, v_flip)
        if h_flip:
            self.x = -(self.width + self.x)
        if v_flip:
            self.y = -(self.height + self.y)
        return self


def compose_sprites(sprites: Iterable[Sprite]) -> Sprite:
    return Sprite.compose(sprites)
