"""
Per-category bit width selection for the packed art format.
"""

from enum import Enum
from typing import Dict, Iterable, Tuple

from .constants import MIN_BIT_WIDTH, MAX_BIT_WIDTH


class FieldKind(Enum):
    X = "x"
    Y = "y"
    COLOR = "color"


PackedField = Tuple[FieldKind, int]


def minimal_bit_width(max_value: int) -> int:
    """Smallest width in [1, 8] that can hold max_value, 8 if none can."""
    for width in range(MIN_BIT_WIDTH, MAX_BIT_WIDTH + 1):
        mask = (1 << width) - 1
        if max_value == max_value & mask:
            return width
    return MAX_BIT_WIDTH


def select_bit_widths(fields: Iterable[PackedField]) -> Dict[FieldKind, int]:
    maximums = {kind: 0 for kind in FieldKind}
    for kind, value in fields:
        if value > maximums[kind]:
            maximums[kind] = value

    return {kind: minimal_bit_width(value) for kind, value in maximums.items()}
