"""
Sprite converters module

This module provides functions for converting between sprite art files and external files
"""

from .sprite_transform import (
    sprite_transform_main,
    sprite_transform_process_single,
    sprite_transform_process_multiple,
)

from .compose import compose_sprite_files

from .utils import validate_external_input, SPRITE_FILE_SUFFIX

__all__ = [
    # Sprite transform functions
    "sprite_transform_main",
    "sprite_transform_process_single",
    "sprite_transform_process_multiple",
    # Compose functions
    "compose_sprite_files",
    # Utils functions
    "validate_external_input",
    # Constants
    "SPRITE_FILE_SUFFIX",
]
