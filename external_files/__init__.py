"""
External files utility module for reading and writing sprite image, XML and palette files.
"""

from .files_io import (
    read_external_files,
    write_external_files,
)
from .palette import read_palette, write_palette

__all__ = [
    "read_external_files",
    "write_external_files",
    "read_palette",
    "write_palette",
]
