#!/usr/bin/env python3
"""
Convert sprite art between unpacked and packed format.

Usage:
    python scripts/convert_sprite.py pack sprite.bin -o sprite_packed.bin
    python scripts/convert_sprite.py unpack sprite_packed.bin -o sprite.bin
    python scripts/convert_sprite.py unpack rom.bin --offset 0x1A2B0 -o sprite.bin
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from chaotix_files import pack_sprite_art, unpack_sprite_art
from data import read_file_to_bytes, write_bytes_to_file, STRICT_ROWS


def main():
    parser = argparse.ArgumentParser(
        description="Convert sprite art between unpacked and packed format"
    )
    parser.add_argument("mode", choices=["pack", "unpack"], help="Conversion direction")
    parser.add_argument("input", type=Path, help="Input art file")
    parser.add_argument(
        "-o", "--output", type=Path, required=True, help="Output art file"
    )
    parser.add_argument(
        "--offset",
        type=lambda v: int(v, 0),
        default=0,
        help="Offset of packed art within the input file (unpack only)",
    )
    parser.add_argument(
        "--lenient-rows",
        action="store_true",
        help="Read rows whose end X precedes their start X as empty instead of failing",
    )

    args = parser.parse_args()

    if not args.input.is_file():
        print(f"[ERROR] File does not exist: {args.input}")
        sys.exit(1)

    strict_rows = STRICT_ROWS and not args.lenient_rows
    data = read_file_to_bytes(args.input)

    try:
        if args.mode == "pack":
            result = pack_sprite_art(data, strict_rows)
        else:
            result = unpack_sprite_art(data, args.offset, strict_rows)
    except ValueError as e:
        print(f"[ERROR] Conversion failed: {e}")
        sys.exit(1)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    write_bytes_to_file(args.output, result)
    print(f"[OK] {len(data)} -> {len(result)} bytes written to: {args.output}")


if __name__ == "__main__":
    main()
