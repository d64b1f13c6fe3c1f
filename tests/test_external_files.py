"""Tests for the sprite folder format: PNG image, JASC-PAL palette and spriteinfo.xml."""

import numpy as np
import pytest

from external_files import (
    read_external_files,
    read_palette,
    write_external_files,
    write_palette,
)
from external_files.constants import ExternalFiles
from chaotix_files import Sprite
from utils import make_sprite, random_image


def grayscale_palette(num_colors: int) -> np.ndarray:
    return np.repeat(np.arange(num_colors, dtype=np.uint8), 3)


@pytest.mark.parametrize("packed", [False, True])
def test_folder_round_trip(tmp_path, packed):
    sprite = Sprite(random_image(4, 10, 7, max_index=200), (-6, 12))
    write_external_files(sprite, tmp_path / "out", packed)

    loaded, loaded_packed = read_external_files(tmp_path / "out")

    assert loaded_packed == packed
    assert loaded.offset == (-6, 12)
    np.testing.assert_array_equal(loaded.image, sprite.image)


def test_palette_file_only_written_when_given(tmp_path):
    sprite = make_sprite([[1, 2], [3, 0]])

    write_external_files(sprite, tmp_path / "plain")
    assert not (tmp_path / "plain" / ExternalFiles.PALETTE_FILE).exists()

    write_external_files(sprite, tmp_path / "colored", palette=grayscale_palette(4))
    assert (tmp_path / "colored" / ExternalFiles.PALETTE_FILE).exists()

    loaded, _ = read_external_files(tmp_path / "colored")
    np.testing.assert_array_equal(loaded.image, sprite.image)


def test_empty_sprite_cannot_be_exported(tmp_path):
    with pytest.raises(ValueError):
        write_external_files(Sprite.empty(), tmp_path / "empty")


def test_missing_spriteinfo_raises(tmp_path):
    write_external_files(make_sprite([[1]]), tmp_path / "sprite")
    (tmp_path / "sprite" / ExternalFiles.SPRITEINFO_FILE).unlink()

    with pytest.raises(FileNotFoundError):
        read_external_files(tmp_path / "sprite")


def test_missing_image_raises(tmp_path):
    write_external_files(make_sprite([[1]]), tmp_path / "sprite")
    (tmp_path / "sprite" / ExternalFiles.IMAGE_FILE).unlink()

    with pytest.raises(FileNotFoundError):
        read_external_files(tmp_path / "sprite")


@pytest.mark.parametrize(
    "offset_x,offset_y,expected",
    [("08", "-04", (8, -4)), ("0x10", "-0x2", (16, -2)), (" 12 ", "+3", (12, 3))],
)
def test_spriteinfo_offsets_accept_hand_edited_numbers(tmp_path, offset_x, offset_y, expected):
    write_external_files(make_sprite([[1]]), tmp_path / "sprite")
    (tmp_path / "sprite" / ExternalFiles.SPRITEINFO_FILE).write_text(
        "<SpriteProperties>"
        f"<OffsetX>{offset_x}</OffsetX><OffsetY>{offset_y}</OffsetY><Packed>1</Packed>"
        "</SpriteProperties>"
    )

    sprite, packed = read_external_files(tmp_path / "sprite")

    assert sprite.offset == expected
    assert packed


def test_spriteinfo_with_bad_offset_raises(tmp_path):
    write_external_files(make_sprite([[1]]), tmp_path / "sprite")
    (tmp_path / "sprite" / ExternalFiles.SPRITEINFO_FILE).write_text(
        "<SpriteProperties><OffsetX>left</OffsetX></SpriteProperties>"
    )

    with pytest.raises(ValueError, match="left"):
        read_external_files(tmp_path / "sprite")


def test_spriteinfo_with_wrong_root_raises(tmp_path):
    write_external_files(make_sprite([[1]]), tmp_path / "sprite")
    (tmp_path / "sprite" / ExternalFiles.SPRITEINFO_FILE).write_text(
        "<AnimData><OffsetX>0</OffsetX></AnimData>"
    )

    with pytest.raises(ValueError):
        read_external_files(tmp_path / "sprite")


class TestPalette:
    def test_round_trip(self, tmp_path):
        palette = np.array([0, 0, 0, 255, 128, 7, 10, 20, 30], dtype=np.uint8)
        path = tmp_path / "colors.pal"

        write_palette(palette, path)

        assert path.read_text().splitlines()[:4] == ["JASC-PAL", "0100", "3", "0 0 0"]
        np.testing.assert_array_equal(read_palette(path), palette)

    def test_alpha_column_is_ignored(self, tmp_path):
        path = tmp_path / "alpha.pal"
        path.write_text("JASC-PAL\n0100\n2\n1 2 3 255\n4 5 6 0\n")
        np.testing.assert_array_equal(read_palette(path), [1, 2, 3, 4, 5, 6])

    @pytest.mark.parametrize(
        "content",
        [
            "RIFF-PAL\n0100\n1\n0 0 0\n",
            "JASC-PAL\n0200\n1\n0 0 0\n",
            "JASC-PAL\n0100\n2\n0 0 0\n",
            "JASC-PAL\n0100\n1\n0 0\n",
            "JASC-PAL\n0100\n1\n0 0 256\n",
            "JASC-PAL\n0100\n1\nred green blue\n",
            "JASC-PAL\n0100\n257\n",
            "JASC-PAL\n",
        ],
    )
    def test_invalid_palette_raises(self, tmp_path, content):
        path = tmp_path / "bad.pal"
        path.write_text(content)
        with pytest.raises(ValueError):
            read_palette(path)
