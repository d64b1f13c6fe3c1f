"""Tests for the unpacked (row-run) art format."""

import numpy as np
import pytest

from chaotix_files import (
    MalformedRowError,
    RowRun,
    SpriteFormatError,
    TruncatedInputError,
    decode_unpacked,
    encode_unpacked,
    find_row_runs,
    read_unpacked_header,
)
from utils import make_image, random_image

# 3x3 sprite at (4, -2); the middle row is fully transparent
SAMPLE_IMAGE = [
    [0, 5, 6],
    [0, 0, 0],
    [7, 0, 0],
]
SAMPLE_UNPACKED = bytes.fromhex(
    "0400" "00" "07" "FE00" "0000"  # header
    "04 08 FE00 00050600"  # y=-2, x 4..8
    "04 06 0000 0700"  # y=0, x 4..6
    "0000"  # terminator
)


def test_encode_sample():
    assert encode_unpacked(make_image(SAMPLE_IMAGE), 4, -2) == SAMPLE_UNPACKED


def test_find_row_runs_skips_transparent_rows():
    runs = find_row_runs(make_image(SAMPLE_IMAGE), 4, -2)
    assert runs == [
        RowRun(4, 8, -2, bytes([0, 5, 6, 0])),
        RowRun(4, 6, 0, bytes([7, 0])),
    ]


def test_runs_are_even_aligned():
    image = random_image(7, 13, 9)
    for run in find_row_runs(image, 3, -5):
        assert run.start_x % 2 == 0
        assert (run.end_x - run.start_x) % 2 == 0
        assert len(run.pixels) == run.end_x - run.start_x


def test_decode_sample():
    image, x, y = decode_unpacked(SAMPLE_UNPACKED)
    assert (x, y) == (4, -2)
    assert image.shape == (3, 4)
    np.testing.assert_array_equal(
        image,
        make_image([[0, 5, 6, 0], [0, 0, 0, 0], [7, 0, 0, 0]]),
    )


def test_decode_at_offset():
    data = b"\xAA\xBB\xCC" + SAMPLE_UNPACKED
    image, x, y = decode_unpacked(data, 3)
    assert (x, y) == (4, -2)
    assert image[2, 0] == 7


def test_read_header():
    header = read_unpacked_header(SAMPLE_UNPACKED)
    assert header.initial_x == 4
    assert header.marker == 0
    assert header.final_x == 7
    assert header.initial_y == -2
    assert header.final_y == 0
    assert (header.width, header.height) == (4, 3)


def test_odd_offset_keeps_world_columns():
    data = encode_unpacked(make_image([[3]]), 5, 0)
    assert data == bytes.fromhex("0400 00 05 0000 0000" "04 06 0000 0003" "0000")

    image, x, y = decode_unpacked(data)
    assert (x, y) == (4, 0)
    np.testing.assert_array_equal(image, make_image([[0, 3]]))


def test_output_is_padded_to_four_bytes():
    data = encode_unpacked(make_image([[1, 1, 1, 1]]), 0, 0)
    assert len(data) == 20
    assert data[-4:] == b"\x00\x00\x00\x00"


def test_fully_transparent_sprite_has_no_rows():
    data = encode_unpacked(np.zeros((2, 2), dtype=np.uint8), 0, 0)
    assert data == bytes.fromhex("0000 00 01 0000 0100" "0000" "0000")

    image, x, y = decode_unpacked(data)
    assert image.shape == (2, 2)
    assert not image.any()


@pytest.mark.parametrize("seed,offset", [(1, (0, 0)), (2, (-16, -20)), (3, (10, 4)), (4, (-8, 7))])
def test_round_trip_visible_pixels(seed, offset):
    original = random_image(seed, 11, 9)
    image, x, y = decode_unpacked(encode_unpacked(original, *offset))

    assert (x, y) == offset
    assert image.shape[0] == original.shape[0]
    np.testing.assert_array_equal(image[:, : original.shape[1]], original)
    assert not image[:, original.shape[1] :].any()


def test_sprite_outside_signed_byte_range_is_rejected():
    with pytest.raises(ValueError):
        encode_unpacked(make_image([[1, 1]]), 127, 0)
    with pytest.raises(ValueError):
        encode_unpacked(make_image([[1]]), 0, -129)


@pytest.mark.parametrize("width,x", [(128, 0), (127, 0), (2, 125), (1, 127)])
def test_row_end_past_signed_byte_range_is_rejected(width, x):
    with pytest.raises(ValueError, match="Right edge"):
        encode_unpacked(np.ones((1, width), dtype=np.uint8), x, 0)


def test_widest_row_that_fits():
    data = encode_unpacked(np.ones((1, 126), dtype=np.uint8), 0, 0)
    header = read_unpacked_header(data)
    assert header.final_x == 125
    assert data[8:10] == bytes([0, 126])


MALFORMED_UNPACKED = bytes.fromhex(
    "0000 00 03 0000 0000"  # 4x1 at (0, 0)
    "02 00 0000"  # row end X before start X
    "0000"
)


def test_malformed_row_rejected_by_default():
    with pytest.raises(MalformedRowError) as exc_info:
        decode_unpacked(MALFORMED_UNPACKED)
    assert (exc_info.value.start_x, exc_info.value.end_x, exc_info.value.y) == (2, 0, 0)


def test_malformed_row_read_as_empty_when_lenient():
    image, x, y = decode_unpacked(MALFORMED_UNPACKED, strict_rows=False)
    assert image.shape == (1, 4)
    assert not image.any()


def test_row_outside_bounds_raises():
    data = bytes.fromhex("0000 00 01 0000 0000" "00 04 0000 01010101" "0000")
    with pytest.raises(MalformedRowError):
        decode_unpacked(data)


def test_truncated_input_raises():
    with pytest.raises(TruncatedInputError):
        decode_unpacked(SAMPLE_UNPACKED[:5])
    with pytest.raises(TruncatedInputError):
        decode_unpacked(SAMPLE_UNPACKED[:10])
    with pytest.raises(TruncatedInputError):
        decode_unpacked(SAMPLE_UNPACKED[:14])


def test_inverted_header_bounds_raise():
    data = bytes.fromhex("0400 00 01 0000 0000" "0000")
    with pytest.raises(SpriteFormatError):
        decode_unpacked(data)
