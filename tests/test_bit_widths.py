"""Tests for per-category bit width selection."""

from chaotix_files import FieldKind, minimal_bit_width, select_bit_widths


def test_minimal_bit_width_values():
    assert minimal_bit_width(0) == 1
    assert minimal_bit_width(1) == 1
    assert minimal_bit_width(2) == 2
    assert minimal_bit_width(3) == 2
    assert minimal_bit_width(4) == 3
    assert minimal_bit_width(127) == 7
    assert minimal_bit_width(128) == 8
    assert minimal_bit_width(255) == 8


def test_minimal_bit_width_defaults_to_eight():
    assert minimal_bit_width(256) == 8
    assert minimal_bit_width(1 << 20) == 8


def test_minimal_bit_width_is_monotonic():
    widths = [minimal_bit_width(value) for value in range(300)]
    assert widths == sorted(widths)


def test_select_bit_widths_per_category():
    fields = [
        (FieldKind.X, 5),
        (FieldKind.X, 17),
        (FieldKind.Y, 3),
        (FieldKind.COLOR, 15),
        (FieldKind.COLOR, 2),
    ]
    assert select_bit_widths(fields) == {
        FieldKind.X: 5,
        FieldKind.Y: 2,
        FieldKind.COLOR: 4,
    }


def test_select_bit_widths_missing_category_gets_one_bit():
    widths = select_bit_widths([(FieldKind.X, 200)])
    assert widths[FieldKind.X] == 8
    assert widths[FieldKind.Y] == 1
    assert widths[FieldKind.COLOR] == 1
