import math

import pytest

from utils.numbers import format_compact, format_fixed, round_half_away, to_number


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("20", 20.0),
        (" -10.5 ", -10.5),
        ("1e2", 100.0),
        (7, 7.0),
        (2.5, 2.5),
        ("", 0.0),
        ("   ", 0.0),
        ("abc", 0.0),
        ("12abc", 0.0),
        ("1_000", 0.0),
        (None, 0.0),
        ("nan", 0.0),
        ("inf", 0.0),
        (float("-inf"), 0.0),
    ],
)
def test_to_number(raw, expected):
    assert to_number(raw) == expected


def test_format_fixed_pads_decimals():
    assert format_fixed(-0.5, 4) == "-0.5000"
    assert format_fixed(30, 1) == "30.0"
    assert format_fixed(29.96, 1) == "30.0"


def test_format_fixed_rounds_ties_away_from_zero():
    # 2.125 and 0.5 are exact in binary
    assert format_fixed(2.125, 2) == "2.13"
    assert format_fixed(-2.125, 2) == "-2.13"
    assert format_fixed(0.5, 0) == "1"


def test_format_fixed_negative_zero():
    assert format_fixed(-0.0, 2) == "0.00"
    assert format_fixed(-0.001, 2) == "-0.00"


def test_format_compact_drops_trailing_zeros():
    assert format_compact(35.0, 2) == "35"
    assert format_compact(100.0, 2) == "100"
    assert format_compact(-0.50004, 4) == "-0.5"
    assert format_compact(-0.001, 2) == "0"


def test_non_finite_values():
    assert format_fixed(math.inf, 2) == "Infinity"
    assert format_compact(-math.inf, 2) == "-Infinity"
    assert format_fixed(math.nan, 1) == "NaN"
    assert math.isnan(round_half_away(math.nan, 2))


def test_round_half_away():
    assert round_half_away(-3.456, 2) == pytest.approx(-3.46)
    assert round_half_away(-0.001, 2) >= 0


def test_large_values_use_exponent_notation():
    assert format_fixed(-5e29, 1) == "-5e+29"
    assert format_fixed(1e21, 2) == "1e+21"
    assert format_compact(1.5e30, 4) == "1.5e+30"
    assert round_half_away(-5e29, 2) == -5e29


def test_values_just_below_exponent_threshold_stay_fixed():
    assert format_fixed(1e20, 4) == "100000000000000000000.0000"
    assert format_compact(-1e20, 2) == "-100000000000000000000"


@pytest.mark.parametrize("raw", ["１２", "١٢", "12°"])
def test_to_number_non_ascii_is_zero(raw):
    assert to_number(raw) == 0.0
