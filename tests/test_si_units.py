import math

import pytest

from cdl_fixer.domain.cdl import SI_PREFIXES, format_si, parse_si


def test_parse_plain_prefixes():
    assert parse_si("10k") == 10000.0
    assert parse_si("2.5u") == pytest.approx(2.5e-6)
    assert parse_si("1da") == 10.0
    assert parse_si("180n") == pytest.approx(180e-9)


def test_parse_without_numeral_is_nan():
    assert math.isnan(parse_si("abc"))
    assert math.isnan(parse_si(""))
    assert math.isnan(parse_si("u1"))


def test_parse_unknown_unit_returns_bare_number():
    assert parse_si("10um") == 10.0
    assert parse_si("3") == 3.0
    assert parse_si("7x") == 7.0


def test_parse_sign_exponent_and_leading_space():
    assert parse_si("-2m") == pytest.approx(-2e-3)
    assert parse_si("1e-6") == pytest.approx(1e-6)
    assert parse_si("  4k") == 4000.0
    assert parse_si(".5n") == pytest.approx(0.5e-9)


def test_format_picks_largest_fitting_prefix():
    assert format_si(10000.0) == "10k"
    assert format_si(2.5e-6) == "2.5u"
    assert format_si(100.0) == "1h"
    assert format_si(50.0) == "5da"
    assert format_si(-3000.0) == "-3k"


def test_format_has_no_unit_prefix_for_one():
    # There is no 1e0 entry, so values in [1, 10) fall to the deci prefix.
    assert format_si(1.0) == "10d"
    assert parse_si(format_si(1.0)) == pytest.approx(1.0)


def test_format_below_smallest_prefix_is_plain():
    assert format_si(0.0) == "0"
    assert format_si(1e-25) == "1e-25"


@pytest.mark.parametrize("unit,multiplier", SI_PREFIXES)
def test_unit_values_format_back_to_same_prefix(unit, multiplier):
    assert format_si(parse_si(f"1{unit}")) == f"1{unit}"


@pytest.mark.parametrize("unit,multiplier", SI_PREFIXES)
def test_format_preserves_magnitude(unit, multiplier):
    value = parse_si(f"4.7{unit}")
    assert value == pytest.approx(4.7 * multiplier)
    assert parse_si(format_si(value)) == pytest.approx(value, rel=1e-5)
