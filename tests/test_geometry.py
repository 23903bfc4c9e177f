import math

import pytest

from cdl_fixer.domain.cdl import (
    effective_width,
    extract_attribute,
    extract_value,
    recover_line,
    solve_rectangle,
)


def test_extract_first_occurrence_only():
    assert extract_attribute("M1 d g s b nch w=1.5u l=0.18u", "w") == "1.5u"
    assert extract_attribute("M1 w=1u w=2u", "w") == "1u"
    assert extract_attribute("M1 d g s b nch l=1u", "w") is None


def test_extract_requires_unit_except_fingers():
    assert extract_attribute("M1 w=2 l=1u", "w") is None
    assert extract_attribute("M1 fingers=3", "fingers") == "3"
    assert extract_attribute("M1 fingers=3x", "fingers") == "3x"


def test_extract_does_not_match_inside_longer_key():
    line = "XM1 a b c d nch fw=5u w=2u l=1u"
    assert extract_attribute(line, "w") == "2u"
    assert extract_attribute("XM1 fw=5u", "w") is None


def test_extract_value_converts_units():
    assert extract_value("C1 a b area=2p", "area") == pytest.approx(2e-12)
    assert extract_value("C1 a b", "area") is None


def test_effective_width():
    assert effective_width(4e-6, 2) == pytest.approx(2e-6)
    assert effective_width(4e-6, None) == 4e-6
    assert effective_width(4e-6, 0) == 4e-6
    assert effective_width(4e-6, math.nan) == 4e-6


def test_fw_appended_with_fingers():
    result = recover_line("M1 d g s b nch w=2u l=180n fingers=2")
    assert result.line == "M1 d g s b nch w=2u l=180n fingers=2 fw=1u"
    assert result.fw == pytest.approx(1e-6)
    assert result.changed


def test_fw_defaults_to_width_without_fingers():
    result = recover_line("M1 d g s b nch w=1u l=1u")
    assert result.line.endswith(" fw=1u")


def test_fw_bare_integer_fingers():
    result = recover_line("M1 d g s b nch w=4u l=1u fingers=4")
    assert result.line.endswith(" fw=1u")


def test_fw_needs_both_w_and_l():
    line = "M1 d g s b nch w=1u"
    result = recover_line(line)
    assert result.line == line
    assert not result.changed


def test_area_pj_recovers_rectangle():
    line = "D1 a b ndio area=2p pj=6u"
    result = recover_line(line)
    assert result.line.startswith(line + " w=")
    w = extract_value(result.line, "w")
    l = extract_value(result.line, "l")
    assert w * l == pytest.approx(2e-12, rel=1e-4)
    assert w + l == pytest.approx(3e-6, rel=1e-4)
    assert l >= w
    assert result.w == pytest.approx(1e-6)
    assert result.l == pytest.approx(2e-6)


def test_negative_discriminant_leaves_line_untouched():
    line = "D1 a b ndio area=100n pj=1n"
    result = recover_line(line)
    assert result.line == line
    assert not result.changed
    assert result.skipped


def test_fw_and_rectangle_can_both_be_appended():
    result = recover_line("X1 n1 n2 dev w=1u l=1u area=2p pj=6u")
    assert result.line.count(" fw=") == 1
    appended = result.line.split(" fw=1u", 1)[1]
    assert appended.startswith(" w=")
    assert " l=" in appended


def test_solve_rectangle_roots():
    w, l = solve_rectangle(2e-12, 6e-6)
    assert w == pytest.approx(1e-6)
    assert l == pytest.approx(2e-6)


def test_solve_rectangle_rejects_non_positive_roots():
    assert solve_rectangle(2e-12, -6e-6) is None
    assert solve_rectangle(1e-7, 1e-9) is None


def test_solve_rectangle_zero_area_has_no_division_error():
    w, l = solve_rectangle(0.0, 4e-6)
    assert w == 0.0
    assert l == pytest.approx(2e-6)


def test_extract_exponent_values():
    assert extract_attribute("M1 w=1.5e-6 l=1.8e-7", "w") == "1.5e-6"
    assert extract_attribute("M1 fingers=2e0", "fingers") == "2e0"
    assert extract_value("M1 w=1.5e-6 l=1.8e-7", "l") == pytest.approx(1.8e-7)
    assert extract_value("M1 w=1E-6u", "w") == pytest.approx(1e-12)
    # A bare trailing 'e' is still a unit letter.
    assert extract_attribute("M1 w=2e l=1u", "w") == "2e"


def test_fw_from_exponent_values():
    result = recover_line("M1 d g s b nch w=1.5e-6 l=1.8e-7")
    assert result.line == "M1 d g s b nch w=1.5e-6 l=1.8e-7 fw=1.5u"
