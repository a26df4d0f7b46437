import decimal
import re
import sys

import numpy as np
import pytest
from hypothesis import given
from hypothesis.strategies import floats, integers

from numrepr.floatformatting import (RepresentationType, format_float,
    format_int, sgn, MAX_PRECISION, significant_digits,
    position_of_most_significant_digit, round_to_precision,
    ceil_to_precision, floor_to_precision)

PLAIN = RepresentationType.PLAIN
LATEX = RepresentationType.LATEX

finite_nonzero = floats(allow_nan=False, allow_infinity=False).filter(
    lambda x: x != 0)

#With lim_inf == lim_sup every number is written in scientific notation.
scientific = re.compile(r'^(-?)(?:(\d)\.(\d*)\*)?10\^\((-?\d+)\)$')


@pytest.mark.parametrize('x, args, expected', [
    (3.14159, (), "3.14"),
    (-5.0, (PLAIN, 2), "-5.0"),
    (5.0, (PLAIN, 2, True), "+5.0"),
    (0.0, (PLAIN, 2, True), "0.0"),
    (0.0, (), "0.00"),
    (123456.0, (), "1.23*10^(5)"),
    (123456.0, (LATEX,), "1.23\\cdot 10^{5}"),
    (123456.0, (PLAIN, 3, False, -3, 10), "123000"),
    (12345.0, (PLAIN, 2, True), "+1.2*10^(4)"),
    (1234.5, (PLAIN, 6, False, -3, 6), "1234.50"),
    (999.0, (), "999"),
    (0.0123, (), "0.0123"),
    (-0.001, (), "-0.00100"),
    (-0.001, (PLAIN, 3, False, -2, 3), "-10^(-3)"),
    (1e-4, (), "10^(-4)"),
    (1e-5, (LATEX,), "10^{-5}"),
    (2.54e-4, (), "2.54*10^(-4)"),
    (0.5, (PLAIN, 1), "0.5"),
])
def test_examples(x, args, expected):
    assert format_float(x, *args) == expected

def test_ties_round_away_from_zero():
    assert format_float(12.5, PLAIN, 2) == "13"
    assert format_float(2.5, PLAIN, 1) == "3"
    assert format_float(-2.5, PLAIN, 1) == "-3"

def test_carry_into_next_power():
    assert format_float(9.995, PLAIN, 3, False, -3, 3) == "10.0"
    assert format_float(9.9996, PLAIN, 3, False, -3, 3) == "10.0"
    assert format_float(99.96, PLAIN, 3, False, -3, 3) == "100"
    #Rounds up to 1000, which is at the scientific notation limit.
    assert format_float(999.5, PLAIN, 3, False, -3, 3) == "10^(3)"
    assert format_float(-9.995, LATEX, 3, False, -3, 1) == "-10^{1}"
    assert format_float(0.0995, PLAIN, 2) == "0.10"

def test_ties_use_the_written_digits():
    #The nearest doubles to these lie below the tie.
    assert format_float(1.005, PLAIN, 3) == "1.01"
    assert format_float(2.675, PLAIN, 3) == "2.68"
    assert format_float(-0.285, PLAIN, 2) == "-0.29"
    assert format_float(0.125, PLAIN, 2) == "0.13"

def test_exact_power_of_ten():
    assert format_float(1000.0, PLAIN, 3, False, -3, 2) == "10^(3)"
    assert format_float(1000.0, LATEX, 3, False, -3, 2) == "10^{3}"
    assert format_float(-1000.0, PLAIN, 3, True, -3, 2) == "-10^(3)"
    assert format_float(1000.0, PLAIN, 3, True, -3, 2) == "+10^(3)"

def test_upper_limit_is_inclusive():
    assert format_float(1000.0, PLAIN, 3, False, -3, 3) == "10^(3)"
    assert format_float(1234.0, PLAIN, 3, False, -3, 3) == "1.23*10^(3)"
    assert format_float(1234.0, PLAIN, 3, False, -3, 4) == "1230"

def test_special_values():
    assert format_float(float('inf')) == "inf"
    assert format_float(float('-inf'), PLAIN, 3, True) == "inf"
    assert format_float(float('inf'), LATEX) == "\\infty"
    assert format_float(float('nan')) == "NaN"
    assert format_float(float('nan'), LATEX) == "\\mathrm{NaN}"

def test_extreme_magnitudes():
    assert format_float(sys.float_info.max) == "1.80*10^(308)"
    assert format_float(5e-324) == "5.00*10^(-324)"
    assert format_float(-5e-324, LATEX) == "-5.00\\cdot 10^{-324}"

def test_large_precision_does_not_fail():
    res = format_float(0.1, PLAIN, 25)
    assert res.startswith("0.1000000000000000")

def test_negative_precision():
    with pytest.raises(ValueError):
        format_float(1.0, PLAIN, -1)

def test_numpy_scalars():
    assert format_float(np.float32(0.5)) == "0.500"
    assert format_float(np.float64(-2.0), PLAIN, 2) == "-2.0"

def test_format_int():
    assert format_int(5) == "5"
    assert format_int(5, PLAIN, True) == "+5"
    assert format_int(0, PLAIN, True) == "0"
    assert format_int(-12, LATEX, True) == "-12"

@given(floats())
def test_zero_precision(x):
    assert format_float(x, PLAIN, 0) == "0"
    assert format_float(x, LATEX, 0, True, -1, 1) == "0"

@given(floats(), integers(min_value=0, max_value=18))
def test_deterministic(x, precision):
    for rt in RepresentationType:
        assert (format_float(x, rt, precision) ==
                format_float(x, rt, precision))

@given(finite_nonzero, integers(min_value=1, max_value=MAX_PRECISION))
def test_mantissa_digits(x, precision):
    res = format_float(x, PLAIN, precision, False, 0, 0)
    m = scientific.match(res)
    assert m, res
    sign, first, rest, _ = m.groups()
    assert (sign == "-") == (x < 0)
    if first is not None:
        assert len(first + rest) == precision

@given(finite_nonzero, integers(min_value=1, max_value=MAX_PRECISION))
def test_fixed_point_digits(x, precision):
    #No double has a decimal logarithm outside these limits.
    res = format_float(x, PLAIN, precision, False, -400, 400)
    assert "10^" not in res
    assert res.startswith("-") == (x < 0)
    res = res.lstrip("-")
    if "." in res:
        digits = res.replace(".", "").lstrip("0")
        assert len(digits) == precision, res
    else:
        assert res[0] != "0"
        assert len(res) >= precision
        assert set(res[precision:]) <= {"0"}, res

@given(finite_nonzero, integers(min_value=1, max_value=12))
def test_close_to_value(x, precision):
    res = format_float(x, PLAIN, precision, False, 0, 0)
    sign, first, rest, exp = scientific.match(res).groups()
    exp = int(exp)
    mantissa = decimal.Decimal(first + "." + rest if first else "1")
    represented = mantissa.scaleb(exp)
    tolerance = decimal.Decimal("0.5").scaleb(exp - precision + 1)
    assert abs(abs(decimal.Decimal(repr(x))) - represented) <= tolerance

def test_sgn():
    assert sgn(-3.2) == -1
    assert sgn(0) == 0
    assert sgn(7) == 1

def test_position_of_most_significant_digit():
    assert position_of_most_significant_digit(3.34) == 1
    assert position_of_most_significant_digit(0) == 0
    assert position_of_most_significant_digit(0.79) == -1
    assert position_of_most_significant_digit(-123.0) == 3
    assert position_of_most_significant_digit(0.05) == -2

def test_significant_digits():
    assert significant_digits(3.14159, 3) == decimal.Decimal("3.14")
    assert significant_digits(2.5, 1) == decimal.Decimal("2")
    assert (significant_digits(2.5, 1, decimal.ROUND_HALF_UP) ==
            decimal.Decimal("3"))

def test_precision_rounding():
    assert round_to_precision(1234.5, 4) == 1235.0
    assert round_to_precision(-0.012345, 2) == -0.012
    assert ceil_to_precision(1.231, 3) == 1.24
    assert ceil_to_precision(-1.239, 3) == -1.23
    assert floor_to_precision(1.239, 3) == 1.23
    assert floor_to_precision(-1.231, 3) == -1.24
    assert round_to_precision(0.0, 3) == 0.0
    assert round_to_precision(float('inf'), 3) == float('inf')
    with pytest.raises(ValueError):
        round_to_precision(1.0, 0)
