"""
floatformatting.py

Tools to format floating point number properly. This is more difficult than
it looks like.

The main entry point is :py:func:`format_float`, which renders a number with
a fixed amount of significant digits, choosing between fixed point and
scientific notation depending on the order of magnitude of the number. The
output can be either plain text or LaTeX markup, as selected by
:py:class:`RepresentationType`.
"""
import decimal
import enum
import math

from numrepr.powers import MAX_TABLE_EXP, pow10_float, pow10_int

__all__ = ('RepresentationType', 'MAX_PRECISION', 'format_float',
           'format_int', 'sgn', 'position_of_most_significant_digit',
           'round_to_precision', 'ceil_to_precision', 'floor_to_precision',
           'significant_digits')

#format_float looks up 10**(precision+1) in the table.
MAX_PRECISION = MAX_TABLE_EXP - 1


class RepresentationType(enum.Enum):
    """Whether a plain text or a LaTeX representation is produced."""
    PLAIN = 'plain'
    LATEX = 'latex'


def sgn(x):
    """Return -1, 0 or 1 according to the sign of ``x``."""
    return (x > 0) - (x < 0)


def _pow10_int(n):
    if n <= MAX_TABLE_EXP:
        return pow10_int(n)
    return 10**n

def _inverse_pow10(n):
    if n <= MAX_TABLE_EXP:
        return 1/pow10_float(n)
    return 10.0**-n

#Wide enough for any shortest float repr times a table entry, so the
#products and quotients below are exact.
_exact = decimal.Context(prec=60)

def _scaled_magnitude(absx, shift):
    """Return ``absx*10**shift`` rounded to the nearest integer, with ties
    rounded away from zero.

    The shortest decimal form of the float (its ``repr``) is scaled, not its
    binary value. ``9.995`` is stored slightly below 9.995, and
    ``9.995*100.0`` is ``999.4999999999999`` in floating point, but the
    digits the user wrote are ``9.995``, which scaled is ``999.5`` and rounds
    to ``1000``.
    """
    d = decimal.Decimal(repr(absx))
    if 0 <= shift <= MAX_TABLE_EXP:
        scaled = _exact.multiply(d, pow10_int(shift))
    elif 0 < -shift <= MAX_TABLE_EXP:
        scaled = _exact.divide(d, pow10_int(-shift))
    else:
        sign, digits, exp = d.as_tuple()
        scaled = decimal.Decimal((sign, digits, exp + shift))
    return int(scaled.to_integral_value(rounding=decimal.ROUND_HALF_UP))

def _nudged_log10(absx, precision):
    """Decimal logarithm of ``absx`` slightly enlarged, so that numbers that
    round up to the next power of ten at this precision tend to land on the
    upper side."""
    nudge = 1 + _inverse_pow10(precision + 1)
    product = absx * nudge
    if math.isinf(product):
        #Only happens for numbers close to the largest float.
        return math.log10(absx) + math.log10(nudge)
    return math.log10(product)

def _power_of_ten(exponent, latex):
    if latex:
        return "10^{%d}" % exponent
    return "10^(%d)" % exponent


def format_int(val, rt=RepresentationType.PLAIN, show_sign=False):
    """Return a string representation of the integer ``val``. Negative
    numbers always carry a sign. Positive numbers get a ``+`` only if
    ``show_sign`` is set."""
    return ("+" if val > 0 and show_sign else "") + str(val)


def format_float(x, rt=RepresentationType.PLAIN, precision=3,
                 show_sign=False, lim_inf=-3, lim_sup=3):
    """Return a string representation of ``x`` with ``precision`` significant
    digits.

    Parameters
    ----------
    x : float
        The number. Infinities and NaN are accepted.
    rt : RepresentationType
        Whether to produce plain text (``3.14*10^(5)``) or LaTeX
        (``3.14\\cdot 10^{5}``).
    precision : int
        Number of significant digits. A precision of zero always gives
        ``"0"``. Digits beyond what a double can hold (about 15) are not
        meaningful.
    show_sign : bool
        Prepend ``+`` to positive numbers. Negative numbers always have a
        sign and zero never has one.
    lim_inf, lim_sup : int
        Scientific notation is used when the decimal logarithm of ``|x|`` is
        smaller or equal than ``lim_inf`` or greater or equal than
        ``lim_sup``.

    Examples
    --------
    >>> format_float(3.14159)
    '3.14'
    >>> format_float(-1234.5, precision=2)
    '-1.2*10^(3)'
    >>> format_float(1e-5, RepresentationType.LATEX)
    '10^{-5}'
    """
    if precision < 0:
        raise ValueError("precision must be non negative, not %r" % precision)
    if precision == 0:
        return "0"

    latex = rt is RepresentationType.LATEX
    x = float(x)
    if math.isinf(x):
        return "\\infty" if latex else "inf"
    if math.isnan(x):
        return "\\mathrm{NaN}" if latex else "NaN"

    absx = abs(x)
    log10_x = _nudged_log10(absx, precision) if x != 0 else 0
    #The exponent is needed for fixed point notation as well, to know where
    #the decimal point goes.
    exponent = math.floor(log10_x)
    base = _scaled_magnitude(absx, precision - exponent - 1)

    #log10 of numbers just below a large power of ten can round up to the
    #integer, leaving the mantissa one digit short.
    if 0 < base < _pow10_int(precision - 1):
        exponent -= 1
        base = _scaled_magnitude(absx, precision - exponent - 1)

    #Rounding carried over into a new digit, e.g. 9.995 -> 1000 at
    #precision 3.
    while base >= _pow10_int(precision):
        base = (base + 5) // 10
        exponent += 1
        log10_x = max(log10_x, exponent)

    if x > 0 and show_sign:
        sign = "+"
    elif x < 0:
        sign = "-"
    else:
        sign = ""

    if log10_x >= lim_sup or log10_x <= lim_inf:
        power = _power_of_ten(exponent, latex)
        if base == _pow10_int(precision - 1):
            return sign + power
        digits = str(base)
        times = "\\cdot " if latex else "*"
        return sign + digits[:1] + "." + digits[1:] + times + power

    if base == 0:
        return "0." + "0"*(precision - 1)

    digits = str(base)
    if exponent >= 0:
        if exponent + 1 >= precision:
            return sign + str(base * _pow10_int(exponent + 1 - precision))
        return sign + digits[:exponent + 1] + "." + digits[exponent + 1:]
    return sign + "0." + "0"*(-exponent - 1) + digits


def position_of_most_significant_digit(x):
    """Return the position of the most significant digit of x, counting
    positive positions to the left of the decimal point and negative ones
    to the right.

    >>> position_of_most_significant_digit(3.34)
    1
    >>> position_of_most_significant_digit(0)
    0
    >>> position_of_most_significant_digit(0.79)
    -1
    """
    if x == 0:
        return 0
    adjusted = decimal.Decimal(x).adjusted()
    return adjusted + 1 if adjusted >= 0 else adjusted


def significant_digits(value, digits, rounding=decimal.ROUND_HALF_EVEN):
    """Return a `Decimal` object with ``digits`` significant figures,
    rounded according to the `decimal` rounding mode ``rounding``."""
    cv = decimal.Context(prec=digits, rounding=rounding)
    return cv.create_decimal(value)

def _to_precision(x, precision, rounding):
    if not math.isfinite(x) or x == 0:
        return x
    if precision < 1:
        raise ValueError("precision must be at least 1, not %r" % precision)
    return float(significant_digits(x, precision, rounding))

def round_to_precision(x, precision):
    """Round ``x`` to ``precision`` significant digits, with ties away from
    zero. The exact binary value of ``x`` is rounded, so e.g. 2.675 (which
    is slightly below 2.675 in binary) goes down to 2.67."""
    return _to_precision(x, precision, decimal.ROUND_HALF_UP)

def ceil_to_precision(x, precision):
    """Round ``x`` towards positive infinity, keeping ``precision``
    significant digits."""
    return _to_precision(x, precision, decimal.ROUND_CEILING)

def floor_to_precision(x, precision):
    """Round ``x`` towards negative infinity, keeping ``precision``
    significant digits."""
    return _to_precision(x, precision, decimal.ROUND_FLOOR)
