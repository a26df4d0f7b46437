"""
powers.py

Lookup tables for small powers of ten. The tables are built once at import
time and never modified afterwards, so they can be read from any thread.
"""

#10**19 is the largest power of ten that fits in an unsigned 64 bit integer.
MAX_TABLE_EXP = 19

_FLOAT_TABLE = tuple(float(10**n) for n in range(MAX_TABLE_EXP + 1))
_INT_TABLE = tuple(10**n for n in range(MAX_TABLE_EXP + 1))


def _check_exponent(exponent):
    if not 0 <= exponent <= MAX_TABLE_EXP:
        raise ValueError("Exponent must be between 0 and %d, not %r" %
                         (MAX_TABLE_EXP, exponent))

def pow10_float(exponent):
    """Return ``10**exponent`` as a float, for ``exponent`` between 0 and
    ``MAX_TABLE_EXP``."""
    _check_exponent(exponent)
    return _FLOAT_TABLE[exponent]

def pow10_int(exponent):
    """Return ``10**exponent`` as an integer, for ``exponent`` between 0 and
    ``MAX_TABLE_EXP``."""
    _check_exponent(exponent)
    return _INT_TABLE[exponent]
