# -*- coding: utf-8 -*-
"""
Format values with uncertainties and whole tables of numbers.

The functions here work on pandas DataFrames and return new frames of
strings (or objects that render as strings), ready to be written with e.g.
``DataFrame.to_latex`` or ``DataFrame.to_html``.
"""
import logging
from collections import namedtuple

import numpy as np

from numrepr.floatformatting import RepresentationType, format_float
from numrepr.tostring import to_string

__all__ = ('ValueErrorTuple', 'format_error_value_columns',
           'format_dataframe')

log = logging.getLogger(__name__)


class ValueErrorTuple(namedtuple('ValueErrorTuple', ('value', 'error'))):
    """A value with its uncertainty. It displays as ``value ± error``."""
    __slots__ = ()

    def to_string(self, rt=RepresentationType.PLAIN, *args, **kwargs):
        pm = " \\pm " if rt is RepresentationType.LATEX else " ± "
        return (format_float(self.value, rt, *args, **kwargs) + pm +
                format_float(self.error, rt, *args, **kwargs))

    def __str__(self):
        return self.to_string()

#It is a tuple, but it should be rendered with its own method.
to_string.register(ValueErrorTuple, to_string.dispatch(object))


def format_error_value_columns(df, valcol, errcol, inplace=False):
    """Join the columns ``valcol`` and ``errcol`` of ``df`` into
    `ValueErrorTuple` objects, stored in ``valcol``. The ``errcol`` column is
    removed.

    If ``inplace`` is False, a new DataFrame is returned and ``df`` is left
    untouched."""
    if not inplace:
        df = df.copy()
    log.debug("Joining columns %s and %s", valcol, errcol)
    #Filled element by element so that numpy does not unpack the tuples
    #into a second dimension.
    joined = np.empty(len(df), dtype=object)
    for i, (v, e) in enumerate(zip(df[valcol], df[errcol])):
        joined[i] = ValueErrorTuple(v, e)
    df[valcol] = joined
    del df[errcol]
    if not inplace:
        return df


def format_dataframe(df, rt=RepresentationType.PLAIN, *args, **kwargs):
    """Return a copy of ``df`` where the floating point cells are replaced
    by their string representation. Other cells are left as they are."""
    def fmt(x):
        if isinstance(x, (float, np.floating)):
            return format_float(x, rt, *args, **kwargs)
        return x
    if hasattr(df, 'map'):
        return df.map(fmt)
    #pandas < 2.1
    return df.applymap(fmt)
