# -*- coding: utf-8 -*-
"""
A single ``to_string`` function returning a plain or LaTeX representation of
numbers, strings, containers and user defined objects.

Builtin types are dispatched on their type. Any other object can take part by
implementing a method::

    def to_string(self, rt, *args, **kwargs):
        ...

where ``rt`` is a `RepresentationType` and ``args`` and ``kwargs`` are the
formatting options passed to ``to_string``. They follow the signature of
`format_float`: ``precision``, ``show_sign``, ``lim_inf`` and ``lim_sup``,
given either by position or by name. Integers only look at ``show_sign``.
"""
import collections
import collections.abc
import functools

import numpy as np

from numrepr.floatformatting import (RepresentationType, format_float,
                                     format_int)

__all__ = ('to_string', 'to_plain', 'to_latex')

PLAIN = RepresentationType.PLAIN
LATEX = RepresentationType.LATEX

_delimiters = {
    PLAIN: {'list': ("[", "]"), 'set': ("{", "}")},
    LATEX: {'list': ("\\left[", "\\right]"), 'set': ("\\left\\{", "\\right\\}")},
}


@functools.singledispatch
def to_string(obj, rt=PLAIN, *args, **kwargs):
    """Return a string representation of ``obj``. The remaining arguments are
    forwarded to the formatters of the numbers contained in ``obj``."""
    method = getattr(obj, 'to_string', None)
    if method is None:
        raise TypeError("Don't know how to represent an object of type %s. "
                        "It should implement a to_string(rt, *args, **kwargs) "
                        "method." % type(obj).__name__)
    return method(rt, *args, **kwargs)

def to_plain(obj, *args, **kwargs):
    return to_string(obj, PLAIN, *args, **kwargs)

def to_latex(obj, *args, **kwargs):
    return to_string(obj, LATEX, *args, **kwargs)


@to_string.register(str)
def _(obj, rt=PLAIN, *args, **kwargs):
    return obj

@to_string.register(bool)
@to_string.register(np.bool_)
def _(obj, rt=PLAIN, *args, **kwargs):
    return "true" if obj else "false"

@to_string.register(RepresentationType)
def _(obj, rt=PLAIN, *args, **kwargs):
    return obj.name

def _show_sign(args, kwargs):
    #Same position as in format_float, after precision.
    if len(args) > 1:
        return args[1]
    return kwargs.get('show_sign', False)

@to_string.register(int)
@to_string.register(np.integer)
def _(obj, rt=PLAIN, *args, **kwargs):
    return format_int(int(obj), rt, _show_sign(args, kwargs))

@to_string.register(float)
@to_string.register(np.floating)
def _(obj, rt=PLAIN, *args, **kwargs):
    return format_float(obj, rt, *args, **kwargs)

@to_string.register(complex)
@to_string.register(np.complexfloating)
def _(obj, rt=PLAIN, *args, **kwargs):
    i = "\\mathrm{i}" if rt is LATEX else "i"
    real = to_string(float(obj.real), rt, *args, **kwargs)
    if obj.imag < 0:
        imag = to_string(float(-obj.imag), rt, *args, **kwargs)
        return real + " - " + imag + i
    return real + " + " + to_string(float(obj.imag), rt, *args, **kwargs) + i


def _join(items, rt, kind):
    pre, post = _delimiters[rt][kind]
    return pre + ", ".join(items) + post

@to_string.register(list)
@to_string.register(tuple)
@to_string.register(collections.deque)
@to_string.register(np.ndarray)
def _(obj, rt=PLAIN, *args, **kwargs):
    return _join([to_string(item, rt, *args, **kwargs) for item in obj],
                 rt, 'list')

@to_string.register(collections.abc.Set)
def _(obj, rt=PLAIN, *args, **kwargs):
    try:
        items = sorted(obj)
    except TypeError:
        #Not orderable, use the iteration order.
        items = list(obj)
    return _join([to_string(item, rt, *args, **kwargs) for item in items],
                 rt, 'set')

@to_string.register(collections.abc.Mapping)
def _(obj, rt=PLAIN, *args, **kwargs):
    #Keys are formatted without the options.
    items = [to_string(k, rt) + ": " + to_string(v, rt, *args, **kwargs)
             for k, v in obj.items()]
    return _join(items, rt, 'set')
