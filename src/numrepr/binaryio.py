# -*- coding: utf-8 -*-
"""
binaryio.py

Read and write values as fixed width binary records. This is independent of
the text formatting in the rest of the package.

The layout of each value is described by a ``dtype``:

 - Anything accepted by `numpy.dtype` (e.g. ``'<i4'``, ``'<f8'``,
   ``np.uint16``). Types without an explicit byte order are stored
   little endian.
 - ``str``: an unsigned 32 bit length followed by the UTF-8 bytes.
 - ``complex``: the real and imaginary parts as two doubles.
 - ``[inner]``: an unsigned 32 bit count followed by that many ``inner``
   records.

For ``write``, the dtype can be omitted for bools, ints, floats, strings,
complex numbers and lists of those.
"""
import io
import logging

import numpy as np

__all__ = ('BinaryFormatError', 'write', 'read', 'write_to_file',
           'read_from_file')

log = logging.getLogger(__name__)

_COUNT = np.dtype('<u4')

_default_dtypes = {
    bool: np.dtype('?'),
    int: np.dtype('<i8'),
    float: np.dtype('<f8'),
}


class BinaryFormatError(ValueError):
    pass


def _guess_dtype(value):
    for tp in (bool, int, float):
        #bool before int, since bools are ints.
        if isinstance(value, tp):
            return _default_dtypes[tp]
    if isinstance(value, (str, complex)):
        return type(value)
    if isinstance(value, np.generic):
        return value.dtype
    if isinstance(value, (list, tuple)):
        if not value:
            raise TypeError("Cannot guess the dtype of an empty sequence")
        guesses = [_guess_dtype(item) for item in value]
        if len({_dtype_key(g) for g in guesses}) > 1:
            raise TypeError("Cannot guess a common binary format for the "
                            "items of a sequence of mixed types: %s" %
                            sorted({type(item).__name__ for item in value}))
        return [guesses[0]]
    raise TypeError("Cannot guess the binary format of %s" %
                    type(value).__name__)

def _dtype_key(dtype):
    if isinstance(dtype, list):
        return tuple(_dtype_key(inner) for inner in dtype)
    if isinstance(dtype, np.dtype):
        return dtype.str
    return dtype

def _normalize(dtype):
    if dtype is str or dtype is complex or isinstance(dtype, list):
        return dtype
    dtype = np.dtype(dtype)
    if dtype.byteorder == '=':
        dtype = dtype.newbyteorder('<')
    return dtype


def write_to_file(value, stream, dtype=None):
    """Write ``value`` to the binary ``stream`` with the layout given by
    ``dtype``, which is guessed from the value if not given."""
    if dtype is None:
        dtype = _guess_dtype(value)
    dtype = _normalize(dtype)
    if isinstance(dtype, list):
        inner, = dtype
        stream.write(_COUNT.type(len(value)).tobytes())
        for item in value:
            write_to_file(item, stream, inner)
    elif dtype is str:
        data = value.encode('utf-8')
        stream.write(_COUNT.type(len(data)).tobytes())
        stream.write(data)
    elif dtype is complex:
        stream.write(np.array([value.real, value.imag], dtype='<f8').tobytes())
    else:
        arr = np.array(value, dtype=dtype)
        #Casting to an integer or bool type silently truncates.
        if dtype.kind in 'iub' and arr.item() != value:
            raise BinaryFormatError("%r cannot be stored exactly as %s"
                                    % (value, dtype))
        stream.write(arr.tobytes())

def _read_exactly(stream, size):
    data = stream.read(size)
    if len(data) != size:
        raise BinaryFormatError("Expected %d bytes but only %d are available"
                                % (size, len(data)))
    return data

def read_from_file(dtype, stream):
    """Read a value with the layout ``dtype`` from the binary ``stream``."""
    dtype = _normalize(dtype)
    if isinstance(dtype, list):
        inner, = dtype
        count = int(np.frombuffer(_read_exactly(stream, _COUNT.itemsize),
                                  _COUNT)[0])
        return [read_from_file(inner, stream) for _ in range(count)]
    if dtype is str:
        size = int(np.frombuffer(_read_exactly(stream, _COUNT.itemsize),
                                 _COUNT)[0])
        try:
            return _read_exactly(stream, size).decode('utf-8')
        except UnicodeDecodeError as e:
            raise BinaryFormatError("Invalid UTF-8 string: %s" % e) from e
    if dtype is complex:
        real, imag = np.frombuffer(_read_exactly(stream, 16), '<f8')
        return complex(real, imag)
    return np.frombuffer(_read_exactly(stream, dtype.itemsize), dtype)[0].item()


def write(value, dtype=None):
    """Return ``value`` encoded as bytes. See `write_to_file`."""
    stream = io.BytesIO()
    write_to_file(value, stream, dtype)
    return stream.getvalue()

def read(data, dtype):
    """Decode a value from ``data``. Trailing bytes are an error."""
    stream = io.BytesIO(data)
    value = read_from_file(dtype, stream)
    extra = len(data) - stream.tell()
    if extra:
        raise BinaryFormatError("%d unread bytes after the value" % extra)
    log.debug("Read %r with layout %s", value, dtype)
    return value
