"""
Plain text and LaTeX representations of numbers with a controlled amount of
significant digits.
"""
from numrepr.floatformatting import (RepresentationType, format_float,
                                     format_int)
from numrepr.tostring import to_string, to_plain, to_latex

__version__ = '0.1'
