"""Conversion of caller-supplied numbers into the float64 coordinates stored
by every geometry, and formatting of those coordinates as WKT text.
"""

import logging
import numbers

import numpy

from .error import InvalidCoordinates

_logger = logging.getLogger(__name__)

COORDINATE_DIMENSIONS = 2

def _invalid(value, reason):
    _logger.debug('Rejecting coordinate %r: %s', value, reason)
    return InvalidCoordinates(value, reason)

def to_float(value):
    """Convert a single real number to a python float.

    Any number registered as numbers.Real (python ints and floats, Fractions,
    numpy integer and floating scalars) is accepted, provided the conversion
    loses nothing. NaN and infinities pass through unchanged.

    Raises InvalidCoordinates for non-numeric input (including bools), for
    values too large for a double, and for values that a double can only
    approximate, such as 2**53 + 1 or Fraction(1, 3).
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise _invalid(value, 'not a real number')
    if isinstance(value, numbers.Integral):
        value = int(value) # compare as a python int so numpy ints do not round first
    try:
        result = float(value)
    except OverflowError:
        raise _invalid(value, 'too large for double precision') from None
    if result != value and result == result:
        raise _invalid(value, 'cannot be represented exactly in double precision')
    return result

def float_coordinates(coordinates):
    """Convert a sequence of coordinate pairs into a read-only float64 array.

    Parameters:
        coordinates: sequence of n (x, y) pairs, each pair a list, tuple or
            array of two real numbers; or an array of shape (n, 2).

    Returns: non-writeable array of shape (n, 2) and dtype float64. An empty
        input gives an array of shape (0, 2).
    """
    rows = []
    for pair in coordinates:
        try:
            values = list(pair)
        except TypeError:
            raise _invalid(pair, 'not a coordinate pair') from None
        if len(values) != COORDINATE_DIMENSIONS:
            raise _invalid(pair, 'expected {} values, got {}'.format(COORDINATE_DIMENSIONS, len(values)))
        rows.append([to_float(v) for v in values])
    array = numpy.array(rows, dtype=float).reshape(len(rows), COORDINATE_DIMENSIONS)
    array.flags.writeable = False
    return array

def format_number(value):
    """Render a float for WKT output: the shortest decimal that round-trips,
    in positional notation, with no trailing zeros or trailing decimal point.
    E.g. 0.0 -> '0', 0.5 -> '0.5', 1e-7 -> '0.0000001'."""
    return numpy.format_float_positional(float(value), trim='-')

def format_coordinates(coordinates):
    """Render an array of shape (n, 2) as 'x1 y1, x2 y2, ...'."""
    return ', '.join('{} {}'.format(format_number(x), format_number(y)) for x, y in coordinates)
