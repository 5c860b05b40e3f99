import collections
import logging

import numpy

from . import helpers
from .error import InvalidCoordinates, TooFewCoordinates
from .geometry import Geometry
from .point import Point

_logger = logging.getLogger(__name__)

MIN_COORDINATES = 2

def _segment_lengths(coordinates):
    return numpy.sqrt(((coordinates[:-1] - coordinates[1:])**2).sum(axis=1))

class LineSegment(Geometry):
    """A straight line connecting exactly two points.

    Parameters:
        coordinates: two (x, y) pairs of any real numbers, e.g. [[0, 0], [1, 1]].
            The two points may coincide.
    """
    def __init__(self, coordinates):
        coordinates = helpers.float_coordinates(coordinates)
        if len(coordinates) != 2:
            _logger.debug('LineSegment given %d coordinates', len(coordinates))
            raise InvalidCoordinates(coordinates.tolist(), 'a LineSegment needs exactly 2 coordinates')
        self._coordinates = coordinates

    @property
    def source(self):
        return Point(*self._coordinates[0])

    @property
    def target(self):
        return Point(*self._coordinates[1])

    def __repr__(self):
        return 'LineSegment({!r})'.format(self._coordinates.tolist())

    def length(self):
        return float(_segment_lengths(self._coordinates)[0])

    def centroid(self):
        """The centroid of a LineSegment is its midpoint."""
        (x1, y1), (x2, y2) = self._coordinates
        return Point((x1 + x2) / 2, (y1 + y2) / 2)

    def wkt(self):
        """Return 'LINESTRING (x1 y1, x2 y2)'."""
        return 'LINESTRING ({})'.format(helpers.format_coordinates(self._coordinates))

class LineSegments:
    """The consecutive LineSegments of a LineString, handed out once each.

    A LineSegments object is its own iterator: iterating over it removes the
    segments as they are produced, so a second pass yields nothing. len()
    reports the number of segments not yet consumed.
    """
    def __init__(self, segments):
        self._segments = collections.deque(segments)

    @classmethod
    def from_line_string(cls, line_string):
        """Split a LineString of n coordinates into its n-1 segments, in order.
        Segment i runs from coordinate i to coordinate i+1."""
        coordinates = line_string.coordinates
        return cls(LineSegment([start, end]) for start, end in zip(coordinates[:-1], coordinates[1:]))

    def __iter__(self):
        return self

    def __next__(self):
        if not self._segments:
            raise StopIteration
        return self._segments.popleft()

    def __len__(self):
        return len(self._segments)

    def __repr__(self):
        return 'LineSegments({!r})'.format(list(self._segments))

class LineString(Geometry):
    """An ordered polyline through two or more points.

    Parameters:
        coordinates: sequence of (x, y) pairs of any real numbers, or an array
            of shape (n, 2).

    Raises TooFewCoordinates if fewer than two pairs are given.

    Iterating over a LineString yields its coordinates as (x, y) float tuples,
    in order; the iteration may be repeated.
    """
    def __init__(self, coordinates):
        coordinates = list(coordinates)
        if len(coordinates) < MIN_COORDINATES:
            _logger.debug('LineString given %d coordinates', len(coordinates))
            raise TooFewCoordinates(len(coordinates), MIN_COORDINATES)
        self._coordinates = helpers.float_coordinates(coordinates)

    def __iter__(self):
        for x, y in self._coordinates:
            yield float(x), float(y)

    def __len__(self):
        return len(self._coordinates)

    def __repr__(self):
        return 'LineString({!r})'.format(self._coordinates.tolist())

    def line_segments(self):
        return LineSegments.from_line_string(self)

    def length(self):
        """Total length of the polyline."""
        return float(_segment_lengths(self._coordinates).sum())

    def centroid(self):
        """Return the length-weighted mean of the segment midpoints.

        If every vertex coincides, so that the total length is zero, the mean
        of the vertices is returned instead."""
        lengths = _segment_lengths(self._coordinates)
        total = lengths.sum()
        if total == 0:
            x, y = self._coordinates.mean(axis=0)
        else:
            midpoints = (self._coordinates[:-1] + self._coordinates[1:]) / 2
            x, y = (midpoints * lengths[:, numpy.newaxis]).sum(axis=0) / total
        return Point(x, y)

    def wkt(self):
        """Return 'LINESTRING (x1 y1, ..., xn yn)'."""
        return 'LINESTRING ({})'.format(helpers.format_coordinates(self._coordinates))
