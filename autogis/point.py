import logging

import numpy

from . import helpers
from .error import EmptyGeometry
from .geometry import Geometry

_logger = logging.getLogger(__name__)

class Point(Geometry):
    """A single location in the plane.

    Construct from x and y given as any real numbers; both are stored as
    doubles, so Point(0, 1) == Point(0.0, 1.0).

    A Point unpacks like a pair (x, y = point), so Points can be used wherever
    a coordinate pair is expected.
    """
    def __init__(self, x, y):
        coordinates = numpy.array([helpers.to_float(x), helpers.to_float(y)])
        coordinates.flags.writeable = False
        self._coordinates = coordinates

    @property
    def x(self):
        return float(self._coordinates[0])

    @property
    def y(self):
        return float(self._coordinates[1])

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return 'Point({!r}, {!r})'.format(self.x, self.y)

    def centroid(self):
        """A Point is its own centroid; a copy is returned."""
        return Point(self.x, self.y)

    def wkt(self):
        """Return 'POINT (x y)'."""
        return 'POINT ({} {})'.format(helpers.format_number(self.x), helpers.format_number(self.y))

class MultiPoint(Geometry):
    """An ordered collection of Points treated as a single geometry.

    Parameters:
        points: sequence of (x, y) pairs (or Points) of any real numbers.
            May be empty.

    Iterating over a MultiPoint yields its Points in the order given.
    """
    def __init__(self, points):
        self._coordinates = helpers.float_coordinates(points)

    def __iter__(self):
        for x, y in self._coordinates:
            yield Point(x, y)

    def __len__(self):
        return len(self._coordinates)

    def __repr__(self):
        return 'MultiPoint({!r})'.format(self._coordinates.tolist())

    def centroid(self):
        """Return the coordinate-wise mean of the points.

        Raises EmptyGeometry if the MultiPoint holds no points."""
        if len(self) == 0:
            _logger.debug('Centroid requested for an empty MultiPoint')
            raise EmptyGeometry('MultiPoint')
        x, y = self._coordinates.sum(axis=0) / len(self)
        return Point(x, y)

    def wkt(self):
        """Return 'MULTIPOINT (x1 y1, x2 y2, ...)', or 'MULTIPOINT EMPTY'."""
        if len(self) == 0:
            return 'MULTIPOINT EMPTY'
        return 'MULTIPOINT ({})'.format(helpers.format_coordinates(self._coordinates))
