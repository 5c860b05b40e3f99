import abc
import functools

import numpy

@functools.total_ordering
class Geometry(abc.ABC):
    """Common interface of all geometries: a centroid and a WKT rendering.

    Subclasses keep their coordinates in a read-only float64 array named
    '_coordinates'; equality, ordering, hashing and numpy conversion are all
    defined in terms of that array. Geometries of different kinds never
    compare equal and cannot be ordered against each other.
    """

    @abc.abstractmethod
    def centroid(self):
        """Return the geometric center of the geometry as a Point."""

    @abc.abstractmethod
    def wkt(self):
        """Return the Well-Known-Text representation of the geometry."""

    @property
    def coordinates(self):
        """Read-only float64 array of the coordinates of the geometry."""
        return self._coordinates

    def __array__(self, dtype=None, copy=None):
        if copy:
            return numpy.array(self._coordinates, dtype=dtype)
        return numpy.asarray(self._coordinates, dtype=dtype)

    def __str__(self):
        return self.wkt()

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(numpy.array_equal(self._coordinates, other._coordinates))

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._coordinates.tolist() < other._coordinates.tolist()

    def __hash__(self):
        return hash((type(self).__name__, tuple(self._coordinates.ravel().tolist())))
