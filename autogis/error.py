class GeometryError(ValueError):
    """Base class for errors raised while building or measuring a geometry."""

class TooFewCoordinates(GeometryError):
    """A LineString was given fewer coordinate pairs than it needs.

    The number of pairs actually supplied is kept in the 'count' attribute."""
    def __init__(self, count, minimum=2):
        self.count = count
        self.minimum = minimum
        super().__init__('A LineString requires at least {} coordinates, got {}.'.format(minimum, count))

class InvalidCoordinates(GeometryError):
    """A coordinate value or coordinate pair could not be converted to
    double-precision floating point. The offending input is kept in 'value'."""
    def __init__(self, value, reason):
        self.value = value
        super().__init__('Invalid coordinate {!r}: {}'.format(value, reason))

class EmptyGeometry(GeometryError):
    """An operation that needs at least one point was called on an empty geometry."""
    def __init__(self, kind):
        self.kind = kind
        super().__init__('An empty {} has no centroid.'.format(kind))
