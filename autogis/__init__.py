'''
# autogis

Minimal planar vector geometry: points, line segments, line strings and
multi-points, each able to report its centroid and render itself as
Well-Known Text (WKT).

 - error: GeometryError and its subclasses TooFewCoordinates, InvalidCoordinates
   and EmptyGeometry.
 - helpers: coercion of caller-supplied numbers to float64 coordinate arrays,
   and WKT number formatting.
 - geometry: the Geometry base class (centroid() and wkt()).
 - point: Point and MultiPoint.
 - line_string: LineSegment, LineString, and LineSegments, the one-shot
   sequence of consecutive segments of a LineString.
'''

from .error import EmptyGeometry, GeometryError, InvalidCoordinates, TooFewCoordinates
from .geometry import Geometry
from .line_string import LineSegment, LineSegments, LineString
from .point import MultiPoint, Point
