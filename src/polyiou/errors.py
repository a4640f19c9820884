"""
Exception types raised by polyiou.
"""


class GeometryError(ValueError):
    """Base class for geometric input errors."""


class DegenerateGeometryError(GeometryError):
    """Raised when an operation is undefined for the given geometry.

    Examples are normalizing a zero length vector or intersecting two
    parallel lines.
    """


class ConvexityError(GeometryError):
    """Raised when a vertex loop does not describe a convex polygon."""
