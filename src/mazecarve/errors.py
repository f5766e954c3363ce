# src/mazecarve/errors.py
# Precondition failures raised at the call boundary. None are recoverable.


class MazeError(Exception):
    """Base class for every error raised by mazecarve."""


class InvalidDimension(MazeError, ValueError):
    """Grid width or height is not a positive integer."""


class InvalidGeometry(MazeError, ValueError):
    """Wall thickness or open space is not a positive integer."""


class OutOfRange(MazeError, IndexError):
    """Cell coordinate lies outside the grid."""
