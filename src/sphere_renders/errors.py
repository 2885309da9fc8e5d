"""
Error types raised by the sphere renderer.
"""


class InvalidRayError(ValueError):
    """A ray was cast with a zero-magnitude direction."""


class DegenerateVectorError(ZeroDivisionError):
    """A vector was divided by zero (e.g. normalizing a zero-length vector)."""
