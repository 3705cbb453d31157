"""
Exceptions raised by the isogeo geometry kernel.

Dimension mismatches are programming errors in a statically-typed
setting.  Here they surface at runtime as ``DimensionError``, which
doubles as a ``ValueError`` for callers that only care about bad input.
A cartesian conversion from the zero-weight plane is a distinct fault,
``InvalidConversionError``, so it can never be confused with a shape
problem or leak through as infinities.
"""


class GeometryError(Exception):
    """Base exception for isogeo errors."""
    pass


class DimensionError(GeometryError, ValueError):
    """Operands or targets with incompatible dimensions."""
    pass


class InvalidConversionError(GeometryError, ArithmeticError):
    """Homogeneous to cartesian conversion from a zero weight."""
    pass


__all__ = [
    "GeometryError",
    "DimensionError",
    "InvalidConversionError",
]
