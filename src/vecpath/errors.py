"""Exceptions raised by vecpath path construction.

Every construction failure is a ``ValueError`` subclass, so callers
that already guard geometry calls with ``except ValueError`` keep
working.
"""


class PathError(ValueError):
    """Base class for all vecpath construction errors."""


class DegenerateInputError(PathError):
    """The arguments are well formed but describe no usable geometry.

    Examples are three collinear points for a circle, an SVG arc radius
    too small to span the chord between its endpoints, or a line whose
    endpoints coincide.
    """


class InvalidConstructionArguments(PathError, TypeError):
    """The arguments do not match the shape a factory expects."""


__all__ = [
    "PathError",
    "DegenerateInputError",
    "InvalidConstructionArguments",
]
