"""Canonical path primitives.

A path is one of :class:`Line`, :class:`Circle`, :class:`Arc` or
:class:`BezierSeed`.  Each is a frozen dataclass carrying a ``kind``
discriminant, so consumers can dispatch on ``path.kind`` without
``isinstance`` checks.  Points are plain ``(x, y)`` tuples of floats.

Values are normally built through the factories in
:mod:`vecpath.paths`, which validate and derive their fields.  The
dataclasses themselves perform no validation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

Point = Tuple[float, float]


class PathType(Enum):
    """Discriminant for the path variants."""
    LINE = "line"
    CIRCLE = "circle"
    ARC = "arc"
    BEZIER_SEED = "bezier-seed"


@dataclass(frozen=True)
class Line:
    """Straight segment from ``origin`` to ``end``."""

    origin: Point
    end: Point
    kind: PathType = field(default=PathType.LINE, init=False)

    @property
    def length(self) -> float:
        return math.hypot(self.end[0] - self.origin[0],
                          self.end[1] - self.origin[1])


@dataclass(frozen=True)
class Circle:
    """Full circle about ``origin``."""

    origin: Point
    radius: float
    kind: PathType = field(default=PathType.CIRCLE, init=False)


@dataclass(frozen=True)
class Arc:
    """Counter-clockwise arc from ``start_angle`` to ``end_angle``.

    Angles are in degrees.  ``end_angle`` may exceed 360 when the arc
    crosses the positive x axis.
    """

    origin: Point
    radius: float
    start_angle: float
    end_angle: float
    kind: PathType = field(default=PathType.ARC, init=False)

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle


@dataclass(frozen=True)
class BezierSeed:
    """End points and zero to two control points of a bezier curve."""

    origin: Point
    end: Point
    controls: Tuple[Point, ...] = ()
    kind: PathType = field(default=PathType.BEZIER_SEED, init=False)

    @property
    def order(self) -> int:
        """1 for a line-like seed, 2 for quadratic, 3 for cubic."""
        return len(self.controls) + 1


Path = Union[Line, Circle, Arc, BezierSeed]


__all__ = [
    "Point",
    "PathType",
    "Line",
    "Circle",
    "Arc",
    "BezierSeed",
    "Path",
]
