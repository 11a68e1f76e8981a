## path construction for vecpath

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Factories for the canonical path primitives.

Each input form has its own named factory with a fixed signature:

- ``line(origin, end)``
- ``circle(origin, radius)``, ``circle_from_two_points(a, b)``,
  ``circle_from_three_points(a, b, c)``
- ``arc(origin, radius, start_angle, end_angle)``,
  ``arc_from_two_points(a, b, clockwise=False)``,
  ``arc_from_three_points(a, b, c)``,
  ``arc_from_svg(a, b, radius, large_arc, clockwise)``
- ``chord(arc)``
- ``parallel(to_line, distance, near_point)``
- ``bezier_seed_from_points(points)``, ``bezier_seed(origin, controls, end)``,
  ``bezier_seed_cubic(origin, control1, control2, end)``

Factories either return a fully populated, frozen value or raise.
Arguments of the wrong shape raise
:class:`~vecpath.errors.InvalidConstructionArguments`; arguments that
describe no usable geometry (collinear points, a radius too small for
its chord, coincident endpoints) raise
:class:`~vecpath.errors.DegenerateInputError`.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Sequence

from vecpath.errors import DegenerateInputError, InvalidConstructionArguments
from vecpath.geom import (
    angle_of_line_in_degrees,
    angle_of_point_in_degrees,
    angle_to_radians,
    epsilon,
    isgoodnum,
    ispoint,
    measure_is_between_arc_angles,
    measure_point_distance,
    path_intersection,
    path_move,
    path_rotate,
    point,
    point_add,
    point_average,
    point_from_arc,
    point_from_polar,
    point_from_slope_intersection,
    point_middle,
    vclose,
)
from vecpath.types import Arc, BezierSeed, Circle, Line, Point

logger = logging.getLogger(__name__)


def _number(value, name: str) -> float:
    if not isgoodnum(value):
        raise InvalidConstructionArguments(f"{name} must be a number, got {value!r}")
    return float(value)


def _radius(value, name: str = "radius") -> float:
    r = _number(value, name)
    if r <= 0:
        raise DegenerateInputError(f"{name} must be positive, got {r}")
    return r


def _point(value, name: str) -> Point:
    if not ispoint(value):
        raise InvalidConstructionArguments(f"{name} must be a point, got {value!r}")
    return point(value)


def _flag(value, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isgoodnum(value) and value in (0, 1):
        return bool(value)
    raise InvalidConstructionArguments(f"{name} must be a boolean flag, got {value!r}")


def _unwrap_end(start: float, end: float) -> float:
    ## keep the counter-clockwise sweep from start to end non-negative
    if end < start:
        end += 360.0
    return end


## Line
## ----

def line(origin, end) -> Line:
    """Line from ``origin`` to ``end``."""
    o = _point(origin, "origin")
    e = _point(end, "end")
    if o == e:
        raise DegenerateInputError(f"line endpoints coincide at {o}")
    return Line(o, e)


## Circle
## ------

def circle(origin, radius) -> Circle:
    """Circle from a center point and a radius."""
    return Circle(_point(origin, "origin"), _radius(radius))


def circle_from_two_points(point_a, point_b) -> Circle:
    """Circle that has the segment from ``point_a`` to ``point_b`` as a diameter."""
    a = _point(point_a, "point_a")
    b = _point(point_b, "point_b")
    if a == b:
        raise DegenerateInputError(f"diameter endpoints coincide at {a}")
    origin = point_average(a, b)
    return Circle(origin, measure_point_distance(origin, a))


def circle_from_three_points(point_a, point_b, point_c) -> Circle:
    """Circle passing through three points.

    The center is where the perpendicular bisectors of AB and BC meet.
    Collinear points have parallel bisectors and raise
    :class:`DegenerateInputError`.
    """
    a = _point(point_a, "point_a")
    b = _point(point_b, "point_b")
    c = _point(point_c, "point_c")

    ## two chords with the middle point in common
    chords = [line(a, b), line(b, c)]

    ## turn each chord about its own midpoint to get its bisector
    perpendiculars = [path_rotate(l, 90, point_middle(l)) for l in chords]

    origin = point_from_slope_intersection(perpendiculars[0], perpendiculars[1])
    if origin is None:
        logger.debug("no circumcenter for collinear points %s, %s, %s", a, b, c)
        raise DegenerateInputError(f"points {a}, {b}, {c} are collinear")

    return Circle(origin, measure_point_distance(origin, a))


## Arc
## ---

class _ArcSpan(NamedTuple):
    origin: Point
    start_angle: float
    end_angle: float
    size: float


def arc(origin, radius, start_angle, end_angle) -> Arc:
    """Arc from a center, radius, and start and end angles in degrees.

    The angles are stored as given.
    """
    return Arc(_point(origin, "origin"), _radius(radius),
               _number(start_angle, "start_angle"),
               _number(end_angle, "end_angle"))


def arc_from_two_points(point_a, point_b, clockwise=False) -> Arc:
    """Half circle between two points.

    The arc runs counter-clockwise from ``point_a`` to ``point_b``, or
    from ``point_b`` to ``point_a`` if ``clockwise`` is set.
    """
    clockwise = _flag(clockwise, "clockwise")
    c = circle_from_two_points(point_a, point_b)
    a = point(point_a)
    b = point(point_b)
    first, second = (b, a) if clockwise else (a, b)

    start = angle_of_point_in_degrees(c.origin, first)
    end = angle_of_point_in_degrees(c.origin, second)
    return Arc(c.origin, c.radius, start, _unwrap_end(start, end))


def arc_from_three_points(point_a, point_b, point_c) -> Arc:
    """Arc from ``point_a`` to ``point_c`` that passes through ``point_b``."""
    c = circle_from_three_points(point_a, point_b, point_c)
    angles = [angle_of_point_in_degrees(c.origin, point(p))
              for p in (point_a, point_b, point_c)]

    result = Arc(c.origin, c.radius, angles[0], angles[2])

    ## take the other way around if this arc misses the middle point
    if not measure_is_between_arc_angles(angles[1], result, False):
        result = Arc(c.origin, c.radius, angles[2], angles[0])

    return Arc(result.origin, result.radius, result.start_angle,
               _unwrap_end(result.start_angle, result.end_angle))


def arc_from_svg(point_a, point_b, radius, large_arc, clockwise) -> Arc:
    """Arc between two points in the style of the SVG ``A`` path command.

    In general two circles of ``radius`` pass through both points.
    Each gives one arc from ``point_a`` to ``point_b`` (reversed if
    ``clockwise`` is set); ``large_arc`` picks the one with the larger
    angular span, otherwise the one with the smaller span is used.

    If ``radius`` is less than half the distance between the points no
    circle fits and :class:`DegenerateInputError` is raised.  Coincident
    points raise it too, since they leave the center undetermined.
    """
    a = _point(point_a, "point_a")
    b = _point(point_b, "point_b")
    r = _radius(radius)
    large_arc = _flag(large_arc, "large_arc")
    clockwise = _flag(clockwise, "clockwise")
    if a == b:
        raise DegenerateInputError(f"svg arc endpoints coincide at {a}")

    ## candidate centers lie at distance r from both points
    origins = path_intersection(Circle(a, r), Circle(b, r))
    if not origins:
        logger.debug("radius %s cannot span %s to %s", r, a, b)
        raise DegenerateInputError(
            f"radius {r} is too small to reach from {a} to {b}")

    ## tangent circles give a single double-root center
    if len(origins) == 1:
        origins = [origins[0], origins[0]]

    first, second = (b, a) if clockwise else (a, b)

    spans = []
    for origin in origins:
        start = angle_of_point_in_degrees(origin, first)
        end = _unwrap_end(start, angle_of_point_in_degrees(origin, second))
        span = _ArcSpan(origin, start, end, end - start)

        ## insert sorted by size ascending
        if not spans or span.size > spans[0].size:
            spans.append(span)
        else:
            spans.insert(0, span)

    span = spans[1 if large_arc else 0]
    logger.debug("svg arc candidates %s, large_arc=%s picks %s", spans, large_arc, span)
    return Arc(span.origin, r, span.start_angle, span.end_angle)


## Chord
## -----

def chord(source: Arc) -> Line:
    """Line joining the start and end points of an arc."""
    if not isinstance(source, Arc):
        raise InvalidConstructionArguments(f"chord needs an arc, got {source!r}")
    start, end = point_from_arc(source)
    ## a full revolution brings the end back onto the start
    if vclose(start, end, epsilon * source.radius):
        raise DegenerateInputError(f"arc {source} has no chord, its ends coincide")
    return line(start, end)


## Parallel
## --------

def parallel(to_line: Line, distance, near_point) -> Line:
    """Line parallel to ``to_line`` at ``distance`` from it.

    Of the two possible parallels, the one whose origin is nearer to
    ``near_point`` is returned.  On a tie the parallel at -90 degrees
    from the line direction wins.
    """
    if not isinstance(to_line, Line):
        raise InvalidConstructionArguments(f"parallel needs a line, got {to_line!r}")
    distance = _number(distance, "distance")
    near = _point(near_point, "near_point")
    if point(to_line.origin) == point(to_line.end):
        raise DegenerateInputError("cannot offset a zero-length line")

    angle_of_line = angle_of_line_in_degrees(to_line)

    def new_origin(offset_angle):
        origin = point_add(to_line.origin,
                           point_from_polar(angle_to_radians(angle_of_line + offset_angle),
                                            distance))
        return origin, measure_point_distance(origin, near)

    (origin1, nearness1), (origin2, nearness2) = new_origin(-90), new_origin(90)
    origin = origin1 if nearness1 <= nearness2 else origin2

    return path_move(to_line, origin)


## BezierSeed
## ----------

def bezier_seed_from_points(points: Sequence) -> BezierSeed:
    """Bezier seed from ``[origin, *controls, end]``.

    Two points give a line-like seed, three a quadratic and four a cubic.
    """
    if not isinstance(points, (list, tuple)) or ispoint(points):
        raise InvalidConstructionArguments(f"expected a sequence of points, got {points!r}")
    if len(points) not in (2, 3, 4):
        raise InvalidConstructionArguments(
            f"a bezier seed needs 2 to 4 points, got {len(points)}")
    pts = [_point(p, f"points[{i}]") for i, p in enumerate(points)]
    return BezierSeed(pts[0], pts[-1], tuple(pts[1:-1]))


def bezier_seed(origin, controls, end) -> BezierSeed:
    """Bezier seed from an origin, one control point or a sequence of
    control points, and an end point.
    """
    o = _point(origin, "origin")
    e = _point(end, "end")
    if ispoint(controls):
        return BezierSeed(o, e, (point(controls),))
    if not isinstance(controls, (list, tuple)) or len(controls) not in (1, 2):
        raise InvalidConstructionArguments(
            f"controls must be a point or one or two points, got {controls!r}")
    return BezierSeed(o, e, tuple(_point(c, f"controls[{i}]")
                                  for i, c in enumerate(controls)))


def bezier_seed_cubic(origin, control1, control2, end) -> BezierSeed:
    """Cubic bezier seed from four explicit points."""
    return BezierSeed(_point(origin, "origin"), _point(end, "end"),
                      (_point(control1, "control1"), _point(control2, "control2")))


__all__ = [
    "line",
    "circle",
    "circle_from_two_points",
    "circle_from_three_points",
    "arc",
    "arc_from_two_points",
    "arc_from_three_points",
    "arc_from_svg",
    "chord",
    "parallel",
    "bezier_seed_from_points",
    "bezier_seed",
    "bezier_seed_cubic",
]
