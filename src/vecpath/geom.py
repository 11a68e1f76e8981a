## geometry utilities for vecpath path construction
## derived from the yapCAD foundational geometry library

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

"""geometry utilities for **vecpath**

====================
OVERVIEW
====================

The vecpath.geom module provides the point, angle, measurement,
intersection and transformation operations that the path factories in
``vecpath.paths`` are built on.  Everything here is a pure function of
its arguments: nothing is cached and nothing is mutated.

constants
=========

``epsilon`` is the tolerance used for "close enough" comparisons and
``pi2`` is 2*pi.  Redefine these at your peril.  Intersection tests
scale ``epsilon`` by the size of their inputs, so small geometry is
not mistaken for degenerate geometry.

points
======

Points are ``(x, y)`` tuples of floats.  ``point()`` will make a point
out of two scalars or out of any sequence whose first two elements are
numbers, so yapCAD style ``[x, y, z, w]`` vectors are accepted too
(only ``x`` and ``y`` are kept).  Booleans are never numbers.

angles
======

Angles are in degrees unless a function name says otherwise, and are
right-handed: a positive angle is a counter-clockwise sweep.  An arc
runs counter-clockwise from ``start_angle`` to ``end_angle``.

paths
=====

``path_intersection()``, ``path_move()`` and ``path_rotate()`` work
on the path values of ``vecpath.types`` and always return new values.

"""

from math import *
from dataclasses import replace
import mpmath as mpm

from vecpath.errors import InvalidConstructionArguments
from vecpath.types import PathType
import vecpath.xform as xform

## constants
epsilon=0.000005
pi2 = 2.0*pi

## operations on scalars
## -----------------------

## utility function to determine if argument is a "real" python
## number, since booleans are considered ints (True=1 and False=0 for
## integer arithmetic) but 1 and 0 are not considered boolean

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n,bool)) and isinstance(n,(int,float))

def close(a,b,tol=epsilon):
    """ are two scalars the same within ``tol``
    """
    return abs(a-b) < tol

## operations on points
## --------------------

def ispoint(x):
    """ is it a point, or something that can be read as one?"""
    return isinstance(x,(tuple,list)) and len(x) >= 2 \
        and isgoodnum(x[0]) and isgoodnum(x[1])

def point(x,y=None):
    """Point creation from a point-like sequence or from two scalars"""
    if y is None:
        if ispoint(x):
            return (float(x[0]),float(x[1]))
    elif isgoodnum(x) and isgoodnum(y):
        return (float(x),float(y))
    raise InvalidConstructionArguments('bad arguments passed to point(): {}, {}'.format(x,y))

def vclose(a,b,tol=epsilon):
    """ are two points the same within ``tol``"""
    return measure_point_distance(a,b) < tol

def point_add(p,v):
    """ translate point ``p`` by vector ``v``"""
    return (p[0]+v[0],p[1]+v[1])

def point_subtract(a,b):
    """ the vector from ``b`` to ``a``"""
    return (a[0]-b[0],a[1]-b[1])

def point_average(a,b):
    """ midpoint of two points"""
    return ((a[0]+b[0])/2.0,(a[1]+b[1])/2.0)

def point_middle(l):
    """ midpoint of a line's endpoints"""
    return point_average(l.origin,l.end)

def point_from_polar(radians,distance):
    """ the point ``distance`` from the origin at angle ``radians``"""
    return (distance*cos(radians),distance*sin(radians))

def point_clone(p):
    """ value copy of a point"""
    return point(p)

## the start and end points of an arc, in arc order
def point_from_arc(a):
    """return the start and end points of arc ``a`` as a tuple"""
    return (point_add(a.origin,
                      point_from_polar(angle_to_radians(a.start_angle),a.radius)),
            point_add(a.origin,
                      point_from_polar(angle_to_radians(a.end_angle),a.radius)))

## Compute the intersection of the infinite extensions of two lines.
## The determinant is the cross product of the direction vectors, so
## comparing it against the product of the line lengths makes the
## parallel test independent of scale.

def point_from_slope_intersection(l1,l2,tol=epsilon):
    """Return the intersection point of the infinite extensions of lines
    ``l1`` and ``l2``, or ``None`` if they are parallel.
    """
    x1,y1 = l1.origin
    x2,y2 = l1.end
    x3,y3 = l2.origin
    x4,y4 = l2.end

    denom=(x1-x2)*(y3-y4)-(y1-y2)*(x3-x4)
    scale = measure_point_distance(l1.origin,l1.end) * \
        measure_point_distance(l2.origin,l2.end)
    if scale == 0 or abs(denom) <= tol*scale:
        return None

    t = ((x1-x3)*(y3-y4) - (y1-y3)*(x3-x4))/denom
    return (x1 + t*(x2-x1), y1 + t*(y2-y1))

## operations on angles
## --------------------

def angle_to_radians(degrees):
    return degrees*pi2/360.0

def angle_to_degrees(radians):
    return radians*360.0/pi2

## reduce an angle to a single revolution, [0, 360)
def angle_no_revolutions(degrees):
    a = degrees % 360.0
    if a >= 360.0:
        a -= 360.0
    return a

def angle_of_point_in_degrees(origin,p):
    """angle of point ``p`` as seen from ``origin``, in degrees in [0, 360)"""
    d = point_subtract(p,origin)
    if d[0] == 0 and d[1] == 0:
        return 0.0
    return angle_no_revolutions(angle_to_degrees(atan2(d[1],d[0]) % pi2))

def angle_of_line_in_degrees(l):
    """angle of the direction vector of line ``l``"""
    return angle_of_point_in_degrees(l.origin,l.end)

## end angle of an arc, unwrapped so that it is never less than the
## start angle
def angle_of_arc_end(a):
    if a.end_angle < a.start_angle:
        revolutions = ceil((a.start_angle-a.end_angle)/360.0)
        return revolutions*360.0 + a.end_angle
    return a.end_angle

## angular extent of an arc, at most one revolution
def angle_of_arc_span(a):
    span = angle_of_arc_end(a) - a.start_angle
    if round(span,7) > 360.0:
        return angle_no_revolutions(span)
    return span

## measurement
## -----------

def measure_point_distance(a,b):
    """ euclidean distance between points ``a`` and ``b``"""
    return hypot(a[0]-b[0],a[1]-b[1])

def measure_is_between(value,limit1,limit2,exclusive):
    lo = min(limit1,limit2)
    hi = max(limit1,limit2)
    if exclusive:
        return lo < value < hi
    return lo <= value <= hi

def measure_is_between_arc_angles(angle,a,exclusive):
    """
    Determine if ``angle`` lies within the span of arc ``a``, going
    counter-clockwise from its start angle.  If ``exclusive`` is true
    the end angles themselves do not count.
    """
    start = angle_no_revolutions(a.start_angle)
    end = start + angle_of_arc_span(a)
    angle = angle_no_revolutions(angle)

    ## the span may cross zero, so also check one revolution either way
    return measure_is_between(angle,start,end,exclusive) or \
        measure_is_between(angle,start+360.0,end+360.0,exclusive) or \
        measure_is_between(angle,start-360.0,end-360.0,exclusive)

## Intersection functions
## ----------------------

## circle-circle intersection.  Returns a list of zero, one (tangent
## circles) or two points.

def _circleCircleIntersectXY(x1,r1,x2,r2):
    """non-value-safe function to compute the intersection of two circles"""

    d=measure_point_distance(x1,x2)

    ## tolerance relative to the size of the circles
    tol = epsilon*max(r1,r2)

    if d == 0:
        return [] # concentric, no stable intersection

    if d > r1+r2+tol:
        return [] # too far apart

    if d < abs(r1-r2)-tol:
        return [] # one circle fully inside the other

    ## Consider the triangle with side lengths r1, r2, and d.  The
    ## chord through both intersections crosses the line between the
    ## centers at distance id from x1, where
    ## id^2 + h^2 = r1^2, (d-id)^2 + h^2 = r2^2
    ## so that id = (r1^2-r2^2 + d^2)/2d

    mpr1 = mpm.mpf(r1)
    mpr2 = mpm.mpf(r2)
    mpd = mpm.mpf(d)
    mpid = (mpr1*mpr1 - mpr2*mpr2 + mpd*mpd)/(2*mpd)
    h2 = mpr1*mpr1 - mpid*mpid

    ## unit vector from x1 to x2, and the point on that line where
    ## the chord crosses it
    v1 = ((x2[0]-x1[0])/d,(x2[1]-x1[1])/d)
    base = point_add(x1,(v1[0]*float(mpid),v1[1]*float(mpid)))

    ## within tolerance of tangent, a single double-root point
    if h2 < mpm.mpf(tol)*mpm.mpf(tol):
        return [base]

    h = float(mpm.sqrt(h2))
    o = (v1[1],-v1[0]) # orthogonal to v1 in the XY plane
    return [point_add(base,(o[0]*h,o[1]*h)),
            point_add(base,(-o[0]*h,-o[1]*h))]

## line-circle intersection, with the line treated as a segment

def _lineCircleIntersectXY(l,x,r):
    """non-value-safe function to compute the intersection of a line and a circle"""

    ## solve for t in:  | p0 + t*V - x |^2 = r^2
    ## with a = V.V, b = 2 V.P, cc = P.P - r^2, P = p0 - x
    p0 = point_subtract(l.origin,x)
    V = point_subtract(l.end,l.origin)

    mpV0 = mpm.mpf(V[0])
    mpV1 = mpm.mpf(V[1])
    mpP0 = mpm.mpf(p0[0])
    mpP1 = mpm.mpf(p0[1])
    mpr = mpm.mpf(r)
    mpepsilon = mpm.mpf(epsilon)

    a = mpV0*mpV0+mpV1*mpV1
    if a == 0:
        return []
    b = 2*(mpV0*mpP0+mpV1*mpP1)
    cc = mpP0*mpP0+mpP1*mpP1-mpr*mpr
    d = b*b-4*a*cc

    ## within epsilon, scaled by the length of the line
    if mpm.fabs(d) < mpm.sqrt(a)*2*mpepsilon:
        tt = [ -b/(2*a) ]
    elif d < 0:
        return []
    else:
        tt = [ (-b + mpm.sqrt(d))/(2*a),
               (-b - mpm.sqrt(d))/(2*a) ]

    s = []
    for t in tt:
        t = float(t)
        if t < -epsilon or t > 1.0+epsilon:
            continue
        s.append(point_add(l.origin,(V[0]*t,V[1]*t)))
    return s

def _lineLineIntersectXY(l1,l2):
    """non-value-safe function to compute the intersection of two lines"""
    p = point_from_slope_intersection(l1,l2)
    if p is None:
        return []
    for l in (l1,l2):
        length = measure_point_distance(l.origin,l.end)
        if abs(measure_point_distance(l.origin,p) +
               measure_point_distance(p,l.end) - length) > epsilon:
            return []
    return [p]

def _isround(g):
    return g.kind in (PathType.CIRCLE,PathType.ARC)

## keep only the points that fall within the angular span of g, if g
## is an arc

def _onArc(g,pts):
    if g.kind != PathType.ARC:
        return pts
    return [ p for p in pts
             if measure_is_between_arc_angles(
                     angle_of_point_in_degrees(g.origin,p),g,False) ]

def path_intersection(g1,g2):
    """
    Compute the intersection points of two paths.  Lines are treated as
    segments and arcs are limited to their angular span.  Return a list
    of points, or ``None`` if there are no intersections.
    """
    for g in (g1,g2):
        kind = getattr(g,'kind',None)
        if kind == PathType.BEZIER_SEED:
            raise ValueError("can't intersect bezier seed {}".format(g))
        if not isinstance(kind,PathType):
            raise ValueError('bad thing passed to path_intersection: {}'.format(g))

    if _isround(g1) and _isround(g2):
        s = _circleCircleIntersectXY(g1.origin,g1.radius,g2.origin,g2.radius)
        s = _onArc(g2,_onArc(g1,s))
    elif _isround(g2):
        s = _onArc(g2,_lineCircleIntersectXY(g1,g2.origin,g2.radius))
    elif _isround(g1):
        s = _onArc(g1,_lineCircleIntersectXY(g2,g1.origin,g1.radius))
    else:
        s = _lineLineIntersectXY(g1,g2)

    if len(s) == 0:
        return None
    return s

## generalized transforms
## ----------------------

def path_move(x,origin):
    """
    Return a copy of path ``x`` relocated so that its origin is the
    point ``origin``.  Every other point of the path is shifted by the
    same amount, so the shape is unchanged.
    """
    origin = point(origin)
    delta = point_subtract(origin,x.origin)
    kind = getattr(x,'kind',None)
    if kind == PathType.LINE:
        return replace(x,origin=origin,end=point_add(x.end,delta))
    elif kind in (PathType.CIRCLE,PathType.ARC):
        return replace(x,origin=origin)
    elif kind == PathType.BEZIER_SEED:
        return replace(x,origin=origin,
                       end=point_add(x.end,delta),
                       controls=tuple(point_add(c,delta) for c in x.controls))
    else:
        raise ValueError("don't know how to move {}".format(x))

def path_rotate(x,ang,cent=(0.0,0.0)):
    """
    Return a copy of path ``x`` rotated ``ang`` degrees counter-clockwise
    about the point ``cent``.
    """
    if close(ang,0.0):
        return x
    mat = xform.RotationAbout(ang,cent)

    kind = getattr(x,'kind',None)
    if kind == PathType.LINE:
        return replace(x,origin=mat.mul(x.origin),end=mat.mul(x.end))
    elif kind == PathType.CIRCLE:
        return replace(x,origin=mat.mul(x.origin))
    elif kind == PathType.ARC:
        return replace(x,origin=mat.mul(x.origin),
                       start_angle=x.start_angle+ang,
                       end_angle=x.end_angle+ang)
    elif kind == PathType.BEZIER_SEED:
        return replace(x,origin=mat.mul(x.origin),
                       end=mat.mul(x.end),
                       controls=tuple(mat.mul(c) for c in x.controls))
    else:
        raise ValueError("don't know how to rotate {}".format(x))
