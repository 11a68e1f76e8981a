import pytest
from vecpath.geom import *
from vecpath.types import Arc, BezierSeed, Circle, Line
from vecpath.errors import InvalidConstructionArguments
## unit tests for vecpath geom.py

class TestPoint:
    """unit tests for vecpath point functions"""

    def test_create(self):
        a = point(5,0)
        b = point([0,5,-2,1])
        c = point((-2.5,4.5))
        assert a == (5.0,0.0)
        assert b == (0.0,5.0)
        assert c == (-2.5,4.5)
        assert point_clone(c) == c

    def test_discriminate(self):
        assert ispoint((1,2))
        assert ispoint([1.0,2.0,3.0,1.0])
        assert not ispoint((1,))
        assert not ispoint((True,2))
        assert not ispoint('ab')
        with pytest.raises(InvalidConstructionArguments):
            point('a',2)
        with pytest.raises(InvalidConstructionArguments):
            point([1])

    def test_arithmetic(self):
        a = point(5,0)
        b = point(0,5)
        assert point_add(a,b) == (5.0,5.0)
        assert point_subtract(a,b) == (5.0,-5.0)
        assert point_average(a,b) == (2.5,2.5)
        assert point_middle(Line(a,b)) == (2.5,2.5)
        assert close(measure_point_distance(a,b),sqrt(50))
        assert vclose(point_from_polar(pi/2,3),(0,3))
        assert vclose(point_from_polar(pi,2),(-2,0))

    def test_from_arc(self):
        a = Arc((1,1),2.0,0,90)
        start, end = point_from_arc(a)
        assert vclose(start,(3,1))
        assert vclose(end,(1,3))

class TestAngle:

    def test_conversion(self):
        assert close(angle_to_radians(180),pi)
        assert close(angle_to_degrees(pi/2),90)

    def test_of_point(self):
        o = point(1,1)
        assert close(angle_of_point_in_degrees(o,(2,1)),0)
        assert close(angle_of_point_in_degrees(o,(1,2)),90)
        assert close(angle_of_point_in_degrees(o,(0,1)),180)
        assert close(angle_of_point_in_degrees(o,(1,0)),270)
        assert angle_of_point_in_degrees(o,o) == 0.0
        ang = angle_of_point_in_degrees((0,0),(1,-1e-17))
        assert ang >= 0.0 and ang < 360.0

    def test_of_line(self):
        assert close(angle_of_line_in_degrees(Line((0,0),(1,1))),45)
        assert close(angle_of_line_in_degrees(Line((1,1),(0,0))),225)

    def test_no_revolutions(self):
        assert close(angle_no_revolutions(370),10)
        assert close(angle_no_revolutions(-90),270)
        assert angle_no_revolutions(360) == 0.0

    def test_arc_span(self):
        assert close(angle_of_arc_span(Arc((0,0),1,0,90)),90)
        assert close(angle_of_arc_span(Arc((0,0),1,270,90)),180)
        assert close(angle_of_arc_end(Arc((0,0),1,270,90)),450)
        assert close(angle_of_arc_span(Arc((0,0),1,0,360)),360)

class TestMeasure:

    def test_between_arc_angles(self):
        a = Arc((0,0),1,0,90)
        assert measure_is_between_arc_angles(45,a,False)
        assert measure_is_between_arc_angles(90,a,False)
        assert not measure_is_between_arc_angles(90,a,True)
        assert not measure_is_between_arc_angles(180,a,False)
        assert measure_is_between_arc_angles(405,a,False)

    def test_between_wrapped_arc(self):
        a = Arc((0,0),1,270,90)
        assert measure_is_between_arc_angles(0,a,False)
        assert measure_is_between_arc_angles(300,a,False)
        assert measure_is_between_arc_angles(45,a,False)
        assert not measure_is_between_arc_angles(180,a,False)

    def test_between_unwrapped_arc(self):
        a = Arc((0,0),1,300,420)
        assert measure_is_between_arc_angles(30,a,False)
        assert measure_is_between_arc_angles(330,a,False)
        assert not measure_is_between_arc_angles(90,a,False)

class TestSlopeIntersection:

    def test_crossing(self):
        l1 = Line((0,0),(1,1))
        l2 = Line((0,2),(1,1.5))
        p = point_from_slope_intersection(l1,l2)
        assert vclose(p,(4.0/3.0,4.0/3.0))

    def test_extension(self):
        # the segments themselves do not meet
        l1 = Line((0,0),(1,0))
        l2 = Line((5,1),(5,2))
        assert vclose(point_from_slope_intersection(l1,l2),(5,0))

    def test_vertical(self):
        l1 = Line((3,-1),(3,1))
        l2 = Line((0,0),(1,1))
        assert vclose(point_from_slope_intersection(l1,l2),(3,3))

    def test_parallel(self):
        l1 = Line((0,0),(1,1))
        l2 = Line((0,1),(2,3))
        assert point_from_slope_intersection(l1,l2) is None
        assert point_from_slope_intersection(l1,l1) is None

    def test_small_lines(self):
        l1 = Line((0,0),(1e-6,0))
        l2 = Line((5e-7,-1e-6),(5e-7,1e-6))
        p = point_from_slope_intersection(l1,l2)
        assert p == pytest.approx((5e-7,0),abs=1e-15)

class TestIntersection:

    def test_circle_circle(self):
        c1 = Circle((0,0),2)
        c2 = Circle((2,0),2)
        pts = path_intersection(c1,c2)
        assert len(pts) == 2
        for p in pts:
            assert close(measure_point_distance(p,c1.origin),2)
            assert close(measure_point_distance(p,c2.origin),2)
        ys = sorted(p[1] for p in pts)
        assert close(ys[0],-sqrt(3)) and close(ys[1],sqrt(3))

    def test_circle_circle_tangent(self):
        pts = path_intersection(Circle((1,0),1),Circle((-1,0),1))
        assert len(pts) == 1
        assert vclose(pts[0],(0,0))

    def test_circle_circle_none(self):
        assert path_intersection(Circle((0,0),1),Circle((5,0),1)) is None
        assert path_intersection(Circle((0,0),5),Circle((1,0),1)) is None
        assert path_intersection(Circle((0,0),1),Circle((0,0),1)) is None

    def test_arc_circle(self):
        a = Arc((0,0),2,0,180)
        c = Circle((2,0),2)
        pts = path_intersection(a,c)
        assert len(pts) == 1
        assert vclose(pts[0],(1,sqrt(3)))

    def test_line_circle(self):
        l = Line((-5,0),(5,0))
        pts = path_intersection(l,Circle((0,0),2))
        assert len(pts) == 2
        assert sorted(round(p[0],6) for p in pts) == [-2.0,2.0]
        # order of arguments does not matter
        assert len(path_intersection(Circle((0,0),2),l)) == 2
        # segment too short to reach the circle
        assert path_intersection(Line((-1,0),(1,0)),Circle((0,0),2)) is None

    def test_line_line(self):
        pts = path_intersection(Line((0,0),(2,2)),Line((0,2),(2,0)))
        assert len(pts) == 1 and vclose(pts[0],(1,1))
        assert path_intersection(Line((0,0),(1,1)),Line((0,2),(0.5,1.5))) is None

    def test_small_circles(self):
        c1 = Circle((0,0),1e-6)
        c2 = Circle((1.5e-6,0),1e-6)
        pts = path_intersection(c1,c2)
        assert len(pts) == 2
        for p in pts:
            assert measure_point_distance(p,c1.origin) == pytest.approx(1e-6)
            assert measure_point_distance(p,c2.origin) == pytest.approx(1e-6)
        # a short chord between two large circles
        pts = path_intersection(Circle((0,0),1),Circle((1e-6,0),1))
        assert len(pts) == 2
        assert sorted(round(p[1],6) for p in pts) == [-1.0,1.0]

    def test_bad(self):
        with pytest.raises(ValueError):
            path_intersection(BezierSeed((0,0),(1,1)),Circle((0,0),1))
        with pytest.raises(ValueError):
            path_intersection('foo',Circle((0,0),1))

class TestTransform:

    def test_move(self):
        l = Line((0,0),(10,0))
        m = path_move(l,(1,2))
        assert m == Line((1.0,2.0),(11.0,2.0))
        assert l == Line((0,0),(10,0))
        a = Arc((0,0),1,0,90)
        assert path_move(a,(3,3)) == Arc((3.0,3.0),1,0,90)
        b = BezierSeed((0,0),(4,0),((1,1),(3,1)))
        mb = path_move(b,(0,1))
        assert mb.end == (4.0,1.0)
        assert mb.controls == ((1.0,2.0),(3.0,2.0))

    def test_rotate(self):
        l = Line((1,0),(2,0))
        r = path_rotate(l,90)
        assert vclose(r.origin,(0,1)) and vclose(r.end,(0,2))
        r = path_rotate(l,90,(1,0))
        assert vclose(r.origin,(1,0)) and vclose(r.end,(1,1))
        assert path_rotate(l,0) is l

    def test_rotate_arc(self):
        a = Arc((1,0),1,0,90)
        r = path_rotate(a,180,(0,0))
        assert vclose(r.origin,(-1,0))
        assert close(r.start_angle,180) and close(r.end_angle,270)
        c = path_rotate(Circle((0,2),1),-90)
        assert vclose(c.origin,(2,0)) and c.radius == 1

    def test_bad(self):
        with pytest.raises(ValueError):
            path_rotate((1,2),45)
