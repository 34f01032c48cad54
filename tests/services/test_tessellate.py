"""Tests for boundary tessellation."""

from __future__ import annotations

import math

import pytest

from asselect.contracts.yaixm import Arc, Volume
from asselect.errors import AmbiguousArcStartError, MalformedCoordinateError, MalformedDistanceError
from asselect.services.geo import METRES_PER_DEGREE, bearing_from, offset_point, parse_coordinate
from asselect.services.tessellate import CIRCLE_POINTS, arc_points, tessellate
from tests.yaixm_data import SQUARE, arc, circle, line, volume

NORTH = "520000N 0005000W"
CENTRE = "515000N 0005000W"
SOUTH = "514000N 0005000W"
TEN_NM = 10 * 1852.0


def boundary(*segments):
    return Volume.model_validate(volume(list(segments))).boundary


def distance(a, b):
    """Equirectangular distance in metres."""
    dy = (b[0] - a[0]) * METRES_PER_DEGREE
    dx = (b[1] - a[1]) * METRES_PER_DEGREE * math.cos(math.radians(a[0]))
    return math.hypot(dx, dy)


class TestPolygon:
    def test_line_closed(self):
        ring = tessellate(boundary(SQUARE))
        assert len(ring) == 5
        assert ring[0] == ring[-1] == parse_coordinate("520000N 0010000W")

    def test_already_closed_not_doubled(self):
        ring = tessellate(boundary(line(NORTH, SOUTH, "514000N 0010000W", NORTH)))
        assert len(ring) == 4


class TestCircle:
    def test_ring(self):
        ring = tessellate(boundary(circle(CENTRE, "10 nm")))
        centre = parse_coordinate(CENTRE)
        assert len(ring) == CIRCLE_POINTS + 1
        assert ring[0] == ring[-1]
        assert all(distance(centre, p) == pytest.approx(TEN_NM) for p in ring)

    def test_starts_north_clockwise(self):
        ring = tessellate(boundary(circle(CENTRE, "10 nm")))
        centre = parse_coordinate(CENTRE)
        assert ring[0][0] > centre[0]
        assert ring[0][1] == pytest.approx(centre[1])
        assert ring[90][1] > centre[1]

    def test_bad_radius(self):
        with pytest.raises(MalformedDistanceError):
            tessellate(boundary(circle(CENTRE, "10 leagues long")))


class TestArc:
    def test_clockwise(self):
        ring = tessellate(boundary(
            line("520000N 0010000W", NORTH),
            arc(CENTRE, "10 nm", SOUTH, "cw"),
            line("514000N 0010000W"),
        ))
        centre = parse_coordinate(CENTRE)
        # 2 line points, 179 arc points, arc end, 1 line point, closing point
        assert len(ring) == 184
        arc_part = ring[2:181]
        assert all(distance(centre, p) == pytest.approx(TEN_NM) for p in arc_part)
        assert all(p[1] > centre[1] for p in arc_part)
        assert ring[181] == parse_coordinate(SOUTH)
        assert ring[0] == ring[-1]

    def test_counter_clockwise(self):
        ring = tessellate(boundary(
            line("514000N 0010000W", SOUTH),
            arc(CENTRE, "10 nm", NORTH, "ccw"),
        ))
        centre = parse_coordinate(CENTRE)
        arc_part = ring[2:-2]
        assert len(arc_part) == 179
        assert all(p[1] > centre[1] for p in arc_part)
        assert ring[-2] == parse_coordinate(NORTH)

    def test_arc_uses_previous_segment_end(self):
        ring = tessellate(boundary(line(NORTH), arc(CENTRE, "10 nm", SOUTH, "ccw")))
        centre = parse_coordinate(CENTRE)
        # Counter-clockwise from north to south passes west of the centre
        assert all(p[1] < centre[1] for p in ring[1:-2])

    def test_start_just_below_whole_degree(self):
        centre = parse_coordinate(CENTRE)
        start = offset_point(centre, TEN_NM, 90 - 1e-10)
        points = arc_points(Arc(centre=CENTRE, dir="cw", radius="10 nm", to=SOUTH), start)
        # 91..179 degrees, then the arc end
        assert len(points) == 90
        assert bearing_from(centre, points[0]) == pytest.approx(91)
        steps = zip([start, *points], points)
        assert all(distance(a, b) > 100 for a, b in steps)

    def test_arc_first_is_ambiguous(self):
        with pytest.raises(AmbiguousArcStartError):
            tessellate(boundary(arc(CENTRE, "10 nm", SOUTH), line(NORTH)))

    def test_bad_coordinate(self):
        with pytest.raises(MalformedCoordinateError):
            tessellate(boundary(line(NORTH), arc("515000N 0005000Q", "10 nm", SOUTH)))
