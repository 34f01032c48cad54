"""Boundary tessellation: circles and arcs to point sequences.

A volume boundary is a list of segments (line, arc, circle) that together
close a polygon.  Segments are walked in order with a cursor holding the
last point emitted, since an arc starts wherever the previous segment
ended.  Curves are sampled every whole degree of bearing from their centre.
"""

from __future__ import annotations

import math
from typing import Sequence

from asselect.contracts.common import LatLon
from asselect.contracts.enums import ArcDirection
from asselect.contracts.yaixm import Arc, ArcBoundary, Boundary, Circle, CircleBoundary, LineBoundary
from asselect.errors import AmbiguousArcStartError
from asselect.services.geo import bearing_from, offset_point, parse_coordinate, parse_distance

STEP_DEG = 1
CIRCLE_POINTS = 360 // STEP_DEG

# Bearing offsets closer than this to an end point repeat that point
ARC_EPSILON_DEG = 1e-9


def tessellate(boundary: Sequence[Boundary]) -> list[LatLon]:
    """Convert a boundary to a closed ring of (lat, lon) points.

    The first and last points of the result are equal.

    Raises:
        AmbiguousArcStartError: the boundary starts with an arc.
        MalformedCoordinateError, MalformedDistanceError: bad literal.
    """
    points: list[LatLon] = []
    for segment in boundary:
        if isinstance(segment, LineBoundary):
            points.extend(parse_coordinate(p) for p in segment.line)
        elif isinstance(segment, CircleBoundary):
            points.extend(circle_points(segment.circle))
        elif isinstance(segment, ArcBoundary):
            if not points:
                raise AmbiguousArcStartError()
            points.extend(arc_points(segment.arc, points[-1]))
        else:
            raise TypeError(f"Unknown boundary segment {segment!r}")

    if points and points[0] != points[-1]:
        points.append(points[0])
    return points


def circle_points(circle: Circle) -> list[LatLon]:
    """Full ring starting due north of the centre, clockwise, closed."""
    centre = parse_coordinate(circle.centre)
    radius = parse_distance(circle.radius)
    ring = [offset_point(centre, radius, n * STEP_DEG) for n in range(CIRCLE_POINTS)]
    ring.append(ring[0])
    return ring


def arc_points(arc: Arc, start: LatLon) -> list[LatLon]:
    """Points after ``start`` along the arc, ending exactly on ``arc.to``."""
    centre = parse_coordinate(arc.centre)
    radius = parse_distance(arc.radius)
    end = parse_coordinate(arc.to)

    start_bearing = bearing_from(centre, start)
    end_bearing = bearing_from(centre, end)
    if arc.dir == ArcDirection.CW:
        sweep = (end_bearing - start_bearing) % 360
        sign = 1
    else:
        sweep = (start_bearing - end_bearing) % 360
        sign = -1

    # Whole-degree bearings strictly between start and end
    points = []
    if sign > 0:
        first = math.floor(start_bearing / STEP_DEG + 1) * STEP_DEG
        offset = first - start_bearing
    else:
        first = math.ceil(start_bearing / STEP_DEG - 1) * STEP_DEG
        offset = start_bearing - first
    if offset < ARC_EPSILON_DEG:
        offset += STEP_DEG
    while offset < sweep - ARC_EPSILON_DEG:
        points.append(offset_point(centre, radius, start_bearing + sign * offset))
        offset += STEP_DEG

    points.append(end)
    return points
