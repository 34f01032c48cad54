"""Minimal YAIXM documents shared across tests."""

from __future__ import annotations

import copy
from typing import Any

RELEASE = {
    "airac_date": "2024-05-16T00:00:00Z",
    "timestamp": "2024-04-20T10:31:02Z",
    "schema_version": 1,
    "note": "New Lasham RAT.\nBrize Norton CTA amended.",
    "commit": "3f2c9e1",
}


def circle(centre: str, radius: str) -> dict:
    return {"circle": {"centre": centre, "radius": radius}}


def line(*points: str) -> dict:
    return {"line": list(points)}


def arc(centre: str, radius: str, to: str, direction: str = "cw") -> dict:
    return {"arc": {"centre": centre, "dir": direction, "radius": radius, "to": to}}


def volume(boundary: list[dict], lower: str = "SFC", upper: str = "FL65", **extra: Any) -> dict:
    return {"lower": lower, "upper": upper, "boundary": boundary, **extra}


def feature(name: str, type_: str, geometry: list[dict], **extra: Any) -> dict:
    return {"name": name, "type": type_, "geometry": geometry, **extra}


SQUARE = line(
    "520000N 0010000W",
    "520000N 0005000W",
    "514000N 0005000W",
    "514000N 0010000W",
)

AIRSPACE = [
    feature(
        "BRISTOL CTR", "CTR",
        [volume([circle("512258N 0024309W", "5 nm")])],
        id="bristol-ctr", **{"class": "D"},
    ),
    feature(
        "BRIZE NORTON CTA", "CTA",
        [
            volume(
                [
                    line("520000N 0010000W", "520000N 0005000W"),
                    arc("515000N 0005000W", "10 nm", "514000N 0005000W"),
                    line("514000N 0010000W"),
                ],
                lower="3500 ft",
                id="brize-cta-1",
            ),
            volume([SQUARE], lower="FL55", upper="FL85", id="brize-cta-2"),
        ],
        id="brize-cta", **{"class": "D"},
    ),
    feature(
        "CAMBRIDGE CTA", "CTA",
        [volume([SQUARE], lower="2000 ft", upper="FL45", id="cambridge-v1")],
        id="cambridge-cta", **{"class": "D"},
    ),
    feature(
        "ODIHAM ATZ", "ATZ",
        [volume([circle("511403N 0005634W", "2 nm")], upper="2000 ft SFC")],
        id="odiham-atz",
    ),
    feature("LASHAM", "OTHER", [volume([circle("511113N 0010155W", "2 nm")], upper="FL45")],
            localtype="GLIDER"),
    feature("BOOKER", "OTHER", [volume([circle("513642N 0004831W", "2 nm")], upper="FL45")],
            localtype="GLIDER"),
    feature("SKIPTON WAVE", "D_OTHER", [volume([SQUARE], lower="FL195", upper="FL245")],
            localtype="GLIDER"),
    feature("BLACKBUSHE", "OTHER", [volume([SQUARE], upper="2000 ft")], localtype="ILS"),
    feature("SALISBURY PLAIN", "D", [volume([SQUARE], upper="FL150")], rules=["NOTAM"]),
    feature(
        "HOLBEACH", "D",
        [volume([SQUARE], upper="FL230", rules=["SI"])],
        rules=["NOTAM"],
    ),
]

RAT = [
    feature("LASHAM RAT", "OTHER", [volume([SQUARE], upper="FL100")], localtype="RAT"),
    feature("ROYAL FLYPAST", "OTHER", [volume([SQUARE], upper="FL100")], localtype="RAT"),
]

LOA = [
    {
        "name": "CAMBRIDGE RAZ",
        "areas": [
            {
                "name": "CAMBRIDGE RAZ",
                "add": [],
                "replace": [
                    {
                        "id": "cambridge-cta",
                        "geometry": [
                            volume([SQUARE], lower="2000 ft", upper="3000 ft", name="CAMBRIDGE CTA V2"),
                            volume([SQUARE], lower="3000 ft", upper="FL45", name="CAMBRIDGE CTA V3"),
                        ],
                    }
                ],
            }
        ],
    },
    {
        "name": "WESTON ON THE GREEN",
        "areas": [
            {
                "name": "WESTON",
                "add": [
                    feature("WESTON ON THE GREEN", "D_OTHER",
                            [volume([circle("515248N 0011316W", "2 nm")], upper="FL80")],
                            localtype="DZ", rules=["LOA"]),
                ],
            }
        ],
    },
    {
        "name": "DEFAULT LOA",
        "default": True,
        "areas": [
            {
                "name": "DEFAULT AREA",
                "add": [feature("DEFAULT LOA AREA", "D", [volume([SQUARE], upper="FL55")])],
                "replace": [{"id": "no-such-feature", "geometry": [volume([SQUARE])]}],
            }
        ],
    },
]

OBSTACLE = [{"elevation": "1084 ft", "name": "EMLEY MOOR", "position": "533645N 0014009W"}]

SERVICE = [{"callsign": "BRISTOL RADAR", "frequency": 125.65, "controls": ["bristol-ctr"]}]


def make_document(**overrides: Any) -> dict:
    """Full YAIXM document; top-level keys can be overridden."""
    doc = {
        "airspace": AIRSPACE,
        "rat": RAT,
        "loa": LOA,
        "obstacle": OBSTACLE,
        "service": SERVICE,
        "release": RELEASE,
    }
    doc.update(overrides)
    return copy.deepcopy(doc)
