"""Vertical limits: YAIXM level text to feet and to OpenAir notation."""

from __future__ import annotations

import re

UNLIMITED_FT = 99999

_FL_RE = re.compile(r"^FL\s*(\d+)$", re.IGNORECASE)
_ALT_RE = re.compile(r"^(\d+)\s*ft$", re.IGNORECASE)
_HEIGHT_RE = re.compile(r"^(\d+)\s*ft\s+(SFC|AGL)$", re.IGNORECASE)


def normalise_level(level: str) -> int | None:
    """Approximate level in feet, used for the max-level cut-off.

    Heights above surface are treated as altitudes.  Returns None for text
    that is not a recognised level.
    """
    text = level.strip()
    upper = text.upper()
    if upper in ("SFC", "GND", "SURFACE"):
        return 0
    if upper in ("UNL", "UNLIMITED"):
        return UNLIMITED_FT
    if m := _FL_RE.match(text):
        return int(m.group(1)) * 100
    if m := _ALT_RE.match(text) or _HEIGHT_RE.match(text):
        return int(m.group(1))
    return None


def format_level(level: str) -> str:
    """OpenAir ``AL``/``AH`` value for a YAIXM level."""
    text = level.strip()
    upper = text.upper()
    if upper in ("SFC", "GND", "SURFACE"):
        return "SFC"
    if upper in ("UNL", "UNLIMITED"):
        return "UNL"
    if m := _FL_RE.match(text):
        return f"FL{int(m.group(1))}"
    if m := _ALT_RE.match(text):
        return f"{m.group(1)}ALT"
    if m := _HEIGHT_RE.match(text):
        return f"{m.group(1)}AGL"
    return text
