"""Feature index — selectable names derived from a YAIXM dataset."""

from __future__ import annotations

from dataclasses import dataclass

from asselect.contracts.yaixm import Yaixm


def gliding_sites(yaixm: Yaixm) -> list[str]:
    return [f.name for f in yaixm.airspace if f.is_gliding_site]


def rat_names(yaixm: Yaixm) -> list[str]:
    return [f.name for f in yaixm.rat]


def loa_names(yaixm: Yaixm) -> list[str]:
    """Names of the optional LOAs (default ones are always applied)."""
    return [loa.name for loa in yaixm.loa if not loa.default]


def wave_names(yaixm: Yaixm) -> list[str]:
    return [f.name for f in yaixm.airspace if f.is_wave_box]


@dataclass(frozen=True)
class SelectionLists:
    """Sorted name lists used to build a settings form."""

    airac_date: str
    gliding_sites: list[str]
    rat: list[str]
    loa: list[str]
    wave: list[str]


def selection_lists(yaixm: Yaixm) -> SelectionLists:
    return SelectionLists(
        airac_date=yaixm.release.cycle_date,
        gliding_sites=sorted(gliding_sites(yaixm)),
        rat=sorted(rat_names(yaixm)),
        loa=sorted(loa_names(yaixm)),
        wave=sorted(wave_names(yaixm)),
    )
