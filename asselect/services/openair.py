"""OpenAir encoder.

Each selected volume becomes one block::

    AC D
    AN BRISTOL CTR
    AL SFC
    AH FL65
    DP 51:19:27 N 002:48:16 W
    ...

A volume made of a single circle keeps OpenAir's native circle record
(``V X=`` centre, ``DC`` radius in NM); everything else is tessellated into
``DP`` points.  OpenAir polygons close implicitly, so the closing point of
the tessellated ring is not written.
"""

from __future__ import annotations

import logging
import string
import textwrap

from asselect import __version__
from asselect.contracts.enums import AirType, IcaoType, LocalType, OpenairClass, Rule
from asselect.contracts.settings import AirspaceSettings, Settings
from asselect.contracts.yaixm import CircleBoundary, Release, Volume, Yaixm
from asselect.errors import GeoError, VolumeConversionError
from asselect.services.geo import NM_TO_METRES, format_latlon, parse_coordinate, parse_distance
from asselect.services.levels import format_level
from asselect.services.selection import SelectedVolume, category_choice, select_volumes
from asselect.services.tessellate import tessellate

logger = logging.getLogger(__name__)

TITLE = "UK Airspace"
NOTE_WIDTH = 70

_AIRTYPE_CLASS: dict[AirType, OpenairClass] = {
    AirType.CLASS_D: OpenairClass.D,
    AirType.CLASS_F: OpenairClass.F,
    AirType.CLASS_G: OpenairClass.G,
    AirType.CTR: OpenairClass.CTR,
    AirType.DANGER: OpenairClass.DANGER,
    AirType.GSEC: OpenairClass.WAVE,
    AirType.RESTRICTED: OpenairClass.RESTRICTED,
}

# Local types with a fixed class; the rest are user choices or GLIDER
_LOCAL_TYPE_CLASS: dict[LocalType, OpenairClass] = {
    LocalType.DZ: OpenairClass.DANGER,
    LocalType.MATZ: OpenairClass.CTR,
    LocalType.OBSTACLE: OpenairClass.DANGER,
    LocalType.RAT: OpenairClass.PROHIBITED,
    LocalType.RMZ: OpenairClass.RMZ,
    LocalType.TMZ: OpenairClass.TMZ,
}

# None: class comes from the ICAO class (or the ATZ setting)
_ICAO_TYPE_CLASS: dict[IcaoType, OpenairClass | None] = {
    IcaoType.ATZ: None,
    IcaoType.AWY: None,
    IcaoType.CTA: None,
    IcaoType.CTR: None,
    IcaoType.D: OpenairClass.DANGER,
    IcaoType.D_OTHER: OpenairClass.DANGER,
    IcaoType.OTHER: None,
    IcaoType.P: OpenairClass.PROHIBITED,
    IcaoType.R: OpenairClass.RESTRICTED,
    IcaoType.TMA: None,
}

_LOCAL_TYPE_SUFFIX: dict[LocalType, str] = {
    LocalType.DZ: "DZ",
    LocalType.GLIDER: "GLIDER",
    LocalType.GVS: "GVS",
    LocalType.HIRTA: "HIRTA",
    LocalType.ILS: "ILS",
    LocalType.LASER: "LASER",
    LocalType.NOATZ: "A/F",
    LocalType.UL: "U/L",
}


def openair(yaixm: Yaixm, settings: Settings, client_id: str) -> str:
    """Select and render airspace as OpenAir text."""
    return encode(yaixm, select_volumes(yaixm, settings), settings, client_id)


def encode(
    yaixm: Yaixm,
    selected: list[SelectedVolume],
    settings: Settings,
    client_id: str,
) -> str:
    """Render already selected volumes.

    Raises:
        VolumeConversionError: a volume boundary could not be tessellated.
    """
    frequencies = yaixm.frequencies()
    lines = header(yaixm.release, client_id)
    for sel in selected:
        lines.append("")
        lines.extend(volume_block(sel, settings, frequencies))
    return "\n".join(lines) + "\n"


def header(release: Release, client_id: str) -> list[str]:
    """Comment block identifying the data release and the requester."""
    text = [TITLE, "", f"AIRAC: {release.cycle_date}"]
    if release.commit:
        text.append(f"Commit: {release.commit}")
    if release.note:
        text.append("")
        for paragraph in release.note.splitlines():
            text.extend(textwrap.wrap(paragraph, NOTE_WIDTH) or [""])
    text += ["", f"Produced by ASSelect {__version__}", f"Client: {client_id or 'unknown'}"]
    return [f"* {line}".rstrip() for line in text]


def volume_block(
    sel: SelectedVolume,
    settings: Settings,
    frequencies: dict[str, float],
) -> list[str]:
    feature, volume = sel.feature, sel.volume
    frequency = volume_frequency(sel, frequencies)
    radio = settings.options.radio and frequency is not None

    name = volume_name(sel, frequency if radio else None)
    lines = [
        f"AC {openair_class(sel, settings.airspace).value}",
        f"AN {name}",
    ]
    if radio:
        lines.append(f"AF {frequency:.3f}")
    lines += [
        f"AL {format_level(volume.lower)}",
        f"AH {format_level(volume.upper)}",
    ]

    try:
        lines.extend(geometry_lines(volume))
    except GeoError as exc:
        logger.error("Cannot convert %s (feature id %s): %s", name, feature.id, exc)
        raise VolumeConversionError(feature.id, name, exc) from exc
    return lines


def geometry_lines(volume: Volume) -> list[str]:
    boundary = volume.boundary
    if len(boundary) == 1 and isinstance(boundary[0], CircleBoundary):
        circle = boundary[0].circle
        centre = parse_coordinate(circle.centre)
        radius_nm = parse_distance(circle.radius) / NM_TO_METRES
        return [f"V X={format_latlon(centre)}", f"DC {round(radius_nm, 3):g}"]

    ring = tessellate(boundary)
    return [f"DP {format_latlon(point)}" for point in ring[:-1]]


def openair_class(sel: SelectedVolume, airspace: AirspaceSettings) -> OpenairClass:
    feature = sel.feature
    if feature.is_wave_box:
        return OpenairClass.WAVE

    optional, choice = category_choice(feature, airspace)
    if optional and choice is not None:
        return _AIRTYPE_CLASS[choice]

    if feature.local_type in _LOCAL_TYPE_CLASS:
        return _LOCAL_TYPE_CLASS[feature.local_type]

    if feature.icao_type == IcaoType.ATZ:
        return _AIRTYPE_CLASS[airspace.atz]

    fixed = _ICAO_TYPE_CLASS[feature.icao_type]
    if fixed is not None:
        return fixed

    icao_class = sel.volume.icao_class or feature.icao_class
    if icao_class is not None:
        return OpenairClass(icao_class.value)
    return OpenairClass.CTR if feature.icao_type == IcaoType.CTR else OpenairClass.G


def volume_name(sel: SelectedVolume, frequency: float | None = None) -> str:
    feature, volume = sel.feature, sel.volume
    name = volume.name or feature.name

    if volume.seq:
        name += f"-{volume.seq}"
    elif len(feature.geometry) > 1 and not volume.name:
        letters = string.ascii_uppercase
        name += f"-{letters[sel.index] if sel.index < len(letters) else sel.index + 1}"

    suffix = _LOCAL_TYPE_SUFFIX.get(feature.local_type) if feature.local_type else None
    if feature.local_type == LocalType.GLIDER and not feature.is_gliding_site:
        suffix = None
    if suffix and not name.endswith(suffix):
        name += f" {suffix}"

    if Rule.NOTAM in sel.rules:
        name += " (NOTAM)"
    if frequency is not None:
        name += f" {frequency:.3f}"
    return name


def volume_frequency(sel: SelectedVolume, frequencies: dict[str, float]) -> float | None:
    """Volume frequency, else the service controlling the volume or feature."""
    if sel.volume.frequency is not None:
        return sel.volume.frequency
    for key in (sel.volume.id, sel.feature.id):
        if key and key in frequencies:
            return frequencies[key]
    return None
