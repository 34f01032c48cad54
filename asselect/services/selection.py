"""Selection engine: which airspace volumes go into an export.

Assembly order is fixed and mirrors the dataset:

1. Primary airspace, with geometry replaced by the active LOAs
2. Features added by the active LOAs
3. Obstacles (if enabled)
4. Selected RATs

followed by per-feature and per-volume filters.  Nothing is sorted, and the
dataset is never modified: replaced features are copies.  Names in the
settings that no longer exist in the dataset are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from asselect.contracts.enums import AirType, IcaoType, LocalType, OutputFormat, Rule
from asselect.contracts.settings import AirspaceSettings, Settings
from asselect.contracts.yaixm import (
    Circle,
    CircleBoundary,
    Feature,
    Loa,
    Obstacle,
    Replace,
    Volume,
    Yaixm,
)
from asselect.services.levels import normalise_level

logger = logging.getLogger(__name__)

OBSTACLE_RADIUS = "0.5 nm"

# Local types whose inclusion and rendering is a user choice
_OPTIONAL_LOCAL_TYPES: dict[LocalType, str] = {
    LocalType.GVS: "hirta_gvs",
    LocalType.HIRTA: "hirta_gvs",
    LocalType.ILS: "ils",
    LocalType.LASER: "hirta_gvs",
    LocalType.NOATZ: "unlicensed",
    LocalType.UL: "microlight",
}


class Origin(str, Enum):
    """Which part of the dataset a selected feature came from."""
    AIRSPACE = "airspace"
    LOA = "loa"
    OBSTACLE = "obstacle"
    RAT = "rat"


@dataclass(frozen=True)
class SelectedVolume:
    feature: Feature
    volume: Volume
    index: int
    origin: Origin

    @property
    def rules(self) -> set[Rule]:
        return set(self.feature.rules) | set(self.volume.rules)


def category_choice(feature: Feature, airspace: AirspaceSettings) -> tuple[bool, AirType | None]:
    """User rendering choice for an optional category.

    Returns ``(optional, choice)``; ``optional`` is False for features the
    user cannot switch off, and ``choice`` is None when excluded.
    """
    if feature.is_gliding_site:
        return True, airspace.gliding
    attr = _OPTIONAL_LOCAL_TYPES.get(feature.local_type) if feature.local_type else None
    if attr is None:
        return False, None
    return True, getattr(airspace, attr)


def select_volumes(yaixm: Yaixm, settings: Settings) -> list[SelectedVolume]:
    """Ordered list of volumes to export for these settings."""
    selected = [
        SelectedVolume(feature=feature, volume=volume, index=n, origin=origin)
        for feature, origin in assemble_features(yaixm, settings)
        if _feature_wanted(feature, origin, settings)
        for n, volume in enumerate(feature.geometry)
        if _volume_wanted(feature, volume, settings)
    ]
    logger.info("Selected %d volumes", len(selected))
    return selected


def active_loas(yaixm: Yaixm, settings: Settings) -> list[Loa]:
    """Default LOAs plus the ones the user picked, in dataset order."""
    return [loa for loa in yaixm.loa if loa.default or loa.name in settings.loa]


def assemble_features(yaixm: Yaixm, settings: Settings) -> list[tuple[Feature, Origin]]:
    loas = active_loas(yaixm, settings)

    features = [(f, Origin.AIRSPACE) for f in apply_replacements(yaixm.airspace, loas)]
    features.extend(
        (f, Origin.LOA) for loa in loas for area in loa.areas for f in area.add
    )
    if settings.airspace.obstacle:
        features.extend((obstacle_feature(o), Origin.OBSTACLE) for o in yaixm.obstacle)
    features.extend((f, Origin.RAT) for f in yaixm.rat if f.name in settings.rat)
    return features


def apply_replacements(airspace: Iterable[Feature], loas: Iterable[Loa]) -> list[Feature]:
    """Copy of ``airspace`` with LOA replacement geometry swapped in."""
    features = list(airspace)
    for loa in loas:
        for area in loa.areas:
            for replace in area.replace:
                if not _replace(features, replace):
                    logger.debug("LOA %s: nothing to replace with id %s", loa.name, replace.id)
    return features


def _replace(features: list[Feature], replace: Replace) -> bool:
    for i, feature in enumerate(features):
        if feature.id == replace.id:
            features[i] = feature.model_copy(update={"geometry": tuple(replace.geometry)})
            return True

    # Fall back to replacing a single volume
    for i, feature in enumerate(features):
        for j, volume in enumerate(feature.geometry):
            if volume.id == replace.id:
                geometry = feature.geometry[:j] + tuple(replace.geometry) + feature.geometry[j + 1:]
                features[i] = feature.model_copy(update={"geometry": geometry})
                return True
    return False


def obstacle_feature(obstacle: Obstacle) -> Feature:
    """Obstacle as a small circular feature from the surface to its top."""
    volume = Volume(
        lower="SFC",
        upper=obstacle.elevation,
        boundary=(
            CircleBoundary(circle=Circle(centre=obstacle.position, radius=OBSTACLE_RADIUS)),
        ),
    )
    return Feature(
        name=obstacle.name,
        icao_type=IcaoType.OTHER,
        local_type=LocalType.OBSTACLE,
        geometry=(volume,),
    )


def _feature_wanted(feature: Feature, origin: Origin, settings: Settings) -> bool:
    if settings.options.format == OutputFormat.RAT_ONLY:
        return origin == Origin.RAT

    if origin == Origin.AIRSPACE and feature.is_wave_box:
        return feature.name in settings.wave

    airspace = settings.airspace
    if feature.is_gliding_site and feature.name == airspace.home:
        return False

    optional, choice = category_choice(feature, airspace)
    return not optional or choice is not None


def _volume_wanted(feature: Feature, volume: Volume, settings: Settings) -> bool:
    options = settings.options
    if options.exclude_notam:
        rules = set(feature.rules) | set(volume.rules)
        if rules == {Rule.NOTAM}:
            return False

    lower = normalise_level(volume.lower)
    return lower is None or lower < options.max_level * 100
