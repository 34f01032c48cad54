"""YAIXM dataset model — the decoded airspace exchange document.

A ``Yaixm`` holds the UK airspace features, temporary restriction areas
(RATs), local agreements (LOAs), obstacles, radio services and release
metadata.  It is decoded once and never mutated; LOA substitution builds
copies instead.
"""

from typing import Annotated, Any, TypeVar, Union

from pydantic import BeforeValidator, Discriminator, Field, Tag, field_validator

from asselect.contracts.common import YaixmModel
from asselect.contracts.enums import ArcDirection, IcaoClass, IcaoType, LocalType, Rule

T = TypeVar("T")


def _empty_if_none(v: Any) -> Any:
    # YAIXM writers emit null for absent optional lists
    return () if v is None else v


OptionalList = Annotated[tuple[T, ...], BeforeValidator(_empty_if_none)]


class Circle(YaixmModel):
    centre: str
    radius: str


class Arc(YaixmModel):
    centre: str
    dir: ArcDirection
    radius: str
    to: str


class CircleBoundary(YaixmModel):
    circle: Circle


class ArcBoundary(YaixmModel):
    arc: Arc


class LineBoundary(YaixmModel):
    line: tuple[str, ...] = Field(..., min_length=1)


def _boundary_kind(value: Any) -> str | None:
    """Pick the boundary variant from its single YAIXM key."""
    if isinstance(value, dict):
        for kind in ("circle", "arc", "line"):
            if kind in value:
                return kind
        return None
    if isinstance(value, CircleBoundary):
        return "circle"
    if isinstance(value, ArcBoundary):
        return "arc"
    if isinstance(value, LineBoundary):
        return "line"
    return None


Boundary = Annotated[
    Union[
        Annotated[CircleBoundary, Tag("circle")],
        Annotated[ArcBoundary, Tag("arc")],
        Annotated[LineBoundary, Tag("line")],
    ],
    Discriminator(_boundary_kind),
]


class Volume(YaixmModel):
    """A single vertical/horizontal extent of a feature.

    ``icao_class`` overrides the feature class; ``rules`` are added to the
    feature rules.
    """

    id: str | None = None
    name: str | None = None
    lower: str
    upper: str
    icao_class: IcaoClass | None = Field(default=None, alias="class")
    rules: OptionalList[Rule] = ()
    seq: str | None = None
    frequency: float | None = None
    boundary: tuple[Boundary, ...] = Field(..., min_length=1)


class Feature(YaixmModel):
    """A named airspace feature made of one or more volumes."""

    id: str | None = None
    name: str
    icao_type: IcaoType = Field(..., alias="type")
    local_type: LocalType | None = Field(default=None, alias="localtype")
    icao_class: IcaoClass | None = Field(default=None, alias="class")
    rules: OptionalList[Rule] = ()
    geometry: tuple[Volume, ...] = Field(..., min_length=1)

    @property
    def is_gliding_site(self) -> bool:
        return self.icao_type == IcaoType.OTHER and self.local_type == LocalType.GLIDER

    @property
    def is_wave_box(self) -> bool:
        return self.icao_type == IcaoType.D_OTHER and self.local_type == LocalType.GLIDER


class Replace(YaixmModel):
    """Substitute geometry for an existing feature (or volume) id."""

    id: str
    geometry: tuple[Volume, ...]


class LoaArea(YaixmModel):
    name: str
    add: tuple[Feature, ...]
    replace: OptionalList[Replace] = ()


class Loa(YaixmModel):
    """A local agreement, optionally in force by default."""

    name: str
    default: bool = False
    areas: tuple[LoaArea, ...]

    @field_validator("default", mode="before")
    @classmethod
    def default_if_none(cls, v: Any) -> Any:
        return False if v is None else v


class Obstacle(YaixmModel):
    elevation: str
    name: str
    position: str


class Service(YaixmModel):
    """Radio service and the feature/volume ids it controls."""

    callsign: str
    frequency: float
    controls: tuple[str, ...]


class Release(YaixmModel):
    airac_date: str = Field(..., min_length=10)
    timestamp: str
    schema_version: int
    note: str
    commit: str

    @property
    def cycle_date(self) -> str:
        """AIRAC date without the time part, e.g. ``2024-05-16``."""
        return self.airac_date[:10]


class Yaixm(YaixmModel):
    """Root of the decoded dataset."""

    airspace: tuple[Feature, ...]
    rat: tuple[Feature, ...]
    loa: tuple[Loa, ...]
    obstacle: tuple[Obstacle, ...]
    service: tuple[Service, ...]
    release: Release

    def frequencies(self) -> dict[str, float]:
        """Map controlled feature/volume ids to their service frequency."""
        return {
            control: service.frequency
            for service in self.service
            for control in service.controls
        }
