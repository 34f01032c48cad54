"""ASSelect data contracts — Pydantic v2 models for airspace conversion.

Inputs
------

**YAIXM dataset** (read-only, decoded once per AIRAC release):
- ``Yaixm`` — airspace, RATs, LOAs, obstacles, services, release
- ``Feature`` / ``Volume`` / ``Boundary`` — geometry and classification

**Settings** (host-persisted user choices, re-read on every export):
- ``Settings`` — ``AirspaceSettings``, ``OptionSettings``, extras, overlay

Outputs
-------
- ``ConversionOutput`` — OpenAir text plus suggested filename
- ``ServiceResult`` — success/failure wrapper returned by ``convert()``
"""

from asselect.contracts.enums import (
    AirType,
    ArcDirection,
    IcaoClass,
    IcaoType,
    LocalType,
    OpenairClass,
    OutputFormat,
    Overlay,
    Rule,
)
from asselect.contracts.common import LatLon, YaixmModel
from asselect.contracts.result import (
    DEFAULT_FILENAME,
    ConversionOutput,
    ServiceError,
    ServiceResult,
)
from asselect.contracts.settings import (
    SETTINGS_VERSION,
    AirspaceSettings,
    OptionSettings,
    Settings,
)
from asselect.contracts.yaixm import (
    Arc,
    ArcBoundary,
    Boundary,
    Circle,
    CircleBoundary,
    Feature,
    LineBoundary,
    Loa,
    LoaArea,
    Obstacle,
    Release,
    Replace,
    Service,
    Volume,
    Yaixm,
)

__all__ = [
    # Enums
    "AirType",
    "ArcDirection",
    "IcaoClass",
    "IcaoType",
    "LocalType",
    "OpenairClass",
    "OutputFormat",
    "Overlay",
    "Rule",
    # Common
    "LatLon",
    "YaixmModel",
    # Result
    "DEFAULT_FILENAME",
    "ConversionOutput",
    "ServiceError",
    "ServiceResult",
    # Settings
    "SETTINGS_VERSION",
    "AirspaceSettings",
    "OptionSettings",
    "Settings",
    # Dataset
    "Arc",
    "ArcBoundary",
    "Boundary",
    "Circle",
    "CircleBoundary",
    "Feature",
    "LineBoundary",
    "Loa",
    "LoaArea",
    "Obstacle",
    "Release",
    "Replace",
    "Service",
    "Volume",
    "Yaixm",
]
