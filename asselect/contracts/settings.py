"""Settings — the user's export choices.

The record is persisted by the host between sessions, so decoding is
deliberately forgiving: unknown keys are ignored, and a missing, legacy or
invalid value falls back to the field default instead of failing the whole
record.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_serializer,
    field_validator,
    model_validator,
)

from asselect.contracts.enums import AirType, OutputFormat, Overlay

logger = logging.getLogger(__name__)

SETTINGS_VERSION = 1

_EXCLUDED = {"", "exclude", "no", "none"}


def _choice(v: Any) -> Any:
    """Normalise an enumerated choice; exclusion markers become None."""
    if isinstance(v, str):
        v = v.strip().lower()
        return None if v in _EXCLUDED else v
    return v


def _names(v: Any) -> Any:
    # Early releases stored name sets as comma separated strings
    if isinstance(v, str):
        return [name.strip() for name in v.split(",") if name.strip()]
    if v is None:
        return []
    return v


class LenientModel(BaseModel):
    """Base model whose invalid fields decode to their defaults."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="wrap")
    @classmethod
    def default_on_error(
        cls, v: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        try:
            return handler(v)
        except ValidationError:
            logger.warning("Ignoring invalid setting %s=%r", info.field_name, v)
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)


class AirspaceSettings(LenientModel):
    """Optional airspace categories and how to render them.

    ``None`` excludes the category from the output.
    """

    atz: AirType = AirType.CTR
    ils: AirType | None = None
    unlicensed: AirType | None = None
    microlight: AirType | None = None
    gliding: AirType | None = None
    home: str | None = None
    hirta_gvs: AirType | None = None
    obstacle: bool = False

    @field_validator(
        "atz", "ils", "unlicensed", "microlight", "gliding", "hirta_gvs", mode="before"
    )
    @classmethod
    def normalise_choice(cls, v: Any) -> Any:
        return _choice(v)

    @field_validator("home", mode="before")
    @classmethod
    def empty_home(cls, v: Any) -> Any:
        return v or None


class OptionSettings(LenientModel):
    max_level: int = Field(default=660, ge=0, le=999, description="Flight level cut-off")
    radio: bool = False
    format: OutputFormat = OutputFormat.OPENAIR
    exclude_notam: bool = False

    @field_validator("format", mode="before")
    @classmethod
    def normalise_format(cls, v: Any) -> Any:
        return _choice(v)


class Settings(LenientModel):
    """Complete, versioned export settings."""

    version: int = SETTINGS_VERSION
    airspace: AirspaceSettings = Field(default_factory=AirspaceSettings)
    options: OptionSettings = Field(default_factory=OptionSettings)
    loa: frozenset[str] = frozenset()
    rat: frozenset[str] = frozenset()
    wave: frozenset[str] = frozenset()
    overlay: Overlay | None = None

    @model_validator(mode="before")
    @classmethod
    def migrate(cls, data: Any) -> Any:
        """Lift pre-versioned flat records into the nested layout."""
        if not isinstance(data, dict) or "version" in data:
            return data
        data = dict(data)
        for section, model in (("airspace", AirspaceSettings), ("options", OptionSettings)):
            if isinstance(data.get(section), dict):
                continue
            moved = {key: data.pop(key) for key in list(data) if key in model.model_fields}
            if moved:
                logger.info("Migrating legacy %s settings: %s", section, sorted(moved))
                data[section] = moved
        data["version"] = SETTINGS_VERSION
        return data

    @field_validator("loa", "rat", "wave", mode="before")
    @classmethod
    def normalise_names(cls, v: Any) -> Any:
        return _names(v)

    @field_validator("overlay", mode="before")
    @classmethod
    def normalise_overlay(cls, v: Any) -> Any:
        return _choice(v)

    @field_serializer("loa", "rat", "wave")
    def sorted_names(self, names: frozenset[str]) -> list[str]:
        return sorted(names)

    def to_json(self) -> str:
        """Stable JSON form for host persistence."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, text: str | bytes | None) -> Settings:
        """Decode persisted settings, falling back to defaults."""
        if not text:
            return cls()
        try:
            data = json.loads(text)
        except ValueError:
            logger.warning("Stored settings are not valid JSON, using defaults")
            return cls()
        if not isinstance(data, dict):
            logger.warning("Stored settings are not an object, using defaults")
            return cls()
        return cls.model_validate(data)
