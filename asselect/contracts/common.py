"""Base classes and shared types for ASSelect contracts.

Unit conventions:
- **Coordinates**: WGS84 decimal degrees, ``(latitude, longitude)`` tuples
- **Distances**: metres, unless a literal carries its own unit token
- **Levels**: kept as YAIXM text (``SFC``, ``FL65``, ``2500 ft``) until
  rendered
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

LatLon = tuple[float, float]


class YaixmModel(BaseModel):
    """Immutable base model for decoded YAIXM data.

    - Field names are Pythonic; YAIXM keys (``type``, ``class``...) are
      accepted through aliases.
    - Unknown keys are ignored so newer schema versions still decode.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    def to_document(self) -> dict[str, Any]:
        """Dump to a YAIXM-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "YaixmModel":
        """Create model instance from a YAIXM document dict."""
        return cls.model_validate(data)
