"""Conversion-specific exceptions."""


class ConversionError(Exception):
    """Base exception for all conversion errors."""

    code = "CONVERSION_FAILED"


class DatasetDecodeError(ConversionError):
    """Raised when the YAIXM document is malformed or incomplete."""

    code = "DATASET_DECODE_FAILED"


class GeoError(ConversionError):
    """Base exception for unusable boundary literals."""


class MalformedCoordinateError(GeoError):
    """Raised when a coordinate literal does not parse."""

    code = "MALFORMED_COORDINATE"

    def __init__(self, literal: str, reason: str = "bad format"):
        self.literal = literal
        super().__init__(f"Malformed coordinate {literal!r}: {reason}")


class MalformedDistanceError(GeoError):
    """Raised when a distance literal does not parse."""

    code = "MALFORMED_DISTANCE"

    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f"Malformed distance {literal!r}")


class AmbiguousArcStartError(GeoError):
    """Raised when a boundary starts with an arc and has no start point."""

    code = "AMBIGUOUS_ARC_START"

    def __init__(self):
        super().__init__("Boundary starts with an arc")


class VolumeConversionError(ConversionError):
    """Raised when a selected volume cannot be rendered."""

    code = "VOLUME_CONVERSION_FAILED"

    def __init__(self, feature_id: str | None, name: str, cause: GeoError):
        self.feature_id = feature_id
        self.name = name
        self.cause = cause
        self.code = cause.code
        super().__init__(f"{name} ({feature_id or 'no id'}): {cause}")
