"""Enumerations shared across all ASSelect contracts."""

from enum import Enum


class IcaoClass(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"


class IcaoType(str, Enum):
    """Primary airspace classification."""
    ATZ = "ATZ"
    AWY = "AWY"
    CTA = "CTA"
    CTR = "CTR"
    D = "D"
    D_OTHER = "D_OTHER"
    OTHER = "OTHER"
    P = "P"
    R = "R"
    TMA = "TMA"


class LocalType(str, Enum):
    """UK specific sub-classification of a feature."""
    DZ = "DZ"
    GLIDER = "GLIDER"
    GVS = "GVS"
    HIRTA = "HIRTA"
    ILS = "ILS"
    LASER = "LASER"
    MATZ = "MATZ"
    NOATZ = "NOATZ"
    OBSTACLE = "OBSTACLE"
    RAT = "RAT"
    RMZ = "RMZ"
    UL = "UL"
    TMZ = "TMZ"


class Rule(str, Enum):
    INTENSE = "INTENSE"
    LOA = "LOA"
    NOSSR = "NOSSR"
    NOTAM = "NOTAM"
    RAZ = "RAZ"
    RMZ = "RMZ"
    SI = "SI"
    TRA = "TRA"
    TMZ = "TMZ"


class ArcDirection(str, Enum):
    CW = "cw"
    CCW = "ccw"


class AirType(str, Enum):
    """User-selectable rendering of an optional airspace category."""
    CLASS_D = "classd"
    CLASS_F = "classf"
    CLASS_G = "classg"
    CTR = "ctr"
    DANGER = "danger"
    GSEC = "gsec"
    RESTRICTED = "restricted"


class OpenairClass(str, Enum):
    """Airspace class codes written on OpenAir ``AC`` lines."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    CTR = "CTR"
    PROHIBITED = "P"
    DANGER = "Q"
    RESTRICTED = "R"
    WAVE = "W"
    RMZ = "RMZ"
    TMZ = "TMZ"


class Overlay(str, Enum):
    """Pre-rendered overlays appended to the output."""
    FL195 = "fl195"
    FL105 = "fl105"
    ATZ_DZ = "atzdz"


class OutputFormat(str, Enum):
    OPENAIR = "openair"
    RAT_ONLY = "ratonly"
