"""ASSelect — YAIXM to OpenAir airspace conversion.

Decodes the UK YAIXM airspace dataset, applies the user's selection of
optional airspace, local agreements and temporary restrictions, and renders
the result as an OpenAir file for flight-planning and moving-map tools.
"""

__version__ = "0.1.0"
