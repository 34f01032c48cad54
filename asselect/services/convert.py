"""Conversion entry point used by the CLI and the HTTP API."""

from __future__ import annotations

import logging
import time
from typing import Mapping

from asselect.contracts.enums import Overlay
from asselect.contracts.result import DEFAULT_FILENAME, ConversionOutput, ServiceResult
from asselect.contracts.settings import Settings
from asselect.contracts.yaixm import Yaixm
from asselect.errors import ConversionError, VolumeConversionError
from asselect.services.openair import encode
from asselect.services.selection import select_volumes

logger = logging.getLogger(__name__)

OVERLAY_FILES: dict[Overlay, str] = {
    Overlay.FL195: "overlay_195.txt",
    Overlay.FL105: "overlay_105.txt",
    Overlay.ATZ_DZ: "overlay_atzdz.txt",
}


def convert(
    yaixm: Yaixm,
    settings: Settings,
    client_id: str,
    overlays: Mapping[Overlay, str | None] | None = None,
) -> ServiceResult[ConversionOutput]:
    """Render an OpenAir file for the given settings.

    Pure and synchronous: the dataset is only read, so the same ``yaixm``
    can be converted again with other settings.  ``overlays`` holds the
    overlay texts fetched by the host (None where a fetch failed).

    Any conversion error fails the whole result; a partial airspace file is
    never returned.
    """
    start = time.perf_counter()
    try:
        selected = select_volumes(yaixm, settings)
        text = encode(yaixm, selected, settings, client_id)
    except VolumeConversionError as exc:
        return ServiceResult.fail(
            exc.code, str(exc), feature_id=exc.feature_id, name=exc.name
        )
    except ConversionError as exc:
        logger.error("Conversion failed: %s", exc)
        return ServiceResult.fail(exc.code, str(exc))

    text += overlay_text(settings.overlay, overlays)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info("Converted %d volumes (%d chars) in %.1f ms", len(selected), len(text), duration_ms)
    return ServiceResult.ok(
        ConversionOutput(text=text, filename=DEFAULT_FILENAME, volume_count=len(selected)),
        duration_ms=duration_ms,
    )


def overlay_text(
    overlay: Overlay | None,
    overlays: Mapping[Overlay, str | None] | None,
) -> str:
    """Overlay blob to append, or a placeholder comment if unavailable."""
    if overlay is None:
        return ""
    if overlays is None:
        logger.warning("Overlay %s requested but no overlay data loaded", overlay.value)
        return "* Overlay data not loaded\n"

    text = overlays.get(overlay)
    if text is None:
        logger.warning("Overlay %s requested but missing", overlay.value)
        return f"* Missing overlay data: {OVERLAY_FILES[overlay]}\n"
    return text
