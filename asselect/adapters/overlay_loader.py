"""Overlay loader — pre-rendered OpenAir blobs stored beside the dataset."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from asselect.contracts.enums import Overlay
from asselect.services.convert import OVERLAY_FILES

logger = logging.getLogger(__name__)


def load_overlay(directory: Path, overlay: Overlay) -> str | None:
    """Overlay text, or None if the file cannot be read."""
    path = directory / OVERLAY_FILES[overlay]
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot read overlay %s: %s", path, exc)
        return None


def load_overlays(directory: Path) -> dict[Overlay, str | None]:
    return {overlay: load_overlay(directory, overlay) for overlay in Overlay}


async def load_overlays_async(directory: Path) -> dict[Overlay, str | None]:
    """Read all overlays concurrently in worker threads."""
    overlays = list(Overlay)
    texts = await asyncio.gather(
        *(asyncio.to_thread(load_overlay, directory, overlay) for overlay in overlays)
    )
    return dict(zip(overlays, texts))
