"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import HTTPException, Request

from asselect.contracts.enums import Overlay
from asselect.contracts.yaixm import Yaixm

# ------------------------------------------------------------------
# Dataset and overlays (loaded once into app.state)
# ------------------------------------------------------------------


def get_yaixm(request: Request) -> Yaixm:
    yaixm = getattr(request.app.state, "yaixm", None)
    if yaixm is None:
        raise HTTPException(status_code=503, detail="Cannot load airspace data")
    return yaixm


def get_overlays(request: Request) -> dict[Overlay, str | None] | None:
    return getattr(request.app.state, "overlays", None)
