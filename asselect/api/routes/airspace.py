"""Airspace selection and OpenAir download endpoints."""

from __future__ import annotations

import asyncio
from dataclasses import asdict

from fastapi import APIRouter, Depends, Header, HTTPException
from fastapi.responses import PlainTextResponse

from asselect.api.deps import get_overlays, get_yaixm
from asselect.contracts.enums import Overlay
from asselect.contracts.settings import Settings
from asselect.contracts.yaixm import Yaixm
from asselect.services.convert import convert
from asselect.services.features import selection_lists

router = APIRouter(prefix="/airspace", tags=["airspace"])


@router.get("/release")
async def get_release(yaixm: Yaixm = Depends(get_yaixm)) -> dict:
    """AIRAC date and release note of the loaded dataset."""
    release = yaixm.release
    return {
        "airac_date": release.cycle_date,
        "note": release.note,
        "commit": release.commit,
        "schema_version": release.schema_version,
    }


@router.get("/names")
async def get_names(yaixm: Yaixm = Depends(get_yaixm)) -> dict:
    """Sorted names for the settings form."""
    return asdict(selection_lists(yaixm))


@router.post("/openair", response_class=PlainTextResponse)
async def post_openair(
    settings: Settings,
    user_agent: str | None = Header(default=None),
    yaixm: Yaixm = Depends(get_yaixm),
    overlays: dict[Overlay, str | None] | None = Depends(get_overlays),
) -> PlainTextResponse:
    """Convert with the posted settings and return the file as a download."""
    result = await asyncio.to_thread(convert, yaixm, settings, user_agent or "", overlays)
    if not result.success:
        raise HTTPException(status_code=500, detail=result.error.model_dump())

    output = result.data
    return PlainTextResponse(
        output.text,
        headers={"Content-Disposition": f'attachment; filename="{output.filename}"'},
    )
