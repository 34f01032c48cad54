"""FastAPI application factory."""

from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from asselect import __version__  # noqa: E402
from asselect.adapters.overlay_loader import load_overlays_async  # noqa: E402
from asselect.adapters.yaixm_loader import load_yaixm  # noqa: E402
from asselect.api.routes import airspace  # noqa: E402
from asselect.contracts.yaixm import Yaixm  # noqa: E402
from asselect.errors import DatasetDecodeError  # noqa: E402

logger = logging.getLogger(__name__)


def _load_dataset(path: Path) -> Yaixm | None:
    try:
        return load_yaixm(path)
    except DatasetDecodeError as exc:
        logger.error("Cannot load airspace data from %s: %s", path, exc)
        return None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the dataset and the overlays concurrently on startup."""
    yaixm_path = Path(os.environ.get("ASSELECT_YAIXM_PATH", "yaixm.json"))
    overlay_dir = Path(os.environ.get("ASSELECT_OVERLAY_DIR", "."))

    yaixm, overlays = await asyncio.gather(
        asyncio.to_thread(_load_dataset, yaixm_path),
        load_overlays_async(overlay_dir),
    )
    app.state.yaixm = yaixm
    app.state.overlays = overlays
    if yaixm is not None:
        logger.info("Serving AIRAC %s from %s", yaixm.release.cycle_date, yaixm_path)
    yield


app = FastAPI(
    title="ASSelect API",
    description="YAIXM to OpenAir airspace conversion",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(airspace.router, prefix="/api")


@app.get("/api/health")
async def health():
    yaixm = getattr(app.state, "yaixm", None)
    overlays = getattr(app.state, "overlays", None) or {}
    return {
        "status": "ok" if yaixm is not None else "degraded",
        "airac_date": yaixm.release.cycle_date if yaixm is not None else None,
        "overlays": sorted(o.value for o, text in overlays.items() if text is not None),
    }
