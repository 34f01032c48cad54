"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from asselect.api.app import app
from asselect.contracts.enums import Overlay

FL195_TEXT = "AC A\nAN FL195\nAL FL195\nAH FL195\nV X=51:00:00 N 001:00:00 W\nDC 1\n"


@pytest.fixture
def test_app(yaixm):
    """App with the sample dataset and overlays on app.state."""
    app.state.yaixm = yaixm
    app.state.overlays = {Overlay.FL195: FL195_TEXT, Overlay.FL105: None, Overlay.ATZ_DZ: None}
    yield app
    app.state.yaixm = None
    app.state.overlays = None


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
