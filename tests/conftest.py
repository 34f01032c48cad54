"""Shared fixtures."""

from __future__ import annotations

import pytest

from asselect.contracts.yaixm import Yaixm
from tests.yaixm_data import make_document


@pytest.fixture
def yaixm_doc() -> dict:
    """Raw YAIXM document (fresh copy per test)."""
    return make_document()


@pytest.fixture
def yaixm(yaixm_doc) -> Yaixm:
    return Yaixm.model_validate(yaixm_doc)
