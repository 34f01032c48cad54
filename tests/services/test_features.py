"""Tests for the selectable-name index."""

from __future__ import annotations

from asselect.contracts.yaixm import Yaixm
from asselect.services.features import (
    gliding_sites,
    loa_names,
    rat_names,
    selection_lists,
    wave_names,
)
from tests.yaixm_data import make_document


class TestNameLists:
    def test_gliding_sites_in_dataset_order(self, yaixm):
        assert gliding_sites(yaixm) == ["LASHAM", "BOOKER"]

    def test_rat_names(self, yaixm):
        assert rat_names(yaixm) == ["LASHAM RAT", "ROYAL FLYPAST"]

    def test_loa_names_exclude_default(self, yaixm):
        assert loa_names(yaixm) == ["CAMBRIDGE RAZ", "WESTON ON THE GREEN"]

    def test_wave_names(self, yaixm):
        assert wave_names(yaixm) == ["SKIPTON WAVE"]

    def test_empty_collections(self):
        yaixm = Yaixm.model_validate(make_document(rat=[], loa=[]))
        assert rat_names(yaixm) == []
        assert loa_names(yaixm) == []


class TestSelectionLists:
    def test_sorted(self, yaixm):
        lists = selection_lists(yaixm)
        assert lists.airac_date == "2024-05-16"
        assert lists.gliding_sites == ["BOOKER", "LASHAM"]
        assert lists.rat == ["LASHAM RAT", "ROYAL FLYPAST"]
        assert lists.loa == ["CAMBRIDGE RAZ", "WESTON ON THE GREEN"]
        assert lists.wave == ["SKIPTON WAVE"]
