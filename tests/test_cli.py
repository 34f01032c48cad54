"""Tests for the command line entry point."""

from __future__ import annotations

import json

import pytest

from asselect.cli import main


@pytest.fixture
def yaixm_path(tmp_path, yaixm_doc):
    path = tmp_path / "yaixm.json"
    path.write_text(json.dumps(yaixm_doc), encoding="utf-8")
    return path


class TestCli:
    def test_convert_with_defaults(self, tmp_path, yaixm_path):
        output = tmp_path / "out.txt"
        assert main(["--yaixm", str(yaixm_path), "--output", str(output), "--client-id", "cli-test"]) == 0
        text = output.read_text(encoding="utf-8")
        assert "* Client: cli-test" in text
        assert "AN BRISTOL CTR" in text

    def test_settings_and_overlay(self, tmp_path, yaixm_path):
        settings = tmp_path / "settings.json"
        settings.write_text(json.dumps({"version": 1, "rat": ["LASHAM RAT"], "overlay": "fl105"}))
        output = tmp_path / "out.txt"
        assert main([
            "--yaixm", str(yaixm_path),
            "--settings", str(settings),
            "--overlay-dir", str(tmp_path),
            "--output", str(output),
        ]) == 0
        text = output.read_text(encoding="utf-8")
        assert "AN LASHAM RAT" in text
        assert text.endswith("* Missing overlay data: overlay_105.txt\n")
        assert "* Client: asselect-cli/" in text

    def test_list(self, yaixm_path, capsys):
        assert main(["--yaixm", str(yaixm_path), "--list"]) == 0
        out = capsys.readouterr().out
        assert "AIRAC: 2024-05-16" in out
        assert "  SKIPTON WAVE" in out

    def test_missing_dataset(self, tmp_path):
        assert main(["--yaixm", str(tmp_path / "missing.json")]) == 1

    def test_missing_settings(self, tmp_path, yaixm_path):
        assert main(["--yaixm", str(yaixm_path), "--settings", str(tmp_path / "missing.json")]) == 1

    def test_conversion_failure(self, tmp_path, yaixm_doc):
        yaixm_doc["airspace"][0]["geometry"][0]["boundary"] = [{"line": ["nowhere"]}]
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(yaixm_doc), encoding="utf-8")
        output = tmp_path / "out.txt"
        assert main(["--yaixm", str(path), "--output", str(output)]) == 1
        assert not output.exists()
