"""Tests for scripts/validate_catalog.py."""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "validate_catalog.py"


def load_script():
    spec = importlib.util.spec_from_file_location("validate_catalog", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_valid_catalog_passes(tmp_path, capsys):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"sections": [{"section_id": 1, "group_ids": [2]}]}), encoding="utf-8")
    assert load_script().main([str(path)]) == 0
    assert "1 catalog file(s) are valid" in capsys.readouterr().out


def test_invalid_catalog_fails(tmp_path, capsys):
    good = tmp_path / "good.json"
    good.write_text(json.dumps({"sections": []}), encoding="utf-8")
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"sections": [{"group_ids": [2]}]}), encoding="utf-8")
    assert load_script().main([str(good), str(bad)]) == 1
    err = capsys.readouterr().err
    assert "bad.json" in err
    assert "good.json" not in err


def test_missing_catalog_fails(tmp_path):
    assert load_script().main([str(tmp_path / "nope.json")]) == 1
