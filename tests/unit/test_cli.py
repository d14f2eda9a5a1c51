from __future__ import annotations

import json
from pathlib import Path

from membership_engine.app.cli import main


def write_json(path: Path, data) -> str:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f)
    return str(path)


def plan(package_type="single_group", payment_type="monthly", groups=(), sections=(), duration_days=None) -> dict:
    return {
        "included_groups": [{"id": g, "name": f"Group {g}"} for g in groups],
        "included_sections": [{"id": s, "name": f"Section {s}"} for s in sections],
        "package_type": package_type,
        "payment_type": payment_type,
        "duration_days": duration_days,
        "price": 10000,
    }


def json_lines(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


def test_cli_classifies_each_candidate(tmp_path, capsys):
    current = write_json(tmp_path / "current.json", plan(groups=[1]))
    upgrade = write_json(tmp_path / "upgrade.json", plan("multiple_groups", groups=[1, 2]))
    other = write_json(tmp_path / "other.json", plan(groups=[2]))

    code = main([
        "classify",
        "--current", current,
        "--candidate", upgrade,
        "--candidate", other,
        "--end-date", "2025-12-31",
    ])

    assert code == 0
    results = json_lines(capsys.readouterr().out)
    assert [r["kind"] for r in results] == ["UPGRADE", "BUY_ANOTHER"]
    assert results[0]["scheduled_start_date"] == "2026-01-01"
    assert "scheduled_start_date" not in results[1]


def test_cli_uses_section_catalog(tmp_path, capsys):
    current = write_json(tmp_path / "current.json", plan(groups=[7]))
    section = write_json(tmp_path / "section.json", plan("full_section", sections=[10]))
    catalog = write_json(tmp_path / "catalog.json", {"sections": [{"section_id": 10, "group_ids": [1, 2]}]})

    code = main(["classify", "--current", current, "--candidate", section, "--section-catalog", catalog])

    assert code == 0
    [result] = json_lines(capsys.readouterr().out)
    assert result["rule_id"] == "membership_classification.buy_another_not_included"


def test_cli_rejects_bad_end_date(tmp_path, capsys):
    current = write_json(tmp_path / "current.json", plan(groups=[1]))
    candidate = write_json(tmp_path / "candidate.json", plan("full_club"))

    code = main(["classify", "--current", current, "--candidate", candidate, "--end-date", "tomorrow"])

    assert code == 2
    assert "tomorrow" in capsys.readouterr().err


def test_cli_rejects_unreadable_plan(tmp_path, capsys):
    candidate = write_json(tmp_path / "candidate.json", plan())
    code = main(["classify", "--current", str(tmp_path / "missing.json"), "--candidate", candidate])
    assert code == 2
    assert "cannot read plan" in capsys.readouterr().err


def test_cli_rejects_plan_without_package_type(tmp_path, capsys):
    bad = plan()
    del bad["package_type"]
    current = write_json(tmp_path / "current.json", bad)
    candidate = write_json(tmp_path / "candidate.json", plan())
    assert main(["classify", "--current", current, "--candidate", candidate]) == 2


def test_cli_without_command_prints_help(capsys):
    assert main([]) == 0
    assert "classify" in capsys.readouterr().out
