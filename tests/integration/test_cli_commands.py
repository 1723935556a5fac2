from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ohriv.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "ohriv.yaml"
    path.write_text(
        f"storage:\n  path: {json.dumps(str(tmp_path / 'storage.json'))}\n",
        encoding="utf-8",
    )
    return path


def write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


def invoke(runner: CliRunner, config_path: Path, *args: str):
    return runner.invoke(app, ["--config", str(config_path), "--log-level", "WARNING", *args])


def test_score_add_list_delete_cycle(tmp_path: Path, runner: CliRunner, config_path: Path) -> None:
    added = invoke(
        runner,
        config_path,
        "score",
        "add",
        "--candidate",
        "cand-1",
        "--job-title",
        "Engineer",
        "--knowledge",
        "8",
        "--skills",
        "7",
        "--abilities",
        "9",
    )
    assert added.exit_code == 0, added.output
    score = json.loads(added.stdout)
    assert score["overall"] == 8.0
    assert score["recommendation"] == "strong-recommend"
    assert score["id"].startswith("cand-1-Engineer-")

    stored = json.loads((tmp_path / "storage.json").read_text(encoding="utf-8"))
    assert score["id"] in json.loads(stored["ksaScores"])

    listed = invoke(runner, config_path, "score", "list", "--candidate", "cand-1")
    assert listed.exit_code == 0, listed.output
    assert [entry["id"] for entry in json.loads(listed.stdout)] == [score["id"]]

    other = invoke(runner, config_path, "score", "list", "--job-title", "Designer")
    assert json.loads(other.stdout) == []

    deleted = invoke(runner, config_path, "score", "delete", score["id"])
    assert deleted.exit_code == 0
    assert deleted.stdout.strip() == "deleted"

    again = invoke(runner, config_path, "score", "delete", score["id"])
    assert again.exit_code == 0
    assert again.stdout.strip() == "not found"


def test_score_add_rejects_out_of_range(runner: CliRunner, config_path: Path) -> None:
    result = invoke(
        runner,
        config_path,
        "score",
        "add",
        "--candidate",
        "cand-1",
        "--job-title",
        "Engineer",
        "--knowledge",
        "11",
        "--skills",
        "7",
        "--abilities",
        "9",
    )

    assert result.exit_code != 0


@pytest.mark.parametrize(
    ("membership", "evaluator", "expected"),
    [
        ("recruiter", "sourcer", "allowed"),
        ("partner_manager", "sourcer", "denied"),
        ("admin", "partner", "allowed"),
        ("recruiter", "janitor", "denied"),
    ],
)
def test_can_perform_command(runner: CliRunner, config_path: Path, membership, evaluator, expected) -> None:
    result = invoke(runner, config_path, "can-perform", membership, evaluator)

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == expected


def test_validate_candidate_reports_field(tmp_path: Path, runner: CliRunner, config_path: Path) -> None:
    document = tmp_path / "candidate.json"
    write_json(
        document,
        {"id": "cand-1", "tenantId": "t-1", "createdAt": "2025-01-01", "email": "broken"},
    )

    result = invoke(runner, config_path, "validate", "candidate", str(document))

    assert result.exit_code == 1
    assert "email" in result.output


def test_validate_stage_prints_normalised_record(tmp_path: Path, runner: CliRunner, config_path: Path) -> None:
    document = tmp_path / "stage.json"
    write_json(document, {"name": "Offer", "color": "#68D391", "icon": "🏁", "order": 4, "isSystem": True})

    result = invoke(runner, config_path, "validate", "stage", str(document))

    assert result.exit_code == 0, result.output
    rendered = json.loads(result.stdout)
    assert rendered["isSystem"] is True
    assert "canReorder" not in rendered


def test_stages_command_lists_defaults(runner: CliRunner, config_path: Path) -> None:
    result = invoke(runner, config_path, "stages")

    assert result.exit_code == 0, result.output
    lines = result.stdout.strip().splitlines()
    assert lines[0] == "1. Recruiter Screen (recruiter_screen) [system, locked]"
    assert lines[2] == "3. Final Interview (final_interview) [system]"


def test_invalid_config_rejected(tmp_path: Path, runner: CliRunner) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("storage:\n  backend: redis\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(path), "stages"])

    assert result.exit_code != 0


def test_config_with_non_yaml_extension(tmp_path: Path, runner: CliRunner) -> None:
    path = tmp_path / "ohriv.conf"
    path.write_text("storage:\n  backend: memory\n", encoding="utf-8")

    result = invoke(runner, path, "stages")

    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("1. Recruiter Screen")


def test_malformed_config_yaml_is_a_usage_error(tmp_path: Path, runner: CliRunner) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("storage: [\n", encoding="utf-8")

    result = invoke(runner, path, "stages")

    assert result.exit_code == 2
    assert isinstance(result.exception, SystemExit)
