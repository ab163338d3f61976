"""Tests for the outliner CLI."""

import json
from pathlib import Path

from typer.testing import CliRunner

from outliner.cli import app
from outliner.models.node import ROOT_NODE_ID

runner = CliRunner()


def _cached(tmp_path: Path) -> dict:
    return json.loads((tmp_path / "outline.json").read_text())


def test_show_on_fresh_directory_prints_root(tmp_path: Path) -> None:
    result = runner.invoke(app, ["show", "--data-dir", str(tmp_path)])
    assert result.exit_code == 0
    assert result.output == "- Root  <\n"


def test_show_creates_missing_data_directory(tmp_path: Path) -> None:
    data = tmp_path / "nested" / "data"
    result = runner.invoke(app, ["show", "--data-dir", str(data)])
    assert result.exit_code == 0
    assert data.is_dir()


def test_do_runs_commands_and_persists(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["do", "--data-dir", str(tmp_path), "add-line", "add-line", "indent"]
    )
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "- Root"
    assert lines[1].startswith("    - ")
    assert lines[2].startswith("        - ")
    assert lines[2].endswith("  <")

    cached = _cached(tmp_path)
    (top,) = cached["byId"][ROOT_NODE_ID]["childIds"]
    assert cached["byId"][top]["childIds"] == [cached["currentId"]]


def test_do_accepts_underscored_names(tmp_path: Path) -> None:
    result = runner.invoke(app, ["do", "--data-dir", str(tmp_path), "add_line", "move_prev"])
    assert result.exit_code == 0, result.output
    assert _cached(tmp_path)["currentId"] == ROOT_NODE_ID


def test_do_rejects_unknown_command(tmp_path: Path) -> None:
    result = runner.invoke(app, ["do", "--data-dir", str(tmp_path), "add-line", "delete"])
    assert result.exit_code == 1
    assert not (tmp_path / "outline.json").exists()


def test_state_survives_between_invocations(tmp_path: Path) -> None:
    runner.invoke(app, ["do", "--data-dir", str(tmp_path), "add-line"])
    runner.invoke(app, ["rename", "--data-dir", str(tmp_path), "Groceries"])
    result = runner.invoke(app, ["show", "--data-dir", str(tmp_path)])
    assert result.output == "- Root\n    - Groceries  <\n"


def test_keys_dispatches_gestures(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["keys", "--data-dir", str(tmp_path), "enter", "enter", "tab", "up", "left"]
    )
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert len(lines) == 2
    assert lines[1].endswith("[+1]  <")


def test_show_json(tmp_path: Path) -> None:
    runner.invoke(app, ["do", "--data-dir", str(tmp_path), "add-line"])
    result = runner.invoke(app, ["show", "--data-dir", str(tmp_path), "--json"])
    tree = json.loads(result.output)
    assert tree["id"] == ROOT_NODE_ID
    assert tree["children"][0]["current"] is True


def test_reset_discards_outline(tmp_path: Path) -> None:
    runner.invoke(app, ["do", "--data-dir", str(tmp_path), "add-line", "add-line"])
    result = runner.invoke(app, ["reset", "--data-dir", str(tmp_path)])
    assert result.exit_code == 0
    assert _cached(tmp_path)["byId"][ROOT_NODE_ID]["childIds"] == []


def test_corrupt_cache_is_repaired_on_load(tmp_path: Path) -> None:
    (tmp_path / "outline.json").write_text(json.dumps({"byId": {"x": 1}, "currentId": 5}))
    result = runner.invoke(app, ["show", "--data-dir", str(tmp_path)])
    assert result.exit_code == 0
    assert result.output.endswith("- Root  <\n")


def test_truncated_cache_starts_fresh(tmp_path: Path) -> None:
    (tmp_path / "outline.json").write_text('{"byId": {"id_root": ')
    result = runner.invoke(app, ["show", "--data-dir", str(tmp_path)])
    assert result.exit_code == 0
    assert result.output.endswith("- Root  <\n")


def test_null_cache_starts_fresh(tmp_path: Path) -> None:
    (tmp_path / "outline.json").write_text("null")
    result = runner.invoke(app, ["do", "--data-dir", str(tmp_path), "add-line"])
    assert result.exit_code == 0, result.output
    assert len(_cached(tmp_path)["byId"][ROOT_NODE_ID]["childIds"]) == 1


def test_do_dry_run_leaves_cache_untouched(tmp_path: Path) -> None:
    runner.invoke(app, ["do", "--data-dir", str(tmp_path), "add-line"])
    before = (tmp_path / "outline.json").read_text()

    result = runner.invoke(
        app, ["do", "--data-dir", str(tmp_path), "--dry-run", "add-line", "indent"]
    )
    assert result.exit_code == 0, result.output
    assert "would update" in result.output
    assert (tmp_path / "outline.json").read_text() == before


def test_dry_run_does_not_create_data_directory(tmp_path: Path) -> None:
    data = tmp_path / "missing"
    result = runner.invoke(app, ["reset", "--data-dir", str(data), "--dry-run"])
    assert result.exit_code == 0, result.output
    assert not data.exists()
