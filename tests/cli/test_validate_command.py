"""Tests for the validate CLI command."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from bento.entries import make_entry

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run(*args: str, stdin: str | None = None, env: dict[str, str] | None = None):
    """Run the CLI from the repository root with a clean layout environment."""
    run_env = {
        key: value
        for key, value in os.environ.items()
        if key not in ("BENTO_CONFIG_PATH", "BENTO_LAYOUT")
    }
    run_env.update(env or {})
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        input=stdin,
        env=run_env,
        timeout=30,
    )


def _write_entries(path: Path, *type_ids: str) -> Path:
    entries = [make_entry(f"e{i}", t) for i, t in enumerate(type_ids)]
    path.write_text(json.dumps(entries), encoding="utf-8")
    return path


@pytest.mark.integration
def test_validate_valid_entries(tmp_path):
    items = _write_entries(tmp_path / "items.json", "CardTypeA", "CardTypeB", "CardTypeB")
    result = _run("validate", str(items), "--layout", "bento-1-2")
    assert result.returncode == 0
    assert "Bento layout validation passed." in result.stdout


@pytest.mark.integration
def test_validate_reports_errors(tmp_path):
    items = _write_entries(tmp_path / "items.json", "CardTypeA")
    result = _run("validate", str(items))
    assert result.returncode == 1
    assert "- Expected 3 entries, but found 1." in result.stdout
    assert "- Missing entry at position 2 (rightColumnBottomCard)." in result.stdout


@pytest.mark.integration
def test_validate_types_from_stdin_as_json():
    result = _run(
        "validate",
        "-",
        "--types",
        "--format",
        "json",
        stdin=json.dumps(["CardTypeA", "CardTypeA", "CardTypeB"]),
    )
    assert result.returncode == 1
    data = json.loads(result.stdout)
    assert data["valid"] is False
    assert {
        "error_type": "type_limit_exceeded",
        "message": "Too many entries of type 'CardTypeA'. Expected maximum 1, but found 2.",
        "type_id": "CardTypeA",
        "limit": 1,
        "actual": 2,
    } in data["errors"]


@pytest.mark.integration
def test_validate_with_config_file(tmp_path, layout_config_data):
    config = tmp_path / "layout.json"
    config.write_text(json.dumps(layout_config_data), encoding="utf-8")
    items = _write_entries(tmp_path / "items.json", "typeA", "typeC")
    result = _run("validate", str(items), "--config", str(config))
    assert result.returncode == 0


@pytest.mark.integration
def test_validate_config_from_environment(tmp_path, layout_config_data):
    config = tmp_path / "layout.json"
    config.write_text(json.dumps(layout_config_data), encoding="utf-8")
    items = _write_entries(tmp_path / "items.json", "typeA", "typeB")
    result = _run("validate", str(items), env={"BENTO_CONFIG_PATH": str(config)})
    assert result.returncode == 0


@pytest.mark.integration
def test_validate_unknown_layout(tmp_path):
    items = _write_entries(tmp_path / "items.json", "CardTypeA")
    result = _run("validate", str(items), "--layout", "nope")
    assert result.returncode == 2
    assert "Cannot validate: Unknown layout 'nope'. Available:" in result.stderr
    assert "\"Unknown layout" not in result.stderr


@pytest.mark.integration
def test_validate_bad_config(tmp_path):
    config = tmp_path / "layout.json"
    config.write_text("{}", encoding="utf-8")
    items = _write_entries(tmp_path / "items.json")
    result = _run("validate", str(items), "--config", str(config))
    assert result.returncode == 2
    assert "Invalid layout config" in result.stderr


@pytest.mark.integration
def test_layouts_lists_presets():
    result = _run("layouts")
    assert result.returncode == 0
    assert "bento-1-2 (3 entries)" in result.stdout
    assert "[1] rightColumnTopCard: CardTypeB, CardTypeC" in result.stdout


@pytest.mark.integration
def test_schema_prints_json_schema():
    result = _run("schema")
    assert result.returncode == 0
    assert json.loads(result.stdout)["title"] == "LayoutConfig"


@pytest.mark.integration
def test_env_lists_variables():
    result = _run("env")
    assert result.returncode == 0
    assert "BENTO_LAYOUT [layout] default=bento-1-2" in result.stdout
