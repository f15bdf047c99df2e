from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script in a subprocess and checks exit codes,
stream output and the JSON payload.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "unitcatalog" / "main.py"


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    HOME is redirected so the saved configuration never touches the real
    user directory.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    cmd = [sys.executable, str(ENTRY_POINT)] + args
    return subprocess.run(cmd, env=env, capture_output=True, text=True, encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path: Path, sample_catalog) -> Path:
    """Directory holding the 'ua' catalog data file."""
    d = tmp_path / "data"
    d.mkdir()
    (d / "ua.json").write_text(json.dumps(sample_catalog), encoding="utf-8")
    return d


def test_cli_json_filtering(tmp_path: Path, data_dir: Path) -> None:
    result = run_cli(
        ["--use-defaults", "-d", str(data_dir), "-q", "Marine", "--json"],
        home=tmp_path,
    )

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["title"] == "Ukrainian Units"
    assert payload["search_mode"] is True
    assert payload["tokens"] == ["marine"]
    assert payload["jump_index"] == [{"name": "Naval Forces", "key": "cat-0"}]

    naval = payload["units"][0]
    assert "patches" not in naval
    assert naval["subunits"][0]["patches"] == [
        {"full": "images/unknown.jpg", "thumb": "images/unknown.jpg"}
    ]


def test_cli_human_view_without_query(tmp_path: Path, data_dir: Path) -> None:
    result = run_cli(["--use-defaults", "-d", str(data_dir)], home=tmp_path)

    assert result.returncode == 0, result.stderr
    assert result.stdout.startswith("Ukrainian Units")
    assert "├── 1st Army Corps [images/1ac_t.png]" in result.stdout
    assert "└── (group)" in result.stdout


def test_cli_reports_no_matches(tmp_path: Path, data_dir: Path) -> None:
    result = run_cli(["--use-defaults", "-d", str(data_dir), "-q", "zzz"], home=tmp_path)

    assert result.returncode == 0
    assert "No matching units." in result.stdout


def test_cli_missing_source_exits_with_code_2(tmp_path: Path) -> None:
    result = run_cli(["--use-defaults", "-s", str(tmp_path / "nope.json")], home=tmp_path)

    assert result.returncode == 2
    assert "ERROR" in result.stderr


def test_cli_dump_config(tmp_path: Path) -> None:
    result = run_cli(["--use-defaults", "-c", "RU", "--details", "--dump-config"], home=tmp_path)

    assert result.returncode == 0
    cfg = json.loads(result.stdout)
    assert cfg["catalog"] == "ru"
    assert cfg["compact_mode"] is False


def test_cli_save_config_is_reused(tmp_path: Path, data_dir: Path) -> None:
    saved = run_cli(["-c", "ua", "-d", str(data_dir), "--save-config", "--dump-config"], home=tmp_path)
    assert saved.returncode == 0

    reused = run_cli(["--json"], home=tmp_path)
    assert reused.returncode == 0, reused.stderr
    assert len(json.loads(reused.stdout)["units"]) == 3


def test_cli_non_utf8_catalog_exits_with_code_2(tmp_path: Path) -> None:
    bad = tmp_path / "ua.json"
    bad.write_bytes(b'[{"name": "\xff\xfe"}]')

    result = run_cli(["--use-defaults", "-s", str(bad)], home=tmp_path)

    assert result.returncode == 2
    assert "not valid UTF-8" in result.stderr
    assert "Unexpected failure" not in result.stderr


def test_cli_log_file_receives_diagnostics(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "unitcatalog.log"

    result = run_cli(
        ["--use-defaults", "-s", str(tmp_path / "nope.json"), "--log-file", str(log_file)],
        home=tmp_path,
    )

    assert result.returncode == 2
    assert log_file.exists()
    content = log_file.read_text(encoding="utf-8")
    assert "ERROR" in content
    assert "nope.json" in content


def test_cli_compact_flag_overrides_saved_details_mode(tmp_path: Path) -> None:
    saved = run_cli(["--details", "--save-config", "--dump-config"], home=tmp_path)
    assert json.loads(saved.stdout)["compact_mode"] is False

    restored = run_cli(["--compact", "--dump-config"], home=tmp_path)
    assert restored.returncode == 0
    assert json.loads(restored.stdout)["compact_mode"] is True
