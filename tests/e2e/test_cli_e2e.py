from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script through a subprocess and validates exit
codes, stdout payloads and stderr diagnostics, as a static-site build
script would see them.
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
ENTRY_POINT = SRC_DIR / "pagenav" / "main.py"

NAV_YAML = """\
- index.md
- python:
    - install.md
    - usage.md
  node:
    - setup.md
- shared:
    - faq.md
- outro.md
"""


def run_cli(args: List[str]) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH.

    Args:
        args: Command line arguments (excluding interpreter and script).

    Returns:
        subprocess.CompletedProcess: returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


@pytest.fixture
def nav_file(tmp_path: Path) -> Path:
    path = tmp_path / "navigation.yml"
    path.write_text(NAV_YAML, encoding="utf-8")
    return path


def test_next_page_branch_point(nav_file: Path) -> None:
    """TC-01: A branch point yields one suffixed key per track."""
    result = run_cli([
        "next-page", "--navigation", str(nav_file),
        "--current-page", "shared/index.md", "--url-prefix", "/docs",
    ])
    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout) == {
        "next_page-python": "/docs/python/install.md",
        "next_page-node": "/docs/node/setup.md",
    }


def test_next_page_into_repeated_shared_track(nav_file: Path) -> None:
    """TC-02: The shared prefix is stripped, then re-added for root pages."""
    result = run_cli(["next-page", "--navigation", str(nav_file), "--current-page", "node/setup.md"])
    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout) == {"next_page": "shared/faq.md"}


def test_next_page_terminal_exits_with_error(nav_file: Path) -> None:
    """TC-03: The last page is a fatal condition for the build."""
    result = run_cli(["next-page", "--navigation", str(nav_file), "--current-page", "shared/outro.md"])
    assert result.returncode == 1
    assert result.stdout == ""
    assert "Error processing navigation: Could not find next page for: shared/outro.md" in result.stderr


def test_list_pages(nav_file: Path, tmp_path: Path) -> None:
    """TC-04: Every page is listed in document order."""
    root = tmp_path / "site"
    result = run_cli(["list-pages", "--navigation", str(nav_file), "--root-path", str(root)])
    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines() == [
        str(root / "shared" / "index.md"),
        str(root / "python" / "install.md"),
        str(root / "python" / "usage.md"),
        str(root / "node" / "setup.md"),
        str(root / "shared" / "faq.md"),
        str(root / "shared" / "outro.md"),
    ]


def test_missing_navigation_file(tmp_path: Path) -> None:
    """TC-05: A missing navigation file exits with code 2."""
    result = run_cli(["list-pages", "--navigation", str(tmp_path / "none.yml")])
    assert result.returncode == 2
    assert "does not exist" in result.stderr


def test_debug_logging_goes_to_stderr(nav_file: Path, tmp_path: Path) -> None:
    """TC-06: --debug and --log-file never pollute stdout."""
    log_file = tmp_path / "pagenav.log"
    result = run_cli([
        "next-page", "--navigation", str(nav_file), "--current-page", "python/install.md",
        "--debug", "--log-file", str(log_file),
    ])
    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout) == {"next_page": "python/usage.md"}
    assert "DEBUG" in result.stderr
    assert log_file.exists()
    assert "pagenav.core.navigation" in log_file.read_text(encoding="utf-8")
