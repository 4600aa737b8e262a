from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess. These tests validate argument parsing, exit codes
and stream output (stdout/stderr) against real directories.
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
ENTRY_POINT = SRC_DIR / "directorytree" / "main.py"


def run_cli(args: List[str], cwd: Path | None = None, stdin: str | None = None) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH to ensure the package
    is resolvable without being installed in site-packages.

    Args:
        args: List of command line arguments (excluding 'python' and script path).
        cwd: Optional working directory for the subprocess.
        stdin: Optional text fed to the interactive prompt.

    Returns:
        subprocess.CompletedProcess: The result object containing returncode, stdout, and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env.pop("DIRECTORYTREE_LANG", None)

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        input=stdin,
        capture_output=True,
        text=True,
        encoding="utf-8"
    )


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a dummy project structure for E2E testing.

    Structure:
    /project
      /node_modules
        lib.js
      /src
        main.py
      .env
      README.md
    """
    root = tmp_path / "project"
    (root / "node_modules").mkdir(parents=True)
    (root / "node_modules" / "lib.js").write_text("", encoding="utf-8")
    (root / "src").mkdir()
    (root / "src" / "main.py").write_text("def main(): pass", encoding="utf-8")
    (root / ".env").write_text("KEY=1", encoding="utf-8")
    (root / "README.md").write_text("# Dummy Project", encoding="utf-8")
    return root

# -----------------------------------------------------------------------------
# E2E TEST CASES
# -----------------------------------------------------------------------------

def test_e2e_help_command() -> None:
    """Verify that --help returns exit code 0 and prints usage info."""
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "usage: directorytree" in result.stdout
    assert "--show-hidden" in result.stdout


def test_e2e_version_command() -> None:
    result = run_cli(["--version"])

    assert result.returncode == 0
    assert result.stdout.startswith("directorytree ")


def test_e2e_plain_tree(sample_project: Path) -> None:
    result = run_cli(["-p", str(sample_project), "-c", "false"])

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    lines = result.stdout.splitlines()
    assert lines[0] == (
        f"Directory Tree for: {sample_project} "
        "(max depth: unlimited, excluding: .git, build, dist, node_modules, target)"
    )
    assert lines[1] == ""
    assert lines[2:] == [
        "project",
        "├── src",
        "│   └── main.py",
        "└── README.md",
    ]


def test_e2e_hidden_and_custom_exclusion(sample_project: Path) -> None:
    result = run_cli(["-p", str(sample_project), "-c", "false", "-h", "-e", "src"])

    assert result.returncode == 0
    body = result.stdout.splitlines()[2:]
    assert body == ["project", "├── .env", "└── README.md"]
    assert "excluding: .git, build, dist, node_modules, src, target" in result.stdout


def test_e2e_colored_output(sample_project: Path) -> None:
    result = run_cli(["-p", str(sample_project), "-c", "true"])

    assert result.returncode == 0
    assert "├── \033[1;34msrc\033[0m" in result.stdout
    assert "└── \033[36mREADME.md\033[0m" in result.stdout


def test_e2e_depth_and_summary(sample_project: Path) -> None:
    result = run_cli(["-p", str(sample_project), "-c", "false", "-d", "0", "--summary"])

    assert result.returncode == 0
    assert "(max depth: 0," in result.stdout
    assert "main.py" not in result.stdout
    assert result.stdout.rstrip().endswith("1 directory, 1 file")


def test_e2e_invalid_root(tmp_path: Path) -> None:
    result = run_cli(["-p", str(tmp_path / "missing")])

    assert result.returncode == 2
    assert "Invalid directory path" in result.stderr
    assert result.stdout == ""


def test_e2e_invalid_depth_falls_back(sample_project: Path) -> None:
    result = run_cli(["-p", str(sample_project), "-c", "false", "-d", "deep"])

    assert result.returncode == 0
    assert "Invalid depth 'deep'" in result.stderr
    assert "main.py" in result.stdout


def test_e2e_dump_config(sample_project: Path) -> None:
    result = run_cli(["-p", str(sample_project), "-d", "3", "--dump-config"])

    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["root_path"] == str(sample_project)
    assert data["max_depth"] == 3


def test_e2e_interactive_mode(sample_project: Path) -> None:
    answers = f"{sample_project}\n1\nno\n\n\n"
    result = run_cli([], stdin=answers)

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert "Directory Tree for:" in result.stdout
    assert "└── README.md" in result.stdout


def test_e2e_log_file(sample_project: Path, tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "run.log"
    result = run_cli(["-p", str(sample_project), "-c", "false", "--debug", "--log-file", str(log_path)])

    assert result.returncode == 0
    assert log_path.exists()
    assert "Generating directory tree" in log_path.read_text(encoding="utf-8")
