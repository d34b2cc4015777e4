"""Basic smoke tests for the textlens package."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest


def test_package_exports_error_hierarchy() -> None:
    import textlens

    assert issubclass(textlens.TextTooLongError, textlens.InputValidationError)
    assert issubclass(textlens.ReplyParseError, textlens.TextLensError)


@pytest.mark.skipif(sys.executable is None, reason="Python executable not available")
def test_cli_help_runs() -> None:
    """Verify that ``python -m textlens`` prints help and exits cleanly."""
    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    env = os.environ.copy()
    existing_path = env.get("PYTHONPATH", "")
    env["PYTHONPATH"] = (
        f"{src_dir}{os.pathsep}{existing_path}" if existing_path else str(src_dir)
    )

    result = subprocess.run(
        [sys.executable, "-m", "textlens", "--help"],
        check=False,
        capture_output=True,
        text=True,
        env=env,
    )
    assert result.returncode == 0
    assert "textlens" in result.stdout
