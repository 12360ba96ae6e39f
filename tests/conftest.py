"""Shared fixtures: fake linter executables."""
import sys
from pathlib import Path

import pytest

from vale_frontmatter.config import Config

if sys.platform == "win32":
    collect_ignore_glob = ["test_runner.py", "test_lint.py", "test_cli.py"]


@pytest.fixture
def make_linter(tmp_path):
    """Create a fake linter from a shell script body."""
    def _make(body: str, name: str = "fake-vale") -> Path:
        script = tmp_path / "bin" / name
        script.parent.mkdir(exist_ok=True)
        script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        script.chmod(0o755)
        return script
    return _make


@pytest.fixture
def make_config(tmp_path):
    """Config pointing at a fake linter and a temp dir under tmp_path."""
    def _make(linter: Path, timeout: float | None = 10.0) -> Config:
        return Config(linter=str(linter), timeout=timeout, temp_dir=tmp_path / "temp")
    return _make
