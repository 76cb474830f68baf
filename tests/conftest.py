"""Shared test fixtures."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def package_row() -> Callable[..., dict[str, object]]:
    """Factory for a single ``locked`` row as composer prints it."""

    def _make(**overrides: object) -> dict[str, object]:
        row: dict[str, object] = {
            "name": "acme/gadget",
            "version": "1.0.0",
            "latest": "2.0.0",
            "latest-status": "update-possible",
            "description": "d",
            "warning": None,
        }
        row.update(overrides)
        return row

    return _make


@pytest.fixture
def completed() -> Callable[..., subprocess.CompletedProcess[bytes]]:
    """Factory for fake composer results.

    ``stdout`` may be bytes, text, or a dict that is dumped as JSON.
    """

    def _make(
        returncode: int = 0,
        stdout: bytes | str | dict = b'{"locked":[]}',
        stderr: bytes = b"",
    ) -> subprocess.CompletedProcess[bytes]:
        if isinstance(stdout, dict):
            stdout = json.dumps(stdout)
        if isinstance(stdout, str):
            stdout = stdout.encode("utf-8")
        return subprocess.CompletedProcess(
            args=["composer"], returncode=returncode, stdout=stdout, stderr=stderr
        )

    return _make


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Create a temporary .composer-outdated.toml."""
    content = """\
# packages we pin on purpose
[outdated]
ignore = [
    "acme/widget",
    "acme/legacy",
]
"""
    path = tmp_path / ".composer-outdated.toml"
    path.write_text(content)
    return path
