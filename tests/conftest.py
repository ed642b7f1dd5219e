"""Shared fixtures for rwenv tests."""

import os
from pathlib import Path
from typing import Union

import pytest


@pytest.fixture(autouse=True)
def clean_rwenv_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's RWENV_* settings out of the tests."""
    for key in list(os.environ):
        if key.startswith("RWENV_"):
            monkeypatch.delenv(key)


@pytest.fixture
def write_env(tmp_path: Path):
    """Write an env file (text or raw bytes) and return its path as a string."""
    counter = iter(range(1000))

    def _write(content: Union[str, bytes], name: str = "") -> str:
        path = tmp_path / (name or f"env{next(counter)}")
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return str(path)

    return _write
