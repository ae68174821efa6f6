"""Shared fixtures for template_resolver tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

from template_resolver.registry import reset_store

GREETINGS = """
[greetings]
hello = "hello {user}"
bye = "bye {user}"

[errors]
unknown = "unknown command {command}"
"""


@pytest.fixture(autouse=True)
def fresh_registry():
    """Each test binds its own shared store."""
    reset_store()
    yield
    reset_store()


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    path = tmp_path / "templates.toml"
    path.write_text(GREETINGS, encoding="utf-8")
    return path


@pytest.fixture
def rewrite() -> Callable[[Path, str], int]:
    """Replace a template file's contents and advance its mtime."""

    def _rewrite(path: Path, text: str) -> int:
        before = path.stat().st_mtime_ns if path.exists() else 0
        path.write_text(text, encoding="utf-8")
        mtime = max(before, path.stat().st_mtime_ns) + 2_000_000_000
        os.utime(path, ns=(mtime, mtime))
        return mtime

    return _rewrite


@pytest.fixture
def touch() -> Callable[[Path], int]:
    """Advance a file's mtime without changing its contents."""

    def _touch(path: Path) -> int:
        mtime = path.stat().st_mtime_ns + 2_000_000_000
        os.utime(path, ns=(mtime, mtime))
        return mtime

    return _touch
