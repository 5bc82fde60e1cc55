"""Shared test fixtures."""

from __future__ import annotations

import errno
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from rush.context import AppContext
from rush.filesystem import RealFileSystem
from rush.types import ObjectType


class CrossVolumeFileSystem(RealFileSystem):
    """Real filesystem whose rename always fails as it does across volumes."""

    def __init__(self) -> None:
        self.rename_attempts: list[tuple[Path, Path]] = []

    def rename(self, src: Path, dst: Path) -> None:
        self.rename_attempts.append((src, dst))
        raise OSError(errno.EXDEV, "Invalid cross-device link", str(src))


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def cross_volume_fs() -> Any:
    """Filesystem backend that forces the copy-delete fallback on move."""
    return CrossVolumeFileSystem()


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    By default every path is reported as absent.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.object_type.return_value = ObjectType.UNKNOWN
    fs.read_text.return_value = ""
    fs.size.return_value = 0
    fs.iterdir.return_value = []
    return fs


# ============================================================================
# App Context Fixtures
# ============================================================================


@pytest.fixture
def app_context() -> AppContext:
    """Create an AppContext with default config and the real filesystem."""
    return AppContext()
