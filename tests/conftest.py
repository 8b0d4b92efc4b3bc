"""Shared fixtures for mrtgdf tests."""

import os
from types import SimpleNamespace

import pytest

from mrtgdf.cache import CacheStore
from mrtgdf.config import CacheConfig, get_settings
from mrtgdf.interfaces import IMountChecker
from mrtgdf.models import FilesystemStats


class FixedMountChecker(IMountChecker):
    """Mount checker that always gives the same answer."""

    def __init__(self, mounted: bool):
        self.mounted = mounted
        self.calls = []

    def is_mount_point(self, path: str) -> bool:
        self.calls.append(path)
        return self.mounted


def make_statvfs(stats: FilesystemStats) -> SimpleNamespace:
    """Build an object shaped like os.statvfs_result."""
    return SimpleNamespace(
        f_blocks=stats.blocks,
        f_bfree=stats.blocks_free,
        f_bavail=stats.blocks_available,
        f_files=stats.files,
        f_ffree=stats.files_free,
    )


def make_stat(dev: int, ino: int) -> os.stat_result:
    """Build an os.stat_result with only device and inode set."""
    return os.stat_result((0o40755, ino, dev, 2, 0, 0, 4096, 0, 0, 0))


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at a temporary directory and reset cached settings."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("MRTGDF_CACHE_DIR", raising=False)
    monkeypatch.delenv("MRTGDF_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield home
    get_settings.cache_clear()


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "cache"


@pytest.fixture
def store(cache_dir):
    return CacheStore(CacheConfig(directory=cache_dir))


@pytest.fixture
def sample_stats():
    return FilesystemStats(
        blocks=1000,
        blocks_free=300,
        blocks_available=250,
        files=300,
        files_free=200,
    )
