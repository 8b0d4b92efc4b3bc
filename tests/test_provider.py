"""Tests for StatsProvider."""

import pytest

from mrtgdf.exceptions import FilesystemStatError, StatError
from mrtgdf.fs.mount import MountChecker
from mrtgdf.models import Cached, FilesystemStats, Live, Unknown
from mrtgdf.provider import StatsProvider
from tests.conftest import FixedMountChecker, make_statvfs


class TestStatsProvider:
    """Tests for the stat-or-fallback logic."""

    def test_mounted_returns_live_and_stashes(self, store, sample_stats):
        provider = StatsProvider(
            store,
            mount_checker=FixedMountChecker(True),
            statvfs_func=lambda path: make_statvfs(sample_stats),
        )

        result = provider.get_stats("/mnt/usb")

        assert result == Live(sample_stats)
        assert store.retrieve("/mnt/usb") == sample_stats

    def test_mounted_unchanged_keeps_record(self, store, sample_stats):
        provider = StatsProvider(
            store,
            mount_checker=FixedMountChecker(True),
            statvfs_func=lambda path: make_statvfs(sample_stats),
        )
        provider.get_stats("/mnt/usb")
        record = store.path_for("/mnt/usb")
        before = record.stat().st_mtime_ns

        assert provider.get_stats("/mnt/usb") == Live(sample_stats)
        assert record.stat().st_mtime_ns == before

    def test_unmounted_returns_cached(self, store, sample_stats):
        store.stash("/mnt/usb", sample_stats)

        def no_statvfs(path):
            raise AssertionError("statvfs should not be called")

        provider = StatsProvider(store, FixedMountChecker(False), no_statvfs)
        assert provider.get_stats("/mnt/usb") == Cached(sample_stats)

    def test_unmounted_without_cache_is_unknown(self, store):
        provider = StatsProvider(store, FixedMountChecker(False))

        result = provider.get_stats("/mnt/usb")

        assert isinstance(result, Unknown)
        assert "%2Fmnt%2Fusb" in result.reason

    def test_unmounted_with_corrupt_cache_is_unknown(self, store, cache_dir):
        cache_dir.mkdir()
        store.path_for("/mnt/usb").write_bytes(b"short")
        provider = StatsProvider(store, FixedMountChecker(False))

        assert isinstance(provider.get_stats("/mnt/usb"), Unknown)

    def test_live_stats_failure_propagates(self, store):
        def broken_statvfs(path):
            raise OSError(5, "Input/output error")

        provider = StatsProvider(store, FixedMountChecker(True), broken_statvfs)
        with pytest.raises(FilesystemStatError) as exc_info:
            provider.get_stats("/mnt/usb")
        assert exc_info.value.message == "statfs /mnt/usb: Input/output error"

    def test_stat_failure_propagates(self, store, tmp_path):
        provider = StatsProvider(store, MountChecker())
        with pytest.raises(StatError):
            provider.get_stats(str(tmp_path / "missing"))

    def test_real_root_is_live(self, store):
        result = StatsProvider(store).get_stats("/")

        assert isinstance(result, Live)
        assert store.retrieve("/") == result.stats

    def test_detached_mount_point_uses_cache(self, store, tmp_path):
        """A directory that is not mounted now reports what was stashed for it."""
        mount_point = tmp_path / "usb"
        mount_point.mkdir()
        stashed = FilesystemStats(500, 100, 90, 64, 32)
        store.stash(str(mount_point), stashed)

        assert StatsProvider(store).get_stats(str(mount_point)) == Cached(stashed)

    def test_unreadable_cache_flagged_as_io_error(self, store):
        store.path_for("/mnt/usb").mkdir(parents=True)
        provider = StatsProvider(store, FixedMountChecker(False))

        result = provider.get_stats("/mnt/usb")

        assert isinstance(result, Unknown)
        assert result.io_error is True

    def test_missing_cache_not_flagged_as_io_error(self, store):
        result = StatsProvider(store, FixedMountChecker(False)).get_stats("/mnt/usb")
        assert result.io_error is False
