"""
Stat-or-fallback orchestration.

Mounted paths are read live and their stats stashed. Unmounted paths are
answered from the cache, or reported as Unknown when nothing was stashed.
"""

import logging
import os
from typing import Callable, Optional

from mrtgdf.cache.store import LookupStatus
from mrtgdf.fs.mount import MountChecker
from mrtgdf.fs.statfs import read_filesystem_stats
from mrtgdf.interfaces import ICacheStore, IMountChecker
from mrtgdf.models import Cached, Live, StatsResult, Unknown

logger = logging.getLogger(__name__)


class StatsProvider:
    """Produce a StatsResult for one path."""

    def __init__(
        self,
        cache_store: ICacheStore,
        mount_checker: Optional[IMountChecker] = None,
        statvfs_func: Callable[[str], os.statvfs_result] = os.statvfs,
    ):
        """
        Args:
            cache_store: Where last known stats are kept
            mount_checker: Mount point detection (MountChecker() by default)
            statvfs_func: Live statistics call (os.statvfs by default)
        """
        self._cache = cache_store
        self._mounts = mount_checker or MountChecker()
        self._statvfs = statvfs_func

    def get_stats(self, path: str) -> StatsResult:
        """
        Return live, cached or unknown stats for path.

        Raises:
            StatError: If path or its parent cannot be stat'ed
            FilesystemStatError: If a mounted path's statistics cannot be read
            CacheDirCreateError: If the cache directory cannot be created
            CacheIOError: If fresh stats cannot be stashed
        """
        if self._mounts.is_mount_point(path):
            stats = read_filesystem_stats(path, self._statvfs)
            self._cache.stash(path, stats)
            return Live(stats)

        lookup = self._cache.lookup(path)
        if lookup.found:
            logger.debug(f"{path} not mounted, using cached stats")
            return Cached(lookup.stats)

        logger.debug(f"{path} not mounted and no usable cache record: {lookup.message}")
        return Unknown(lookup.message, io_error=lookup.status is LookupStatus.IO_ERROR)
