"""
Per-path store of the last known filesystem statistics.

Each monitored path gets one small binary record in the cache directory,
named by encode_path(). Records are only rewritten when the counters change.
"""

import contextlib
import enum
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from mrtgdf.cache.encoding import encode_path
from mrtgdf.cache.record import RECORD_SIZE, pack_stats, unpack_stats
from mrtgdf.config import CacheConfig
from mrtgdf.exceptions import CacheDirCreateError, CacheIOError, CacheMissError
from mrtgdf.interfaces import ICacheStore
from mrtgdf.models import FilesystemStats

logger = logging.getLogger(__name__)

# Encoded names never contain a space, so temporary files cannot clash with records
_TEMP_PREFIX = ".tmp "


class LookupStatus(enum.Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    CORRUPT = "corrupt"
    IO_ERROR = "io_error"


@dataclass(frozen=True)
class CacheLookup:
    """
    Outcome of reading a cache record.

    Attributes:
        status: What the lookup found
        stats: The cached stats when status is FOUND, None otherwise
        message: Human-readable reason when status is not FOUND
    """
    status: LookupStatus
    stats: Optional[FilesystemStats] = None
    message: str = ""

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


class CacheStore(ICacheStore):
    """
    Load and save FilesystemStats records under one cache directory.

    The directory is created lazily on the first write.

    Example:
        >>> store = CacheStore(CacheConfig(directory=Path("/tmp/cache")))
        >>> store.stash("/mnt/usb", stats)
        >>> store.lookup("/mnt/usb").stats == stats
        True
    """

    def __init__(self, config: CacheConfig):
        self._config = config

    @property
    def directory(self) -> Path:
        return self._config.directory

    def path_for(self, path: str) -> Path:
        """Return the record file used for a monitored path."""
        return self._config.directory / encode_path(path)

    def lookup(self, path: str) -> CacheLookup:
        """
        Read the record for a path without raising.

        A record of the wrong length is reported as CORRUPT and its contents
        are ignored.
        """
        record = self.path_for(path)
        try:
            f = open(record, "rb")
        except FileNotFoundError as e:
            return CacheLookup(LookupStatus.NOT_FOUND, message=f"open {record}: {e.strerror}")
        except OSError as e:
            return CacheLookup(LookupStatus.IO_ERROR, message=f"open {record}: {e.strerror or e}")

        try:
            with f:
                data = f.read(RECORD_SIZE + 1)
        except OSError as e:
            return CacheLookup(LookupStatus.IO_ERROR, message=f"reading {record}: {e.strerror or e}")

        if len(data) != RECORD_SIZE:
            reason = "truncated" if len(data) < RECORD_SIZE else "too long"
            return CacheLookup(LookupStatus.CORRUPT, message=f"reading {record}: {reason}")

        return CacheLookup(LookupStatus.FOUND, stats=unpack_stats(data))

    def retrieve(self, path: str) -> FilesystemStats:
        """
        Return the cached stats for a path.

        Raises:
            CacheMissError: If there is no record or it has the wrong size
            CacheIOError: If the record exists but cannot be read
        """
        result = self.lookup(path)
        if result.found:
            return result.stats
        details = {"path": path, "status": result.status.value}
        if result.status is LookupStatus.IO_ERROR:
            raise CacheIOError(result.message, details=details)
        raise CacheMissError(result.message, details=details)

    def stash(self, path: str, stats: FilesystemStats) -> bool:
        """
        Save stats for a path unless the record already holds the same counters.

        Returns:
            True if the record was written, False if the write was skipped

        Raises:
            CacheDirCreateError: If the cache directory cannot be created
            CacheIOError: If the record cannot be written
        """
        current = self.lookup(path)
        if current.found and current.stats == stats:
            logger.debug(f"Cache record for {path} unchanged, not rewriting")
            return False

        self._ensure_directory()
        self._write_record(self.path_for(path), pack_stats(stats))
        logger.debug(f"Stashed stats for {path}")
        return True

    def _ensure_directory(self) -> None:
        directory = self._config.directory
        try:
            directory.mkdir(mode=self._config.dir_mode, parents=True, exist_ok=True)
        except OSError as e:
            raise CacheDirCreateError.from_os_error("mkdir", str(directory), e) from e

    def _write_record(self, record: Path, data: bytes) -> None:
        directory = self._config.directory
        try:
            fd, temp = tempfile.mkstemp(dir=directory, prefix=_TEMP_PREFIX)
        except OSError as e:
            raise CacheIOError.from_os_error("open", str(directory / _TEMP_PREFIX), e) from e

        try:
            try:
                os.fchmod(fd, self._config.file_mode & ~_current_umask())
            except OSError as e:
                os.close(fd)
                raise CacheIOError.from_os_error("chmod", temp, e) from e
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
            except OSError as e:
                raise CacheIOError.from_os_error("writing", temp, e) from e
            try:
                os.replace(temp, record)
            except OSError as e:
                raise CacheIOError.from_os_error("renaming", temp, e) from e
        except CacheIOError:
            with contextlib.suppress(OSError):
                os.unlink(temp)
            raise


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask
