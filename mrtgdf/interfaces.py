"""
Interfaces for the components StatsProvider depends on.

- ICacheStore: persistence of the last known stats per path
- IMountChecker: mount point detection
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mrtgdf.cache.store import CacheLookup
    from mrtgdf.models import FilesystemStats


class ICacheStore(ABC):
    """
    Abstract interface for the per-path stats cache.

    Implementations:
        - CacheStore: one fixed-size binary file per path
    """

    @abstractmethod
    def lookup(self, path: str) -> "CacheLookup":
        """
        Read the cached stats for a path.

        Args:
            path: The monitored path

        Returns:
            A CacheLookup describing the record or why there is none
        """
        pass

    @abstractmethod
    def retrieve(self, path: str) -> "FilesystemStats":
        """
        Read the cached stats for a path, raising on a miss.

        Args:
            path: The monitored path

        Returns:
            The cached FilesystemStats
        """
        pass

    @abstractmethod
    def stash(self, path: str, stats: "FilesystemStats") -> bool:
        """
        Save stats for a path if they differ from the cached ones.

        Args:
            path: The monitored path
            stats: Fresh statistics

        Returns:
            True if the record was written
        """
        pass


class IMountChecker(ABC):
    """Abstract interface for mount point detection."""

    @abstractmethod
    def is_mount_point(self, path: str) -> bool:
        """
        Return True if path is the root of a mounted filesystem.

        Args:
            path: Directory to check
        """
        pass
