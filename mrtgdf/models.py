"""
Value types shared across mrtgdf.

FilesystemStats is the snapshot both the live statistics call and the cache
produce; StatsResult is what StatsProvider hands to the report layer.
"""

import os
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class FilesystemStats:
    """
    Capacity counters of one filesystem at one point in time.

    Attributes:
        blocks: Total data blocks, in the filesystem's block size
        blocks_free: Free blocks, including those reserved for root
        blocks_available: Free blocks usable by unprivileged processes
        files: Total inodes
        files_free: Free inodes
    """
    blocks: int
    blocks_free: int
    blocks_available: int
    files: int
    files_free: int

    @classmethod
    def from_statvfs(cls, result: os.statvfs_result) -> "FilesystemStats":
        """Create FilesystemStats from an os.statvfs() result."""
        return cls(
            blocks=result.f_blocks,
            blocks_free=result.f_bfree,
            blocks_available=result.f_bavail,
            files=result.f_files,
            files_free=result.f_ffree,
        )

    def as_tuple(self) -> tuple:
        return (
            self.blocks,
            self.blocks_free,
            self.blocks_available,
            self.files,
            self.files_free,
        )

    @property
    def blocks_used(self) -> int:
        """Blocks not available to ordinary processes."""
        return self.blocks - self.blocks_available

    @property
    def files_used(self) -> int:
        return self.files - self.files_free


@dataclass(frozen=True)
class Live:
    """Path is mounted; stats were read just now and stashed."""
    stats: FilesystemStats


@dataclass(frozen=True)
class Cached:
    """Path is not mounted; stats are the last ones stashed."""
    stats: FilesystemStats


@dataclass(frozen=True)
class Unknown:
    """Path is not mounted and no usable cache record exists.

    io_error is set when a record exists but could not be read.
    """
    reason: str
    io_error: bool = False


StatsResult = Union[Live, Cached, Unknown]
