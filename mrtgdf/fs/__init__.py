"""Filesystem probes: mount point detection and live statistics."""

from mrtgdf.fs.mount import MountChecker, parent_directory
from mrtgdf.fs.statfs import read_filesystem_stats

__all__ = [
    "MountChecker",
    "parent_directory",
    "read_filesystem_stats",
]
