"""Live filesystem statistics."""

import os
from typing import Callable

from mrtgdf.exceptions import FilesystemStatError
from mrtgdf.models import FilesystemStats


def read_filesystem_stats(
    path: str,
    statvfs_func: Callable[[str], os.statvfs_result] = os.statvfs,
) -> FilesystemStats:
    """
    Read the current capacity counters of the filesystem containing path.

    Raises:
        FilesystemStatError: If the statistics call fails
    """
    try:
        result = statvfs_func(path)
    except OSError as e:
        raise FilesystemStatError.from_os_error("statfs", path, e) from e
    return FilesystemStats.from_statvfs(result)
