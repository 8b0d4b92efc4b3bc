"""
Mount point detection.

A path is a mount point when its device differs from its parent's, or when
it is its own parent (the filesystem root).
"""

import logging
import os
from typing import Callable

from mrtgdf.exceptions import StatError
from mrtgdf.interfaces import IMountChecker

logger = logging.getLogger(__name__)


def parent_directory(path: str) -> str:
    """
    Return the directory containing path, following POSIX dirname rules.

    Trailing slashes are ignored. A path without a slash has parent '.',
    and the root (any run of slashes) is its own parent.

    Example:
        >>> parent_directory("/mnt/usb/")
        '/mnt'
        >>> parent_directory("data")
        '.'
        >>> parent_directory("/")
        '/'
    """
    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path else "."
    head, sep, _ = stripped.rpartition("/")
    if not sep:
        return "."
    head = head.rstrip("/")
    return head or "/"


class MountChecker(IMountChecker):
    """
    Decide whether a path is currently a mounted filesystem.

    When a removable or network mount is detached, its mount point is left
    behind as an ordinary directory on the parent filesystem. That directory
    has the same device as its parent, which is what is detected here.
    """

    def __init__(self, stat_func: Callable[[str], os.stat_result] = os.stat):
        """
        Args:
            stat_func: Function used to stat paths (os.stat by default)
        """
        self._stat = stat_func

    def _stat_path(self, path: str) -> os.stat_result:
        try:
            return self._stat(path)
        except OSError as e:
            raise StatError.from_os_error("stat", path, e) from e

    def is_mount_point(self, path: str) -> bool:
        """
        Return True if path is the root of a mounted filesystem.

        Raises:
            StatError: If path or its parent cannot be stat'ed
        """
        st = self._stat_path(path)
        parent = self._stat_path(parent_directory(path))

        if st.st_dev != parent.st_dev:
            logger.debug(f"{path} is a mount point (device differs from parent)")
            return True
        if st.st_ino == parent.st_ino:
            logger.debug(f"{path} is a filesystem root")
            return True
        logger.debug(f"{path} is not a mount point")
        return False
