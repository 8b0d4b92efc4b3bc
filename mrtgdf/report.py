"""
MRTG-style report rendering.

The report is four lines: block usage percent, inode usage percent, a '-'
placeholder, and the host name.
"""

import math
import os
from typing import List

from mrtgdf.models import FilesystemStats

UNKNOWN = "UNKNOWN"
PLACEHOLDER = "-"


def percent(count: int, maximum: int) -> int:
    """
    Return count/maximum as a whole percentage, rounding halves up.

    A zero maximum gives 0.

    Example:
        >>> percent(1, 3), percent(2, 3), percent(5, 0)
        (33, 67, 0)
    """
    if not maximum:
        return 0
    return int(math.floor(100.0 * count / maximum + 0.5))


def hostname() -> str:
    """Return the network node name of this machine."""
    return os.uname().nodename


def report_lines(stats: FilesystemStats, host: str) -> List[str]:
    return [
        str(percent(stats.blocks_used, stats.blocks)),
        str(percent(stats.files_used, stats.files)),
        PLACEHOLDER,
        host,
    ]


def unknown_lines(host: str) -> List[str]:
    return [UNKNOWN, UNKNOWN, PLACEHOLDER, host]


def render(lines: List[str]) -> str:
    return "".join(f"{line}\n" for line in lines)
