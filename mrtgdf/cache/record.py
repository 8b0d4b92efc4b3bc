"""Fixed-size binary form of FilesystemStats."""

import struct

from mrtgdf.models import FilesystemStats

# total, free, available blocks; total, free inodes
RECORD = struct.Struct("<5Q")
RECORD_SIZE = RECORD.size


def pack_stats(stats: FilesystemStats) -> bytes:
    return RECORD.pack(*stats.as_tuple())


def unpack_stats(data: bytes) -> FilesystemStats:
    """
    Decode a record.

    Raises:
        ValueError: If data is not exactly RECORD_SIZE bytes
    """
    if len(data) != RECORD_SIZE:
        raise ValueError(f"expected {RECORD_SIZE} bytes, got {len(data)}")
    return FilesystemStats(*RECORD.unpack(data))
