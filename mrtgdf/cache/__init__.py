"""Cache package for mrtgdf.

Keeps the last known filesystem statistics for each monitored path.
"""

from mrtgdf.cache.encoding import encode_path
from mrtgdf.cache.record import RECORD_SIZE, pack_stats, unpack_stats
from mrtgdf.cache.store import CacheLookup, CacheStore, LookupStatus

__all__ = [
    "encode_path",
    "RECORD_SIZE",
    "pack_stats",
    "unpack_stats",
    "CacheLookup",
    "CacheStore",
    "LookupStatus",
]
