"""
Custom exception hierarchy for mrtgdf.

Every error carries an error code and the process exit code the CLI uses
when it reaches the top level.
"""

from typing import Optional


class MrtgdfError(Exception):
    """Base exception for all mrtgdf errors"""
    exit_code: int = 1
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @classmethod
    def from_os_error(cls, operation: str, path: str, exc: OSError) -> "MrtgdfError":
        """Build an error reading '<operation> <path>: <system error text>'."""
        reason = exc.strerror or str(exc)
        return cls(
            f"{operation} {path}: {reason}",
            details={"operation": operation, "path": path, "errno": exc.errno},
        )


class StatError(MrtgdfError):
    """Path or its parent directory cannot be stat'ed"""
    error_code = "STAT_ERROR"


class FilesystemStatError(MrtgdfError):
    """Live statistics for a mounted path cannot be read"""
    error_code = "STATFS_ERROR"


class CacheError(MrtgdfError):
    """Cache-related errors"""
    error_code = "CACHE_ERROR"


class CacheIOError(CacheError):
    """Cache file cannot be read, written or closed"""
    error_code = "CACHE_IO_ERROR"


class CacheMissError(CacheError):
    """No usable cache record (missing or wrong size)"""
    error_code = "CACHE_MISS"


class CacheDirCreateError(CacheError):
    """Cache directory cannot be created"""
    error_code = "CACHE_DIR_CREATE_ERROR"


class OutputError(MrtgdfError):
    """Report cannot be written to stdout"""
    error_code = "OUTPUT_ERROR"


class ConfigError(MrtgdfError):
    """Settings from the environment are invalid"""
    error_code = "CONFIG_ERROR"
