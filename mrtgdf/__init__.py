"""mrtgdf: filesystem usage for MRTG, with cached stats for unmounted paths."""

__version__ = "1.0.0"
