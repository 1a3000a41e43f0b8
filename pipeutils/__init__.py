"""Utilities for threaded processing pipelines: queues, timing, error codes, object, string and system helpers."""

__version__ = "0.1.0"

__all__ = ["codes", "containers", "errors", "objects", "strings", "system", "ticker"]