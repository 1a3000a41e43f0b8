"""Process, clock, thread and environment helpers."""

from __future__ import annotations

import logging
import os
import sys
import threading
import time
from typing import Union

from .errors import get_uv_errmsg

__all__ = [
    "exe_path",
    "exe_dir",
    "exe_name",
    "get_gmt_off",
    "current_millisecond",
    "current_microsecond",
    "get_time_str",
    "get_local_time",
    "set_thread_name",
    "get_thread_name",
    "set_thread_affinity",
    "demangle",
    "get_env",
]

_log = logging.getLogger(__name__)

# Offset of local time from UTC, in seconds, fixed when the module loads.
_GMT_OFF = time.localtime().tm_gmtoff or 0

# Reference point for the monotonic, never-decreasing clock.
_START_NS = time.monotonic_ns()

_THREAD_NAME_LIMIT = 16


def exe_path(is_exe: bool = True) -> str:
    """Absolute path of the running interpreter, or of this library when not *is_exe*.

    Separators are always ``/``; ``"./"`` is returned when the path is unknown.
    """
    raw = sys.executable if is_exe else os.path.abspath(__file__)
    if not raw:
        return "./"
    path = os.path.realpath(raw)
    if not path:
        return "./"
    return path.replace("\\", "/")


def exe_dir(is_exe: bool = True) -> str:
    """Directory part of :func:`exe_path`, ending with ``/``."""
    path = exe_path(is_exe)
    return path[: path.rfind("/") + 1]


def exe_name(is_exe: bool = True) -> str:
    """File-name part of :func:`exe_path`."""
    path = exe_path(is_exe)
    return path[path.rfind("/") + 1 :]


def get_gmt_off() -> int:
    """Difference between local time and UTC, in seconds."""
    return _GMT_OFF


def current_microsecond(system_time: bool = False) -> int:
    """Microseconds of wall-clock time, or since start when not *system_time*.

    The wall clock may go backwards; the default clock never does.
    """
    if system_time:
        return time.time_ns() // 1000
    return (time.monotonic_ns() - _START_NS) // 1000


def current_millisecond(system_time: bool = False) -> int:
    """Milliseconds of wall-clock time, or since start when not *system_time*."""
    return current_microsecond(system_time) // 1000


def get_time_str(fmt: str, timestamp: float = 0) -> str:
    """Format *timestamp* (now when zero) in local time with strftime *fmt*.

    When formatting yields nothing, *fmt* itself is returned.
    """
    if not timestamp:
        timestamp = time.time()
    result = time.strftime(fmt, get_local_time(timestamp))
    return result if result else fmt


def get_local_time(sec: float) -> time.struct_time:
    """Local broken-down time for a Unix timestamp."""
    return time.localtime(sec)


def _limit_string(name: str, max_size: int) -> str:
    if len(name) + 1 > max_size:
        erased = len(name) + 1 - max_size + 3
        name = name[:5] + "..." + name[5 + erased :]
    return name


def set_thread_name(name: str) -> None:
    """Name the calling thread; long names are shortened with ``...``."""
    if name is None:
        raise ValueError("thread name must not be None")
    threading.current_thread().name = _limit_string(name, _THREAD_NAME_LIMIT)


def get_thread_name() -> str:
    """Name of the calling thread, or its identifier when it has none."""
    name = threading.current_thread().name
    if name:
        return name
    return str(threading.get_ident())


def set_thread_affinity(index: int) -> bool:
    """Pin the calling thread to CPU *index*, or to all CPUs when negative.

    Returns whether it worked; only supported where the OS allows it.
    """
    setter = getattr(os, "sched_setaffinity", None)
    if setter is None:
        return False
    if index >= 0:
        mask = {index}
    else:
        mask = set(range(os.cpu_count() or 1))
    try:
        setter(0, mask)
    except OSError as ex:
        _log.warning("sched_setaffinity failed: %s", get_uv_errmsg(ex))
        return False
    except (ValueError, OverflowError) as ex:
        _log.warning("sched_setaffinity failed: %s", ex)
        return False
    return True


def demangle(name: Union[str, type]) -> str:
    """Readable name of a type; a string is returned as it is."""
    if isinstance(name, type):
        if name.__module__ == "builtins":
            return name.__qualname__
        return f"{name.__module__}.{name.__qualname__}"
    return name


def get_env(key: str) -> str:
    """Value of environment variable *key* (a leading ``$`` is ignored), or ``""``."""
    if key.startswith("$"):
        key = key[1:]
    if not key:
        return ""
    return os.environ.get(key, "")