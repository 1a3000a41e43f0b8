"""Naming, describing and normalising error codes."""

from __future__ import annotations

import errno
import sys
from typing import Union

from .codes import UvErrno

__all__ = [
    "err_name",
    "strerror",
    "translate_posix_error",
    "get_uv_error",
    "get_uv_errmsg",
]

# Errors that all mean "try again later" on one platform or another.
_AGAIN_ALIASES = frozenset(
    code
    for code in (
        getattr(errno, "ENOBUFS", None),
        getattr(errno, "EINPROGRESS", None),
        getattr(errno, "EWOULDBLOCK", None),
    )
    if code is not None
)


def _unknown(err: int) -> str:
    return f"Unknown system error {err}"


def _lookup(err: int) -> UvErrno | None:
    try:
        return UvErrno(int(err))
    except ValueError:
        return None


def err_name(err: int) -> str:
    """Return the symbolic name of *err*, such as ``"EINVAL"``."""
    code = _lookup(err)
    return code.name if code is not None else _unknown(int(err))


def strerror(err: int) -> str:
    """Return a human-readable description of *err*."""
    code = _lookup(err)
    return code.message if code is not None else _unknown(int(err))


def translate_posix_error(err: int) -> int:
    """Turn a positive system errno into a negative portable code.

    Values that are zero or already negative are returned unchanged.
    ``ENOBUFS``, ``EINPROGRESS`` and ``EWOULDBLOCK`` all become ``EAGAIN``.
    """
    err = int(err)
    if err <= 0:
        return err
    if err in _AGAIN_ALIASES:
        err = errno.EAGAIN
    return -err


def get_uv_error(err: Union[int, OSError]) -> int:
    """Return the portable code for a system errno or an ``OSError``."""
    raw = err.errno if isinstance(err, OSError) else err
    if raw is None:
        raw = 0
    code = translate_posix_error(raw)
    if sys.platform == "win32" and code < 0:
        # Portable codes on this platform do not follow errno values.
        name = errno.errorcode.get(-code)
        if name is not None and name in UvErrno.__members__:
            return int(UvErrno[name])
        if -code == getattr(errno, "EAGAIN", None):
            return int(UvErrno.EAGAIN)
    return code


def get_uv_errmsg(err: Union[int, OSError]) -> str:
    """Return the description of the portable code for *err*."""
    return strerror(get_uv_error(err))