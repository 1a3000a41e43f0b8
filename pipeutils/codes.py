"""Portable error codes and their messages.

Codes that the platform's ``errno`` module knows are the negated system value;
the rest fall back to fixed numbers so that every code stays distinct.
"""

from __future__ import annotations

import errno
import sys
from enum import IntEnum

__all__ = ["UvErrno", "ERRNO_MAX"]


def _system(name: str, fallback: int) -> int:
    """Return the negated system errno for *name*, or *fallback*."""
    if sys.platform != "win32":
        value = getattr(errno, name, None)
        if value is not None:
            return -value
    return fallback


class UvErrno(IntEnum):
    """Error codes, negative, in the order of the error table."""

    E2BIG = _system("E2BIG", -4093)
    EACCES = _system("EACCES", -4092)
    EADDRINUSE = _system("EADDRINUSE", -4091)
    EADDRNOTAVAIL = _system("EADDRNOTAVAIL", -4090)
    EAFNOSUPPORT = _system("EAFNOSUPPORT", -4089)
    EAGAIN = _system("EAGAIN", -4088)
    EAI_ADDRFAMILY = -3000
    EAI_AGAIN = -3001
    EAI_BADFLAGS = -3002
    EAI_BADHINTS = -3013
    EAI_CANCELED = -3003
    EAI_FAIL = -3004
    EAI_FAMILY = -3005
    EAI_MEMORY = -3006
    EAI_NODATA = -3007
    EAI_NONAME = -3008
    EAI_OVERFLOW = -3009
    EAI_PROTOCOL = -3014
    EAI_SERVICE = -3010
    EAI_SOCKTYPE = -3011
    EALREADY = _system("EALREADY", -4084)
    EBADF = _system("EBADF", -4083)
    EBUSY = _system("EBUSY", -4082)
    ECANCELED = _system("ECANCELED", -4081)
    ECHARSET = _system("ECHARSET", -4080)
    ECONNABORTED = _system("ECONNABORTED", -4079)
    ECONNREFUSED = _system("ECONNREFUSED", -4078)
    ECONNRESET = _system("ECONNRESET", -4077)
    EDESTADDRREQ = _system("EDESTADDRREQ", -4076)
    EEXIST = _system("EEXIST", -4075)
    EFAULT = _system("EFAULT", -4074)
    EFBIG = _system("EFBIG", -4036)
    EHOSTUNREACH = _system("EHOSTUNREACH", -4073)
    EINTR = _system("EINTR", -4072)
    EINVAL = _system("EINVAL", -4071)
    EIO = _system("EIO", -4070)
    EISCONN = _system("EISCONN", -4069)
    EISDIR = _system("EISDIR", -4068)
    ELOOP = _system("ELOOP", -4067)
    EMFILE = _system("EMFILE", -4066)
    EMSGSIZE = _system("EMSGSIZE", -4065)
    ENAMETOOLONG = _system("ENAMETOOLONG", -4064)
    ENETDOWN = _system("ENETDOWN", -4063)
    ENETUNREACH = _system("ENETUNREACH", -4062)
    ENFILE = _system("ENFILE", -4061)
    ENOBUFS = _system("ENOBUFS", -4060)
    ENODEV = _system("ENODEV", -4059)
    ENOENT = _system("ENOENT", -4058)
    ENOMEM = _system("ENOMEM", -4057)
    ENONET = _system("ENONET", -4056)
    ENOPROTOOPT = _system("ENOPROTOOPT", -4035)
    ENOSPC = _system("ENOSPC", -4055)
    ENOSYS = _system("ENOSYS", -4054)
    ENOTCONN = _system("ENOTCONN", -4053)
    ENOTDIR = _system("ENOTDIR", -4052)
    ENOTEMPTY = _system("ENOTEMPTY", -4051)
    ENOTSOCK = _system("ENOTSOCK", -4050)
    ENOTSUP = _system("ENOTSUP", -4049)
    EPERM = _system("EPERM", -4048)
    EPIPE = _system("EPIPE", -4047)
    EPROTO = _system("EPROTO", -4046)
    EPROTONOSUPPORT = _system("EPROTONOSUPPORT", -4045)
    EPROTOTYPE = _system("EPROTOTYPE", -4044)
    ERANGE = _system("ERANGE", -4034)
    EROFS = _system("EROFS", -4043)
    ESHUTDOWN = _system("ESHUTDOWN", -4042)
    ESPIPE = _system("ESPIPE", -4041)
    ESRCH = _system("ESRCH", -4040)
    ETIMEDOUT = _system("ETIMEDOUT", -4039)
    ETXTBSY = _system("ETXTBSY", -4038)
    EXDEV = _system("EXDEV", -4037)
    UNKNOWN = -4094
    EOF = -4095
    ENXIO = _system("ENXIO", -4033)
    EMLINK = _system("EMLINK", -4032)
    EHOSTDOWN = _system("EHOSTDOWN", -4031)
    EREMOTEIO = _system("EREMOTEIO", -4030)

    @property
    def message(self) -> str:
        """Human-readable description of the code."""
        return _MESSAGES[self.name]


ERRNO_MAX = UvErrno.EOF - 1

_MESSAGES = {
    "E2BIG": "argument list too long",
    "EACCES": "permission denied",
    "EADDRINUSE": "address already in use",
    "EADDRNOTAVAIL": "address not available",
    "EAFNOSUPPORT": "address family not supported",
    "EAGAIN": "resource temporarily unavailable",
    "EAI_ADDRFAMILY": "address family not supported",
    "EAI_AGAIN": "temporary failure",
    "EAI_BADFLAGS": "bad ai_flags value",
    "EAI_BADHINTS": "invalid value for hints",
    "EAI_CANCELED": "request canceled",
    "EAI_FAIL": "permanent failure",
    "EAI_FAMILY": "ai_family not supported",
    "EAI_MEMORY": "out of memory",
    "EAI_NODATA": "no address",
    "EAI_NONAME": "unknown node or service",
    "EAI_OVERFLOW": "argument buffer overflow",
    "EAI_PROTOCOL": "resolved protocol is unknown",
    "EAI_SERVICE": "service not available for socket type",
    "EAI_SOCKTYPE": "socket type not supported",
    "EALREADY": "connection already in progress",
    "EBADF": "bad file descriptor",
    "EBUSY": "resource busy or locked",
    "ECANCELED": "operation canceled",
    "ECHARSET": "invalid Unicode character",
    "ECONNABORTED": "software caused connection abort",
    "ECONNREFUSED": "connection refused",
    "ECONNRESET": "connection reset by peer",
    "EDESTADDRREQ": "destination address required",
    "EEXIST": "file already exists",
    "EFAULT": "bad address in system call argument",
    "EFBIG": "file too large",
    "EHOSTUNREACH": "host is unreachable",
    "EINTR": "interrupted system call",
    "EINVAL": "invalid argument",
    "EIO": "i/o error",
    "EISCONN": "socket is already connected",
    "EISDIR": "illegal operation on a directory",
    "ELOOP": "too many symbolic links encountered",
    "EMFILE": "too many open files",
    "EMSGSIZE": "message too long",
    "ENAMETOOLONG": "name too long",
    "ENETDOWN": "network is down",
    "ENETUNREACH": "network is unreachable",
    "ENFILE": "file table overflow",
    "ENOBUFS": "no buffer space available",
    "ENODEV": "no such device",
    "ENOENT": "no such file or directory",
    "ENOMEM": "not enough memory",
    "ENONET": "machine is not on the network",
    "ENOPROTOOPT": "protocol not available",
    "ENOSPC": "no space left on device",
    "ENOSYS": "function not implemented",
    "ENOTCONN": "socket is not connected",
    "ENOTDIR": "not a directory",
    "ENOTEMPTY": "directory not empty",
    "ENOTSOCK": "socket operation on non-socket",
    "ENOTSUP": "operation not supported on socket",
    "EPERM": "operation not permitted",
    "EPIPE": "broken pipe",
    "EPROTO": "protocol error",
    "EPROTONOSUPPORT": "protocol not supported",
    "EPROTOTYPE": "protocol wrong type for socket",
    "ERANGE": "result too large",
    "EROFS": "read-only file system",
    "ESHUTDOWN": "cannot send after transport endpoint shutdown",
    "ESPIPE": "invalid seek",
    "ESRCH": "no such process",
    "ETIMEDOUT": "connection timed out",
    "ETXTBSY": "text file is busy",
    "EXDEV": "cross-device link not permitted",
    "UNKNOWN": "unknown error",
    "EOF": "end of file",
    "ENXIO": "no such device or address",
    "EMLINK": "too many links",
    "EHOSTDOWN": "host is down",
    "EREMOTEIO": "remote I/O error",
}