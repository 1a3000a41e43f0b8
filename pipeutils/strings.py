"""String helpers: random strings, hex dumps, splitting, trimming, formatting."""

from __future__ import annotations

import random
import string
from typing import List, Union

__all__ = [
    "make_rand_str",
    "hexdump",
    "hexmem",
    "split",
    "trim",
    "str_to_lower",
    "str_to_upper",
    "replace",
    "start_with",
    "end_with",
    "str_format",
]

_PRINTABLE = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

BytesLike = Union[bytes, bytearray, memoryview]


def make_rand_str(size: int, printable: bool = True) -> Union[str, bytes]:
    """Return *size* random characters.

    With *printable* the result is a ``str`` of digits and ASCII letters;
    otherwise it is ``bytes`` with values from 0 to 254.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    rng = random.SystemRandom()
    if printable:
        return "".join(rng.choices(_PRINTABLE, k=size))
    return bytes(rng.randrange(0xFF) for _ in range(size))


def _is_safe(byte: int) -> bool:
    return 32 <= byte < 128


def hexdump(data: BytesLike) -> str:
    """Return a classic hex dump: 16 bytes per line, hex then text columns."""
    raw = bytes(data)
    parts = ["\r\n"]
    for start in range(0, len(raw), 16):
        chunk = raw[start : start + 16]
        hex_part = "".join(f"{byte:02x} " for byte in chunk).ljust(16 * 3)
        text_part = "".join(chr(byte) if _is_safe(byte) else "." for byte in chunk).ljust(16)
        parts.append(hex_part + text_part + "\n")
    return "".join(parts)


def hexmem(data: BytesLike) -> str:
    """Return every byte as two hex digits followed by a space."""
    return "".join(f"{byte:02x} " for byte in bytes(data))


def split(s: str, delim: str) -> List[str]:
    """Split *s* on *delim*, dropping empty pieces.

    An empty input gives a list holding one empty string.
    """
    if not delim:
        raise ValueError("delimiter must not be empty")
    pieces = [piece for piece in s.split(delim) if piece]
    if not s:
        return [""]
    return pieces


def trim(s: str, chars: str = " \r\n\t") -> str:
    """Remove any of *chars* from both ends of *s*."""
    return s.strip(chars)


def str_to_lower(s: str) -> str:
    """Lower-case the ASCII letters of *s*; other characters are kept."""
    return s.translate(_TO_LOWER)


def str_to_upper(s: str) -> str:
    """Upper-case the ASCII letters of *s*; other characters are kept."""
    return s.translate(_TO_UPPER)


def replace(s: str, old: str, new: str, begin: int = 0) -> str:
    """Replace every *old* in *s* with *new*, searching from index *begin*.

    Replaced text is never searched again, so *new* may contain *old*.
    """
    if not old or old == new:
        return s
    return s[:begin] + s[begin:].replace(old, new)


def start_with(s: str, prefix: str) -> bool:
    """Tell whether *s* begins with *prefix*."""
    return s.startswith(prefix)


def end_with(s: str, suffix: str) -> bool:
    """Tell whether *s* ends with *suffix*."""
    return s.endswith(suffix)


def str_format(fmt: str, *args: object) -> str:
    """Format *args* with a printf-style *fmt*."""
    return fmt % args