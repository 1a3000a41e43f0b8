"""Object helpers: a typed value holder, lifecycle hooks and live counters."""

from __future__ import annotations

import logging
import threading
from typing import Any as _AnyType
from typing import Dict, Optional, Tuple

__all__ = ["Any", "AnyStorage", "Creator", "ObjectStatistic"]

_log = logging.getLogger(__name__)

_CO_VARARGS = 0x04
_CO_VARKEYWORDS = 0x08


def _type_name(kind: type) -> str:
    if kind.__module__ == "builtins":
        return kind.__qualname__
    return f"{kind.__module__}.{kind.__qualname__}"


class Any:
    """Holds one value of any type and remembers its exact type."""

    __slots__ = ("_value", "_type")

    def __init__(self, value: object = None) -> None:
        self._value: object = None
        self._type: Optional[type] = None
        self.set(value)

    def set(self, value: object) -> None:
        """Store *value*; ``None`` empties the holder."""
        if value is None:
            self.reset()
            return
        self._type = type(value)
        self._value = value

    def get(self, kind: type, safe: bool = True) -> _AnyType:
        """Return the value, checking that it is exactly of *kind* when *safe*."""
        if self._type is None:
            raise ValueError("Any is empty")
        if safe and not self.holds(kind):
            raise ValueError(
                f"Any.get(): {self.type_name()} unable cast to {_type_name(kind)}"
            )
        return self._value

    def holds(self, kind: type) -> bool:
        """Tell whether the stored value is exactly of type *kind*."""
        return self._type is not None and self._type is kind

    def reset(self) -> None:
        """Drop the stored value."""
        self._type = None
        self._value = None

    def empty(self) -> bool:
        """Tell whether nothing is stored."""
        return self._type is None

    def type_name(self) -> str:
        """Name of the stored value's type, or an empty string."""
        if self._type is None:
            return ""
        return _type_name(self._type)

    def __bool__(self) -> bool:
        return self._type is not None

    def __repr__(self) -> str:
        if self._type is None:
            return "Any()"
        return f"Any({self._value!r})"


class AnyStorage(Dict[str, Any]):
    """Mapping of names to ``Any`` holders; a missing name yields a new empty one."""

    def __missing__(self, key: str) -> Any:
        holder = Any()
        self[key] = holder
        return holder


def _accepts(method: object, args: Tuple, kwargs: Dict) -> bool:
    """Tell whether *method* can be called with *args* and *kwargs*."""
    target = getattr(method, "__func__", method)
    code = getattr(target, "__code__", None)
    if code is None:
        return True
    has_varargs = bool(code.co_flags & _CO_VARARGS)
    has_varkw = bool(code.co_flags & _CO_VARKEYWORDS)
    npos = code.co_argcount
    posonly = code.co_posonlyargcount
    positional = list(code.co_varnames[:npos])
    kwonly = list(code.co_varnames[npos:npos + code.co_kwonlyargcount])
    if hasattr(method, "__self__") and hasattr(method, "__func__") and positional:
        positional = positional[1:]
        posonly = max(posonly - 1, 0)
    defaults = getattr(target, "__defaults__", None) or ()
    kwdefaults = getattr(target, "__kwdefaults__", None) or {}

    if len(args) > len(positional) and not has_varargs:
        return False
    filled = set(positional[: len(args)])
    keyword_names = set(positional[posonly:]) | set(kwonly)
    for key in kwargs:
        if key in keyword_names:
            if key in filled:
                return False
            filled.add(key)
        elif not has_varkw:
            return False
    required = positional[: len(positional) - len(defaults)]
    if any(name not in filled for name in required):
        return False
    return all(name in filled or name in kwdefaults for name in kwonly)


def _invoke_hook(obj: object, name: str, args: Tuple, kwargs: Dict) -> object:
    """Call ``obj.<name>(*args, **kwargs)`` if it exists and accepts those arguments."""
    method = getattr(obj, name, None)
    if not callable(method) or not _accepts(method, args, kwargs):
        return None
    return method(*args, **kwargs)


class _Lifetime:
    """Owns an object made by ``Creator`` and runs its ``on_destroy`` once."""

    def __init__(self, value: object) -> None:
        self._value = value
        self._closed = False

    @property
    def value(self) -> _AnyType:
        return self._value

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            _invoke_hook(self._value, "on_destroy", (), {})
        except Exception as ex:
            _log.error(
                "Invoke %s.on_destroy throw a exception: %s",
                _type_name(type(self._value)),
                ex,
            )

    def __enter__(self) -> _AnyType:
        return self._value

    def __exit__(self, *args) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except Exception:
            pass


class Creator:
    """Builds objects and runs their ``on_create`` and ``on_destroy`` hooks.

    Both factories return an owner: use it as a context manager (it yields
    the object) or call ``close()``; ``on_destroy`` runs once, with no
    arguments, and any exception it raises is logged, not propagated.
    """

    def __init__(self) -> None:
        raise TypeError("Creator is not meant to be instantiated")

    @staticmethod
    def create(cls: type, *args, **kwargs) -> _Lifetime:
        """Construct ``cls(*args, **kwargs)`` then call ``on_create()``."""
        lifetime = _Lifetime(cls(*args, **kwargs))
        _invoke_hook(lifetime.value, "on_create", (), {})
        return lifetime

    @staticmethod
    def create2(cls: type, *args, **kwargs) -> _Lifetime:
        """Construct ``cls()`` then call ``on_create(*args, **kwargs)``.

        The hook is skipped when it does not accept those arguments.
        """
        lifetime = _Lifetime(cls())
        _invoke_hook(lifetime.value, "on_create", args, kwargs)
        return lifetime


_COUNTS: Dict[type, int] = {}
_COUNTS_LOCK = threading.Lock()


class ObjectStatistic:
    """Mixin that counts live instances of each subclass.

    An instance counts towards its own class and every ``ObjectStatistic``
    subclass it derives from. Subclasses that define ``__del__`` must call
    ``super().__del__()``.
    """

    def __new__(cls, *args, **kwargs):
        obj = super().__new__(cls)
        with _COUNTS_LOCK:
            for klass in cls.__mro__:
                if issubclass(klass, ObjectStatistic):
                    _COUNTS[klass] = _COUNTS.get(klass, 0) + 1
        return obj

    def __del__(self) -> None:
        with _COUNTS_LOCK:
            for klass in type(self).__mro__:
                if issubclass(klass, ObjectStatistic) and _COUNTS.get(klass, 0) > 0:
                    _COUNTS[klass] -= 1

    @classmethod
    def count(cls) -> int:
        """Number of live instances of this class and its subclasses."""
        with _COUNTS_LOCK:
            return _COUNTS.get(cls, 0)