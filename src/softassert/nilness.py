"""Detection of nil-like values.

Python has a single absence token, ``None``. A handful of reference and
handle types can additionally point at nothing: a weak reference whose
referent was collected, a NULL ctypes pointer or function pointer, a
released memoryview. Those form the closed set of nilable kinds below; every
other kind is simply not nil-like and is never introspected.
"""

from __future__ import annotations

import ctypes
import logging
import weakref
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


def _dead_reference(value: weakref.ref) -> bool:
    return value() is None


def _dead_proxy(value: Any) -> bool:
    try:
        # proxies forward attribute access to the referent
        value.__class__
    except ReferenceError:
        return True
    return False


def _null_pointer(value: Any) -> bool:
    return not value


def _null_string_pointer(value: Any) -> bool:
    return value.value is None


def _released_buffer(value: memoryview) -> bool:
    try:
        value.nbytes
    except ValueError:
        return True
    return False


_NILABLE_KINDS: tuple[tuple[tuple[type, ...], Callable[[Any], bool]], ...] = (
    ((weakref.ref,), _dead_reference),
    ((weakref.ProxyType, weakref.CallableProxyType), _dead_proxy),
    ((ctypes._Pointer, ctypes._CFuncPtr), _null_pointer),
    ((ctypes.c_void_p, ctypes.c_char_p, ctypes.c_wchar_p), _null_string_pointer),
    ((memoryview,), _released_buffer),
)


def is_nil_like(value: Any) -> bool:
    """Return True for ``None`` or a nilable kind pointing at nothing.

    Empty but live containers (``[]``, ``{}``, ``b""``) are not nil-like.
    Never raises.
    """
    if value is None:
        return True
    # isinstance() would consult __class__, which a dead proxy cannot answer
    kind = type(value)
    for kinds, predicate in _NILABLE_KINDS:
        if issubclass(kind, kinds):
            try:
                return predicate(value)
            except Exception as e:
                logger.debug(f"nil check on {type(value).__qualname__} failed: {e}")
                return False
    return False
