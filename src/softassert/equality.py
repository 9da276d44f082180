"""Deep structural equality with strict runtime types."""

from __future__ import annotations

import dataclasses
import types
from typing import Any

import numpy as np

from softassert.nilness import is_nil_like


def deep_equal(a: Any, b: Any) -> bool:
    """Compare two values recursively.

    Runtime types must match exactly, so ``1`` differs from ``1.0``, ``True``
    and ``numpy.int64(1)``. Sequences compare in order, mappings by key set
    and values, sets by members. Keys and members also match on runtime
    type. Nested pairs that are both nil-like compare equal.
    """
    return _deep_equal(a, b, set())


def _equal_or_both_nil(a: Any, b: Any, visited: set[tuple[int, int]]) -> bool:
    if _deep_equal(a, b, visited):
        return True
    return is_nil_like(a) and is_nil_like(b)


_MISSING = object()


def _typed_index(items: Any) -> dict[tuple[type, Any], Any]:
    # keyed by runtime type too, so 1, 1.0 and True stay distinct
    return {(type(item), item): item for item in items}


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in names:
                names.append(name)
    return names


def _compares_by_attributes(value: Any) -> bool:
    # functions, classes and modules keep identity semantics
    if callable(value) or isinstance(value, types.ModuleType):
        return False
    if type(value).__eq__ is not object.__eq__:
        return False
    return hasattr(value, "__dict__") or bool(_slot_names(type(value)))


def _attributes_equal(a: Any, b: Any, visited: set[tuple[int, int]]) -> bool:
    for name in _slot_names(type(a)):
        x = getattr(a, name, _MISSING)
        y = getattr(b, name, _MISSING)
        if x is _MISSING or y is _MISSING:
            if x is not y:
                return False
            continue
        if not _equal_or_both_nil(x, y, visited):
            return False
    if hasattr(a, "__dict__"):
        return _deep_equal(vars(a), vars(b), visited)
    return True


def _deep_equal(a: Any, b: Any, visited: set[tuple[int, int]]) -> bool:
    if a is b:
        return True
    if type(a) is not type(b):
        return False

    if isinstance(a, np.ndarray):
        if a.dtype != b.dtype or a.shape != b.shape:
            return False
        if a.dtype == object:
            return all(
                _equal_or_both_nil(x, y, visited) for x, y in zip(a.flat, b.flat)
            )
        return bool(np.array_equal(a, b))

    if isinstance(a, (list, tuple, dict)) or dataclasses.is_dataclass(a):
        key = (id(a), id(b))
        if key in visited:
            return True
        visited.add(key)

    if isinstance(a, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(_equal_or_both_nil(x, y, visited) for x, y in zip(a, b))

    if isinstance(a, dict):
        if len(a) != len(b):
            return False
        index = _typed_index(b)
        for k in a:
            match = index.get((type(k), k), _MISSING)
            if match is _MISSING:
                return False
            if not _equal_or_both_nil(a[k], b[match], visited):
                return False
        return True

    if isinstance(a, (set, frozenset)):
        return len(a) == len(b) and _typed_index(a).keys() == _typed_index(b).keys()

    if dataclasses.is_dataclass(a) and not isinstance(a, type):
        return all(
            _equal_or_both_nil(getattr(a, f.name), getattr(b, f.name), visited)
            for f in dataclasses.fields(a)
        )

    if _compares_by_attributes(a):
        key = (id(a), id(b))
        if key in visited:
            return True
        visited.add(key)
        return _attributes_equal(a, b, visited)

    return bool(a == b)
