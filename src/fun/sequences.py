"""Flattening map and universal predicate over ordered collections."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Callable, TypeVar

import numpy as np

from .invoker import resolve_callable

T = TypeVar("T")
K = TypeVar("K")

_ATOMIC_SEQUENCES = (str, bytes, bytearray)


def _is_spliceable(value: Any) -> bool:
    """Return ``True`` if ``value`` contributes its elements rather than itself."""

    if isinstance(value, np.ndarray):
        return value.ndim >= 1
    return isinstance(value, Sequence) and not isinstance(value, _ATOMIC_SEQUENCES)


def flat_map(fn: Callable[..., Any] | str, items: Iterable[T], *, with_index: bool = False) -> list[Any]:
    """Map ``fn`` over ``items`` and flatten the results by one level.

    Parameters
    ----------
    fn:
        Called once per element, in input order. Receives ``(item, index)``
        when ``with_index`` is ``True`` and just ``item`` otherwise. May be
        an import path such as ``"builtins:abs"``.
    items:
        Any iterable; consumed exactly once.
    with_index:
        Pass the element position as a second argument.

    Returns
    -------
    list
        Sequence results (lists, tuples, NumPy arrays split along their first
        axis) are spliced in place. Anything else, strings included, is kept
        as a single element. Nested sequences inside a result are left alone.
    """

    fn = resolve_callable(fn, "flat_map")
    out: list[Any] = []
    for index, item in enumerate(items):
        result = fn(item, index) if with_index else fn(item)
        if _is_spliceable(result):
            out.extend(result)
        else:
            out.append(result)
    return out


def _keyed(items: Any) -> Iterable[tuple[Any, Any]]:
    if isinstance(items, Mapping) or (not isinstance(items, Sequence) and hasattr(items, "items")):
        return items.items()
    return enumerate(items)


def array_every(items: Iterable[T] | Mapping[K, T], fn: Callable[[T, Any], Any] | str) -> bool:
    """Return ``True`` if ``fn(element, key)`` is truthy for every element.

    Mappings (and objects with an ``items()`` method) are walked in their own
    order with their keys; other iterables are keyed by position. Iteration
    stops at the first falsy result. An empty collection yields ``True``.
    ``fn`` may be an import path such as ``"operator:eq"``.
    """

    fn = resolve_callable(fn, "array_every")
    for key, element in _keyed(items):
        if not fn(element, key):
            return False
    return True


flatMap = flat_map
arrayEvery = array_every

__all__ = ["flat_map", "array_every", "flatMap", "arrayEvery"]
