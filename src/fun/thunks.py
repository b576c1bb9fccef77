"""Zero-argument wrappers deferring a call or a construction."""

from __future__ import annotations

import inspect
from typing import Any, Callable, TypeVar

from .errors import InvocationError
from .invoker import Invocable, describe, resolve, resolve_callable

T = TypeVar("T")


def fn_return(fn: Callable[[], T] | str) -> Callable[[], T]:
    """Return a thunk calling ``fn()`` afresh on every call.

    ``fn`` may be an import path such as ``"time:time"``. It is resolved and
    bound when the thunk is created; rebinding the caller's name later does
    not redirect it.
    """

    fn = resolve_callable(fn, "fn_return")

    def thunk() -> T:
        return fn()

    return thunk


def fn_return_new(cls: Invocable, *args: Any, **kwargs: Any) -> Callable[[], Any]:
    """Return a factory building a new ``cls(*args, **kwargs)`` per call."""

    target = resolve(cls)
    if not inspect.isclass(target):
        raise InvocationError(f"fn_return_new() requires a class, got {describe(target)}.")
    params = tuple(args)
    options = dict(kwargs)

    def factory() -> Any:
        return target(*params, **options)

    factory.__qualname__ = f"fn_return_new({target.__qualname__})"
    return factory


fnReturn = fn_return
fnReturnNew = fn_return_new

__all__ = ["fn_return", "fn_return_new", "fnReturn", "fnReturnNew"]
