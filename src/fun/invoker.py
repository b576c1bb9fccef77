"""Uniform call-or-construct dispatch.

A stage handed to :func:`invoke` may be a plain callable, a class, an import
path naming either of those, or one of the explicit :class:`Call` /
:class:`Construct` wrappers. String references are looked up with
:mod:`importlib` every time they are invoked, so the same name can resolve to
a different object once the underlying module attribute is rebound.
"""

from __future__ import annotations

import importlib
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence, Union

from .errors import ArityError, InvocationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Call:
    """Stage that is always called directly."""

    target: Any


@dataclass(frozen=True)
class Construct:
    """Stage that always constructs a new instance of ``target``."""

    target: Any


Invocable = Union[Callable[..., Any], type, str, Call, Construct]


def describe(target: Any) -> str:
    """Return a short human-readable label for ``target`` used in messages."""

    return getattr(target, "__qualname__", None) or repr(target)


def _import_path(name: str) -> Any:
    """Look up ``module:attr``, ``module.attr`` or a bare builtin name."""

    if ":" in name:
        module_name, _, attr_path = name.partition(":")
    elif "." in name:
        module_name, _, attr_path = name.rpartition(".")
    else:
        module_name, attr_path = "builtins", name
    if not module_name or not attr_path:
        raise InvocationError(f"Reference '{name}' is not a valid import path.")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as exc:
        raise InvocationError(f"Cannot import module '{module_name}' for reference '{name}'.") from exc

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as exc:
            raise InvocationError(f"Reference '{name}' does not exist in module '{module_name}'.") from exc
    return obj


def resolve(ref: Invocable) -> Any:
    """Return the concrete object ``ref`` denotes without invoking it."""

    if isinstance(ref, (Call, Construct)):
        return resolve(ref.target)
    if isinstance(ref, str):
        return _import_path(ref)
    return ref


def resolve_callable(ref: Invocable, owner: str) -> Callable[..., Any]:
    """Resolve ``ref`` and require a callable, naming ``owner`` in the error."""

    target = resolve(ref)
    if not callable(target):
        raise InvocationError(f"{owner}() requires a callable, got {describe(target)}.")
    return target


def _check_arity(target: Any, args: tuple[Any, ...]) -> None:
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        # builtins without introspectable signatures report their own errors
        return
    try:
        signature.bind(*args)
    except TypeError as exc:
        raise ArityError(
            f"{describe(target)} cannot be invoked with {len(args)} positional argument(s): {exc}"
        ) from exc


def invoke(ref: Invocable, args: Sequence[Any] = (), *, check_arity: bool = True) -> Any:
    """Call ``ref`` with ``args`` or construct it when it resolves to a class.

    Parameters
    ----------
    ref:
        The stage to run. Classes are constructed, other callables are called.
        :class:`Call` and :class:`Construct` pin the choice and validate the
        wrapped target against it.
    args:
        Positional arguments forwarded to the callable or constructor.
    check_arity:
        When ``True`` the arguments are bound against the target's signature
        before the call, so a mismatch raises :class:`ArityError` rather than
        whatever the call itself would raise.

    Returns
    -------
    Any
        The callable's return value, or the freshly constructed instance.

    Raises
    ------
    InvocationError
        If ``ref`` cannot be resolved, or resolves to something that is
        neither callable nor a class.
    ArityError
        If ``check_arity`` is set and ``args`` do not fit the signature.
    """

    target = resolve(ref)
    args = tuple(args)

    if isinstance(ref, Construct):
        if not inspect.isclass(target):
            raise InvocationError(f"Construct() requires a class, got {describe(target)}.")
        construct = True
    elif isinstance(ref, Call):
        if not callable(target):
            raise InvocationError(f"Call() requires a callable, got {describe(target)}.")
        construct = False
    elif inspect.isclass(target):
        construct = True
    elif callable(target):
        construct = False
    else:
        raise InvocationError(f"{describe(target)} is neither callable nor a constructible class.")

    if check_arity:
        _check_arity(target, args)

    logger.debug(
        "%s %s with %d argument(s)",
        "Constructing" if construct else "Calling",
        describe(target),
        len(args),
    )
    return target(*args)


__all__ = ["Call", "Construct", "Invocable", "describe", "invoke", "resolve", "resolve_callable"]
