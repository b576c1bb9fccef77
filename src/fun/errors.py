"""Exception hierarchy raised by the :mod:`fun` helpers."""

from __future__ import annotations


class FunError(Exception):
    """Base class for every error raised by :mod:`fun` itself."""


class InvocationError(FunError, TypeError):
    """Raised when a reference is neither callable nor a constructible class."""


class ArityError(FunError, TypeError):
    """Raised when an argument list does not fit the target's signature."""


class CompositionError(FunError, ValueError):
    """Raised when a composed pipeline cannot produce a value."""


__all__ = ["FunError", "InvocationError", "ArityError", "CompositionError"]
