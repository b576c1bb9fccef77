"""fun
===

Small functional helpers: uniform call-or-construct invocation, right-to-left
composition, a one-level flattening map, a short-circuiting universal
predicate, and zero-argument thunks.
"""

from .composition import compose
from .errors import ArityError, CompositionError, FunError, InvocationError
from .invoker import Call, Construct, Invocable, invoke, resolve, resolve_callable
from .sequences import array_every, arrayEvery, flat_map, flatMap
from .thunks import fn_return, fn_return_new, fnReturn, fnReturnNew

__all__ = [
    "ArityError",
    "Call",
    "CompositionError",
    "Construct",
    "FunError",
    "Invocable",
    "InvocationError",
    "arrayEvery",
    "array_every",
    "compose",
    "flatMap",
    "flat_map",
    "fnReturn",
    "fnReturnNew",
    "fn_return",
    "fn_return_new",
    "invoke",
    "resolve",
    "resolve_callable",
]
