"""Right-to-left composition of invocable stages."""

from __future__ import annotations

from typing import Any, Callable

from .errors import CompositionError
from .invoker import Invocable, describe, invoke


def compose(*stages: Invocable, check_arity: bool = True) -> Callable[..., Any]:
    """Compose ``stages`` from right to left.

    ``compose(a, b, c)(x, y, z)`` evaluates ``a(b(c(x, y, z)))``: the rightmost
    stage receives every argument, each remaining stage receives the previous
    result as its only argument. Classes among the stages are constructed (see
    :func:`fun.invoker.invoke`). The stages are snapshotted here, so changing
    the caller's sequence afterwards does not alter the pipeline.

    With no stages the pipeline returns its first positional argument.
    """

    snapshot = tuple(stages)

    def pipeline(*args: Any) -> Any:
        if not snapshot and not args:
            raise CompositionError("An empty composition needs at least one argument to return.")
        carry: tuple[Any, ...] = args
        for stage in reversed(snapshot):
            carry = (invoke(stage, carry, check_arity=check_arity),)
        return carry[0]

    label = ", ".join(describe(stage) for stage in snapshot)
    pipeline.__name__ = "composed"
    pipeline.__qualname__ = f"compose({label})"
    pipeline.stages = snapshot  # type: ignore[attr-defined]
    return pipeline


__all__ = ["compose"]
