# -----------------------------------------------------------------------------
# Tracing utility
# Purpose:
#   Append-only step recorder used by every algorithm. It owns the step
#   counter, so callers only describe *what* happened; indices always come
#   out dense and increasing. One Tracer lives for exactly one algorithm run
#   and is passed explicitly to any helper (or recursive call) that records.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Any, Generic, List, Tuple, Type, TypeVar

S = TypeVar("S")


class Tracer(Generic[S]):
    def __init__(self, step_type: Type[S]):
        self._step_type = step_type
        self._steps: List[S] = []

    def add(self, action: str, explanation: str, **snapshot: Any) -> S:
        # Snapshot values must already be immutable copies (tuples).
        step = self._step_type(index=len(self._steps), action=action,
                               explanation=explanation, **snapshot)
        self._steps.append(step)
        return step

    def __len__(self) -> int:
        return len(self._steps)

    def steps(self) -> Tuple[S, ...]:
        return tuple(self._steps)
