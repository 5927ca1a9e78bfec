"""Destroy/repair operator capability and the scored operator pool."""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, Sequence, Tuple

import numpy as np

from .errors import PreconditionError


class Operator(Protocol):
    """A destroy or repair method.

    Operators transform the solution they receive in place. Whatever they
    return (removed nodes, for instance) is ignored.
    """

    def __call__(self, solution: Any) -> None:
        ...


def operator_name(operator) -> str:
    name = getattr(operator, "__name__", None)
    if name is None:
        name = type(operator).__name__
    return name


# ---------------------------------------------------------------------------


def roulette_wheel(weights: Sequence[float], rng: np.random.Generator) -> int:
    """Pick an index with probability proportional to its weight.

    A value is drawn uniformly in ``[0, sum(weights))`` and the first index
    whose cumulative weight reaches it is returned. When rounding leaves no
    such index the last one is returned, so every non-empty, non-negative
    weight vector yields a valid index.
    """
    if len(weights) == 0:
        raise PreconditionError("cannot select from an empty operator pool")
    w = np.asarray(weights, dtype=float)
    if np.any(w < 0):
        raise PreconditionError(f"operator weights must be non-negative, got {w.tolist()}")

    cumulative = np.cumsum(w)
    draw = rng.uniform(0.0, cumulative[-1])
    idx = int(np.searchsorted(cumulative, draw, side="left"))
    return min(idx, len(w) - 1)


def updated_score(score: float, multiplier: float, decay: float) -> float:
    """Exponential moving average of ``score`` towards ``multiplier``."""
    return score * decay + (1 - decay) * multiplier


# ---------------------------------------------------------------------------


class OperatorPool:
    """Append-only sequence of operators, each with an adaptive score."""

    def __init__(self, kind: str):
        self.kind = kind
        self._operators: List[Operator] = []
        self._names: List[str] = []
        self._scores: List[float] = []

    def __len__(self) -> int:
        return len(self._operators)

    @property
    def operators(self) -> Tuple[Operator, ...]:
        return tuple(self._operators)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._names)

    @property
    def scores(self) -> Tuple[float, ...]:
        return tuple(self._scores)

    def register(self, operator: Operator, name: Optional[str] = None) -> int:
        if len(self._operators) != len(self._scores):
            raise PreconditionError(
                f"{self.kind} pool holds {len(self._operators)} operators "
                f"but {len(self._scores)} scores"
            )
        if not callable(operator):
            raise TypeError(f"{self.kind} operator must be callable, got {operator!r}")
        if name is None:
            name = operator_name(operator)
        if name in self._names:
            name = f"{name}#{len(self._operators)}"
        self._operators.append(operator)
        self._names.append(name)
        self._scores.append(1.0)
        return len(self._operators) - 1

    def select(self, rng: np.random.Generator) -> int:
        if not self._operators:
            raise PreconditionError(f"no {self.kind} operator registered")
        return roulette_wheel(self._scores, rng)

    def update_score(self, index: int, multiplier: float, decay: float) -> None:
        self._scores[index] = updated_score(self._scores[index], multiplier, decay)

    def reset_scores(self) -> None:
        self._scores = [1.0] * len(self._operators)

    def __getitem__(self, index: int) -> Operator:
        return self._operators[index]
