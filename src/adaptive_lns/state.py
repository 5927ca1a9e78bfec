"""Algorithm status shared between the solver, acceptance criteria and visitors.

:class:`AlgorithmState` groups together everything the solver mutates during
a run so that it can be handed to the acceptance criterion and to the
visitor. Public properties form the surface those strategy objects may use:
counters and scores are read-only, the three solution slots are writable
(a visitor may, for instance, run local search on the best solution). The
underscore-prefixed methods are reserved for :class:`~adaptive_lns.solver.ALNSSolver`.
"""

from __future__ import annotations

import copy
from enum import Enum
from typing import Any, Optional, Tuple

import numpy as np

from .operators import Operator, OperatorPool
from .params import AlgorithmParams


class Outcome(Enum):
    """What happened to the candidate produced in an iteration."""

    NEW_BEST = "new_best"
    IMPROVING = "improving"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


def clone_solution(solution: Any) -> Any:
    """Independent copy of a solution.

    A ``copy()`` defined by the solution's own class is used. One inherited
    from a built-in container (``dict.copy``, ``list.copy``, ...) is shallow
    and returns the base type, so such solutions are deep-copied instead.
    """
    for klass in type(solution).__mro__:
        if "copy" in vars(klass):
            if klass.__module__ != "builtins" and callable(vars(klass)["copy"]):
                return solution.copy()
            break
    return copy.deepcopy(solution)


class AlgorithmState:
    def __init__(
        self,
        params: AlgorithmParams,
        initial_solution: Any,
        rng: Optional[np.random.Generator] = None,
    ):
        self._params = params
        self._rng = rng if rng is not None else np.random.default_rng()
        self._destroy_pool = OperatorPool("destroy")
        self._repair_pool = OperatorPool("repair")
        self._restart(initial_solution)

    def _restart(self, initial_solution: Any) -> None:
        self._iteration = 0
        self._elapsed_time = 0.0
        self.best_solution = clone_solution(initial_solution)
        self.current_solution = clone_solution(initial_solution)
        self.candidate_solution = clone_solution(initial_solution)
        self._last_destroy: Optional[int] = None
        self._last_repair: Optional[int] = None
        self._last_outcome: Optional[Outcome] = None

    def reset(self, initial_solution: Any) -> None:
        """Start over from ``initial_solution``, keeping registered operators."""
        self._restart(initial_solution)
        self._destroy_pool.reset_scores()
        self._repair_pool.reset_scores()

    # ------------------------------------------------------------------
    @property
    def params(self) -> AlgorithmParams:
        return self._params

    @property
    def iteration(self) -> int:
        return self._iteration

    @property
    def elapsed_time(self) -> float:
        """Seconds elapsed since the start of the current solve."""
        return self._elapsed_time

    @property
    def destroy_operators(self) -> Tuple[Operator, ...]:
        return self._destroy_pool.operators

    @property
    def repair_operators(self) -> Tuple[Operator, ...]:
        return self._repair_pool.operators

    @property
    def destroy_names(self) -> Tuple[str, ...]:
        return self._destroy_pool.names

    @property
    def repair_names(self) -> Tuple[str, ...]:
        return self._repair_pool.names

    @property
    def destroy_scores(self) -> Tuple[float, ...]:
        return self._destroy_pool.scores

    @property
    def repair_scores(self) -> Tuple[float, ...]:
        return self._repair_pool.scores

    @property
    def last_destroy_index(self) -> Optional[int]:
        return self._last_destroy

    @property
    def last_repair_index(self) -> Optional[int]:
        return self._last_repair

    @property
    def last_outcome(self) -> Optional[Outcome]:
        return self._last_outcome

    # ------------------------------------------------------------------
    # Reserved for the solver.

    def _set_params(self, params: AlgorithmParams) -> None:
        self._params = params

    def _select_destroy(self) -> Operator:
        self._last_destroy = self._destroy_pool.select(self._rng)
        return self._destroy_pool[self._last_destroy]

    def _select_repair(self) -> Operator:
        self._last_repair = self._repair_pool.select(self._rng)
        return self._repair_pool[self._last_repair]

    def _record_outcome(self, outcome: Outcome) -> None:
        """Store ``outcome`` and pull both selected operators' scores towards it."""
        self._last_outcome = outcome
        if outcome is Outcome.REJECTED:
            return
        multiplier = {
            Outcome.NEW_BEST: self._params.new_best_multiplier,
            Outcome.IMPROVING: self._params.new_improving_multiplier,
            Outcome.ACCEPTED: self._params.new_accepted_multiplier,
        }[outcome]
        decay = self._params.score_decay
        self._destroy_pool.update_score(self._last_destroy, multiplier, decay)
        self._repair_pool.update_score(self._last_repair, multiplier, decay)

    def _advance(self, elapsed_time: float) -> None:
        self._elapsed_time = elapsed_time
        self._iteration += 1
