"""The ALNS solver loop."""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import numpy as np

from .acceptance import AcceptanceCriterion, AlwaysAccept
from .errors import RegistrationClosedError
from .operators import Operator
from .params import AlgorithmParams
from .state import AlgorithmState, Outcome, clone_solution
from .visitors import AlgorithmVisitor, DefaultVisitor

logger = logging.getLogger(__name__)


class ALNSSolver:
    """Adaptive Large Neighbourhood Search driver.

    Each iteration picks a destroy and a repair operator by roulette wheel
    over their scores, applies both to a copy of the current solution, and
    asks the acceptance criterion whether the result replaces the current
    solution. Accepted candidates update the scores of the two operators and,
    when they beat it, the best solution. The visitor runs at the end of every
    iteration and is the only way to stop the loop.

    Args:
        params: score update parameters.
        initial_solution: any object with a ``cost()`` method; it is copied,
            never modified.
        acceptance: acceptance criterion, :class:`AlwaysAccept` by default.
        visitor: algorithm visitor, :class:`DefaultVisitor` (never stops) by
            default.
        seed: seed for the operator selection generator; ``None`` seeds it
            from OS entropy.
    """

    def __init__(
        self,
        params: AlgorithmParams,
        initial_solution: Any,
        acceptance: Optional[AcceptanceCriterion] = None,
        visitor: Optional[AlgorithmVisitor] = None,
        seed: Optional[int] = None,
    ):
        self._params = params
        self._acceptance = acceptance if acceptance is not None else AlwaysAccept()
        self._visitor = visitor if visitor is not None else DefaultVisitor()
        self._state = AlgorithmState(params, initial_solution, np.random.default_rng(seed))
        self._running = False

    # ------------------------------------------------------------------
    @property
    def state(self) -> AlgorithmState:
        return self._state

    @property
    def params(self) -> AlgorithmParams:
        return self._params

    def set_params(self, params: AlgorithmParams) -> None:
        self._params = params
        self._state._set_params(params)

    @property
    def acceptance_criterion(self) -> AcceptanceCriterion:
        return self._acceptance

    def set_acceptance_criterion(self, acceptance: AcceptanceCriterion) -> None:
        self._acceptance = acceptance

    @property
    def visitor(self) -> AlgorithmVisitor:
        return self._visitor

    def set_visitor(self, visitor: AlgorithmVisitor) -> None:
        self._visitor = visitor

    @property
    def best_solution(self) -> Any:
        return self._state.best_solution

    @property
    def iteration(self) -> int:
        return self._state.iteration

    @property
    def elapsed_time(self) -> float:
        return self._state.elapsed_time

    # ------------------------------------------------------------------
    def add_destroy_operator(self, operator: Operator, name: Optional[str] = None) -> int:
        """Register a destroy operator; returns its index in the destroy pool."""
        self._check_registration_open()
        return self._state._destroy_pool.register(operator, name)

    def add_repair_operator(self, operator: Operator, name: Optional[str] = None) -> int:
        """Register a repair operator; returns its index in the repair pool."""
        self._check_registration_open()
        return self._state._repair_pool.register(operator, name)

    def _check_registration_open(self) -> None:
        if self._running:
            raise RegistrationClosedError("operators cannot be registered while solving")

    def reset(self, initial_solution: Any) -> None:
        """Clear counters, solutions and scores to start a new solve.

        After :meth:`solve` returns, the final state is kept so that the
        solver can be tweaked and resumed. Call this instead to start over
        from ``initial_solution`` with the same registered operators.
        """
        self._state.reset(initial_solution)

    # ------------------------------------------------------------------
    def solve(self) -> Any:
        """Iterate until the visitor stops the search; returns the best solution."""
        state = self._state
        start_time = time.monotonic() - state.elapsed_time
        logger.debug(
            "Starting ALNS from iteration %d with %d destroy and %d repair operators",
            state.iteration,
            len(state._destroy_pool),
            len(state._repair_pool),
        )

        self._running = True
        try:
            while True:
                destroy = state._select_destroy()
                repair = state._select_repair()

                state.candidate_solution = clone_solution(state.current_solution)
                destroy(state.candidate_solution)
                repair(state.candidate_solution)

                if self._acceptance.accept(state):
                    outcome = self._accepted_outcome(state)
                    if outcome is Outcome.NEW_BEST:
                        state.best_solution = clone_solution(state.candidate_solution)
                        logger.debug(
                            "New best solution at iteration %d: %s",
                            state.iteration,
                            state.best_solution.cost(),
                        )
                    state._record_outcome(outcome)
                    state.current_solution = clone_solution(state.candidate_solution)
                else:
                    state._record_outcome(Outcome.REJECTED)

                if not self._visitor.on_iteration_end(state):
                    break

                state._advance(time.monotonic() - start_time)
        finally:
            self._running = False

        logger.debug(
            "ALNS stopped at iteration %d after %.2fs, best cost %s",
            state.iteration,
            state.elapsed_time,
            state.best_solution.cost(),
        )
        return state.best_solution

    @staticmethod
    def _accepted_outcome(state: AlgorithmState) -> Outcome:
        candidate_cost = state.candidate_solution.cost()
        if candidate_cost < state.current_solution.cost():
            if candidate_cost < state.best_solution.cost():
                return Outcome.NEW_BEST
            return Outcome.IMPROVING
        return Outcome.ACCEPTED
