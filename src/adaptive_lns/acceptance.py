"""Acceptance criteria deciding whether a candidate replaces the current solution."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from .state import AlgorithmState


class AcceptanceCriterion(Protocol):
    def accept(self, state: AlgorithmState) -> bool:
        """True iff ``state.candidate_solution`` should replace the current one."""
        ...


class AlwaysAccept:
    """Used when no acceptance criterion is given: accepts every candidate."""

    def accept(self, state: AlgorithmState) -> bool:
        return True


class TerminationCriterion(Enum):
    ITERATIONS = "iterations"
    TIME = "time"


class LinearRecordToRecordTravel:
    """Record-to-record travel with a linearly moving threshold.

    A candidate is accepted when its relative gap to the best solution,
    ``(candidate - best) / candidate``, is at most the threshold
    ``start + (start - end) * (limit - progress)``. Progress is the iteration
    number or the elapsed seconds, depending on ``termination_criterion``.

    Candidates with a non-positive cost are always accepted, since the
    relative gap is undefined for them.
    """

    def __init__(
        self,
        termination_criterion: TerminationCriterion = TerminationCriterion.ITERATIONS,
        iterations_limit: int = 1_000_000,
        time_limit: float = 3600.0,
        start_threshold: float = 0.1,
        end_threshold: float = 0.0,
    ):
        if iterations_limit <= 0:
            raise ValueError(f"iterations_limit must be positive, got {iterations_limit}")
        if time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {time_limit}")

        self.termination_criterion = TerminationCriterion(termination_criterion)
        self.iterations_limit = iterations_limit
        self.time_limit = time_limit
        self.start_threshold = start_threshold
        self.end_threshold = end_threshold

    def threshold(self, state: AlgorithmState) -> float:
        if self.termination_criterion is TerminationCriterion.ITERATIONS:
            remaining = self.iterations_limit - state.iteration
        else:
            remaining = self.time_limit - state.elapsed_time
        return self.start_threshold + (self.start_threshold - self.end_threshold) * remaining

    def accept(self, state: AlgorithmState) -> bool:
        candidate_cost = state.candidate_solution.cost()
        if candidate_cost <= 0:
            return True
        gap = (candidate_cost - state.best_solution.cost()) / candidate_cost
        return gap <= self.threshold(state)

    def __repr__(self):
        return (
            f"LinearRecordToRecordTravel({self.termination_criterion.value}, "
            f"iterations_limit={self.iterations_limit}, time_limit={self.time_limit}, "
            f"start_threshold={self.start_threshold}, end_threshold={self.end_threshold})"
        )
