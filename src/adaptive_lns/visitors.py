"""Algorithm visitors, called once at the end of every iteration.

A visitor can inspect the algorithm state, improve the current or best
solution, gather statistics, and decide when to stop: returning ``False``
from :meth:`on_iteration_end` is the only way to end a solve.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Protocol

import pandas as pd

from .state import AlgorithmState

logger = logging.getLogger(__name__)


class AlgorithmVisitor(Protocol):
    def on_iteration_end(self, state: AlgorithmState) -> bool:
        """False iff the solver should stop."""
        ...


class DefaultVisitor:
    """Does nothing and never stops the solver."""

    def on_iteration_end(self, state: AlgorithmState) -> bool:
        return True


class MaxIterations:
    """Stops once ``max_iterations`` iterations have been carried out."""

    def __init__(self, max_iterations: int):
        if max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {max_iterations}")
        self.max_iterations = max_iterations

    def on_iteration_end(self, state: AlgorithmState) -> bool:
        return state.iteration + 1 < self.max_iterations


class TimeLimit:
    """Stops at the first iteration end where ``seconds`` have elapsed."""

    def __init__(self, seconds: float):
        if seconds <= 0:
            raise ValueError(f"seconds must be positive, got {seconds}")
        self.seconds = seconds

    def on_iteration_end(self, state: AlgorithmState) -> bool:
        return state.elapsed_time < self.seconds


class ProgressLogger:
    def __init__(self, every: int = 100, level: int = logging.INFO):
        if every <= 0:
            raise ValueError(f"every must be positive, got {every}")
        self.every = every
        self.level = level

    def on_iteration_end(self, state: AlgorithmState) -> bool:
        if state.iteration % self.every == 0:
            logger.log(
                self.level,
                "iteration %d\tbest %.6g\tcurrent %.6g\t(%.2fs)",
                state.iteration,
                state.best_solution.cost(),
                state.current_solution.cost(),
                state.elapsed_time,
            )
        return True


class StatisticsCollector:
    """Records one row per iteration; never stops the solver."""

    def __init__(self):
        self.records: List[Dict] = []

    def on_iteration_end(self, state: AlgorithmState) -> bool:
        record = {
            "iteration": state.iteration,
            "elapsed_time": state.elapsed_time,
            "best_cost": state.best_solution.cost(),
            "current_cost": state.current_solution.cost(),
            "candidate_cost": state.candidate_solution.cost(),
            "destroy": state.destroy_names[state.last_destroy_index],
            "repair": state.repair_names[state.last_repair_index],
            "outcome": state.last_outcome.value,
        }
        for name, score in zip(state.destroy_names, state.destroy_scores):
            record[f"destroy_score[{name}]"] = score
        for name, score in zip(state.repair_names, state.repair_scores):
            record[f"repair_score[{name}]"] = score
        self.records.append(record)
        return True

    def clear(self) -> None:
        self.records = []

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.records)


class ChainedVisitor:
    """Runs several visitors in order; stops when any of them asks to.

    Every visitor is called at each iteration, even after an earlier one in
    the chain has returned ``False``.
    """

    def __init__(self, *visitors: AlgorithmVisitor):
        self.visitors = list(visitors)

    def on_iteration_end(self, state: AlgorithmState) -> bool:
        results = [visitor.on_iteration_end(state) for visitor in self.visitors]
        return all(results)
