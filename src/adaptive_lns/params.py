from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AlgorithmParams:
    """Score update parameters shared by every destroy and repair operator.

    ``score_decay`` controls how fast an operator's score moves from one
    iteration to the next: close to 1 keeps a long memory, close to 0 only
    remembers the latest outcome. The three multipliers are the targets the
    score is pulled towards when the produced solution is a new best, improves
    on the current one, or is merely accepted.
    """

    score_decay: float = 0.9
    new_best_multiplier: float = 10.0
    new_improving_multiplier: float = 4.0
    new_accepted_multiplier: float = 1.5

    def __post_init__(self):
        if not 0.0 < self.score_decay < 1.0:
            raise ValueError(f"score_decay must be in (0, 1), got {self.score_decay}")
        for name in ("new_best_multiplier", "new_improving_multiplier", "new_accepted_multiplier"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
