"""Adaptive Large Neighbourhood Search engine."""

from .acceptance import (
    AcceptanceCriterion,
    AlwaysAccept,
    LinearRecordToRecordTravel,
    TerminationCriterion,
)
from .errors import ALNSError, PreconditionError, RegistrationClosedError
from .operators import Operator, OperatorPool, roulette_wheel, updated_score
from .params import AlgorithmParams
from .solver import ALNSSolver
from .state import AlgorithmState, Outcome
from .visitors import (
    AlgorithmVisitor,
    ChainedVisitor,
    DefaultVisitor,
    MaxIterations,
    ProgressLogger,
    StatisticsCollector,
    TimeLimit,
)

__all__ = [
    "ALNSSolver",
    "AlgorithmParams",
    "AlgorithmState",
    "Outcome",
    "Operator",
    "OperatorPool",
    "roulette_wheel",
    "updated_score",
    "AcceptanceCriterion",
    "AlwaysAccept",
    "LinearRecordToRecordTravel",
    "TerminationCriterion",
    "AlgorithmVisitor",
    "DefaultVisitor",
    "MaxIterations",
    "TimeLimit",
    "ProgressLogger",
    "StatisticsCollector",
    "ChainedVisitor",
    "ALNSError",
    "PreconditionError",
    "RegistrationClosedError",
]
