"""Exceptions raised by the ALNS engine.

Errors thrown by user code (operators, acceptance criteria, visitors) are
never wrapped: they reach the caller of :meth:`ALNSSolver.solve` unchanged.
"""


class ALNSError(Exception):
    """Base class for engine errors."""


class PreconditionError(ALNSError):
    """A programming error, e.g. selecting from an empty operator pool."""


class RegistrationClosedError(PreconditionError):
    """Operators were registered while the solver was running."""
