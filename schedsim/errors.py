from __future__ import annotations


class SchedulerError(Exception):
    """Base class for every error raised by schedsim."""


class InvalidInputError(SchedulerError, ValueError):
    """A process set that no policy may schedule (bad burst, arrival or pid)."""


class UnknownAlgorithmError(SchedulerError, ValueError):
    pass


class NonTerminatingInputError(SchedulerError, RuntimeError):
    """
    Raised when an idle-advance loop runs past the last possible completion
    time. Valid input never reaches this.
    """
