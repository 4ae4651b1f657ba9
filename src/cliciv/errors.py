"""Error taxonomy.

Transition failures (``IterationError``) and replay failures (``CheckError``)
are genuine rule violations: nothing is retried and no ledger is ever left
half-updated. The driver decides how to surface them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .world.jobs import Job
    from .world.resources import Resource


class CliCivError(Exception):
    """Base class for every error raised by the engine or its driver."""


class IterationError(CliCivError):
    message = "iteration failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args  # type: ignore[union-attr]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class NotEnoughResource(IterationError):
    def __init__(self, resource: "Resource") -> None:
        self.resource = resource
        super().__init__(f"not enough {resource.value.lower()}")


class NotEnoughFreeLand(IterationError):
    message = "not enough free land"


class NotEnoughIdleWorkers(IterationError):
    message = "not enough idle workers"


class NotEnoughWorkersInJob(IterationError):
    def __init__(self, job: "Job") -> None:
        self.job = job
        super().__init__(f"no workers in job {job.value.lower()}")


class PopulationLimitReached(IterationError):
    message = "population limit reached"


class CheckError(CliCivError):
    pass


class HashMismatch(CheckError):
    def __init__(self, message: str = "hash mismatch") -> None:
        super().__init__(message)


class InvalidStateRecreation(CheckError):
    def __init__(self, iteration: int, error: IterationError) -> None:
        self.iteration = iteration
        self.error = error
        super().__init__(f"invalid state recreation ({error} at iteration {iteration})")


class SaveFileError(CliCivError):
    """The save record is missing, unreadable or does not decode into a state."""


__all__ = [
    "CheckError",
    "CliCivError",
    "HashMismatch",
    "InvalidStateRecreation",
    "IterationError",
    "NotEnoughFreeLand",
    "NotEnoughIdleWorkers",
    "NotEnoughResource",
    "NotEnoughWorkersInJob",
    "PopulationLimitReached",
    "SaveFileError",
]
