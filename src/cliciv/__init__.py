"""cliciv public façade: the deterministic state engine and its ledgers."""

from .actions import Action, AssignJob, Build, Collect, DischargeJob, Idle, RecruitCitizen
from .errors import (
    CheckError,
    CliCivError,
    HashMismatch,
    InvalidStateRecreation,
    IterationError,
    NotEnoughFreeLand,
    NotEnoughIdleWorkers,
    NotEnoughResource,
    NotEnoughWorkersInJob,
    PopulationLimitReached,
    SaveFileError,
)
from .runtime.action_log import ActionLog, LogEntry
from .state import State
from .world.buildings import Building
from .world.citizens import Citizens
from .world.economy import Resources
from .world.jobs import Job
from .world.land import Land
from .world.resources import PrimaryResource, SecondaryResource, SpecialResource, TertiaryResource

__all__ = [
    "Action",
    "ActionLog",
    "AssignJob",
    "Build",
    "Building",
    "CheckError",
    "Citizens",
    "CliCivError",
    "Collect",
    "DischargeJob",
    "HashMismatch",
    "Idle",
    "InvalidStateRecreation",
    "IterationError",
    "Job",
    "Land",
    "LogEntry",
    "NotEnoughFreeLand",
    "NotEnoughIdleWorkers",
    "NotEnoughResource",
    "NotEnoughWorkersInJob",
    "PopulationLimitReached",
    "PrimaryResource",
    "RecruitCitizen",
    "Resources",
    "SaveFileError",
    "SecondaryResource",
    "SpecialResource",
    "State",
    "TertiaryResource",
]
