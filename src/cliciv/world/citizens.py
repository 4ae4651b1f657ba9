"""Population ledger: idle citizens, one counter per job, and the housing cap."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields, replace

from ..actions import Action, AssignJob, Build, DischargeJob, RecruitCitizen
from ..errors import NotEnoughIdleWorkers, NotEnoughWorkersInJob, PopulationLimitReached
from ..runtime.commit import digest_u64
from .jobs import Job

_JOB_FIELDS = {
    Job.FARMER: "farmers",
    Job.WOODCUTTER: "woodcutters",
    Job.MINER: "miners",
}


@dataclass(frozen=True, slots=True)
class Citizens:
    idle: int = 0
    farmers: int = 0
    woodcutters: int = 0
    miners: int = 0
    max_population: int = 0

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{item.name} must be a non-negative integer, got {value!r}")
        if self.count() > self.max_population:
            raise ValueError(f"population {self.count()} exceeds the cap of {self.max_population}")

    def count(self) -> int:
        return self.idle + self.farmers + self.woodcutters + self.miners

    def workers(self, job: Job) -> int:
        return getattr(self, _JOB_FIELDS[job])

    def apply_action(self, action: Action) -> "Citizens":
        if isinstance(action, RecruitCitizen):
            if self.count() >= self.max_population:
                raise PopulationLimitReached()
            return replace(self, idle=self.idle + 1)
        if isinstance(action, AssignJob):
            if self.idle <= 0:
                raise NotEnoughIdleWorkers()
            name = _JOB_FIELDS[action.job]
            return replace(self, idle=self.idle - 1, **{name: getattr(self, name) + 1})
        if isinstance(action, DischargeJob):
            name = _JOB_FIELDS[action.job]
            if getattr(self, name) <= 0:
                raise NotEnoughWorkersInJob(action.job)
            return replace(self, idle=self.idle + 1, **{name: getattr(self, name) - 1})
        if isinstance(action, Build):
            return replace(self, max_population=self.max_population + action.building.population_capacity_increase())
        return self

    def digest(self) -> int:
        values = [getattr(self, item.name) for item in fields(self)]
        return digest_u64(struct.pack(f"<{len(values)}Q", *values))


__all__ = ["Citizens"]
