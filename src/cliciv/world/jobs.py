from __future__ import annotations

from enum import Enum

from .resources import PrimaryResource


class Job(Enum):
    FARMER = "Farmer"
    WOODCUTTER = "Woodcutter"
    MINER = "Miner"

    @property
    def production_rate(self) -> float:
        """Per-iteration output added by one worker."""

        return _JOB_RATES[self]

    @property
    def resource(self) -> PrimaryResource:
        return _JOB_OUTPUTS[self]


_JOB_RATES = {
    Job.FARMER: 1.2,
    Job.WOODCUTTER: 0.5,
    Job.MINER: 0.2,
}

_JOB_OUTPUTS = {
    Job.FARMER: PrimaryResource.FOOD,
    Job.WOODCUTTER: PrimaryResource.WOOD,
    Job.MINER: PrimaryResource.STONE,
}


__all__ = ["Job"]
