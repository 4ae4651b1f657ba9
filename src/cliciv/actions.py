"""Player actions.

Actions are frozen dataclasses so equality is structural: two ``Collect``
actions on the same resource are the same action, which is what lets the
action log collapse runs of them into a single entry.

The JSON form mirrors the save format: payload-less actions are bare strings
(``"Idle"``) and the others are single-key objects (``{"Collect": "Food"}``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .world.buildings import Building
from .world.jobs import Job
from .world.resources import PrimaryResource


@dataclass(frozen=True, slots=True)
class Idle:
    def __str__(self) -> str:
        return "Idle"


@dataclass(frozen=True, slots=True)
class Collect:
    resource: PrimaryResource

    def __str__(self) -> str:
        return f"Collect({self.resource.value})"


@dataclass(frozen=True, slots=True)
class RecruitCitizen:
    def __str__(self) -> str:
        return "RecruitCitizen"


@dataclass(frozen=True, slots=True)
class AssignJob:
    job: Job

    def __str__(self) -> str:
        return f"AssignJob({self.job.value})"


@dataclass(frozen=True, slots=True)
class DischargeJob:
    job: Job

    def __str__(self) -> str:
        return f"DischargeJob({self.job.value})"


@dataclass(frozen=True, slots=True)
class Build:
    building: Building

    def __str__(self) -> str:
        return f"Build({self.building.value})"


Action = Union[Idle, Collect, RecruitCitizen, AssignJob, DischargeJob, Build]

_UNIT_ACTIONS = {"Idle": Idle, "RecruitCitizen": RecruitCitizen}
_PAYLOAD_ACTIONS = {
    "Collect": (Collect, PrimaryResource),
    "AssignJob": (AssignJob, Job),
    "DischargeJob": (DischargeJob, Job),
    "Build": (Build, Building),
}


def action_to_jsonable(action: Action) -> Any:
    if isinstance(action, (Idle, RecruitCitizen)):
        return type(action).__name__
    if isinstance(action, Collect):
        return {"Collect": action.resource.value}
    if isinstance(action, AssignJob):
        return {"AssignJob": action.job.value}
    if isinstance(action, DischargeJob):
        return {"DischargeJob": action.job.value}
    if isinstance(action, Build):
        return {"Build": action.building.value}
    raise TypeError(f"Unsupported action type: {type(action)!r}")


def action_from_jsonable(value: Any) -> Action:
    if isinstance(value, str):
        try:
            return _UNIT_ACTIONS[value]()
        except KeyError:
            raise ValueError(f"Unknown action {value!r}") from None
    if isinstance(value, dict) and len(value) == 1:
        ((tag, payload),) = value.items()
        if tag not in _PAYLOAD_ACTIONS:
            raise ValueError(f"Unknown action {tag!r}")
        cls, payload_type = _PAYLOAD_ACTIONS[tag]
        return cls(payload_type(payload))
    raise ValueError(f"Malformed action record: {value!r}")


__all__ = [
    "Action",
    "AssignJob",
    "Build",
    "Collect",
    "DischargeJob",
    "Idle",
    "RecruitCitizen",
    "action_from_jsonable",
    "action_to_jsonable",
]
