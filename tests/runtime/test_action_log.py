import pytest

from cliciv.actions import Build, Collect, Idle, RecruitCitizen
from cliciv.runtime.action_log import ActionLog, LogEntry
from cliciv.world.buildings import Building
from cliciv.world.resources import PrimaryResource

FOOD = Collect(PrimaryResource.FOOD)


def test_identical_actions_compact_into_one_entry() -> None:
    log = ActionLog().append(FOOD).append(FOOD).append(Collect(PrimaryResource.FOOD))
    assert log.entries == (LogEntry(FOOD, 3),)


def test_different_payload_starts_a_new_entry() -> None:
    log = ActionLog().append(FOOD).append(Collect(PrimaryResource.WOOD)).append(FOOD)
    assert [entry.count for entry in log] == [1, 1, 1]
    assert len(log) == 3


def test_split_runs_are_merged_on_load() -> None:
    log = ActionLog.from_pairs([(FOOD, 3), (FOOD, 2)])
    assert log.entries == (LogEntry(FOOD, 5),)


def test_from_pairs_rejects_empty_runs() -> None:
    with pytest.raises(ValueError):
        ActionLog.from_pairs([(Idle(), 0)])
    with pytest.raises(ValueError):
        ActionLog.from_pairs([(Idle(), True)])


def test_actions_expand_runs_in_order() -> None:
    log = ActionLog.from_pairs([(Idle(), 2), (RecruitCitizen(), 1), (Build(Building.TENT), 2)])
    assert list(log.actions()) == [
        Idle(),
        Idle(),
        RecruitCitizen(),
        Build(Building.TENT),
        Build(Building.TENT),
    ]
    assert log.total() == 5


def test_tail() -> None:
    log = ActionLog.from_pairs([(Idle(), 1), (FOOD, 1), (RecruitCitizen(), 4)])
    assert log.tail(2) == (LogEntry(FOOD, 1), LogEntry(RecruitCitizen(), 4))
    assert log.tail(0) == ()
    assert log.tail(10) == log.entries


def test_append_leaves_original_untouched() -> None:
    log = ActionLog().append(Idle())
    log.append(Idle())
    assert log.total() == 1
