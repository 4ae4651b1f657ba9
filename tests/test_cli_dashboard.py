from dataclasses import replace

from cliciv.actions import Collect, Idle, RecruitCitizen
from cliciv.interfaces.cli_components import ProgressBar, Section, Table, TableColumn
from cliciv.interfaces.cli_dashboard import StateDashboardCLI
from cliciv.runtime.action_log import ActionLog
from cliciv.state import State
from cliciv.world.resources import PrimaryResource

SEED = 43932030939219715774207308070970463251


def _log_with(entries: int) -> ActionLog:
    actions = [Idle(), Collect(PrimaryResource.FOOD), RecruitCitizen(), Collect(PrimaryResource.WOOD)]
    return ActionLog.from_pairs((actions[i % len(actions)], i + 1) for i in range(entries))


def test_header_shows_seed_and_hash() -> None:
    state = State.genesis(SEED).apply_action(Idle())
    out = StateDashboardCLI().render(state)
    assert f"{SEED:032x}" in out
    assert f"{state.prev_hash:016x}" in out
    assert "x1      Idle" in out


def test_negative_seed_renders_as_128_bit_hex() -> None:
    out = StateDashboardCLI().render(State.genesis(-1))
    assert "f" * 32 in out


def test_log_tail_markers() -> None:
    state = State.genesis(SEED)
    assert "<empty>" in StateDashboardCLI().render(state)
    assert "... 1 more entry ..." in StateDashboardCLI().render(replace(state, log=_log_with(6)))
    out = StateDashboardCLI().render(replace(state, log=_log_with(8)))
    assert "... 3 more entries ..." in out
    assert "x8" in out
    assert "x3 " not in out


def test_components() -> None:
    table = Table([TableColumn("Name", 6), TableColumn("Qty", 4, align_right=True)], [["Food", "12"]])
    assert table.render().splitlines() == ["NAME   |  QTY", "-------+-----", "Food   |   12"]
    assert ProgressBar(0.5, width=4).render() == "[##..]  50%"
    assert Section("Log", ["abc"], width=8).render().splitlines()[1] == "  Log   "


def test_section_keeps_table_rows_whole_and_wraps_long_lines() -> None:
    table = Table([TableColumn("Building", 16), TableColumn("Count", 6, align_right=True)], [["Tent", "3"]] * 6)
    lines = Section("Land", [table.render(), "", "x" * 30], width=25).render().splitlines()[3:]
    assert lines[:2] == ["BUILDING         |  COUNT", "-----------------+-------"]
    assert lines[2:8] == ["Tent             |      3"] * 6
    assert lines[8:] == ["", "x" * 25, "x" * 5]
