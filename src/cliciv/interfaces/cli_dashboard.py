"""Human-readable summary of a save, printed by the CLI after each turn."""

from __future__ import annotations

from ..runtime.config import LOG_DISPLAY_LIMIT
from ..state import State
from ..world.buildings import Building
from ..world.jobs import Job
from ..world.resources import PrimaryResource, SecondaryResource, SpecialResource, TertiaryResource
from .cli_components import ProgressBar, Section, Table, TableColumn

_SEED_MASK = (1 << 128) - 1


class StateDashboardCLI:
    """Compose the ledger views into a readable CLI summary."""

    def __init__(self, width: int = 80, log_limit: int = LOG_DISPLAY_LIMIT) -> None:
        self.width = width
        self.log_limit = log_limit

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render(self, state: State) -> str:
        sections = [
            self._render_header(state),
            self._render_resources(state),
            self._render_citizens(state),
            self._render_land(state),
            self._render_log(state),
        ]
        return "\n\n".join(section.render() for section in sections)

    # ------------------------------------------------------------------
    # Internal render helpers
    # ------------------------------------------------------------------
    def _render_header(self, state: State) -> Section:
        body = [
            f"Seed           {state.seed & _SEED_MASK:032x}",
            f"Previous hash  {state.prev_hash:016x}",
            f"Iterations     {state.iterations}",
        ]
        return Section("Save", body, width=self.width)

    def _render_resources(self, state: State) -> Section:
        resources = state.resources
        columns = [
            TableColumn("Primary", 10),
            TableColumn("Amount", 9, align_right=True),
            TableColumn("Per iter", 9, align_right=True),
            TableColumn("Max", 8, align_right=True),
        ]
        rows = []
        bars = []
        for primary in PrimaryResource:
            amount = resources.amount(primary)
            capacity = resources.capacity(primary)
            rows.append(
                [
                    primary.value,
                    f"{amount:.2f}",
                    f"{resources.net_production(primary):+.2f}",
                    f"{capacity:g}",
                ]
            )
            fill = amount / capacity if capacity else 0.0
            bars.append(f"{primary.value:<8} {ProgressBar(fill).render()}")

        others = ", ".join(
            f"{resource.value}={resources.amount(resource):g}"
            for tier in (SecondaryResource, TertiaryResource, SpecialResource)
            for resource in tier
        )
        body = [Table(columns, rows).render(), "", *bars, "", f"Other: {others}"]
        return Section("Resources", body, width=self.width)

    def _render_citizens(self, state: State) -> Section:
        citizens = state.citizens
        workers = ", ".join(f"{job.value}s={citizens.workers(job)}" for job in Job)
        body = [
            f"Population {citizens.count()}/{citizens.max_population} (idle {citizens.idle})",
            f"Workers: {workers}",
        ]
        return Section("Citizens", body, width=self.width)

    def _render_land(self, state: State) -> Section:
        land = state.land
        columns = [TableColumn("Building", 16), TableColumn("Count", 6, align_right=True)]
        rows = [[building.value, str(land.buildings(building))] for building in Building]
        body = [f"Used {land.land_use()}/{land.total_land} (free {land.free_land()})", Table(columns, rows).render()]
        return Section("Land", body, width=self.width)

    def _render_log(self, state: State) -> Section:
        hidden = len(state.log) - self.log_limit
        body = []
        if hidden > 1:
            body.append(f"... {hidden} more entries ...")
        elif hidden == 1:
            body.append("... 1 more entry ...")
        body.extend(f"x{entry.count:<6} {entry.action}" for entry in state.log.tail(self.log_limit))
        if not body:
            body.append("<empty>")
        return Section("Log", body, width=self.width)


__all__ = ["StateDashboardCLI"]
