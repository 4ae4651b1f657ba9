"""Plain-text building blocks for the save summary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class TableColumn:
    header: str
    width: int
    align_right: bool = False

    def cell(self, value: object) -> str:
        text = str(value)[: self.width]
        return text.rjust(self.width) if self.align_right else text.ljust(self.width)


@dataclass(frozen=True, slots=True)
class Table:
    columns: Sequence[TableColumn]
    rows: Sequence[Sequence[object]]

    def _line(self, cells: Sequence[object]) -> str:
        return " | ".join(column.cell(value) for column, value in zip(self.columns, cells))

    def render(self) -> str:
        lines = [self._line([column.header.upper() for column in self.columns])]
        lines.append("-+-".join("-" * column.width for column in self.columns))
        lines.extend(self._line(row) for row in self.rows)
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class ProgressBar:
    """Fill ratio drawn as ``[##..]`` followed by a whole percentage."""

    ratio: float
    width: int = 20

    def render(self) -> str:
        ratio = min(1.0, max(0.0, self.ratio))
        filled = round(ratio * self.width)
        return f"[{'#' * filled}{'.' * (self.width - filled)}] {int(ratio * 100):3d}%"


@dataclass(frozen=True, slots=True)
class Section:
    title: str
    lines: Sequence[str]
    width: int = 80

    def render(self) -> str:
        width = max(self.width, len(self.title) + 4)
        rule = "=" * width
        rows = [row for line in self.lines for row in (line.splitlines() or [""])]
        body = [row[start : start + width] for row in rows for start in range(0, max(len(row), 1), width)]
        return "\n".join([rule, self.title.center(width), rule, *body])


__all__ = ["ProgressBar", "Section", "Table", "TableColumn"]
