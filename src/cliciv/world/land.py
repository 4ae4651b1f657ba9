"""Land ledger: fixed plot capacity and one counter per building type."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields, replace

from ..actions import Action, Build
from ..errors import NotEnoughFreeLand
from ..runtime.commit import digest_u64
from ..runtime.config import DEFAULT_TOTAL_LAND
from .buildings import Building

_BUILDING_FIELDS = {
    Building.TENT: "tents",
    Building.WOODEN_HUT: "wooden_huts",
    Building.BARN: "barns",
    Building.WOOD_STOCKPILE: "wood_stockpiles",
    Building.STONE_STOCKPILE: "stone_stockpiles",
}


@dataclass(frozen=True, slots=True)
class Land:
    total_land: int = DEFAULT_TOTAL_LAND
    tents: int = 0
    wooden_huts: int = 0
    barns: int = 0
    wood_stockpiles: int = 0
    stone_stockpiles: int = 0

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{item.name} must be a non-negative integer, got {value!r}")
        if self.land_use() > self.total_land:
            raise ValueError(f"{self.land_use()} plots used but only {self.total_land} exist")

    def land_use(self) -> int:
        return sum(getattr(self, name) for name in _BUILDING_FIELDS.values())

    def free_land(self) -> int:
        return self.total_land - self.land_use()

    def buildings(self, building: Building) -> int:
        return getattr(self, _BUILDING_FIELDS[building])

    def apply_action(self, action: Action) -> "Land":
        if not isinstance(action, Build):
            return self
        if self.free_land() <= 0:
            raise NotEnoughFreeLand()
        name = _BUILDING_FIELDS[action.building]
        return replace(self, **{name: getattr(self, name) + 1})

    def digest(self) -> int:
        values = [getattr(self, item.name) for item in fields(self)]
        return digest_u64(struct.pack(f"<{len(values)}Q", *values))


__all__ = ["Land"]
