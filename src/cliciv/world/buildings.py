"""Static catalog of constructible buildings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .resources import PrimaryResource, Resource, SecondaryResource


class Building(Enum):
    TENT = "Tent"
    WOODEN_HUT = "WoodenHut"
    BARN = "Barn"
    WOOD_STOCKPILE = "WoodStockpile"
    STONE_STOCKPILE = "StoneStockpile"

    @property
    def spec(self) -> "BuildingSpec":
        return BUILDING_CATALOG[self]

    def costs(self) -> Tuple[Tuple[Resource, float], ...]:
        return self.spec.costs

    def population_capacity_increase(self) -> int:
        return self.spec.population_bonus

    def primary_resource_storage_increase(self) -> Optional[Tuple[PrimaryResource, float]]:
        return self.spec.storage_bonus


@dataclass(frozen=True, slots=True)
class BuildingSpec:
    costs: Tuple[Tuple[Resource, float], ...]
    population_bonus: int = 0
    storage_bonus: Optional[Tuple[PrimaryResource, float]] = None


# Costs are paid in the listed order; the first unaffordable entry aborts the build.
BUILDING_CATALOG: dict[Building, BuildingSpec] = {
    Building.TENT: BuildingSpec(
        costs=((PrimaryResource.WOOD, 2.0), (SecondaryResource.SKINS, 2.0)),
        population_bonus=1,
    ),
    Building.WOODEN_HUT: BuildingSpec(
        costs=((PrimaryResource.WOOD, 20.0), (SecondaryResource.SKINS, 1.0)),
        population_bonus=3,
    ),
    Building.BARN: BuildingSpec(
        costs=((PrimaryResource.WOOD, 100.0),),
        storage_bonus=(PrimaryResource.FOOD, 100.0),
    ),
    Building.WOOD_STOCKPILE: BuildingSpec(
        costs=((PrimaryResource.WOOD, 100.0),),
        storage_bonus=(PrimaryResource.WOOD, 100.0),
    ),
    Building.STONE_STOCKPILE: BuildingSpec(
        costs=((PrimaryResource.WOOD, 100.0),),
        storage_bonus=(PrimaryResource.STONE, 100.0),
    ),
}


__all__ = ["BUILDING_CATALOG", "Building", "BuildingSpec"]
