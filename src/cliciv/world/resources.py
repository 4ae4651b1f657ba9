"""Resource taxonomy.

Resources come in four tiers. Primary resources are gathered directly and are
the only ones with production rates and storage caps; every primary resource
yields one secondary resource as a random byproduct when it is gathered.
Tertiary and special resources only hold an amount.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from ..runtime.config import BYPRODUCT_PROBABILITY


class PrimaryResource(Enum):
    FOOD = "Food"
    WOOD = "Wood"
    STONE = "Stone"

    @property
    def secondary(self) -> "SecondaryResource":
        """The byproduct gathered alongside this resource."""

        return _BYPRODUCTS[self]


class SecondaryResource(Enum):
    SKINS = "Skins"
    HERBS = "Herbs"
    ORE = "Ore"

    @property
    def byproduct_probability(self) -> float:
        return BYPRODUCT_PROBABILITY


class TertiaryResource(Enum):
    LEATHER = "Leather"
    PIETY = "Piety"
    METAL = "Metal"


class SpecialResource(Enum):
    GOLD = "Gold"
    CORPSES = "Corpses"


Resource = Union[PrimaryResource, SecondaryResource, TertiaryResource, SpecialResource]

_BYPRODUCTS = {
    PrimaryResource.FOOD: SecondaryResource.SKINS,
    PrimaryResource.WOOD: SecondaryResource.HERBS,
    PrimaryResource.STONE: SecondaryResource.ORE,
}


__all__ = [
    "PrimaryResource",
    "Resource",
    "SecondaryResource",
    "SpecialResource",
    "TertiaryResource",
]
