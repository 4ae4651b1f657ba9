"""Resources ledger.

Every mutation returns a new ``Resources`` value with the touched amounts
rounded to two decimals. Primary resources are clamped to their storage cap
and gathering them draws the secondary byproduct from the iteration RNG,
which is the only place randomness enters a transition.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, fields, replace
from typing import Optional

from ..actions import Action, AssignJob, Build, Collect, DischargeJob, RecruitCitizen
from ..errors import NotEnoughResource
from ..numeric import as_bytes, round_to_2
from ..runtime.config import (
    COLLECT_AMOUNT,
    DEFAULT_PRIMARY_CAPACITY,
    DEFAULT_PRODUCTION_MULTIPLIER,
    RECRUIT_FOOD_CONSUMPTION,
    RECRUIT_FOOD_COST,
)
from ..runtime.commit import digest_u64
from ..runtime.rng_service import bernoulli_successes
from .resources import PrimaryResource, Resource, SecondaryResource, SpecialResource, TertiaryResource

_AMOUNT_FIELDS: dict[Resource, str] = {
    PrimaryResource.FOOD: "food",
    PrimaryResource.WOOD: "wood",
    PrimaryResource.STONE: "stone",
    SecondaryResource.SKINS: "skins",
    SecondaryResource.HERBS: "herbs",
    SecondaryResource.ORE: "ore",
    TertiaryResource.LEATHER: "leather",
    TertiaryResource.PIETY: "piety",
    TertiaryResource.METAL: "metal",
    SpecialResource.GOLD: "gold",
    SpecialResource.CORPSES: "corpses",
}
_CAPACITY_FIELDS = {p: f"max_{_AMOUNT_FIELDS[p]}" for p in PrimaryResource}
_RATE_FIELDS = {p: f"{_AMOUNT_FIELDS[p]}_prod_rate" for p in PrimaryResource}
_MULTIPLIER_FIELDS = {p: f"{_AMOUNT_FIELDS[p]}_prod_rate_multiplier" for p in PrimaryResource}


@dataclass(frozen=True, slots=True)
class Resources:
    # Primary
    food: float = 0.0
    food_cons_rate: float = 0.0
    food_prod_rate: float = 0.0
    food_prod_rate_multiplier: float = DEFAULT_PRODUCTION_MULTIPLIER
    max_food: float = DEFAULT_PRIMARY_CAPACITY
    wood: float = 0.0
    wood_prod_rate: float = 0.0
    wood_prod_rate_multiplier: float = DEFAULT_PRODUCTION_MULTIPLIER
    max_wood: float = DEFAULT_PRIMARY_CAPACITY
    stone: float = 0.0
    stone_prod_rate: float = 0.0
    stone_prod_rate_multiplier: float = DEFAULT_PRODUCTION_MULTIPLIER
    max_stone: float = DEFAULT_PRIMARY_CAPACITY

    # Secondary
    skins: float = 0.0
    herbs: float = 0.0
    ore: float = 0.0

    # Tertiary
    leather: float = 0.0
    piety: float = 0.0
    metal: float = 0.0

    # Special
    gold: float = 0.0
    corpses: float = 0.0

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ValueError(f"{item.name} must be a number, got {value!r}")
            if value < 0:
                raise ValueError(f"{item.name} must not be negative, got {value!r}")
        for primary in PrimaryResource:
            if self.amount(primary) > self.capacity(primary):
                raise ValueError(f"{primary.value} exceeds its capacity")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def amount(self, resource: Resource) -> float:
        return getattr(self, _AMOUNT_FIELDS[resource])

    def capacity(self, primary: PrimaryResource) -> float:
        return getattr(self, _CAPACITY_FIELDS[primary])

    def production_rate(self, primary: PrimaryResource) -> float:
        return getattr(self, _RATE_FIELDS[primary])

    def production_multiplier(self, primary: PrimaryResource) -> float:
        return getattr(self, _MULTIPLIER_FIELDS[primary])

    def net_production(self, primary: PrimaryResource) -> float:
        """Per-iteration change applied by ``work`` before capping."""

        produced = self.production_rate(primary) * self.production_multiplier(primary)
        if primary is PrimaryResource.FOOD:
            produced -= self.food_cons_rate
        return produced

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def increase(self, resource: Resource, amount: float, rng: Optional[random.Random] = None) -> "Resources":
        if not isinstance(resource, PrimaryResource):
            name = _AMOUNT_FIELDS[resource]
            return replace(self, **{name: round_to_2(getattr(self, name) + amount)})

        if rng is None:
            raise ValueError("increasing a primary resource needs a random source")
        secondary = resource.secondary
        trials = int(amount) if amount > 0 else 0
        byproduct = bernoulli_successes(rng, trials, secondary.byproduct_probability)
        capped = min(self.amount(resource) + amount, self.capacity(resource))
        return replace(
            self,
            **{
                _AMOUNT_FIELDS[resource]: round_to_2(max(0.0, capped)),
                _AMOUNT_FIELDS[secondary]: round_to_2(self.amount(secondary) + byproduct),
            },
        )

    def decrease(self, resource: Resource, amount: float) -> "Resources":
        current = self.amount(resource)
        # Whole units only: 19.99 food does not cover a cost of 20.
        if int(current) - int(amount) < 0:
            raise NotEnoughResource(resource)
        return replace(self, **{_AMOUNT_FIELDS[resource]: round_to_2(max(0.0, current - amount))})

    def increase_capacity(self, primary: PrimaryResource, amount: float) -> "Resources":
        name = _CAPACITY_FIELDS[primary]
        return replace(self, **{name: round_to_2(getattr(self, name) + amount)})

    def increase_production_rate(self, resource: Resource, amount: float) -> "Resources":
        if not isinstance(resource, PrimaryResource):
            return self
        name = _RATE_FIELDS[resource]
        return replace(self, **{name: round_to_2(getattr(self, name) + amount)})

    def decrease_production_rate(self, resource: Resource, amount: float) -> "Resources":
        if not isinstance(resource, PrimaryResource):
            return self
        name = _RATE_FIELDS[resource]
        return replace(self, **{name: round_to_2(max(0.0, getattr(self, name) - amount))})

    def increase_consumption(self, amount: float) -> "Resources":
        return replace(self, food_cons_rate=round_to_2(self.food_cons_rate + amount))

    def apply_action(self, action: Action, rng: random.Random) -> "Resources":
        if isinstance(action, RecruitCitizen):
            return self.decrease(PrimaryResource.FOOD, RECRUIT_FOOD_COST).increase_consumption(
                RECRUIT_FOOD_CONSUMPTION
            )
        if isinstance(action, Collect):
            return self.increase(action.resource, COLLECT_AMOUNT, rng)
        if isinstance(action, Build):
            resources = self
            for resource, cost in action.building.costs():
                resources = resources.decrease(resource, cost)
            bonus = action.building.primary_resource_storage_increase()
            if bonus is not None:
                resources = resources.increase_capacity(*bonus)
            return resources
        if isinstance(action, AssignJob):
            return self.increase_production_rate(action.job.resource, action.job.production_rate)
        if isinstance(action, DischargeJob):
            return self.decrease_production_rate(action.job.resource, action.job.production_rate)
        return self

    def work(self, rng: random.Random) -> "Resources":
        resources = self
        for primary in PrimaryResource:
            resources = resources.increase(primary, self.net_production(primary), rng)
        return resources

    def digest(self) -> int:
        payload = b"".join(as_bytes(getattr(self, item.name)) for item in fields(self))
        return digest_u64(payload)


__all__ = ["Resources"]
