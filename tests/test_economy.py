import random

import pytest

from cliciv.actions import AssignJob, Build, Collect, DischargeJob, Idle, RecruitCitizen
from cliciv.errors import NotEnoughResource
from cliciv.world.buildings import Building
from cliciv.world.economy import Resources
from cliciv.world.jobs import Job
from cliciv.world.resources import PrimaryResource, SecondaryResource, SpecialResource


class _AlwaysHit:
    """Random source whose every Bernoulli draw succeeds."""

    def random(self) -> float:
        return 0.0


def test_defaults() -> None:
    resources = Resources()
    for primary in PrimaryResource:
        assert resources.amount(primary) == 0.0
        assert resources.capacity(primary) == 200.0
        assert resources.production_multiplier(primary) == 1.0


def test_primary_increase_is_clamped_to_capacity() -> None:
    resources = Resources(food=199.5).increase(PrimaryResource.FOOD, 5.0, random.Random(1))
    assert resources.food == 200.0

    stone = Resources(stone=150.0, max_wood=500.0).increase(PrimaryResource.STONE, 80.0, random.Random(1))
    assert stone.stone == 200.0


def test_primary_increase_draws_byproduct_per_whole_unit() -> None:
    resources = Resources().increase(PrimaryResource.WOOD, 3.7, _AlwaysHit())
    assert resources.wood == 3.7
    assert resources.herbs == 3.0
    assert resources.skins == 0.0

    fractional = Resources().increase(PrimaryResource.FOOD, 0.9, _AlwaysHit())
    assert fractional.skins == 0.0


def test_primary_increase_needs_random_source() -> None:
    with pytest.raises(ValueError):
        Resources().increase(PrimaryResource.FOOD, 1.0)


def test_other_tiers_increase_without_cap() -> None:
    resources = Resources().increase(SpecialResource.GOLD, 1000.0)
    assert resources.gold == 1000.0


def test_decrease_uses_whole_units() -> None:
    with pytest.raises(NotEnoughResource) as excinfo:
        Resources(food=19.99).decrease(PrimaryResource.FOOD, 20.0)
    assert excinfo.value.resource is PrimaryResource.FOOD

    assert Resources(food=20.0).decrease(PrimaryResource.FOOD, 20.0).food == 0.0
    assert Resources(food=20.99).decrease(PrimaryResource.FOOD, 20.5).food == 0.49


def test_recruit_costs_food_and_adds_consumption() -> None:
    resources = Resources(food=30.0).apply_action(RecruitCitizen(), random.Random(0))
    assert resources.food == 10.0
    assert resources.food_cons_rate == 1.0

    with pytest.raises(NotEnoughResource):
        Resources(food=5.0).apply_action(RecruitCitizen(), random.Random(0))


def test_collect_adds_one_unit() -> None:
    resources = Resources().apply_action(Collect(PrimaryResource.STONE), random.Random(0))
    assert resources.stone == 1.0


def test_build_pays_costs_then_applies_storage_bonus() -> None:
    resources = Resources(wood=120.0).apply_action(Build(Building.BARN), random.Random(0))
    assert resources.wood == 20.0
    assert resources.max_food == 300.0


def test_build_fails_on_first_missing_cost() -> None:
    before = Resources(wood=5.0, skins=1.0)
    with pytest.raises(NotEnoughResource) as excinfo:
        before.apply_action(Build(Building.TENT), random.Random(0))
    assert excinfo.value.resource is SecondaryResource.SKINS
    assert before.wood == 5.0


def test_jobs_move_production_rates() -> None:
    assigned = Resources().apply_action(AssignJob(Job.FARMER), random.Random(0))
    assert assigned.food_prod_rate == 1.2
    discharged = assigned.apply_action(DischargeJob(Job.FARMER), random.Random(0))
    assert discharged.food_prod_rate == 0.0
    assert Resources().apply_action(DischargeJob(Job.MINER), random.Random(0)).stone_prod_rate == 0.0


def test_idle_is_a_noop() -> None:
    resources = Resources(food=3.0)
    assert resources.apply_action(Idle(), random.Random(0)) is resources


def test_work_accrues_net_production() -> None:
    resources = Resources(food=10.0, food_prod_rate=1.2, food_cons_rate=1.0, wood_prod_rate=0.5)
    worked = resources.work(random.Random(3))
    assert worked.food == 10.2
    assert worked.wood == 0.5
    assert worked.net_production(PrimaryResource.FOOD) == pytest.approx(0.2)


def test_work_never_starves_below_zero() -> None:
    worked = Resources(food=0.5, food_cons_rate=2.0).work(random.Random(3))
    assert worked.food == 0.0


def test_invalid_ledgers_are_rejected() -> None:
    with pytest.raises(ValueError):
        Resources(gold=-1.0)
    with pytest.raises(ValueError):
        Resources(wood=250.0)


def test_digest_is_stable() -> None:
    assert Resources().digest() == 3258248330552271352
    assert Resources(food=1.0).digest() != Resources().digest()
