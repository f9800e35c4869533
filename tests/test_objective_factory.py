"""Tests for objective instantiation from catalog templates."""

import math

import pytest

from levelsmith import ObjectiveCategory, ObjectiveStatus
from levelsmith.classes.objectives import GenericParameters, SurvivalParameters
from levelsmith.procedural.objective_factory import ObjectiveFactory, format_description, time_multiplier
from levelsmith.resources.objective_catalog import ObjectiveCatalog, ObjectiveTemplate, Variant

DIFFICULTIES = [0.5, 1.0, 1.5, 2.0, 2.5, 3.0]


@pytest.fixture
def factory(catalog):
    return ObjectiveFactory(catalog)


def test_survival_at_standard_difficulty(factory):
    objective = factory.create_objective("survival", 1.0)

    assert objective.type == "survival"
    assert objective.category == ObjectiveCategory.PRIMARY
    assert objective.status == ObjectiveStatus.PENDING
    assert objective.progress == 0
    assert objective.name == "Withstand the Waves"
    assert isinstance(objective.parameters, SurvivalParameters)
    assert objective.parameters.waves == 10
    assert objective.max_progress == 10
    assert objective.description == "Survive 10 waves of zombies"
    assert objective.difficulty == pytest.approx(0.6)
    # 100 base * 1.3 variant scaling, floored
    assert objective.reward in (129, 130)
    # 300 s * 1.2
    assert objective.time_limit in (359, 360)
    assert objective.requirements == []
    assert objective.hints
    assert objective.location is None
    assert not objective.optional


def test_easy_survival_is_untimed(factory):
    objective = factory.create_objective("survival", 0.4)

    assert objective.parameters.duration == 60
    assert objective.parameters.waves is None
    assert objective.time_limit is None
    assert objective.description == "Survive for 60 seconds"
    assert objective.max_progress == 60


def test_hard_specialized_hunt(factory):
    objective = factory.create_objective("elimination", 1.0)

    assert objective.parameters.count == 20
    assert objective.parameters.zombie_type == "boss"
    assert objective.description == "Kill 20 boss zombies"


def test_unknown_type_returns_none(factory):
    assert factory.create_objective("racing", 1.0) is None
    assert factory.create_bonus_objective("racing", 1.0) is None


def test_template_without_variants_returns_none():
    empty = ObjectiveTemplate("salvage", "Salvage", "Salvage things", 0.5, 100, variants=())
    factory = ObjectiveFactory(ObjectiveCatalog((empty,)))
    assert factory.create_objective("salvage", 1.0) is None


def test_category_accepts_string(factory):
    objective = factory.create_objective("collection", 1.0, "bonus")
    assert objective.category == ObjectiveCategory.BONUS


@pytest.mark.parametrize("objective_type", ["survival", "elimination", "collection", "escort", "exploration"])
def test_rewards_and_targets_grow_with_difficulty(factory, objective_type):
    objectives = [factory.create_objective(objective_type, d) for d in DIFFICULTIES]

    rewards = [o.reward for o in objectives]
    targets = [o.max_progress for o in objectives]
    difficulties = [o.difficulty for o in objectives]
    assert rewards == sorted(rewards)
    assert difficulties == sorted(difficulties)
    assert targets == sorted(targets)
    assert all(o.reward > 0 for o in objectives)
    assert all(o.max_progress >= 1 for o in objectives)


@pytest.mark.parametrize("d", DIFFICULTIES)
def test_time_limit_never_below_half_base(d):
    assert time_multiplier(d) >= 0.5


def test_requirements_by_difficulty(factory):
    assert [r.type for r in factory.create_objective("escort", 1.0).requirements] == ["protect_target"]
    assert [r.type for r in factory.create_objective("collection", 1.8).requirements] == ["health_threshold"]

    hard = factory.create_objective("escort", 2.5)
    assert [r.type for r in hard.requirements] == ["health_threshold", "no_vehicle_damage", "protect_target"]
    assert hard.requirements[0].value == 0.5


def test_bonus_objective(factory):
    bonus = factory.create_bonus_objective("collection", 1.0)
    reference = factory.create_objective("collection", 0.8)

    assert bonus.category == ObjectiveCategory.BONUS
    assert bonus.optional
    assert bonus.difficulty == pytest.approx(reference.difficulty)
    assert bonus.reward == math.floor(reference.reward * 1.5)


@pytest.mark.parametrize("objective_type", ["survival", "escort"])
def test_bonus_reward_dips_at_variant_switch(factory, objective_type):
    """Bonus objectives run at 0.8x difficulty, so d=0.625 lands on the
    second variant, whose lower scaling factor outweighs the difficulty bump."""
    before = factory.create_bonus_objective(objective_type, 0.5)
    after = factory.create_bonus_objective(objective_type, 0.625)
    assert after.reward < before.reward
    assert after.difficulty > before.difficulty

    later = [factory.create_bonus_objective(objective_type, d).reward for d in (0.625, 0.75, 1.0, 2.0, 3.0)]
    assert later == sorted(later)


def test_skill_raises_reward(factory):
    novice = factory.create_objective("exploration", 1.0, skill_rating=0.0)
    expert = factory.create_objective("exploration", 1.0, skill_rating=1.0)
    assert expert.reward > novice.reward


def test_reward_scaling_option(catalog):
    plain = ObjectiveFactory(catalog).create_objective("escort", 1.0)
    doubled = ObjectiveFactory(catalog, reward_scaling=2.0).create_objective("escort", 1.0)
    assert doubled.reward >= 2 * plain.reward - 1


def test_reward_is_at_least_one(catalog):
    objective = ObjectiveFactory(catalog, reward_scaling=0.0001).create_objective("collection", 0.5)
    assert objective.reward == 1


def test_custom_type_uses_generic_parameters():
    salvage = ObjectiveTemplate(
        type_id="salvage",
        name="Salvage Run",
        description="Recover supplies",
        difficulty=0.5,
        base_reward=90,
        variants=(
            Variant(
                id="dock_salvage",
                name="Dockside Salvage",
                description="Salvage {count} crates at the {zone}",
                parameters={"count": (2, 4), "zone": "docks"},
            ),
        ),
    )
    factory = ObjectiveFactory(ObjectiveCatalog((salvage,)))
    objective = factory.create_objective("salvage", 1.0)

    assert isinstance(objective.parameters, GenericParameters)
    assert objective.parameters.as_dict() == {"count": 4, "zone": "docks"}
    assert objective.max_progress == 4
    assert objective.description == "Salvage 4 crates at the docks"
    # default 180 s budget * 1.2
    assert objective.time_limit in (215, 216)


def test_ids_are_unique(factory):
    ids = {factory.create_objective("survival", 1.0).id for _ in range(50)}
    assert len(ids) == 50


def test_format_description_leaves_unknown_placeholders():
    assert format_description("Kill {count} {kind}", {"count": 3}) == "Kill 3 {kind}"
