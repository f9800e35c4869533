"""End-to-end tests for LevelAssembler."""

import logging

import pytest

from levelsmith import (
    GeneratorOptions,
    InvalidConfigurationError,
    LevelAssembler,
    ObjectiveCatalog,
    ObjectiveCategory,
    RewardBalance,
)
from levelsmith.procedural.engine import OBJECTIVE_COMPLETED, OBJECTIVE_PROGRESS
from levelsmith.procedural.randomizer import Randomizer
from levelsmith.procedural.validation import LevelValidator


def make_assembler(seed=1234, oracle=None, catalog=None, **option_overrides):
    options = GeneratorOptions(seed=seed, **option_overrides)
    return LevelAssembler(options=options, catalog=catalog, oracle=oracle)


@pytest.mark.parametrize("d, expected", [
    (0.0, 2),
    (0.5, 3),
    (1.0, 4),
    (1.5, 5),
    (3.0, 5),
])
def test_primary_objective_count(d, expected):
    assert make_assembler().primary_objective_count(d) == expected


def test_primary_count_respects_max_objectives():
    assembler = make_assembler(max_objectives=3)
    assert assembler.primary_objective_count(3.0) == 3
    assert assembler.primary_objective_count(0.0) == 2


@pytest.mark.parametrize("d", [0.5, 1.0, 1.7, 2.4, 3.0])
@pytest.mark.parametrize("seed", range(8))
def test_generated_levels_hold_invariants(seed, d, veteran_profile, terrain_data):
    assembler = make_assembler(seed=seed)
    level = assembler.generate_level(veteran_profile, terrain_data, d)

    assert len(level.objectives.primary) == assembler.primary_objective_count(d)
    assert level.objectives.total == len(level.objectives.primary) + len(level.objectives.bonus)
    assert all(o.category == ObjectiveCategory.PRIMARY for o in level.objectives.primary)
    assert all(o.category == ObjectiveCategory.BONUS and o.optional for o in level.objectives.bonus)
    assert all(o.reward > 0 and o.max_progress >= 1 for o in level.all_objectives())

    summary = level.checkpoint_summary()
    assert summary["start"] == 1
    assert summary["end"] == 1
    assert level.checkpoints[0].purpose == "start"
    assert level.checkpoints[-1].purpose == "end"

    rewards = level.rewards
    assert rewards.total == rewards.primary.total + rewards.bonus.total + rewards.secret.total
    if rewards.total > 0:
        total_pct = rewards.primary.percentage + rewards.bonus.percentage + rewards.secret.percentage
        assert total_pct == pytest.approx(100.0, abs=0.01)

    assert level.difficulty == d
    assert level.player_level == 5
    assert level.estimated_duration >= 120
    assert LevelValidator().validate(level).valid


def test_same_seed_reproduces_level(veteran_profile, terrain_data):
    def signature(level):
        return (
            [(o.type, o.parameters, o.reward, o.time_limit) for o in level.all_objectives()],
            [(s.type, s.reward, s.location.x, s.location.z) for s in level.secret_areas],
            [(c.purpose, c.type, c.location.x, c.location.z) for c in level.checkpoints],
            level.rewards.balance,
            level.estimated_duration,
        )

    first = make_assembler(seed=99).generate_level(veteran_profile, terrain_data, 1.8)
    second = make_assembler(seed=99).generate_level(veteran_profile, terrain_data, 1.8)
    assert signature(first) == signature(second)
    assert first.id != second.id


def test_injected_provider_wins_over_seed(veteran_profile, terrain_data):
    options = GeneratorOptions(seed=1)
    first = LevelAssembler(options=options, rng=Randomizer(5)).generate_level(veteran_profile, terrain_data)
    second = LevelAssembler(options=options, rng=Randomizer(5)).generate_level(veteran_profile, terrain_data)
    assert [o.type for o in first.all_objectives()] == [o.type for o in second.all_objectives()]


def test_certain_bonus_and_secret_rolls(veteran_profile, terrain_data, fixed_oracle):
    assembler = make_assembler(oracle=fixed_oracle, bonus_objective_chance=1.0, secret_area_chance=1.0)
    level = assembler.generate_level(veteran_profile, terrain_data, 1.0)

    assert 1 <= len(level.objectives.bonus) <= 2
    assert 1 <= len(level.secret_areas) <= 3
    assert all(s.location is fixed_oracle.location for s in level.secret_areas)


def test_zero_chances_give_primary_heavy_level(veteran_profile, terrain_data):
    assembler = make_assembler(bonus_objective_chance=0.0, secret_area_chance=0.0)
    level = assembler.generate_level(veteran_profile, terrain_data, 1.0)

    assert level.objectives.bonus == []
    assert level.secret_areas == []
    assert level.rewards.balance == RewardBalance.PRIMARY_HEAVY
    assert level.rewards.primary.percentage == pytest.approx(100.0)


def test_declining_oracle_still_produces_level(veteran_profile, terrain_data, null_oracle):
    assembler = make_assembler(oracle=null_oracle, secret_area_chance=1.0)
    level = assembler.generate_level(veteran_profile, terrain_data, 2.0)

    assert level.secret_areas == []
    assert [c.purpose for c in level.checkpoints] == ["start", "end"]


def test_level_stats(veteran_profile, terrain_data):
    assembler = make_assembler()
    first = assembler.generate_level(veteran_profile, terrain_data, 1.0)
    second = assembler.generate_level(veteran_profile, terrain_data, 2.0)

    stats = assembler.get_level_stats()
    assert stats.levels_generated == 2
    assert stats.average_difficulty == pytest.approx(1.5)
    assert stats.objectives_generated == first.objectives.total + second.objectives.total
    assert stats.bonus_objectives_created == len(first.objectives.bonus) + len(second.objectives.bonus)
    assert stats.secret_areas_created == len(first.secret_areas) + len(second.secret_areas)

    stats.levels_generated = 100
    assert assembler.get_level_stats().levels_generated == 2


def test_metadata_carries_adaptations(veteran_profile, terrain_data):
    level = make_assembler().generate_level(veteran_profile, terrain_data, 2.0)

    assert level.metadata.player_skill_rating == pytest.approx(0.89)
    assert level.metadata.preferred_play_style.value == "aggressive"
    assert "increased_zombie_aggression" in level.metadata.adaptations
    assert "elite_zombie_spawns" not in level.metadata.adaptations


def test_low_skill_adaptations():
    assembler = make_assembler()
    assembler.analyzer.profile.skill_rating = 0.2
    assert "additional_health_pickups" in assembler.get_adaptations(1.0)


def test_profile_accessor_returns_copy(terrain_data):
    assembler = make_assembler()
    assembler.generate_level({"level": 3, "zombiesKilled": 40}, terrain_data)

    progress = assembler.get_player_progress()
    assert progress.level == 3
    assert progress.zombies_killed == 40
    progress.level = 50
    assert assembler.get_player_progress().level == 3


def test_objective_templates_accessor():
    assert make_assembler().get_objective_templates() == [
        "survival", "elimination", "collection", "escort", "exploration"
    ]


def test_callbacks_receive_progress_and_completion():
    assembler = make_assembler()
    progress_events, completed_events = [], []
    assembler.register_callback(OBJECTIVE_PROGRESS, lambda oid, p: progress_events.append((oid, p)))
    assembler.register_callback(OBJECTIVE_COMPLETED, lambda oid, data: completed_events.append((oid, data)))

    assembler.update_objective_progress("obj_1", 0.5)
    package = assembler.complete_objective("obj_1", {"time": 42})

    assert progress_events == [("obj_1", 0.5)]
    assert completed_events == [("obj_1", {"time": 42})]
    assert package is None


def test_unknown_callback_event_rejected():
    with pytest.raises(ValueError):
        make_assembler().register_callback("level_started", lambda *args: None)


def test_completion_with_reward_returns_package():
    package = make_assembler().complete_objective("obj_2", {"reward": 100, "bonuses": ["perfect_completion"]})
    # 100 * 1.5 = 150 earned
    assert package.currency == 90
    assert package.experience == 45
    assert package.items == []


@pytest.mark.parametrize("overrides", [
    {"max_objectives": 1},
    {"secret_area_chance": 1.5},
    {"bonus_objective_chance": -0.1},
    {"reward_scaling": 0},
])
def test_invalid_options_rejected(overrides):
    with pytest.raises(InvalidConfigurationError):
        LevelAssembler(options=GeneratorOptions(**overrides))


def test_reduced_catalog(catalog, veteran_profile, terrain_data):
    assembler = make_assembler(catalog=catalog.restricted_to(["collection"]), bonus_objective_chance=1.0)
    level = assembler.generate_level(veteran_profile, terrain_data, 1.0)

    assert len(level.objectives.primary) == 4
    assert {o.type for o in level.all_objectives()} == {"collection"}


def test_empty_catalog_logs_warning(veteran_profile, terrain_data, caplog):
    assembler = make_assembler(catalog=ObjectiveCatalog(()), bonus_objective_chance=1.0, secret_area_chance=0.0)
    with caplog.at_level(logging.WARNING, logger="levelsmith"):
        level = assembler.generate_level(veteran_profile, terrain_data, 1.0)

    assert level.objectives.total == 0
    assert [c.purpose for c in level.checkpoints] == ["start", "end"]
    assert level.rewards.balance == RewardBalance.BALANCED
    assert "No objective types available" in caplog.text


def test_unknown_play_style_does_not_stop_generation(terrain_data):
    level = make_assembler(seed=1).generate_level({"level": 2, "preferredPlayStyle": "stealth"}, terrain_data, 1.0)

    assert level.player_level == 2
    assert level.objectives.primary
