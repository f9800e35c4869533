"""Tests for difficulty-gated secret area generation."""

import pytest

from levelsmith import SecretAreaType
from levelsmith.procedural.secret_areas import SecretAreaGenerator
from levelsmith.resources.site_types import SECRET_HINTS


def test_only_cache_is_eligible_at_low_difficulty(rng, fixed_oracle, terrain_data):
    generator = SecretAreaGenerator(fixed_oracle, rng)
    assert [s.type for s in generator.eligible_types(0.1)] == [SecretAreaType.CACHE]

    secret = generator.generate(terrain_data, 0.1)
    assert secret.type == SecretAreaType.CACHE
    assert secret.reward == 15
    assert secret.contents.currency == 10
    assert secret.contents.lore is None
    assert [item.name for item in secret.contents.items] == ["Rare Parts", "Fuel"]


def test_nothing_eligible_below_easiest_type(rng, fixed_oracle, terrain_data):
    generator = SecretAreaGenerator(fixed_oracle, rng)
    assert generator.generate(terrain_data, 0.05) is None
    assert fixed_oracle.requests == []


def test_declined_placement_yields_no_secret(rng, null_oracle, terrain_data):
    generator = SecretAreaGenerator(null_oracle, rng)
    assert generator.generate(terrain_data, 2.0) is None


def test_roll_picks_type_and_hint(scripted, fixed_oracle, terrain_data):
    generator = SecretAreaGenerator(fixed_oracle, scripted([0.6]))
    secret = generator.generate(terrain_data, 1.0)

    assert secret.type == SecretAreaType.BUNKER
    assert secret.name == "Underground Bunker"
    assert secret.reward == 300
    assert secret.difficulty == pytest.approx(0.7)
    assert secret.hints == [SECRET_HINTS[2]]
    assert secret.requirements[0].type == "combat"
    assert secret.requirements[0].hint
    assert secret.contents.lore
    assert not secret.discovered
    assert not secret.accessed


def test_location_comes_from_oracle(rng, fixed_oracle, terrain_data):
    secret = SecretAreaGenerator(fixed_oracle, rng).generate(terrain_data, 1.5)

    assert secret.location is fixed_oracle.location
    terrain, near, _ = fixed_oracle.requests[0]
    assert terrain is terrain_data
    assert near is None


@pytest.mark.parametrize("d", [0.3, 0.5, 1.0, 2.0, 3.0])
def test_eligible_types_respect_margin(rng, fixed_oracle, d):
    for spec in SecretAreaGenerator(fixed_oracle, rng).eligible_types(d):
        assert spec.difficulty <= d + 0.2
