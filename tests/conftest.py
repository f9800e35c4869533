from typing import Iterable, List, Optional

import pytest

from levelsmith import Location, PlayerProgressProfile
from levelsmith.procedural.randomizer import RandomProvider, Randomizer
from levelsmith.resources.objective_catalog import default_catalog
from levelsmith.terrain.placement import PlacementOracle


class ScriptedRandom(RandomProvider):
    """Replays a fixed list of rolls, cycling when it runs out."""

    def __init__(self, values: Iterable[float]):
        self.values: List[float] = list(values)
        self.calls = 0

    def next(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


class FixedOracle(PlacementOracle):
    """Always answers with the same location and remembers what it was asked."""

    def __init__(self, location: Optional[Location] = None):
        self.location = location or Location(42.0, 0.0, -17.0, biome="forest")
        self.requests = []

    def find_placement(self, terrain_data, near=None, radius=0.0):
        self.requests.append((terrain_data, near, radius))
        return self.location


class NullOracle(PlacementOracle):
    """Never finds a placement."""

    def find_placement(self, terrain_data, near=None, radius=0.0):
        return None


@pytest.fixture
def rng():
    return Randomizer(seed=1234)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def fixed_oracle():
    return FixedOracle()


@pytest.fixture
def null_oracle():
    return NullOracle()


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def terrain_data():
    return {
        "bounds": {"minX": -500, "maxX": 500, "minZ": -500, "maxZ": 500},
        "features": [{"type": "building", "position": {"x": 100, "y": 0, "z": 100}}],
    }


@pytest.fixture
def veteran_profile():
    """A mid-game player with solid kill efficiency."""
    return PlayerProgressProfile(
        level=5,
        total_score=2500,
        zombies_killed=150,
        distance_traveled=5000,
        objectives_completed=12,
        secrets_found=3,
        average_completion_time=240,
    )
