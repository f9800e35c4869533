"""
Objective template catalog.

Templates are frozen and the catalog is a plain value object: build one with
``default_catalog()`` or assemble a reduced one for tests and mods, then hand
it to the factory and the assembler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

ParameterValue = Union[int, float, str]
# Candidate tuples are ordered least to most difficult
ParameterSpec = Union[Tuple[ParameterValue, ...], ParameterValue]

# Time budget used when a variant does not declare one
DEFAULT_TIME_LIMIT = 180


@dataclass(frozen=True)
class Variant:
    """A difficulty-tiered flavor of an objective template."""
    id: str
    name: str
    description: str
    parameters: Mapping[str, ParameterSpec]
    scaling_factor: float = 1.0
    base_time_limit: int = DEFAULT_TIME_LIMIT  # seconds; 0 = untimed
    hints: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ObjectiveTemplate:
    type_id: str
    name: str
    description: str
    difficulty: float  # 0..1
    base_reward: int
    variants: Tuple[Variant, ...] = ()


@dataclass(frozen=True)
class ObjectiveCatalog:
    """Ordered, read-only registry of objective templates."""
    templates: Tuple[ObjectiveTemplate, ...] = field(default_factory=tuple)

    def __post_init__(self):
        seen = set()
        for template in self.templates:
            if template.type_id in seen:
                raise ValueError(f"Duplicate objective template '{template.type_id}'")
            seen.add(template.type_id)

    @classmethod
    def from_templates(cls, templates: Iterable[ObjectiveTemplate]) -> "ObjectiveCatalog":
        return cls(templates=tuple(templates))

    def get(self, type_id: str) -> Optional[ObjectiveTemplate]:
        for template in self.templates:
            if template.type_id == type_id:
                return template
        return None

    def type_ids(self) -> List[str]:
        return [t.type_id for t in self.templates]

    def restricted_to(self, type_ids: Iterable[str]) -> "ObjectiveCatalog":
        """Return a catalog holding only the named types, in catalog order."""
        wanted = set(type_ids)
        return ObjectiveCatalog(tuple(t for t in self.templates if t.type_id in wanted))

    def __contains__(self, type_id: str) -> bool:
        return self.get(type_id) is not None

    def __len__(self) -> int:
        return len(self.templates)


SURVIVAL = ObjectiveTemplate(
    type_id="survival",
    name="Survival Challenge",
    description="Survive for a specified duration",
    difficulty=0.6,
    base_reward=100,
    variants=(
        Variant(
            id="survive_time",
            name="Survive the Onslaught",
            description="Survive for {duration} seconds",
            parameters={"duration": (30, 60, 90, 120)},
            scaling_factor=1.5,
            base_time_limit=0,  # the duration is the clock
            hints=(
                "Find a defensible position with good visibility",
                "Conserve ammunition and use the environment to your advantage",
            ),
        ),
        Variant(
            id="survive_waves",
            name="Withstand the Waves",
            description="Survive {waves} waves of zombies",
            parameters={"waves": (3, 5, 7, 10)},
            scaling_factor=1.3,
            base_time_limit=300,
            hints=("Repair between waves while the horde regroups",),
        ),
    ),
)

ELIMINATION = ObjectiveTemplate(
    type_id="elimination",
    name="Elimination Mission",
    description="Eliminate specified targets",
    difficulty=0.7,
    base_reward=150,
    variants=(
        Variant(
            id="kill_count",
            name="Zombie Extermination",
            description="Kill {count} zombies",
            parameters={"count": (10, 25, 50, 100)},
            scaling_factor=1.2,
            base_time_limit=180,
            hints=(
                "Look for zombie spawn points to maximize efficiency",
                "Use vehicle ramming for quick eliminations",
            ),
        ),
        Variant(
            id="kill_type",
            name="Specialized Hunt",
            description="Kill {count} {zombie_type} zombies",
            parameters={
                "count": (5, 10, 15, 20),
                "zombie_type": ("fast", "heavy", "special", "boss"),
            },
            scaling_factor=1.8,
            base_time_limit=240,
            hints=("Tougher zombies show up on the level map as larger markers",),
        ),
    ),
)

COLLECTION = ObjectiveTemplate(
    type_id="collection",
    name="Collection Mission",
    description="Collect specified items",
    difficulty=0.4,
    base_reward=80,
    variants=(
        Variant(
            id="collect_fuel",
            name="Fuel Run",
            description="Collect {amount} fuel canisters",
            parameters={"amount": (3, 5, 8, 12)},
            scaling_factor=1.1,
            base_time_limit=120,
            hints=(
                "Check abandoned vehicles and gas stations",
                "Fuel canisters often spawn near industrial areas",
            ),
        ),
        Variant(
            id="collect_parts",
            name="Scavenger Hunt",
            description="Collect {amount} vehicle parts",
            parameters={"amount": (2, 4, 6, 10)},
            scaling_factor=1.4,
            base_time_limit=180,
            hints=("Wrecked trucks carry more parts than cars",),
        ),
    ),
)

ESCORT = ObjectiveTemplate(
    type_id="escort",
    name="Escort Mission",
    description="Protect and escort targets",
    difficulty=0.8,
    base_reward=200,
    variants=(
        Variant(
            id="escort_survivor",
            name="Survivor Rescue",
            description="Escort {count} survivors to safety",
            parameters={"count": (1, 2, 3, 5)},
            scaling_factor=1.6,
            base_time_limit=300,
            hints=(
                "Clear the path ahead before moving survivors",
                "Stay close to provide protection",
            ),
        ),
        Variant(
            id="escort_convoy",
            name="Convoy Protection",
            description="Protect convoy for {distance}m",
            parameters={"distance": (500, 1000, 1500, 2000)},
            scaling_factor=1.4,
            base_time_limit=240,
            hints=("Drive ahead of the convoy to draw zombies off the road",),
        ),
    ),
)

EXPLORATION = ObjectiveTemplate(
    type_id="exploration",
    name="Exploration Mission",
    description="Explore and discover locations",
    difficulty=0.5,
    base_reward=120,
    variants=(
        Variant(
            id="explore_area",
            name="Area Reconnaissance",
            description="Explore {percentage}% of the area",
            parameters={"percentage": (60, 75, 85, 95)},
            scaling_factor=1.2,
            base_time_limit=360,
            hints=(
                "Use high ground to survey the area",
                "Check building interiors and hidden passages",
            ),
        ),
        Variant(
            id="find_locations",
            name="Location Discovery",
            description="Discover {count} hidden locations",
            parameters={"count": (2, 3, 5, 7)},
            scaling_factor=1.5,
            base_time_limit=300,
            hints=("Hidden locations are rarely on main roads",),
        ),
    ),
)

DEFAULT_TEMPLATES: Tuple[ObjectiveTemplate, ...] = (SURVIVAL, ELIMINATION, COLLECTION, ESCORT, EXPLORATION)


def default_catalog() -> ObjectiveCatalog:
    """Return the stock five-type catalog."""
    return ObjectiveCatalog(DEFAULT_TEMPLATES)


def catalog_summary(catalog: ObjectiveCatalog) -> Dict[str, int]:
    """Map each type id to its variant count."""
    return {t.type_id: len(t.variants) for t in catalog.templates}
