"""Static tables for secret areas and checkpoints."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..classes.level_objects import CheckpointType, SecretAreaType


@dataclass(frozen=True)
class SecretAreaSpec:
    type: SecretAreaType
    name: str
    description: str
    difficulty: float
    reward: int
    requirement_type: str
    requirement_description: str
    requirement_hint: str
    items: Tuple[Tuple[str, int], ...] = ()
    lore: Optional[str] = None


SECRET_AREA_TYPES: Tuple[SecretAreaSpec, ...] = (
    SecretAreaSpec(
        type=SecretAreaType.CACHE,
        name="Hidden Cache",
        description="A hidden stash of supplies",
        difficulty=0.3,
        reward=150,
        requirement_type="exploration",
        requirement_description="Find the hidden entrance",
        requirement_hint="Look for unusual markings or debris",
        items=(("Rare Parts", 2), ("Fuel", 3)),
    ),
    SecretAreaSpec(
        type=SecretAreaType.HIDEOUT,
        name="Survivor Hideout",
        description="An abandoned survivor shelter",
        difficulty=0.5,
        reward=200,
        requirement_type="puzzle",
        requirement_description="Solve the access code",
        requirement_hint="Check nearby graffiti for clues",
        items=(("Survivor Notes", 1), ("Medical Supplies", 2)),
        lore="A journal entry revealing the fate of previous survivors",
    ),
    SecretAreaSpec(
        type=SecretAreaType.BUNKER,
        name="Underground Bunker",
        description="A fortified underground facility",
        difficulty=0.7,
        reward=300,
        requirement_type="combat",
        requirement_description="Clear the guardian zombies",
        requirement_hint="Elite zombies guard valuable locations",
        items=(("Military Equipment", 1), ("Weapon Mods", 2)),
        lore="Classified documents about the zombie outbreak",
    ),
    SecretAreaSpec(
        type=SecretAreaType.GARDEN,
        name="Rooftop Garden",
        description="A hidden rooftop sanctuary",
        difficulty=0.4,
        reward=180,
        requirement_type="platforming",
        requirement_description="Reach the elevated area",
        requirement_hint="Use vehicle momentum to reach high places",
        items=(("Seeds", 5), ("Pure Water", 3)),
        lore="A message of hope from the last gardener",
    ),
)

SECRET_HINTS: Tuple[str, ...] = (
    "Strange sounds echo from this direction",
    "The debris here looks deliberately placed",
    "Fresh tire tracks lead to a dead end",
    "This area feels different from the rest",
)


@dataclass(frozen=True)
class CheckpointSpec:
    name: str
    radius: float
    protection: bool
    services: Tuple[str, ...]


CHECKPOINT_TYPES: Dict[CheckpointType, CheckpointSpec] = {
    CheckpointType.SAFE_ZONE: CheckpointSpec("Safe Zone", 50, True, ("repair", "refuel", "save")),
    CheckpointType.OUTPOST: CheckpointSpec("Outpost", 30, False, ("save", "trade")),
    CheckpointType.WAYPOINT: CheckpointSpec("Waypoint", 20, False, ("save",)),
}
