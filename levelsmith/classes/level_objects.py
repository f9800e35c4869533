from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from .objectives import Objective, Requirement
    from .profile import PlayStyle


@dataclass
class Location:
    """A point handed back by the placement oracle. Opaque beyond x/y/z."""
    x: float
    y: float
    z: float
    biome: Optional[str] = None
    accessibility: Optional[float] = None  # 0..1, oracle-defined

    @classmethod
    def origin(cls) -> "Location":
        return cls(0.0, 0.0, 0.0)


class SecretAreaType(Enum):
    CACHE = "cache"
    HIDEOUT = "hideout"
    BUNKER = "bunker"
    GARDEN = "garden"


class CheckpointType(Enum):
    SAFE_ZONE = "safe_zone"
    OUTPOST = "outpost"
    WAYPOINT = "waypoint"


class RewardBalance(Enum):
    PRIMARY_HEAVY = "primary_heavy"
    BONUS_HEAVY = "bonus_heavy"
    EXPLORATION_HEAVY = "exploration_heavy"
    BALANCED = "balanced"


@dataclass
class SecretItem:
    name: str
    quantity: int


@dataclass
class SecretContents:
    currency: int
    items: List[SecretItem] = field(default_factory=list)
    lore: Optional[str] = None


@dataclass
class SecretArea:
    """Optional, difficulty-gated bonus location."""
    id: str
    name: str
    type: SecretAreaType
    description: str
    location: Location
    difficulty: float
    reward: int
    contents: SecretContents
    requirements: List["Requirement"] = field(default_factory=list)
    hints: List[str] = field(default_factory=list)
    discovered: bool = False
    accessed: bool = False
    created: float = 0.0


@dataclass
class Checkpoint:
    """Save/service point along the level."""
    id: str
    type: CheckpointType
    name: str
    location: Location
    radius: float
    protection: bool
    services: List[str]
    purpose: str  # start | objective_<index> | end
    activated: bool = False
    discovered: bool = False
    last_used: Optional[float] = None
    save_data: Optional[Any] = None
    created: float = 0.0


@dataclass
class RewardBucket:
    total: int = 0
    percentage: float = 0.0
    count: int = 0


@dataclass
class RewardDistribution:
    """How reward value is split across primary, bonus and secret sources."""
    primary: RewardBucket
    bonus: RewardBucket
    secret: RewardBucket
    total: int
    balance: RewardBalance


@dataclass
class LevelObjectives:
    primary: List["Objective"] = field(default_factory=list)
    bonus: List["Objective"] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.primary) + len(self.bonus)


@dataclass
class LevelMetadata:
    generated_at: float
    player_skill_rating: float
    preferred_play_style: "PlayStyle"
    adaptations: List[str] = field(default_factory=list)


@dataclass
class LevelDefinition:
    """Complete output of one generation call."""
    id: str
    difficulty: float
    player_level: int
    objectives: LevelObjectives
    secret_areas: List[SecretArea]
    checkpoints: List[Checkpoint]
    rewards: RewardDistribution
    estimated_duration: int  # seconds
    metadata: LevelMetadata

    def all_objectives(self) -> List["Objective"]:
        return [*self.objectives.primary, *self.objectives.bonus]

    def checkpoint_summary(self) -> Dict[str, int]:
        """Count checkpoints per purpose."""
        summary: Dict[str, int] = {}
        for checkpoint in self.checkpoints:
            summary[checkpoint.purpose] = summary.get(checkpoint.purpose, 0) + 1
        return summary
