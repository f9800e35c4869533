from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Union


class PlayStyle(Enum):
    """Behavioral category inferred from player telemetry."""
    AGGRESSIVE = "aggressive"
    DEFENSIVE = "defensive"
    EXPLORER = "explorer"
    SPEEDRUN = "speedrun"
    BALANCED = "balanced"


# Save-system payloads use camelCase keys
_CAMEL_CASE_ALIASES: Dict[str, str] = {
    "totalScore": "total_score",
    "zombiesKilled": "zombies_killed",
    "distanceTraveled": "distance_traveled",
    "objectivesCompleted": "objectives_completed",
    "secretsFound": "secrets_found",
    "averageCompletionTime": "average_completion_time",
    "skillRating": "skill_rating",
    "preferredPlayStyle": "preferred_play_style",
}


@dataclass
class PlayerProgressProfile:
    """Accumulated progress of one player, as supplied by the save subsystem."""
    level: int = 1
    total_score: int = 0
    zombies_killed: int = 0
    distance_traveled: float = 0.0
    objectives_completed: int = 0
    secrets_found: int = 0
    average_completion_time: float = 0.0  # seconds
    skill_rating: float = 0.5             # 0..1
    preferred_play_style: PlayStyle = PlayStyle.BALANCED

    def merge(self, progress: Union["PlayerProgressProfile", Mapping[str, Any]]) -> List[str]:
        """
        Overwrite fields present in ``progress``; unknown keys are ignored.

        Returns:
            Names of fields whose values were rejected and left unchanged.
        """
        if isinstance(progress, PlayerProgressProfile):
            updates = {f.name: getattr(progress, f.name) for f in fields(progress)}
        else:
            updates = {_CAMEL_CASE_ALIASES.get(key, key): value for key, value in progress.items()}

        known = {f.name for f in fields(self)}
        rejected: List[str] = []
        for name, value in updates.items():
            if name not in known or value is None:
                continue
            if name == "preferred_play_style" and not isinstance(value, PlayStyle):
                try:
                    value = PlayStyle(value)
                except ValueError:
                    rejected.append(name)
                    continue
            setattr(self, name, value)
        return rejected

    def copy(self) -> "PlayerProgressProfile":
        return replace(self)
