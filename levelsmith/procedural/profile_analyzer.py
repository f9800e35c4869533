"""
Player profile analysis: skill rating and play-style inference from the
noisy counters the save subsystem keeps.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..classes.profile import PlayerProgressProfile, PlayStyle
from ..misc.logger import create_logger
from ..misc.math_utils import clamp

# Tied buckets resolve to whichever comes first here
PLAY_STYLE_TIE_BREAK: Tuple[PlayStyle, ...] = (
    PlayStyle.BALANCED,
    PlayStyle.SPEEDRUN,
    PlayStyle.EXPLORER,
    PlayStyle.DEFENSIVE,
    PlayStyle.AGGRESSIVE,
)

OBJECTIVES_PER_LEVEL = 3


def calculate_skill_rating(profile: PlayerProgressProfile) -> float:
    """
    Derive a [0, 1] skill rating from completion rate, kill efficiency and
    exploration.

    Args:
        profile: Progress counters to rate

    Returns:
        Skill rating clamped to [0, 1]
    """
    skill = 0.5
    level = max(1, profile.level)

    if profile.objectives_completed > 0:
        completion_rate = profile.objectives_completed / (level * OBJECTIVES_PER_LEVEL)
        skill += (completion_rate - 0.5) * 0.3

    if profile.distance_traveled > 0:
        # kills per kilometer
        efficiency = profile.zombies_killed / (profile.distance_traveled / 1000)
        skill += min(0.2, efficiency / 10)

    if profile.secrets_found > 0:
        skill += min(0.1, profile.secrets_found / 20)

    return float(clamp(skill, 0.0, 1.0))


def score_play_styles(profile: PlayerProgressProfile) -> Dict[PlayStyle, int]:
    scores = {style: 0 for style in PlayStyle}

    if profile.zombies_killed > profile.distance_traveled / 100:
        scores[PlayStyle.AGGRESSIVE] += 2

    if profile.average_completion_time > 300:
        scores[PlayStyle.DEFENSIVE] += 1
        scores[PlayStyle.EXPLORER] += 1
    elif profile.average_completion_time < 180:
        scores[PlayStyle.SPEEDRUN] += 2

    if profile.secrets_found > profile.level:
        scores[PlayStyle.EXPLORER] += 2

    scores[PlayStyle.BALANCED] = 1
    return scores


def analyze_play_style(profile: PlayerProgressProfile) -> PlayStyle:
    """Return the highest-scoring play style, ties broken by PLAY_STYLE_TIE_BREAK."""
    scores = score_play_styles(profile)
    best = PLAY_STYLE_TIE_BREAK[0]
    for style in PLAY_STYLE_TIE_BREAK[1:]:
        if scores[style] > scores[best]:
            best = style
    return best


def select_adaptations(skill_rating: float, play_style: PlayStyle, difficulty_level: float) -> List[str]:
    """Adaptation tags for a level. Tags are additive."""
    adaptations: List[str] = []

    if skill_rating > 0.7:
        adaptations.append("increased_zombie_aggression")
        adaptations.append("reduced_resource_spawns")

    if skill_rating < 0.3:
        adaptations.append("additional_health_pickups")
        adaptations.append("extended_time_limits")

    if play_style == PlayStyle.EXPLORER:
        adaptations.append("additional_secret_areas")
        adaptations.append("exploration_bonuses")

    if difficulty_level > 2.0:
        adaptations.append("elite_zombie_spawns")
        adaptations.append("environmental_hazards")

    return adaptations


class PlayerProfileAnalyzer:
    """Holds the generator's copy of the player profile and keeps its derived fields fresh."""

    def __init__(self, profile: Optional[PlayerProgressProfile] = None, verbose: bool = False):
        self.profile = profile.copy() if profile else PlayerProgressProfile()
        self.logger = create_logger(verbose=verbose, name="ProfileAnalyzer")

    def update_profile(self, progress: Union[PlayerProgressProfile, Mapping[str, Any]]) -> None:
        """
        Merge ``progress`` into the held profile, then recompute skill rating
        and preferred play style from the merged counters.
        """
        for name in self.profile.merge(progress):
            self.logger.debug(f"Ignoring invalid value for '{name}' in progress update")
        self.profile.skill_rating = calculate_skill_rating(self.profile)
        self.profile.preferred_play_style = analyze_play_style(self.profile)
        self.logger.debug(
            f"Profile level {self.profile.level}: skill={self.profile.skill_rating:.3f}, "
            f"style={self.profile.preferred_play_style.value}"
        )

    def adaptations(self, difficulty_level: float) -> List[str]:
        return select_adaptations(self.profile.skill_rating, self.profile.preferred_play_style, difficulty_level)

    def snapshot(self) -> PlayerProgressProfile:
        return self.profile.copy()
