"""
Reward balancing for generated levels.

RewardDistributionCalculator summarizes where a level's reward value comes
from; RewardSystem turns earned rewards into payout packages when the
run-time reports a completed objective.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Protocol, Sequence

from ..classes.level_objects import RewardBalance, RewardBucket, RewardDistribution
from .randomizer import RandomProvider

PRIMARY_HEAVY_RATIO = 0.7
BONUS_HEAVY_RATIO = 0.4
EXPLORATION_HEAVY_RATIO = 0.3


class Rewarded(Protocol):
    reward: int


def _percentage(part: int, total: int) -> float:
    return (part / total) * 100 if total > 0 else 0.0


def calculate_reward_balance(primary: float, bonus: float, secret: float) -> RewardBalance:
    """
    Classify a reward split.

    Checked in order: primary share above 70%, bonus share above 40%, secret
    share above 30%; anything else (including an all-zero split) is balanced.
    """
    total = primary + bonus + secret
    if total <= 0:
        return RewardBalance.BALANCED

    if primary / total > PRIMARY_HEAVY_RATIO:
        return RewardBalance.PRIMARY_HEAVY
    if bonus / total > BONUS_HEAVY_RATIO:
        return RewardBalance.BONUS_HEAVY
    if secret / total > EXPLORATION_HEAVY_RATIO:
        return RewardBalance.EXPLORATION_HEAVY
    return RewardBalance.BALANCED


class RewardDistributionCalculator:
    """Pure aggregation over the three reward-bearing lists of a level."""

    def calculate(
        self,
        primary: Sequence[Rewarded],
        bonus: Sequence[Rewarded],
        secrets: Sequence[Rewarded],
    ) -> RewardDistribution:
        primary_total = sum(item.reward for item in primary)
        bonus_total = sum(item.reward for item in bonus)
        secret_total = sum(item.reward for item in secrets)
        total = primary_total + bonus_total + secret_total

        return RewardDistribution(
            primary=RewardBucket(primary_total, _percentage(primary_total, total), len(primary)),
            bonus=RewardBucket(bonus_total, _percentage(bonus_total, total), len(bonus)),
            secret=RewardBucket(secret_total, _percentage(secret_total, total), len(secrets)),
            total=total,
            balance=calculate_reward_balance(primary_total, bonus_total, secret_total),
        )


@dataclass(frozen=True)
class RewardItem:
    name: str
    rarity: str
    value: int


@dataclass(frozen=True)
class RewardUpgrade:
    name: str
    category: str
    value: float


@dataclass
class RewardPackage:
    currency: int
    experience: int
    items: List[RewardItem] = field(default_factory=list)
    upgrades: List[RewardUpgrade] = field(default_factory=list)


BONUS_MULTIPLIERS: Dict[str, float] = {
    "perfect_completion": 1.5,
    "speed_bonus": 1.3,
    "no_damage": 1.4,
    "exploration_bonus": 1.2,
    "combo_bonus": 1.1,
}

REWARD_ITEMS = (
    RewardItem("Health Kit", "common", 50),
    RewardItem("Fuel Canister", "common", 30),
    RewardItem("Armor Plating", "uncommon", 100),
    RewardItem("Weapon Upgrade", "rare", 200),
)

REWARD_UPGRADES = (
    RewardUpgrade("Engine Boost", "engine", 0.1),
    RewardUpgrade("Armor Enhancement", "defense", 0.15),
    RewardUpgrade("Weapon Efficiency", "combat", 0.12),
)

ITEM_THRESHOLD = 200
UPGRADE_THRESHOLD = 500


class RewardSystem:
    """Scales earned rewards and splits them into currency, experience and loot."""

    def __init__(self, rng: RandomProvider, bonus_multipliers: Optional[Dict[str, float]] = None):
        self.rng = rng
        self.bonus_multipliers = dict(BONUS_MULTIPLIERS if bonus_multipliers is None else bonus_multipliers)

    def calculate_reward(self, base_reward: float, difficulty: float, bonuses: Iterable[str] = ()) -> int:
        """``base * 1.2^(difficulty-1)`` times every known bonus multiplier, floored."""
        total = base_reward * math.pow(1.2, difficulty - 1)
        for bonus in bonuses:
            multiplier = self.bonus_multipliers.get(bonus)
            if multiplier:
                total *= multiplier
        return math.floor(total)

    def generate_reward_package(self, total_reward: int, player_level: int = 1) -> RewardPackage:
        # TODO: weight item rarity by player_level once loot tables are tiered
        package = RewardPackage(
            currency=math.floor(total_reward * 0.6),
            experience=math.floor(total_reward * 0.3),
        )
        if total_reward > ITEM_THRESHOLD:
            package.items.append(self.rng.choice(REWARD_ITEMS))
        if total_reward > UPGRADE_THRESHOLD:
            package.upgrades.append(self.rng.choice(REWARD_UPGRADES))
        return package
