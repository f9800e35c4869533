from __future__ import annotations

import math
import time
import uuid
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from ..classes.level_objects import (
    LevelDefinition,
    LevelMetadata,
    LevelObjectives,
    SecretArea,
)
from ..classes.objectives import Objective
from ..classes.profile import PlayerProgressProfile
from ..misc.logger import create_logger
from ..resources.objective_catalog import ObjectiveCatalog, default_catalog
from ..terrain.placement import PlacementOracle, ScatterPlacementOracle
from .checkpoint_planner import CheckpointPlanner
from .objective_factory import ObjectiveFactory, describe_parameters
from .options import GeneratorOptions
from .profile_analyzer import PlayerProfileAnalyzer
from .randomizer import RandomProvider, Randomizer
from .reward_system import RewardDistributionCalculator, RewardPackage, RewardSystem
from .secret_areas import SecretAreaGenerator
from .timing_model import TimingModel
from .type_selector import ObjectiveTypeSelector
from .validation import LevelValidator

OBJECTIVE_PROGRESS = "objective_progress"
OBJECTIVE_COMPLETED = "objective_completed"

# Weight of the newest level in the rolling difficulty average
DIFFICULTY_EMA_ALPHA = 0.5


@dataclass
class LevelStats:
    """Rolling statistics over every level this engine produced."""
    levels_generated: int = 0
    objectives_generated: int = 0
    secret_areas_created: int = 0
    bonus_objectives_created: int = 0
    average_difficulty: float = 0.0

    def record(self, level: LevelDefinition) -> None:
        self.objectives_generated += level.objectives.total
        self.secret_areas_created += len(level.secret_areas)
        self.bonus_objectives_created += len(level.objectives.bonus)
        if self.levels_generated == 0:
            self.average_difficulty = level.difficulty
        else:
            self.average_difficulty += DIFFICULTY_EMA_ALPHA * (level.difficulty - self.average_difficulty)
        self.levels_generated += 1

    def copy(self) -> "LevelStats":
        return replace(self)


class LevelAssembler:
    """
    Facade that wires the generator components together and turns a player
    profile, terrain data and a difficulty scalar into a LevelDefinition.

    Every collaborator can be injected. Anything left out is built from
    ``options``, sharing one random provider so a seed reproduces the level.
    """

    def __init__(
        self,
        options: Optional[GeneratorOptions] = None,
        catalog: Optional[ObjectiveCatalog] = None,
        rng: Optional[RandomProvider] = None,
        oracle: Optional[PlacementOracle] = None,
        analyzer: Optional[PlayerProfileAnalyzer] = None,
        selector: Optional[ObjectiveTypeSelector] = None,
        factory: Optional[ObjectiveFactory] = None,
        reward_calculator: Optional[RewardDistributionCalculator] = None,
        reward_system: Optional[RewardSystem] = None,
        secret_generator: Optional[SecretAreaGenerator] = None,
        checkpoint_planner: Optional[CheckpointPlanner] = None,
        timing: Optional[TimingModel] = None,
        validator: Optional[LevelValidator] = None,
        verbose: bool = False,
    ):
        self.options = (options or GeneratorOptions()).ensure_valid()
        self.verbose = verbose
        self.logger = create_logger(verbose=verbose, name="LevelAssembler")

        self.catalog = catalog if catalog is not None else default_catalog()
        self.rng = rng or Randomizer(self.options.seed)
        oracle = oracle or ScatterPlacementOracle(self.rng)

        self.analyzer = analyzer or PlayerProfileAnalyzer(verbose=verbose)
        self.selector = selector or ObjectiveTypeSelector(self.rng, verbose=verbose)
        self.factory = factory or ObjectiveFactory(self.catalog, self.options.reward_scaling, verbose=verbose)
        self.reward_calculator = reward_calculator or RewardDistributionCalculator()
        self.reward_system = reward_system or RewardSystem(self.rng)
        self.secret_generator = secret_generator or SecretAreaGenerator(oracle, self.rng, verbose=verbose)
        self.checkpoint_planner = checkpoint_planner or CheckpointPlanner(oracle, self.rng, verbose=verbose)
        self.timing = timing or TimingModel()
        self.validator = validator or LevelValidator()

        self.stats = LevelStats()
        self.callbacks: Dict[str, List[Callable[..., Any]]] = {
            OBJECTIVE_PROGRESS: [],
            OBJECTIVE_COMPLETED: [],
        }
        self.logger.info(f"Level assembler ready with {len(self.catalog)} objective types")

    def generate_level(
        self,
        player_progress: Union[PlayerProgressProfile, Mapping[str, Any]],
        terrain_data: Any,
        difficulty_level: float = 1.0,
    ) -> LevelDefinition:
        """
        Build a complete level for the given player.

        Args:
            player_progress: Full profile or a partial mapping of its fields
            terrain_data: Opaque terrain description, forwarded to the placement oracle
            difficulty_level: Difficulty scalar, typically 0.5..3.0

        Returns:
            LevelDefinition owning freshly created objectives, secret areas and checkpoints.
        """
        self.analyzer.update_profile(player_progress)
        profile = self.analyzer.profile
        self.logger.info(f"Generating level for player level {profile.level} at difficulty {difficulty_level}")

        primary = self.generate_primary_objectives(difficulty_level)
        bonus = self.generate_bonus_objectives(difficulty_level)
        secret_areas = self.generate_secret_areas(terrain_data, difficulty_level)
        rewards = self.reward_calculator.calculate(primary, bonus, secret_areas)
        checkpoints = self.checkpoint_planner.plan(terrain_data, primary)

        level = LevelDefinition(
            id=f"level_{uuid.uuid4().hex[:12]}",
            difficulty=difficulty_level,
            player_level=profile.level,
            objectives=LevelObjectives(primary=primary, bonus=bonus),
            secret_areas=secret_areas,
            checkpoints=checkpoints,
            rewards=rewards,
            estimated_duration=self.timing.estimate_level_duration(primary, bonus),
            metadata=LevelMetadata(
                generated_at=time.time(),
                player_skill_rating=profile.skill_rating,
                preferred_play_style=profile.preferred_play_style,
                adaptations=self.get_adaptations(difficulty_level),
            ),
        )

        check = self.validator.validate(level)
        if not check.valid:
            self.logger.warning(f"Generated level {level.id} failed validation: {check.message}")

        self.stats.record(level)
        self.logger.info(
            f"Generated level with {level.objectives.total} objectives, "
            f"{len(secret_areas)} secret areas, reward balance {rewards.balance.value}"
        )
        return level

    def primary_objective_count(self, difficulty_level: float) -> int:
        return min(self.options.max_objectives, max(2, math.floor(2 + difficulty_level * 2)))

    def generate_primary_objectives(self, difficulty_level: float) -> List[Objective]:
        count = self.primary_objective_count(difficulty_level)
        profile = self.analyzer.profile
        selected = self.selector.select_types(self.catalog.type_ids(), count, profile.preferred_play_style)
        if not selected:
            self.logger.warning("No objective types available; level has no primary objectives")
            return []

        objectives: List[Objective] = []
        for i in range(count):
            objective_type = selected[i % len(selected)]
            objective = self.factory.create_objective(
                objective_type, difficulty_level, "primary", profile.skill_rating
            )
            if objective is not None:
                self.logger.debug(f"Primary {objective.type}: {describe_parameters(objective.parameters)}")
                objectives.append(objective)
        return objectives

    def generate_bonus_objectives(self, difficulty_level: float) -> List[Objective]:
        bonus: List[Objective] = []
        type_ids = self.catalog.type_ids()
        if not type_ids or not self.rng.chance(self.options.bonus_objective_chance):
            return bonus

        bonus_count = 1 + self.rng.below(2)
        for _ in range(bonus_count):
            objective = self.factory.create_bonus_objective(
                self.rng.choice(type_ids), difficulty_level, self.analyzer.profile.skill_rating
            )
            if objective is not None:
                bonus.append(objective)
        return bonus

    def generate_secret_areas(self, terrain_data: Any, difficulty_level: float) -> List[SecretArea]:
        secret_areas: List[SecretArea] = []
        if not self.rng.chance(self.options.secret_area_chance):
            return secret_areas

        draws = 1 + self.rng.below(3)
        for _ in range(draws):
            secret = self.secret_generator.generate(terrain_data, difficulty_level, self.analyzer.profile)
            if secret is not None:
                secret_areas.append(secret)
        return secret_areas

    def get_adaptations(self, difficulty_level: float) -> List[str]:
        return self.analyzer.adaptations(difficulty_level)

    # --- Public accessors ---

    def get_player_progress(self) -> PlayerProgressProfile:
        return self.analyzer.snapshot()

    def get_level_stats(self) -> LevelStats:
        return self.stats.copy()

    def get_objective_templates(self) -> List[str]:
        return self.catalog.type_ids()

    # --- Run-time notification hooks ---

    def register_callback(self, event: str, callback: Callable[..., Any]) -> None:
        if event not in self.callbacks:
            raise ValueError(f"Unknown event '{event}'. Expected one of {sorted(self.callbacks)}")
        self.callbacks[event].append(callback)

    def update_objective_progress(self, objective_id: str, progress: float) -> None:
        """Forward a progress report from the run-time tracker. Nothing is stored."""
        self.logger.info(f"Objective {objective_id} progress: {progress}")
        for callback in self.callbacks[OBJECTIVE_PROGRESS]:
            callback(objective_id, progress)

    def complete_objective(
        self,
        objective_id: str,
        completion_data: Optional[Mapping[str, Any]] = None,
    ) -> Optional[RewardPackage]:
        """
        Forward a completion report. When the report carries a ``reward``,
        the payout package for it is built and returned.

        Recognized keys: ``reward``, ``difficulty`` (default 1.0), ``bonuses``
        (names from BONUS_MULTIPLIERS).
        """
        data = dict(completion_data or {})
        self.logger.info(f"Objective {objective_id} completed: {data}")

        package = None
        if data.get("reward") is not None:
            earned = self.reward_system.calculate_reward(
                data["reward"], data.get("difficulty", 1.0), data.get("bonuses", ())
            )
            package = self.reward_system.generate_reward_package(earned, self.analyzer.profile.level)

        for callback in self.callbacks[OBJECTIVE_COMPLETED]:
            callback(objective_id, data)
        return package
