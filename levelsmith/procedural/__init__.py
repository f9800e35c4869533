"""
Adaptive level generation for levelsmith.

Each stage of the pipeline (profile analysis, type selection, objective
construction, secret areas, checkpoints, reward balancing) is a small class
that can be built and tested alone; LevelAssembler wires them together.
"""

from .options import GeneratorOptions
from .randomizer import RandomProvider, Randomizer
from .engine import LevelAssembler, LevelStats
from .profile_analyzer import PlayerProfileAnalyzer, select_adaptations
from .type_selector import ObjectiveTypeSelector
from .objective_factory import ObjectiveFactory
from .reward_system import (
    RewardDistributionCalculator,
    RewardSystem,
    RewardPackage,
    calculate_reward_balance,
)
from .secret_areas import SecretAreaGenerator
from .checkpoint_planner import CheckpointPlanner, CheckpointActivation
from .timing_model import TimingModel
from .validation import (
    LevelGenerationError,
    InvalidConfigurationError,
    LevelValidationError,
    LevelValidator,
    ValidationResult,
)

__all__ = [
    "GeneratorOptions",
    "RandomProvider",
    "Randomizer",
    "LevelAssembler",
    "LevelStats",
    "PlayerProfileAnalyzer",
    "select_adaptations",
    "ObjectiveTypeSelector",
    "ObjectiveFactory",
    "RewardDistributionCalculator",
    "RewardSystem",
    "RewardPackage",
    "calculate_reward_balance",
    "SecretAreaGenerator",
    "CheckpointPlanner",
    "CheckpointActivation",
    "TimingModel",
    "LevelGenerationError",
    "InvalidConfigurationError",
    "LevelValidationError",
    "LevelValidator",
    "ValidationResult",
]
