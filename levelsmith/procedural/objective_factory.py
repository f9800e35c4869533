from __future__ import annotations

import math
import time
import uuid
from typing import Any, Dict, List, Optional, Union

from ..classes.objectives import (
    Objective,
    ObjectiveCategory,
    ObjectiveParameters,
    Requirement,
    build_parameters,
)
from ..misc.logger import create_logger
from ..misc.math_utils import clamp, scaled_index
from ..resources.objective_catalog import ObjectiveCatalog, ObjectiveTemplate, Variant

BONUS_DIFFICULTY_FACTOR = 0.8
BONUS_REWARD_MULTIPLIER = 1.5


def difficulty_multiplier(difficulty_level: float) -> float:
    return 1 + (difficulty_level - 1) * 0.5


def skill_multiplier(skill_rating: float) -> float:
    return 1 + (clamp(skill_rating, 0.0, 1.0) - 0.5) * 0.3


def time_multiplier(difficulty_level: float) -> float:
    """Harder levels grant less time, never below half the base."""
    return max(0.5, 1.5 - difficulty_level * 0.3)


def format_description(template: str, parameters: Dict[str, Any]) -> str:
    formatted = template
    for key, value in parameters.items():
        formatted = formatted.replace(f"{{{key}}}", str(value))
    return formatted


class ObjectiveFactory:
    """
    Instantiates concrete objectives from a catalog template, a variant picked
    by difficulty, and the difficulty scalar itself.
    """

    def __init__(self, catalog: ObjectiveCatalog, reward_scaling: float = 1.0, verbose: bool = False):
        self.catalog = catalog
        self.reward_scaling = reward_scaling
        self.logger = create_logger(verbose=verbose, name="ObjectiveFactory")

    def create_objective(
        self,
        objective_type: str,
        difficulty_level: float,
        category: Union[ObjectiveCategory, str] = ObjectiveCategory.PRIMARY,
        skill_rating: float = 0.5,
    ) -> Optional[Objective]:
        """
        Build one objective.

        Args:
            objective_type: Catalog type id (e.g. 'survival')
            difficulty_level: Difficulty scalar, typically 0.5..3.0
            category: PRIMARY or BONUS (enum or its string value)
            skill_rating: Player skill in [0, 1], scales the reward

        Returns:
            The objective, or None when the type is unknown or has no variants.
        """
        template = self.catalog.get(objective_type)
        if template is None:
            self.logger.debug(f"Unknown objective type '{objective_type}', skipping")
            return None

        variant = self.select_variant(template, difficulty_level)
        if variant is None:
            self.logger.debug(f"Objective type '{objective_type}' has no variants, skipping")
            return None

        category = ObjectiveCategory(category)
        resolved = self.resolve_parameters(variant, difficulty_level)
        parameters = build_parameters(template.type_id, resolved)

        return Objective(
            id=f"{template.type_id}_{variant.id}_{uuid.uuid4().hex[:12]}",
            type=template.type_id,
            category=category,
            name=variant.name,
            description=format_description(variant.description, parameters.as_dict()),
            difficulty=template.difficulty * difficulty_level,
            reward=self.calculate_reward(template, variant, difficulty_level, skill_rating),
            parameters=parameters,
            max_progress=parameters.max_progress(),
            time_limit=self.calculate_time_limit(variant, difficulty_level),
            requirements=self.generate_requirements(template, variant, difficulty_level),
            hints=list(variant.hints),
            created=time.time(),
        )

    def create_bonus_objective(
        self,
        objective_type: str,
        difficulty_level: float,
        skill_rating: float = 0.5,
    ) -> Optional[Objective]:
        """Optional objective at reduced difficulty with a boosted reward."""
        objective = self.create_objective(
            objective_type,
            difficulty_level * BONUS_DIFFICULTY_FACTOR,
            ObjectiveCategory.BONUS,
            skill_rating,
        )
        if objective is None:
            return None
        objective.reward = max(1, math.floor(objective.reward * BONUS_REWARD_MULTIPLIER))
        objective.optional = True
        return objective

    @staticmethod
    def select_variant(template: ObjectiveTemplate, difficulty_level: float) -> Optional[Variant]:
        if not template.variants:
            return None
        return template.variants[scaled_index(difficulty_level, len(template.variants))]

    @staticmethod
    def resolve_parameters(variant: Variant, difficulty_level: float) -> Dict[str, Any]:
        resolved: Dict[str, Any] = {}
        for name, candidates in variant.parameters.items():
            if isinstance(candidates, (tuple, list)):
                if not candidates:
                    continue
                resolved[name] = candidates[scaled_index(difficulty_level, len(candidates))]
            else:
                resolved[name] = candidates
        return resolved

    def calculate_reward(
        self,
        template: ObjectiveTemplate,
        variant: Variant,
        difficulty_level: float,
        skill_rating: float,
    ) -> int:
        reward = (
            template.base_reward
            * self.reward_scaling
            * difficulty_multiplier(difficulty_level)
            * skill_multiplier(skill_rating)
            * variant.scaling_factor
        )
        return max(1, math.floor(reward))

    @staticmethod
    def calculate_time_limit(variant: Variant, difficulty_level: float) -> Optional[int]:
        if variant.base_time_limit <= 0:
            return None
        return math.floor(variant.base_time_limit * time_multiplier(difficulty_level))

    @staticmethod
    def generate_requirements(
        template: ObjectiveTemplate,
        variant: Variant,
        difficulty_level: float,
    ) -> List[Requirement]:
        requirements: List[Requirement] = []

        if difficulty_level > 1.5:
            requirements.append(Requirement("health_threshold", "Maintain at least 50% health", 0.5))

        if difficulty_level > 2.0:
            # 0.8 vehicle integrity, i.e. at most 20% damage
            requirements.append(Requirement("no_vehicle_damage", "Complete without major vehicle damage", 0.8))

        if template.type_id == "escort" or "escort" in variant.id:
            requirements.append(Requirement("protect_target", "Keep all targets alive", 1.0))

        return requirements


def describe_parameters(parameters: ObjectiveParameters) -> str:
    """Compact 'name=value' rendering for log lines."""
    return ", ".join(f"{k}={v}" for k, v in parameters.as_dict().items())
