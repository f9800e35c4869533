"""Validation and error handling for level generation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from ..classes.level_objects import LevelDefinition


class LevelGenerationError(Exception):
    """Base exception for level generation failures."""
    pass


class InvalidConfigurationError(LevelGenerationError):
    """Raised when generator options are out of range."""
    pass


class LevelValidationError(LevelGenerationError):
    """Raised on request when a generated level breaks an invariant."""
    pass


@dataclass
class ValidationResult:
    """Result of a validation check."""
    valid: bool
    messages: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        return "; ".join(self.messages)

    def raise_if_invalid(self, error_class: type = LevelValidationError):
        """Raise an error if validation failed."""
        if not self.valid:
            raise error_class(self.message)

    @classmethod
    def from_messages(cls, messages: List[str]) -> "ValidationResult":
        return cls(valid=not messages, messages=list(messages))


class LevelValidator:
    """Checks the structural invariants of a generated level."""

    def __init__(self, percentage_tolerance: float = 0.01):
        self.percentage_tolerance = percentage_tolerance

    def validate(self, level: LevelDefinition) -> ValidationResult:
        messages: List[str] = []
        messages.extend(self._check_objectives(level))
        messages.extend(self._check_checkpoints(level))
        messages.extend(self._check_rewards(level))
        return ValidationResult.from_messages(messages)

    def _check_objectives(self, level: LevelDefinition) -> List[str]:
        issues = []
        objectives = level.objectives
        if objectives.total != len(objectives.primary) + len(objectives.bonus):
            issues.append(
                f"Objective total {objectives.total} does not match "
                f"{len(objectives.primary)} primary + {len(objectives.bonus)} bonus"
            )
        seen_ids = set()
        for objective in level.all_objectives():
            if objective.reward <= 0:
                issues.append(f"Objective {objective.id} has non-positive reward {objective.reward}")
            if objective.max_progress < 1:
                issues.append(f"Objective {objective.id} has max_progress {objective.max_progress} < 1")
            if objective.id in seen_ids:
                issues.append(f"Duplicate objective id {objective.id}")
            seen_ids.add(objective.id)
        return issues

    def _check_checkpoints(self, level: LevelDefinition) -> List[str]:
        summary = level.checkpoint_summary()
        issues = []
        for purpose in ("start", "end"):
            count = summary.get(purpose, 0)
            if count != 1:
                issues.append(f"Expected exactly one '{purpose}' checkpoint, found {count}")
        return issues

    def _check_rewards(self, level: LevelDefinition) -> List[str]:
        rewards = level.rewards
        if rewards.total <= 0:
            return []
        percentage_sum = rewards.primary.percentage + rewards.bonus.percentage + rewards.secret.percentage
        if not math.isclose(percentage_sum, 100.0, abs_tol=self.percentage_tolerance):
            return [f"Reward percentages sum to {percentage_sum:.4f}, expected 100"]
        return []
