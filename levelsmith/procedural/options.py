from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional

from .validation import InvalidConfigurationError, ValidationResult


def _to_snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


@dataclass
class GeneratorOptions:
    """
    Tuning knobs for the level generator.

    Probabilities are in [0, 1]. ``seed`` only matters when the assembler
    builds its own random provider; an injected provider wins.
    """
    max_objectives: int = 5
    secret_area_chance: float = 0.3
    bonus_objective_chance: float = 0.4
    reward_scaling: float = 1.0
    difficulty_progression: float = 1.2  # growth of difficulty between consecutive levels

    # Randomness and reproducibility
    seed: Optional[int] = None
    extra: Dict[str, object] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GeneratorOptions":
        """Build options from snake_case or camelCase keys.

        Keys that are not options land in ``extra``.
        """
        known = {f.name for f in fields(cls)} - {"extra"}
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, object] = dict(data.get("extra", {}) or {})
        for key, value in data.items():
            if key == "extra":
                continue
            name = _to_snake_case(key)
            if name in known:
                kwargs[name] = value
            else:
                extra[key] = value
        return cls(extra=extra, **kwargs)

    def validate(self) -> ValidationResult:
        messages: List[str] = []
        if self.max_objectives < 2:
            messages.append(f"max_objectives must be at least 2 (got {self.max_objectives})")
        for name in ("secret_area_chance", "bonus_objective_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                messages.append(f"{name} must be within [0, 1] (got {value})")
        if self.reward_scaling <= 0:
            messages.append(f"reward_scaling must be positive (got {self.reward_scaling})")
        if self.difficulty_progression <= 0:
            messages.append(f"difficulty_progression must be positive (got {self.difficulty_progression})")
        return ValidationResult.from_messages(messages)

    def ensure_valid(self) -> "GeneratorOptions":
        self.validate().raise_if_invalid(InvalidConfigurationError)
        return self

    def next_difficulty(self, difficulty_level: float) -> float:
        """Suggested difficulty for the level after one played at ``difficulty_level``."""
        return difficulty_level * self.difficulty_progression
