from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ..classes.objectives import Objective

# Travel and free-roam time added to every level, seconds
BASE_LEVEL_SECONDS = 120
DEFAULT_OBJECTIVE_SECONDS = 60


@dataclass
class TimingModel:
    """Rough pacing model estimating how long a generated level takes to play."""
    bonus_weight: float = 0.7  # bonus objectives are optional, count them partially

    def objective_duration(self, objective: Objective) -> float:
        """Approximate seconds to finish one objective."""
        params = objective.parameters.as_dict()
        if objective.type == "survival":
            return params.get("duration") or DEFAULT_OBJECTIVE_SECONDS
        if objective.type == "elimination":
            return min(180, (params.get("count") or 10) * 5)
        if objective.type == "collection":
            return min(120, (params.get("amount") or 5) * 15)
        if objective.type == "escort":
            return min(300, (params.get("distance") or 1000) / 5)
        if objective.type == "exploration":
            return min(240, (params.get("percentage") or 75) * 2)
        return DEFAULT_OBJECTIVE_SECONDS

    def estimate_level_duration(self, primary: Sequence[Objective], bonus: Sequence[Objective]) -> int:
        total = sum(self.objective_duration(o) for o in primary)
        total += sum(self.objective_duration(o) * self.bonus_weight for o in bonus)
        total += BASE_LEVEL_SECONDS
        return math.floor(total)
