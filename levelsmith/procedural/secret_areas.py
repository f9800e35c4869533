from __future__ import annotations

import math
import time
import uuid
from typing import Any, List, Optional, Sequence

from ..classes.level_objects import SecretArea, SecretContents, SecretItem
from ..classes.objectives import Requirement
from ..classes.profile import PlayerProgressProfile
from ..misc.logger import create_logger
from ..resources.site_types import SECRET_AREA_TYPES, SECRET_HINTS, SecretAreaSpec
from ..terrain.placement import PlacementOracle
from .randomizer import RandomProvider

# Secret types up to this much harder than the level are still eligible
ELIGIBILITY_MARGIN = 0.2
BASE_SECRET_CURRENCY = 100


class SecretAreaGenerator:
    """
    Creates hidden, difficulty-gated bonus locations. Placement is delegated
    to the oracle; a declined placement means no secret for that draw.
    """

    def __init__(
        self,
        oracle: PlacementOracle,
        rng: RandomProvider,
        secret_types: Sequence[SecretAreaSpec] = SECRET_AREA_TYPES,
        verbose: bool = False,
    ):
        self.oracle = oracle
        self.rng = rng
        self.secret_types = tuple(secret_types)
        self.logger = create_logger(verbose=verbose, name="SecretAreas")

    def eligible_types(self, difficulty_level: float) -> List[SecretAreaSpec]:
        return [s for s in self.secret_types if s.difficulty <= difficulty_level + ELIGIBILITY_MARGIN]

    def generate(
        self,
        terrain_data: Any,
        difficulty_level: float,
        profile: Optional[PlayerProgressProfile] = None,
    ) -> Optional[SecretArea]:
        """
        Build one secret area, or None when no type is eligible at this
        difficulty or the oracle has no spot for it.
        """
        candidates = self.eligible_types(difficulty_level)
        if not candidates:
            self.logger.debug(f"No secret types eligible at difficulty {difficulty_level:.2f}")
            return None

        spec = self.rng.choice(candidates)

        location = self.oracle.find_placement(terrain_data)
        if location is None:
            self.logger.debug(f"Placement declined for secret '{spec.type.value}'")
            return None

        return SecretArea(
            id=f"secret_{spec.type.value}_{uuid.uuid4().hex[:12]}",
            name=spec.name,
            type=spec.type,
            description=spec.description,
            location=location,
            difficulty=spec.difficulty * difficulty_level,
            reward=max(0, math.floor(spec.reward * difficulty_level)),
            requirements=[Requirement(
                type=spec.requirement_type,
                description=spec.requirement_description,
                hint=spec.requirement_hint,
            )],
            hints=[self.rng.choice(SECRET_HINTS)],
            contents=self.generate_contents(spec, difficulty_level),
            created=time.time(),
        )

    @staticmethod
    def generate_contents(spec: SecretAreaSpec, difficulty_level: float) -> SecretContents:
        return SecretContents(
            currency=max(0, math.floor(BASE_SECRET_CURRENCY * difficulty_level)),
            items=[SecretItem(name, quantity) for name, quantity in spec.items],
            lore=spec.lore,
        )
