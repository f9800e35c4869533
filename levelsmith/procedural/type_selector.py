from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence, Tuple

from ..classes.profile import PlayStyle
from ..misc.logger import create_logger
from ..misc.math_utils import weighted_index
from .randomizer import RandomProvider

BASE_TYPE_WEIGHT = 1.0
MAX_REPEATS_PER_TYPE = 2

STYLE_WEIGHT_MODIFIERS: Dict[PlayStyle, Mapping[str, float]] = {
    PlayStyle.AGGRESSIVE: {"elimination": 2.0, "survival": 1.5, "collection": 0.7},
    PlayStyle.DEFENSIVE: {"survival": 2.0, "escort": 1.5, "elimination": 0.8},
    PlayStyle.EXPLORER: {"exploration": 2.0, "collection": 1.5, "survival": 0.8},
    PlayStyle.SPEEDRUN: {"elimination": 1.5, "collection": 1.3, "escort": 0.6},
    PlayStyle.BALANCED: {},
}

STYLE_PRIORITY_TYPES: Dict[PlayStyle, Tuple[str, ...]] = {
    PlayStyle.AGGRESSIVE: ("elimination", "survival"),
    PlayStyle.DEFENSIVE: ("survival", "escort"),
    PlayStyle.EXPLORER: ("exploration", "collection"),
    PlayStyle.SPEEDRUN: ("elimination", "collection"),
    PlayStyle.BALANCED: ("survival", "elimination"),
}


@dataclass
class ObjectiveTypeSelector:
    """
    Chooses which objective types appear in a level, biased toward the
    player's play style while keeping variety (no type more than twice).
    """
    rng: RandomProvider
    verbose: bool = False
    logger: object = field(init=False, repr=False)

    def __post_init__(self):
        self.logger = create_logger(verbose=self.verbose, name="TypeSelector")

    def type_weights(self, play_style: PlayStyle, available_types: Sequence[str]) -> Dict[str, float]:
        modifiers = STYLE_WEIGHT_MODIFIERS.get(play_style, {})
        return {t: BASE_TYPE_WEIGHT * modifiers.get(t, 1.0) for t in available_types}

    def select_types(self, available_types: Sequence[str], count: int, play_style: PlayStyle) -> List[str]:
        """
        Pick ``count`` type ids.

        Args:
            available_types: Candidate type ids (catalog order)
            count: Number of slots to fill
            play_style: Style whose weights and priority types apply

        Returns:
            Ordered list of type ids; shorter than ``count`` when variety
            rules leave no eligible type.
        """
        available = list(dict.fromkeys(available_types))
        selected: List[str] = []
        if not available or count <= 0:
            return selected

        weights = self.type_weights(play_style, available)

        for type_id in STYLE_PRIORITY_TYPES.get(play_style, ()):
            if len(selected) < count and type_id in available:
                selected.append(type_id)

        while len(selected) < count:
            eligible = [t for t in available if selected.count(t) < MAX_REPEATS_PER_TYPE]
            if not eligible:
                self.logger.debug(f"Variety cap reached after {len(selected)} of {count} types")
                break
            index = weighted_index([weights[t] for t in eligible], self.rng.next())
            selected.append(eligible[index])

        return selected
