from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type

from .level_objects import Location


class ObjectiveCategory(Enum):
    """Where an objective sits in the level flow."""
    PRIMARY = "primary"
    BONUS = "bonus"


class ObjectiveStatus(Enum):
    """Run-time status. Generated objectives always start PENDING."""
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"


# Parameter names that double as the progress target, in lookup order
PROGRESS_PARAMETERS = ("count", "amount", "duration", "waves", "distance", "percentage")


@dataclass(frozen=True)
class ObjectiveParameters:
    """Base class for resolved objective parameters."""

    def as_dict(self) -> Dict[str, Any]:
        """Return the parameters that are actually set."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not None
        }

    def max_progress(self) -> int:
        """First numeric progress parameter present, never below 1."""
        values = self.as_dict()
        for name in PROGRESS_PARAMETERS:
            value = values.get(name)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return max(1, int(value))
        return 1

    @classmethod
    def from_resolved(cls, resolved: Mapping[str, Any]) -> "ObjectiveParameters":
        """Build typed parameters from a name -> value mapping.

        Names the class does not declare are dropped.
        """
        names = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in resolved.items() if k in names})


@dataclass(frozen=True)
class SurvivalParameters(ObjectiveParameters):
    duration: Optional[int] = None  # seconds
    waves: Optional[int] = None


@dataclass(frozen=True)
class EliminationParameters(ObjectiveParameters):
    count: Optional[int] = None
    zombie_type: Optional[str] = None  # fast | heavy | special | boss


@dataclass(frozen=True)
class CollectionParameters(ObjectiveParameters):
    amount: Optional[int] = None


@dataclass(frozen=True)
class EscortParameters(ObjectiveParameters):
    count: Optional[int] = None     # survivors
    distance: Optional[int] = None  # meters of convoy route


@dataclass(frozen=True)
class ExplorationParameters(ObjectiveParameters):
    percentage: Optional[int] = None
    count: Optional[int] = None     # hidden locations


@dataclass(frozen=True)
class GenericParameters(ObjectiveParameters):
    """Fallback for catalog types without a dedicated parameter shape."""
    values: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in self.values.items() if v is not None}

    @classmethod
    def from_resolved(cls, resolved: Mapping[str, Any]) -> "GenericParameters":
        return cls(values=dict(resolved))


PARAMETER_TYPES: Dict[str, Type[ObjectiveParameters]] = {
    "survival": SurvivalParameters,
    "elimination": EliminationParameters,
    "collection": CollectionParameters,
    "escort": EscortParameters,
    "exploration": ExplorationParameters,
}


def build_parameters(objective_type: str, resolved: Mapping[str, Any]) -> ObjectiveParameters:
    """Pick the parameter shape for ``objective_type`` and fill it."""
    parameter_cls = PARAMETER_TYPES.get(objective_type, GenericParameters)
    return parameter_cls.from_resolved(resolved)


@dataclass
class Requirement:
    """Extra condition attached to an objective or secret area."""
    type: str
    description: str
    value: Optional[float] = None
    hint: Optional[str] = None


@dataclass
class Objective:
    """A generated task, primary or bonus."""
    id: str
    type: str
    category: ObjectiveCategory
    name: str
    description: str
    difficulty: float
    reward: int
    parameters: ObjectiveParameters
    max_progress: int = 1
    status: ObjectiveStatus = ObjectiveStatus.PENDING
    progress: float = 0
    time_limit: Optional[int] = None  # seconds; None means untimed
    location: Optional[Location] = None  # set by the placement system
    requirements: List[Requirement] = field(default_factory=list)
    hints: List[str] = field(default_factory=list)
    optional: bool = False
    created: float = 0.0
