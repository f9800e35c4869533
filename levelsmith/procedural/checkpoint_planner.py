from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..classes.level_objects import Checkpoint, CheckpointType, Location
from ..classes.objectives import Objective
from ..misc.logger import create_logger
from ..resources.site_types import CHECKPOINT_TYPES
from ..terrain.placement import PlacementOracle
from .randomizer import RandomProvider

OBJECTIVE_CHECKPOINT_RADIUS = 50.0
END_CHECKPOINT_RADIUS = 100.0
SAFE_ZONE_DIFFICULTY = 0.7
OUTPOST_CHANCE = 0.3


@dataclass
class CheckpointActivation:
    """Receipt handed to the save subsystem when a checkpoint is activated."""
    success: bool
    checkpoint_id: str
    save_id: str
    timestamp: float


class CheckpointPlanner:
    """
    Lays out checkpoints along a level: a start safe zone at the origin, one
    checkpoint at every second objective from index 2 on, and an end safe zone.
    """

    def __init__(self, oracle: PlacementOracle, rng: RandomProvider, verbose: bool = False):
        self.oracle = oracle
        self.rng = rng
        self.logger = create_logger(verbose=verbose, name="CheckpointPlanner")

    def plan(self, terrain_data: Any, primary_objectives: Sequence[Objective]) -> List[Checkpoint]:
        checkpoints = [self.create_checkpoint(CheckpointType.SAFE_ZONE, Location.origin(), "start")]

        for index, objective in enumerate(primary_objectives):
            if index == 0 or index % 2 != 0:
                continue
            anchor = objective.location or Location.origin()
            location = self.oracle.find_placement(terrain_data, near=anchor, radius=OBJECTIVE_CHECKPOINT_RADIUS)
            if location is None:
                self.logger.debug(f"No placement for checkpoint at objective {index}, skipping")
                continue
            checkpoint_type = self.select_checkpoint_type(objective, index)
            checkpoints.append(self.create_checkpoint(checkpoint_type, location, f"objective_{index}"))

        end_location = self.oracle.find_placement(
            terrain_data, near=Location.origin(), radius=END_CHECKPOINT_RADIUS
        )
        if end_location is None:
            end_location = Location.origin()
        checkpoints.append(self.create_checkpoint(CheckpointType.SAFE_ZONE, end_location, "end"))

        return checkpoints

    def select_checkpoint_type(self, objective: Objective, index: int) -> CheckpointType:
        if objective.difficulty > SAFE_ZONE_DIFFICULTY or index == 0:
            return CheckpointType.SAFE_ZONE
        return CheckpointType.OUTPOST if self.rng.chance(OUTPOST_CHANCE) else CheckpointType.WAYPOINT

    @staticmethod
    def create_checkpoint(checkpoint_type: CheckpointType, location: Location, purpose: str) -> Checkpoint:
        spec = CHECKPOINT_TYPES[checkpoint_type]
        return Checkpoint(
            id=f"checkpoint_{purpose}_{uuid.uuid4().hex[:12]}",
            type=checkpoint_type,
            name=spec.name,
            location=location,
            radius=spec.radius,
            protection=spec.protection,
            services=list(spec.services),
            purpose=purpose,
            created=time.time(),
        )

    @staticmethod
    def available_services(checkpoint_type: CheckpointType) -> List[str]:
        return list(CHECKPOINT_TYPES[CheckpointType(checkpoint_type)].services)

    def activate_checkpoint(self, checkpoint_id: str, player_data: Optional[Dict[str, Any]] = None) -> CheckpointActivation:
        """Issue a save receipt. Persisting ``player_data`` is the save subsystem's job."""
        timestamp = time.time()
        self.logger.info(f"Checkpoint {checkpoint_id} activated")
        return CheckpointActivation(
            success=True,
            checkpoint_id=checkpoint_id,
            save_id=f"save_{checkpoint_id}_{int(timestamp * 1000)}",
            timestamp=timestamp,
        )
