"""
Placement oracle interface.

The generator never looks inside terrain data. It hands the data to a
PlacementOracle and takes whatever location comes back, or None when the
oracle finds nothing suitable.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping, Optional

from ..classes.level_objects import Location
from ..misc.math_utils import clamp, scatter_offset

if TYPE_CHECKING:
    from ..procedural.randomizer import RandomProvider


class PlacementOracle(ABC):
    """Answers 'where could this go?' against some terrain."""

    @abstractmethod
    def find_placement(
        self,
        terrain_data: Any,
        near: Optional[Location] = None,
        radius: float = 0.0,
    ) -> Optional[Location]:
        """
        Args:
            terrain_data: Whatever the host passed to the generator
            near: Anchor point, or None for anywhere on the map
            radius: How far from ``near`` the placement may drift (meters)

        Returns:
            A location, or None if nothing suitable exists.
        """


class ScatterPlacementOracle(PlacementOracle):
    """
    Terrain-agnostic default: scatters points around the anchor, or anywhere
    inside the map bounds when no anchor is given.

    Bounds come from ``terrain_data['bounds']`` (minX/maxX/minZ/maxZ) when
    terrain data is a mapping that has them, else +-``default_extent``.
    """

    def __init__(self, rng: RandomProvider, default_extent: float = 500.0, default_biome: str = "city"):
        self.rng = rng
        self.default_extent = default_extent
        self.default_biome = default_biome

    def _bounds(self, terrain_data: Any):
        extent = self.default_extent
        bounds = terrain_data.get("bounds") if isinstance(terrain_data, Mapping) else None
        if not isinstance(bounds, Mapping):
            return (-extent, extent, -extent, extent)
        return (
            float(bounds.get("minX", -extent)),
            float(bounds.get("maxX", extent)),
            float(bounds.get("minZ", -extent)),
            float(bounds.get("maxZ", extent)),
        )

    def find_placement(
        self,
        terrain_data: Any,
        near: Optional[Location] = None,
        radius: float = 0.0,
    ) -> Optional[Location]:
        min_x, max_x, min_z, max_z = self._bounds(terrain_data)
        if near is None:
            x = self.rng.uniform(min_x, max_x)
            z = self.rng.uniform(min_z, max_z)
            return Location(x, 0.0, z, biome=self.default_biome, accessibility=self.rng.uniform(0.3, 0.8))

        x, z = scatter_offset((near.x, near.z), radius * 2, self.rng.next(), self.rng.next())
        return Location(clamp(x, min_x, max_x), near.y, clamp(z, min_z, max_z))
