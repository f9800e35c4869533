"""
Mathematical utility functions for levelsmith.

Scaling curves, weighted selection and placement offsets shared by the
generator components.
"""
import math
import numpy as np
from typing import Sequence, Tuple

Position2D = Tuple[float, float]


def clamp(value: float, lower: float, upper: float) -> float:
    """
    Clamp a value into [lower, upper].

    Examples:
        >>> clamp(1.4, 0.0, 1.0)
        1.0
        >>> clamp(-3, 0, 10)
        0
    """
    return max(lower, min(upper, value))


def scaled_index(scalar: float, length: int) -> int:
    """
    Map a difficulty scalar onto an index of a list ordered easiest-first.

    The index is ``floor(scalar * length)`` clamped to ``[0, length - 1]``, so
    a scalar of 1.0 or more always selects the last entry.

    Args:
        scalar: Difficulty scalar (any float; NaN-free)
        length: Number of candidates (must be >= 1)

    Returns:
        Index into the candidate list

    Examples:
        >>> scaled_index(0.3, 4)
        1
        >>> scaled_index(2.5, 2)
        1
        >>> scaled_index(-1.0, 3)
        0
    """
    if length <= 0:
        raise ValueError("scaled_index requires at least one candidate")
    return int(clamp(math.floor(scalar * length), 0, length - 1))


def weighted_index(weights: Sequence[float], roll: float) -> int:
    """
    Pick an index from non-negative weights using a uniform roll in [0, 1).

    The roll is stretched over the total weight and the first index whose
    cumulative weight reaches it is returned. A zero total falls back to 0.

    Args:
        weights: Per-candidate weights
        roll: Uniform random value in [0, 1)

    Returns:
        Selected index

    Examples:
        >>> weighted_index([1.0, 1.0], 0.25)
        0
        >>> weighted_index([1.0, 3.0], 0.5)
        1
    """
    if len(weights) == 0:
        raise ValueError("weighted_index requires at least one weight")
    cumulative = np.cumsum(np.asarray(weights, dtype=float))
    total = float(cumulative[-1])
    if total <= 0.0:
        return 0
    target = roll * total
    index = int(np.searchsorted(cumulative, target, side="left"))
    return min(index, len(weights) - 1)


def scatter_offset(center: Position2D, spread: float, roll_x: float, roll_z: float) -> Position2D:
    """
    Offset a point inside a square of side ``spread`` centred on it.

    Args:
        center: (x, z) centre
        spread: Full width of the scatter square in meters
        roll_x: Uniform roll in [0, 1) for the x axis
        roll_z: Uniform roll in [0, 1) for the z axis

    Returns:
        Offset (x, z)

    Examples:
        >>> scatter_offset((10.0, 10.0), 100.0, 0.5, 0.5)
        (10.0, 10.0)
    """
    cx, cz = center
    return (cx + (roll_x - 0.5) * spread, cz + (roll_z - 0.5) * spread)
