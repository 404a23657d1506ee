"""
Planning of which ranked splats survive each pruning level.

All levels are planned against the same ranked array: pruning P percent
drops the first floor(N * P / 100) records and keeps the tail, so the kept
set of a higher level is always the top part of a lower level's kept set.
"""

from typing import Iterable, List, NamedTuple

import numpy as np


class PrunePlan(NamedTuple):
    percentage: int
    num_to_remove: int
    num_to_keep: int

    @property
    def start(self) -> int:
        """Index of the first kept record in the ranked array."""
        return self.num_to_remove


def validate_percentage(percentage) -> int:
    """Return `percentage` as int, rejecting non-integers and values outside 0-100."""
    if isinstance(percentage, bool) or not isinstance(percentage, (int, np.integer)):
        raise ValueError(f"Prune percentage must be an integer, got {percentage!r}")
    if not 0 <= percentage <= 100:
        raise ValueError(f"Prune percentage must be between 0 and 100, got {percentage}")
    return int(percentage)


def plan_prune(point_count: int, percentage: int) -> PrunePlan:
    """
    Compute how many of `point_count` ranked splats to remove and keep.

    Args:
        point_count: Number of splats in the ranked scene (N >= 0).
        percentage: Share of splats to discard, integer 0-100.

    Returns:
        PrunePlan with num_to_remove = N * P // 100 and num_to_keep = N - num_to_remove.

    Example:
        >>> plan_prune(3, 50)
        PrunePlan(percentage=50, num_to_remove=1, num_to_keep=2)
    """
    if point_count < 0:
        raise ValueError(f"Point count cannot be negative, got {point_count}")
    percentage = validate_percentage(percentage)
    num_to_remove = point_count * percentage // 100
    return PrunePlan(percentage, num_to_remove, point_count - num_to_remove)


def plan_levels(point_count: int, percentages: Iterable[int]) -> List[PrunePlan]:
    """Plan every requested level for one scene, in request order."""
    return [plan_prune(point_count, percentage) for percentage in percentages]


def kept_slice(ranked: np.ndarray, plan: PrunePlan) -> np.ndarray:
    """
    Records kept by `plan`, as a view into `ranked` (no copy, no re-sort).

    Raises:
        ValueError: If the plan was made for a different point count.
    """
    if plan.num_to_remove + plan.num_to_keep != len(ranked):
        raise ValueError(
            f"Plan for {plan.num_to_remove + plan.num_to_keep} splats "
            f"applied to a scene of {len(ranked)}")
    return ranked[plan.start:]
