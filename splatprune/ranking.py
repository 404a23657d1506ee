"""Ordering of splat records by effective visibility."""

import numpy as np


def rank_by_visibility(records: np.ndarray) -> np.ndarray:
    """
    Sort splat records by ascending visibility.

    The sort is stable, so splats with equal visibility keep their input
    order and identical input always produces identical output. Records with
    a NaN opacity end up last.

    Args:
        records: Array of SPLAT_DTYPE records, as returned by `assemble`.

    Returns:
        A new read-only record array, least visible splat first.
    """
    order = np.argsort(records["visibility"], kind="stable")
    ranked = records[order]
    ranked.flags.writeable = False
    return ranked
