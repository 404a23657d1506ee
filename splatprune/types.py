"""Record model for a single Gaussian splat.

A scene is held as one numpy structured array of SPLAT_DTYPE records, so a
sort moves whole records instead of indices.
"""

import numpy as np

from .schema import F_REST_COUNT

SPLAT_DTYPE = np.dtype([
    ("position", np.float32, (3,)),
    ("normal", np.float32, (3,)),
    ("f_dc", np.float32, (3,)),
    ("f_rest", np.float32, (F_REST_COUNT,)),
    ("opacity", np.float32),
    ("scale", np.float32, (3,)),
    ("rot", np.float32, (4,)),
    ("visibility", np.float32),
])

_ONE = np.float32(1.0)


def visibility(opacity_logit):
    """
    Effective opacity of a splat: sigmoid of the stored logit, in float32.

    Works on scalars and arrays. Very large negative logits give 0 and very
    large positive ones give 1.

    Args:
        opacity_logit: Stored (pre-activation) opacity value(s).

    Returns:
        np.float32 or np.ndarray of np.float32 in [0, 1].
    """
    logit = np.asarray(opacity_logit, dtype=np.float32)
    with np.errstate(over="ignore"):
        return _ONE / (_ONE + np.exp(-logit))


def empty_records(count: int = 0) -> np.ndarray:
    """Zero-filled record array of length `count`."""
    return np.zeros(count, dtype=SPLAT_DTYPE)
