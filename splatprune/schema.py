"""Attribute schema and fixed settings for opacity pruning."""

from typing import List, Tuple

VERTEX_ELEMENT = "vertex"

F_REST_COUNT = 45

POSITION_ATTRIBUTES = ("x", "y", "z")
NORMAL_ATTRIBUTES = ("nxx", "ny", "nz")
F_DC_ATTRIBUTES = ("f_dc_0", "f_dc_1", "f_dc_2")
F_REST_ATTRIBUTES = tuple(f"f_rest_{i}" for i in range(F_REST_COUNT))
OPACITY_ATTRIBUTE = "opacity"
SCALE_ATTRIBUTES = ("scale_0", "scale_1", "scale_2")
ROTATION_ATTRIBUTES = ("rot_0", "rot_1", "rot_2", "rot_3")

# Record field -> PLY properties it is built from, in write order.
FIELD_ATTRIBUTES: List[Tuple[str, Tuple[str, ...]]] = [
    ("position", POSITION_ATTRIBUTES),
    ("normal", NORMAL_ATTRIBUTES),
    ("f_dc", F_DC_ATTRIBUTES),
    ("f_rest", F_REST_ATTRIBUTES),
    ("opacity", (OPACITY_ATTRIBUTE,)),
    ("scale", SCALE_ATTRIBUTES),
    ("rot", ROTATION_ATTRIBUTES),
]

PLY_ATTRIBUTES = tuple(name for _, names in FIELD_ATTRIBUTES for name in names)

DEFAULT_PERCENTAGES = (10, 20, 30, 40, 50)

OUTPUT_SUFFIX = "_pruned_opacity_"


def output_filename(base_name: str, percentage: int) -> str:
    """Name of the pruned scene written for `percentage`."""
    return f"{base_name}{OUTPUT_SUFFIX}{percentage}.ply"
