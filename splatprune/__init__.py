"""
splatprune - shrink 3D Gaussian Splatting scenes by dropping the least
visible splats.

Unified dict/JSON/YAML API, mirroring the per-step modules below.
"""

from .assemble import assemble, disassemble
from .config import PruneConfig, load_config, parse_config
from .errors import PruneError, SchemaError, UsageError
from .pipeline import load_ranked_scene, run_pruning, write_levels
from .planner import PrunePlan, kept_slice, plan_levels, plan_prune
from .ply_io import read_scene, write_scene
from .ranking import rank_by_visibility
from .schema import DEFAULT_PERCENTAGES, PLY_ATTRIBUTES, output_filename
from .types import SPLAT_DTYPE, visibility
from typing import Any, Dict, Union

__version__ = "0.1.0"

__all__ = [
    "prune_by_opacity",
    "PruneConfig",
    "PrunePlan",
    "PruneError",
    "SchemaError",
    "UsageError",
    "SPLAT_DTYPE",
    "DEFAULT_PERCENTAGES",
    "PLY_ATTRIBUTES",
    "assemble",
    "disassemble",
    "kept_slice",
    "load_config",
    "load_ranked_scene",
    "output_filename",
    "parse_config",
    "plan_levels",
    "plan_prune",
    "rank_by_visibility",
    "read_scene",
    "run_pruning",
    "visibility",
    "write_levels",
    "write_scene",
]


def prune_by_opacity(config: Union[PruneConfig, Dict[str, Any], str]) -> Dict[str, Any]:
    """
    Write pruned copies of a splat scene, dropping the lowest-opacity splats.

    The scene is ranked once by sigmoid(opacity); each level P removes the
    floor(N * P / 100) least visible splats and writes the rest to
    `<output_dir>/<input stem>_pruned_opacity_<P>.ply`.

    Args:
        config: Pruning configuration. Can be:
                - PruneConfig object
                - Dictionary with config data (recommended)
                - JSON string with config data
                - Path to a YAML file with config data

    Returns:
        Dict with 'points_loaded', 'outputs_written', 'total_points_written'
        and 'outputs', one entry per level with 'percentage', 'output_file',
        'points_removed', 'points_kept' and 'min_visibility'.

    Configuration format:
        {
            "input_file": str,          # Input 3DGS .ply file
            "output_dir": str,          # Created if missing
            "percentages": [int],       # Optional, default [10, 20, 30, 40, 50]
            "show_progress": bool       # Optional, default True
        }

    Example:
        >>> result = prune_by_opacity({
        ...     "input_file": "scene.ply",
        ...     "output_dir": "/output/pruned",
        ...     "percentages": [25, 50]
        ... })
        >>> result["outputs"][0]["output_file"]
        '/output/pruned/scene_pruned_opacity_25.ply'
    """
    return run_pruning(parse_config(config))
