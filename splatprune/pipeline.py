"""
One-shot opacity pruning: load, assemble, rank once, then write one pruned
scene per requested level from the shared ranked array.
"""

from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple
import os

import numpy as np
from tqdm import tqdm

from .assemble import assemble, disassemble
from .config import PruneConfig
from .planner import PrunePlan, kept_slice, plan_levels
from .ply_io import read_scene, write_scene
from .ranking import rank_by_visibility
from .schema import output_filename


def load_ranked_scene(input_file: str) -> Tuple[np.ndarray, str]:
    """Read a scene and return (records sorted by visibility, input byte order)."""
    columns, byte_order = read_scene(input_file)
    return rank_by_visibility(assemble(columns)), byte_order


def write_levels(ranked: np.ndarray,
                 plans: Sequence[PrunePlan],
                 base_name: str,
                 output_dir: str,
                 byte_order: str = "<",
                 show_progress: bool = True) -> List[Dict[str, Any]]:
    """
    Write the kept slice of `ranked` for every plan.

    Files already written stay on disk if a later level fails.

    Returns:
        One summary dict per plan, in plan order.
    """
    outputs = []
    for plan in tqdm(plans, desc="Writing pruned scenes", unit="scene",
                     disable=not show_progress):
        kept = kept_slice(ranked, plan)
        output_file = os.path.join(output_dir, output_filename(base_name, plan.percentage))
        write_scene(output_file, disassemble(kept), byte_order)

        outputs.append({
            "percentage": plan.percentage,
            "output_file": output_file,
            "points_removed": plan.num_to_remove,
            "points_kept": plan.num_to_keep,
            "min_visibility": float(kept["visibility"][0]) if len(kept) else None,
        })
    return outputs


def run_pruning(config: PruneConfig) -> Dict[str, Any]:
    """
    Prune a splat scene at every level in `config.percentages`.

    Args:
        config: Run configuration.

    Returns:
        Dict with 'points_loaded', 'outputs_written', 'total_points_written'
        and 'outputs' (per-level summaries from `write_levels`).

    Raises:
        SchemaError: If the input lacks a required attribute.
        OSError: If the input cannot be read or an output cannot be written.
    """
    show_progress = config.show_progress
    os.makedirs(config.output_dir, exist_ok=True)

    if show_progress:
        print(f"Reading input .ply file {config.input_file}...")
    ranked, byte_order = load_ranked_scene(config.input_file)
    if show_progress:
        print(f"Loaded {len(ranked):,} splats from input .ply file.")

    plans = plan_levels(len(ranked), config.percentages)
    outputs = write_levels(ranked, plans, Path(config.input_file).stem,
                           config.output_dir, byte_order, show_progress)

    if show_progress:
        for output in outputs:
            print(f"Pruned {output['percentage']}%: kept {output['points_kept']:,} "
                  f"of {len(ranked):,} splats -> {output['output_file']}")

    return {
        "points_loaded": len(ranked),
        "outputs_written": len(outputs),
        "total_points_written": sum(output["points_kept"] for output in outputs),
        "outputs": outputs,
    }
