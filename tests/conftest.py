"""Shared fixtures: synthetic splat attributes and PLY scenes."""

import numpy as np
import pytest

from splatprune import PLY_ATTRIBUTES, write_scene


def make_columns(opacities, seed=0):
    """Random float32 attributes with the given opacity logits; x is the input index."""
    rng = np.random.default_rng(seed)
    count = len(opacities)
    columns = {name: rng.standard_normal(count).astype(np.float32)
               for name in PLY_ATTRIBUTES}
    columns["x"] = np.arange(count, dtype=np.float32)
    columns["opacity"] = np.asarray(opacities, dtype=np.float32)
    return columns


@pytest.fixture
def columns_factory():
    return make_columns


@pytest.fixture
def scene_file(tmp_path):
    """Write a splat scene with the given opacity logits and return its path."""
    def _write(opacities, name="scene.ply", seed=0):
        path = tmp_path / name
        write_scene(str(path), make_columns(opacities, seed))
        return path
    return _write
