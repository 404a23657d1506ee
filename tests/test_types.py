"""Tests for the splat record dtype and visibility."""

import numpy as np

from splatprune import SPLAT_DTYPE, visibility


def test_visibility_at_zero_is_half():
    """Test visibility of a zero logit is exactly 0.5."""
    assert visibility(0.0) == 0.5


def test_visibility_strictly_increasing():
    """Test visibility grows strictly with the logit over a realistic range."""
    logits = np.linspace(-10.0, 10.0, 101)

    result = visibility(logits)

    assert np.all(np.diff(result) > 0)


def test_visibility_saturates_at_extremes():
    """Test extreme logits give 0 and 1 without overflow errors."""
    assert visibility(-1e4) == 0.0
    assert visibility(1e4) == 1.0
    assert visibility(-np.inf) == 0.0
    assert visibility(np.inf) == 1.0


def test_visibility_is_float32():
    """Test visibility is computed at storage precision."""
    assert visibility(np.array([0.5, -2.0])).dtype == np.float32
    assert visibility(1.0).dtype == np.float32


def test_visibility_matches_sigmoid():
    logits = np.array([-3.0, -0.5, 0.25, 4.0], dtype=np.float32)

    expected = 1.0 / (1.0 + np.exp(-logits.astype(np.float64)))

    np.testing.assert_allclose(visibility(logits), expected, rtol=1e-6)


def test_record_dtype_has_fixed_f_rest_width():
    """Test every record carries exactly 45 extended color coefficients."""
    assert SPLAT_DTYPE["f_rest"].shape == (45,)
    assert SPLAT_DTYPE["rot"].shape == (4,)
    assert SPLAT_DTYPE["opacity"] == np.float32
