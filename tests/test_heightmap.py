import os
import sys

import numpy as np
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import noise
from heightmap import Heightmap


def test_new_heightmap_is_flat():
    hmap = Heightmap(4, 3)
    assert hmap.size == (4, 3)
    assert hmap.width == 4 and hmap.height == 3
    assert hmap.values.dtype == np.float32
    assert np.all(hmap.values == 0.0)


def test_values_must_match_size():
    with pytest.raises(ValueError):
        Heightmap(2, 2, np.zeros((3, 2)))
    with pytest.raises(ValueError):
        Heightmap(-1, 2)


def test_from_array_and_copy():
    hmap = Heightmap.from_array([[1, 2, 3], [4, 5, 6]])
    assert hmap.size == (2, 3)
    assert hmap.get(1, 2) == 6.0
    dup = hmap.copy()
    dup.values[0, 0] = 50
    assert hmap.get(0, 0) == 1.0
    with pytest.raises(ValueError):
        Heightmap.from_array([1, 2, 3])


def test_arithmetic_chains_in_place():
    hmap = Heightmap(2, 2).fill(3)
    assert hmap.add(1).mul(2).pow(2) is hmap
    assert np.all(hmap.values == 64.0)
    other = Heightmap.from_array([[1, 100], [-100, 10]])
    hmap.min(other)
    assert hmap.values.tolist() == [[1.0, 64.0], [-100.0, 10.0]]
    hmap.abs().max(Heightmap(2, 2).fill(20))
    assert hmap.values.tolist() == [[20.0, 64.0], [100.0, 20.0]]
    hmap.clamp(25, 80)
    assert hmap.values.tolist() == [[25.0, 64.0], [80.0, 25.0]]


def test_size_mismatch_is_rejected():
    with pytest.raises(ValueError):
        Heightmap(2, 2).add(Heightmap(3, 2))


def test_noise_is_deterministic_and_seeded():
    a = Heightmap(16, 16).noise((0, 0), 0.05, 3, 10.0, 99)
    b = Heightmap(16, 16).noise((0, 0), 0.05, 3, 10.0, 99)
    c = Heightmap(16, 16).noise((0, 0), 0.05, 3, 10.0, 100)
    assert np.array_equal(a.values, b.values)
    assert not np.array_equal(a.values, c.values)
    assert 0.0 < np.abs(a.values).max() <= 15.0


def test_noise_tiles_across_regions():
    whole = Heightmap(32, 16).noise((-16, 8), 0.03, 2, 1.0, 5)
    left = Heightmap(16, 16).noise((-16, 8), 0.03, 2, 1.0, 5)
    right = Heightmap(16, 16).noise((0, 8), 0.03, 2, 1.0, 5)
    assert np.allclose(whole.values[:16], left.values)
    assert np.allclose(whole.values[16:], right.values)


def test_noise_scale_must_be_positive():
    with pytest.raises(ValueError):
        Heightmap(2, 2).noise((0, 0), 0, 1, 1.0, 1)


def test_wide_seeds_fold_into_numpy_range():
    assert 0 <= noise.seed32(2**63 + 12345) < 2**32
    assert 0 <= noise.seed32(-1) < 2**32
    n = noise.SimplexNoise(2**62 + 7)
    assert n.perm0.shape == (512,)


def test_noise_far_from_origin():
    for offset in [(-160, -160), (-1600, 0), (20000, 0), (0, -20000)]:
        hmap = Heightmap(16, 16).noise(offset, 0.02, 1, 1.0, 5)
        assert np.abs(hmap.values).max() > 0.0, offset


def test_noise_is_continuous_across_lattice_wrap():
    # the skewed lattice x runs across 256 and across 0
    for offset in [(9340, 0), (-40, 0)]:
        hmap = Heightmap(80, 4).noise(offset, 0.02, 1, 1.0, 5)
        steps = np.abs(np.diff(hmap.values, axis=0))
        assert steps.max() < 0.3, offset
        assert np.abs(hmap.values[-16:]).max() > 0.0


def test_noise_tiles_at_negative_offsets():
    whole = Heightmap(32, 16).noise((-3232, -480), 0.03, 2, 1.0, 5)
    left = Heightmap(16, 16).noise((-3232, -480), 0.03, 2, 1.0, 5)
    right = Heightmap(16, 16).noise((-3216, -480), 0.03, 2, 1.0, 5)
    assert np.allclose(whole.values[:16], left.values)
    assert np.allclose(whole.values[16:], right.values)
    assert np.abs(whole.values).max() > 0.0
