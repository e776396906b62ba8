import math

import numpy as np
import pytest
from scipy import stats as scipy_stats

from datakit.stats.reduction import sample_max, sample_min
from datakit.variates import exponential, normal, uniform


def test_generators_have_the_right_length():
    assert len(uniform(100)) == 100
    assert len(normal(100)) == 100
    assert len(exponential(100)) == 100
    assert len(normal(3)) == 3


def test_zero_count_returns_empty():
    assert uniform(0).size == 0
    assert normal(0).size == 0
    assert exponential(0).size == 0


def test_uniform_boundaries():
    u = uniform(1000)
    assert sample_min(u) > 0
    assert sample_max(u) < 1


def test_normals_from_box_muller():
    n = normal(100, rng=2024)
    z1, z2 = n[0], n[1]
    u = math.exp(((z1**2 + z2**2) ** 2) * (-2))
    assert 0 < u < 1


def test_box_muller_radius_recovers_a_uniform():
    n = normal(200, rng=7)
    radius_sq = n[0::2] ** 2 + n[1::2] ** 2
    u1 = np.exp(-radius_sq / 2.0)
    assert np.all(u1 > 0)
    assert np.all(u1 < 1)


def test_odd_count_keeps_pair_prefix():
    assert np.array_equal(normal(5, rng=11), normal(6, rng=11)[:5])


def test_each_output_pair_uses_one_uniform_pair():
    u = np.random.default_rng(9).random((2, 2))
    radius = np.sqrt(-2.0 * np.log(u[:, 0]))
    angle = 2.0 * math.pi * u[:, 1]
    expected = [
        radius[0] * np.cos(angle[0]),
        radius[0] * np.sin(angle[0]),
        radius[1] * np.cos(angle[1]),
        radius[1] * np.sin(angle[1]),
    ]
    np.testing.assert_allclose(normal(4, rng=9), expected, rtol=0, atol=1e-15)


def test_exponentials_from_uniforms():
    e = exponential(100)
    assert np.all(e > 0)
    u = np.exp(-e)
    assert np.all(u > 0)
    assert np.all(u < 1)


def test_seeded_draws_are_reproducible():
    assert np.array_equal(uniform(10, rng=42), uniform(10, rng=42))
    assert np.array_equal(normal(10, rng=42), normal(10, rng=42))
    assert np.array_equal(exponential(10, rng=42), exponential(10, rng=42))


def test_generator_instance_is_used_as_source():
    gen = np.random.default_rng(5)
    first = uniform(4, rng=gen)
    second = uniform(4, rng=gen)
    assert not np.array_equal(first, second)


def test_distributions_pass_ks_check():
    assert scipy_stats.kstest(uniform(2000, rng=3), "uniform").pvalue > 1e-3
    assert scipy_stats.kstest(normal(2000, rng=3), "norm").pvalue > 1e-3
    assert scipy_stats.kstest(exponential(2000, rng=3), "expon").pvalue > 1e-3


@pytest.mark.parametrize("func", [uniform, normal, exponential])
@pytest.mark.parametrize("bad", [-1, 2.5, True])
def test_invalid_count_raises(func, bad):
    with pytest.raises(ValueError):
        func(bad)
