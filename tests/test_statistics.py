import math

import numpy as np
import pytest

from LWIRUncertainty import (NonFiniteResultError, ParticleDistribution,
                             TailProbabilities, mean_and_variance)


def test_matches_numpy_population_statistics():
    samples = np.random.default_rng(0).normal(300.0, 0.2, size=5000)

    summary = mean_and_variance(samples)

    assert summary.count == 5000
    assert summary.mean == pytest.approx(np.mean(samples), rel=1e-12)
    assert summary.variance == pytest.approx(np.var(samples), rel=1e-9)


def test_order_independent():
    samples = np.random.default_rng(1).uniform(275.0, 276.0, size=1000)
    shuffled = np.random.default_rng(2).permutation(samples)

    a = mean_and_variance(samples)
    b = mean_and_variance(shuffled)

    assert a.mean == pytest.approx(b.mean, rel=1e-12)
    assert a.variance == pytest.approx(b.variance, rel=1e-9)


def test_single_sample_has_zero_variance():
    summary = mean_and_variance([275.76])

    assert summary.mean == 275.76
    assert summary.variance == 0.0


def test_stable_for_large_offset():
    # Tiny spread on a large mean
    samples = 1e9 + np.array([4.0, 7.0, 13.0, 16.0])

    assert mean_and_variance(samples).variance == pytest.approx(22.5)


def test_empty_buffer_is_rejected():
    with pytest.raises(ValueError):
        mean_and_variance([])


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_samples_are_rejected(bad):
    with pytest.raises(NonFiniteResultError):
        mean_and_variance([275.0, bad, 276.0])


def test_particle_distribution_arithmetic():
    d = ParticleDistribution([1.0, 2.0, 3.0, 4.0])

    assert (2 * d + 1).mean == pytest.approx(6.0)
    assert (d - d).variance == 0.0
    assert (1 / d).particles.tolist() == pytest.approx([1.0, 0.5, 1 / 3, 0.25])
    assert np.log(np.exp(d)).particles == pytest.approx(d.particles)
    assert isinstance(np.exp(d), ParticleDistribution)


def test_particle_distribution_statistics():
    d = ParticleDistribution([1.0, 2.0, 3.0, 4.0])

    assert d.mean == 2.5
    assert d.variance == pytest.approx(1.25)
    assert d.probability_greater_than(2.5) == 0.5
    assert d.probability_greater_than(4.0) == 0.0
    assert d.isfinite()


def test_particle_distribution_rejects_bad_shapes():
    with pytest.raises(ValueError):
        ParticleDistribution([])
    with pytest.raises(ValueError):
        ParticleDistribution([[1.0, 2.0]])


def test_particle_distributions_must_agree_in_size():
    with pytest.raises(ValueError):
        ParticleDistribution([1.0, 2.0]) + ParticleDistribution([1.0, 2.0, 3.0])


def test_tail_probabilities_are_monotonic():
    particles = np.random.default_rng(3).uniform(270.0, 282.0, size=20000)

    tails = TailProbabilities.from_result(ParticleDistribution(particles))

    assert tails.nominal == pytest.approx(276.0, abs=0.1)
    assert tails.greater_than[1] >= tails.greater_than[2] >= tails.greater_than[5]
    assert tails.smaller_than[1] >= tails.smaller_than[2] >= tails.smaller_than[5]
    for p in (1, 2, 5):
        assert 0.0 <= tails.greater_than[p] <= 1.0
        assert 0.0 <= tails.smaller_than[p] <= 1.0
    # +-5% of 276 K lies outside the support
    assert tails.greater_than[5] == 0.0
    assert tails.smaller_than[5] == 0.0


def test_tail_probabilities_are_not_mirrored():
    skewed = ParticleDistribution([100.0] * 90 + [110.0] * 10)

    tails = TailProbabilities.from_result(skewed)

    assert tails.nominal == pytest.approx(101.0)
    assert tails.greater_than[1] == pytest.approx(0.1)
    assert tails.smaller_than[1] == pytest.approx(0.0)


def test_tail_probabilities_of_a_scalar_are_degenerate():
    tails = TailProbabilities.from_result(275.76)

    assert tails.nominal == 275.76
    assert all(v == 0.0 for v in tails.greater_than.values())
    assert all(v == 0.0 for v in tails.smaller_than.values())
