"""Unit tests for random resampling schemes."""

import numpy as np
import pytest

from lgss_bench.filters.resampling import (
    resampler, multinomial_resample, systematic_resample, stratified_resample,
)


class TestResampleIndices:
    """Tests for index-level resampling algorithms."""

    @pytest.mark.parametrize("scheme", [multinomial_resample, systematic_resample, stratified_resample])
    def test_preserves_count_and_valid_indices(self, rng, scheme):
        """Resampling should preserve particle count and produce valid indices."""
        N = 100
        weights = rng.dirichlet(np.ones(N))

        indices = scheme(weights, rng)

        assert len(indices) == N
        assert np.all(indices >= 0)
        assert np.all(indices < N)

    @pytest.mark.parametrize("scheme", [systematic_resample, stratified_resample])
    def test_low_variance_counts(self, rng, scheme):
        """Each index should be copied floor(N w) or ceil(N w) times by systematic schemes."""
        N = 8
        weights = np.array([0.5, 0.25, 0.125, 0.125, 0, 0, 0, 0])

        counts = np.bincount(scheme(weights, rng), minlength=N)

        if scheme is systematic_resample:
            np.testing.assert_array_equal(counts, N * weights)
        assert np.all(counts[weights == 0] == 0)


class TestResampler:
    """Tests for population-level resampling strategies."""

    @pytest.mark.parametrize("scheme", ['multinomial', 'systematic', 'stratified'])
    def test_output_size(self, rng, weighted_population, scheme):
        resampled = resampler(scheme)(weighted_population, rng)

        assert resampled.size == weighted_population.size
        assert resampled.length == weighted_population.length

    def test_total_weight_preserved(self, rng, weighted_population):
        resampled = resampler()(weighted_population, rng)

        np.testing.assert_allclose(resampled.log_total_weight(), weighted_population.log_total_weight())
        np.testing.assert_allclose(np.ptp(resampled.log_weights), 0.0)

    def test_survivors_come_from_input(self, rng, weighted_population):
        resampled = resampler()(weighted_population, rng)
        rows = {tuple(r) for r in weighted_population.trajectories}

        assert all(tuple(r) in rows for r in resampled.trajectories)

    def test_dominant_particle(self, make_population):
        """A particle with weight ~1 should fill more than 95% of the output."""
        N = 1000
        weights = np.full(N, 0.01 / (N - 1))
        weights[17] = 0.99
        pop = make_population(np.arange(N, dtype=float), weights)

        resampled = resampler('multinomial')(pop, np.random.default_rng(3))

        share = np.mean(resampled.trajectories[:, -1] == 17.0)
        assert share > 0.95

    def test_seeded_reproducibility(self, weighted_population):
        r1 = resampler()(weighted_population, np.random.default_rng(5))
        r2 = resampler()(weighted_population, np.random.default_rng(5))

        np.testing.assert_array_equal(r1.trajectories, r2.trajectories)

    def test_unknown_scheme(self):
        with pytest.raises(ValueError):
            resampler('residual')

    def test_cache_tags_name_the_scheme(self):
        tags = [resampler(s).cache_tag for s in ('multinomial', 'systematic', 'stratified')]

        assert tags == ['resample:multinomial', 'resample:systematic', 'resample:stratified']


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
