"""Unit tests for the benchmark result cache."""

import csv
import os

import numpy as np
import pytest

from lgss_bench.benchmark import BenchmarkConfig, default_strategies
from lgss_bench.errors import ConfigurationError
from lgss_bench.filters.resampling import resampler
from lgss_bench.utils.result_cache import ResultCache, config_key


@pytest.fixture
def cache(tmp_path):
    return ResultCache(os.path.join(tmp_path, 'cache', 'lgss'))


class TestResultCache:

    def test_creates_directory_and_log(self, cache):
        assert os.path.isdir(cache.cache_dir)
        with open(cache.log_file, newline='') as f:
            assert next(csv.reader(f)) == ResultCache.LOG_COLUMNS

    def test_save_and_load(self, cache, rng):
        key = config_key(BenchmarkConfig.trial())
        scores = rng.random((10, 3))

        path = cache.save('SMC', key, scores)

        assert os.path.exists(path)
        assert cache.exists('SMC', key)
        np.testing.assert_array_equal(cache.load('SMC', key), scores)

    def test_load_missing_returns_none(self, cache):
        assert cache.load('Herding', config_key(BenchmarkConfig.trial())) is None

    def test_keys_distinguish_configs(self, cache):
        k1 = config_key(BenchmarkConfig.trial(seed=0))
        k2 = config_key(BenchmarkConfig.trial(seed=1))

        assert cache.get_cache_path('SMC', k1) != cache.get_cache_path('SMC', k2)
        assert cache.get_cache_path('SMC', k1) != cache.get_cache_path('Herding', k1)

    def test_keys_distinguish_strategy_sets(self, cache):
        config = BenchmarkConfig.trial()
        full = default_strategies(config.T)
        keys = [
            config_key(config, full),
            config_key(config, {'Herding': full['Herding']}),
            config_key(config, {**full, 'SMC': resampler('systematic')}),
            config_key(config, dict(reversed(list(full.items())))),
        ]

        assert len({cache.get_cache_path('Herding', k) for k in keys}) == len(keys)

    def test_untagged_strategy_rejected(self):
        def keep_all(population, rng):
            return population

        with pytest.raises(ConfigurationError):
            config_key(BenchmarkConfig.trial(), {'Identity': keep_all})

    def test_log_row_appended(self, cache):
        key = config_key(BenchmarkConfig.trial())
        cache.save('NewHerding', key, np.ones((2, 3)), runtime_sec=1.5)

        with open(cache.log_file, newline='') as f:
            rows = list(csv.DictReader(f))

        assert len(rows) == 1
        assert rows[0]['strategy'] == 'NewHerding'
        assert rows[0]['T'] == '5'
        assert rows[0]['runtime_sec'] == '1.50'

    def test_clear(self, cache):
        key = config_key(BenchmarkConfig.trial())
        cache.save('SMC', key, np.ones((2, 3)))
        cache.save('Herding', key, np.ones((2, 3)))

        assert cache.clear() == 2
        assert not cache.exists('SMC', key)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
