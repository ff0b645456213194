"""
Result Cache - Reuse benchmark scores across runs.

Scores are cached per strategy as numpy arrays saved to disk, so a rerun
with the same configuration only recomputes the strategies that are missing.
"""
import os
import csv
import hashlib
import numpy as np
from dataclasses import asdict
from datetime import datetime
from typing import Dict, List, Optional, Any

from ..errors import ConfigurationError


class ResultCache:
    """
    Per-strategy cache of benchmark score matrices.

    Features:
    - One compressed .npz file per (strategy, configuration)
    - Single CSV log file tracking saved runs

    Usage:
        cache = ResultCache('cache/lgss/')
        key = config_key(config, strategies)

        if cache.exists('SMC', key):
            scores = cache.load('SMC', key)
        else:
            scores = run_strategy(...)
            cache.save('SMC', key, scores)
    """

    LOG_COLUMNS = [
        'timestamp', 'strategy', 'T', 'n_runs', 'particle_counts', 'seed',
        'mean_score', 'runtime_sec', 'cache_file'
    ]

    def __init__(self, cache_dir: str):
        """
        Parameters
        ----------
        cache_dir : str
            Directory holding the .npz files and run_log.csv. Created if missing.
        """
        self.cache_dir = cache_dir
        self.log_file = os.path.join(cache_dir, 'run_log.csv')

        os.makedirs(self.cache_dir, exist_ok=True)
        self._init_csv_file(self.log_file, self.LOG_COLUMNS)

    def _init_csv_file(self, filepath: str, columns: List[str]) -> None:
        """Create CSV file with headers if it doesn't exist."""
        if not os.path.exists(filepath):
            with open(filepath, 'w', newline='') as f:
                writer = csv.DictWriter(f, fieldnames=columns)
                writer.writeheader()

    @staticmethod
    def _get_config_hash(strategy: str, key: Dict[str, Any]) -> str:
        """Short md5 hash of the strategy name and sorted configuration items."""
        key_parts = [strategy] + [f"{k}={key[k]}" for k in sorted(key)]
        key_str = "_".join(key_parts)
        return hashlib.md5(key_str.encode()).hexdigest()[:12]

    def get_cache_path(self, strategy: str, key: Dict[str, Any]) -> str:
        """Full path to the cache file for a strategy + configuration."""
        safe_name = strategy.replace(' ', '_')
        filename = f"{safe_name}_{self._get_config_hash(strategy, key)}.npz"
        return os.path.join(self.cache_dir, filename)

    def exists(self, strategy: str, key: Dict[str, Any]) -> bool:
        return os.path.exists(self.get_cache_path(strategy, key))

    def save(
        self,
        strategy: str,
        key: Dict[str, Any],
        scores: np.ndarray,
        runtime_sec: float = 0.0
    ) -> str:
        """
        Save a score matrix [n_runs, n_counts] and append a log row.

        Returns
        -------
        str
            Path to saved cache file
        """
        cache_path = self.get_cache_path(strategy, key)
        np.savez_compressed(cache_path, scores=np.asarray(scores))

        row = {
            'timestamp': datetime.now().strftime('%Y-%m-%d_%H-%M-%S'),
            'strategy': strategy,
            'T': key.get('T', ''),
            'n_runs': key.get('n_runs', ''),
            'particle_counts': key.get('particle_counts', ''),
            'seed': key.get('seed', ''),
            'mean_score': f"{np.mean(scores):.6f}" if np.size(scores) else '',
            'runtime_sec': f"{runtime_sec:.2f}",
            'cache_file': os.path.basename(cache_path),
        }
        with open(self.log_file, 'a', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=self.LOG_COLUMNS)
            writer.writerow(row)

        print(f"  Cached {strategy}: {os.path.basename(cache_path)}")
        return cache_path

    def load(self, strategy: str, key: Dict[str, Any]) -> Optional[np.ndarray]:
        """Load a cached score matrix, or None if absent."""
        cache_path = self.get_cache_path(strategy, key)
        if not os.path.exists(cache_path):
            return None

        with np.load(cache_path) as npz:
            scores = npz['scores']

        print(f"  Loaded cached {strategy}: {os.path.basename(cache_path)}")
        return scores

    def clear(self) -> int:
        """
        Remove all cached score files.

        Returns
        -------
        int
            Number of cache files removed
        """
        count = 0
        for f in os.listdir(self.cache_dir):
            if f.endswith('.npz'):
                os.remove(os.path.join(self.cache_dir, f))
                count += 1
        print(f"Removed {count} cache files.")
        return count


def config_key(config, strategies=None) -> Dict[str, Any]:
    """
    Flatten a BenchmarkConfig into the dict used for cache hashing.

    Parameters
    ----------
    config : BenchmarkConfig
    strategies : dict, optional
        Name -> resampler. Every resampler must carry a cache_tag naming its
        scheme or kernel. The ordered names and tags are part of the key,
        since they fix how each trial stream is consumed.

    Raises
    ------
    ConfigurationError
        If a strategy has no cache_tag, so its scores cannot be identified.
    """
    key = {
        'T': config.T,
        'n_runs': config.n_runs,
        'particle_counts': ','.join(str(n) for n in config.particle_counts),
        'seed': config.seed,
    }
    key.update({f"param.{k}": v for k, v in asdict(config.param).items()})
    if strategies is not None:
        untagged = [name for name, fn in strategies.items() if not hasattr(fn, 'cache_tag')]
        if untagged:
            raise ConfigurationError(f"strategies without a cache_tag cannot be cached: {untagged}")
        key['strategies'] = ';'.join(f"{name}={fn.cache_tag}" for name, fn in strategies.items())
    return key
