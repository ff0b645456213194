"""
Particle-count benchmark: SMC vs kernel herding resampling on the LGSSM.

For every trial a fresh observation sequence is drawn from the prior, the
Kalman filter gives the exact final filtering mean, and each strategy is
scored by the absolute error of its estimate at every particle count.
"""
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .errors import ConfigurationError
from .filters.herding import herding_resampler, gaussian_kernel, horizon_gaussian_kernel
from .filters.kf import kalman_filter
from .filters.pf import smc
from .filters.population import normalize, pop_avg, last_state
from .filters.resampling import resampler
from .ssm.linear_gaussian import LGSSParam, synthesize_data
from .utils.metrics import compute_rmse, standard_error
from .utils.result_cache import config_key


def default_param():
    return LGSSParam(p0=(0.0, 1.0), a=1.0, b=0.0, sd_x=1.0, c=1.0, d=0.0, sd_y=1.0)


@dataclass
class BenchmarkConfig:
    """
    Attributes
    ----------
    T : int
        Observation sequence length
    n_runs : int
        Number of independent trials
    particle_counts : tuple of int
        Particle budgets, in plotting order
    param : LGSSParam
    seed : int
        Root seed; trial i uses the i-th spawned child stream
    """
    T: int = 50
    n_runs: int = 100
    particle_counts: Tuple[int, ...] = tuple(2 ** k for k in range(1, 11))
    param: LGSSParam = field(default_factory=default_param)
    seed: int = 0

    @classmethod
    def full(cls, seed=0):
        return cls(T=50, n_runs=100, particle_counts=tuple(2 ** k for k in range(1, 11)), seed=seed)

    @classmethod
    def trial(cls, seed=0):
        """Quick configuration to check that everything runs."""
        return cls(T=5, n_runs=10, particle_counts=(10, 20, 40), seed=seed)

    def validate(self):
        self.param.validate()
        if self.T < 1:
            raise ConfigurationError(f"T must be at least 1, got {self.T}")
        if self.n_runs < 1:
            raise ConfigurationError(f"n_runs must be at least 1, got {self.n_runs}")
        if not self.particle_counts:
            raise ConfigurationError("particle_counts is empty")
        bad = [n for n in self.particle_counts if n <= 0]
        if bad:
            raise ConfigurationError(f"particle counts must be positive, got {bad}")
        return self

    def trial_rngs(self):
        """One independent generator per trial."""
        children = np.random.SeedSequence(self.seed).spawn(self.n_runs)
        return [np.random.default_rng(s) for s in children]


def default_strategies(T) -> Dict[str, Callable]:
    """The three compared resampling strategies, in plotting order."""
    return {
        'SMC': resampler('multinomial'),
        'Herding': herding_resampler(gaussian_kernel(1.0)),
        'NewHerding': herding_resampler(horizon_gaussian_kernel(T)),
    }


def filtering_error(param, ys, n_particles, resample, rng, true_mean):
    """Absolute error of the SMC estimate of the final filtering mean."""
    result = smc(param, ys, n_particles, resample, rng)
    est_mean = pop_avg(last_state, normalize(result.population))
    return abs(true_mean - est_mean)


def run_trial(config, strategies, rng) -> Dict[str, List[float]]:
    """
    Score each strategy at every particle count on one synthetic sequence.

    All draws come from rng in a fixed order: the data, then each strategy
    in turn over the particle counts.
    """
    ys = synthesize_data(config.param, config.T, rng)
    m_filt, _, _ = kalman_filter(config.param, ys)
    true_mean = m_filt[-1]

    return {
        name: [filtering_error(config.param, ys, n, strategies[name], rng, true_mean)
               for n in config.particle_counts]
        for name in strategies
    }


def run_benchmark(
    config: BenchmarkConfig,
    strategies: Optional[Dict[str, Callable]] = None,
    cache=None
) -> Dict[str, List[Tuple[int, np.ndarray]]]:
    """
    Run every trial and collect per-count score samples for each strategy.

    Parameters
    ----------
    config : BenchmarkConfig
    strategies : dict, optional
        Name -> resample(population, rng). Defaults to default_strategies(T).
    cache : ResultCache, optional
        Score matrices are loaded from and saved to this cache per strategy.
        Every strategy must carry a cache_tag when a cache is given.

    Returns
    -------
    dict
        Name -> [(particle count, scores across trials [n_runs])]
    """
    config.validate()
    if strategies is None:
        strategies = default_strategies(config.T)

    scores: Dict[str, np.ndarray] = {}
    if cache is not None:
        key = config_key(config, strategies)
        for name in strategies:
            cached = cache.load(name, key)
            if cached is not None:
                scores[name] = cached

    missing = [name for name in strategies if name not in scores]
    if missing:
        t0 = time.perf_counter()
        runs = {name: np.zeros((config.n_runs, len(config.particle_counts))) for name in missing}
        for i, rng in enumerate(config.trial_rngs()):
            # every strategy runs so the shared trial stream is consumed in a fixed order
            trial_scores = run_trial(config, strategies, rng)
            for name in missing:
                runs[name][i] = trial_scores[name]
            print(f"  Trial {i + 1}/{config.n_runs} done")
        runtime = time.perf_counter() - t0

        for name in missing:
            scores[name] = runs[name]
            if cache is not None:
                cache.save(name, key, runs[name], runtime_sec=runtime / len(missing))

    return {
        name: list(zip(config.particle_counts, scores[name].T))
        for name in strategies
    }


def summarize(points: Dict[str, Sequence[Tuple[int, np.ndarray]]]) -> Dict[str, List[Tuple[int, float, float, float]]]:
    """
    Per strategy and particle count: (n, mean, standard error, RMSE).

    Scores are absolute errors, so the RMSE is taken against zero.
    """
    return {
        name: [(n, float(np.mean(s)), standard_error(s), float(compute_rmse(s, 0.0)))
               for n, s in series]
        for name, series in points.items()
    }
