"""Sequential Monte Carlo (bootstrap particle filter) with pluggable resampling."""
from dataclasses import dataclass, field
from typing import List

import numpy as np

from ..errors import ConfigurationError
from ..ssm.linear_gaussian import (
    sample_initial, sample_transition, observation_log_likelihood,
)
from .population import (
    Population, empty_population, normalize, pop_avg, last_state, effective_sample_size,
)
from .resampling import resampler as make_resampler
from .herding import herding_resampler


@dataclass
class SMCResult:
    """
    Output of an SMC run.

    Attributes
    ----------
    population : Population
        Final population of trajectories X_{1:T} after the last resampling
    m_filt : ndarray [T]
        Filtering mean estimates E[X_t | Y_{1:t}]
    ess : ndarray [T]
        Effective sample size after each correction
    log_evidence : float
        Estimate of log p(Y_{1:T})
    history : list of Population
        Corrected populations before resampling (only if store_history=True)
    """
    population: Population
    m_filt: np.ndarray
    ess: np.ndarray
    log_evidence: float
    history: List[Population] = field(default_factory=list)


def smc(param, ys, n_particles, resample=None, rng=None, store_history=False):
    """
    Sequential importance sampling with resampling after every observation.

    Parameters
    ----------
    param : LGSSParam
    ys : ndarray [T]
        Observations
    n_particles : int
        Number of particles N, constant over the run
    resample : callable, optional
        resample(population, rng) -> Population (default: multinomial)
    rng : np.random.Generator
    store_history : bool
        Keep the weighted population of every step

    Returns
    -------
    SMCResult
    """
    if n_particles is None or n_particles <= 0:
        raise ConfigurationError(f"n_particles must be positive, got {n_particles}")
    param.validate()
    if rng is None:
        rng = np.random.default_rng()
    if resample is None:
        resample = make_resampler('multinomial')

    ys = np.asarray(ys, dtype=float)
    T, N = ys.shape[0], n_particles

    x = sample_initial(param, N, rng)
    population = empty_population(N)

    m_filt = np.zeros(T)
    ess = np.zeros(T)
    history: List[Population] = []

    for t in range(T):
        # Propagate
        x = sample_transition(param, x, rng)
        population = population.extend(x)

        # Correct
        population = population.reweight(observation_log_likelihood(param, ys[t], x))
        normalized = normalize(population)
        m_filt[t] = pop_avg(last_state, normalized)
        ess[t] = effective_sample_size(normalized.weights)
        if store_history:
            history.append(population)

        # Resample
        population = resample(population, rng)
        if population.size != N:
            raise RuntimeError(f"resampler returned {population.size} particles, expected {N}")
        x = last_state(population.trajectories)

    log_evidence = float(population.log_total_weight() - np.log(N))
    return SMCResult(population, m_filt, ess, log_evidence, history)


def particle_filter(param, ys, N_particles=1000, rng=None):
    """Bootstrap particle filter with multinomial resampling."""
    return smc(param, ys, N_particles, make_resampler('multinomial'), rng)


def smc_herding(param, ys, n_particles, kernel, rng=None, store_history=False):
    """SMC whose resampling step is kernel herding under the given kernel."""
    return smc(param, ys, n_particles, herding_resampler(kernel), rng, store_history)
