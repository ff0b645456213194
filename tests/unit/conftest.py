"""Shared pytest fixtures for unit tests."""

import numpy as np
import pytest

from lgss_bench.filters.population import Population
from lgss_bench.ssm import LGSSParam, random_walk_param


@pytest.fixture
def rw_param():
    """Standard-normal random walk used by the benchmark."""
    return random_walk_param((0.0, 1.0), 1.0, 1.0)


@pytest.fixture
def lgss_param():
    """Stationary LGSSM with nonzero intercepts."""
    return LGSSParam(p0=(0.5, 2.0), a=0.9, b=0.2, sd_x=0.5, c=1.5, d=-0.3, sd_y=0.8)


@pytest.fixture
def weighted_population(rng):
    """Population of 50 length-3 trajectories with random unnormalized weights."""
    N, t = 50, 3
    trajectories = np.cumsum(rng.standard_normal((N, t)), axis=1)
    log_w = rng.normal(0.0, 2.0, size=N)
    return Population(trajectories, log_w)


@pytest.fixture
def make_population():
    """Factory: population whose trajectories end in last_states, with linear weights."""
    def _make(last_states, weights, length=1):
        last_states = np.asarray(last_states, dtype=float)
        trajectories = np.zeros((len(last_states), length))
        trajectories[:, -1] = last_states
        with np.errstate(divide='ignore'):
            log_w = np.log(np.asarray(weights, dtype=float))
        return Population(trajectories, log_w)

    return _make
