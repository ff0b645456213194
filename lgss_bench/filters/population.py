"""Weighted particle populations over latent trajectories."""
from dataclasses import dataclass

import numpy as np
from scipy.special import logsumexp

from ..errors import WeightDegeneracyError


@dataclass
class Population:
    """
    Particles with arbitrary nonnegative weights, stored in log space.

    Attributes
    ----------
    trajectories : ndarray [N, t]
        Row i is the trajectory X_{1:t} of particle i
    log_weights : ndarray [N]
        Unnormalized log importance weights
    """
    trajectories: np.ndarray
    log_weights: np.ndarray

    @property
    def size(self):
        return self.trajectories.shape[0]

    @property
    def length(self):
        return self.trajectories.shape[1]

    def log_total_weight(self):
        return logsumexp(self.log_weights)

    def extend(self, states):
        """Append one state per particle, keeping the weights."""
        trajectories = np.column_stack([self.trajectories, states])
        return Population(trajectories, self.log_weights.copy())

    def reweight(self, log_increments):
        return Population(self.trajectories, self.log_weights + log_increments)

    def select(self, indices):
        """
        Copy the chosen trajectories forward with equal weights.

        The total weight is preserved, so every survivor carries total / N.
        """
        N = len(indices)
        log_w = np.full(N, self.log_total_weight() - np.log(N))
        return Population(self.trajectories[indices], log_w)


@dataclass
class NormalizedPopulation:
    """Particles whose weights sum to one."""
    trajectories: np.ndarray
    weights: np.ndarray

    @property
    def size(self):
        return self.trajectories.shape[0]


def empty_population(n):
    """N empty trajectories with uniform unnormalized weights."""
    return Population(np.zeros((n, 0)), np.zeros(n))


def normalize(population):
    """
    Normalize the weights of a population.

    Raises
    ------
    WeightDegeneracyError
        If the total weight is zero or not finite.
    """
    log_w = np.asarray(population.log_weights, dtype=float)
    if np.any(np.isnan(log_w)):
        raise WeightDegeneracyError("particle log-weights contain NaN")
    log_total = logsumexp(log_w)
    if not np.isfinite(log_total):
        raise WeightDegeneracyError(
            f"total particle weight is degenerate (log total = {log_total}) "
            f"for a population of {population.size} particles"
        )
    w = np.exp(log_w - log_total)
    return NormalizedPopulation(population.trajectories, w / w.sum())


def last_state(trajectories):
    """Last coordinate of each trajectory."""
    return np.asarray(trajectories)[..., -1]


def pop_avg(fn, population):
    """
    Weighted average of fn(trajectory) over a normalized population.

    fn receives the [N, t] trajectory matrix and returns one scalar per row.
    """
    if not isinstance(population, NormalizedPopulation):
        raise TypeError("pop_avg requires a NormalizedPopulation; call normalize() first")
    return float(population.weights @ fn(population.trajectories))


def effective_sample_size(weights):
    """ESS = 1 / sum(w^2) for normalized weights."""
    return 1.0 / np.sum(np.asarray(weights) ** 2)
