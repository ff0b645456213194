"""
Kernel herding resampling.

Instead of drawing survivors at random, herding greedily picks N particles
(with replacement) so that the uniform distribution over the picks matches
the weighted population in maximum mean discrepancy under a kernel. Given
the population the selection is deterministic.
"""
import numpy as np

from .population import normalize


def gaussian_gram(x, y, variance):
    """Gram matrix exp(-(x_i - y_j)^2 / (2 variance)) for scalar features."""
    diff = np.asarray(x)[:, None] - np.asarray(y)[None, :]
    return np.exp(-diff ** 2 / (2.0 * variance))


def gaussian_kernel(variance=1.0):
    """
    Gaussian kernel on the last state of each trajectory.

    Returns
    -------
    callable
        kernel(X [N, t], Y [M, t]) -> ndarray [N, M]
    """
    def kernel(X, Y):
        return gaussian_gram(X[:, -1], Y[:, -1], variance)

    kernel.cache_tag = f"gaussian(variance={variance})"
    return kernel


def horizon_gaussian_kernel(T):
    """
    Gaussian kernel on the last state whose width follows the remaining horizon.

    For trajectories of length t the variance is 1 + T - t, i.e. bandwidth
    sqrt(1 + T - t): wide early in the sequence, shrinking to 1 at the last
    observation.
    """
    def kernel(X, Y):
        variance = 1.0 + T - X.shape[1]
        if variance <= 0:
            raise ValueError(f"trajectory length {X.shape[1]} exceeds horizon T={T}")
        return gaussian_gram(X[:, -1], Y[:, -1], variance)

    kernel.cache_tag = f"horizon_gaussian(T={T})"
    return kernel


def herding_indices(gram, w, n):
    """
    Greedy kernel herding over a finite candidate set.

    Step k picks argmax_j [ (G w)_j - sum_{i<k} G[j, s_i] / (k + 1) ].

    Parameters
    ----------
    gram : ndarray [N, N]
        Kernel matrix between candidates
    w : ndarray [N]
        Normalized target weights
    n : int
        Number of picks

    Returns
    -------
    ndarray [n]
        Selected candidate indices (ties go to the lowest index)
    """
    mean_embedding = gram @ w
    selected_sum = np.zeros(gram.shape[0])
    indices = np.zeros(n, dtype=int)
    for k in range(n):
        j = int(np.argmax(mean_embedding - selected_sum / (k + 1)))
        indices[k] = j
        selected_sum += gram[:, j]
    return indices


def herding_resampler(kernel):
    """
    Build a herding resampling strategy.

    The rng argument is accepted for interface compatibility and never used.
    """
    def resample(population, rng=None):
        w = normalize(population).weights
        X = population.trajectories
        idx = herding_indices(kernel(X, X), w, population.size)
        return population.select(idx)

    if hasattr(kernel, 'cache_tag'):
        resample.cache_tag = f"herding:{kernel.cache_tag}"
    return resample
