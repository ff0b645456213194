"""
Metrics for evaluating filter performance.
"""
import numpy as np


def compute_mse(estimated, true):
    """Mean squared error; true broadcasts, so a scalar reference works."""
    return np.mean((np.asarray(estimated) - np.asarray(true))**2)


def compute_rmse(estimated, true):
    """
    Root mean squared error.

    Benchmark scores are already absolute errors, so their RMSE is
    compute_rmse(scores, 0.0).
    """
    return np.sqrt(compute_mse(estimated, true))


def standard_error(samples):
    """Standard error of the mean, std(ddof=1) / sqrt(n); 0 for a single sample."""
    samples = np.asarray(samples, dtype=float)
    n = samples.shape[0]
    if n < 2:
        return 0.0
    return float(np.std(samples, ddof=1) / np.sqrt(n))


def summarize_points(points):
    """
    Reduce (x, samples) pairs to error-bar coordinates.

    Parameters
    ----------
    points : list of (float, ndarray)
        Particle count and the per-trial scores for it

    Returns
    -------
    xs, means, stderrs : ndarray
    """
    xs = np.array([x for x, _ in points], dtype=float)
    means = np.array([np.mean(s) for _, s in points], dtype=float)
    stderrs = np.array([standard_error(s) for _, s in points], dtype=float)
    return xs, means, stderrs
