"""
Resampling schemes for particle filters.

A resampler maps (population, rng) to a population of the same size with
equal weights whose total matches the input total.
"""
import numpy as np

from .population import normalize


def systematic_resample(w, rng):
    """Systematic resampling (low variance)."""
    N = len(w)
    cumsum = np.cumsum(w)
    cumsum[-1] = 1.0
    u = rng.uniform(0, 1.0 / N) + np.arange(N) / N
    return np.clip(np.searchsorted(cumsum, u), 0, N - 1)


def stratified_resample(w, rng):
    """Stratified resampling: one uniform draw inside each stratum [i/N, (i+1)/N)."""
    N = len(w)
    cumsum = np.cumsum(w)
    cumsum[-1] = 1.0
    u = (np.arange(N) + rng.uniform(0.0, 1.0, N)) / N
    return np.clip(np.searchsorted(cumsum, u), 0, N - 1)


def multinomial_resample(w, rng):
    """Multinomial resampling: N independent draws proportional to w."""
    N = len(w)
    return rng.choice(N, size=N, replace=True, p=w)


RESAMPLE_SCHEMES = {
    'multinomial': multinomial_resample,
    'systematic': systematic_resample,
    'stratified': stratified_resample,
}


def resampler(scheme='multinomial'):
    """
    Build the baseline SMC resampling strategy.

    Parameters
    ----------
    scheme : str
        'multinomial', 'systematic' or 'stratified'

    Returns
    -------
    callable
        resample(population, rng) -> Population
    """
    try:
        index_fn = RESAMPLE_SCHEMES[scheme]
    except KeyError:
        raise ValueError(
            f"unknown resampling scheme {scheme!r}; expected one of {sorted(RESAMPLE_SCHEMES)}"
        ) from None

    def resample(population, rng):
        w = normalize(population).weights
        return population.select(index_fn(w, rng))

    resample.__name__ = f'{scheme}_resampler'
    resample.cache_tag = f'resample:{scheme}'
    return resample
