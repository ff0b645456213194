"""Filtering algorithm implementations."""
from .kf import kalman_filter
from .pf import smc, smc_herding, particle_filter, SMCResult
from .population import (
    Population,
    NormalizedPopulation,
    normalize,
    pop_avg,
    last_state,
    effective_sample_size,
)
from .resampling import (
    resampler,
    multinomial_resample,
    systematic_resample,
    stratified_resample,
)
from .herding import (
    herding_resampler,
    herding_indices,
    gaussian_kernel,
    horizon_gaussian_kernel,
)
from .common import joseph_update, standard_update

__all__ = [
    # Main filters
    'kalman_filter',
    'smc',
    'smc_herding',
    'particle_filter',
    'SMCResult',
    # Populations
    'Population',
    'NormalizedPopulation',
    'normalize',
    'pop_avg',
    'last_state',
    'effective_sample_size',
    # Resampling strategies
    'resampler',
    'multinomial_resample',
    'systematic_resample',
    'stratified_resample',
    'herding_resampler',
    'herding_indices',
    'gaussian_kernel',
    'horizon_gaussian_kernel',
    # Utilities
    'joseph_update',
    'standard_update',
]
