"""
Utility Functions.

This module contains utility functions for:
- Metrics computation
- Error-bar plotting of benchmark results
- Result caching
"""
from .metrics import compute_mse, compute_rmse, standard_error, summarize_points
from .result_cache import ResultCache, config_key
from .visualization import plot_errorbar_series

__all__ = [
    # metrics
    'compute_mse',
    'compute_rmse',
    'standard_error',
    'summarize_points',
    # result cache
    'ResultCache',
    'config_key',
    # visualization
    'plot_errorbar_series',
]
