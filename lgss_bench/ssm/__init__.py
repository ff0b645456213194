"""State Space Model implementations."""
from .linear_gaussian import (
    LGSSParam,
    random_walk_param,
    linear_gaussian_ssm,
    synthesize_data,
    sample_initial,
    sample_transition,
    observation_log_likelihood,
    trajectory_log_likelihood,
)

__all__ = [
    'LGSSParam',
    'random_walk_param',
    'linear_gaussian_ssm',
    'synthesize_data',
    'sample_initial',
    'sample_transition',
    'observation_log_likelihood',
    'trajectory_log_likelihood',
]
