"""Exceptions raised by the models, filters and benchmark driver."""


class ConfigurationError(ValueError):
    """Invalid model or run configuration (noise scale, particle count, horizon)."""


class WeightDegeneracyError(FloatingPointError):
    """
    Particle weights collapsed during normalization.

    Raised when the total weight of a population is zero or not finite, so
    that no NaN filtering estimate ever reaches the error statistics.
    """
