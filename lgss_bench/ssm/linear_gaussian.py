"""One-dimensional Linear Gaussian State Space Model (LGSSM)."""
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from scipy.stats import norm

from ..errors import ConfigurationError


@dataclass(frozen=True)
class LGSSParam:
    """
    Parameters of the scalar LGSSM.

        x_0 ~ N(p0[0], p0[1]^2)
        x_t = a x_{t-1} + b + sd_x v_t
        y_t = c x_t + d + sd_y w_t

    Attributes
    ----------
    p0 : (float, float)
        Mean and standard deviation of the initial state X_0
    a, b : float
        Transition slope and intercept
    sd_x : float
        Transition noise standard deviation
    c, d : float
        Observation slope and intercept
    sd_y : float
        Observation noise standard deviation
    """
    p0: Tuple[float, float]
    a: float
    b: float
    sd_x: float
    c: float
    d: float
    sd_y: float

    def validate(self):
        """
        Raise ConfigurationError unless sd_x and sd_y are strictly positive.

        The prior stddev p0[1] may be zero: a point-mass x_0 is still smoothed
        by the transition noise before the first observation.
        """
        values = (*self.p0, self.a, self.b, self.sd_x, self.c, self.d, self.sd_y)
        if not np.all(np.isfinite(values)):
            raise ConfigurationError(f"LGSS parameters must be finite: {self}")
        if self.p0[1] < 0:
            raise ConfigurationError(f"p0 stddev must be non-negative, got {self.p0[1]}")
        for name, sd in (('sd_x', self.sd_x), ('sd_y', self.sd_y)):
            if sd <= 0:
                raise ConfigurationError(f"{name} must be strictly positive, got {sd}")
        return self


def random_walk_param(p0, sd_x, sd_y):
    """Random walk with Gaussian diffusion observed directly in Gaussian noise."""
    return LGSSParam(p0=tuple(p0), a=1.0, b=0.0, sd_x=sd_x, c=1.0, d=0.0, sd_y=sd_y)


def sample_initial(param, n, rng):
    """Draw n initial states X_0 from the prior."""
    m0, sd0 = param.p0
    return rng.normal(m0, sd0, size=n)


def sample_transition(param, x_prev, rng):
    """Draw X_t | X_{t-1} for every entry of x_prev."""
    x_prev = np.asarray(x_prev, dtype=float)
    return rng.normal(param.a * x_prev + param.b, param.sd_x, size=x_prev.shape)


def observation_log_likelihood(param, y, xs):
    """
    Log density of observation y given each state in xs.

    Parameters
    ----------
    param : LGSSParam
    y : float
        Observation Y_t
    xs : ndarray [N]
        Candidate states X_t

    Returns
    -------
    ndarray [N]
        log N(y; c x + d, sd_y^2)
    """
    return norm.logpdf(y, loc=param.c * np.asarray(xs) + param.d, scale=param.sd_y)


def trajectory_log_likelihood(param, trajectory, ys):
    """
    Unnormalized log posterior score of a latent trajectory X_{1:T}.

    The prior over trajectories is the proposal, so the score of a trajectory
    is the sum of its observation log densities. An empty sequence scores 0.
    """
    trajectory = np.asarray(trajectory, dtype=float)
    ys = np.asarray(ys, dtype=float)
    if trajectory.shape[-1] != ys.shape[0]:
        raise ValueError(
            f"trajectory length {trajectory.shape[-1]} does not match {ys.shape[0]} observations"
        )
    return np.sum(observation_log_likelihood(param, ys, trajectory), axis=-1)


def linear_gaussian_ssm(param, T, rng):
    """
    Simulate the LGSSM forward from the prior.

    Draw order is X_0, X_1..X_T, then Y_1..Y_T, so a fixed seed always
    reproduces the same sequence.

    Parameters
    ----------
    param : LGSSParam
    T : int
        Number of time steps
    rng : np.random.Generator

    Returns
    -------
    xs : ndarray [T]
        Latent states X_{1:T} (X_0 is discarded)
    ys : ndarray [T]
        Observations Y_{1:T}
    """
    param.validate()
    if T < 0:
        raise ConfigurationError(f"T must be non-negative, got {T}")

    x = sample_initial(param, 1, rng)
    xs = np.zeros(T)
    for t in range(T):
        x = sample_transition(param, x, rng)
        xs[t] = x[0]

    ys = rng.normal(param.c * xs + param.d, param.sd_y) if T else np.zeros(0)
    return xs, ys


def synthesize_data(param, T, rng):
    """Generate an observed sequence Y_{1:T} from the prior."""
    _, ys = linear_gaussian_ssm(param, T, rng)
    return ys
