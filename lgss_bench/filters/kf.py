"""Kalman Filter (KF) implementation for the scalar LGSSM."""
import numpy as np

from .common import joseph_update, standard_update


def kalman_filter(param, ys, joseph=False):
    """
    Exact filtering distributions X_t | Y_{1:t} of the scalar LGSSM.

    Predict:  m' = a m + b,        s' = a^2 s + sd_x^2
    Update:   v = y - c m' - d,    h = c^2 s' + sd_y^2,   k = c s' / h
              m = m' + k v,        s = s' - k^2 h

    Parameters
    ----------
    param : LGSSParam
    ys : ndarray [T]
        Observations
    joseph : bool
        Use Joseph stabilized variance update (default: False)

    Returns
    -------
    m_filt : ndarray [T]
        Filtered state means
    sd_filt : ndarray [T]
        Filtered state standard deviations
    log_evidence : float
        Exact log marginal likelihood log p(Y_{1:T})
    """
    param.validate()
    ys = np.asarray(ys, dtype=float)
    T = ys.shape[0]

    a, b, c, d = param.a, param.b, param.c, param.d
    var_x, var_y = param.sd_x ** 2, param.sd_y ** 2

    m, s = param.p0[0], param.p0[1] ** 2
    m_filt = np.zeros(T)
    sd_filt = np.zeros(T)
    log_evidence = 0.0

    for t in range(T):
        # Predict
        m_pred = a * m + b
        s_pred = a * a * s + var_x

        # Update
        v = ys[t] - c * m_pred - d
        h = c * c * s_pred + var_y
        k = c * s_pred / h
        m = m_pred + k * v
        s = joseph_update(s_pred, k, c, var_y) if joseph else standard_update(s_pred, k, h)

        log_evidence += -0.5 * (np.log(2.0 * np.pi * h) + v * v / h)
        m_filt[t], sd_filt[t] = m, np.sqrt(s)

    return m_filt, sd_filt, log_evidence
