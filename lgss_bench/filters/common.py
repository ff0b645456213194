"""Common utilities for the scalar Kalman filter."""


def joseph_update(s_pred, k, c, var_y):
    """
    Compute Joseph-stabilized variance update.

    Parameters
    ----------
    s_pred : float
        Predicted variance
    k : float
        Kalman gain
    c : float
        Observation slope
    var_y : float
        Observation noise variance

    Returns
    -------
    float
        Updated variance (1 - k c)^2 s_pred + k^2 var_y
    """
    ikc = 1.0 - k * c
    return ikc * ikc * s_pred + k * k * var_y


def standard_update(s_pred, k, h):
    """
    Compute standard variance update: s = s_pred - k^2 h.

    Parameters
    ----------
    s_pred : float
        Predicted variance
    k : float
        Kalman gain
    h : float
        Innovation variance c^2 s_pred + var_y

    Returns
    -------
    float
        Updated variance
    """
    return s_pred - k * k * h
