"""
LGSS herding benchmark

This package contains implementations of:
- The one-dimensional Linear Gaussian State Space Model (LGSSM)
- The exact Kalman filter used as ground truth
- Sequential Monte Carlo with multinomial and kernel herding resampling
- The particle-count benchmark and its error-bar plot
"""
