import numpy as np

from .lags import lag_matrix


def simulate_lagged_regression(n, lags=(1, 2), coef=None, noise=0.1, phi=0.5, seed=0):
    """Regression of y on lags of an AR(1) driver x.

    Returns (x, X, y) where X = lag_matrix(x, lags) and rows with NaN from the
    shift padding have been dropped from X and y.
    """
    rng = np.random.default_rng(seed)
    lags = list(lags)
    if coef is None:
        coef = rng.standard_normal(len(lags))
    coef = np.asarray(coef, dtype=float)
    if coef.shape != (len(lags),):
        raise ValueError(f"coef must have {len(lags)} entries, got shape {coef.shape}")

    e = rng.standard_normal(n)
    x = np.empty(n)
    x[0] = e[0]
    for t in range(1, n):
        x[t] = phi * x[t - 1] + e[t]

    X = lag_matrix(x, lags)
    keep = ~np.isnan(X).any(axis=1)
    X = X[keep]
    y = X @ coef + noise * rng.standard_normal(X.shape[0])
    return x, X, y
