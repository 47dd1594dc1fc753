from __future__ import annotations

import numpy as np


def constant_columns(X: np.ndarray) -> np.ndarray:
    """Boolean mask of columns holding a single distinct value."""
    return np.all(X == X[0:1, :], axis=0)


def column_means(X: np.ndarray, normalized_weight: np.ndarray | None = None) -> np.ndarray:
    """
    Column means of X, weighted by ``normalized_weight`` when given.

    The weights are expected to sum to one.
    """
    if normalized_weight is None:
        return X.mean(axis=0)
    return normalized_weight @ X


def center_columns(
    X: np.ndarray, normalized_weight: np.ndarray | None = None
) -> np.ndarray:
    """Subtract the (weighted) column means."""
    return X - column_means(X, normalized_weight)[None, :]


def column_scales(
    X0: np.ndarray,
    normalized_weight: np.ndarray | None = None,
    *,
    constant: np.ndarray | None = None,
) -> np.ndarray:
    """
    Population standard deviation of each column of a centered matrix.

    Parameters
    ----------
    X0 : (N×P) array
        Column-centered predictors.
    normalized_weight : (N,) array, optional
        Observation weights summing to one. If None, every row weighs 1/N.
    constant : (P,) bool array, optional
        Columns flagged as constant get a divisor of 1 so they are left
        unscaled instead of divided by zero.

    Returns
    -------
    sigma : (P,) array
    """
    if normalized_weight is None:
        sigma = np.sqrt(np.mean(X0**2, axis=0))
    else:
        sigma = np.sqrt(normalized_weight @ (X0**2))
    if constant is not None:
        sigma = np.where(constant, 1.0, sigma)
    return sigma


def standardize_columns(
    X: np.ndarray,
    normalized_weight: np.ndarray | None = None,
    *,
    scale: bool = True,
    constant: np.ndarray | None = None,
) -> np.ndarray:
    """
    Center and optionally scale the columns of X.

    Constant columns come out as exact zeros regardless of rounding in the
    mean, which matches replacing the 0/0 of a textbook z-score by 0.
    """
    X0 = center_columns(X, normalized_weight)
    if constant is None:
        constant = constant_columns(X)
    X0[:, constant] = 0.0
    if scale:
        # A zero divisor left here yields non-finite entries for the caller to reject.
        with np.errstate(divide="ignore", invalid="ignore"):
            X0 = X0 / column_scales(X0, normalized_weight, constant=constant)[None, :]
    return X0


def abs_column_dot(X: np.ndarray, v: np.ndarray, w: np.ndarray | None = None) -> np.ndarray:
    """Return |X^T (w ∘ v)| column-wise; ``w`` defaults to ones."""
    if w is not None:
        X = X * w[:, None]
    return np.abs(X.T @ v)
