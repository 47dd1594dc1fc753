"""Input validation and sanitization helpers for tsregtools.

This module provides standardized validation functions to ensure consistent
input handling across the lambda and lag utilities and improve error message
quality.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np


class ValidationError(ValueError):
    """Raised when an input cannot be used for the requested computation."""


def _to_numpy(obj: Any) -> Any:
    if hasattr(obj, "to_numpy"):
        return obj.to_numpy()
    return obj


def _validate_design_matrix(x: Any, *, name: str = "x") -> np.ndarray:
    """Validate and convert a design matrix to a finite 2D float array.

    Parameters
    ----------
    x : array-like
        Regressors, shape (N, P). A 1D input is treated as a single column.
    name : str, optional
        Variable name for error messages.

    Returns
    -------
    np.ndarray
        Validated 2D numpy array.

    Raises
    ------
    ValidationError
        If ``x`` is not numeric, not at most 2D, has fewer than two rows,
        no columns, or contains non-finite values.
    """
    try:
        x_arr = np.asarray(_to_numpy(x), dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} cannot be converted to numeric array: {e}") from e

    if x_arr.ndim == 1:
        x_arr = x_arr[:, None]
    elif x_arr.ndim != 2:
        raise ValidationError(
            f"{name} must be 1D or 2D, got {x_arr.ndim}D with shape {x_arr.shape}."
        )

    N, P = x_arr.shape
    if N < 2:
        raise ValidationError(f"{name} must have at least 2 rows, got {N}.")
    if P < 1:
        raise ValidationError(f"{name} must have at least 1 column, got shape {x_arr.shape}.")
    if not np.all(np.isfinite(x_arr)):
        raise ValidationError(
            f"{name} contains NaN or infinite values. "
            f"Drop or impute incomplete rows before building the lambda grid."
        )
    return x_arr


def _validate_vector(v: Any, *, name: str) -> np.ndarray:
    """Convert ``v`` to a 1D float array, accepting (N, 1) columns."""
    try:
        arr = np.asarray(_to_numpy(v), dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} cannot be converted to numeric array: {e}") from e

    if arr.ndim == 2 and 1 in arr.shape:
        arr = arr.ravel()
    if arr.ndim != 1:
        raise ValidationError(
            f"{name} must be a vector, got {arr.ndim}D with shape {arr.shape}."
        )
    return arr


def _validate_response(y: Any, N: int, *, name: str = "y") -> np.ndarray:
    y_arr = _validate_vector(y, name=name)
    if y_arr.shape[0] != N:
        raise ValidationError(
            f"{name} has {y_arr.shape[0]} observations but x has {N} rows. "
            f"All inputs must have the same number of samples."
        )
    if not np.all(np.isfinite(y_arr)):
        raise ValidationError(f"{name} contains NaN or infinite values.")
    return y_arr


def _validate_weight(weight: Any, N: int, *, name: str = "weight") -> np.ndarray | None:
    """Validate observation weights.

    ``None`` and an all-missing vector both select unweighted mode. Partial
    weighting is not supported.

    Returns
    -------
    np.ndarray or None
        The weights as a 1D float array, or ``None`` for unweighted mode.
    """
    if weight is None:
        return None

    w = _validate_vector(weight, name=name)
    if w.shape[0] != N:
        raise ValidationError(
            f"{name} has {w.shape[0]} entries but x has {N} rows. "
            f"Provide one weight per observation or pass {name}=None."
        )
    if np.all(np.isnan(w)):
        return None
    if np.any(np.isnan(w)):
        raise ValidationError(
            f"{name} is partially missing. Either every observation is weighted "
            f"or {name}=None for unweighted estimation."
        )
    if not np.all(np.isfinite(w)):
        raise ValidationError(f"{name} contains infinite values.")
    if np.any(w < 0):
        raise ValidationError(f"{name} must be non-negative, got min {w.min()}.")
    if not w.sum() > 0:
        raise ValidationError(f"{name} must have a positive sum.")
    return w


def _validate_alpha(alpha: Any, *, name: str = "alpha") -> float:
    if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real):
        raise ValidationError(f"{name} must be a real number, got {type(alpha).__name__}")
    alpha = float(alpha)
    if not np.isfinite(alpha) or alpha <= 0:
        raise ValidationError(
            f"{name} must be positive, got {alpha}. "
            f"Try {name}=1 for the lasso or a value in (0, 1) for the elastic net."
        )
    return alpha


def _validate_lambda_ratio(lambda_ratio: Any, *, name: str = "lambda_ratio") -> float:
    if isinstance(lambda_ratio, bool) or not isinstance(lambda_ratio, numbers.Real):
        raise ValidationError(
            f"{name} must be a real number, got {type(lambda_ratio).__name__}"
        )
    ratio = float(lambda_ratio)
    if not (0 < ratio < 1):
        raise ValidationError(
            f"{name} must lie strictly between 0 and 1, got {lambda_ratio}. "
            f"Try {name}=1e-4."
        )
    return ratio


def _validate_n_lambda(n_lambda: Any, *, name: str = "n_lambda") -> int:
    """Validate the grid length.

    Raises
    ------
    ValidationError
        If ``n_lambda`` is not an integer or is smaller than 2.
    """
    if isinstance(n_lambda, bool) or not isinstance(n_lambda, numbers.Integral):
        raise ValidationError(f"{name} must be an integer, got {type(n_lambda).__name__}")
    n = int(n_lambda)
    if n < 2:
        raise ValidationError(
            f"{name} must be at least 2, got {n}. Try {name}=100."
        )
    return n


def _validate_lags(lag: Any, *, name: str = "lag") -> list[int]:
    """Validate lead/lag offsets and return them as a list of ints.

    Integral floats (``1.0``) are accepted; anything else non-integral is
    rejected.
    """
    if isinstance(lag, numbers.Number) and not isinstance(lag, bool):
        values = [lag]
    else:
        try:
            values = list(np.asarray(_to_numpy(lag)).ravel())
        except (TypeError, ValueError) as e:
            raise ValidationError(f"{name} must be a sequence of integers: {e}") from e

    lags: list[int] = []
    for j, value in enumerate(values):
        if isinstance(value, (bool, np.bool_)):
            raise ValidationError(f"{name}[{j}] must be an integer, got a boolean")
        try:
            as_int = int(value)
        except (TypeError, ValueError, OverflowError) as e:
            raise ValidationError(
                f"{name}[{j}] must be an integer, got {value!r}"
            ) from e
        if as_int != value:
            raise ValidationError(f"{name}[{j}] must be an integer, got {value!r}")
        lags.append(as_int)
    return lags
