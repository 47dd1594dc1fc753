"""Penalty (lambda) grids for elastic-net and LASSO regression paths.

``compute_lambda_max`` finds the smallest penalty at which every predictor
coefficient of an elastic-net fit is zero, i.e. the largest absolute
correlation between a centered predictor and the centered response, scaled
by the mixing parameter. ``lambda_seq`` descends geometrically from there to
``lambda_max * lambda_ratio``. The grid is meant to be handed to an external
solver such as ``sklearn.linear_model.ElasticNet`` or glmnet; nothing here
fits a model.

Reference: Hastie, T., Tibshirani, R. & Wainwright, M. (2015). Statistical
learning with sparsity: the lasso and generalizations. CRC Press.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np

from ._validation import (
    ValidationError,
    _validate_alpha,
    _validate_design_matrix,
    _validate_lambda_ratio,
    _validate_n_lambda,
    _validate_response,
    _validate_weight,
)
from .ops import abs_column_dot, column_means, constant_columns, standardize_columns

logger = logging.getLogger(__name__)

DEFAULT_ALPHA = 1.0
DEFAULT_LAMBDA_RATIO = 1e-4
DEFAULT_N_LAMBDA = 100


@dataclass(frozen=True)
class LambdaMaxFit:
    """Largest useful penalty and the MSE of the constant-only model."""

    lambda_max: float
    null_mse: float


@dataclass(frozen=True)
class LambdaSequence:
    """A descending penalty grid.

    Attributes
    ----------
    lambdas:
        Grid of length ``n_lambda`` from ``lambda_max`` down to ``lambda_min``
        (or to exactly 0 when requested).
    lambda_min, lambda_max:
        Grid endpoints before the optional zero substitution.
    null_mse:
        Mean squared error of the fit using just a constant term.
    """

    lambdas: np.ndarray
    lambda_min: float
    lambda_max: float
    null_mse: float

    def __len__(self) -> int:
        return len(self.lambdas)

    def as_dict(self) -> dict[str, Any]:
        return {
            "lambda": self.lambdas,
            "lambdaMin": self.lambda_min,
            "lambdaMax": self.lambda_max,
            "nullMSE": self.null_mse,
        }


def compute_lambda_max(
    x,
    y,
    weight=None,
    alpha: float = DEFAULT_ALPHA,
    standardise: bool = True,
) -> LambdaMaxFit:
    """
    Smallest penalty beyond which all elastic-net coefficients are zero.

    Parameters
    ----------
    x : (N×P) array-like      regressors, N >= 2
    y : (N,) array-like       response
    weight : (N,) array-like  observation weights; None (or all NaN) for an
                              unweighted fit
    alpha : float             elastic-net mixing value, alpha = 1 is the lasso
    standardise : bool        scale predictors to unit (weighted) variance

    Returns
    -------
    LambdaMaxFit
        ``lambda_max`` and ``null_mse``, the MSE of the constant-only fit,
        which is computed here because it shares the centering of ``y``.

    Notes
    -----
    The unweighted statistic is divided by ``N * alpha`` while the weighted
    one is divided by ``alpha`` alone and uses the raw (not normalized)
    weights. Weights that sum to one therefore reproduce the unweighted
    result exactly; weights summing to N scale ``lambda_max`` by N.
    """
    x_arr = _validate_design_matrix(x)
    N = x_arr.shape[0]
    y_arr = _validate_response(y, N)
    w = _validate_weight(weight, N)
    alpha = _validate_alpha(alpha)

    normalized_weight = None if w is None else w / w.sum()

    constant = constant_columns(x_arr)
    if np.any(constant):
        logger.debug("constant predictor columns: %s", np.flatnonzero(constant).tolist())
    if standardise and np.all(constant):
        raise ValidationError(
            "Every column of x is constant, so no predictor has variance to "
            "standardise. Remove constant columns or pass standardise=False."
        )

    x0 = standardize_columns(
        x_arr, normalized_weight, scale=standardise, constant=constant
    )
    if not np.all(np.isfinite(x0)):
        raise ValidationError(
            "Standardised predictors are not finite: a non-constant column has "
            "zero weighted variance. Check for columns that vary only on "
            "zero-weight observations."
        )

    y0 = y_arr - float(column_means(y_arr[:, None], normalized_weight)[0])

    if w is None:
        dotp = abs_column_dot(x0, y0)
        lambda_max = float(np.max(dotp)) / (N * alpha)
        null_mse = float(np.mean(y0**2))
    else:
        dotp = abs_column_dot(x0, y0, w)
        lambda_max = float(np.max(dotp)) / alpha
        null_mse = float(normalized_weight @ (y0**2))

    logger.debug(
        "lambda_max=%.6g null_mse=%.6g (N=%d, P=%d, weighted=%s)",
        lambda_max,
        null_mse,
        N,
        x0.shape[1],
        w is not None,
    )
    return LambdaMaxFit(lambda_max=lambda_max, null_mse=null_mse)


def lambda_seq(
    x,
    y,
    weight=None,
    alpha: float = DEFAULT_ALPHA,
    standardise: bool = True,
    lambda_ratio: float = DEFAULT_LAMBDA_RATIO,
    n_lambda: int = DEFAULT_N_LAMBDA,
    add_zero_lambda: bool = False,
) -> LambdaSequence:
    """
    Sequence of ``n_lambda`` penalties in logarithmic descent.

    Parameters
    ----------
    x, y, weight, alpha, standardise
        See :func:`compute_lambda_max`.
    lambda_ratio : float      lambda_min = lambda_max * lambda_ratio, in (0, 1)
    n_lambda : int            length of the sequence, at least 2
    add_zero_lambda : bool    set the last value to 0, the OLS solution

    Returns
    -------
    LambdaSequence

    Examples
    --------
    >>> rng = np.random.default_rng(0)
    >>> X = rng.standard_normal((50, 5))
    >>> y = X[:, 0] + 0.1 * rng.standard_normal(50)
    >>> path = lambda_seq(X, y, n_lambda=20)
    >>> len(path)
    20
    """
    lambda_ratio = _validate_lambda_ratio(lambda_ratio)
    n_lambda = _validate_n_lambda(n_lambda)

    fit = compute_lambda_max(x, y, weight, alpha, standardise)
    lambda_max = fit.lambda_max
    lambda_min = lambda_max * lambda_ratio

    if lambda_max > 0:
        # Step in log(lambda_ratio) so an underflowed lambda_min never reaches log().
        lambdas = np.exp(
            np.log(lambda_max) + np.linspace(0.0, np.log(lambda_ratio), n_lambda)
        )
        lambdas[0] = lambda_max
    else:
        # y is orthogonal to every centered predictor; there is nothing to penalize.
        logger.warning("lambda_max is 0; returning a grid of zeros")
        lambdas = np.zeros(n_lambda)

    # Pin the endpoint so it does not drift through exp(log(.)).
    lambdas[-1] = 0.0 if add_zero_lambda else lambda_min

    return LambdaSequence(
        lambdas=lambdas,
        lambda_min=lambda_min,
        lambda_max=lambda_max,
        null_mse=fit.null_mse,
    )
