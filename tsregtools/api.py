"""High-level estimator APIs for penalty grids and lag features."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from .lags import lag_matrix, lag_names
from .lambdas import (
    DEFAULT_ALPHA,
    DEFAULT_LAMBDA_RATIO,
    DEFAULT_N_LAMBDA,
    lambda_seq,
)


def _column_names(obj: Any) -> list[str] | None:
    if hasattr(obj, "columns"):
        return [str(c) for c in obj.columns]
    return None


class LambdaPath:
    """Scikit-learn style estimator computing a lasso/elastic-net lambda grid.

    The fitted ``lambda_`` can be passed as the ``alphas`` path of
    ``sklearn.linear_model.enet_path`` or as ``lambda`` to glmnet.
    """

    def __init__(
        self,
        *,
        alpha: float = DEFAULT_ALPHA,
        standardise: bool = True,
        lambda_ratio: float = DEFAULT_LAMBDA_RATIO,
        n_lambda: int = DEFAULT_N_LAMBDA,
        add_zero_lambda: bool = False,
    ) -> None:
        self.alpha = alpha
        self.standardise = standardise
        self.lambda_ratio = lambda_ratio
        self.n_lambda = n_lambda
        self.add_zero_lambda = add_zero_lambda

    # ------------------------------------------------------------------
    # Scikit-learn estimator protocol
    # ------------------------------------------------------------------
    def get_params(self, deep: bool = True) -> dict[str, Any]:  # noqa: D401 - sklearn API
        return {
            "alpha": self.alpha,
            "standardise": self.standardise,
            "lambda_ratio": self.lambda_ratio,
            "n_lambda": self.n_lambda,
            "add_zero_lambda": self.add_zero_lambda,
        }

    def set_params(self, **params: Any) -> LambdaPath:  # noqa: D401 - sklearn API
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise ValueError(f"Unknown parameter {key!r}")
            setattr(self, key, value)
        return self

    # ------------------------------------------------------------------
    # Fitting
    # ------------------------------------------------------------------
    def fit(self, X: Any, y: Any, sample_weight: Any = None) -> LambdaPath:
        path = lambda_seq(
            X,
            y,
            weight=sample_weight,
            alpha=self.alpha,
            standardise=self.standardise,
            lambda_ratio=self.lambda_ratio,
            n_lambda=self.n_lambda,
            add_zero_lambda=self.add_zero_lambda,
        )

        self.path_ = path
        self.lambda_ = path.lambdas
        self.lambda_max_ = path.lambda_max
        self.lambda_min_ = path.lambda_min
        self.null_mse_ = path.null_mse
        n_features = np.shape(X)[1] if np.ndim(X) == 2 else 1
        self.n_features_in_ = n_features
        names = _column_names(X)
        if names is not None:
            self.feature_names_in_ = np.asarray(names, dtype=object)
        self.is_fitted_ = True
        return self

    def _ensure_fitted(self) -> None:
        if not getattr(self, "is_fitted_", False):
            raise RuntimeError("The estimator has not been fitted yet")

    def summary_dict(self) -> dict[str, Any]:
        self._ensure_fitted()
        return {
            "n_lambda": len(self.lambda_),
            "lambda_max": self.lambda_max_,
            "lambda_min": self.lambda_min_,
            "null_mse": self.null_mse_,
            "n_features_in": self.n_features_in_,
        }


class LagMatrixTransformer:
    """Scikit-learn style transformer expanding a series into lead/lag columns."""

    def __init__(self, lags: int | Sequence[int] = (0, 1)) -> None:
        self.lags = lags

    def get_params(self, deep: bool = True) -> dict[str, Any]:  # noqa: D401 - sklearn API
        return {"lags": self.lags}

    def set_params(self, **params: Any) -> LagMatrixTransformer:  # noqa: D401 - sklearn API
        for key, value in params.items():
            if key != "lags":
                raise ValueError(f"Unknown parameter {key!r}")
            setattr(self, key, value)
        return self

    def fit(self, x: Any, y: Any = None) -> LagMatrixTransformer:
        self.n_features_out_ = len(lag_names(self.lags))
        self.name_ = getattr(x, "name", None)
        self.n_rows_ = len(x)
        self.is_fitted_ = True
        return self

    def transform(self, x: Any) -> Any:
        if not getattr(self, "is_fitted_", False):
            raise RuntimeError("The transformer has not been fitted yet")
        return lag_matrix(x, self.lags)

    def fit_transform(self, x: Any, y: Any = None) -> Any:
        return self.fit(x, y).transform(x)

    def get_feature_names_out(self, input_features: Any = None) -> np.ndarray:
        if not getattr(self, "is_fitted_", False):
            raise RuntimeError("The transformer has not been fitted yet")
        prefix = ""
        if input_features is not None and len(input_features) == 1:
            prefix = f"{input_features[0]}_"
        elif self.name_ is not None:
            prefix = f"{self.name_}_"
        return np.asarray(lag_names(self.lags, prefix), dtype=object)
