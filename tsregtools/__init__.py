from ._validation import ValidationError
from .api import LagMatrixTransformer, LambdaPath
from .lags import lag_matrix, lag_names
from .lambdas import LambdaMaxFit, LambdaSequence, compute_lambda_max, lambda_seq
from .sim import simulate_lagged_regression

__all__ = [
    "LagMatrixTransformer",
    "LambdaMaxFit",
    "LambdaPath",
    "LambdaSequence",
    "ValidationError",
    "compute_lambda_max",
    "lag_matrix",
    "lag_names",
    "lambda_seq",
    "simulate_lagged_regression",
]
