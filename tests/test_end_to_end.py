import numpy as np

from tsregtools import compute_lambda_max, lag_matrix, lambda_seq, simulate_lagged_regression


def test_simulated_lag_regression_path():
    x, X, y = simulate_lagged_regression(200, lags=(1, 2, 3), coef=[0.8, 0.0, -0.4], seed=7)

    assert x.shape == (200,)
    assert X.shape == (197, 3)
    assert y.shape == (197,)
    assert not np.isnan(X).any()
    np.testing.assert_array_equal(X, lag_matrix(x, [1, 2, 3])[3:])

    path = lambda_seq(X, y, n_lambda=40, lambda_ratio=1e-3)
    assert len(path.lambdas) == 40
    assert np.all(np.diff(path.lambdas) <= 0)
    assert path.lambda_max > 0
    assert np.isclose(path.null_mse, np.var(y))


def test_strongest_lag_determines_lambda_max():
    x, X, y = simulate_lagged_regression(300, lags=(1, 2), coef=[1.0, 0.0], noise=0.05, seed=3)
    N = X.shape[0]

    Xs = (X - X.mean(axis=0)) / X.std(axis=0)
    scores = np.abs(Xs.T @ (y - y.mean())) / N
    assert np.argmax(scores) == 0
    assert np.isclose(compute_lambda_max(X, y).lambda_max, scores[0])
