import logging

import numpy as np

from tsregtools import LambdaPath, compute_lambda_max, lambda_seq, simulate_lagged_regression


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    lags = (1, 2, 3, 4)
    x, X, y = simulate_lagged_regression(250, lags=lags, coef=[0.9, 0.0, -0.3, 0.0], seed=123)
    N = X.shape[0]

    # Unweighted vs. exponentially down-weighted history
    w = 0.98 ** np.arange(N)[::-1]
    plain = lambda_seq(X, y, n_lambda=50)
    weighted = lambda_seq(X, y, weight=w / w.sum(), n_lambda=50)

    print("=== Lambda grid on lagged AR(1) driver ===")
    print(f"lags={lags}  N={N}")
    print(
        f"unweighted:  lambda_max={plain.lambda_max:.4f}  "
        f"lambda_min={plain.lambda_min:.3g}  nullMSE={plain.null_mse:.4f}"
    )
    print(
        f"weighted:    lambda_max={weighted.lambda_max:.4f}  "
        f"lambda_min={weighted.lambda_min:.3g}  nullMSE={weighted.null_mse:.4f}"
    )

    for a in (1.0, 0.5, 0.1):
        print(f"alpha={a:<4}  lambda_max={compute_lambda_max(X, y, alpha=a).lambda_max:.4f}")

    model = LambdaPath(n_lambda=20, add_zero_lambda=True).fit(X, y)
    print("first/last of OLS-terminated grid:", model.lambda_[:3], model.lambda_[-3:])


if __name__ == "__main__":
    main()
