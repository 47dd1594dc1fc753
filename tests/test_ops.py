import sys
from pathlib import Path

import numpy as np

# Ensure package root is on sys.path
sys.path.append(str(Path(__file__).resolve().parents[1]))

from tsregtools.ops import (
    abs_column_dot,
    column_means,
    column_scales,
    constant_columns,
    standardize_columns,
)


def test_constant_columns():
    X = np.array([[1.0, 2.0, 0.3], [1.0, 3.0, 0.3], [1.0, 4.0, 0.3]])
    np.testing.assert_array_equal(constant_columns(X), [True, False, True])


def test_weighted_means_and_scales():
    rng = np.random.default_rng(0)
    X = rng.standard_normal((30, 3))
    w = rng.uniform(0.1, 1.0, size=30)
    nw = w / w.sum()

    mu = column_means(X, nw)
    np.testing.assert_allclose(mu, np.average(X, axis=0, weights=w))

    X0 = X - mu
    sigma = column_scales(X0, nw)
    expected = np.sqrt(np.average(X0**2, axis=0, weights=w))
    np.testing.assert_allclose(sigma, expected)


def test_unweighted_standardisation_is_population_zscore():
    rng = np.random.default_rng(1)
    X = rng.standard_normal((25, 4)) * [1.0, 3.0, 0.5, 10.0] + [0.0, 1.0, -2.0, 5.0]
    Z = standardize_columns(X)
    np.testing.assert_allclose(Z.mean(axis=0), 0.0, atol=1e-12)
    np.testing.assert_allclose(Z.std(axis=0), 1.0)


def test_constant_column_is_zeroed_not_scaled():
    X = np.column_stack([np.full(5, 0.1), np.arange(5.0)])
    for nw in (None, np.full(5, 0.2)):
        Z = standardize_columns(X, nw)
        np.testing.assert_array_equal(Z[:, 0], 0.0)
        assert np.all(np.isfinite(Z))


def test_centering_only():
    X = np.array([[1.0, 10.0], [3.0, 30.0]])
    Z = standardize_columns(X, scale=False)
    np.testing.assert_array_equal(Z, [[-1.0, -10.0], [1.0, 10.0]])


def test_abs_column_dot():
    X = np.array([[1.0, -1.0], [2.0, 0.0], [-3.0, 1.0]])
    v = np.array([1.0, 1.0, 1.0])
    np.testing.assert_array_equal(abs_column_dot(X, v), [0.0, 0.0])
    w = np.array([2.0, 1.0, 0.0])
    np.testing.assert_array_equal(abs_column_dot(X, v, w), [4.0, 2.0])
