import numpy as np
import pytest

from tsregtools import lag_matrix, lag_names


def test_lag_lead_example():
    out = lag_matrix([1, 2, 3], [0, 1, -1])
    expected = np.array(
        [
            [1.0, np.nan, 2.0],
            [2.0, 1.0, 3.0],
            [3.0, 2.0, np.nan],
        ]
    )
    assert out.shape == (3, 3)
    np.testing.assert_array_equal(out, expected)


def test_zero_lag_returns_original_column():
    rng = np.random.default_rng(0)
    x = rng.standard_normal(12)
    out = lag_matrix(x, [0])
    assert out.shape == (12, 1)
    np.testing.assert_array_equal(out[:, 0], x)


def test_scalar_lag():
    out = lag_matrix(np.arange(5.0), 2)
    np.testing.assert_array_equal(out[:, 0], [np.nan, np.nan, 0.0, 1.0, 2.0])


def test_empty_lag_set_gives_zero_columns():
    out = lag_matrix(np.arange(4.0), [])
    assert out.shape == (4, 0)


def test_shifts_preserve_order_and_pad_with_nan():
    x = np.arange(1.0, 11.0)
    lags = [3, -2, 0, 1, -4]
    out = lag_matrix(x, lags)

    assert out.shape == (10, 5)
    for j, s in enumerate(lags):
        col = out[:, j]
        for t in range(10):
            src = t - s
            if 0 <= src < 10:
                assert col[t] == x[src]
            else:
                assert np.isnan(col[t])


def test_duplicate_lags_are_kept():
    out = lag_matrix([1.0, 2.0, 3.0], [1, 1])
    np.testing.assert_array_equal(out[:, 0], out[:, 1])


def test_shift_longer_than_series_is_all_nan():
    out = lag_matrix([1.0, 2.0, 3.0], [5, -3])
    assert out.shape == (3, 2)
    assert np.all(np.isnan(out))


def test_integral_float_and_numpy_lags():
    a = lag_matrix([1.0, 2.0, 3.0, 4.0], np.array([1.0, -1.0]))
    b = lag_matrix([1.0, 2.0, 3.0, 4.0], [np.int32(1), np.int64(-1)])
    np.testing.assert_array_equal(a, b)


def test_column_vector_input():
    out = lag_matrix(np.array([[1.0], [2.0], [3.0]]), [1])
    np.testing.assert_array_equal(out[:, 0], [np.nan, 1.0, 2.0])


def test_lag_names():
    assert lag_names([0, 1, -2]) == ["lag0", "lag1", "lead2"]
    assert lag_names(3, prefix="y_") == ["y_lag3"]


def test_series_input_returns_frame():
    pd = pytest.importorskip("pandas")
    idx = pd.date_range("2024-01-01", periods=4, freq="D")
    s = pd.Series([1.0, 2.0, 3.0, 4.0], index=idx, name="sales")

    out = lag_matrix(s, [0, 1, -1])
    assert isinstance(out, pd.DataFrame)
    assert list(out.columns) == ["sales_lag0", "sales_lag1", "sales_lead1"]
    assert out.index.equals(idx)
    np.testing.assert_array_equal(out["sales_lag1"].to_numpy(), [np.nan, 1.0, 2.0, 3.0])
    np.testing.assert_array_equal(out["sales_lead1"].to_numpy(), [2.0, 3.0, 4.0, np.nan])
