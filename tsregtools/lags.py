"""Lead/lag matrix construction utilities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from ._validation import ValidationError, _to_numpy, _validate_lags


def lag_names(lag: Any, prefix: str = "") -> list[str]:
    """Column labels for ``lag_matrix`` output, e.g. ``lag1``, ``lead2``, ``lag0``."""
    names = []
    for s in _validate_lags(lag):
        kind = "lead" if s < 0 else "lag"
        names.append(f"{prefix}{kind}{abs(s)}")
    return names


def lag_matrix(x: Any, lag: int | Sequence[int]) -> Any:
    """
    Matrix of lead/lags of a series.

    Parameters
    ----------
    x : (N,) array-like or pandas Series
        Input variable.
    lag : int or sequence of int
        Shifts to apply. Positive numbers are lags (row t holds x[t - s]),
        negative are leads, 0 is the original ``x``.

    Returns
    -------
    (N×K) ndarray, or DataFrame when ``x`` is a Series
        One column per requested shift, in request order. Rows without a
        source sample hold NaN.

    Examples
    --------
    >>> lag_matrix([1, 2, 3], [0, 1, -1])
    array([[ 1., nan,  2.],
           [ 2.,  1.,  3.],
           [ 3.,  2., nan]])
    """
    lags = _validate_lags(lag)
    try:
        values = np.asarray(_to_numpy(x), dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"x cannot be converted to numeric array: {e}") from e
    if values.ndim == 2 and values.shape[1] == 1:
        values = values[:, 0]
    if values.ndim != 1:
        raise ValidationError(
            f"x must be a vector, got {values.ndim}D with shape {values.shape}."
        )

    n = values.shape[0]
    k = len(lags)

    # How far to pad for lags (bottom) and leads (top)
    mlg = max([0] + [s for s in lags if s > 0])
    mld = max([0] + [-s for s in lags if s < 0])

    lmat = np.full((n + mlg + mld, k), np.nan)
    for i, s in enumerate(lags):
        lmat[s + mld : s + mld + n, i] = values

    lmat = lmat[mld : mld + n, :]

    if hasattr(x, "index") and hasattr(x, "to_frame"):
        import pandas as pd

        name = getattr(x, "name", None)
        prefix = f"{name}_" if name is not None else ""
        return pd.DataFrame(lmat, index=x.index, columns=lag_names(lags, prefix))
    return lmat
