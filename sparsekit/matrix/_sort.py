"""
Per-column sorting permutations.

Each column is sorted independently on a thread pool. A task reads only
its own column of the input and writes only its own column of the
output.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import numpy as np
from numpy.typing import ArrayLike, NDArray

from sparsekit.core.validation import check_2d, check_array


def _column_perm(col: NDArray, descending: bool) -> NDArray[np.intp]:
    """Stable argsort of one column; ties keep their original order."""
    if not descending:
        return np.argsort(col, kind='stable')
    k = col.shape[0]
    return (k - 1) - np.argsort(col[::-1], kind='stable')[::-1]


def sortcolsperm(
    X: ArrayLike,
    descending: bool = False,
    *,
    max_workers: int | None = None,
) -> NDArray[np.int64]:
    """
    Row permutation that sorts each column of X.

    Parameters
    ----------
    X : 2D array-like
    descending : bool
        Sort largest first. Default ascending.
    max_workers : int, optional
        Thread pool size. None uses the executor default.

    Returns
    -------
    ndarray of int64, same shape as X
        Column j holds the zero-based row indices that order ``X[:, j]``,
        i.e. ``X[P[:, j], j]`` is sorted.

    Examples
    --------
    >>> W = np.array([[0.66, 0.01, 0.33],
    ...               [0.72, 0.61, 0.54],
    ...               [0.37, 0.99, 0.30]])
    >>> sortcolsperm(W, descending=True)
    array([[1, 2, 1],
           [0, 1, 0],
           [2, 0, 2]])
    """
    X_arr = check_array(X, "X")
    check_2d(X_arr, "X")

    m, n = X_arr.shape
    P = np.empty((m, n), dtype=np.int64)

    def _sort_column(j: int) -> None:
        P[:, j] = _column_perm(X_arr[:, j], descending)

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        # consume results so worker exceptions propagate
        list(pool.map(_sort_column, range(n)))

    return P
