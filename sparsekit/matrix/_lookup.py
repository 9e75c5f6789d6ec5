"""
Membership lookups: findin_index() and ismember().
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from sparsekit.core.exceptions import InvalidArgumentError
from sparsekit.core.validation import check_1d, check_2d, check_array

# 1 compares columns, 2 compares rows
VALID_AXES = (1, 2)


def findin_index(x: ArrayLike, y: ArrayLike) -> NDArray[np.int64]:
    """
    Position of each element of x within y.

    Parameters
    ----------
    x, y : 1D array-like

    Returns
    -------
    ndarray of int64, same length as x
        ``v[i]`` is the 1-based position of ``x[i]`` in ``y``, or 0 if
        ``x[i]`` does not occur in ``y``. When ``y`` repeats a value the
        position of its last occurrence is returned.

    Examples
    --------
    >>> findin_index([1, 2, 3, 10, 1, 4], [1, 2, 5, 4, 3])
    array([1, 2, 5, 0, 1, 4])
    """
    x_arr = np.asarray(x)
    y_arr = np.asarray(y)
    check_1d(x_arr, "x")
    check_1d(y_arr, "y")

    # later occurrences overwrite earlier ones
    last_pos = {value: i + 1 for i, value in enumerate(y_arr.tolist())}
    return np.array(
        [last_pos.get(value, 0) for value in x_arr.tolist()],
        dtype=np.int64,
    )


def ismember(A: ArrayLike, x: ArrayLike, axis: int) -> NDArray[np.bool_]:
    """
    Flag the rows or columns of A that equal x exactly.

    Parameters
    ----------
    A : 2D array-like
    x : 1D array-like
        Row (length n) or column (length m) to look for.
    axis : int
        2 compares each row of A with x; 1 compares each column.

    Returns
    -------
    ndarray of bool
        Length m for ``axis=2``, length n for ``axis=1``. All False when
        x does not have the compared length.

    Raises
    ------
    InvalidArgumentError
        If axis is not 1 or 2.

    Examples
    --------
    >>> A = [[1, 2, 3], [1, 2, 4], [2, 4, 4]]
    >>> ismember(A, [2, 4, 4], 2)
    array([False, False,  True])
    >>> ismember(A, [2, 2, 4], 1)
    array([False,  True, False])
    """
    if axis not in VALID_AXES:
        raise InvalidArgumentError(
            f"axis must be 1 (columns) or 2 (rows), got {axis!r}",
            name="axis",
            value=axis,
        )

    A_arr = check_array(A, "A")
    x_arr = check_array(x, "x")
    check_2d(A_arr, "A")
    check_1d(x_arr, "x")

    m, n = A_arr.shape
    # a vector of another length equals no row or column
    if x_arr.shape[0] != (n if axis == 2 else m):
        return np.zeros(m if axis == 2 else n, dtype=np.bool_)

    if axis == 2:
        return np.all(A_arr == x_arr[np.newaxis, :], axis=1)
    return np.all(A_arr == x_arr[:, np.newaxis], axis=0)
