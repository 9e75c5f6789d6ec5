"""
Column normalization.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import scipy.sparse as sp

from sparsekit.core.validation import check_2d, check_array, check_sparse


def colnormout(A: Any):
    """
    Divide each column of A by its column sum.

    Columns whose sum is zero are copied unmodified. The input is not
    changed.

    Parameters
    ----------
    A : 2D array-like or scipy.sparse matrix

    Returns
    -------
    ndarray of float64 for dense input, scipy.sparse.csc_matrix for
    sparse input; same shape as A.

    Examples
    --------
    >>> colnormout(np.array([[1.0, 0.0], [3.0, 0.0]]))
    array([[0.25, 0.  ],
           [0.75, 0.  ]])
    """
    if sp.issparse(A):
        return _colnormout_sparse(A)

    A_arr = check_array(A, "A")
    check_2d(A_arr, "A")

    B = A_arr.astype(np.float64, copy=True)
    sums = B.sum(axis=0)
    nonzero = sums != 0
    B[:, nonzero] /= sums[nonzero]
    return B


def _colnormout_sparse(A: Any) -> sp.csc_matrix:
    B = check_sparse(A, "A").tocsc().astype(np.float64)
    sums = np.asarray(B.sum(axis=0)).ravel()

    # column index of every stored entry
    entry_cols = np.repeat(np.arange(B.shape[1]), np.diff(B.indptr))
    entry_sums = sums[entry_cols]
    scale = entry_sums != 0
    B.data[scale] /= entry_sums[scale]
    return B
