"""
Plain-text matrix printer.
"""

from __future__ import annotations

import sys
from typing import IO

import numpy as np
from numpy.typing import ArrayLike

from sparsekit.core.exceptions import InvalidArgumentError
from sparsekit.core.validation import check_2d

PRINT_INT_FORMAT = '%d'
PRINT_FLOAT_FORMAT = '%f'


def _select_format(dtype: np.dtype) -> str:
    if np.issubdtype(dtype, np.integer):
        return PRINT_INT_FORMAT
    if np.issubdtype(dtype, np.floating):
        return PRINT_FLOAT_FORMAT
    raise InvalidArgumentError(
        f"A: element type {dtype} is not supported; "
        f"expected integer or floating values, or pass fmt=",
        name="A",
        value=dtype,
    )


def print_matrix(
    A: ArrayLike,
    stream: IO[str] | None = None,
    *,
    fmt: str | None = None,
) -> None:
    """
    Write a dense matrix as tab-separated rows.

    Parameters
    ----------
    A : 2D array-like
    stream : text file object, optional
        Output stream. Default ``sys.stdout``.
    fmt : str, optional
        printf-style element format. Default ``'%d'`` for integer
        matrices and ``'%f'`` for floating matrices.

    Raises
    ------
    InvalidArgumentError
        If A holds neither integer nor floating values and no fmt is given.

    Examples
    --------
    >>> print_matrix(np.array([[1, 2], [3, 4]]))
    1	2
    3	4
    """
    A_arr = np.asarray(A)
    check_2d(A_arr, "A")
    element_fmt = fmt if fmt is not None else _select_format(A_arr.dtype)
    out = stream if stream is not None else sys.stdout

    for row in A_arr.tolist():
        out.write("\t".join(element_fmt % c for c in row))
        out.write("\n")
