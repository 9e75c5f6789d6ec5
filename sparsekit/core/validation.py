"""
Input validation utilities for sparsekit.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from numbers import Real
from typing import Any

import numpy as np
import scipy.sparse as sp
from numpy.typing import ArrayLike, NDArray

from sparsekit.core.exceptions import (
    DimensionError,
    InvalidArgumentError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Unlike a float-only conversion, the input dtype is preserved so that
    integer matrices stay integer (print_matrix and SMAT output depend on
    it). Rejects inputs that result in object dtype (indicating mixed
    types) and any other non-numeric dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric (or boolean) dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_fraction(value: Any, name: str) -> float:
    """
    Verify value is a real number in the closed interval [0, 1].

    Args:
        value: Candidate fraction
        name: Parameter name for error messages

    Returns:
        The fraction as a Python float

    Raises:
        InvalidArgumentError: If value is not a real number, is NaN,
            or lies outside [0, 1]
    """
    if isinstance(value, bool) or not isinstance(value, (Real, np.number)):
        raise InvalidArgumentError(
            f"{name}: must be a real number in [0, 1], got {type(value).__name__}",
            name=name,
            value=value,
        )

    fraction = float(value)
    if math.isnan(fraction) or not (0.0 <= fraction <= 1.0):
        raise InvalidArgumentError(
            f"{name}: must be between 0 and 1, got {value!r}",
            name=name,
            value=value,
        )
    return fraction


def check_sparse(matrix: Any, name: str) -> sp.coo_matrix:
    """
    Convert a sparse or dense 2D input to canonical COO form.

    Duplicate coordinates are summed and explicitly stored zeros are
    removed, so every remaining triple is a genuine nonzero entry.

    Args:
        matrix: scipy.sparse matrix/array or dense array-like
        name: Parameter name for error messages

    Returns:
        scipy.sparse.coo_matrix with unique coordinates and no stored zeros

    Raises:
        ValidationError: If dense input is non-numeric
        DimensionError: If input is not 2-dimensional
    """
    if sp.issparse(matrix):
        if len(matrix.shape) != 2:
            raise DimensionError(
                f"{name}: expected 2D sparse matrix, got shape {matrix.shape}"
            )
        if not (np.issubdtype(matrix.dtype, np.number) or matrix.dtype == np.bool_):
            raise ValidationError(
                f"{name}: non-numeric dtype {matrix.dtype}, expected numeric data"
            )
        csr = sp.csr_matrix(matrix, copy=True)
    else:
        dense = check_array(matrix, name)
        check_2d(dense, name)
        csr = sp.csr_matrix(dense)

    csr.sum_duplicates()
    csr.eliminate_zeros()
    return csr.tocoo()
