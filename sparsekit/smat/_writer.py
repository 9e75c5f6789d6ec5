"""
SMAT writer.

Layout written:

    <m> <n> <nz>
    <row> <col> <value>      (nz lines, zero-based indices)
"""

from __future__ import annotations

import os
from typing import Any, IO, Iterable

import numpy as np

from sparsekit.core.exceptions import InvalidArgumentError, ValidationError
from sparsekit.core.validation import check_sparse

# %.17g round-trips every float64 exactly
DEFAULT_FLOAT_FORMAT = '%.17g'
DEFAULT_INT_FORMAT = '%d'


def _default_value_format(dtype: np.dtype) -> str:
    if np.issubdtype(dtype, np.integer) or dtype == np.bool_:
        return DEFAULT_INT_FORMAT
    if np.issubdtype(dtype, np.floating):
        return DEFAULT_FLOAT_FORMAT
    raise ValidationError(
        f"matrix: SMAT stores real values only, got dtype {dtype}"
    )


def _check_value_format(value_format: str) -> None:
    """Reject a format that cannot render one number, before any output."""
    try:
        value_format % 0
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(
            f"value_format: {value_format!r} cannot format a single value: {e}",
            name="value_format",
            value=value_format,
        ) from e


def _format_lines(
    m: int,
    n: int,
    rows: Iterable[int],
    cols: Iterable[int],
    vals: Iterable[Any],
    nz: int,
    value_format: str,
) -> Iterable[str]:
    yield f"{m} {n} {nz}\n"
    for i, j, v in zip(rows, cols, vals):
        yield f"{i} {j} {value_format % v}\n"


def write_smat(
    matrix: Any,
    destination: str | os.PathLike | IO[str],
    *,
    value_format: str | None = None,
) -> None:
    """
    Write a matrix to SMAT format.

    Entries are written in column-major order.

    Parameters
    ----------
    matrix : scipy.sparse matrix or array-like
        2D real matrix. Dense input is converted; zeros are not written.
    destination : path or text file object
        File path (created or overwritten) or an open text stream. Streams
        are flushed but not closed.
    value_format : str, optional
        printf-style format for values. Defaults to ``'%d'`` for integer
        matrices and ``'%.17g'`` for floating matrices.

    Raises
    ------
    ValidationError
        If the matrix is not a real numeric 2D matrix.
    InvalidArgumentError
        If value_format cannot format a single number. Nothing is written.
    OSError
        If the destination cannot be written.

    Examples
    --------
    >>> A = numpy.random.rand(4, 4)
    >>> write_smat(A, "testfile.smat")
    """
    coo = check_sparse(matrix, "matrix")
    fmt = value_format if value_format is not None else _default_value_format(coo.dtype)
    _check_value_format(fmt)

    csc = coo.tocsc()
    csc.sort_indices()
    entries = csc.tocoo()
    m, n = entries.shape

    lines = _format_lines(
        m, n,
        entries.row.tolist(),
        entries.col.tolist(),
        entries.data.tolist(),
        int(entries.nnz),
        fmt,
    )

    if hasattr(destination, 'write'):
        destination.writelines(lines)
        destination.flush()
        return

    with open(destination, 'w', encoding='utf-8') as f:
        f.writelines(lines)
