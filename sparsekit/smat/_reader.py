"""
SMAT reader.

The header line gives ``m n nz``; exactly ``nz`` data lines follow, each
``row col value`` with zero-based indices. Anything after the last data
line is ignored.
"""

from __future__ import annotations

import os
import re
from typing import IO, Iterable, Iterator

import numpy as np
import scipy.sparse as sp
from numpy.typing import DTypeLike

from sparsekit.core.exceptions import FormatError

# plain decimal forms only: no '_' separators, no leading '+'
_INT_RE = re.compile(r'-?[0-9]+', re.ASCII)
_FLOAT_RE = re.compile(
    r'-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|-?inf(?:inity)?|nan',
    re.ASCII | re.IGNORECASE,
)


def _parse_int(token: str, field: str, line_number: int, line: str) -> int:
    if _INT_RE.fullmatch(token) is None:
        raise FormatError(
            f"line {line_number}: {field} must be an integer, got {token!r}",
            line_number=line_number,
            line=line,
        )
    return int(token)


def _parse_value(token: str, line_number: int, line: str) -> int | float:
    if _INT_RE.fullmatch(token) is not None:
        return int(token)
    if _FLOAT_RE.fullmatch(token) is None:
        raise FormatError(
            f"line {line_number}: value must be numeric, got {token!r}",
            line_number=line_number,
            line=line,
        )
    return float(token)


def _parse_header(lines: Iterator[str]) -> tuple[int, int, int]:
    line = next(lines, None)
    if line is None:
        raise FormatError("empty SMAT source: missing header", line_number=1)

    fields = line.split()
    if len(fields) < 3:
        raise FormatError(
            f"line 1: header needs 3 fields (rows cols nnz), got {len(fields)}",
            line_number=1,
            line=line,
        )

    m = _parse_int(fields[0], "row count", 1, line)
    n = _parse_int(fields[1], "column count", 1, line)
    nz = _parse_int(fields[2], "nonzero count", 1, line)
    if m < 0 or n < 0 or nz < 0:
        raise FormatError(
            f"line 1: header counts must be non-negative, got {m} {n} {nz}",
            line_number=1,
            line=line,
        )
    return m, n, nz


def _parse(lines: Iterable[str], dtype: DTypeLike) -> sp.csc_matrix:
    it = iter(lines)
    m, n, nz = _parse_header(it)
    integral = np.issubdtype(np.dtype(dtype), np.integer)

    # grown per line; nz comes from the file and is not trusted for allocation
    rows: list[int] = []
    cols: list[int] = []
    vals: list[int | float] = []

    for k in range(nz):
        line_number = k + 2
        line = next(it, None)
        if line is None:
            raise FormatError(
                f"header declares {nz} entries but only {k} data lines follow",
                line_number=line_number,
            )

        fields = line.split()
        if len(fields) < 3:
            raise FormatError(
                f"line {line_number}: expected 'row col value', got {len(fields)} fields",
                line_number=line_number,
                line=line,
            )

        i = _parse_int(fields[0], "row index", line_number, line)
        j = _parse_int(fields[1], "column index", line_number, line)
        if not (0 <= i < m and 0 <= j < n):
            raise FormatError(
                f"line {line_number}: index ({i}, {j}) outside {m} x {n} matrix",
                line_number=line_number,
                line=line,
            )

        value = _parse_value(fields[2], line_number, line)
        if integral and isinstance(value, float) and not value.is_integer():
            raise FormatError(
                f"line {line_number}: value {fields[2]!r} is not integral, "
                f"cannot store as {np.dtype(dtype)}",
                line_number=line_number,
                line=line,
            )

        rows.append(i)
        cols.append(j)
        vals.append(value)

    data = np.asarray(vals, dtype=dtype)
    return sp.csc_matrix(
        (data, (np.asarray(rows, dtype=np.int64), np.asarray(cols, dtype=np.int64))),
        shape=(m, n),
        dtype=dtype,
    )


def read_smat(
    source: str | os.PathLike | IO[str],
    *,
    dtype: DTypeLike = np.float64,
) -> sp.csc_matrix:
    """
    Read a matrix stored in SMAT format.

    Parameters
    ----------
    source : path or text file object
        File path or an open text stream positioned at the header.
    dtype : numpy dtype
        Value dtype of the result. Default float64.

    Returns
    -------
    scipy.sparse.csc_matrix
        Matrix of the declared shape holding the parsed entries. Repeated
        coordinates are summed.

    Raises
    ------
    FormatError
        Malformed header, malformed data line, index out of range, or
        fewer data lines than declared.
    OSError
        If the source cannot be read.
    """
    if hasattr(source, 'read'):
        return _parse(source, dtype)

    with open(source, 'r', encoding='utf-8') as f:
        return _parse(f, dtype)
