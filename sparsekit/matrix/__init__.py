"""
Small dense/sparse matrix utilities.

These are standalone functions (no Design/Backend pipeline).

Public API:
    findin_index(x, y)          - 1-based last position of each x in y
    ismember(A, x, axis)        - rows (axis=2) or columns (axis=1) equal to x
    sortcolsperm(X, descending) - per-column sorting permutation
    colnormout(A)               - column-sum normalization
    print_matrix(A)             - tab-separated text rendering
"""

from sparsekit.matrix._lookup import findin_index, ismember, VALID_AXES
from sparsekit.matrix._sort import sortcolsperm
from sparsekit.matrix._normalize import colnormout
from sparsekit.matrix._print import (
    print_matrix,
    PRINT_INT_FORMAT,
    PRINT_FLOAT_FORMAT,
)

__all__ = [
    "findin_index",
    "ismember",
    "sortcolsperm",
    "colnormout",
    "print_matrix",
    "VALID_AXES",
    "PRINT_INT_FORMAT",
    "PRINT_FLOAT_FORMAT",
]
