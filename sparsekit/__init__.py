"""
sparsekit: small linear-algebra utilities for dense and sparse matrices.

Submodules:
    split: Random train/test splitting of a sparse matrix's nonzero entries
    smat: SMAT sparse matrix text format reader/writer
    matrix: Membership lookups, column sorting, normalization, printing
"""

__version__ = "0.1.0"

from sparsekit import split
from sparsekit import smat
from sparsekit import matrix

from sparsekit.split import split_train_test
from sparsekit.smat import read_smat, write_smat
from sparsekit.matrix import (
    findin_index,
    ismember,
    sortcolsperm,
    colnormout,
    print_matrix,
)
from sparsekit.core.exceptions import (
    SparseKitError,
    ValidationError,
    InvalidArgumentError,
    DimensionError,
    FormatError,
)

__all__ = [
    "__version__",
    "split",
    "smat",
    "matrix",
    "split_train_test",
    "read_smat",
    "write_smat",
    "findin_index",
    "ismember",
    "sortcolsperm",
    "colnormout",
    "print_matrix",
    "SparseKitError",
    "ValidationError",
    "InvalidArgumentError",
    "DimensionError",
    "FormatError",
]
