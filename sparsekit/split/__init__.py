"""
Train/test splitting of a sparse matrix's nonzero entries.

Usage:
    from sparsekit.split import split_train_test

    train, test = split_train_test(A, 0.9)
    result = split_train_test(A, 0.9, seed=42)
    result.n_train, result.seed
"""

from sparsekit.split.design import SplitDesign
from sparsekit.split._common import SplitParams
from sparsekit.split.solution import SplitSolution
from sparsekit.split.solvers import split_train_test

__all__ = [
    "split_train_test",
    "SplitDesign",
    "SplitParams",
    "SplitSolution",
]
