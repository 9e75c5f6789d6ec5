"""
Solver dispatch for the train/test splitter.
"""

from __future__ import annotations

from typing import Any

from sparsekit.split.design import SplitDesign
from sparsekit.split.solution import SplitSolution
from sparsekit.split.backends.cpu import CPUSplitBackend


def split_train_test(
    matrix: Any,
    fraction: float,
    *,
    seed: int | None = None,
) -> SplitSolution:
    """
    Randomly partition the nonzero entries of a matrix into train and test.

    The entries are shuffled by a uniformly random permutation; the first
    floor(fraction * nnz) entries go to train and the rest to test. Both
    results have the input's shape and train + test equals the input.

    Parameters
    ----------
    matrix : scipy.sparse matrix or array-like
        2D input. Dense input is converted; stored zeros are ignored.
    fraction : float
        Proportion of entries for train, in [0, 1].
    seed : int, optional
        Random seed. When omitted, a seed is drawn from the clock so
        successive calls give different splits; the seed used is available
        as ``result.seed``.

    Returns
    -------
    SplitSolution
        Unpacks as ``train, test``.

    Raises
    ------
    InvalidArgumentError
        If fraction is outside [0, 1].

    Examples
    --------
    >>> A = scipy.sparse.random(1000, 1000, density=0.3, format='csc')
    >>> train, test = split_train_test(A, 0.9)
    >>> (train + test != A).nnz
    0
    """
    design = SplitDesign.from_matrix(matrix, fraction, seed=seed)
    result = CPUSplitBackend().solve(design)
    return SplitSolution(_result=result, _design=design)
