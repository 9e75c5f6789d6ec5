"""
Common data structures for the train/test splitter.

SplitParams is the payload wrapped by Result[P] and exposed through
SplitSolution.
"""

from __future__ import annotations

from dataclasses import dataclass

import scipy.sparse as sp


@dataclass(frozen=True)
class SplitParams:
    """
    Parameter payload for a train/test split.

    - train: entries selected by the first floor(fraction * nnz) positions
      of the permutation
    - test: all remaining entries
    """
    train: sp.csc_matrix
    test: sp.csc_matrix
