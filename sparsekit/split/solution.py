"""
Solution wrapper for train/test split results.

SplitSolution wraps Result[SplitParams] and unpacks like a pair:

    train, test = split_train_test(A, 0.9)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING

import scipy.sparse as sp

from sparsekit.core.result import Result
from sparsekit.split._common import SplitParams

if TYPE_CHECKING:
    from sparsekit.split.design import SplitDesign


@dataclass
class SplitSolution:
    """
    User-facing train/test split.

    train + test reconstructs the input exactly, and the two matrices
    share no stored coordinate.
    """
    _result: Result[SplitParams]
    _design: 'SplitDesign'

    # --- Core fields ---

    @property
    def train(self) -> sp.csc_matrix:
        """Matrix holding the train entries."""
        return self._result.params.train

    @property
    def test(self) -> sp.csc_matrix:
        """Matrix holding the remaining entries."""
        return self._result.params.test

    @property
    def n_train(self) -> int:
        """Number of entries in train: floor(fraction * nnz)."""
        return self._result.info['n_train']

    @property
    def n_test(self) -> int:
        return self._result.info['n_test']

    @property
    def nnz(self) -> int:
        """Number of nonzero entries in the input."""
        return self._result.info['nnz']

    # --- Metadata ---

    @property
    def shape(self) -> tuple[int, int]:
        return self._design.shape

    @property
    def fraction(self) -> float:
        return self._design.fraction

    @property
    def seed(self) -> int:
        """Seed actually used; pass it back to reproduce this split."""
        return self._result.info['seed']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return self._result.has_warning(substring)

    # --- Tuple protocol ---

    def __iter__(self) -> Iterator[sp.csc_matrix]:
        yield self.train
        yield self.test

    # --- Display ---

    def summary(self) -> str:
        """Short text report of the split."""
        m, n = self.shape
        ratio = self.n_train / self.nnz if self.nnz else 0.0
        lines = [
            "\nTRAIN/TEST SPLIT",
            "",
            f"Shape: {m} x {n}",
            f"Nonzero entries: {self.nnz}",
            f"Train: {self.n_train} ({ratio:.4f} of entries, requested {self.fraction:g})",
            f"Test: {self.n_test}",
            f"Seed: {self.seed}",
            "",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SplitSolution(shape={self.shape}, nnz={self.nnz}, "
            f"n_train={self.n_train}, n_test={self.n_test})"
        )
