"""
SplitDesign: validated input for the train/test splitter.

Wraps a sparse matrix in canonical COO form together with the requested
train fraction and optional seed. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import scipy.sparse as sp

from sparsekit.core.validation import check_fraction, check_sparse


@dataclass(frozen=True)
class SplitDesign:
    """
    Frozen design for a train/test split of nonzero entries.

    Attributes:
        matrix: Input in COO form with unique coordinates and no stored zeros.
        fraction: Proportion of nonzero entries assigned to train, in [0, 1].
        seed: Explicit random seed, or None to seed from the clock.

    Construction:
        SplitDesign.from_matrix(A, 0.9)
        SplitDesign.from_matrix(A, 0.9, seed=42)
    """
    matrix: sp.coo_matrix
    fraction: float
    seed: int | None

    @classmethod
    def from_matrix(
        cls,
        matrix: Any,
        fraction: float,
        *,
        seed: int | None = None,
    ) -> SplitDesign:
        """
        Create a split design with validation.

        The fraction is checked before the matrix is touched, so an
        out-of-range fraction fails without converting the input.

        Args:
            matrix: scipy.sparse matrix/array or dense 2D array-like.
            fraction: Train fraction in [0, 1].
            seed: Random seed. None derives one from the clock.

        Returns:
            Validated SplitDesign.

        Raises:
            InvalidArgumentError: If fraction is not in [0, 1].
            DimensionError: If matrix is not 2D.
            ValidationError: If matrix is not numeric.
        """
        frac = check_fraction(fraction, "fraction")
        coo = check_sparse(matrix, "matrix")
        return cls(matrix=coo, fraction=frac, seed=seed)

    @property
    def shape(self) -> tuple[int, int]:
        """Declared shape (m, n) of the input."""
        return self.matrix.shape

    @property
    def nnz(self) -> int:
        """Number of nonzero entries to partition."""
        return int(self.matrix.nnz)

    def __repr__(self) -> str:
        m, n = self.shape
        return (
            f"SplitDesign(shape=({m}, {n}), nnz={self.nnz}, "
            f"fraction={self.fraction}, seed={self.seed})"
        )
