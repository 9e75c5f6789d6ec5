"""
CPU backend for the train/test splitter.
"""

from __future__ import annotations

import math
import time
import warnings

import numpy as np
import scipy.sparse as sp
from numpy.typing import NDArray

from sparsekit.core.result import Result
from sparsekit.core.compute.timing import timed
from sparsekit.split._common import SplitParams
from sparsekit.split.design import SplitDesign


def clock_seed() -> int:
    """Seed derived from the high-resolution and wall clocks."""
    return time.time_ns() ^ time.perf_counter_ns()


class CPUSplitBackend:
    """
    CPU backend partitioning nonzero entries by a random permutation.
    """

    @property
    def name(self) -> str:
        return 'cpu_split'

    def solve(self, design: SplitDesign) -> Result[SplitParams]:
        """Split entries and return Result[SplitParams]."""
        coo = design.matrix
        shape = design.shape
        seed = design.seed if design.seed is not None else clock_seed()
        warnings_list: list[str] = []

        with timed() as timer:
            with timer.section('collect_entries'):
                rows = coo.row
                cols = coo.col
                vals = coo.data
                n_entries = len(vals)

            with timer.section('permutation'):
                rng = np.random.default_rng(seed)
                perm = rng.permutation(n_entries)
                n_train = math.floor(design.fraction * n_entries)
                train_idx = perm[:n_train]
                test_idx = perm[n_train:]

            with timer.section('assemble'):
                train = self._select(rows, cols, vals, train_idx, shape, coo.dtype)
                test = self._select(rows, cols, vals, test_idx, shape, coo.dtype)

        if n_entries == 0:
            warnings_list.append("matrix has no nonzero entries; both splits are empty")
        elif 0.0 < design.fraction < 1.0 and n_train in (0, n_entries):
            side = "train" if n_train == 0 else "test"
            warnings_list.append(
                f"{side} split is empty (fraction={design.fraction}, nnz={n_entries})"
            )

        for msg in warnings_list:
            warnings.warn(msg, stacklevel=3)

        return Result(
            params=SplitParams(train=train, test=test),
            info={
                'seed': seed,
                'nnz': n_entries,
                'n_train': n_train,
                'n_test': n_entries - n_train,
                'fraction': design.fraction,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    @staticmethod
    def _select(
        rows: NDArray,
        cols: NDArray,
        vals: NDArray,
        idx: NDArray,
        shape: tuple[int, int],
        dtype: np.dtype,
    ) -> sp.csc_matrix:
        """Build a matrix from the entries at positions idx."""
        # coordinates are unique, so construction never sums entries
        return sp.csc_matrix(
            (vals[idx], (rows[idx], cols[idx])),
            shape=shape,
            dtype=dtype,
        )
