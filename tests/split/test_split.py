"""
Tests for split_train_test().

Validates the partition invariants (train + test == A, disjoint entry
sets, exact train count), the fraction range check, degenerate inputs,
and seed handling.
"""

import math

import numpy as np
import pytest
import scipy.sparse as sp

from sparsekit.core.exceptions import DimensionError, InvalidArgumentError
from sparsekit.split import SplitDesign, SplitSolution, split_train_test


def _entries(M):
    """Set of (row, col, value) triples stored in M."""
    coo = sp.coo_matrix(M)
    return set(zip(coo.row.tolist(), coo.col.tolist(), coo.data.tolist()))


# ---------------------------------------------------------------------------
# Partition invariants
# ---------------------------------------------------------------------------

class TestPartition:

    @pytest.mark.parametrize("fraction", [0.0, 0.1, 0.5, 0.9, 1.0])
    def test_sum_reconstructs_input(self, random_sparse, fraction):
        train, test = split_train_test(random_sparse, fraction, seed=1)
        assert abs(train + test - random_sparse).max() == 0

    @pytest.mark.parametrize("fraction", [0.0, 0.3, 0.75, 1.0])
    def test_train_count_is_floor(self, random_sparse, fraction):
        result = split_train_test(random_sparse, fraction, seed=1)
        expected = math.floor(fraction * random_sparse.nnz)
        assert result.train.nnz == expected
        assert result.test.nnz == random_sparse.nnz - expected
        assert result.n_train == expected
        assert result.n_test == random_sparse.nnz - expected

    def test_entry_sets_partition_input(self, random_sparse):
        train, test = split_train_test(random_sparse, 0.6, seed=3)
        train_entries = _entries(train)
        test_entries = _entries(test)
        assert train_entries.isdisjoint(test_entries)
        assert train_entries | test_entries == _entries(random_sparse)

    def test_shapes_match_input(self, random_sparse):
        train, test = split_train_test(random_sparse, 0.5, seed=0)
        assert train.shape == random_sparse.shape
        assert test.shape == random_sparse.shape

    def test_dtype_preserved(self):
        A = sp.csc_matrix(np.array([[1, 0, 2], [0, 3, 0]], dtype=np.int64))
        train, test = split_train_test(A, 0.5, seed=0)
        assert train.dtype == np.int64
        assert test.dtype == np.int64

    def test_small_matrix(self, small_sparse):
        train, test = split_train_test(small_sparse, 0.7, seed=5)
        # floor(0.7 * 3) = 2
        assert train.nnz == 2
        assert test.nnz == 1
        np.testing.assert_array_equal(
            (train + test).toarray(), small_sparse.toarray()
        )


# ---------------------------------------------------------------------------
# Edge fractions and degenerate inputs
# ---------------------------------------------------------------------------

class TestEdgeCases:

    def test_fraction_zero(self, small_sparse):
        train, test = split_train_test(small_sparse, 0)
        assert train.nnz == 0
        np.testing.assert_array_equal(test.toarray(), small_sparse.toarray())

    def test_fraction_one(self, small_sparse):
        train, test = split_train_test(small_sparse, 1)
        assert test.nnz == 0
        np.testing.assert_array_equal(train.toarray(), small_sparse.toarray())

    @pytest.mark.parametrize("fraction", [0.0, 0.5, 1.0])
    def test_empty_matrix(self, empty_sparse, fraction):
        with pytest.warns(UserWarning, match="no nonzero entries"):
            result = split_train_test(empty_sparse, fraction)
        train, test = result
        assert train.shape == (5, 7)
        assert test.shape == (5, 7)
        assert train.nnz == 0
        assert test.nnz == 0
        assert result.has_warning("no nonzero")

    def test_zero_by_zero(self):
        with pytest.warns(UserWarning):
            train, test = split_train_test(sp.csc_matrix((0, 0)), 0.5)
        assert train.shape == (0, 0)
        assert test.shape == (0, 0)

    def test_small_fraction_warns_empty_train(self, small_sparse):
        with pytest.warns(UserWarning, match="train split is empty"):
            result = split_train_test(small_sparse, 0.1, seed=0)
        assert result.n_train == 0
        assert result.has_warning("train split is empty")
        assert not result.has_warning("no nonzero")

    def test_dense_input(self):
        A = np.array([[0.0, 1.0], [2.0, 0.0], [0.0, 3.0]])
        train, test = split_train_test(A, 0.5, seed=0)
        assert train.nnz == 1
        np.testing.assert_array_equal((train + test).toarray(), A)

    def test_explicit_zeros_not_counted(self):
        A = sp.csr_matrix(([0.0, 5.0, 6.0], ([0, 1, 2], [0, 1, 2])), shape=(3, 3))
        result = split_train_test(A, 1.0, seed=0)
        assert result.nnz == 2


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestValidation:

    @pytest.mark.parametrize("fraction", [-0.1, 1.1, -1, 2])
    def test_fraction_out_of_range(self, small_sparse, fraction):
        with pytest.raises(InvalidArgumentError, match="between 0 and 1"):
            split_train_test(small_sparse, fraction)

    def test_fraction_checked_before_matrix(self):
        # the matrix is invalid too, but the fraction error wins
        with pytest.raises(InvalidArgumentError):
            split_train_test([1, 2, 3], 5.0)

    def test_non_2d_input(self):
        with pytest.raises(DimensionError):
            split_train_test(np.zeros(4), 0.5)


# ---------------------------------------------------------------------------
# Seeds and solution metadata
# ---------------------------------------------------------------------------

class TestSeed:

    def test_same_seed_same_split(self, random_sparse):
        a_train, _ = split_train_test(random_sparse, 0.5, seed=123)
        b_train, _ = split_train_test(random_sparse, 0.5, seed=123)
        assert _entries(a_train) == _entries(b_train)

    def test_different_seeds_differ(self, random_sparse):
        a_train, _ = split_train_test(random_sparse, 0.5, seed=1)
        b_train, _ = split_train_test(random_sparse, 0.5, seed=2)
        assert _entries(a_train) != _entries(b_train)

    def test_clock_seed_recorded_and_reproducible(self, random_sparse):
        first = split_train_test(random_sparse, 0.5)
        assert isinstance(first.seed, int)
        again = split_train_test(random_sparse, 0.5, seed=first.seed)
        assert _entries(first.train) == _entries(again.train)

    def test_unseeded_calls_differ(self, random_sparse):
        a = split_train_test(random_sparse, 0.5)
        b = split_train_test(random_sparse, 0.5)
        assert a.seed != b.seed


class TestSolution:

    def test_solution_type_and_metadata(self, small_sparse):
        result = split_train_test(small_sparse, 0.7, seed=9)
        assert isinstance(result, SplitSolution)
        assert result.seed == 9
        assert result.fraction == 0.7
        assert result.nnz == 3
        assert result.shape == (4, 4)
        assert result.backend_name == 'cpu_split'
        assert result.warnings == ()

    def test_timing_sections(self, small_sparse):
        result = split_train_test(small_sparse, 0.5, seed=0)
        for key in ('total_seconds', 'collect_entries', 'permutation', 'assemble'):
            assert key in result.timing

    def test_summary_and_repr(self, small_sparse):
        result = split_train_test(small_sparse, 0.7, seed=9)
        text = result.summary()
        assert "TRAIN/TEST SPLIT" in text
        assert "Seed: 9" in text
        assert "n_train=2" in repr(result)

    def test_design_repr(self, small_sparse):
        design = SplitDesign.from_matrix(small_sparse, 0.5, seed=4)
        assert design.nnz == 3
        assert "fraction=0.5" in repr(design)
