#!/usr/bin/env python3
# =============================================================================
#     File: test_pattern.py
#  Created: 2025-07-09 15:20
#   Author: Bernie Roesler
#
"""
Test the SparsityPattern interface and its input validation.
"""
# =============================================================================

import pytest

import numpy as np

from numpy.testing import assert_array_equal
from scipy import sparse

from .helpers import generate_random_permutations

from fillin import InvalidPattern, SparsityPattern, is_permutation


@pytest.fixture
def P():
    """A 4x4 lower-triangular pattern."""
    #      row: 0   1      2     3
    row_ptr = [0, 0, 1, 3, 4]
    col_idx = [0, 0, 1, 1]
    return SparsityPattern(row_ptr, col_idx)


def test_construction(P):
    """Test the basic properties of a pattern."""
    assert P.n == 4
    assert P.shape == (4, 4)
    assert P.nnz == 4
    assert_array_equal(P.row(0), [])
    assert_array_equal(P.row(2), [0, 1])
    assert_array_equal(P.row(3), [1])
    assert repr(P) == "SparsityPattern(n=4, nnz=4)"

    with pytest.raises(IndexError):
        P.row(4)


def test_empty_pattern():
    """Test a 0x0 pattern."""
    P = SparsityPattern([0], [])
    assert P.n == 0
    assert P.nnz == 0


def test_immutable(P):
    """Test that the index arrays cannot be modified."""
    with pytest.raises(ValueError):
        P.col_idx[0] = 3

    with pytest.raises(ValueError):
        P.row_ptr[1] = 2


def test_copies_input():
    """Test that the pattern does not alias the caller's arrays."""
    col_idx = np.array([0, 1])
    P = SparsityPattern([0, 1, 2], col_idx)
    col_idx[0] = 1
    assert_array_equal(P.col_idx, [0, 1])


@pytest.mark.parametrize(
    "row_ptr, col_idx, n",
    [
        pytest.param([0, 1, 2], [0, 2], None, id="col_too_large"),
        pytest.param([0, 1, 2], [0, -1], None, id="col_negative"),
        pytest.param([0, 2, 1, 2], [0, 1], None, id="row_ptr_decreasing"),
        pytest.param([1, 1, 2], [0, 1], None, id="row_ptr_start"),
        pytest.param([0, 1, 3], [0, 1], None, id="row_ptr_end"),
        pytest.param([0, 1, 2], [0, 1], 3, id="wrong_n"),
        pytest.param([0, 1, 2], [0.0, 1.0], None, id="float_indices"),
        pytest.param([[0, 1, 2]], [0, 1], None, id="row_ptr_2d"),
        pytest.param([], [], None, id="row_ptr_empty"),
        pytest.param([0], [], -1, id="negative_n"),
    ]
)
def test_invalid_pattern(row_ptr, col_idx, n):
    """Test that malformed patterns are rejected."""
    with pytest.raises(InvalidPattern):
        SparsityPattern(row_ptr, col_idx, n)


def test_invalid_pattern_is_value_error():
    """Test that InvalidPattern can be caught as a ValueError."""
    with pytest.raises(ValueError, match="out of range"):
        SparsityPattern([0, 1], [1])


def test_from_scipy():
    """Test conversion from a scipy sparse array."""
    A = sparse.csc_array(np.array([[1.0, 0, 2.0],
                                   [0, 3.0, 0],
                                   [2.0, 0, 4.0]]))
    P = SparsityPattern.from_scipy(A)
    assert P.n == 3
    assert P.nnz == 5
    assert_array_equal(P.row(0), [0, 2])
    assert_array_equal(P.toarray(), A.toarray() != 0)


def test_from_scipy_keeps_explicit_zeros():
    """Test that explicitly stored zeros are part of the pattern."""
    A = sparse.csr_array(([0.0, 1.0], [1, 0], [0, 1, 2]), shape=(2, 2))
    P = SparsityPattern.from_scipy(A)
    assert P.nnz == 2


def test_from_dense(P):
    """Test conversion from a dense array."""
    D = np.zeros((4, 4))
    D[0, 0] = D[2, 0] = D[2, 1] = D[3, 1] = 5.0
    Q = SparsityPattern.from_dense(D)
    # P has a (1, 0) entry instead of (0, 0)
    assert Q != P
    assert Q.nnz == 4


def test_from_coo_duplicates():
    """Test that duplicate coordinates collapse."""
    P = SparsityPattern.from_coo([0, 1, 1, 1], [0, 0, 0, 1], 2)
    assert P.nnz == 3
    assert_array_equal(P.row(1), [0, 1])


def test_from_coo_out_of_range():
    with pytest.raises(InvalidPattern):
        SparsityPattern.from_coo([0, 2], [0, 0], 2)


@pytest.mark.parametrize(
    "A",
    [
        pytest.param(np.ones((2, 3)), id="dense"),
        pytest.param(sparse.csr_array(np.ones((3, 2))), id="sparse"),
        pytest.param(np.ones(3), id="1d"),
    ]
)
def test_not_square(A):
    """Test that non-square matrices are rejected."""
    with pytest.raises(InvalidPattern):
        SparsityPattern.from_any(A)


def test_from_any_passthrough(P):
    assert SparsityPattern.from_any(P) is P


def test_equality_ignores_order():
    """Test that equality compares entries, not storage order."""
    P = SparsityPattern([0, 2, 3], [1, 0, 1])
    Q = SparsityPattern([0, 2, 3], [0, 1, 1])
    assert P == Q
    assert P != SparsityPattern([0, 1, 2], [0, 1])
    assert P != SparsityPattern([0, 0, 0, 0], [])


def test_symmetrize(P):
    """Test the pattern of A + A.T."""
    S = P.symmetrize()
    D = P.toarray()
    assert_array_equal(S.toarray(), D | D.T)
    assert S == S.T


def test_tril():
    """Test extracting the lower triangle."""
    D = np.ones((3, 3), dtype=bool)
    P = SparsityPattern.from_dense(D)
    assert_array_equal(P.tril().toarray(), np.tril(D))
    assert_array_equal(P.tril(-1).toarray(), np.tril(D, -1))


@pytest.mark.parametrize("A, p", generate_random_permutations())
def test_permute(A, p):
    """Test symmetric permutation against scipy indexing."""
    S = A.to_scipy()
    C = A.permute(p)
    assert_array_equal(C.toarray(), S[p][:, p].toarray())


@pytest.mark.parametrize(
    "p",
    [
        pytest.param([0, 1, 1, 3], id="repeated"),
        pytest.param([0, 1, 2], id="short"),
        pytest.param([0, 1, 2, 4], id="out_of_range"),
    ]
)
def test_permute_invalid(P, p):
    """Test that invalid permutations are rejected."""
    assert not is_permutation(p, P.n)
    with pytest.raises(InvalidPattern, match="permutation"):
        P.permute(p)


def test_unmirrored_upper(P):
    """Test the detection of upper entries that the estimator would ignore."""
    # lower triangle only
    assert not P.has_unmirrored_upper()
    # full symmetric
    assert not P.symmetrize().has_unmirrored_upper()
    # upper triangle only
    assert P.T.has_unmirrored_upper()

    # one missing mirror
    D = P.symmetrize().toarray()
    D[3, 1] = False
    assert SparsityPattern.from_dense(D).has_unmirrored_upper()


def test_to_scipy_invalid_format(P):
    with pytest.raises(ValueError):
        P.to_scipy(format='foo')


def test_unsorted_columns():
    """Test a directly built pattern with unsorted and duplicate columns."""
    P = SparsityPattern([0, 1, 3, 6], [0, 1, 0, 2, 0, 0])

    assert_array_equal(
        P.toarray(),
        [[True, False, False],
         [True, True, False],
         [True, False, True]]
    )
    assert P == SparsityPattern.from_coo([0, 1, 1, 2, 2], [0, 0, 1, 0, 2], 3)
    assert P.symmetrize() == P.mirror_lower()
    assert P.tril() == P
    assert P.permute([2, 1, 0]).nnz == 5

    # the stored order is left untouched
    assert_array_equal(P.col_idx, [0, 1, 0, 2, 0, 0])


def test_mirror_lower(P):
    """Test that the lower triangle is mirrored and the upper is dropped."""
    D = P.toarray()
    S = P.mirror_lower()
    assert_array_equal(S.toarray(), D | D.T)
    assert P.symmetrize().mirror_lower() == S
    # P has no diagonal, so nothing of its transpose survives
    assert P.T.mirror_lower() == SparsityPattern(np.zeros(5, dtype=int), [])


@pytest.mark.parametrize("A, p", generate_random_permutations())
def test_permute_symm(A, p):
    """Test that a lower triangle permutes to the full symmetric pattern."""
    assert A.tril().permute_symm(p) == A.permute(p)
    assert A.permute_symm(p) == A.permute(p)

# =============================================================================
# =============================================================================
