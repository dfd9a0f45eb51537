#!/usr/bin/env python3
# =============================================================================
#     File: _symbolic.py
#  Created: 2025-07-08 13:47
#   Author: Bernie Roesler
#
"""
Symbolic Cholesky analysis: count the nonzeros of the Cholesky factor of
a sparse symmetric matrix from its pattern alone, as presented in Davis,
Chapter 4.
"""
# =============================================================================

import warnings

from collections import namedtuple

import numpy as np
from scipy import sparse

from ._pattern import ArithmeticOverflow, SparsityPattern

NO_PARENT = -1  # marks a root of the elimination tree


SymbolicCount = namedtuple(
    'SymbolicCount',
    ['parent', 'col_counts', 'nnz_lower', 'nnz']
)
SymbolicCount.__doc__ = """\
Result of a symbolic Cholesky count.

Attributes
----------
parent : (N,) ndarray of int
    The elimination tree. ``parent[j] == -1`` if `j` is a root.
col_counts : (N,) ndarray of int
    The number of nonzeros in each column of the strictly lower triangle of
    the Cholesky factor `L`.
nnz_lower : int
    The number of nonzeros in the strictly lower triangle of `L`.
nnz : int
    The number of nonzeros in ``L + L.T``, including the diagonal.
"""


def estimate_fillin(A, symmetrize=False, dtype=None):
    r"""Count the nonzeros of the Cholesky factor of a symmetric matrix.

    Only the pattern of `A` is used; no numeric factorization is performed.
    The result counts both triangles of the factor and its diagonal:

    .. math::
        \text{nnz} = 2 |\{(i, j) : i > j, L_{ij} \ne 0\}| + N

    The rows are eliminated in their given order, so comparing the counts of
    ``A[p][:, p]`` for several permutations `p` compares the cost of those
    orderings.

    Parameters
    ----------
    A : (N, N) SparsityPattern, sparse array, or array_like
        The pattern of a symmetric matrix. Only the strictly lower entries of
        each row are read, so either the full symmetric pattern or its lower
        triangle may be given.
    symmetrize : bool, optional
        If True, count the factor of ``A + A.T`` instead. Default is False.
    dtype : integer dtype, optional
        If given, return the count as this fixed-width type.

    Returns
    -------
    nnz : int
        The number of nonzeros in ``L + L.T``, including the diagonal.

    Raises
    ------
    InvalidPattern
        If `A` is malformed or has out-of-range indices.
    ArithmeticOverflow
        If the count does not fit in `dtype`.

    See Also
    --------
    symbolic_count : The same pass, also returning the tree and column counts.
    """
    nnz = _count(A, symmetrize, stacklevel=5).nnz

    if dtype is not None:
        return to_fixed_width(nnz, dtype)

    return nnz


def symbolic_count(A, symmetrize=False):
    """Compute the elimination tree and column counts of a Cholesky factor.

    .. note:: See Davis, p 41, `cs_etree`, and the up-looking row subtree
        traversal of p 43.

    Parameters
    ----------
    A : (N, N) SparsityPattern, sparse array, or array_like
        The pattern of a symmetric matrix.
    symmetrize : bool, optional
        If True, analyze ``A + A.T`` instead. Default is False.

    Returns
    -------
    result : SymbolicCount
        The elimination tree, strictly lower column counts, and totals.
    """
    return _count(A, symmetrize, stacklevel=5)


def etree(A):
    """Compute the elimination tree of a symmetric matrix.

    Parameters
    ----------
    A : (N, N) SparsityPattern, sparse array, or array_like
        The pattern of a symmetric matrix.

    Returns
    -------
    parent : (N,) ndarray of int
        The parent of each node. Roots have ``parent[j] == -1``.
    """
    return _count(A, False, stacklevel=5).parent


def column_counts(A):
    """Count the nonzeros in each column of `L`, including the diagonal."""
    return _count(A, False, stacklevel=5).col_counts + 1


def cholesky_pattern(A, lower=True):
    """Compute the nonzero pattern of the Cholesky factor.

    Row `r` of `L` is the set of nodes reached by walking the elimination
    tree up from each nonzero in ``A[r, :r]``, plus the diagonal.

    Parameters
    ----------
    A : (N, N) SparsityPattern, sparse array, or array_like
        The pattern of a symmetric matrix.
    lower : bool, optional
        If True (default), return the pattern of `L`, otherwise of ``L.T``.

    Returns
    -------
    L : (N, N) csc_array of bool
        The pattern of the Cholesky factor, diagonal included.
    """
    A = _prepare(A, False, stacklevel=4)
    N = A.n

    rows, cols = [], []
    _up_looking(A, rows=rows, cols=cols)

    rows = np.r_[np.arange(N), np.array(rows, dtype=np.int64)]
    cols = np.r_[np.arange(N), np.array(cols, dtype=np.int64)]
    vals = np.ones(rows.size, dtype=bool)

    L = sparse.csc_array((vals, (rows, cols)), shape=(N, N))
    L.sort_indices()

    return L if lower else L.T.tocsc()


def to_fixed_width(x, dtype):
    """Convert `x` to the integer type `dtype`, refusing to wrap around.

    Raises
    ------
    ArithmeticOverflow
        If `x` does not fit in `dtype`.
    """
    info = np.iinfo(dtype)

    if not info.min <= x <= info.max:
        raise ArithmeticOverflow(
            f"Count {x} does not fit in {np.dtype(dtype).name} "
            f"[{info.min}, {info.max}]."
        )

    return np.dtype(dtype).type(x)


# -----------------------------------------------------------------------------
#         Helpers
# -----------------------------------------------------------------------------
def warn_unmirrored(stacklevel):
    """Warn that strictly upper entries without a mirror will be ignored.

    `stacklevel` is counted from this function, as in `warnings.warn`.
    """
    warnings.warn(
        "Pattern is not structurally symmetric; only the lower triangle "
        "is used, so results may be incorrect. "
        "Pass symmetrize=True to use A + A.T.",
        UserWarning,
        stacklevel=stacklevel
    )


def _count(A, symmetrize, stacklevel):
    """Run the symbolic count on `A`. `stacklevel` is passed to `_prepare`."""
    A = _prepare(A, symmetrize, stacklevel)
    parent, col_counts, nnz_lower = _up_looking(A)
    return SymbolicCount(parent, col_counts, nnz_lower, 2 * nnz_lower + A.n)


def _prepare(A, symmetrize, stacklevel):
    """Convert `A` to a pattern, warning if upper entries would be lost.

    `stacklevel` is counted from `warn_unmirrored`, so a public function
    calling this directly passes 4.
    """
    A = SparsityPattern.from_any(A)

    if symmetrize:
        return A.symmetrize()

    if A.has_unmirrored_upper():
        warn_unmirrored(stacklevel)

    return A


def _up_looking(A, rows=None, cols=None):
    """Walk the row subtrees of `A`, building the elimination tree.

    Parameters
    ----------
    A : SparsityPattern
        The pattern to analyze.
    rows, cols : list, optional
        If given, the coordinates of each strictly lower nonzero of `L` are
        appended to these lists.

    Returns
    -------
    parent : (N,) ndarray of int
        The elimination tree.
    col_counts : (N,) ndarray of int
        Strictly lower nonzeros in each column of `L`.
    nnz_lower : int
        Total strictly lower nonzeros in `L`.
    """
    N = A.n
    row_ptr = A.row_ptr
    col_idx = A.col_idx
    record = rows is not None and cols is not None

    parent = np.empty(N, dtype=np.int64)
    tags = np.empty(N, dtype=np.int64)
    col_counts = np.empty(N, dtype=np.int64)
    nnz_lower = 0  # python int, cannot overflow

    for r in range(N):
        # L[r, :] is every node reachable in the etree from A[r, :r]
        parent[r] = NO_PARENT
        tags[r] = r
        col_counts[r] = 0

        for c in col_idx[row_ptr[r]:row_ptr[r+1]]:
            if c >= r:
                continue

            # follow path from c towards the root, stop at a flagged node
            while tags[c] != r:
                if parent[c] == NO_PARENT:
                    parent[c] = r
                col_counts[c] += 1  # L[r, c] is nonzero
                nnz_lower += 1
                tags[c] = r
                if record:
                    rows.append(r)
                    cols.append(c)
                c = parent[c]

    return parent, col_counts, nnz_lower

# =============================================================================
# =============================================================================
