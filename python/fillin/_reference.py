#!/usr/bin/env python3
# =============================================================================
#     File: _reference.py
#  Created: 2025-07-09 09:12
#   Author: Bernie Roesler
#
"""
Numeric reference for the symbolic fill-in count.

The factor is computed in floating point and its nonzeros counted. This is
only meant for validating `estimate_fillin` on small matrices.
"""
# =============================================================================

import warnings

import numpy as np
from scipy import linalg as la
from scipy import sparse

from ._pattern import SparsityPattern
from ._symbolic import warn_unmirrored


def reference_fillin(A, p=None, seed=None):
    """Count the nonzeros of a numerically computed Cholesky factor.

    The lower triangle of `A` is mirrored to a full symmetric pattern `S`,
    which is then permuted to ``S[p][:, p]``. The result is given random
    positive off-diagonal values, with a diagonal large enough to make the
    matrix strictly diagonally dominant (and thus positive definite). The dense
    Cholesky factor is then computed with `scipy.linalg.cholesky`.

    Parameters
    ----------
    A : (N, N) SparsityPattern, sparse array, or array_like
        The pattern of a symmetric matrix.
    p : (N,) array_like of int, optional
        A symmetric permutation to apply before factoring.
    seed : int or numpy.random.Generator, optional
        Seed for the off-diagonal values.

    Returns
    -------
    nnz : int
        The number of nonzeros in ``L + L.T``, including the diagonal, or -1
        if the factorization failed.
    """
    A = SparsityPattern.from_any(A)

    if A.has_unmirrored_upper():
        warn_unmirrored(stacklevel=3)

    A = A.mirror_lower()

    if p is not None:
        A = A.permute(p)

    N = A.n

    if N == 0:
        return 0

    # Values for the lower triangle, mirrored onto the upper
    Lp = sparse.tril(A.to_scipy(), k=-1, format='coo')

    rng = np.random.default_rng(seed)
    vals = rng.uniform(0.5, 1.0, size=Lp.nnz)

    S = np.zeros((N, N))
    S[Lp.row, Lp.col] = vals
    S += S.T
    S[np.diag_indices(N)] = np.sum(S, axis=1) + 1.0

    try:
        L = la.cholesky(S, lower=True)
    except la.LinAlgError as e:
        warnings.warn(
            f"Reference Cholesky factorization failed: {e}",
            RuntimeWarning,
            stacklevel=2
        )
        return -1

    return 2 * int(np.count_nonzero(np.tril(L, k=-1))) + N

# =============================================================================
# =============================================================================
