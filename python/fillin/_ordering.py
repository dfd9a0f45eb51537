#!/usr/bin/env python3
# =============================================================================
#     File: _ordering.py
#  Created: 2025-07-10 16:05
#   Author: Bernie Roesler
#
"""
Compare candidate fill-reducing orderings of a symmetric matrix.
"""
# =============================================================================

import warnings

import numpy as np
from scipy import sparse

from ._pattern import ArithmeticOverflow, InvalidPattern, SparsityPattern
from ._symbolic import estimate_fillin, to_fixed_width, warn_unmirrored


def compare_orderings(A, perms, on_error='skip'):
    """Estimate the Cholesky fill-in of `A` under each candidate ordering.

    The lower triangle of `A` is mirrored onto the upper before each
    permutation is applied, so either the full symmetric pattern or its lower
    triangle may be given.

    Parameters
    ----------
    A : (N, N) SparsityPattern, sparse array, or array_like
        The pattern of a symmetric matrix.
    perms : iterable of (N,) array_like of int
        The candidate permutations. Each is applied as ``A[p][:, p]``.
    on_error : str, optional in {'skip', 'raise'}
        What to do when a candidate cannot be scored. If 'skip' (default),
        warn and record -1 for that candidate. If 'raise', re-raise the error.

    Returns
    -------
    counts : (K,) ndarray of int64
        The number of nonzeros in ``L + L.T`` for each candidate, or -1 for
        skipped candidates.
    """
    return _compare_orderings(A, perms, on_error, stacklevel=3)


def _compare_orderings(A, perms, on_error, stacklevel):
    """Score each ordering. `stacklevel` is counted from this function."""
    if on_error not in ('skip', 'raise'):
        raise ValueError(
            f"on_error must be 'skip' or 'raise', got '{on_error}'."
        )

    A = SparsityPattern.from_any(A)

    if A.has_unmirrored_upper():
        warn_unmirrored(stacklevel + 1)

    S = A.mirror_lower()
    counts = []

    for k, p in enumerate(perms):
        try:
            nnz = estimate_fillin(S.permute(p))
            counts.append(to_fixed_width(nnz, np.int64))
        except (InvalidPattern, ArithmeticOverflow) as e:
            if on_error == 'raise':
                raise
            warnings.warn(
                f"Skipping ordering {k}: {e}",
                UserWarning,
                stacklevel=stacklevel
            )
            counts.append(-1)

    return np.array(counts, dtype=np.int64)


def best_ordering(A, perms, on_error='skip'):
    """Find the candidate ordering with the least Cholesky fill-in.

    Parameters
    ----------
    A : (N, N) SparsityPattern, sparse array, or array_like
        The pattern of a symmetric matrix.
    perms : sequence of (N,) array_like of int
        The candidate permutations.
    on_error : str, optional in {'skip', 'raise'}
        See `compare_orderings`.

    Returns
    -------
    k : int
        The index of the best candidate. Ties go to the first.
    nnz : int
        Its fill-in count.

    Raises
    ------
    ValueError
        If no candidate could be scored.
    """
    counts = _compare_orderings(A, perms, on_error, stacklevel=3)
    valid = np.flatnonzero(counts >= 0)

    if valid.size == 0:
        raise ValueError("No valid ordering among the candidates.")

    k = valid[np.argmin(counts[valid])]

    return int(k), int(counts[k])


def profile(A):
    r"""Compute the profile of a sparse, symmetric matrix.

    The matrix *profile*, also called the *envelope*, is a measure of how close
    the entries of `A` are to the diagonal. It is defined as:

    .. math::
        \text{profile}(A) = \sum_{j=0}^{N-1} (j - \min \mathcal{A}_{*j})

    where `N` is the number of columns in `A`.

    Parameters
    ----------
    A : (N, N) SparsityPattern or sparse array
        A square symmetric matrix.

    Returns
    -------
    result : int
        The matrix profile of `A`.

    See Also
    --------
    bandwidth : Compute the bandwidth of a sparse matrix.
    """
    return int(np.sum(diag_dist(A)))


def bandwidth(A):
    r"""Compute the bandwidth of a sparse, symmetric matrix.

    .. math::
        \text{bandwidth}(A) = \max_j (j - \min \mathcal{A}_{*j})

    Parameters
    ----------
    A : (N, N) SparsityPattern or sparse array
        A square symmetric matrix.

    Returns
    -------
    result : int
        The bandwidth of `A`, or 0 if `A` is empty.
    """
    d = diag_dist(A)
    return int(np.max(d)) if d.size else 0


def diag_dist(A):
    """Compute the distance to the diagonal of the first non-zero in each column.

    Parameters
    ----------
    A : (N, N) SparsityPattern or sparse array
        A square symmetric matrix.

    Returns
    -------
    result : (N,) ndarray
        The distance to the diagonal of the first non-zero in each column.
    """
    if isinstance(A, SparsityPattern):
        A = A.to_scipy()

    if not sparse.issparse(A):
        raise ValueError("Matrix must be sparse.")

    M, N = A.shape

    if M != N:
        raise ValueError("Matrix must be square.")

    A = sparse.csc_array(A, dtype=bool)
    A.eliminate_zeros()

    if (A != A.T).nnz > 0:
        warnings.warn(
            "Matrix is not symmetric; results may be incorrect.",
            UserWarning,
            stacklevel=2
        )

    # Ensure the diagonal is non-zero so that every column has at least one
    # entry and A.indptr is well-defined
    A = A + sparse.eye_array(N, dtype=bool, format='csc')
    A = sparse.csc_array(A)
    A.sort_indices()

    # Get the minimum row index for each column
    min_row = A.indices[A.indptr[:-1]]

    return np.arange(N) - min_row

# =============================================================================
# =============================================================================
