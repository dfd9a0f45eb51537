#!/usr/bin/env python3
# =============================================================================
#     File: helpers.py
#  Created: 2025-07-09 15:02
#   Author: Bernie Roesler
#
"""Helper functions for the fillin python tests."""
# =============================================================================

import pytest

import numpy as np

from fillin import SparsityPattern


# -----------------------------------------------------------------------------
#         Pattern Generators
# -----------------------------------------------------------------------------
def random_symmetric_dense(rng, N, d):
    """Create a random dense boolean symmetric matrix with a full diagonal."""
    B = np.tril(rng.random((N, N)) < d, -1)
    return B | B.T | np.eye(N, dtype=bool)


def generate_random_patterns(seed=565656, N_trials=50, N_max=30, d_scale=0.3):
    """Generate a list of random symmetric patterns of maximum size N x N."""
    rng = np.random.default_rng(seed)
    for trial in range(N_trials):
        N = rng.integers(1, N_max, endpoint=True)
        d = d_scale * rng.random()  # density

        A = SparsityPattern.from_dense(random_symmetric_dense(rng, N, d))

        yield pytest.param(
            A,
            id=f"random_{trial:02d}::{A.shape}::{A.nnz}",
            marks=pytest.mark.random
        )


def generate_random_permutations(seed=565656, N_trials=20, N_max=30):
    """Generate random symmetric patterns, each with a random permutation."""
    rng = np.random.default_rng(seed)
    for trial in range(N_trials):
        N = rng.integers(1, N_max, endpoint=True)
        d = 0.2 * rng.random()

        A = SparsityPattern.from_dense(random_symmetric_dense(rng, N, d))
        p = rng.permutation(N)

        yield pytest.param(
            A, p,
            id=f"random_{trial:02d}::{A.shape}::{A.nnz}",
            marks=pytest.mark.random
        )


def add_lower_entries(A, rng, k):
    """Add `k` random strictly-lower entries (and their mirrors) to `A`."""
    D = A.toarray()
    N = A.n
    if N < 2:
        return A

    for _ in range(k):
        i, j = rng.integers(0, N, size=2)
        if i == j:
            continue
        D[i, j] = D[j, i] = True

    return SparsityPattern.from_dense(D)


def tridiagonal_pattern(N):
    """Create the pattern of a tridiagonal matrix."""
    D = np.eye(N, dtype=bool) | np.eye(N, k=1, dtype=bool) | np.eye(N, k=-1, dtype=bool)
    return SparsityPattern.from_dense(D)


def lower_dense_pattern(N):
    """Create a pattern with every entry of the lower triangle stored."""
    return SparsityPattern.from_dense(np.tril(np.ones((N, N), dtype=bool)))

# =============================================================================
# =============================================================================
