#!/usr/bin/env python3
# =============================================================================
#     File: __init__.py
#  Created: 2025-07-08 10:15
#   Author: Bernie Roesler
#
"""
fillin: Symbolic estimation of Cholesky fill-in for sparse symmetric matrices.

The number of nonzeros in the Cholesky factor is computed from the matrix
pattern alone, by building the elimination tree on the fly. It is used to
compare candidate fill-reducing orderings before paying for a numeric
factorization.

Example usage:
    import fillin
    A = fillin.davis_example_chol()
    p = scipy.sparse.csgraph.reverse_cuthill_mckee(A.to_scipy())
    fillin.estimate_fillin(A)             # 55
    fillin.estimate_fillin(A.permute(p))

Author: Bernie Roesler
Date: 2025-07-08
Version: 0.1
"""
# =============================================================================

from ._pattern import (
    ArithmeticOverflow,
    InvalidPattern,
    SparsityPattern,
    is_permutation,
)
from ._symbolic import (
    NO_PARENT,
    SymbolicCount,
    cholesky_pattern,
    column_counts,
    estimate_fillin,
    etree,
    symbolic_count,
    to_fixed_width,
)
from ._reference import reference_fillin
from ._ordering import (
    bandwidth,
    best_ordering,
    compare_orderings,
    diag_dist,
    profile,
)
from .utils import davis_example_chol, star_pattern


__all__ = [
    'ArithmeticOverflow',
    'InvalidPattern',
    'NO_PARENT',
    'SparsityPattern',
    'SymbolicCount',
    'bandwidth',
    'best_ordering',
    'cholesky_pattern',
    'column_counts',
    'compare_orderings',
    'davis_example_chol',
    'diag_dist',
    'estimate_fillin',
    'etree',
    'is_permutation',
    'profile',
    'reference_fillin',
    'star_pattern',
    'symbolic_count',
    'to_fixed_width',
]

# =============================================================================
# =============================================================================
