#!/usr/bin/env python3
# =============================================================================
#     File: utils.py
#  Created: 2025-07-09 11:30
#   Author: Bernie Roesler
#
"""
Example matrices and utility functions for the fillin module.
"""
# =============================================================================

import numpy as np

from scipy import sparse

from ._pattern import SparsityPattern


def davis_example_chol(format='pattern'):
    """Create an 11x11 example matrix from Davis, Figure 4.2 [0].

    .. code-block:: python
        array([[10.,  0.,  0.,  0.,  0.,  1.,  1.,  0.,  0.,  0.,  0.],
               [ 0., 11.,  1.,  0.,  0.,  0.,  0.,  1.,  0.,  0.,  0.],
               [ 0.,  1., 12.,  0.,  0.,  0.,  0.,  0.,  0.,  1.,  1.],
               [ 0.,  0.,  0., 13.,  0.,  1.,  0.,  0.,  0.,  1.,  0.],
               [ 0.,  0.,  0.,  0., 14.,  0.,  0.,  1.,  0.,  0.,  1.],
               [ 1.,  0.,  0.,  1.,  0., 15.,  0.,  0.,  1.,  1.,  0.],
               [ 1.,  0.,  0.,  0.,  0.,  0., 16.,  0.,  0.,  0.,  1.],
               [ 0.,  1.,  0.,  0.,  1.,  0.,  0., 17.,  0.,  1.,  1.],
               [ 0.,  0.,  0.,  0.,  0.,  1.,  0.,  0., 18.,  0.,  0.],
               [ 0.,  0.,  1.,  1.,  0.,  1.,  0.,  1.,  0., 19.,  1.],
               [ 0.,  0.,  1.,  0.,  1.,  0.,  1.,  1.,  0.,  1., 20.]])

    Parameters
    ----------
    format : str, optional in {'pattern', 'csr', 'csc', 'ndarray'}
        The format of the output. Default is a `SparsityPattern`.

    Returns
    -------
    A : (11, 11) matrix in the specified format
        The example matrix from Davis.

    References
    ----------
    .. [0] Davis, Timothy A. "Direct Methods for Sparse Linear Systems",
        Figure 4.2, p 39.
    """
    N = 11
    # strictly lower triangle
    rows = np.r_[5, 6, 2, 7, 9, 10, 5, 9, 7, 10, 8, 9, 10, 9, 10, 10]
    cols = np.r_[0, 0, 1, 1, 2,  2, 3, 3, 4,  4, 5, 5,  6, 7,  7,  9]
    vals = np.ones(rows.size)

    L = sparse.csc_array((vals, (rows, cols)), shape=(N, N))
    A = L + L.T + sparse.diags_array(np.arange(10.0, 10.0 + N))

    return _format_matrix(sparse.csc_array(A), format)


def star_pattern(N, hub=0):
    """Create the pattern of an "arrow" matrix.

    Node `hub` is connected to every other node, and the diagonal is stored.
    Eliminating the hub first fills the whole factor, while eliminating it
    last causes no fill at all.

    Parameters
    ----------
    N : int
        The order of the matrix.
    hub : int, optional
        The index of the hub node. Default is 0.

    Returns
    -------
    result : SparsityPattern
        The full symmetric pattern.
    """
    if not 0 <= hub < max(N, 1):
        raise ValueError(f"hub must be in [0, {N}), got {hub}.")

    others = np.setdiff1d(np.arange(N), [hub])
    rows = np.r_[np.arange(N), np.full(others.size, hub), others]
    cols = np.r_[np.arange(N), others, np.full(others.size, hub)]

    return SparsityPattern.from_coo(rows, cols, N)


def _format_matrix(A, format):
    """Convert a matrix to the specified format."""
    match format:
        case 'pattern':
            return SparsityPattern.from_scipy(A)
        case 'csc' | 'csr' | 'coo':
            return getattr(A, f"to{format}")()
        case 'ndarray':
            return A.toarray()
        case _:
            raise ValueError(f"Invalid format '{format}'")

# =============================================================================
# =============================================================================
