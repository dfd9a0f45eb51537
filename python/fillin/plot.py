#!/usr/bin/env python3
# =============================================================================
#     File: plot.py
#  Created: 2025-07-11 14:18
#   Author: Bernie Roesler
#
"""
Functions for plotting the fill-in of a Cholesky factor.
"""
# =============================================================================

import matplotlib.pyplot as plt

from matplotlib.ticker import MaxNLocator
from scipy import sparse

from ._pattern import SparsityPattern
from ._symbolic import cholesky_pattern


def spy_fillin(A, ax=None, **kwargs):
    """Plot the pattern of ``L + L.T``, highlighting the fill-in.

    Entries that are already present in `A` are drawn in the first color
    cycle color, and entries created by the factorization in red.

    Parameters
    ----------
    A : (N, N) SparsityPattern, sparse array, or array_like
        The pattern of a symmetric matrix.
    ax : matplotlib.axes.Axes, optional
        Axes object to plot on. If `None`, the current axes are used.
    **kwargs
        Additional keyword arguments passed to `matplotlib.axes.Axes.spy`.

    Returns
    -------
    ax : matplotlib.axes.Axes
        The Axes object used for plotting.

    Examples
    --------
    >>> import matplotlib.pyplot as plt
    >>> from fillin.utils import davis_example_chol
    >>> ax = spy_fillin(davis_example_chol(), markersize=5)
    >>> plt.show()
    """
    if ax is None:
        ax = plt.gca()

    A = SparsityPattern.from_any(A)
    N = A.n

    L = cholesky_pattern(A)
    F = (L + L.T).astype(bool)

    # Only the lower triangle of A is used by the factorization
    Al = sparse.tril(A.to_scipy(format='csc'), k=0)
    S = (Al + Al.T + sparse.eye_array(N, dtype=bool)).astype(bool)
    fill = (F.astype(int) - S.astype(int) > 0)

    opts = dict(markersize=4)
    opts.update(kwargs)

    ax.spy(S, color='C0', **opts)

    if fill.nnz > 0:
        ax.spy(fill, color='C3', **opts)

    ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    ax.yaxis.set_major_locator(MaxNLocator(integer=True))

    ax.set_title(f"{N}-by-{N}, nnz(L + L.T) = {F.nnz}, fill = {fill.nnz}")

    return ax

# =============================================================================
# =============================================================================
