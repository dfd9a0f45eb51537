#!/usr/bin/env python3
# =============================================================================
#     File: _pattern.py
#  Created: 2025-07-08 10:21
#   Author: Bernie Roesler
#
"""
Compressed sparse row *patterns*: the structure-only view of a square sparse
matrix that the symbolic fill-in routines consume.
"""
# =============================================================================

import numpy as np
from scipy import sparse


class InvalidPattern(ValueError):
    """Raised when a sparsity pattern is malformed or out of range."""


class ArithmeticOverflow(OverflowError):
    """Raised when a count does not fit in the requested integer type."""


class SparsityPattern:
    """An immutable compressed sparse row pattern of a square matrix.

    Only the row pointers and column indices are stored. Values are never
    read, so the pattern is independent of the element type of the matrix it
    came from.

    Parameters
    ----------
    row_ptr : (N+1,) array_like of int
        Row pointers. The column indices of row `r` are stored in
        ``col_idx[row_ptr[r]:row_ptr[r+1]]``.
    col_idx : (nnz,) array_like of int
        Column indices, each in ``[0, N)``.
    n : int, optional
        The order of the matrix. If not given, it is inferred as
        ``len(row_ptr) - 1``.

    Raises
    ------
    InvalidPattern
        If `row_ptr` is not monotonically non-decreasing from 0 to
        ``len(col_idx)``, or any column index is out of range.
    """

    __slots__ = ('_row_ptr', '_col_idx', '_n')

    def __init__(self, row_ptr, col_idx, n=None):
        row_ptr = _as_index_array(row_ptr, 'row_ptr')
        col_idx = _as_index_array(col_idx, 'col_idx')

        if n is None:
            n = row_ptr.size - 1

        n = int(n)

        if n < 0:
            raise InvalidPattern(f"Matrix order must be non-negative, got {n}.")

        if row_ptr.size != n + 1:
            raise InvalidPattern(
                f"row_ptr must have length n + 1 = {n + 1}, "
                f"got {row_ptr.size}."
            )

        if row_ptr[0] != 0:
            raise InvalidPattern(f"row_ptr[0] must be 0, got {row_ptr[0]}.")

        if np.any(np.diff(row_ptr) < 0):
            r = int(np.argmax(np.diff(row_ptr) < 0))
            raise InvalidPattern(
                f"row_ptr must be non-decreasing, but "
                f"row_ptr[{r + 1}] = {row_ptr[r + 1]} < "
                f"row_ptr[{r}] = {row_ptr[r]}."
            )

        if row_ptr[n] != col_idx.size:
            raise InvalidPattern(
                f"row_ptr[n] = {row_ptr[n]} does not match the number of "
                f"column indices ({col_idx.size})."
            )

        if col_idx.size > 0:
            bad = (col_idx < 0) | (col_idx >= n)
            if np.any(bad):
                k = int(np.argmax(bad))
                raise InvalidPattern(
                    f"Column index col_idx[{k}] = {col_idx[k]} is out of "
                    f"range [0, {n})."
                )

        row_ptr.flags.writeable = False
        col_idx.flags.writeable = False

        self._row_ptr = row_ptr
        self._col_idx = col_idx
        self._n = n

    # -------------------------------------------------------------------------
    #         Constructors
    # -------------------------------------------------------------------------
    @classmethod
    def from_scipy(cls, A):
        """Create a pattern from the stored entries of a scipy sparse matrix.

        Explicitly stored zeros are part of the pattern.

        Parameters
        ----------
        A : (N, N) sparse array or matrix
            A square sparse matrix.

        Returns
        -------
        result : SparsityPattern
            The pattern of `A`.
        """
        if not sparse.issparse(A):
            raise InvalidPattern(f"Expected a sparse matrix, got {type(A)}.")

        _check_square(A.shape)

        A = sparse.csr_array(A, copy=True)
        A.sum_duplicates()
        A.sort_indices()

        return cls(A.indptr, A.indices, A.shape[0])

    @classmethod
    def from_dense(cls, A):
        """Create a pattern from the nonzeros of a dense 2D array."""
        A = np.asarray(A)

        if A.ndim != 2:
            raise InvalidPattern(f"Expected a 2D array, got {A.ndim}D.")

        _check_square(A.shape)

        return cls.from_scipy(sparse.csr_array(A != 0))

    @classmethod
    def from_coo(cls, rows, cols, n):
        """Create a pattern from coordinate lists. Duplicates collapse.

        Parameters
        ----------
        rows, cols : (nnz,) array_like of int
            Row and column indices of the entries.
        n : int
            The order of the matrix.

        Returns
        -------
        result : SparsityPattern
            The pattern with an entry at each ``(rows[k], cols[k])``.
        """
        rows = _as_index_array(rows, 'rows')
        cols = _as_index_array(cols, 'cols')

        if rows.size != cols.size:
            raise InvalidPattern(
                f"rows and cols must have the same length, "
                f"got {rows.size} and {cols.size}."
            )

        n = int(n)

        if n < 0:
            raise InvalidPattern(f"Matrix order must be non-negative, got {n}.")

        for name, idx in (('rows', rows), ('cols', cols)):
            if idx.size > 0 and (idx.min() < 0 or idx.max() >= n):
                raise InvalidPattern(
                    f"Index in {name} is out of range [0, {n})."
                )

        vals = np.ones(rows.size, dtype=bool)
        A = sparse.coo_array((vals, (rows, cols)), shape=(n, n))

        return cls.from_scipy(A)

    @classmethod
    def from_any(cls, A):
        """Convert a pattern, sparse matrix, or dense array to a pattern."""
        if isinstance(A, cls):
            return A
        elif sparse.issparse(A):
            return cls.from_scipy(A)
        else:
            return cls.from_dense(A)

    # -------------------------------------------------------------------------
    #         Properties
    # -------------------------------------------------------------------------
    @property
    def n(self):
        """The order of the matrix."""
        return self._n

    @property
    def shape(self):
        return (self._n, self._n)

    @property
    def nnz(self):
        """The number of stored entries."""
        return self._col_idx.size

    @property
    def row_ptr(self):
        return self._row_ptr

    @property
    def col_idx(self):
        return self._col_idx

    def row(self, r):
        """Return the column indices stored in row `r`."""
        if not 0 <= r < self._n:
            raise IndexError(f"Row {r} is out of range [0, {self._n}).")
        return self._col_idx[self._row_ptr[r]:self._row_ptr[r + 1]]

    def __repr__(self):
        return f"SparsityPattern(n={self._n}, nnz={self.nnz})"

    def __eq__(self, other):
        if not isinstance(other, SparsityPattern):
            return NotImplemented

        if self.n != other.n:
            return False

        # Compare as sets of entries, independent of the order within rows
        A = self.to_scipy()
        B = other.to_scipy()
        return (A != B).nnz == 0

    __hash__ = None

    # -------------------------------------------------------------------------
    #         Conversions
    # -------------------------------------------------------------------------
    def to_scipy(self, format='csr'):
        """Return the pattern as a boolean scipy sparse array.

        Parameters
        ----------
        format : str, optional in {'csr', 'csc', 'coo', 'lil', 'dok'}
            The format of the output array.

        Returns
        -------
        result : (N, N) sparse array of bool
            An array with True at every stored entry.
        """
        vals = np.ones(self.nnz, dtype=bool)
        A = sparse.csr_array(
            (vals, self._col_idx.copy(), self._row_ptr.copy()),
            shape=self.shape
        )
        A.sum_duplicates()

        try:
            format_method = getattr(A, f"to{format}")
        except AttributeError:
            raise ValueError(f"Invalid format '{format}'")

        return format_method()

    def toarray(self):
        """Return the pattern as a dense boolean array."""
        return self.to_scipy().toarray()

    # -------------------------------------------------------------------------
    #         Structural operations
    # -------------------------------------------------------------------------
    def symmetrize(self):
        """Return the pattern of ``A + A.T``."""
        A = self.to_scipy()
        return SparsityPattern.from_scipy(A + A.T)

    def transpose(self):
        """Return the pattern of ``A.T``."""
        return SparsityPattern.from_scipy(self.to_scipy().T)

    @property
    def T(self):
        return self.transpose()

    def tril(self, k=0):
        """Return the lower triangular part of the pattern.

        Parameters
        ----------
        k : int, optional
            Diagonal offset, as in `scipy.sparse.tril`.
        """
        return SparsityPattern.from_scipy(
            sparse.tril(self.to_scipy(), k=k, format='csr')
        )

    def permute(self, p):
        """Symmetrically permute the pattern.

        Row (and column) `k` of the result is row (and column) ``p[k]`` of
        the original, *i.e.* the result is the pattern of ``A[p][:, p]``.

        Parameters
        ----------
        p : (N,) array_like of int
            A permutation of ``range(N)``.

        Returns
        -------
        result : SparsityPattern
            The permuted pattern.

        Raises
        ------
        InvalidPattern
            If `p` is not a permutation of ``range(N)``.
        """
        p = _as_index_array(p, 'p')

        if not is_permutation(p, self._n):
            raise InvalidPattern(
                f"p is not a valid permutation of range({self._n})."
            )

        A = self.to_scipy()
        return SparsityPattern.from_scipy(A[p][:, p])

    def permute_symm(self, p):
        """Symmetrically permute the symmetric matrix stored in the lower part.

        The lower triangle is mirrored onto the upper *before* permuting, so
        an entry moved above the diagonal by `p` keeps its mirror below it.
        Strictly upper entries of the pattern are not read.

        Parameters
        ----------
        p : (N,) array_like of int
            A permutation of ``range(N)``.

        Returns
        -------
        result : SparsityPattern
            The full symmetric pattern of ``S[p][:, p]``, where
            ``S = tril(A) + tril(A, -1).T``.
        """
        return self.mirror_lower().permute(p)

    def mirror_lower(self):
        """Return the full symmetric pattern ``tril(A) + tril(A, -1).T``."""
        A = self.to_scipy()
        L = sparse.tril(A, k=-1, format='csr')
        return SparsityPattern.from_scipy(sparse.tril(A, format='csr') + L.T)

    def has_unmirrored_upper(self):
        """Check for strictly-upper entries without a stored mirror.

        Returns True if any entry ``(r, c)`` with ``c > r`` has no matching
        ``(c, r)`` entry. The symbolic routines only read the strictly lower
        part of each row, so such entries would be silently ignored.
        """
        A = self.to_scipy().astype(np.int8)
        U = sparse.triu(A, k=1, format='csr')

        if U.nnz == 0:
            return False

        L = sparse.tril(A, k=-1, format='csr')
        missing = sparse.csr_array(U - U.multiply(L.T))
        missing.eliminate_zeros()
        return missing.nnz > 0


# -----------------------------------------------------------------------------
#         Helpers
# -----------------------------------------------------------------------------
def is_permutation(p, n=None):
    """Check if a vector is a valid permutation of ``range(n)``."""
    p = np.asarray(p)
    if n is None:
        n = p.size
    return p.ndim == 1 and p.size == n and np.array_equal(np.sort(p), np.arange(n))


def _as_index_array(x, name):
    """Copy `x` into a 1D array of ``np.int64`` indices."""
    x = np.asarray(x)

    if x.ndim != 1:
        raise InvalidPattern(f"{name} must be one-dimensional, got {x.ndim}D.")

    if x.size == 0:
        return np.zeros(0, dtype=np.int64)

    if not np.issubdtype(x.dtype, np.integer):
        raise InvalidPattern(
            f"{name} must contain integers, got dtype {x.dtype}."
        )

    return np.array(x, dtype=np.int64)


def _check_square(shape):
    M, N = shape
    if M != N:
        raise InvalidPattern(f"Matrix must be square, got shape {shape}.")

# =============================================================================
# =============================================================================
