"""Operations on compressed sparse row (CSR) index structures."""

from __future__ import annotations

import numpy as np

from maelstrom.strings import safe_cast
from maelstrom.types import max_value

_INDEX_DTYPES = frozenset(
    np.dtype(t) for t in (np.uint64, np.uint32, np.uint8, np.int64, np.int32)
)


def _index_vector(vec, operation):
    arr = np.asarray(vec)
    if arr.ndim != 1:
        raise ValueError("expected a one-dimensional vector")
    if arr.dtype not in _INDEX_DTYPES:
        raise TypeError(f"unsupported dtype for {operation}: {arr.dtype}")
    return arr


def csr_to_coo(ptr, nnz):
    """Expand a CSR row pointer into a COO row index of length nnz."""
    ptr = _index_vector(ptr, "csr_to_coo")
    if len(ptr) == 0:
        raise ValueError("a row pointer needs at least one entry")
    bounds = ptr.astype(np.int64)
    counts = np.diff(bounds)
    if np.any(counts < 0):
        raise ValueError("the row pointer must be non-decreasing")
    first, last = int(bounds[0]), int(bounds[-1])
    if first < 0 or last > nnz:
        raise ValueError(f"the row pointer spans [{first}, {last}), beyond {nnz} entries")
    coo = np.zeros(nnz, dtype=ptr.dtype)
    coo[first:last] = np.repeat(np.arange(len(counts), dtype=ptr.dtype), counts)
    return coo


def search_sorted_sparse(row, col, ix_r, ix_c, index_not_found=None):
    """Return the position in col of each (row, column) entry of a CSR matrix.

    Columns within a row must be sorted. Entries that are absent get
    index_not_found, by default the largest value of the index type.
    """
    row = _index_vector(row, "search sorted sparse")
    col = np.asarray(col)
    ix_r = np.asarray(ix_r)
    ix_c = np.asarray(ix_c)
    if len(ix_r) != len(ix_c):
        raise ValueError("row and column queries must have the same size")
    dt = row.dtype
    missing = max_value(dt) if index_not_found is None else safe_cast(index_not_found, dt)
    n_rows = len(row) - 1

    def locate(r, c):
        if not 0 <= r < n_rows:
            raise IndexError(f"row {r} is out of bounds for {n_rows} rows")
        start, end = int(row[r]), int(row[r + 1])
        pos = start + int(np.searchsorted(col[start:end], c, side="left"))
        return pos if pos < end and col[pos] == c else missing

    return np.array(
        [locate(r, c) for r, c in zip(ix_r.tolist(), ix_c.tolist())], dtype=dt
    )