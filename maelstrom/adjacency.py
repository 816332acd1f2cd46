"""Adjacency queries over the rows of a CSR matrix."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

_INDEX_DTYPES = frozenset(
    np.dtype(t) for t in (np.uint64, np.uint32, np.uint8, np.int64, np.int32)
)

_VALUE_DTYPES = frozenset(
    np.dtype(t)
    for t in (
        np.uint64,
        np.uint32,
        np.uint8,
        np.int64,
        np.int32,
        np.int8,
        np.float64,
        np.float32,
    )
)

_RELATION_DTYPES = frozenset({np.dtype(np.uint8)})


class AdjacencyResult(NamedTuple):
    """The entries found by query_adjacency, one per matching nonzero.

    origin holds, for each entry, the position in the query of the row it
    came from. The other vectors are empty unless they were requested.
    """

    origin: np.ndarray
    inner: np.ndarray
    values: np.ndarray
    relations: np.ndarray


def _vector(vec, name):
    if vec is None:
        return np.empty(0, dtype=np.float64)
    arr = np.asarray(vec)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be a one-dimensional vector")
    return arr


def _expand_rows(row, ix):
    """Return (origin, positions) listing every nonzero of the queried rows."""
    n_rows = len(row) - 1
    queries = ix.astype(np.int64)
    if queries.size and (queries.min() < 0 or queries.max() >= n_rows):
        raise IndexError(f"query index out of bounds for {n_rows} rows")
    bounds = row.astype(np.int64)
    starts = bounds[queries]
    counts = bounds[queries + 1] - starts
    if np.any(counts < 0):
        raise ValueError("the row pointer must be non-decreasing")
    total = int(counts.sum())
    origin = np.repeat(np.arange(len(queries), dtype=np.uint64), counts)
    offsets = np.cumsum(counts) - counts
    within = np.arange(total, dtype=np.int64) - np.repeat(offsets, counts)
    positions = np.repeat(starts, counts) + within
    return origin, positions


def query_adjacency(
    row,
    col,
    val=None,
    rel=None,
    ix=None,
    rel_types=None,
    return_inner=True,
    return_values=False,
    return_relations=False,
    return_1d_index_as_values=False,
):
    """Find the nonzeros of the CSR rows named by ix.

    row and col are the CSR row pointer and column index; val and rel are
    optional per-nonzero values and relation types. If rel_types is given
    and not empty, only nonzeros whose relation is among them are kept.
    Returns an AdjacencyResult (origin, inner, values, relations) of types
    (uint64, row's type, val's type, rel's type). With
    return_1d_index_as_values=True the values are the positions of the
    nonzeros in col, of row's type.
    """
    row = _vector(row, "row")
    col = _vector(col, "col")
    val = _vector(val, "val")
    rel = _vector(rel, "rel")
    ix = _vector(ix, "ix")
    rel_types = _vector(rel_types, "rel_types")

    if row.dtype not in _INDEX_DTYPES:
        raise TypeError(f"unsupported index type for query adjacency: {row.dtype}")
    if val.dtype not in _VALUE_DTYPES:
        raise TypeError(f"unsupported val type for query adjacency: {val.dtype}")
    filter_rel = len(rel_types) > 0
    if filter_rel and rel.dtype not in _RELATION_DTYPES:
        raise TypeError(f"unsupported relation type for query adjacency: {rel.dtype}")
    if len(row) == 0:
        raise ValueError("a row pointer needs at least one entry")
    if ix.size and ix.dtype.kind not in "iu":
        raise TypeError("query indices must be integers")

    origin, positions = _expand_rows(row, ix)
    needed = int(positions.max()) + 1 if positions.size else 0

    if filter_rel or return_relations:
        if len(rel) < needed:
            raise ValueError("the relation vector is shorter than the matrix")
    if filter_rel:
        keep = np.isin(rel[positions], rel_types)
        origin = origin[keep]
        positions = positions[keep]

    if return_inner:
        if len(col) < needed:
            raise ValueError("the column vector is shorter than the row pointer")
        inner = col[positions].astype(row.dtype, copy=False)
    else:
        inner = np.empty(0, dtype=row.dtype)

    if return_relations:
        relations = rel[positions]
    else:
        relations = np.empty(0, dtype=rel.dtype)

    if return_1d_index_as_values:
        values = (
            positions.astype(row.dtype)
            if return_values
            else np.empty(0, dtype=row.dtype)
        )
    elif return_values:
        if len(val) < needed:
            raise ValueError("the value vector is shorter than the matrix")
        values = val[positions]
    else:
        values = np.empty(0, dtype=val.dtype)

    return AdjacencyResult(origin, inner, values, relations)