"""Sorting, ranking, uniqueness and searching over one-dimensional vectors."""

from __future__ import annotations

import numpy as np


def _vector(vec):
    arr = np.asarray(vec)
    if arr.ndim != 1:
        raise ValueError("expected a one-dimensional vector")
    return arr


def _run_starts(sorted_vec):
    """Return the positions where a new run of equal values begins."""
    if len(sorted_vec) == 0:
        return np.empty(0, dtype=np.intp)
    changed = np.concatenate(([True], sorted_vec[1:] != sorted_vec[:-1]))
    return np.flatnonzero(changed)


def sort(*args):
    """Sort one or more equally sized vectors in place, lexicographically.

    The first vector is the primary key, the next breaks its ties, and so on.
    The sort is stable. Returns the uint64 indices that sorted the vectors.
    """
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        args = tuple(args[0])
    if not args:
        raise ValueError("at least one vector is required")
    arrays = []
    for arg in args:
        if not isinstance(arg, np.ndarray) or arg.ndim != 1:
            raise TypeError("sort works in place and needs one-dimensional numpy arrays")
        arrays.append(arg)
    size = len(arrays[0])
    if any(len(arr) != size for arr in arrays):
        raise ValueError("all vectors must have the same size")
    order = np.lexsort(tuple(reversed(arrays)))
    for arr in arrays:
        arr[:] = arr[order]
    return order.astype(np.uint64)


def topk(vec, k, descending=False):
    """Return the uint64 indices of the k largest elements, largest first.

    With descending=True the k smallest are returned, smallest first.
    Fewer than k indices come back when the vector is shorter than k.
    """
    vec = _vector(vec)
    if k < 0:
        raise ValueError("k must not be negative")
    order = np.argsort(vec, kind="stable")
    if not descending:
        order = order[::-1]
    return order[:k].astype(np.uint64)


def unique(vec, is_sorted=False):
    """Return the uint64 indices of the first occurrence of each distinct value.

    The indices refer to the given vector and are ordered by value.
    With is_sorted=True the vector is assumed to be sorted already.
    """
    vec = _vector(vec)
    if is_sorted:
        return _run_starts(vec).astype(np.uint64)
    _, first = np.unique(vec, return_index=True)
    return first.astype(np.uint64)


def count_unique(vec, max_num_values=None, is_sorted=False):
    """Return (distinct values, uint64 counts), ordered by value.

    If max_num_values is given, more distinct values than that is an error.
    """
    vec = _vector(vec)
    if is_sorted:
        starts = _run_starts(vec)
        values = vec[starts]
        counts = np.diff(np.append(starts, len(vec)))
    else:
        values, counts = np.unique(vec, return_counts=True)
    if max_num_values is not None and len(values) > max_num_values:
        raise ValueError(
            f"found {len(values)} unique values, more than the maximum of {max_num_values}"
        )
    return values, counts.astype(np.uint64)


def intersection(left, right, is_sorted=False):
    """Return uint64 indices of left forming the multiset intersection with right.

    The values they point to are in sorted order. A value occurring n times
    in left and m times in right contributes min(n, m) indices.
    """
    left = _vector(left)
    right = _vector(right)
    if is_sorted:
        left_order = np.arange(len(left))
        sorted_left, sorted_right = left, right
    else:
        left_order = np.argsort(left, kind="stable")
        sorted_left = left[left_order]
        sorted_right = np.sort(right)
    rank = np.arange(len(sorted_left)) - np.searchsorted(sorted_left, sorted_left, side="left")
    available = np.searchsorted(sorted_right, sorted_left, side="right") - np.searchsorted(
        sorted_right, sorted_left, side="left"
    )
    return left_order[rank < available].astype(np.uint64)


def search_sorted(sorted_array, values):
    """Return, for each value, the last position where it can be inserted keeping order.

    A value below the first element gives 0; one above the last gives the size.
    """
    sorted_array = _vector(sorted_array)
    values = _vector(values)
    return np.searchsorted(sorted_array, values, side="right").astype(np.uint64)


def randperm(array_size, num_to_select, seed=None):
    """Return num_to_select distinct random indices into an array of array_size.

    When both are equal the result is a random permutation.
    """
    if array_size < 0 or num_to_select < 0:
        raise ValueError("sizes must not be negative")
    if num_to_select > array_size:
        raise ValueError("cannot select more elements than the array holds")
    rng = np.random.default_rng(seed)
    return rng.permutation(array_size)[:num_to_select].astype(np.uint64)