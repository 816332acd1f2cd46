"""Reductions over vectors, grouped reductions and embedding similarity."""

from __future__ import annotations

import enum

import numpy as np

from maelstrom.ordering import _run_starts


class Reductor(enum.IntEnum):
    """How a group of values is reduced to one."""

    MIN = 0
    MAX = 1
    SUM = 2
    PRODUCT = 3
    MEAN = 4


class Similarity(enum.IntEnum):
    """Similarity metric between embedding vectors."""

    COSINE = 0
    JACCARD = 1


def _vector(vec):
    arr = np.asarray(vec)
    if arr.ndim != 1:
        raise ValueError("expected a one-dimensional vector")
    return arr


def _reduce_segment(segment, red):
    """Reduce a non-empty segment; return (value, index within the segment)."""
    if red is Reductor.MIN:
        index = int(np.argmin(segment))
        return segment[index], index
    if red is Reductor.MAX:
        index = int(np.argmax(segment))
        return segment[index], index
    if red is Reductor.SUM:
        return np.sum(segment, dtype=segment.dtype), 0
    if red is Reductor.PRODUCT:
        return np.prod(segment, dtype=segment.dtype), 0
    return float(np.mean(segment, dtype=np.float64)), 0


def reduce(vec, red):
    """Reduce a vector, returning (value, originating index).

    MIN and MAX report where the extreme value lies; SUM, PRODUCT and MEAN
    report index 0. The value keeps the vector's type, except MEAN, which
    is a float.
    """
    vec = _vector(vec)
    if len(vec) == 0:
        raise ValueError("cannot reduce an empty vector")
    return _reduce_segment(vec, Reductor(red))


def reduce_by_key(keys, values, red, max_unique_keys=None, is_sorted=False):
    """Reduce the values of each distinct key; return (reduced, uint64 origins).

    Results are ordered by key. Each origin is an index into the given
    vectors: the extreme element for MIN and MAX, the group's first element
    otherwise. With is_sorted=True the keys are assumed sorted already.
    """
    keys = _vector(keys)
    values = _vector(values)
    if len(keys) != len(values):
        raise ValueError("keys and values must have the same size")
    red = Reductor(red)
    order = np.arange(len(keys)) if is_sorted else np.argsort(keys, kind="stable")
    sorted_values = values[order]
    starts = _run_starts(keys[order])
    if max_unique_keys is not None and len(starts) > max_unique_keys:
        raise ValueError(
            f"found {len(starts)} unique keys, more than the maximum of {max_unique_keys}"
        )
    bounds = np.append(starts, len(keys))
    results = [
        (_reduce_segment(sorted_values[begin:end], red), begin)
        for begin, end in zip(bounds[:-1].tolist(), bounds[1:].tolist())
    ]
    out_dtype = np.float64 if red is Reductor.MEAN else values.dtype
    reduced = np.array([value for (value, _), _ in results], dtype=out_dtype)
    origins = np.array(
        [order[begin + offset] for (_, offset), begin in results], dtype=np.uint64
    )
    return reduced, origins


def similarity(metric, src_embeddings, src_offsets, target_embeddings, emb_stride):
    """Return, for each selected source embedding, its best similarity to any target.

    Embeddings are stored flat, emb_stride values each. src_offsets picks
    source embeddings by position; if it is empty or None, all are used.
    COSINE is the cosine of the angle; JACCARD is sum(min) / sum(max).
    """
    if emb_stride <= 0:
        raise ValueError("the embedding stride must be positive")
    src = _vector(src_embeddings).astype(np.float64)
    targets = _vector(target_embeddings).astype(np.float64)
    if src.size % emb_stride or targets.size % emb_stride:
        raise ValueError("embedding sizes must be multiples of the stride")
    src = src.reshape(-1, emb_stride)
    targets = targets.reshape(-1, emb_stride)
    if len(targets) == 0:
        raise ValueError("at least one target embedding is required")
    if src_offsets is not None:
        offsets = _vector(src_offsets)
        if len(offsets):
            src = src[offsets.astype(np.intp)]

    metric = Similarity(metric)
    if metric is Similarity.COSINE:
        numerator = src @ targets.T
        denominator = np.outer(np.linalg.norm(src, axis=1), np.linalg.norm(targets, axis=1))
    else:
        numerator = np.minimum(src[:, None, :], targets[None, :, :]).sum(axis=2)
        denominator = np.maximum(src[:, None, :], targets[None, :, :]).sum(axis=2)
    scores = np.divide(
        numerator, denominator, out=np.zeros_like(numerator), where=denominator != 0
    )
    return scores.max(axis=1)