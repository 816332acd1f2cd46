"""Element-wise operations on one-dimensional numpy vectors."""

from __future__ import annotations

import enum

import numpy as np

from maelstrom.strings import safe_cast
from maelstrom.types import Comparator, dtype_of, prim_type_of


class IncOp(enum.IntEnum):
    """In-place update applied by increment()."""

    INCREMENT = 0
    DECREMENT = 1
    MODULUS = 2
    DIVIDE = 3


class BinaryOp(enum.IntEnum):
    """Arithmetic operation applied by binary()."""

    PLUS = 0
    MINUS = 1
    TIMES = 2
    DIVIDE = 3


_ELEMENTWISE = {
    Comparator.GREATER_THAN: np.greater,
    Comparator.LESS_THAN: np.less,
    Comparator.EQUALS: np.equal,
    Comparator.GREATER_THAN_OR_EQUAL: np.greater_equal,
    Comparator.LESS_THAN_OR_EQUAL: np.less_equal,
    Comparator.NOT_EQUALS: np.not_equal,
}


def _as_vector(vec):
    arr = np.asarray(vec)
    if arr.ndim != 1:
        raise ValueError("expected a one-dimensional vector")
    return arr


def _require_array(vec):
    if not isinstance(vec, np.ndarray) or vec.ndim != 1:
        raise TypeError("expected a one-dimensional numpy array")
    return vec


def _span(vec, start, end):
    end = len(vec) if end is None else end
    if not 0 <= start <= end <= len(vec):
        raise IndexError(f"range [{start}, {end}) is out of bounds for size {len(vec)}")
    return slice(start, end)


def _scalar(value):
    return value.item() if isinstance(value, np.generic) else value


def _trunc_div(a, b):
    """Integer division rounding toward zero."""
    quotient = np.floor_divide(a, b)
    remainder = np.remainder(a, b)
    fix = (remainder != 0) & ((a < 0) != (np.asarray(b) < 0))
    return np.where(fix, quotient + 1, quotient).astype(a.dtype)


def arange(start, end=None, inc=None):
    """Return a range vector; with one argument, the range [0, start).

    The element type is inferred from the first argument.
    """
    dt = dtype_of(prim_type_of(start))
    if end is None:
        start, end = 0, start
    inc = 1 if inc is None else inc
    if inc == 0:
        raise ValueError("the increment of a range cannot be zero")
    return np.arange(_scalar(start), _scalar(end), _scalar(inc), dtype=dt)


def assign(dst, ix, values):
    """Set dst[ix[i]] = values[i] for every i, in place."""
    dst = _require_array(dst)
    ix = _as_vector(ix)
    values = _as_vector(values)
    if len(ix) != len(values):
        raise ValueError("index and value vectors must have the same size")
    dst[ix.astype(np.intp)] = values.astype(dst.dtype)


def cast(vec, dtype):
    """Return a copy of the vector converted to another element type."""
    return _as_vector(vec).astype(dtype_of(dtype))


def fill(vec, value, start=0, end=None):
    """Set the elements in [start, end) to value, in place."""
    vec = _require_array(vec)
    vec[_span(vec, start, end)] = safe_cast(value, vec.dtype)


def increment(vec, inc=None, start=0, end=None, op=IncOp.INCREMENT):
    """Update elements in [start, end) in place by inc (default 1) using op."""
    vec = _require_array(vec)
    span = _span(vec, start, end)
    amount = vec.dtype.type(1) if inc is None else safe_cast(inc, vec.dtype)
    op = IncOp(op)
    segment = vec[span]
    integral = vec.dtype.kind in "iu"
    if op in (IncOp.MODULUS, IncOp.DIVIDE) and integral and amount == 0:
        raise ZeroDivisionError("integer division by zero")
    if op is IncOp.INCREMENT:
        np.add(segment, amount, out=segment)
    elif op is IncOp.DECREMENT:
        np.subtract(segment, amount, out=segment)
    elif op is IncOp.MODULUS:
        np.fmod(segment, amount, out=segment)
    elif integral:
        vec[span] = _trunc_div(segment, amount)
    else:
        np.divide(segment, amount, out=segment)


def binary(left, right, op):
    """Apply +, -, * or / element-wise, returning a new vector of left's type."""
    left = _as_vector(left)
    right = _as_vector(right).astype(left.dtype)
    if len(left) != len(right):
        raise ValueError("vectors must have the same size")
    op = BinaryOp(op)
    if op is BinaryOp.PLUS:
        result = left + right
    elif op is BinaryOp.MINUS:
        result = left - right
    elif op is BinaryOp.TIMES:
        result = left * right
    elif left.dtype.kind in "iu":
        if np.any(right == 0):
            raise ZeroDivisionError("integer division by zero")
        result = _trunc_div(left, right)
    else:
        result = left / right
    return result.astype(left.dtype, copy=False)


def prefix_sum(vec):
    """Replace the vector with its inclusive prefix sum, in place."""
    vec = _require_array(vec)
    vec[:] = np.cumsum(vec, dtype=vec.dtype)


def reverse(vec):
    """Reverse the vector in place."""
    vec = _require_array(vec)
    vec[:] = vec[::-1].copy()


def select(vec, idx):
    """Return W with W[i] = vec[idx[i]]."""
    vec = _as_vector(vec)
    idx = _as_vector(idx)
    if idx.dtype.kind not in "iu":
        raise TypeError("indices must be integers")
    if idx.size and (idx.min() < 0 or idx.max() >= len(vec)):
        raise IndexError("index out of bounds")
    return vec[idx.astype(np.intp)]


def remove_if(array, stencil):
    """Return a new vector without the elements whose stencil entry is true."""
    array = _as_vector(array)
    stencil = _as_vector(stencil)
    if len(array) != len(stencil):
        raise ValueError("array and stencil must have the same size")
    return array[~stencil.astype(bool)]


def unpack(vec):
    """Split a vector into a list of one-element vectors."""
    vec = _as_vector(vec)
    return [np.array([element], dtype=vec.dtype) for element in vec]


def _predicate(values, cmp, operand):
    cmp = Comparator(cmp)
    if cmp in _ELEMENTWISE:
        if np.ndim(operand) != 0:
            raise ValueError(f"{cmp.name} takes a single value")
        return _ELEMENTWISE[cmp](values, operand)
    if cmp in (Comparator.BETWEEN, Comparator.INSIDE, Comparator.OUTSIDE):
        try:
            lower, upper = operand
        except (TypeError, ValueError):
            raise ValueError(f"{cmp.name} takes a (left, right) pair") from None
        if cmp is Comparator.BETWEEN:
            return (values >= lower) & (values < upper)
        if cmp is Comparator.INSIDE:
            return (values > lower) & (values < upper)
        return (values < lower) | (values > upper)
    members = np.asarray(list(operand))
    found = np.isin(values, members)
    return found if cmp is Comparator.IS_IN else ~found


def compare(vec1, vec2, cmp, invert=False):
    """Compare two vectors element-wise; returns a uint8 mask (1 = true).

    With invert=True the mask is flipped.
    """
    vec1 = _as_vector(vec1)
    vec2 = _as_vector(vec2)
    cmp = Comparator(cmp)
    if cmp not in _ELEMENTWISE:
        raise ValueError(f"{cmp.name} is not an element-wise comparison")
    if len(vec1) != len(vec2):
        raise ValueError("vectors must have the same size")
    mask = _ELEMENTWISE[cmp](vec1, vec2)
    if invert:
        mask = ~mask
    return mask.astype(np.uint8)


def compare_select(vec1, vec2, cmp):
    """Return the elements of vec1 for which the comparison with vec2 holds."""
    mask = compare(vec1, vec2, cmp, invert=True)
    return remove_if(vec1, mask)


def filter_indices(vec, cmp, cmp_val):
    """Return the uint64 indices of the elements satisfying the comparison.

    BETWEEN, INSIDE and OUTSIDE take a (left, right) pair; IS_IN and
    IS_NOT_IN take a collection; the rest take a single value.
    """
    vec = _as_vector(vec)
    return np.flatnonzero(_predicate(vec, cmp, cmp_val)).astype(np.uint64)