"""Storage kinds, comparators and the primitive element types of vectors."""

from __future__ import annotations

import enum

import numpy as np


class Storage(enum.IntEnum):
    """Where the memory of a vector lives."""

    HOST = 0
    DEVICE = 1
    MANAGED = 2
    PINNED = 3
    DIST_DEVICE = 4
    DIST_HOST = 5
    DIST_MANAGED = 6


_DISTRIBUTED = frozenset({Storage.DIST_DEVICE, Storage.DIST_HOST, Storage.DIST_MANAGED})

_TO_DIST = {
    Storage.HOST: Storage.DIST_HOST,
    Storage.DIST_HOST: Storage.DIST_HOST,
    Storage.DEVICE: Storage.DIST_DEVICE,
    Storage.DIST_DEVICE: Storage.DIST_DEVICE,
    Storage.MANAGED: Storage.DIST_MANAGED,
    Storage.DIST_MANAGED: Storage.DIST_MANAGED,
}

_TO_SINGLE = {
    Storage.HOST: Storage.HOST,
    Storage.DIST_HOST: Storage.HOST,
    Storage.DEVICE: Storage.DEVICE,
    Storage.DIST_DEVICE: Storage.DEVICE,
    Storage.MANAGED: Storage.MANAGED,
    Storage.DIST_MANAGED: Storage.MANAGED,
    Storage.PINNED: Storage.PINNED,
}


def is_dist(storage):
    """Return True if the storage is one of the distributed kinds."""
    return Storage(storage) in _DISTRIBUTED


def dist_storage_of(storage):
    """Return the distributed counterpart of a storage kind."""
    storage = Storage(storage)
    try:
        return _TO_DIST[storage]
    except KeyError:
        raise ValueError(
            f"Storage type {storage.name} is not supported for distributed processing."
        ) from None


def single_storage_of(storage):
    """Return the single-process counterpart of a storage kind."""
    return _TO_SINGLE[Storage(storage)]


class Comparator(enum.IntEnum):
    """Predicates used by comparisons and filters."""

    GREATER_THAN = 0
    LESS_THAN = 1
    EQUALS = 2
    GREATER_THAN_OR_EQUAL = 3
    LESS_THAN_OR_EQUAL = 4
    NOT_EQUALS = 5
    BETWEEN = 6  # [left, right)
    IS_IN = 7
    IS_NOT_IN = 8
    INSIDE = 9  # (left, right)
    OUTSIDE = 10  # below left or above right


class PrimitiveType(enum.IntEnum):
    """The element types a vector can hold."""

    UINT64 = 0
    UINT32 = 1
    INT64 = 2
    INT32 = 3
    FLOAT64 = 4
    FLOAT32 = 5
    UINT8 = 6
    INT8 = 7


_NUMPY_DTYPES = {
    PrimitiveType.UINT64: np.dtype(np.uint64),
    PrimitiveType.UINT32: np.dtype(np.uint32),
    PrimitiveType.INT64: np.dtype(np.int64),
    PrimitiveType.INT32: np.dtype(np.int32),
    PrimitiveType.FLOAT64: np.dtype(np.float64),
    PrimitiveType.FLOAT32: np.dtype(np.float32),
    PrimitiveType.UINT8: np.dtype(np.uint8),
    PrimitiveType.INT8: np.dtype(np.int8),
}

_BY_LAYOUT = {(dt.kind, dt.itemsize): prim for prim, dt in _NUMPY_DTYPES.items()}

_BY_NAME = {prim.name.lower(): prim for prim in PrimitiveType}


def _prim_of_numpy(dt):
    try:
        return _BY_LAYOUT[(dt.kind, dt.itemsize)]
    except KeyError:
        raise TypeError(f"unsupported data type: {dt}") from None


def dtype_of(prim_type):
    """Return the numpy dtype for a primitive type or a supported dtype-like."""
    if isinstance(prim_type, PrimitiveType):
        return _NUMPY_DTYPES[prim_type]
    if prim_type is None:
        raise TypeError("a data type is required")
    try:
        dt = np.dtype(prim_type)
    except TypeError as err:
        raise TypeError(f"not a data type: {prim_type!r}") from err
    return _NUMPY_DTYPES[_prim_of_numpy(dt)]


def prim_type_of(value):
    """Infer the primitive type of a scalar value."""
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("boolean values have no primitive type")
    if isinstance(value, np.generic):
        return _prim_of_numpy(value.dtype)
    if isinstance(value, int):
        return PrimitiveType.INT32
    if isinstance(value, float):
        return PrimitiveType.FLOAT64
    raise TypeError(f"unsupported value type: {type(value).__name__}")


def size_of(dtype):
    """Return the size in bytes of one element of the given type."""
    return dtype_of(dtype).itemsize


def max_value(dtype):
    """Return the largest value representable by the given type."""
    dt = dtype_of(dtype)
    if dt.kind == "f":
        return dt.type(np.finfo(dt).max)
    return dt.type(np.iinfo(dt).max)


def dtype_from_name(name):
    """Look up a primitive type by its name, such as 'float32'."""
    try:
        return _BY_NAME[name]
    except KeyError:
        raise ValueError(f"unknown data type name: {name!r}") from None