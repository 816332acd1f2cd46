import numpy as np
import pytest

from maelstrom.adjacency import AdjacencyResult, query_adjacency

# 0  1  0  1  0  0
# 1  0  1  0  1  1
# 1  0  0  0  0  0
# 0  1  1  0  0  0
# 0  1  1  1  1  0
# 1  0  1  0  0  1
ROW = [0, 2, 6, 7, 9, 13, 16]
COL = [1, 3, 0, 2, 4, 5, 0, 1, 2, 1, 2, 3, 4, 0, 2, 5]
BASIC_VAL = [0.6, 0.4, 0.1, 0.3, 0.2, 0.7, 9.1, 3.3, 0.11, 0.44, 0.8, 0.19, 0.66, 0.01, 2.1, 4.1]
BASIC_REL = [0, 0, 1, 3, 2, 0, 9, 3, 0, 4, 8, 9, 6, 7, 5, 4]
FILTER_REL = [1, 2, 0, 2, 4, 2, 0, 1, 2, 1, 2, 3, 4, 0, 4, 4]
FILTER_VAL = [0.0, 0.1, 0.3, 0.8, 0.9, 1.2, 3.2, 4.4, 6.8, 0.3, 0.4, 0.5, 0.6, 0.7, 0.11, 3.3]


@pytest.mark.parametrize("dtype", [np.uint64, np.int32])
def test_basic_inner(dtype):
    row = np.array(ROW, dtype=dtype)
    col = np.array(COL, dtype=dtype)
    ix = np.array([5, 0, 3, 1], dtype=dtype)

    origin, inner, _, _ = query_adjacency(row, col, None, None, ix, None)

    assert origin.dtype == np.uint64
    assert inner.dtype == ix.dtype
    assert origin.tolist() == [0, 0, 0, 1, 1, 2, 2, 3, 3, 3, 3]
    assert inner.tolist() == [0, 2, 5, 1, 3, 1, 2, 0, 2, 4, 5]


@pytest.mark.parametrize("dtype", [np.uint64, np.int32])
def test_basic_values_and_relations(dtype):
    row = np.array(ROW, dtype=dtype)
    col = np.array(COL, dtype=dtype)
    ix = np.array([5, 0, 3, 1], dtype=dtype)
    val = np.array(BASIC_VAL, dtype=np.float64)
    rel = np.array(BASIC_REL, dtype=np.uint8)

    result = query_adjacency(row, col, val, rel, ix, None, False, True, True)

    assert isinstance(result, AdjacencyResult)
    assert len(result.inner) == 0
    assert result.values.dtype == np.float64
    assert result.relations.dtype == np.uint8
    assert result.values.tolist() == [0.01, 2.1, 4.1, 0.6, 0.4, 3.3, 0.11, 0.1, 0.3, 0.2, 0.7]
    assert result.relations.tolist() == [7, 5, 4, 0, 0, 3, 0, 1, 3, 2, 0]


def test_relation_types_filter():
    row = np.array(ROW, dtype=np.int32)
    col = np.array(COL, dtype=np.int32)
    rel = np.array(FILTER_REL, dtype=np.uint8)
    ix = np.array([1, 1, 3, 3, 4, 5], dtype=np.int32)
    reltypes = np.array([0, 2], dtype=np.uint8)

    origin, inner, _, r_rel = query_adjacency(
        row, col, None, rel, ix, reltypes, True, False, True
    )

    assert origin.tolist() == [0, 0, 0, 1, 1, 1, 2, 3, 4, 5]
    assert r_rel.tolist() == [0, 2, 2, 0, 2, 2, 2, 2, 2, 0]
    assert inner.tolist() == [0, 2, 5, 0, 2, 5, 2, 2, 2, 0]
    assert inner.dtype == np.int32


def test_one_dimensional_index_as_values():
    row = np.array(ROW, dtype=np.int32)
    col = np.array(COL, dtype=np.int32)
    rel = np.array(FILTER_REL, dtype=np.uint8)
    ix = np.array([1, 1, 3, 3, 4, 5], dtype=np.int32)
    reltypes = np.array([0, 2], dtype=np.uint8)

    origin, inner, r_val, r_rel = query_adjacency(
        row, col, None, rel, ix, reltypes, True, True, True, True
    )

    assert origin.tolist() == [0, 0, 0, 1, 1, 1, 2, 3, 4, 5]
    assert r_rel.tolist() == [0, 2, 2, 0, 2, 2, 2, 2, 2, 0]
    assert r_val.tolist() == [2, 3, 5, 2, 3, 5, 8, 8, 10, 13]
    assert r_val.dtype == np.int32
    assert inner.tolist() == [0, 2, 5, 0, 2, 5, 2, 2, 2, 0]


def test_values_with_filter_follow_kept_entries():
    row = np.array(ROW, dtype=np.int32)
    col = np.array(COL, dtype=np.int32)
    rel = np.array(FILTER_REL, dtype=np.uint8)
    val = np.array(FILTER_VAL, dtype=np.float64)
    ix = np.array([2], dtype=np.int32)

    result = query_adjacency(row, col, val, rel, ix, np.array([0], dtype=np.uint8), True, True)

    assert result.origin.tolist() == [0]
    assert result.inner.tolist() == [0]
    assert result.values.tolist() == [3.2]


def test_unrequested_outputs_are_empty():
    row = np.array(ROW, dtype=np.int64)
    col = np.array(COL, dtype=np.int64)
    result = query_adjacency(row, col, None, None, np.array([4], dtype=np.int64), None, False)
    assert result.origin.tolist() == [0, 0, 0, 0]
    assert result.inner.size == 0
    assert result.values.size == 0
    assert result.relations.size == 0


def test_filter_removes_everything():
    row = np.array(ROW, dtype=np.int32)
    col = np.array(COL, dtype=np.int32)
    rel = np.array(FILTER_REL, dtype=np.uint8)
    result = query_adjacency(
        row, col, None, rel, np.array([2], dtype=np.int32), np.array([9], dtype=np.uint8)
    )
    assert result.origin.size == 0
    assert result.inner.size == 0


def test_unsupported_relation_type_with_filter():
    row = np.array(ROW, dtype=np.int32)
    col = np.array(COL, dtype=np.int32)
    rel = np.array(FILTER_REL, dtype=np.int32)
    with pytest.raises(TypeError):
        query_adjacency(
            row, col, None, rel, np.array([1], dtype=np.int32), np.array([0], dtype=np.int32)
        )


def test_unsupported_index_type():
    row = np.array(ROW, dtype=np.float64)
    col = np.array(COL, dtype=np.float64)
    with pytest.raises(TypeError):
        query_adjacency(row, col, None, None, np.array([1]), None)


def test_query_out_of_bounds():
    row = np.array(ROW, dtype=np.int32)
    col = np.array(COL, dtype=np.int32)
    with pytest.raises(IndexError):
        query_adjacency(row, col, None, None, np.array([6], dtype=np.int32), None)


def test_missing_values_raise():
    row = np.array(ROW, dtype=np.int32)
    col = np.array(COL, dtype=np.int32)
    with pytest.raises(ValueError):
        query_adjacency(row, col, None, None, np.array([1], dtype=np.int32), None, True, True)