# maelstrom

Vector algorithms on one-dimensional NumPy arrays: element-wise operations,
sorting and set operations, reductions, embedding similarity, and helpers for
sparse matrices kept in compressed sparse row (CSR) form, including adjacency
queries over graphs.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `maelstrom.types`

- `Storage`: the storage kinds `HOST`, `DEVICE`, `MANAGED`, `PINNED`,
  `DIST_DEVICE`, `DIST_HOST` and `DIST_MANAGED`, with `is_dist`,
  `dist_storage_of` and `single_storage_of` to move between the single and
  distributed kinds (`dist_storage_of(Storage.PINNED)` raises `ValueError`).
- `Comparator`: `GREATER_THAN`, `LESS_THAN`, `EQUALS`,
  `GREATER_THAN_OR_EQUAL`, `LESS_THAN_OR_EQUAL`, `NOT_EQUALS`, `BETWEEN`
  (`[left, right)`), `IS_IN`, `IS_NOT_IN`, `INSIDE` (`(left, right)`) and
  `OUTSIDE`.
- `PrimitiveType`: `UINT64`, `UINT32`, `INT64`, `INT32`, `FLOAT64`, `FLOAT32`,
  `UINT8`, `INT8`.
- `dtype_of(prim_type)` gives the NumPy dtype for a `PrimitiveType` or a
  supported dtype-like; `prim_type_of(value)` infers the type of a scalar
  (Python `int` is `INT32`, `float` is `FLOAT64`, NumPy scalars keep their
  type); `size_of`, `max_value` and `dtype_from_name` (e.g. `"float32"`).

### `maelstrom.strings`

- `StringIndex(invalid_str, invalid_code)` gives each distinct string a code
  counting up from 0. `encode(text)` returns the code, assigning a new one for
  an unseen string; `decode(code)` returns the string or raises `ValueError`.
  It supports `len()` and `in`.
- `safe_cast(value, dtype)` converts a scalar to an element type, or encodes it
  when `dtype` is a `StringIndex`.
- `values_as(values, dtype)` builds an array, raising `TypeError` if any value
  is not of the type's kind or is out of its range.

### `maelstrom.elementwise`

- `arange(start, end=None, inc=None)`: a range whose type is inferred from
  `start`; with one argument, `[0, start)`.
- `assign(dst, ix, values)`: `dst[ix[i]] = values[i]`, in place.
- `cast(vec, dtype)`: a converted copy.
- `fill(vec, value, start=0, end=None)` and
  `increment(vec, inc=None, start=0, end=None, op=IncOp.INCREMENT)`: in-place
  updates of a range. `IncOp` is `INCREMENT`, `DECREMENT`, `MODULUS` or
  `DIVIDE`; integer division rounds toward zero.
- `binary(left, right, op)`: `BinaryOp.PLUS`, `MINUS`, `TIMES` or `DIVIDE`,
  element-wise, returning a new vector of `left`'s type.
- `prefix_sum(vec)` and `reverse(vec)`: in place.
- `select(vec, idx)`: `W[i] = vec[idx[i]]`.
- `remove_if(array, stencil)`: a new vector without the elements whose stencil
  entry is true.
- `unpack(vec)`: a list of one-element vectors.
- `compare(vec1, vec2, cmp, invert=False)`: a `uint8` mask for the six
  element-wise comparators; `compare_select(vec1, vec2, cmp)` keeps the
  elements of `vec1` for which the comparison holds.
- `filter_indices(vec, cmp, cmp_val)`: `uint64` indices of matching elements.
  `BETWEEN`, `INSIDE` and `OUTSIDE` take a `(left, right)` pair; `IS_IN` and
  `IS_NOT_IN` take a collection.

### `maelstrom.ordering`

- `sort(*vectors)`: stable lexicographic sort of one or more equally sized
  arrays in place (a single list or tuple of arrays is also accepted); returns
  the `uint64` permutation.
- `topk(vec, k, descending=False)`: indices of the `k` largest elements, or the
  `k` smallest with `descending=True`.
- `unique(vec, is_sorted=False)`: indices of the first occurrence of each
  distinct value, ordered by value.
- `count_unique(vec, max_num_values=None, is_sorted=False)`: distinct values
  and their `uint64` counts; exceeding `max_num_values` raises `ValueError`.
- `intersection(left, right, is_sorted=False)`: indices of `left` forming the
  multiset intersection with `right`.
- `search_sorted(sorted_array, values)`: the last insertion position keeping
  order.
- `randperm(array_size, num_to_select, seed=None)`: distinct random indices.

### `maelstrom.reduction`

- `reduce(vec, red)` with a `Reductor` (`MIN`, `MAX`, `SUM`, `PRODUCT`,
  `MEAN`) returns `(value, index)`; `MIN`/`MAX` report where the extreme lies,
  the others report 0, and `MEAN` returns a float.
- `reduce_by_key(keys, values, red, max_unique_keys=None, is_sorted=False)`
  returns the reduced value of each key (ordered by key) and its `uint64`
  originating index.
- `similarity(metric, src_embeddings, src_offsets, target_embeddings,
  emb_stride)` returns, for each selected flat source embedding, its best
  `Similarity.COSINE` or `Similarity.JACCARD` score against the targets.

### `maelstrom.sparse`

- `csr_to_coo(ptr, nnz)`: expands a CSR row pointer into a COO row index.
- `search_sorted_sparse(row, col, ix_r, ix_c, index_not_found=None)`: position
  in `col` of each `(row, column)` entry; absent entries get `index_not_found`,
  by default the largest value of the index type.

### `maelstrom.adjacency`

- `query_adjacency(row, col, val=None, rel=None, ix=None, rel_types=None,
  return_inner=True, return_values=False, return_relations=False,
  return_1d_index_as_values=False)` lists the nonzeros of the rows named by
  `ix`, optionally keeping only those whose relation is in `rel_types`. It
  returns an `AdjacencyResult` named tuple `(origin, inner, values, relations)`;
  vectors that were not requested are empty.

## Example

```python
import numpy as np
from maelstrom.ordering import sort, count_unique
from maelstrom.sparse import csr_to_coo
from maelstrom.adjacency import query_adjacency

a = np.array([9.1, 8.2, 4.3, 2.2, 4.5, 9.81])
ix = sort(a)          # a is sorted in place; ix == [3, 2, 4, 1, 0, 5]

values, counts = count_unique(np.array([4.0, 6.3, 4.0, 2.1]))

row = np.array([0, 2, 6, 7, 9, 13, 16], dtype=np.int32)
col = np.array([1, 3, 0, 2, 4, 5, 0, 1, 2, 1, 2, 3, 4, 0, 2, 5], dtype=np.int32)
coo_rows = csr_to_coo(row, len(col))

result = query_adjacency(row, col, ix=np.array([5, 0], dtype=np.int32))
# result.origin == [0, 0, 0, 1, 1], result.inner == [0, 2, 5, 1, 3]
```

## What it does not do

Every function works on ordinary in-memory NumPy arrays in a single process.
`Storage` only names storage kinds; nothing here allocates device or pinned
memory, moves data between kinds, or runs distributed. There is no vector
container class of its own, no hash table and no sparse matrix class: CSR data
is passed as separate row, column, value and relation arrays.