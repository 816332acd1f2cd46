"""Vector algorithms, reductions and sparse CSR queries on NumPy arrays."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "strings",
    "elementwise",
    "ordering",
    "reduction",
    "sparse",
    "adjacency",
]