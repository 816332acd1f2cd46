[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maelstrom"
version = "0.1.0"
description = "Vector algorithms on NumPy arrays: element-wise operations, sorting, reductions and sparse CSR queries"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["vector", "sparse", "csr", "graph", "adjacency", "numpy", "algorithms"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["maelstrom"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
