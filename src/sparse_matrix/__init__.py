"""
Sparse integer matrices.

Matrices stored by their non-zero entries, loaded from a simple text format,
with element access and addition, subtraction and multiplication.
"""

__version__ = "0.1.0"

from .sparse_matrix import SparseMatrix
from .matrix_io import ParsedMatrix, parse_matrix, read_matrix_file
from .config import MatrixConfig
from .matrix_errors import (
    MatrixConfigError,
    MatrixRuntimeError,
    InvalidFieldWidthError,
    MatrixLoadError,
    MatrixFormatError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    NonIntegerValueError,
)
from .driver import run_operations

__all__ = [
    "SparseMatrix",
    "MatrixConfig",
    "ParsedMatrix",
    "parse_matrix",
    "read_matrix_file",
    "run_operations",
    "MatrixConfigError",
    "MatrixRuntimeError",
    "InvalidFieldWidthError",
    "MatrixLoadError",
    "MatrixFormatError",
    "DimensionMismatchError",
    "IndexOutOfBoundsError",
    "NonIntegerValueError",
]
