"""Comparison of conflict/dependency analysis results."""

from .errors import MatrixParseError
from .matrix import (
    ConflictMatrix,
    MatrixComparison,
    compare_matrices,
    read_matrix,
    read_matrix_file,
)

__all__ = [
    "MatrixParseError",
    "ConflictMatrix",
    "MatrixComparison",
    "compare_matrices",
    "read_matrix",
    "read_matrix_file",
]
