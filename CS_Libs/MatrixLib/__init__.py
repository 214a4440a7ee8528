"""
MatrixLib - Channel mixer matrix solving and formatting

This module provides the least-squares solver that turns color pairs into
a 3x3 channel mixer matrix, the options it takes, and display helpers.
"""

from CS_Libs.MatrixLib.matrix_solver import (
    TransformMatrix,
    compute_transform_matrix,
    solve_least_squares,
    solve_linear_system,
    limit_row_sum,
    clamp_row,
)
from CS_Libs.MatrixLib.matrix_format import format_percent, format_matrix_for_display
from CS_Libs.MatrixLib.solver_options import SolverOptions

__all__ = [
    "TransformMatrix",
    "compute_transform_matrix",
    "solve_least_squares",
    "solve_linear_system",
    "limit_row_sum",
    "clamp_row",
    "format_percent",
    "format_matrix_for_display",
    "SolverOptions",
]
