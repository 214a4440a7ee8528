"""
Least-squares channel mixer solver for Color Swapper.

Given parallel lists of source and target colors, this module finds the
3x3 matrix M (in percent) such that ``source @ M.T`` approximates
``target`` as closely as possible in the least-squares sense. Each output
channel is an independent linear least-squares problem solved through the
normal equations and Gaussian elimination with partial pivoting.

Functions:
    compute_transform_matrix: Solve the full 3x3 matrix from color lists
    solve_least_squares: Solve one ``min ||A w - b||^2`` problem
    solve_linear_system: Gaussian elimination with partial pivoting
    limit_row_sum: Rescale a row so its absolute sum stays within a bound
    clamp_row: Clamp a row to the channel mixer's percent range
"""

import logging
from typing import List, Sequence, Union

import numpy as np

from CS_Libs.ColorPairLib.color_models import Color
from CS_Libs.constants import (
    CHANNEL_COUNT,
    CHANNEL_NAMES,
    DEFAULT_MAX_ROW_SUM,
    MAX_CHANNEL_VALUE,
    MAX_MIX_PERCENT,
    MIN_MIX_PERCENT,
    PERCENT_SCALE,
    PIVOT_TOLERANCE,
    REGULARIZATION_EPSILON,
    SINGULAR_FIRST_UNKNOWN,
    SINGULAR_OTHER_UNKNOWN,
)

logger = logging.getLogger(__name__)

ColorLike = Union[Color, Sequence[int]]
TransformMatrix = List[List[float]]


def _color_array(colors: Sequence[ColorLike], label: str) -> np.ndarray:
    """Convert colors to an (n, 3) float array normalized to [0, 1]."""
    rows = []
    for index, color in enumerate(colors):
        if isinstance(color, Color):
            rows.append(color.normalized())
            continue

        try:
            channels = [float(value) for value in color]
        except TypeError:
            raise ValueError(f"{label}[{index}] is not a color: {color!r}") from None

        if len(channels) != CHANNEL_COUNT:
            raise ValueError(
                f"{label}[{index}] must have {CHANNEL_COUNT} channels, got {len(channels)}"
            )
        rows.append([value / MAX_CHANNEL_VALUE for value in channels])

    return np.asarray(rows, dtype=float).reshape(-1, CHANNEL_COUNT)


def solve_linear_system(matrix: Sequence[Sequence[float]], rhs: Sequence[float]) -> List[float]:
    """
    Solve ``matrix @ x = rhs`` by Gaussian elimination with partial pivoting.

    Columns whose best pivot is below PIVOT_TOLERANCE are skipped during
    elimination. During back substitution a diagonal entry below the
    tolerance yields a fixed value (1 for the first unknown, 0 otherwise)
    instead of a division, so the result is always finite.

    Args:
        matrix: Square coefficient matrix (n x n)
        rhs: Right-hand side vector (n)

    Returns:
        Solution vector as a list of n floats
    """
    coefficients = np.asarray(matrix, dtype=float)
    size = coefficients.shape[0]
    augmented = np.hstack([coefficients, np.asarray(rhs, dtype=float).reshape(size, 1)])

    for col in range(size):
        pivot_row = col + int(np.argmax(np.abs(augmented[col:, col])))
        if pivot_row != col:
            augmented[[col, pivot_row]] = augmented[[pivot_row, col]]

        pivot = augmented[col, col]
        if abs(pivot) < PIVOT_TOLERANCE:
            continue

        for row in range(col + 1, size):
            factor = augmented[row, col] / pivot
            augmented[row, col:] -= factor * augmented[col, col:]

    solution = [0.0] * size
    for i in range(size - 1, -1, -1):
        diagonal = augmented[i, i]
        if abs(diagonal) < PIVOT_TOLERANCE:
            solution[i] = SINGULAR_FIRST_UNKNOWN if i == 0 else SINGULAR_OTHER_UNKNOWN
            continue

        value = augmented[i, size]
        for j in range(i + 1, size):
            value -= augmented[i, j] * solution[j]
        solution[i] = float(value / diagonal)

    return solution


def solve_least_squares(
    design: np.ndarray,
    targets: np.ndarray,
    epsilon: float = REGULARIZATION_EPSILON,
) -> List[float]:
    """
    Find w minimizing ``||design @ w - targets||^2`` via the normal equations.

    A small ridge term ``epsilon`` is added to the diagonal of A^T A so the
    system stays solvable when source colors are collinear or too few.

    Args:
        design: (n, m) design matrix
        targets: (n,) target vector
        epsilon: Diagonal regularization added to A^T A

    Returns:
        Weight vector of length m
    """
    design = np.asarray(design, dtype=float)
    targets = np.asarray(targets, dtype=float)

    normal_matrix = design.T @ design
    normal_rhs = design.T @ targets
    normal_matrix += epsilon * np.eye(normal_matrix.shape[0])

    return solve_linear_system(normal_matrix, normal_rhs)


def limit_row_sum(row: Sequence[float], max_row_sum: float = DEFAULT_MAX_ROW_SUM) -> List[float]:
    """
    Scale a row uniformly when its absolute sum exceeds ``max_row_sum``.

    Rows already within bounds are returned unchanged.
    """
    values = [float(value) for value in row]
    row_sum = sum(values)
    if abs(row_sum) > max_row_sum:
        scale = max_row_sum / abs(row_sum)
        values = [value * scale for value in values]
    return values


def clamp_row(
    row: Sequence[float],
    lower: float = MIN_MIX_PERCENT,
    upper: float = MAX_MIX_PERCENT,
) -> List[float]:
    return [max(lower, min(upper, float(value))) for value in row]


def compute_transform_matrix(
    source_colors: Sequence[ColorLike],
    target_colors: Sequence[ColorLike],
    prevent_clipping: bool = True,
    max_row_sum: float = DEFAULT_MAX_ROW_SUM,
) -> TransformMatrix:
    """
    Compute the 3x3 channel mixer matrix mapping source colors to targets.

    Row ``i`` of the result holds the percentages of the red, green and blue
    inputs that make up output channel ``i``. With ``prevent_clipping`` each
    row whose absolute sum exceeds ``max_row_sum`` is rescaled onto that
    bound. Every entry is finally clamped to [-200, 200].

    Args:
        source_colors: Colors as sampled before the adjustment (0-255)
        target_colors: Desired colors after the adjustment (0-255)
        prevent_clipping: Bound each row's absolute sum by ``max_row_sum``
        max_row_sum: Row sum bound in percent

    Returns:
        3x3 matrix of percentages as nested lists

    Raises:
        ValueError: If the color lists are empty, differ in length, or hold
            something that is not a 3-channel color
    """
    if len(source_colors) == 0:
        raise ValueError("At least one source/target color pair is required")
    if len(source_colors) != len(target_colors):
        raise ValueError(
            f"Source and target colors must have same length: "
            f"{len(source_colors)} vs {len(target_colors)}"
        )

    design = _color_array(source_colors, "source_colors")
    targets = _color_array(target_colors, "target_colors")

    matrix: TransformMatrix = []
    for channel in range(CHANNEL_COUNT):
        weights = solve_least_squares(design, targets[:, channel])
        row = [weight * PERCENT_SCALE for weight in weights]

        if prevent_clipping:
            row = limit_row_sum(row, max_row_sum)

        row = clamp_row(row)
        logger.debug(f"{CHANNEL_NAMES[channel]} output row: {row}")
        matrix.append(row)

    logger.info(f"Computed transform matrix from {len(design)} color pair(s)")
    return matrix
