"""
Human-readable rendering of channel mixer matrices.

Functions:
    format_percent: Render one weight as a signed, rounded percentage
    format_matrix_for_display: Render the full matrix as display text
"""

from typing import List, Sequence

from CS_Libs.ColorPairLib.color_models import round_half_up
from CS_Libs.constants import CHANNEL_COUNT, CHANNEL_NAMES, DISPLAY_HEADER


def format_percent(value: float) -> str:
    """Format a weight as ``+N%`` or ``-N%`` (zero is shown as ``+0%``)."""
    rounded = round_half_up(value)
    sign = "+" if rounded >= 0 else ""
    return f"{sign}{rounded}%"


def format_matrix_for_display(matrix: Sequence[Sequence[float]]) -> str:
    """
    Format a 3x3 percentage matrix as display text.

    Example output for the identity matrix::

        Smart Channel Swapper Settings:

        Red Output:
          Red: +100%
          Green: +0%
          Blue: +0%
        ...

    Args:
        matrix: 3x3 matrix of percentages, one row per output channel

    Returns:
        Multi-line display string
    """
    if len(matrix) != CHANNEL_COUNT or any(len(row) != CHANNEL_COUNT for row in matrix):
        raise ValueError("Matrix must be 3x3")

    lines: List[str] = [DISPLAY_HEADER, ""]
    for output_index, output_name in enumerate(CHANNEL_NAMES):
        lines.append(f"{output_name} Output:")
        for input_index, input_name in enumerate(CHANNEL_NAMES):
            lines.append(f"  {input_name}: {format_percent(matrix[output_index][input_index])}")
        lines.append("")

    return "\n".join(lines)
