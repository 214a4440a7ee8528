"""
Error types raised at the Color Swapper orchestration boundary.

The solver itself never raises these; they describe user-facing conditions
detected before a solve (no input) or after it (nowhere to apply the result).
"""

from CS_Libs.constants import MSG_NO_COMPLETE_PAIRS, MSG_NO_DOCUMENT


class ColorSwapperError(Exception):
    """Base class for user-facing Color Swapper errors."""


class NoInputError(ColorSwapperError):
    """Raised when a solve is requested with zero complete color pairs."""

    def __init__(self, message: str = MSG_NO_COMPLETE_PAIRS) -> None:
        super().__init__(message)


class MissingContextError(ColorSwapperError):
    """Raised when a computed matrix has no document to be applied to."""

    def __init__(self, message: str = MSG_NO_DOCUMENT) -> None:
        super().__init__(message)
