"""
Color Swapper session: the orchestration boundary.

The session owns the color pair store, samples colors from the host,
validates input before solving, and applies the result. It is the only
place user-facing errors are caught; every outcome ends up as a message
in ``last_message`` instead of an exception.

Classes:
    SwapperSession: Store + solver + host wiring with status messages
"""

import logging
from typing import Optional

from CS_Libs.ChannelMixerLib.host_document import ChannelMixerHost
from CS_Libs.ColorPairLib.color_models import ColorPair
from CS_Libs.ColorPairLib.color_pair_store import ColorPairStore
from CS_Libs.MatrixLib.matrix_format import format_matrix_for_display
from CS_Libs.MatrixLib.matrix_solver import TransformMatrix, compute_transform_matrix
from CS_Libs.MatrixLib.solver_options import SolverOptions
from CS_Libs.constants import (
    MSG_ERROR_PREFIX,
    MSG_PAIR_ADDED,
    MSG_PAIR_REMOVED,
    MSG_SOURCE_SET,
    MSG_TARGET_SET,
)
from CS_Libs.errors import ColorSwapperError, NoInputError

logger = logging.getLogger(__name__)


class SwapperSession:
    """
    Single-user session that turns sampled color pairs into a channel mixer.

    Attributes:
        host: Host collaborator providing colors and the target document
        store: Ordered color pair store
        options: Default solver options used by calculate()
        last_matrix: Most recently computed matrix (kept if applying fails)
        last_message: Most recent user-facing status text
    """

    def __init__(
        self,
        host: ChannelMixerHost,
        store: Optional[ColorPairStore] = None,
        options: Optional[SolverOptions] = None,
    ):
        self.host = host
        self.store = store if store is not None else ColorPairStore()
        self.options = options if options is not None else SolverOptions()
        self.last_matrix: Optional[TransformMatrix] = None
        self.last_message = ""

    def _show(self, text: str) -> str:
        self.last_message = text
        return text

    def add_pair(self) -> ColorPair:
        pair = self.store.add()
        self._show(MSG_PAIR_ADDED.format(count=len(self.store)))
        return pair

    def remove_pair(self, pair_id: int) -> None:
        self.store.remove(pair_id)
        self._show(MSG_PAIR_REMOVED.format(count=len(self.store)))

    def set_source(self, pair_id: int) -> Optional[ColorPair]:
        """Set a pair's source to the host's current foreground color."""
        pair = self.store.set_source(pair_id, self.host.get_foreground_color())
        if pair is not None:
            self._show(MSG_SOURCE_SET.format(rgb=pair.source.describe()))
        return pair

    def set_target(self, pair_id: int) -> Optional[ColorPair]:
        """Set a pair's target to the host's current foreground color."""
        pair = self.store.set_target(pair_id, self.host.get_foreground_color())
        if pair is not None:
            self._show(MSG_TARGET_SET.format(rgb=pair.target.describe()))
        return pair

    def solve(self, options: Optional[SolverOptions] = None) -> TransformMatrix:
        """
        Solve the matrix from the current complete pairs.

        Raises:
            NoInputError: If no pair has both colors set
        """
        options = options if options is not None else self.options
        source_colors, target_colors = self.store.complete_colors()
        if not source_colors:
            raise NoInputError()

        return compute_transform_matrix(
            source_colors,
            target_colors,
            prevent_clipping=options.prevent_clipping,
            max_row_sum=options.max_row_sum,
        )

    def calculate(self, prevent_clipping: Optional[bool] = None) -> Optional[TransformMatrix]:
        """
        Solve, display and apply the matrix, reporting problems as messages.

        Args:
            prevent_clipping: Override the session option for this solve

        Returns:
            The computed matrix, or None if no matrix could be computed.
            A matrix is still returned when only applying it failed.
        """
        options = self.options
        if prevent_clipping is not None:
            options = SolverOptions(
                prevent_clipping=prevent_clipping,
                max_row_sum=self.options.max_row_sum,
            )

        try:
            matrix = self.solve(options)
        except NoInputError as e:
            logger.warning(f"Solve rejected: {e}")
            self._show(str(e))
            return None
        except Exception as e:
            logger.exception("Error calculating channel mixer matrix")
            self._show(f"{MSG_ERROR_PREFIX}{e}")
            return None

        self.last_matrix = matrix
        self._show(format_matrix_for_display(matrix))

        try:
            self.host.apply_matrix(matrix)
        except ColorSwapperError as e:
            logger.warning(f"Could not apply matrix: {e}")
            self._show(f"{MSG_ERROR_PREFIX}{e}")
        except Exception as e:
            logger.exception("Error applying channel mixer matrix")
            self._show(f"{MSG_ERROR_PREFIX}{e}")

        return matrix

    def result_text(self) -> str:
        """Display text for the last computed matrix (empty if none)."""
        if self.last_matrix is None:
            return ""
        return format_matrix_for_display(self.last_matrix)
