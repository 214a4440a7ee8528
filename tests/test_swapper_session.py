"""
Tests for SwapperSession orchestration.

Tests cover:
- Status messages for pair management
- Sampling source/target colors from the host
- Rejecting solves without complete pairs
- Applying results and keeping them when no document is open
- Reporting unexpected host failures
"""

from unittest.mock import Mock

import pytest

from CS_Libs.ChannelMixerLib.host_document import ChannelMixerHost
from CS_Libs.ColorPairLib.color_models import Color
from CS_Libs.MatrixLib.matrix_format import format_matrix_for_display
from CS_Libs.MatrixLib.solver_options import SolverOptions
from CS_Libs.SessionLib.swapper_session import SwapperSession


def _add_complete_pair(session, source, target):
    pair = session.add_pair()
    session.host.foreground_color = source
    session.set_source(pair.id)
    session.host.foreground_color = target
    session.set_target(pair.id)
    return pair


class TestPairManagement:
    """Tests for pair management messages."""

    def test_add_pair_message(self, host_with_document):
        session = SwapperSession(host_with_document)

        session.add_pair()
        pair = session.add_pair()

        assert pair.id == 2
        assert session.last_message == "Added color pair #2"

    def test_remove_pair_message(self, host_with_document):
        session = SwapperSession(host_with_document)
        pair = session.add_pair()

        session.remove_pair(pair.id)

        assert session.last_message == "Color pair removed. 0 pair(s) remaining."
        assert len(session.store) == 0

    def test_set_source_and_target_sample_host_color(self, host_with_document):
        session = SwapperSession(host_with_document)
        pair = session.add_pair()

        session.set_source(pair.id)
        assert session.last_message == "Source set for pair: RGB(255, 0, 0)"

        host_with_document.foreground_color = Color(0, 128, 255)
        session.set_target(pair.id)
        assert session.last_message == "Target set for pair: RGB(0, 128, 255)"

        assert pair.source == Color(255, 0, 0)
        assert pair.target == Color(0, 128, 255)

    def test_set_unknown_pair_keeps_message(self, host_with_document):
        session = SwapperSession(host_with_document)
        session.add_pair()

        assert session.set_source(99) is None
        assert session.last_message == "Added color pair #1"


class TestCalculate:
    """Tests for SwapperSession.calculate."""

    def test_rejects_when_no_complete_pairs(self, host_with_document, open_document):
        session = SwapperSession(host_with_document)
        pair = session.add_pair()
        session.set_source(pair.id)

        assert session.calculate() is None
        assert session.last_message == "Please add at least one complete color pair (source + target)."
        assert session.last_matrix is None
        assert open_document.layers == []

    def test_solves_displays_and_applies(self, host_with_document, open_document):
        session = SwapperSession(host_with_document)
        _add_complete_pair(session, Color(255, 0, 0), Color(0, 255, 0))

        matrix = session.calculate(prevent_clipping=False)

        assert matrix[1] == pytest.approx([100.0, 0.0, 0.0], abs=1e-6)
        assert session.last_message == format_matrix_for_display(matrix)
        assert session.result_text() == session.last_message
        assert [layer.name for layer in open_document.layers] == ["Smart Channel Swapper"]
        assert open_document.layers[0].settings.green_red == 100

    def test_incomplete_pairs_are_ignored(self, host_with_document):
        session = SwapperSession(host_with_document)
        session.add_pair()
        _add_complete_pair(session, Color(255, 0, 0), Color(0, 255, 0))

        matrix = session.calculate(prevent_clipping=False)

        assert matrix[1] == pytest.approx([100.0, 0.0, 0.0], abs=1e-6)

    def test_uses_session_options(self, host_with_document):
        session = SwapperSession(host_with_document, options=SolverOptions(max_row_sum=50.0))
        _add_complete_pair(session, Color(200, 200, 200), Color(255, 255, 255))

        matrix = session.calculate()
        for row in matrix:
            assert sum(row) == pytest.approx(50.0, abs=1e-9)

        unconstrained = session.calculate(prevent_clipping=False)
        for row in unconstrained:
            assert sum(row) == pytest.approx(127.5, abs=1e-3)

    def test_repeated_calculation_keeps_single_helper_layer(self, host_with_document, open_document):
        session = SwapperSession(host_with_document)
        _add_complete_pair(session, Color(255, 0, 0), Color(0, 255, 0))

        session.calculate()
        session.calculate()

        assert len(open_document.layers) == 1

    def test_missing_document_keeps_matrix(self):
        session = SwapperSession(ChannelMixerHost())
        _add_complete_pair(session, Color(255, 0, 0), Color(0, 255, 0))

        matrix = session.calculate(prevent_clipping=False)

        assert matrix is not None
        assert session.last_matrix == matrix
        assert session.last_message == "Error: No document open"
        assert session.result_text() == format_matrix_for_display(matrix)

    def test_unexpected_host_failure_is_reported(self):
        host = ChannelMixerHost()
        host.apply_matrix = Mock(side_effect=RuntimeError("layer creation failed"))
        session = SwapperSession(host)
        pair = _add_complete_pair(session, Color(10, 20, 30), Color(30, 20, 10))

        matrix = session.calculate()

        assert matrix is not None
        assert session.last_message == "Error: layer creation failed"
        assert session.store.get(pair.id).is_complete
        host.apply_matrix.assert_called_once_with(matrix)

    def test_result_text_empty_before_solve(self, host_with_document):
        assert SwapperSession(host_with_document).result_text() == ""
