"""
SessionLib - Orchestration of color pairs, solver and host

This module wires the color pair store, the matrix solver and the host
document together and turns every outcome into a user-facing message.
"""

from CS_Libs.SessionLib.swapper_session import SwapperSession

__all__ = ["SwapperSession"]
