"""
ColorPairLib - Color values and color pair storage

This module provides the Color value type, the ColorPair record and the
ordered store the solver reads complete pairs from.
"""

from CS_Libs.ColorPairLib.color_models import (
    Color,
    ColorPair,
    NormalizedRgb,
    RgbTuple,
    round_half_up,
)
from CS_Libs.ColorPairLib.color_pair_store import ColorPairStore

__all__ = [
    "Color",
    "ColorPair",
    "NormalizedRgb",
    "RgbTuple",
    "round_half_up",
    "ColorPairStore",
]
