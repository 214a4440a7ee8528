"""
Color data models for Color Swapper.

This module defines the value types exchanged between the host, the pair
store and the matrix solver.

Classes:
    Color: Immutable 8-bit RGB triple
    ColorPair: Source/target color slot pair identified by a session id

Type Aliases:
    RgbTuple: A tuple of 3 integers representing RGB color values (0-255)
    NormalizedRgb: A tuple of 3 floats in [0.0, 1.0]
"""

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Optional, Tuple

from CS_Libs.constants import (
    MAX_CHANNEL_VALUE,
    MIN_CHANNEL_VALUE,
    MSG_SOURCE_EMPTY,
    MSG_TARGET_EMPTY,
)

RgbTuple = Tuple[int, int, int]
NormalizedRgb = Tuple[float, float, float]


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGB color.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ValueError(f"Channel '{name}' must be an integer, got {value!r}")
            if not MIN_CHANNEL_VALUE <= value <= MAX_CHANNEL_VALUE:
                raise ValueError(
                    f"Channel '{name}' must be in range "
                    f"[{MIN_CHANNEL_VALUE}, {MAX_CHANNEL_VALUE}], got {value}"
                )
            object.__setattr__(self, name, int(value))

    @classmethod
    def from_host(cls, red: Real, green: Real, blue: Real) -> "Color":
        """
        Build a color from host-reported channel values.

        Hosts report sampled colors as floats; each channel is rounded to
        the nearest integer before validation.

        Args:
            red: Red intensity (0-255, may be fractional)
            green: Green intensity (0-255, may be fractional)
            blue: Blue intensity (0-255, may be fractional)

        Returns:
            A validated Color

        Raises:
            ValueError: If a rounded channel falls outside 0-255
        """
        return cls(round_half_up(red), round_half_up(green), round_half_up(blue))

    def as_tuple(self) -> RgbTuple:
        return (self.r, self.g, self.b)

    def normalized(self) -> NormalizedRgb:
        """Return the channels scaled from [0, 255] to [0.0, 1.0]."""
        scale = float(MAX_CHANNEL_VALUE)
        return (self.r / scale, self.g / scale, self.b / scale)

    def describe(self) -> str:
        return f"RGB({self.r}, {self.g}, {self.b})"


@dataclass
class ColorPair:
    """A user-defined mapping from one source color to one target color.

    Either side may be unset (None) until the user samples it.
    """
    id: int
    source: Optional[Color] = None
    target: Optional[Color] = None

    @property
    def is_complete(self) -> bool:
        return self.source is not None and self.target is not None

    def describe_source(self) -> str:
        if self.source is None:
            return MSG_SOURCE_EMPTY
        return f"Source: {self.source.describe()}"

    def describe_target(self) -> str:
        if self.target is None:
            return MSG_TARGET_EMPTY
        return f"Target: {self.target.describe()}"


def round_half_up(value: Real) -> int:
    """Round to the nearest integer with halves going toward +infinity."""
    return int(math.floor(float(value) + 0.5))
