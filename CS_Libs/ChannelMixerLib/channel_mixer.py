"""
Channel mixer settings and their application to images.

A channel mixer computes each output channel as a weighted sum of the red,
green and blue inputs plus a constant, with every weight expressed in
percent. This is the facility the solved matrix is installed into.

Classes:
    ChannelMixerSettings: Rounded integer weights plus per-row constants

Functions:
    apply_channel_mixer: Apply settings to a PIL Image
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np
from PIL import Image

from CS_Libs.ColorPairLib.color_models import round_half_up
from CS_Libs.constants import (
    CHANNEL_COUNT,
    CHANNEL_KEYS,
    DEFAULT_CONSTANT_PERCENT,
    MAX_CHANNEL_VALUE,
    PERCENT_SCALE,
)

MixerRow = Tuple[int, int, int, int]


@dataclass(frozen=True)
class ChannelMixerSettings:
    """Integer channel mixer settings in percent.

    ``<output>_<input>`` is the weight of an input channel in an output
    channel; ``<output>_constant`` is the offset added to that output.
    """
    red_red: int = 100
    red_green: int = 0
    red_blue: int = 0
    red_constant: int = DEFAULT_CONSTANT_PERCENT
    green_red: int = 0
    green_green: int = 100
    green_blue: int = 0
    green_constant: int = DEFAULT_CONSTANT_PERCENT
    blue_red: int = 0
    blue_green: int = 0
    blue_blue: int = 100
    blue_constant: int = DEFAULT_CONSTANT_PERCENT

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[float]]) -> "ChannelMixerSettings":
        """
        Build settings from a 3x3 percentage matrix.

        Weights are rounded to whole percentages; every constant is 0.

        Raises:
            ValueError: If the matrix is not 3x3
        """
        if len(matrix) != CHANNEL_COUNT or any(len(row) != CHANNEL_COUNT for row in matrix):
            raise ValueError("Matrix must be 3x3")

        values: Dict[str, int] = {}
        for output_key, row in zip(CHANNEL_KEYS, matrix):
            for input_key, weight in zip(CHANNEL_KEYS, row):
                values[f"{output_key}_{input_key}"] = round_half_up(weight)
            values[f"{output_key}_constant"] = DEFAULT_CONSTANT_PERCENT
        return cls(**values)

    def rows(self) -> List[MixerRow]:
        """Return one (red, green, blue, constant) tuple per output channel."""
        return [
            (
                getattr(self, f"{output_key}_red"),
                getattr(self, f"{output_key}_green"),
                getattr(self, f"{output_key}_blue"),
                getattr(self, f"{output_key}_constant"),
            )
            for output_key in CHANNEL_KEYS
        ]

    def weights(self) -> np.ndarray:
        """3x3 weight matrix as fractions (100% -> 1.0)."""
        return np.asarray([row[:3] for row in self.rows()], dtype=float) / PERCENT_SCALE

    def offsets(self) -> np.ndarray:
        """Per-output constants as 0-255 channel offsets."""
        constants = np.asarray([row[3] for row in self.rows()], dtype=float)
        return constants / PERCENT_SCALE * MAX_CHANNEL_VALUE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChannelMixerSettings":
        """Create from dictionary."""
        normalized = {k: int(v) for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**normalized)


def apply_channel_mixer(image: Any, settings: ChannelMixerSettings) -> Any:
    """
    Apply channel mixer settings to an image.

    Args:
        image: PIL Image to process (converted to RGBA if needed)
        settings: Channel mixer weights and constants

    Returns:
        A new RGBA PIL Image; alpha is copied unchanged

    Raises:
        TypeError: If image is not a PIL Image
    """
    if not hasattr(image, "size") or not hasattr(image, "convert"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    if image.mode != "RGBA":
        image = image.convert("RGBA")

    pixels = np.asarray(image, dtype=float)
    rgb = pixels[..., :CHANNEL_COUNT]

    mixed = rgb @ settings.weights().T + settings.offsets()
    mixed = np.clip(np.floor(mixed + 0.5), 0, MAX_CHANNEL_VALUE)

    output = np.empty(pixels.shape, dtype=np.uint8)
    output[..., :CHANNEL_COUNT] = mixed.astype(np.uint8)
    output[..., CHANNEL_COUNT] = pixels[..., CHANNEL_COUNT].astype(np.uint8)
    return Image.fromarray(output)
