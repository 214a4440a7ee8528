"""
Host-side documents that receive computed channel mixer matrices.

These classes stand in for the image editor the matrix is applied to: a
document holds a base image and a stack of channel mixer adjustment layers,
and the host exposes the current foreground color and the active document.

Classes:
    AdjustmentLayer: Named channel mixer layer
    ImageDocument: Base image plus ordered adjustment layers
    ChannelMixerHost: Foreground color sampling and matrix application
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence

from CS_Libs.ChannelMixerLib.channel_mixer import ChannelMixerSettings, apply_channel_mixer
from CS_Libs.ColorPairLib.color_models import Color
from CS_Libs.constants import ADJUSTMENT_KIND_CHANNEL_MIXER, HELPER_LAYER_NAME
from CS_Libs.errors import MissingContextError

logger = logging.getLogger(__name__)


@dataclass
class AdjustmentLayer:
    name: str
    settings: ChannelMixerSettings
    kind: str = ADJUSTMENT_KIND_CHANNEL_MIXER
    visible: bool = True


@dataclass
class ImageDocument:
    """An open image with a stack of adjustment layers (bottom to top)."""
    image: Any
    path: Optional[Path] = None
    layers: List[AdjustmentLayer] = field(default_factory=list)

    def find_layer(self, name: str) -> Optional[AdjustmentLayer]:
        for layer in self.layers:
            if layer.name == name:
                return layer
        return None

    def remove_layer(self, name: str) -> bool:
        """Remove the first layer with the given name. Returns True if one was removed."""
        layer = self.find_layer(name)
        if layer is None:
            return False
        self.layers.remove(layer)
        return True

    def add_layer(self, layer: AdjustmentLayer) -> AdjustmentLayer:
        self.layers.append(layer)
        return layer

    def render(self) -> Any:
        """
        Composite all visible layers over the base image.

        Returns:
            A new RGBA PIL Image; the base image is not modified
        """
        result = self.image.convert("RGBA") if self.image.mode != "RGBA" else self.image.copy()
        for layer in self.layers:
            if layer.visible:
                result = apply_channel_mixer(result, layer.settings)
        return result


class ChannelMixerHost:
    """
    Minimal image editing host for the color swapper.

    Example:
        >>> host = ChannelMixerHost(ImageDocument(image))
        >>> host.foreground_color = Color(200, 40, 40)
        >>> host.apply_matrix(matrix)
    """

    def __init__(
        self,
        active_document: Optional[ImageDocument] = None,
        foreground_color: Color = Color(0, 0, 0),
        layer_name: str = HELPER_LAYER_NAME,
    ):
        self.active_document = active_document
        self.foreground_color = foreground_color
        self.layer_name = layer_name

    def get_foreground_color(self) -> Color:
        return self.foreground_color

    def require_document(self) -> ImageDocument:
        if self.active_document is None:
            raise MissingContextError()
        return self.active_document

    def apply_matrix(self, matrix: Sequence[Sequence[float]]) -> AdjustmentLayer:
        """
        Install a matrix as the document's helper channel mixer layer.

        Any existing helper layer is replaced, so a document never holds
        more than one.

        Args:
            matrix: 3x3 matrix of percentages

        Returns:
            The newly created AdjustmentLayer

        Raises:
            MissingContextError: If no document is open
            ValueError: If the matrix is not 3x3
        """
        document = self.require_document()
        settings = ChannelMixerSettings.from_matrix(matrix)

        if document.remove_layer(self.layer_name):
            logger.debug(f"Replaced existing '{self.layer_name}' layer")

        layer = document.add_layer(AdjustmentLayer(name=self.layer_name, settings=settings))
        logger.info(f"Applied channel mixer settings to '{self.layer_name}' layer")
        return layer
