"""
Pytest configuration and shared fixtures for Color Swapper tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest
from PIL import Image

from CS_Libs.ChannelMixerLib.host_document import ChannelMixerHost, ImageDocument
from CS_Libs.ColorPairLib.color_models import Color


@pytest.fixture
def primary_colors():
    """
    Provide the three primaries as Colors.

    Returns:
        List of red, green and blue Colors
    """
    return [
        Color(255, 0, 0),  # Red
        Color(0, 255, 0),  # Green
        Color(0, 0, 255),  # Blue
    ]


@pytest.fixture
def sample_image():
    """Provide a small RGBA image with two distinct pixel colors."""
    image = Image.new("RGBA", (2, 1), color=(0, 0, 0, 255))
    pixels = image.load()
    pixels[0, 0] = (200, 40, 40, 255)
    pixels[1, 0] = (10, 20, 30, 128)
    return image


@pytest.fixture
def open_document(sample_image):
    return ImageDocument(image=sample_image)


@pytest.fixture
def host_with_document(open_document):
    """Provide a host with an open document and a red foreground color."""
    return ChannelMixerHost(active_document=open_document, foreground_color=Color(255, 0, 0))
