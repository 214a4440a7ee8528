"""
ChannelMixerLib - Host documents and channel mixer application

This module provides the channel mixer settings the solved matrix is
converted to, and the document/host classes that receive them.
"""

from CS_Libs.ChannelMixerLib.channel_mixer import ChannelMixerSettings, apply_channel_mixer
from CS_Libs.ChannelMixerLib.host_document import (
    AdjustmentLayer,
    ImageDocument,
    ChannelMixerHost,
)

__all__ = [
    "ChannelMixerSettings",
    "apply_channel_mixer",
    "AdjustmentLayer",
    "ImageDocument",
    "ChannelMixerHost",
]
