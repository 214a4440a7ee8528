"""
Constants and configuration values for Color Swapper.

This module centralizes all constant values, numeric tolerances, and
user-facing message templates used throughout the application.
"""

# Channel constants
CHANNEL_NAMES = ("Red", "Green", "Blue")
CHANNEL_KEYS = ("red", "green", "blue")
CHANNEL_COUNT = 3
MIN_CHANNEL_VALUE = 0
MAX_CHANNEL_VALUE = 255

# Solver constants
REGULARIZATION_EPSILON = 1e-10
PIVOT_TOLERANCE = 1e-12
SINGULAR_FIRST_UNKNOWN = 1.0
SINGULAR_OTHER_UNKNOWN = 0.0
PERCENT_SCALE = 100.0

# Channel mixer limits (percent)
DEFAULT_MAX_ROW_SUM = 100.0
MIN_MIX_PERCENT = -200.0
MAX_MIX_PERCENT = 200.0
DEFAULT_CONSTANT_PERCENT = 0

# Host layer
HELPER_LAYER_NAME = "Smart Channel Swapper"
ADJUSTMENT_KIND_CHANNEL_MIXER = "channelMixer"

# Display
DISPLAY_HEADER = "Smart Channel Swapper Settings:"

# User-facing messages
MSG_PAIR_ADDED = "Added color pair #{count}"
MSG_PAIR_REMOVED = "Color pair removed. {count} pair(s) remaining."
MSG_SOURCE_SET = "Source set for pair: {rgb}"
MSG_TARGET_SET = "Target set for pair: {rgb}"
MSG_NO_COMPLETE_PAIRS = "Please add at least one complete color pair (source + target)."
MSG_NO_DOCUMENT = "No document open"
MSG_ERROR_PREFIX = "Error: "
MSG_SOURCE_EMPTY = "Click to set source color"
MSG_TARGET_EMPTY = "Click to set target color"
