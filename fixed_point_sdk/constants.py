"""Constants for the fixed-point SDK.

This module contains the supported storage widths, the default format used
when nothing else is configured, and the environment keys the config layer
reads.
"""

# Total bit widths with a registered width trait, narrowest first
SUPPORTED_WIDTHS = (8, 16, 32, 64)

# Default Q16.16 format
DEFAULT_BITS = 32
DEFAULT_PRECISION = 16

# Environment variables (or .env entries) that override the default format
ENV_BITS_KEY = "FIXED_POINT_BITS"
ENV_PRECISION_KEY = "FIXED_POINT_PRECISION"
