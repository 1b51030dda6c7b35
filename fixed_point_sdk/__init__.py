"""Fixed-point numbers with deterministic, platform-independent rounding."""

from .core import (
    Fixed8_4,
    Fixed16_8,
    Fixed32_16,
    Fixed64_32,
    FixedPoint,
    FixedPointError,
    IntType,
    PrecisionError,
    UnsupportedWidthError,
    WidthTrait,
    fixed,
    get_width_trait,
)
from .utils.config import FixedPointConfig
from .utils.conversion import format_fixed_for_display, to_decimal, to_float
from .utils.digits import decimal_digit_count, integer_pow

__all__ = [
    'FixedPoint',
    'Fixed8_4',
    'Fixed16_8',
    'Fixed32_16',
    'Fixed64_32',
    'fixed',
    'IntType',
    'WidthTrait',
    'get_width_trait',
    'FixedPointConfig',
    'FixedPointError',
    'PrecisionError',
    'UnsupportedWidthError',
    'decimal_digit_count',
    'integer_pow',
    'to_decimal',
    'to_float',
    'format_fixed_for_display',
]
