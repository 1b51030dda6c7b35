"""Core fixed-point types: width traits, formats and errors."""
from .errors import FixedPointError, PrecisionError, UnsupportedWidthError
from .fixed import FixedPoint, Fixed8_4, Fixed16_8, Fixed32_16, Fixed64_32, fixed
from .widths import IntType, WidthTrait, get_width_trait

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
    'FixedPointError',
    'PrecisionError',
    'UnsupportedWidthError',
]
