"""Exceptions raised by the fixed-point SDK.

Only format creation can fail. Arithmetic on an existing format wraps on
overflow and never raises, except for the native ZeroDivisionError.
"""


class FixedPointError(Exception):
    """Base class for fixed-point format errors."""


class UnsupportedWidthError(FixedPointError, ValueError):
    """Raised when a total bit width has no registered width trait."""

    def __init__(self, bits, supported):
        super().__init__(f"Unsupported bit width {bits}. Supported widths are {', '.join(map(str, supported))}.")
        self.bits = bits
        self.supported = tuple(supported)


class PrecisionError(FixedPointError, ValueError):
    """Raised when the fractional bit count leaves no integer bit for the sign."""

    def __init__(self, bits, precision):
        super().__init__(f"Precision {precision} is invalid for a {bits}-bit format (expected 0 <= precision < {bits}).")
        self.bits = bits
        self.precision = precision
