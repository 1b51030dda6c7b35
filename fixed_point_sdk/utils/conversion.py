from decimal import Decimal, localcontext

# A binary fraction raw / 2**P is exactly raw * 5**P / 10**P, so every
# fixed-point value has a finite decimal expansion with P places.


def to_decimal(value) -> Decimal:
    """Convert a fixed-point value to the exact Python Decimal it represents.

    Works on any object with `raw` and `PRECISION` attributes, which is how
    every FixedPoint format exposes its stored bits.
    """
    precision = value.PRECISION
    numerator = value.raw * 5**precision
    with localcontext() as ctx:
        # Enough significant digits that scaleb never rounds
        ctx.prec = len(str(abs(numerator))) + 1
        return Decimal(numerator).scaleb(-precision)


def to_float(value) -> float:
    """Convert a fixed-point value to the nearest float."""
    return value.raw / (1 << value.PRECISION)


def format_fixed_for_display(value, display_decimals: int = 6) -> str:
    """Format a fixed-point value for human-readable display with specified precision.

    Args:
        value: The fixed-point value.
        display_decimals: The number of decimal places to show in the output string.
    """
    decimal_value = to_decimal(value)
    # Ensure the output string has the correct number of decimal places,
    # even if they are trailing zeros.
    return f"{decimal_value:.{display_decimals}f}"
