"""Integer helpers for the decimal-fraction constructor."""


def decimal_digit_count(x: int) -> int:
    """Return the number of base-10 digits in a non-negative integer.

    Zero has no digits, so `decimal_digit_count(0) == 0`.
    """
    n = 0
    while x > 0:
        n += 1
        x //= 10
    return n


def integer_pow(base: int, exponent: int) -> int:
    """Raise `base` to `exponent` by repeated multiplication.

    A zero or negative exponent yields 1.
    """
    result = 1
    while exponent > 0:
        result *= base
        exponent -= 1
    return result


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero, like a native integer divide.

    Raises ZeroDivisionError when `denominator` is zero.
    """
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient
