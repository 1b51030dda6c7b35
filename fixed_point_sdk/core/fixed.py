"""Fixed-point real numbers with a chosen storage width and fractional bit count.

A format is a FixedPoint subclass bound to a total width W (8, 16, 32 or 64)
and a precision P (0 <= P < W). Each value stores one signed W-bit integer
`raw`, read as `raw / 2**P`.

Formats are built once, either through the cached factory

    Q16 = fixed(32, 16)

or by declaring a subclass

    class Angle(FixedPoint, bits=16, precision=12):
        __slots__ = ()

Everything that depends only on (W, P) is resolved when the class is created:
the width trait, the intermediate type, and the decimal scaling constants.

Arithmetic emulates the native W-bit signed integer exactly. Overflow wraps
two's complement style, products and pre-shifted dividends are computed in the
next wider type, and division truncates toward zero. Dividing by zero raises
ZeroDivisionError.
"""

import logging
import operator
import types
from fractions import Fraction
from functools import lru_cache

from ..utils.conversion import to_decimal, to_float
from ..utils.digits import decimal_digit_count, integer_pow, trunc_div
from .errors import PrecisionError
from .widths import get_width_trait

logger = logging.getLogger(__name__)


class FixedPoint:
    """Base class for all fixed-point formats.

    Instances are immutable. Compound assignment (`a += b`) rebinds `a` to a
    new value, which keeps copies independent.

    Construction:
        Q()            -> 0
        Q(n)           -> n upscaled by P bits
        Q(i, d)        -> i + 0.d, where the digit count of `d` sets its place
                          value (9, 90 and 900 all mean .9)
        Q.from_raw(b)  -> the value whose stored bits are `b`

    The decimal scale ratio MAX_FRAC / MAX_BASE10 is held with W*2 - P - 1
    fractional bits, which is wider than P. 64-bit formats have no wider
    type, so they get 63 - P bits, fewer than P once P > 31. For Fixed64_32
    (31 bits, 9 digits) the truncation this costs stays below one raw unit;
    higher precisions lose more.

    Equality with an int holds only for ints inside the storage range, which
    keeps hash(Q(n)) == hash(n). Ordering wraps the int to W bits first.
    """

    __slots__ = ("raw",)

    BITS = None
    PRECISION = None
    TRAIT = None
    INTERMEDIATE = None

    # Decimal-fraction constants, see _fraction_to_raw
    MAX_FRAC = None
    MAX_DIGITS = None
    MAX_BASE10 = None
    SCALE_PRECISION = None
    SCALE_RAW = None

    def __init_subclass__(cls, bits=None, precision=None, **kwargs):
        super().__init_subclass__(**kwargs)
        if bits is None and precision is None:
            # Plain subclass of an existing format keeps its constants
            return

        trait = get_width_trait(bits)
        if not isinstance(precision, int) or not 0 <= precision < bits:
            raise PrecisionError(bits, precision)

        cls.BITS = bits
        cls.PRECISION = precision
        cls.TRAIT = trait
        cls.INTERMEDIATE = trait.intermediate

        cls.MAX_FRAC = (1 << precision) - 1
        cls.MAX_DIGITS = decimal_digit_count(cls.MAX_FRAC) - 1
        cls.MAX_BASE10 = integer_pow(10, cls.MAX_DIGITS) - 1
        # SCALE = MAX_FRAC / MAX_BASE10 as a fixed-point ratio in the intermediate width
        cls.SCALE_PRECISION = cls.INTERMEDIATE.bits - precision - 1
        if cls.MAX_BASE10 > 0:
            scaled_max = cls.INTERMEDIATE.signed_t.wrap(cls.MAX_FRAC << cls.SCALE_PRECISION)
            cls.SCALE_RAW = trunc_div(scaled_max, cls.MAX_BASE10)
        else:
            cls.SCALE_RAW = None
            logger.debug(f"{cls.__name__}: {precision} fractional bits hold no decimal digit; fractional digits will be ignored")

        logger.debug(
            f"Created fixed-point format {cls.__name__}: {trait.signed_t} storage, {precision} fractional bits, "
            f"{cls.INTERMEDIATE.signed_t} intermediate, {cls.MAX_DIGITS} decimal digits"
        )

    def __init__(self, integer=0, fractional_digits=None):
        cls = type(self)
        if cls.BITS is None:
            raise TypeError("FixedPoint has no storage format; create one with fixed(bits, precision)")

        signed_t = cls.TRAIT.signed_t
        raw = signed_t.wrap(signed_t.wrap(operator.index(integer)) << cls.PRECISION)
        if fractional_digits is not None:
            # The fraction is always added, even to a negative integer part
            raw = signed_t.wrap(raw + cls._fraction_to_raw(operator.index(fractional_digits)))
        object.__setattr__(self, "raw", raw)

    @classmethod
    def from_raw(cls, raw):
        """Build a value directly from its stored bits, wrapped to the storage width."""
        if cls.BITS is None:
            raise TypeError("FixedPoint has no storage format; create one with fixed(bits, precision)")
        value = object.__new__(cls)
        object.__setattr__(value, "raw", cls.TRAIT.signed_t.wrap(operator.index(raw)))
        return value

    @classmethod
    def _fraction_to_raw(cls, fractional_digits):
        """Convert base-10 fractional digits into fractional bits.

        The digits are first normalized to exactly MAX_DIGITS digits, by
        dropping the least significant ones or padding with trailing zeros.
        The result is then scaled by MAX_FRAC / MAX_BASE10.
        """
        d = cls.TRAIT.unsigned_t.wrap(fractional_digits)
        if d == 0 or cls.SCALE_RAW is None:
            return 0

        digits = decimal_digit_count(d)
        if digits > cls.MAX_DIGITS:
            d //= integer_pow(10, digits - cls.MAX_DIGITS)
        elif digits < cls.MAX_DIGITS:
            d *= integer_pow(10, cls.MAX_DIGITS - digits)
        return (d * cls.SCALE_RAW) >> cls.SCALE_PRECISION

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} values are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} values are immutable")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        # Rebuild through from_raw; slot state cannot be restored past __setattr__
        return (type(self).from_raw, (self.raw,))

    # Operand helpers

    def _same_format(self, other):
        return isinstance(other, FixedPoint) and other.BITS == self.BITS and other.PRECISION == self.PRECISION

    def _scalar(self, other):
        """Return `other` as a native W-bit signed integer, or None if it is not an int."""
        if isinstance(other, int):
            return self.TRAIT.signed_t.wrap(other)
        return None

    def _comparison_raw(self, other):
        if self._same_format(other):
            return other.raw
        n = self._scalar(other)
        if n is None:
            return None
        # Upscale in the intermediate width so the shift cannot overflow W bits
        return self.INTERMEDIATE.signed_t.wrap(n << self.PRECISION)

    # Arithmetic

    def __add__(self, other):
        if self._same_format(other):
            return self.from_raw(self.raw + other.raw)
        n = self._scalar(other)
        if n is None:
            return NotImplemented
        return self.from_raw(self.raw + (n << self.PRECISION))

    __radd__ = __add__

    def __sub__(self, other):
        if self._same_format(other):
            return self.from_raw(self.raw - other.raw)
        n = self._scalar(other)
        if n is None:
            return NotImplemented
        return self.from_raw(self.raw - (n << self.PRECISION))

    def __rsub__(self, other):
        if self._scalar(other) is None:
            return NotImplemented
        return type(self)(other) - self

    def __mul__(self, other):
        if self._same_format(other):
            product = self.INTERMEDIATE.signed_t.wrap(self.raw * other.raw)
            return self.from_raw(product >> self.PRECISION)
        n = self._scalar(other)
        if n is None:
            return NotImplemented
        # Scalar multiply scales the stored bits directly, no rescale
        return self.from_raw(self.raw * n)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if self._same_format(other):
            dividend = self.INTERMEDIATE.signed_t.wrap(self.raw << self.PRECISION)
            return self.from_raw(self.INTERMEDIATE.signed_t.wrap(trunc_div(dividend, other.raw)))
        n = self._scalar(other)
        if n is None:
            return NotImplemented
        return self.from_raw(trunc_div(self.raw, n))

    def __rtruediv__(self, other):
        if self._scalar(other) is None:
            return NotImplemented
        return type(self)(other) / self

    def __neg__(self):
        return self.from_raw(-self.raw)

    def __pos__(self):
        return self

    def __abs__(self):
        return self.from_raw(abs(self.raw))

    # Comparison

    def __eq__(self, other):
        # Ints outside the storage range never equal a value, so == agrees with hash
        if isinstance(other, int) and not self.TRAIT.signed_t.min_value <= other <= self.TRAIT.signed_t.max_value:
            return NotImplemented
        other_raw = self._comparison_raw(other)
        if other_raw is None:
            return NotImplemented
        return self.raw == other_raw

    def __lt__(self, other):
        other_raw = self._comparison_raw(other)
        if other_raw is None:
            return NotImplemented
        return self.raw < other_raw

    def __le__(self, other):
        other_raw = self._comparison_raw(other)
        if other_raw is None:
            return NotImplemented
        return self.raw <= other_raw

    def __gt__(self, other):
        other_raw = self._comparison_raw(other)
        if other_raw is None:
            return NotImplemented
        return self.raw > other_raw

    def __ge__(self, other):
        other_raw = self._comparison_raw(other)
        if other_raw is None:
            return NotImplemented
        return self.raw >= other_raw

    def __hash__(self):
        # Matches hash(n) whenever the value equals the integer n
        return hash(Fraction(self.raw, 1 << self.PRECISION))

    # Conversion

    def __int__(self):
        """Truncate toward negative infinity (arithmetic right shift)."""
        return self.raw >> self.PRECISION

    def __float__(self):
        return to_float(self)

    def __bool__(self):
        return self.raw != 0

    def __str__(self):
        text = format(to_decimal(self), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    def __repr__(self):
        return f"{type(self).__name__}(raw={self.raw}, value={self})"


@lru_cache(maxsize=None)
def _build_format(bits, precision):
    namespace = {"__slots__": (), "__module__": __name__}
    return types.new_class(
        f"Fixed{bits}_{precision}",
        (FixedPoint,),
        {"bits": bits, "precision": precision},
        lambda ns: ns.update(namespace),
    )


def fixed(bits: int, precision: int) -> type:
    """Return the FixedPoint class for a `bits`-wide format with `precision` fractional bits.

    Repeated calls with the same arguments return the same class.

    Raises:
        UnsupportedWidthError: If `bits` is not 8, 16, 32 or 64.
        PrecisionError: If `precision` is not in [0, bits).
    """
    return _build_format(bits, precision)


Fixed8_4 = fixed(8, 4)
Fixed16_8 = fixed(16, 8)
Fixed32_16 = fixed(32, 16)
Fixed64_32 = fixed(64, 32)
