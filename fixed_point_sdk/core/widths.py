"""Width traits: native integer descriptors for each supported storage width.

Each supported width gets exactly one WidthTrait. A fixed-point format reads its
trait once, when the format class is created, to pick the storage type and the
wider type used for multiply and divide.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from ..constants import SUPPORTED_WIDTHS
from .errors import UnsupportedWidthError


@dataclass(frozen=True)
class IntType:
    """A native two's-complement integer type of a fixed bit width."""

    bits: int
    signed: bool
    mask: int = field(init=False, repr=False)
    min_value: int = field(init=False, repr=False)
    max_value: int = field(init=False, repr=False)

    def __post_init__(self):
        # Frozen dataclass, so derived fields go through object.__setattr__
        object.__setattr__(self, "mask", (1 << self.bits) - 1)
        if self.signed:
            object.__setattr__(self, "min_value", -(1 << (self.bits - 1)))
            object.__setattr__(self, "max_value", (1 << (self.bits - 1)) - 1)
        else:
            object.__setattr__(self, "min_value", 0)
            object.__setattr__(self, "max_value", (1 << self.bits) - 1)

    def wrap(self, value: int) -> int:
        """Reduce a Python int to this type, discarding the high bits."""
        value &= self.mask
        if self.signed and value > self.max_value:
            value -= 1 << self.bits
        return value

    def __str__(self) -> str:
        return f"{'int' if self.signed else 'uint'}{self.bits}"


@dataclass(frozen=True)
class WidthTrait:
    """Type information for one supported total bit width.

    The wider and narrower links are explicit terminals (None) at the ends
    of the supported range. Use `intermediate` to get the type that widened
    multiply and divide actually run in.
    """

    bits: int
    signed_t: IntType
    unsigned_t: IntType

    @property
    def wider(self) -> Optional["WidthTrait"]:
        """The next larger supported width, or None at 64 bits."""
        return _TRAITS.get(self.bits * 2)

    @property
    def narrower(self) -> Optional["WidthTrait"]:
        """The next smaller supported width, or None at 8 bits."""
        return _TRAITS.get(self.bits // 2)

    @property
    def intermediate(self) -> "WidthTrait":
        """The width used to hold a product or a pre-shifted dividend.

        64-bit formats have no wider tier, so they compute in 64 bits and
        wrap there.
        """
        wider = self.wider
        return wider if wider is not None else self


_TRAITS: Dict[int, WidthTrait] = {
    bits: WidthTrait(bits=bits, signed_t=IntType(bits, True), unsigned_t=IntType(bits, False))
    for bits in SUPPORTED_WIDTHS
}


def get_width_trait(bits: int) -> WidthTrait:
    """Return the registered trait for `bits`.

    Raises:
        UnsupportedWidthError: If `bits` is not one of 8, 16, 32 or 64.
    """
    try:
        return _TRAITS[bits]
    except (KeyError, TypeError):
        raise UnsupportedWidthError(bits, SUPPORTED_WIDTHS) from None
