import logging
import os
from typing import Optional

from ..constants import DEFAULT_BITS, DEFAULT_PRECISION, ENV_BITS_KEY, ENV_PRECISION_KEY
from ..core.errors import FixedPointError
from ..core.fixed import fixed
from .env_loader import FORMAT_KEYS, read_format_env_file

logger = logging.getLogger(__name__)


class FixedPointConfig:
    """Selects the default fixed-point format for an application.

    Each field is resolved in order: explicit argument, then the .env file at
    `env_path` (if given), then the process environment (FIXED_POINT_BITS /
    FIXED_POINT_PRECISION), then the built-in default.
    """

    def __init__(self, bits: Optional[int] = None, precision: Optional[int] = None, env_path: Optional[str] = None):
        settings = {key: os.getenv(key) for key in FORMAT_KEYS}
        if env_path is not None:
            settings.update(read_format_env_file(env_path))

        resolved_bits = bits if bits is not None else self._parse_int(ENV_BITS_KEY, settings[ENV_BITS_KEY])
        resolved_precision = (
            precision if precision is not None else self._parse_int(ENV_PRECISION_KEY, settings[ENV_PRECISION_KEY])
        )
        if resolved_bits is None:
            resolved_bits = DEFAULT_BITS
        if resolved_precision is None:
            resolved_precision = DEFAULT_PRECISION

        if self._is_valid(resolved_bits, resolved_precision):
            self.bits = resolved_bits
            self.precision = resolved_precision
        else:
            logger.warning(
                f"Format ({resolved_bits}, {resolved_precision}) is not supported. "
                f"Defaulting to ({DEFAULT_BITS}, {DEFAULT_PRECISION})."
            )
            self.bits = DEFAULT_BITS
            self.precision = DEFAULT_PRECISION

    @staticmethod
    def _parse_int(key: str, value: Optional[str]) -> Optional[int]:
        """Parse an integer setting, or None if it is unset or malformed."""
        if value is None or not value.strip():
            return None
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Ignoring {key}={value!r}: not an integer.")
            return None

    @staticmethod
    def _is_valid(bits: int, precision: int) -> bool:
        try:
            fixed(bits, precision)
        except FixedPointError:
            return False
        return True

    @property
    def format(self) -> type:
        """The FixedPoint class for the configured format."""
        return fixed(self.bits, self.precision)

    def make(self, *args):
        """Construct a value in the configured format."""
        return self.format(*args)

    def set_format(self, bits: int, precision: int):
        """Switch to a new format.

        If the pair is not a valid format, a warning is logged and the format
        is not changed.
        """
        if not self._is_valid(bits, precision):
            logger.warning(
                f"Format ({bits}, {precision}) is not supported. Format not changed from ({self.bits}, {self.precision})."
            )
            return

        if (self.bits, self.precision) == (bits, precision):
            return

        self.bits = bits
        self.precision = precision
        logger.debug(f"Switched default format to {self.format.__name__}")
