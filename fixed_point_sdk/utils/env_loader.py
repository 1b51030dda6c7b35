"""Read fixed-point format settings from a .env file."""

import logging
from typing import Dict, Iterable

from ..constants import ENV_BITS_KEY, ENV_PRECISION_KEY

logger = logging.getLogger(__name__)

FORMAT_KEYS = (ENV_BITS_KEY, ENV_PRECISION_KEY)


def read_format_env_file(env_path: str = ".env", keys: Iterable[str] = FORMAT_KEYS) -> Dict[str, str]:
    """Return the format settings found in a .env file.

    Only `KEY=value` lines whose key is in `keys` are kept; quotes around the
    value are dropped. The process environment is left untouched.

    A missing or unreadable file is logged as a warning and yields an empty dict.
    """
    wanted = set(keys)
    found: Dict[str, str] = {}
    try:
        with open(env_path, "r", encoding="utf-8") as f:
            for line in f:
                entry = line.strip()
                if entry.startswith("#") or "=" not in entry:
                    continue
                key, value = (part.strip() for part in entry.split("=", 1))
                if key in wanted:
                    found[key] = value.strip("'\"")
    except FileNotFoundError:
        logger.warning(f"Format file {env_path} not found. Using the process environment and defaults.")
        return {}
    except OSError as e:
        logger.warning(f"Could not read format file {env_path}: {e}")
        return {}

    if found:
        logger.info(f"Read {', '.join(sorted(found))} from {env_path}")
    return found
