"""Settings read from the environment at import time."""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_flag(env_var: str, raw_value: Optional[str], default: bool) -> bool:
    """Interpret an on/off environment variable. Falls back to the default on anything unrecognised."""
    if raw_value is None or not raw_value.strip():
        return default

    value = raw_value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False

    logger.warning(
        "%s is not a valid flag (got %r); defaulting to %s", env_var, raw_value, default
    )
    return default


# Reject pins outside 0-10, or more pins than are standing, when rolling.
STRICT_PIN_VALIDATION = parse_flag(
    "BOWLING_STRICT_PINS", os.getenv("BOWLING_STRICT_PINS"), default=True
)
