"""Environment-driven settings (.env supported)."""

import logging
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def _get_level(name: str, default: str) -> str:
    level = os.getenv(name, default).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got {level!r}")
    return level


# Default number of random bytes for random_hex() (16 bytes -> 32 hex chars)
RANDOM_BYTES = _get_int("CRYPTOKIT_RANDOM_BYTES", 16)

# Logging level used by the command-line front end
LOG_LEVEL = _get_level("CRYPTOKIT_LOG_LEVEL", "WARNING")
