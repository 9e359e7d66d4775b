"""Secure random hex strings."""

import logging
import secrets
from typing import Callable, Optional

from cryptokit import config
from cryptokit.common.errors import RandomSourceError

logger = logging.getLogger(__name__)

RandomBytes = Callable[[int], bytes]


def random_hex(byte_count: Optional[int] = None, randbytes: Optional[RandomBytes] = None) -> str:
    """
    Generate a lowercase hex string from cryptographically secure random bytes.

    Args:
        byte_count: Number of random bytes to draw; the result has twice as
            many characters. Defaults to config.RANDOM_BYTES.
        randbytes: Byte source taking a count and returning that many bytes.
            Defaults to secrets.token_bytes (the OS CSPRNG).

    Returns:
        Hex string of length 2 * byte_count using only 0-9a-f

    Raises:
        TypeError: If byte_count is not an integer
        ValueError: If byte_count is negative
        RandomSourceError: If the byte source is unavailable or misbehaves
    """
    if byte_count is None:
        byte_count = config.RANDOM_BYTES
    if isinstance(byte_count, bool) or not isinstance(byte_count, int):
        raise TypeError(f"byte_count must be an int, got {type(byte_count).__name__}")
    if byte_count < 0:
        raise ValueError(f"byte_count must be non-negative, got {byte_count}")

    source = randbytes or secrets.token_bytes
    try:
        buf = source(byte_count)
    except (OSError, NotImplementedError) as exc:
        logger.debug("Random source failed for %d bytes: %s", byte_count, exc)
        raise RandomSourceError(f"secure random source unavailable: {exc}") from exc

    if len(buf) != byte_count:
        raise RandomSourceError(
            f"random source returned {len(buf)} bytes, expected {byte_count}"
        )
    return bytes(buf).hex()
