"""Base64 text encoding and bytes normalization helpers."""

import base64
import binascii
from typing import Union

from cryptokit.common.errors import DecodeError


def to_bytes(data: Union[bytes, bytearray, memoryview, str]) -> bytes:
    """
    Normalize text or binary input to bytes.

    Args:
        data: Bytes-like object, or text (encoded as UTF-8)

    Returns:
        The input as bytes
    """
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes or str, got {type(data).__name__}")


def b64e(b: bytes) -> str:
    """
    Encode bytes to base64 string.

    Args:
        b: Bytes to encode

    Returns:
        Base64 encoded string (standard alphabet, padded)
    """
    return base64.b64encode(b).decode("utf-8")


def b64d(s: Union[str, bytes]) -> bytes:
    """
    Decode base64 string to bytes.

    Only the standard alphabet with correct padding is accepted.

    Args:
        s: Base64 encoded string

    Returns:
        Decoded bytes

    Raises:
        DecodeError: If the input contains characters outside the alphabet
            or is incorrectly padded
    """
    if isinstance(s, str):
        try:
            s = s.encode("ascii")
        except UnicodeEncodeError as exc:
            raise DecodeError("base64 text must be ASCII") from exc
    try:
        return base64.b64decode(s, validate=True)
    except binascii.Error as exc:
        raise DecodeError(f"invalid base64 text: {exc}") from exc
