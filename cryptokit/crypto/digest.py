"""MD5 and SHA-256 hex digests of text or bytes."""

from typing import Union

from cryptography.hazmat.primitives import hashes

from cryptokit.common.utils import to_bytes


def _hexdigest(algorithm: hashes.HashAlgorithm, data: bytes) -> str:
    digest = hashes.Hash(algorithm)
    digest.update(data)
    return digest.finalize().hex()


def md5_hex(data: Union[bytes, str]) -> str:
    """
    Compute MD5 hash of data and return as hexadecimal string.

    MD5 is broken for collision resistance. It is kept for compatibility
    with existing identifiers and checksums, not for integrity or security.

    Args:
        data: Data to hash (str is encoded as UTF-8)

    Returns:
        MD5 hash as 32-character lowercase hexadecimal string
    """
    return _hexdigest(hashes.MD5(), to_bytes(data))


def sha256_hex(data: Union[bytes, str]) -> str:
    """
    Compute SHA-256 hash of data and return as hexadecimal string.

    Args:
        data: Data to hash (str is encoded as UTF-8)

    Returns:
        SHA-256 hash as 64-character lowercase hexadecimal string
    """
    return _hexdigest(hashes.SHA256(), to_bytes(data))
