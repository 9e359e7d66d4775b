"""Error taxonomy: random source, serialization, base64 decode, JSON parse."""


class CryptoKitError(Exception):
    """Base class for all errors raised by cryptokit."""
    pass


class RandomSourceError(CryptoKitError):
    """Exception raised when the secure random source cannot supply bytes."""
    pass


class SerializationError(CryptoKitError):
    """Exception raised when a value cannot be represented as JSON."""
    pass


class DecodeError(CryptoKitError):
    """Exception raised when text is not valid standard base64."""
    pass


class ParseError(CryptoKitError):
    """Exception raised when decoded bytes are not valid JSON text."""
    pass
