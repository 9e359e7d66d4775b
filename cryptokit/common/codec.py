"""JSON value <-> base64 text codec."""

import json
import logging
from typing import Union

from pydantic import JsonValue, ValidationError

from cryptokit.common.errors import ParseError, SerializationError
from cryptokit.common.models import json_value_adapter
from cryptokit.common.utils import b64d, b64e

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name!r}")


def _check_json_value(value: JsonValue):
    """Validate value against the JSON data model.

    The pydantic recursion guard also trips on deep acyclic values, so
    recursion_loop errors are left for json.dumps to settle.
    """
    try:
        json_value_adapter.validate_python(value, strict=True)
    except ValidationError as exc:
        if any(err["type"] != "recursion_loop" for err in exc.errors()):
            raise
        logger.debug("Deferring cycle check for deeply nested %s", type(value).__name__)


def to_json(value: JsonValue) -> str:
    """
    Serialize a JSON value to compact JSON text.

    Keys keep their insertion order; non-ASCII characters are emitted as-is.

    Args:
        value: Null, bool, number, string, list or str-keyed dict

    Returns:
        JSON text, e.g. '{"a":1}'

    Raises:
        SerializationError: If the value (or anything inside it) is not
            representable as JSON, including NaN/Infinity, cycles and
            strings that cannot be encoded as UTF-8
    """
    try:
        _check_json_value(value)
        text = json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
        # Lone surrogates survive dumps but have no UTF-8 form
        text.encode("utf-8")
        return text
    except (ValidationError, TypeError, ValueError, RecursionError) as exc:
        logger.debug("Rejected non-JSON value of type %s: %s", type(value).__name__, exc)
        raise SerializationError(f"value is not JSON-representable: {exc}") from exc


def from_json(data: bytes) -> JsonValue:
    """
    Parse UTF-8 encoded JSON text.

    Raises:
        ParseError: If the bytes are not valid UTF-8 JSON
    """
    try:
        return json.loads(data.decode("utf-8"), parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError) as exc:
        logger.debug("Rejected %d bytes of non-JSON input: %s", len(data), exc)
        raise ParseError(f"decoded bytes are not valid JSON: {exc}") from exc


def encode_base64(value: JsonValue) -> str:
    """
    Encode a JSON value as base64 text.

    The value is serialized with to_json() and the UTF-8 bytes are
    base64 encoded (standard alphabet, padded).

    Args:
        value: Any JSON-representable value

    Returns:
        Base64 encoded JSON text

    Raises:
        SerializationError: If the value is not JSON-representable
    """
    return b64e(to_json(value).encode("utf-8"))


def decode_base64(text: Union[str, bytes]) -> JsonValue:
    """
    Decode base64 text produced by encode_base64() back into a value.

    Args:
        text: Base64 encoded JSON text

    Returns:
        The reconstructed JSON value

    Raises:
        DecodeError: If the text is not valid base64
        ParseError: If the decoded bytes are not valid JSON
    """
    return from_json(b64d(text))
