"""Pydantic models: JSON value type and CLI command results."""

from enum import Enum

from pydantic import BaseModel, Field, JsonValue, TypeAdapter

# Null | Bool | Number | String | Array | Map[str, ...]
json_value_adapter = TypeAdapter(JsonValue)


class CommandName(str, Enum):
    """Commands exposed by the command-line front end."""
    RANDOM_HEX = "random-hex"
    MD5 = "md5"
    SHA256 = "sha256"
    ENCODE = "encode"
    DECODE = "decode"


class CommandResult(BaseModel):
    """Machine-readable result of a CLI command."""
    command: CommandName
    output: JsonValue = Field(default=None)  # Hex/base64 text or decoded value
