"""Supported on-disk formats and the encoders behind them."""

from __future__ import annotations

import json
import tomllib
from enum import StrEnum
from typing import Any, Callable

import tomli_w
import yaml
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from . import conf
from .errors import EncodingError


class SaveFormat(StrEnum):
    """How a record is encoded on disk. Each value is the file extension."""

    JSON = "json"
    YAML = "yaml"
    TOML = "toml"

    @classmethod
    def default(cls) -> SaveFormat:
        return cls.TOML

    @property
    def label(self) -> str:
        """Upper-case name used in error messages (``JSON``, ``YAML``, ``TOML``)."""
        return self.name

    def as_ext(self) -> str:
        return self.value


# -- Encoders / decoders (plain data <-> text) --

def _dump_json(data: Any) -> str:
    return json.dumps(data, indent=conf.JSON_INDENT, ensure_ascii=False) + "\n"


def _dump_yaml(data: Any) -> str:
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def _dump_toml(data: Any) -> str:
    if not isinstance(data, dict):
        raise TypeError(f"TOML documents must be tables, got {type(data).__name__}")
    return tomli_w.dumps(data, multiline_strings=True)


_DUMPERS: dict[SaveFormat, Callable[[Any], str]] = {
    SaveFormat.JSON: _dump_json,
    SaveFormat.YAML: _dump_yaml,
    SaveFormat.TOML: _dump_toml,
}

_LOADERS: dict[SaveFormat, Callable[[str], Any]] = {
    SaveFormat.JSON: json.loads,
    SaveFormat.YAML: yaml.safe_load,
    SaveFormat.TOML: tomllib.loads,
}

# Errors each parser raises on malformed input.
_PARSE_ERRORS: dict[SaveFormat, tuple[type[Exception], ...]] = {
    SaveFormat.JSON: (json.JSONDecodeError,),
    SaveFormat.YAML: (yaml.YAMLError,),
    SaveFormat.TOML: (tomllib.TOMLDecodeError,),
}


def extension_of(fmt: SaveFormat) -> str:
    """Canonical file extension for *fmt*, without the leading dot."""
    return SaveFormat(fmt).as_ext()


def to_plain(value: Any) -> Any:
    """Dump *value* to JSON-compatible builtins (dicts, lists, scalars)."""
    return TypeAdapter(type(value)).dump_python(value, mode="json")


def serialize(fmt: SaveFormat, value: Any) -> bytes:
    """Encode *value* as a complete document in *fmt*.

    Nothing touches the filesystem here; on failure an ``EncodingError`` is
    raised before any caller gets to write.
    """
    fmt = SaveFormat(fmt)
    try:
        text = _DUMPERS[fmt](to_plain(value))
    except (PydanticSerializationError, TypeError, ValueError, yaml.YAMLError) as exc:
        raise EncodingError(f"Failed to serialize data to {fmt.label}", fmt) from exc
    return text.encode(conf.ENCODING)


def deserialize(fmt: SaveFormat, data: bytes, cls: type | None = None) -> Any:
    """Decode a document in *fmt*; validate it against *cls* when given."""
    fmt = SaveFormat(fmt)
    try:
        plain = _LOADERS[fmt](data.decode(conf.ENCODING))
    except (UnicodeDecodeError, *_PARSE_ERRORS[fmt]) as exc:
        raise EncodingError(f"Failed to deserialize {fmt.label}", fmt) from exc
    if cls is None:
        return plain
    try:
        return TypeAdapter(cls).validate_python(plain)
    except ValidationError as exc:
        raise EncodingError(f"Failed to deserialize {fmt.label}", fmt) from exc
