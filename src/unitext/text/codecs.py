"""Byte and value codecs used by ``Text``.

Hex and base64 come from the standard ``binascii``/``base64`` modules, JSON
from pydantic's ``TypeAdapter``. Every collaborator failure is re-raised as a
``ConversionFailed`` subclass with the original exception chained.
"""

from __future__ import annotations

import base64
import binascii
import re
from typing import Any, Optional, Type, TypeVar

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import (
    CoreSchema,
    PydanticSerializationError,
    SchemaSerializer,
    core_schema,
)

from unitext.runtime.telemetry import record_failure

from .errors import ConversionFailed, DecodeError, EncodeError

T = TypeVar("T")

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _conversion_failed(
    error_type: Type[ConversionFailed], source: str, exc: BaseException
) -> ConversionFailed:
    error = error_type(source, str(exc))
    record_failure("convert", error)
    return error


def decode_utf8(data: bytes) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise _conversion_failed(DecodeError, "utf-8", exc) from exc


def encode_utf8(value: str) -> bytes:
    """Encode ``value``; lone surrogates are not scalar values and fail."""

    try:
        return value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise _conversion_failed(ConversionFailed, "utf-8", exc) from exc


def encode_hex(data: bytes) -> bytes:
    return binascii.hexlify(data)


def decode_hex(digits: bytes) -> bytes:
    try:
        return binascii.unhexlify(digits)
    except (binascii.Error, ValueError) as exc:
        raise _conversion_failed(ConversionFailed, "hex", exc) from exc


def encode_base64(data: bytes) -> bytes:
    return base64.b64encode(data)


def decode_base64(encoded: bytes) -> bytes:
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise _conversion_failed(ConversionFailed, "base64", exc) from exc


def encode_json(value: Any, type_: Optional[Any] = None) -> bytes:
    """Serialize ``value`` to JSON bytes.

    Without ``type_`` the serializer inspects ``value`` at runtime, which
    covers builtins, dataclasses and pydantic models.
    """

    try:
        adapter: TypeAdapter[Any] = TypeAdapter(Any if type_ is None else type_)
        return adapter.dump_json(value)
    except (PydanticSerializationError, PydanticSchemaGenerationError) as exc:
        raise _conversion_failed(EncodeError, "json", exc) from exc


def decode_json(data: bytes, type_: Type[T]) -> T:
    try:
        adapter: TypeAdapter[T] = TypeAdapter(type_)
        return adapter.validate_json(data)
    except (ValidationError, PydanticSchemaGenerationError) as exc:
        raise _conversion_failed(DecodeError, "json", exc) from exc


def parse_int(value: str) -> int:
    """Strict base-10 parse: optional sign, ASCII digits, nothing else."""

    if _INTEGER.fullmatch(value) is None:
        raise _conversion_failed(
            ConversionFailed, "int", ValueError(f"invalid integer literal {value!r}")
        )
    try:
        return int(value)
    except ValueError as exc:
        # digit strings past sys.get_int_max_str_digits()
        raise _conversion_failed(ConversionFailed, "int", exc) from exc


_AS_STRING = core_schema.plain_serializer_function_ser_schema(
    lambda value: value.to_utf8_string()
)

# lets pydantic serialize text values found inside untyped containers
STRING_SERIALIZER = SchemaSerializer(core_schema.any_schema(serialization=_AS_STRING))


def string_schema(cls: Any) -> CoreSchema:
    """Core schema carrying ``cls`` through JSON as its plain string form.

    Validation always rebuilds the value from a ``str``, so offset tables and
    other internals never come from the payload.
    """

    from_str = core_schema.no_info_after_validator_function(
        cls, core_schema.str_schema()
    )
    return core_schema.json_or_python_schema(
        json_schema=from_str,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_str]
        ),
        serialization=_AS_STRING,
    )


__all__ = [
    "STRING_SERIALIZER",
    "string_schema",
    "decode_utf8",
    "encode_utf8",
    "encode_hex",
    "decode_hex",
    "encode_base64",
    "decode_base64",
    "encode_json",
    "decode_json",
    "parse_int",
]
