# SPDX-License-Identifier: Apache-2.0
#
# Unless explicitly stated otherwise all files in this repository are licensed under the Apache License Version 2.0.
#
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2026-present Datadog, Inc.

"""Helpers shared by the model records to read and write JSON payloads.

Absent keys and JSON null both decode to None. Empty values such as [] or ""
are kept as they are, so an empty list never collapses into "unknown".
JSON arrays decode to tuples and objects used as maps to read-only mappings,
so decoded records cannot be changed after the fact.
On the way out, None fields are dropped instead of written as null.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Optional, TypeVar

from clearlydefined_client.exceptions import SchemaError

T = TypeVar("T")


def expect_object(data: Any, record: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise SchemaError(record, "", "not a JSON object")
    return data


def required(data: dict[str, Any], record: str, key: str) -> Any:
    if data.get(key) is None:
        raise SchemaError(record, key)
    return data[key]


def required_int(data: dict[str, Any], record: str, key: str) -> int:
    value = required(data, record, key)
    # bool is a subclass of int but never a valid score
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(record, key, "not an integer")
    return value


def required_str(data: dict[str, Any], record: str, key: str) -> str:
    value = required(data, record, key)
    if not isinstance(value, str):
        raise SchemaError(record, key, "not a string")
    return value


def optional(
    data: dict[str, Any], key: str, decode: Optional[Callable[[Any], T]] = None
) -> Any:
    value = data.get(key)
    if value is None:
        return None
    if decode is None:
        return value
    return decode(value)


def optional_tuple(
    data: dict[str, Any],
    record: str,
    key: str,
    decode: Optional[Callable[[Any], T]] = None,
) -> Optional[tuple[Any, ...]]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise SchemaError(record, key, "not a list")
    if decode is None:
        return tuple(value)
    return tuple(decode(item) for item in value)


def required_tuple(
    data: dict[str, Any],
    record: str,
    key: str,
    decode: Optional[Callable[[Any], T]] = None,
) -> tuple[Any, ...]:
    required(data, record, key)
    value = optional_tuple(data, record, key, decode)
    return value if value is not None else ()


def freeze(record: Any, *names: str) -> None:
    """Swap list and dict fields of a frozen record for read-only copies."""
    for name in names:
        value = getattr(record, name)
        if isinstance(value, list):
            object.__setattr__(record, name, tuple(value))
        elif isinstance(value, set):
            object.__setattr__(record, name, frozenset(value))
        elif isinstance(value, dict):
            object.__setattr__(record, name, MappingProxyType(dict(value)))


def encode(value: Any) -> Any:
    """Turn a model value into plain JSON types."""
    if value is None:
        return None
    if hasattr(value, "to_json"):
        return value.to_json()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [encode(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return sorted(encode(item) for item in value)
    if isinstance(value, Mapping):
        return {str(key): encode(item) for key, item in value.items()}
    return value


def sparse(**fields: Any) -> dict[str, Any]:
    """Build a JSON object leaving out every field that is None."""
    return {key: encode(value) for key, value in fields.items() if value is not None}
