"""Serialization utilities."""

from __future__ import annotations

import re
from dataclasses import asdict, fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_camel(name: str) -> str:
    """snake_case -> camelCase."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_snake(name: str) -> str:
    """camelCase -> snake_case."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _convert(value: Any, drop_none: bool) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {
            to_camel(k): _convert(v, drop_none)
            for k, v in value.items()
            if not (drop_none and v is None)
        }
    if isinstance(value, (list, tuple)):
        return [_convert(v, drop_none) for v in value]
    return value


def serialize_dataclass(obj, drop_none: bool = True) -> dict:
    """Serialize a dataclass to a camelCase dict for the on-disk JSON artifacts.

    Datetimes become ISO strings, enums their values, and nested dataclasses
    are serialized recursively. Fields set to None are omitted unless
    `drop_none` is False.
    """
    return _convert(asdict(obj), drop_none)


def deserialize_dataclass(cls: type[T], data: dict[str, Any]) -> T:
    """Build `cls` from a camelCase (or snake_case) dict, ignoring unknown keys."""
    if not is_dataclass(cls):
        raise TypeError(f"{cls!r} is not a dataclass")
    known = {f.name for f in fields(cls)}
    kwargs = {}
    for key, value in data.items():
        name = to_snake(key)
        if name in known:
            kwargs[name] = value
    return cls(**kwargs)
