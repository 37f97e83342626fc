"""Typed extra fields attached to log records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class FieldType(IntEnum):
    """Kind of value a log field holds."""

    UNKNOWN = 0
    BOOL = 1
    INT64 = 2
    FLOAT64 = 3
    STRING = 4
    OBJECT = 5


@dataclass(frozen=True)
class Field:
    """A named, typed value to be recorded with a log entry."""

    name: str
    type: FieldType
    value: Any


def bool_field(name: str, value: bool) -> Field:
    """Create a field holding a boolean."""
    return Field(name, FieldType.BOOL, bool(value))


def int64_field(name: str, value: int) -> Field:
    """Create a field holding an integer."""
    return Field(name, FieldType.INT64, int(value))


def float64_field(name: str, value: float) -> Field:
    """Create a field holding a float."""
    return Field(name, FieldType.FLOAT64, float(value))


def string_field(name: str, value: str) -> Field:
    """Create a field holding a string."""
    return Field(name, FieldType.STRING, str(value))


def object_field(name: str, value: Any) -> Field:
    """Create a field holding an arbitrary object."""
    return Field(name, FieldType.OBJECT, value)