"""
Collection Type System

Shared typing for the collection package:
- Array key and item aliases
- Protocol-based capabilities (Arrayable, JsonSerializable)
- Type guards for capability detection
"""

from __future__ import annotations

from typing import (
    Any,
    Dict,
    Protocol,
    TypeGuard,
    TypeVar,
    Union,
    runtime_checkable,
)

T = TypeVar("T")

ArrayKey = Union[int, str]
Items = Dict[ArrayKey, Any]


@runtime_checkable
class Arrayable(Protocol):
    """Protocol for objects that can be converted to a plain structure."""

    def to_array(self) -> Any:
        """Convert to array representation."""
        ...


@runtime_checkable
class JsonSerializable(Protocol):
    """Protocol for objects that expose a JSON-ready structure."""

    def json_serialize(self) -> Any:
        """Get data which should be serialized to JSON."""
        ...


def is_arrayable(obj: Any) -> TypeGuard[Arrayable]:
    """Type guard to check if object implements Arrayable protocol."""
    return hasattr(obj, "to_array") and callable(obj.to_array)


def is_json_serializable(obj: Any) -> TypeGuard[JsonSerializable]:
    """Type guard to check if object implements JsonSerializable protocol."""
    return hasattr(obj, "json_serialize") and callable(obj.json_serialize)
