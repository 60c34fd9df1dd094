from __future__ import annotations

from .Support import (
    Arr,
    Arrayable,
    Collection,
    CollectionException,
    IllegalOffsetException,
    ItemNotFoundException,
    JsonSerializable,
    NotInvocableException,
    collect,
)

__version__ = "1.0.0"

__all__ = [
    "Arr",
    "Arrayable",
    "Collection",
    "CollectionException",
    "IllegalOffsetException",
    "ItemNotFoundException",
    "JsonSerializable",
    "NotInvocableException",
    "collect",
]
