from .Arr import Arr
from .Collection import Collection, collect
from .Exceptions import (
    CollectionException,
    IllegalOffsetException,
    ItemNotFoundException,
    NotInvocableException,
)
from .Types import Arrayable, JsonSerializable

__all__ = [
    "Arr",
    "Collection",
    "collect",
    "CollectionException",
    "IllegalOffsetException",
    "ItemNotFoundException",
    "NotInvocableException",
    "Arrayable",
    "JsonSerializable",
]
