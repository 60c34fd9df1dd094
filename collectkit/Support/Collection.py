from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple
import json

from typing_extensions import Self

from collectkit.Support.Arr import Arr
from collectkit.Support.Exceptions import ItemNotFoundException, NotInvocableException
from collectkit.Support.Types import ArrayKey, Items, T, is_arrayable, is_json_serializable
from collectkit.Utils.Logger import get_logger

logger = get_logger(__name__)


class Collection(Generic[T]):
    """Laravel-style ordered collection keyed by integers and strings."""

    def __init__(self, items: Any = None) -> None:
        self._items: Items = self._get_arrayable_items(items)
        self._next_index = Arr.next_index(self._items)

    @classmethod
    def make(cls, items: Any = None) -> Self:
        """Create a new collection instance."""
        return cls(items)

    # Mutators
    def add(self, value: T) -> Self:
        """Append an item at the next free index."""
        self._items[self._next_index] = value
        self._next_index += 1
        return self

    def put(self, key: Any, value: T) -> Self:
        """Put an item at the given key, overwriting in place."""
        key = Arr.key(key)
        self._items[key] = value
        if isinstance(key, int) and key >= self._next_index:
            self._next_index = key + 1
        return self

    def remove(self, keys: Any) -> Self:
        """Remove items by the given key(s); absent keys are ignored."""
        for key in Arr.keys(keys):
            self.offset_unset(key)
        return self

    def pop(self) -> Optional[T]:
        """Remove and return the last item."""
        if not self._items:
            return None

        key = Arr.last_key(self._items)
        value = self._items.pop(key)
        if isinstance(key, int) and key == self._next_index - 1:
            self._next_index = key
        return value

    def shift(self) -> Optional[T]:
        """Remove and return the first item, re-indexing integer keys."""
        if not self._items:
            return None

        value = self._items.pop(Arr.first_key(self._items))
        self._items = Arr.reindex(self._items)
        self._next_index = Arr.next_index(self._items)
        return value

    # Accessors
    def all(self) -> Items:
        """Get all items keyed as stored.

        The snapshot carries no next free index, so a collection built from it
        appends after the largest integer key still present.
        """
        return self._items.copy()

    def keys(self) -> List[ArrayKey]:
        """Get the keys in insertion order."""
        return list(self._items)

    def values(self) -> List[T]:
        """Get the values in insertion order."""
        return list(self._items.values())

    def count(self) -> int:
        """Get the number of items."""
        return len(self._items)

    def is_empty(self) -> bool:
        """Check if the collection is empty."""
        return not self._items

    def is_not_empty(self) -> bool:
        """Check if the collection is not empty."""
        return not self.is_empty()

    def get(self, key: Any, default: Any = None) -> Any:
        """Get an item by key, or the default when absent."""
        if self.offset_exists(key):
            return self._items[Arr.key(key)]
        return default

    def exists(self, value: Any) -> bool:
        """Check if the value is present, matching type and value."""
        return Arr.search(self._items, value) is not None

    def first(self, callback: Optional[Callable[[T], Any]] = None, default: Any = None) -> Any:
        """Get the first item, or the first one passing the callback.

        The default only applies when the collection itself is empty; a
        callback that matches nothing yields None.
        """
        if self.count() == 0:
            return default

        if callback is None:
            return self._items[Arr.first_key(self._items)]

        return self.filter(callback).first()

    def last(self, callback: Optional[Callable[[T], Any]] = None, default: Any = None) -> Any:
        """Get the last item, or the last one passing the callback."""
        if self.count() == 0:
            return default

        if callback is None:
            return self._items[Arr.last_key(self._items)]

        return self.filter(callback).last()

    # Transforming
    def filter(self, callback: Callable[[T], Any]) -> Self:
        """Get a new collection of the items passing the callback, keys kept."""
        if not callable(callback):
            logger.debug("Rejected filter callback", {"type": type(callback).__name__})
            raise NotInvocableException(callback)

        return type(self)({k: v for k, v in self._items.items() if callback(v)})

    def merge(self, items: Any) -> Self:
        """Get a new collection merging the given items into this one."""
        return type(self)(Arr.merge(self._items, self._get_arrayable_items(items)))

    # Serialization
    def to_array(self) -> Items:
        """Convert the collection and any arrayable items to plain dicts."""
        return {
            key: value.to_array() if is_arrayable(value) else value
            for key, value in self._items.items()
        }

    def json_serialize(self) -> Any:
        """Get a JSON-ready structure; a list when keys run 0..n-1."""
        data = {
            key: value.json_serialize() if is_json_serializable(value) else value
            for key, value in self._items.items()
        }
        if Arr.is_list(data):
            return list(data.values())
        return data

    def to_json(self, **options: Any) -> str:
        """Convert the collection to JSON; options go to json.dumps."""
        options.setdefault("default", self._json_default)
        return json.dumps(self.json_serialize(), **options)

    # Index access
    def offset_exists(self, key: Any) -> bool:
        """Check if the key is present."""
        return Arr.key(key) in self._items

    def offset_get(self, key: Any) -> T:
        """Get an item by key, failing when absent."""
        key = Arr.key(key)
        if key not in self._items:
            raise ItemNotFoundException(key)
        return self._items[key]

    def offset_set(self, key: Any, value: T) -> None:
        """Set an item by key, appending when the key is None."""
        if key is None:
            self.add(value)
        else:
            self.put(key, value)

    def offset_unset(self, key: Any) -> None:
        """Remove an item by key if present."""
        self._items.pop(Arr.key(key), None)

    # Magic methods
    def __iter__(self) -> Iterator[Tuple[ArrayKey, T]]:
        """Iterate over a snapshot of (key, value) pairs."""
        return iter(list(self._items.items()))

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: Any) -> bool:
        return self.offset_exists(key)

    def __getitem__(self, key: Any) -> T:
        return self.offset_get(key)

    def __setitem__(self, key: Any, value: T) -> None:
        self.offset_set(key, value)

    def __delitem__(self, key: Any) -> None:
        self.offset_unset(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def __str__(self) -> str:
        return self.to_json()

    # Helper methods
    @staticmethod
    def _json_default(value: Any) -> Any:
        """Encode values json.dumps cannot handle natively."""
        if is_json_serializable(value):
            return value.json_serialize()
        if hasattr(value, "__dict__"):
            return {k: v for k, v in vars(value).items() if not k.startswith("_")}
        return str(value)

    def _get_arrayable_items(self, items: Any) -> Items:
        """Normalize the given source into keyed items."""
        if items is None:
            return {}
        if Arr.accessible(items):
            return Arr.from_mapping(items)
        if isinstance(items, Collection):
            return items.all()
        if is_arrayable(items):
            return Arr.wrap(items.to_array())
        if is_json_serializable(items):
            return Arr.wrap(items.json_serialize())
        if isinstance(items, Iterable) and not isinstance(items, (str, bytes)):
            return Arr.from_iterable(items)

        logger.debug("Wrapping single value in collection", {"type": type(items).__name__})
        return {0: items}


def collect(items: Any = None) -> Collection[Any]:
    """Create a collection instance."""
    return Collection.make(items)
