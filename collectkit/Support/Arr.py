from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
import math
import re

from collectkit.Support.Exceptions import IllegalOffsetException
from collectkit.Support.Types import ArrayKey, Items

_INTEGER_KEY = re.compile(r"0|-?[1-9][0-9]*")

_SCALAR_TYPES = (type(None), bool, int, float, str, bytes)


class Arr:
    """Laravel-style array helper class with native array key semantics."""

    @staticmethod
    def key(key: Any) -> ArrayKey:
        """Cast a key the way native arrays do."""
        if key is None:
            return ''
        if isinstance(key, bool):
            return int(key)
        if isinstance(key, int):
            return key
        if isinstance(key, float):
            if not math.isfinite(key):
                raise IllegalOffsetException(key)
            return int(key)
        if isinstance(key, str):
            if _INTEGER_KEY.fullmatch(key):
                return int(key)
            return key

        raise IllegalOffsetException(key)

    @staticmethod
    def keys(keys: Any) -> List[ArrayKey]:
        """Cast one key or a list of keys."""
        if keys is None:
            return []
        if isinstance(keys, (list, tuple, set, frozenset)):
            return [Arr.key(k) for k in keys]
        return [Arr.key(keys)]

    @staticmethod
    def accessible(value: Any) -> bool:
        """Check if the value is a native ordered mapping."""
        return isinstance(value, Mapping)

    @staticmethod
    def from_mapping(data: Mapping[Any, Any]) -> Items:
        """Copy a mapping, casting its top-level keys.

        Nested dicts are kept as given; their keys are not cast.
        """
        return {Arr.key(k): v for k, v in data.items()}

    @staticmethod
    def from_iterable(data: Iterable[Any]) -> Items:
        """Drain an iterable into sequentially keyed items."""
        return dict(enumerate(data))

    @staticmethod
    def wrap(value: Any) -> Items:
        """Turn a plain value into items, wrapping scalars."""
        if value is None:
            return {}
        if Arr.accessible(value):
            return Arr.from_mapping(value)
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            return Arr.from_iterable(value)
        return {0: value}

    @staticmethod
    def is_list(data: Mapping[ArrayKey, Any]) -> bool:
        """Determine if the keys are exactly 0..n-1 in order."""
        for expected, key in enumerate(data):
            if key != expected:
                return False
        return True

    @staticmethod
    def next_index(data: Mapping[ArrayKey, Any]) -> int:
        """Get the index an append would use."""
        indices = [k for k in data if isinstance(k, int)]
        if not indices:
            return 0
        return max(max(indices) + 1, 0)

    @staticmethod
    def merge(*arrays: Mapping[ArrayKey, Any]) -> Items:
        """Merge arrays, renumbering integer keys and overwriting string keys."""
        result: Items = {}
        index = 0

        for data in arrays:
            for key, value in data.items():
                if isinstance(key, int):
                    result[index] = value
                    index += 1
                else:
                    result[key] = value

        return result

    @staticmethod
    def reindex(data: Mapping[ArrayKey, Any]) -> Items:
        """Renumber integer keys from zero, keeping string keys."""
        return Arr.merge(data)

    @staticmethod
    def strict_equals(left: Any, right: Any) -> bool:
        """Compare two values requiring both type and value to match."""
        if type(left) is not type(right):
            return False

        if isinstance(left, _SCALAR_TYPES):
            return bool(left == right)

        if isinstance(left, (list, tuple)):
            return len(left) == len(right) and all(
                Arr.strict_equals(a, b) for a, b in zip(left, right)
            )

        if isinstance(left, dict):
            if list(left) != list(right):
                return False
            return all(Arr.strict_equals(left[k], right[k]) for k in left)

        return left is right

    @staticmethod
    def search(data: Mapping[ArrayKey, Any], value: Any) -> Optional[ArrayKey]:
        """Find the first key holding a strictly equal value."""
        for key, item in data.items():
            if Arr.strict_equals(item, value):
                return key
        return None

    @staticmethod
    def first_key(data: Mapping[ArrayKey, Any]) -> Union[ArrayKey, None]:
        """Get the first key of the array."""
        return next(iter(data), None)

    @staticmethod
    def last_key(data: Dict[ArrayKey, Any]) -> Union[ArrayKey, None]:
        """Get the last key of the array."""
        return next(reversed(data), None)
