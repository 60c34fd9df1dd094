from __future__ import annotations

from typing import Any


class CollectionException(Exception):
    """Base exception for Collection"""
    pass


class ItemNotFoundException(CollectionException, KeyError):
    """Exception raised when an index read targets an absent key"""

    def __init__(self, key: Any) -> None:
        self.key = key

        super().__init__(f"Undefined collection key `{key!r}`.")

    def __str__(self) -> str:
        return str(self.args[0])


class NotInvocableException(CollectionException, TypeError):
    """Exception raised when a callback is not callable"""

    def __init__(self, callback: Any) -> None:
        self.callback = callback

        super().__init__(
            f"Expected a callable, got `{type(callback).__name__}`."
        )


class IllegalOffsetException(CollectionException, TypeError):
    """Exception raised when a key cannot be used as an array offset"""

    def __init__(self, key: Any) -> None:
        self.key = key

        super().__init__(f"Illegal offset type `{type(key).__name__}`.")
