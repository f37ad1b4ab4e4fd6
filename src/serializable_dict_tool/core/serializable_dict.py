"""
Serializable dictionary backed by parallel key/value lists.

Unity cannot serialize associative containers, so a dictionary field is
persisted as two positionally paired lists (``keys`` and ``values``). This
module keeps those lists and a lookup dict in sync.
"""

import logging
from collections.abc import Iterable, Iterator, MutableMapping
from typing import Any, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class KeyNotFoundError(KeyError):
    """Raised when looking up a key that is not in the dictionary."""

    def __init__(self, key: Any):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key {self.key!r} not found in SerializableDictionary."


class SerializableDictionary(MutableMapping, Generic[K, V]):
    """
    Ordered dictionary with a flat two-list persisted form.

    The lookup dict and the parallel ``keys``/``values`` lists always agree:
    every key appears exactly once in the lists, at the position it was first
    added (or restored) at, with the same value as in the lookup dict.

    Snapshot order is first-add order, or the order of the last restore.
    Overwriting an existing key keeps its position.

    Not safe for concurrent mutation. Callers sharing an instance across
    threads must provide their own locking around set/remove/restore.
    """

    def __init__(
        self,
        keys: Optional[Iterable[K]] = None,
        values: Optional[Iterable[V]] = None,
    ):
        self._keys: list[K] = []
        self._values: list[V] = []
        self._index: dict[K, V] = {}
        if keys is not None or values is not None:
            self.restore(keys, values)

    @classmethod
    def from_snapshot(
        cls,
        keys: Optional[Iterable[K]],
        values: Optional[Iterable[V]],
    ) -> "SerializableDictionary[K, V]":
        """Build a dictionary from a persisted key/value snapshot."""
        store = cls()
        store.restore(keys, values)
        return store

    # === Lookup ===

    def __getitem__(self, key: K) -> V:
        try:
            return self._index[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def get_value(self, key: K) -> V:
        """Get the value for ``key``, raising KeyNotFoundError if absent."""
        return self[key]

    def try_get(self, key: K, default: Optional[V] = None) -> tuple[Optional[V], bool]:
        """
        Non-raising lookup.

        Returns:
            Tuple of (value, True) if found, otherwise (default, False)
        """
        if key in self._index:
            return self._index[key], True
        return default, False

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._keys))

    def entries(self) -> tuple[tuple[K, V], ...]:
        """Return the (key, value) pairs in persisted order."""
        return tuple(zip(self._keys, self._values))

    # === Mutation ===

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def set(self, key: K, value: V) -> None:
        """Set ``key`` to ``value``, adding it if absent."""
        if key not in self._index:
            self.add(key, value)
            return

        position = self._keys.index(key)
        self._values[position] = value
        self._index[key] = value

    def add(self, key: K, value: V) -> None:
        """
        Add ``key`` if it is not present yet.

        An existing key is left untouched; use set() to overwrite.
        """
        if key in self._index:
            return
        self._index[key] = value
        self._keys.append(key)
        self._values.append(value)

    def remove(self, key: K) -> bool:
        """
        Remove ``key``.

        Returns:
            True if the key was present and removed, False otherwise
        """
        if key not in self._index:
            return False
        position = self._keys.index(key)
        del self._keys[position]
        del self._values[position]
        del self._index[key]
        return True

    def __delitem__(self, key: K) -> None:
        if not self.remove(key):
            raise KeyNotFoundError(key)

    def clear(self) -> None:
        self._keys.clear()
        self._values.clear()
        self._index.clear()

    # === Persistence ===

    def snapshot(self) -> tuple[list[K], list[V]]:
        """
        Produce the flat representation to hand to a serializer.

        Returns:
            Tuple of (keys, values) as new lists in persisted order
        """
        return list(self._keys), list(self._values)

    def restore(
        self,
        keys: Optional[Iterable[K]],
        values: Optional[Iterable[V]],
    ) -> None:
        """
        Rebuild the dictionary from a persisted snapshot.

        Missing lists count as empty. Pairs beyond the shorter list are
        ignored and only the first occurrence of a repeated key is kept.
        """
        key_list = list(keys) if keys is not None else []
        value_list = list(values) if values is not None else []

        self.clear()
        for key, value in zip(key_list, value_list):
            self.add(key, value)

        dropped = min(len(key_list), len(value_list)) - len(self._keys)
        if dropped or len(key_list) != len(value_list):
            logger.debug(
                "Restored %d entries (keys=%d, values=%d, duplicates dropped=%d)",
                len(self._keys), len(key_list), len(value_list), dropped,
            )

    # === Misc ===

    def copy(self) -> "SerializableDictionary[K, V]":
        return type(self).from_snapshot(*self.snapshot())

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in zip(self._keys, self._values))
        return f"SerializableDictionary({{{pairs}}})"
