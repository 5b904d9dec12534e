"""Bidirectional dictionary backed by two synchronized dicts.

Holds both per-locale vocabularies (decorated token <-> spelling) and
user-supplied name overrides (source name <-> destination name).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

__all__ = ["BidirectionalMap"]


class BidirectionalMap[K, V]:
    """Finite mapping that can be queried by key or by value.

    Keys map to values through the forward dict; values map back to keys
    through the reverse dict. Both must hold hashable items.

    Construction is last-write-wins: a repeated key keeps its later value,
    and a repeated value answers its later key when looked up in reverse.
    Locale inheritance relies on this to let overrides replace inherited
    entries.

    Lookups never raise on a miss and never mutate state, so one instance
    can be shared by concurrent readers.

    Example:
        >>> bmap = BidirectionalMap([("$GBS_COMMAND_DROP$", "Poner")])
        >>> bmap.get_by_key("$GBS_COMMAND_DROP$")
        'Poner'
        >>> bmap.get_by_value("Poner")
        '$GBS_COMMAND_DROP$'
        >>> bmap.get_by_value("Drop") is None
        True
    """

    __slots__ = ("_forward", "_reverse")

    def __init__(self, pairs: Iterable[tuple[K, V]] | Mapping[K, V] = ()) -> None:
        """Build both directions from pairs (or a mapping's items).

        Args:
            pairs: Ordered (key, value) pairs, or a mapping
        """
        self._forward: dict[K, V] = {}
        self._reverse: dict[V, K] = {}
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for key, value in items:
            self.set_by_key(key, value)

    def has_key(self, key: K) -> bool:
        """Return True if key is present in the forward direction."""
        return key in self._forward

    def has_value(self, value: V) -> bool:
        """Return True if value is present in the reverse direction."""
        return value in self._reverse

    def get_by_key(self, key: K, default: V | None = None) -> V | None:
        """Return the value associated with key, or default if absent."""
        return self._forward.get(key, default)

    def get_by_value(self, value: V, default: K | None = None) -> K | None:
        """Return the key associated with value, or default if absent."""
        return self._reverse.get(value, default)

    def set_by_key(self, key: K, value: V) -> None:
        """Associate key with value, updating both directions.

        The reverse entry of the value key previously held is dropped, so
        a lookup by that stale value no longer answers key. Other keys that
        share value keep their forward entries; the reverse direction
        answers the most recent one.
        """
        if key in self._forward:
            previous = self._forward[key]
            if self._reverse.get(previous) == key:
                del self._reverse[previous]
        self._forward[key] = value
        self._reverse[value] = key

    def set_by_value(self, value: V, key: K) -> None:
        """Associate value with key, updating both directions.

        Mirror image of set_by_key: the forward entry of the key value
        previously answered is dropped, and so is the reverse entry of the
        value key previously held.
        """
        if key in self._forward:
            old = self._forward[key]
            if self._reverse.get(old) == key:
                del self._reverse[old]
        if value in self._reverse:
            previous = self._reverse[value]
            if self._forward.get(previous) == value:
                del self._forward[previous]
        self._reverse[value] = key
        self._forward[key] = value

    def by_keys(self) -> Mapping[K, V]:
        """Read-only view keyed by keys, in insertion order."""
        return MappingProxyType(self._forward)

    def by_values(self) -> Mapping[V, K]:
        """Read-only view keyed by values, in insertion order."""
        return MappingProxyType(self._reverse)

    def items(self) -> Iterator[tuple[K, V]]:
        """Iterate (key, value) pairs in insertion order."""
        return iter(self._forward.items())

    def copy(self) -> "BidirectionalMap[K, V]":
        """Return an independent copy holding the same two directions."""
        clone: BidirectionalMap[K, V] = BidirectionalMap()
        clone._forward = dict(self._forward)
        clone._reverse = dict(self._reverse)
        return clone

    def __contains__(self, key: object) -> bool:
        return key in self._forward

    def __iter__(self) -> Iterator[K]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BidirectionalMap):
            return NotImplemented
        return self._forward == other._forward

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BidirectionalMap({list(self._forward.items())!r})"
