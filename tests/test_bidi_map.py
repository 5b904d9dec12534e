"""Tests for BidirectionalMap.

Covers construction order, lookups in both directions, updates by key and
by value, and the read-only views used by the translator.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gbstranslator.core.bidi_map import BidirectionalMap

# ============================================================================
# CONSTRUCTION
# ============================================================================


class TestConstruction:
    """Building a map from pairs or from a mapping."""

    def test_empty(self) -> None:
        bmap: BidirectionalMap[str, str] = BidirectionalMap()
        assert len(bmap) == 0
        assert bmap.by_keys() == {}
        assert bmap.by_values() == {}

    def test_from_pairs(self) -> None:
        bmap = BidirectionalMap([("$A$", "uno"), ("$B$", "dos")])
        assert bmap.get_by_key("$A$") == "uno"
        assert bmap.get_by_value("dos") == "$B$"
        assert len(bmap) == 2

    def test_from_mapping(self) -> None:
        bmap = BidirectionalMap({"Poner__Veces": "Drop__Times"})
        assert bmap.get_by_key("Poner__Veces") == "Drop__Times"
        assert bmap.get_by_value("Drop__Times") == "Poner__Veces"

    def test_repeated_key_last_write_wins(self) -> None:
        """A repeated key keeps its later value; the stale value is forgotten."""
        bmap = BidirectionalMap([("k", "old"), ("k", "new")])
        assert bmap.get_by_key("k") == "new"
        assert bmap.get_by_value("new") == "k"
        assert not bmap.has_value("old")

    def test_repeated_value_reverse_answers_latest_key(self) -> None:
        """Keys sharing a value all stay; the reverse lookup answers the last."""
        bmap = BidirectionalMap([("first", "v"), ("second", "v")])
        assert bmap.get_by_key("first") == "v"
        assert bmap.get_by_key("second") == "v"
        assert bmap.get_by_value("v") == "second"

    def test_preserves_insertion_order(self) -> None:
        pairs = [("c", "3"), ("a", "1"), ("b", "2")]
        bmap = BidirectionalMap(pairs)
        assert list(bmap) == ["c", "a", "b"]
        assert list(bmap.items()) == pairs
        assert list(bmap.by_values()) == ["3", "1", "2"]


# ============================================================================
# LOOKUPS
# ============================================================================


class TestLookups:
    """Existence checks and lookups never raise on a miss."""

    def test_has_key_and_has_value(self) -> None:
        bmap = BidirectionalMap([("key", "value")])
        assert bmap.has_key("key")
        assert not bmap.has_key("value")
        assert bmap.has_value("value")
        assert not bmap.has_value("key")

    def test_missing_lookups_return_none(self) -> None:
        bmap = BidirectionalMap([("key", "value")])
        assert bmap.get_by_key("missing") is None
        assert bmap.get_by_value("missing") is None

    def test_missing_lookups_return_default(self) -> None:
        bmap: BidirectionalMap[str, str] = BidirectionalMap()
        assert bmap.get_by_key("missing", "fallback") == "fallback"
        assert bmap.get_by_value("missing", "fallback") == "fallback"

    def test_contains_checks_keys(self) -> None:
        bmap = BidirectionalMap([("key", "value")])
        assert "key" in bmap
        assert "value" not in bmap


# ============================================================================
# UPDATES
# ============================================================================


class TestUpdates:
    """set_by_key and set_by_value keep both directions in sync."""

    def test_set_by_key_adds_entry(self) -> None:
        bmap: BidirectionalMap[str, str] = BidirectionalMap()
        bmap.set_by_key("k", "v")
        assert bmap.get_by_key("k") == "v"
        assert bmap.get_by_value("v") == "k"

    def test_set_by_key_replaces_value(self) -> None:
        bmap = BidirectionalMap([("k", "old")])
        bmap.set_by_key("k", "new")
        assert bmap.get_by_key("k") == "new"
        assert bmap.get_by_value("new") == "k"
        assert bmap.get_by_value("old") is None

    def test_set_by_value_adds_entry(self) -> None:
        bmap: BidirectionalMap[str, str] = BidirectionalMap()
        bmap.set_by_value("v", "k")
        assert bmap.get_by_key("k") == "v"
        assert bmap.get_by_value("v") == "k"

    def test_set_by_value_replaces_key(self) -> None:
        bmap = BidirectionalMap([("old", "v")])
        bmap.set_by_value("v", "new")
        assert bmap.get_by_value("v") == "new"
        assert bmap.get_by_key("new") == "v"
        assert bmap.get_by_key("old") is None

    def test_set_by_key_keeps_other_keys_sharing_value(self) -> None:
        bmap = BidirectionalMap([("a", "v"), ("b", "v")])
        bmap.set_by_key("b", "w")
        assert bmap.get_by_key("a") == "v"
        assert bmap.get_by_value("w") == "b"

    def test_set_by_value_drops_stale_reverse_entry(self) -> None:
        bmap = BidirectionalMap([("a", "x")])
        bmap.set_by_value("y", "a")
        assert bmap.get_by_key("a") == "y"
        assert bmap.get_by_value("y") == "a"
        assert not bmap.has_value("x")
        assert bmap.get_by_value("x") is None
        assert dict(bmap.by_values()) == {"y": "a"}

    def test_set_by_value_same_pair_is_idempotent(self) -> None:
        bmap = BidirectionalMap([("a", "x")])
        bmap.set_by_value("x", "a")
        assert dict(bmap.by_keys()) == {"a": "x"}
        assert dict(bmap.by_values()) == {"x": "a"}


# ============================================================================
# VIEWS AND COPIES
# ============================================================================


class TestViews:
    """Read-only views and independent copies."""

    def test_views_are_read_only(self) -> None:
        bmap = BidirectionalMap([("k", "v")])
        with pytest.raises(TypeError):
            bmap.by_keys()["x"] = "y"  # type: ignore[index]
        with pytest.raises(TypeError):
            bmap.by_values()["y"] = "x"  # type: ignore[index]

    def test_views_reflect_later_updates(self) -> None:
        bmap: BidirectionalMap[str, str] = BidirectionalMap()
        forward = bmap.by_keys()
        bmap.set_by_key("k", "v")
        assert forward == {"k": "v"}

    def test_copy_is_independent(self) -> None:
        original = BidirectionalMap([("k", "v")])
        clone = original.copy()
        clone.set_by_key("k", "changed")
        assert original.get_by_key("k") == "v"
        assert original.get_by_value("v") == "k"
        assert clone == BidirectionalMap([("k", "changed")])

    def test_equality_and_unhashable(self) -> None:
        assert BidirectionalMap([("k", "v")]) == BidirectionalMap({"k": "v"})
        assert BidirectionalMap([("k", "v")]) != BidirectionalMap([("k", "w")])
        assert BidirectionalMap().__eq__(object()) is NotImplemented
        with pytest.raises(TypeError):
            hash(BidirectionalMap())

    def test_repr(self) -> None:
        assert repr(BidirectionalMap([("k", "v")])) == "BidirectionalMap([('k', 'v')])"


# ============================================================================
# PROPERTIES
# ============================================================================


class TestBidirectionalMapProperties:
    """Property-based invariants."""

    @given(st.dictionaries(st.text(max_size=10), st.text(max_size=10)))
    def test_every_forward_entry_has_reverse_lookup(self, data: dict[str, str]) -> None:
        """PROPERTY: each value answers some key that maps to it."""
        bmap = BidirectionalMap(data)
        for key, value in data.items():
            assert bmap.get_by_key(key) == value
            assert bmap.get_by_key(bmap.get_by_value(value)) == value  # type: ignore[arg-type]

    @given(
        st.lists(
            st.tuples(st.integers(0, 5), st.integers(0, 5)),
            max_size=30,
        )
    )
    def test_reverse_direction_is_consistent(self, pairs: list[tuple[int, int]]) -> None:
        """PROPERTY: every reverse entry points at a key that maps back to it."""
        bmap = BidirectionalMap(pairs)
        for value, key in bmap.by_values().items():
            assert bmap.get_by_key(key) == value

    @given(
        st.lists(
            st.tuples(st.booleans(), st.integers(0, 5), st.integers(0, 5)),
            max_size=30,
        )
    )
    def test_mixed_updates_keep_reverse_consistent(
        self, updates: list[tuple[bool, int, int]]
    ) -> None:
        """PROPERTY: after any mix of updates, every reverse entry maps back."""
        bmap: BidirectionalMap[int, int] = BidirectionalMap()
        for by_key, key, value in updates:
            if by_key:
                bmap.set_by_key(key, value)
            else:
                bmap.set_by_value(value, key)
        for value, key in bmap.by_values().items():
            assert bmap.get_by_key(key) == value

    @given(st.dictionaries(st.text(max_size=5), st.text(max_size=5), max_size=10))
    def test_injective_input_round_trips(self, data: dict[str, str]) -> None:
        """PROPERTY: with unique values, the reverse view is the exact inverse."""
        inverse = {value: key for key, value in data.items()}
        if len(inverse) != len(data):
            return
        bmap = BidirectionalMap(data)
        assert dict(bmap.by_values()) == inverse
