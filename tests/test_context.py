"""
Tests for context keys
"""

import pytest

from markovgen import ContextKey


class TestContextKey:
    def test_initial_is_all_sentinels(self):
        key = ContextKey.initial(3)
        assert list(key) == [None, None, None]
        assert len(key) == 3

    def test_initial_with_custom_sentinel(self):
        assert ContextKey.initial(2, "") == ContextKey(["", ""])

    def test_advance_drops_oldest(self):
        key = ContextKey(["a", "b", "c"])
        assert key.advance("d") == ContextKey(["b", "c", "d"])

    def test_advance_does_not_mutate(self):
        key = ContextKey(["a", "b"])
        key.advance("c")
        assert list(key) == ["a", "b"]

    def test_structural_equality_and_hash(self):
        first = ContextKey.initial(2).advance("x").advance("y")
        second = ContextKey(("x", "y"))
        assert first == second
        assert hash(first) == hash(second)
        assert {first: 1}[second] == 1

    def test_order_matters(self):
        assert ContextKey(["a", "b"]) != ContextKey(["b", "a"])

    def test_not_equal_to_plain_tuple(self):
        assert ContextKey(["a"]) != ("a",)

    def test_immutable(self):
        key = ContextKey(["a"])
        with pytest.raises(AttributeError):
            key.foo = 1
