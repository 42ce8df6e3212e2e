"""Tests for JSON rendering of snapshots."""

from dataclasses import dataclass

import pytest

from value_collections.sequences.rendering import render_item, render_items


@dataclass
class Coordinate:
    lat: float
    lon: float


class Opaque:
    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value

    def __str__(self) -> str:
        return f"opaque-{self.value}"


class TestRendering:
    """Tests for render_item and render_items."""

    def test_dataclasses(self):
        """Tests that dataclasses render by their fields."""
        assert render_item(Coordinate(lat=1.5, lon=2.0)) == '{"lat":1.5,"lon":2.0}'

    def test_objects_without_a_dict_render_as_text(self):
        """Tests the str() fallback."""
        assert render_items([Opaque(3)]) == '["opaque-3"]'

    def test_primitives(self):
        """Tests plain JSON values."""
        assert render_items([1, "a", None, True]) == '[1,"a",null,true]'

    def test_shared_objects_render_each_time(self):
        """Tests that an object reached twice without a cycle renders twice."""

        class Leaf:
            def __init__(self, x: int) -> None:
                self.x = x

        class Pair:
            def __init__(self, leaf: Leaf) -> None:
                self.left = leaf
                self.right = leaf

        assert render_item(Pair(Leaf(1))) == '{"left":{"x":1},"right":{"x":1}}'

    def test_cycles_raise_value_error(self):
        """Tests self-references through objects and lists."""

        class Node:
            def __init__(self) -> None:
                self.children = [self]

        looping: list = []
        looping.append(looping)

        with pytest.raises(ValueError, match="Circular reference"):
            render_item(Node())

        with pytest.raises(ValueError, match="Circular reference"):
            render_items([looping])
