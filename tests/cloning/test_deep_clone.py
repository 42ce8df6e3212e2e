"""Tests for the deep clone helpers."""

from rsb.models.base_model import BaseModel

from value_collections.cloning.deep_clone import deep_clone, deep_clone_items


class Order(BaseModel):
    lines: list[dict[str, int]]


class TestDeepClone:
    """Tests that clones share no mutable state with their source."""

    def test_nested_containers_are_independent(self):
        """Tests a nested dict/list structure."""
        original = {"lines": [{"qty": 1}], "tags": {"x"}}
        clone = deep_clone(original)

        clone["lines"][0]["qty"] = 5
        clone["tags"].add("y")

        assert original == {"lines": [{"qty": 1}], "tags": {"x"}}

    def test_models_are_independent(self):
        """Tests cloning a pydantic model."""
        order = Order(lines=[{"qty": 1}])
        clone = deep_clone(order)

        clone.lines[0]["qty"] = 7

        assert clone is not order
        assert order.lines == [{"qty": 1}]

    def test_shared_references_stay_shared_inside_the_clone(self):
        """Tests that internal sharing is preserved, not duplicated."""
        shared = {"qty": 1}
        clone = deep_clone([shared, shared])

        assert clone[0] is clone[1]
        assert clone[0] is not shared


class TestDeepCloneItems:
    """Tests for cloning an iterable into an owned list."""

    def test_returns_a_new_list(self):
        """Tests tuples, generators and lists as sources."""
        source = [[1], [2]]
        clone = deep_clone_items(source)

        assert clone == source
        assert clone is not source
        assert clone[0] is not source[0]
        assert deep_clone_items(x for x in (1, 2)) == [1, 2]
        assert deep_clone_items(()) == []
