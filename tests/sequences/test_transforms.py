"""Tests for the list helpers shared by collection types."""

import pytest

from value_collections.sequences.transforms import (
    copy_within_items,
    fill_items,
    flatten_items,
    relative_index,
    sort_items,
    splice_items,
)


class TestRelativeIndex:
    """Tests for relative index resolution."""

    @pytest.mark.parametrize(
        ("index", "expected"),
        [(None, 7), (0, 0), (2, 2), (9, 5), (-1, 4), (-5, 0), (-9, 0)],
    )
    def test_resolution(self, index, expected):
        """Tests defaults, clamping and negative positions for a length of 5."""
        assert relative_index(index, 5, default=7) == expected


class TestSpliceItems:
    """Tests for in-place splicing of a plain list."""

    def test_mutates_the_given_list(self):
        """Tests removal and insertion."""
        items = [1, 2, 3, 4]

        removed = splice_items(items, 1, 2, [9])

        assert removed == [2, 3]
        assert items == [1, 9, 4]

    def test_negative_delete_count_removes_nothing(self):
        """Tests clamping of the delete count."""
        items = [1, 2]
        assert splice_items(items, 0, -3, []) == []
        assert items == [1, 2]

    def test_start_past_the_end_appends(self):
        """Tests a start beyond the length."""
        items = [1, 2]
        assert splice_items(items, 10, None, [3]) == []
        assert items == [1, 2, 3]


class TestSortItems:
    """Tests for stable sorting into a new list."""

    def test_does_not_touch_the_input(self):
        """Tests that a new list is returned."""
        items = [3, 1, 2]
        assert sort_items(items) == [1, 2, 3]
        assert items == [3, 1, 2]

    def test_comparator(self):
        """Tests a three-way comparator."""
        assert sort_items([1, 3, 2], lambda a, b: b - a) == [3, 2, 1]

    def test_comparator_and_key_are_exclusive(self):
        """Tests the misuse guard."""
        with pytest.raises(ValueError):
            sort_items([1], lambda a, b: 0, key=abs)


class TestFillAndCopyWithin:
    """Tests for the whole-sequence rewrites."""

    def test_fill_gives_every_slot_its_own_clone(self):
        """Tests that filled slots do not alias each other."""
        filled = fill_items([0, 0], {"qty": 1})

        assert filled == [{"qty": 1}, {"qty": 1}]
        assert filled[0] is not filled[1]

    def test_copy_within_clones_copied_elements(self):
        """Tests that copied slots do not alias their source slot."""
        items = [{"n": 1}, {"n": 2}]
        copied = copy_within_items(items, 1, 0)

        assert copied == [{"n": 1}, {"n": 1}]
        assert copied[1] is not copied[0]
        assert copied[0] is items[0]

    def test_copy_within_target_past_the_end(self):
        """Tests that nothing is written beyond the length."""
        assert copy_within_items([1, 2, 3], 3, 0) == [1, 2, 3]


class TestFlattenItems:
    """Tests for depth-limited flattening."""

    def test_strings_are_not_expanded(self):
        """Tests that text stays whole."""
        assert flatten_items(["ab", ["cd"]], depth=1) == ["ab", "cd"]

    def test_tuples_are_expanded(self):
        """Tests tuple expansion."""
        assert flatten_items([(1, (2,))], depth=1) == [1, (2,)]
