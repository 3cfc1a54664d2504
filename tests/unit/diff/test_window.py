"""Tests for the windowed diff driver (lazydiff.diff.window).

Items are written as letters; a ``2`` suffix in the comments marks a
changed content version.  Brackets mark the visible range, e.g.
``A [B C D] E``.
"""

from __future__ import annotations

import pytest

from diffitems import Item, ListStore, UnavailableStore, items, store
from lazydiff.diff.window import windowed_diff
from lazydiff.models import DiffResult, IndexRange, MoveIndex


class OversizedStore(ListStore):
    """A store that returns every item it holds, whatever range is asked for."""

    def collect_items(self, index_range: IndexRange) -> list[Item] | None:
        return list(self.items)


def _diff(visible: tuple[int, int], old: str, new: str) -> DiffResult | None:
    return windowed_diff(store(old), store(new), IndexRange(*visible))


def assert_changes(
    result: DiffResult | None,
    change_count: int,
    deletes: set[int] = frozenset(),
    inserts: set[int] = frozenset(),
    updates: set[int] = frozenset(),
    moves: list[MoveIndex] | None = None,
) -> None:
    assert result is not None
    assert result.has_changes is (change_count > 0)
    assert result.deletes == set(deletes)
    assert result.inserts == set(inserts)
    assert result.updates == set(updates)
    assert result.moves == (moves or [])
    assert result.change_count == change_count


# =========================================================================
# All items visible
# =========================================================================

class TestAllVisible:
    def test_identical(self):
        assert_changes(_diff((0, 3), "ABCD", "ABCD"), 0)

    def test_pure_update_passes_through(self):
        old = ListStore(items("ABCD"))
        new = ListStore([Item("A", 2), Item("B"), Item("C", 2), Item("D")])
        result = windowed_diff(old, new, IndexRange(0, 3))
        assert_changes(result, 2, updates={0, 2})

    def test_update_with_count_change_becomes_delete_insert(self):
        old = ListStore(items("ABCD"))
        new = ListStore([Item("A", 2), Item("B"), Item("C", 2), Item("D"), Item("E")])
        result = windowed_diff(old, new, IndexRange(0, 3))
        assert_changes(result, 5, deletes={0, 2}, inserts={0, 2, 4})

    def test_insert(self):
        # Old: [B D]      New: [A B] C D
        assert_changes(_diff((0, 1), "BD", "ABCD"), 4, deletes={1}, inserts={0, 2, 3})

    def test_delete(self):
        assert_changes(_diff((0, 3), "ABCD", "ACD"), 1, deletes={1})

    def test_delete_first(self):
        assert_changes(_diff((0, 3), "ABCD", "BCD"), 1, deletes={0})

    def test_move(self):
        assert_changes(
            _diff((0, 3), "ABCD", "ACBD"),
            2,
            moves=[MoveIndex(2, 1), MoveIndex(1, 2)],
        )


# =========================================================================
# Part of the list visible
# =========================================================================

class TestPartiallyVisible:
    def test_delete_first_with_beginning_visible(self):
        # Old: [A B] C D   New: [B C] D
        assert_changes(_diff((0, 1), "ABCD", "BCD"), 3, deletes={0, 3}, inserts={1})

    def test_identical_middle(self):
        assert_changes(_diff((1, 3), "ABCDE", "ABCDE"), 0)

    def test_update_in_window(self):
        old = ListStore(items("ABCDE"), total_count=4)
        new = ListStore([Item("A", 2), Item("B"), Item("C", 2), Item("D"), Item("E")], total_count=4)
        assert_changes(windowed_diff(old, new, IndexRange(1, 3)), 1, updates={2})

    @pytest.mark.parametrize("changed", [0, 4])
    def test_update_outside_window_is_invisible(self, changed):
        new_items = items("ABCDE")
        new_items[changed] = Item(new_items[changed].key, 2)
        old = ListStore(items("ABCDE"), total_count=4)
        new = ListStore(new_items, total_count=4)
        assert_changes(windowed_diff(old, new, IndexRange(1, 3)), 0)

    def test_insert_in_middle(self):
        # Old: A [B C D] E     New: A [B F C] D E
        assert_changes(_diff((1, 3), "ABCDE", "ABFCDE"), 3, deletes={3}, inserts={2, 5})

    def test_insert_at_beginning(self):
        # Old: A [B C D] E     New: F [A B C] D E
        assert_changes(_diff((1, 3), "ABCDE", "FABCDE"), 3, deletes={3}, inserts={1, 5})

    def test_insert_at_end(self):
        assert_changes(_diff((1, 3), "ABCDE", "ABCDEF"), 1, inserts={5})

    def test_delete_in_middle(self):
        # Old: A [B C D] E F   New: A [B D E] F
        assert_changes(_diff((1, 3), "ABCDEF", "ABDEF"), 3, deletes={2, 5}, inserts={3})

    def test_move_in_middle(self):
        assert_changes(
            _diff((1, 3), "ABDEF", "ADBEF"),
            2,
            moves=[MoveIndex(2, 1), MoveIndex(1, 2)],
        )

    def test_move_out_of_window(self):
        # Old: A [B C D] E     New: A [B D E] C
        assert_changes(_diff((1, 3), "ABCDE", "ABDEC"), 2, deletes={2}, inserts={3})

    def test_insert_past_window(self):
        assert_changes(_diff((0, 0), "ABCDE", "ABCDFE"), 1, inserts={5})

    def test_many_appended(self):
        assert_changes(_diff((0, 0), "A", "ABCDEFGHI"), 8, inserts=set(range(1, 9)))

    def test_short_new_window_is_reconciled_at_tail(self):
        # The new store claims 4 items but its window only holds 3.
        old = ListStore(items("ABCD"))
        new = ListStore(items("ABC"), total_count=4)
        result = windowed_diff(old, new, IndexRange(0, 3))
        assert_changes(result, 2, deletes={3}, inserts={4})

    def test_more_items_than_claimed_are_reconciled(self):
        old = ListStore(items("ABCD"))
        new = ListStore(items("ABC"), total_count=5)
        result = windowed_diff(old, new, IndexRange(0, 3))
        assert_changes(result, 3, deletes={3}, inserts={4, 5})


# =========================================================================
# Unavailable diffs
# =========================================================================

class TestUnavailable:
    def test_new_window_empty(self):
        # Old: A B C D [E F G]   New: F E
        assert _diff((4, 6), "ABCDEFG", "FE") is None

    def test_new_window_empty_large_deletion(self):
        assert _diff((2, 6), "ABCDEFGHI", "A") is None

    def test_visible_range_beyond_old_items(self):
        assert _diff((2, 6), "A", "ABCDEFGHI") is None

    def test_visible_upper_equal_to_total_count(self):
        assert _diff((0, 4), "ABCD", "ABCD") is None

    def test_store_not_ready(self):
        old = store("ABCD")
        new = UnavailableStore(items("ABCD"))
        assert windowed_diff(old, new, IndexRange(0, 3)) is None
        assert windowed_diff(new, old, IndexRange(0, 3)) is None

    def test_tail_deletion_with_growing_window(self):
        # The new window holds more items than the range it was asked for.
        old = ListStore(items("ABCD"))
        new = OversizedStore(items("AXB"), total_count=4)
        assert windowed_diff(old, new, IndexRange(0, 1)) is None

    def test_unreconcilable_delta(self):
        # Old: [A B C D] E F   New: [B C]
        # Window deletes 0 and 3; the tail deletion 2...5 overlaps index 3.
        assert _diff((0, 3), "ABCDEF", "BC") is None

    @pytest.mark.parametrize(
        ("visible", "old", "new", "expect_none"),
        [
            ((3, 6), "ABCDEFG", "ABC", True),
            ((2, 6), "ABCDEFG", "ABC", False),
            ((1, 6), "ABCDEFG", "FE", False),
            ((0, 6), "ABCDEFGHI", "A", False),
        ],
    )
    def test_deletion_within_and_beyond_window(self, visible, old, new, expect_none):
        result = _diff(visible, old, new)
        assert (result is None) is expect_none
        if result is not None:
            assert result.delta == len(new) - len(old)
