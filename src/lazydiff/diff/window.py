"""Windowed ("lazy") diff over two large item stores.

Instead of diffing every item, only the items in the visible range are
fetched from the old and new stores and diffed with
:func:`~lazydiff.diff.engine.list_diff`.  Changes inside the window are
exact.  Any remaining difference in total count is assumed to happen past
the end of the old list and is expressed as inserts appended after the
last old index, or as deletes of the trailing old indices.

The result is only valid for the visible range it was computed against,
so callers should compute it immediately before applying it.  ``None``
means no incremental plan is available and the caller should reload the
whole list.
"""

from __future__ import annotations

from typing import Any

from lazydiff.models import DiffResult, IndexRange, ItemStore
from lazydiff.observability import get_logger

from .engine import list_diff
from .transforms import for_batch_apply, shift_indices

log = get_logger("lazydiff.window")


def _unavailable(reason: str, visible_range: IndexRange, **fields: Any) -> None:
    log.debug(
        "Windowed diff unavailable",
        extra={
            "extra_fields": {
                "op": "windowed_diff",
                "reason": reason,
                "visible_range": str(visible_range),
                **fields,
            }
        },
    )


def windowed_diff(
    old_store: ItemStore,
    new_store: ItemStore,
    visible_range: IndexRange,
) -> DiffResult | None:
    """Diff the items of *old_store* and *new_store* within *visible_range*.

    Parameters
    ----------
    old_store:
        The store the consumer currently displays.  Must hold at least
        ``visible_range.upper + 1`` items.
    new_store:
        The store the consumer should display next.
    visible_range:
        Indices into *old_store* to diff.

    Returns
    -------
    DiffResult | None
        Indices are positions in the full lists.  ``delta`` always equals
        ``new_store.total_count - old_store.total_count``.  ``None`` when
        either window cannot be fetched or is empty, or when the total
        count change cannot be reconciled.
    """
    old_total = old_store.total_count
    new_total = new_store.total_count

    if old_total <= visible_range.upper:
        _unavailable("range_out_of_bounds", visible_range, old_total=old_total)
        return None

    old_items = old_store.collect_items(visible_range)
    new_items = new_store.collect_items(visible_range)
    if old_items is None or new_items is None:
        _unavailable("items_not_available", visible_range)
        return None

    if not old_items or not new_items:
        _unavailable(
            "empty_window",
            visible_range,
            old_items=len(old_items),
            new_items=len(new_items),
        )
        return None

    base = list_diff(old_items, new_items)

    # In-place updates with no structural change anywhere are safe to
    # apply as reloads, so skip the delete+insert conversion.
    if base.only_contains_updates and old_total == new_total:
        return shift_indices(base, visible_range.lower)

    diff = shift_indices(for_batch_apply(base), visible_range.lower)

    total_delta = new_total - old_total
    tail_delta = total_delta - diff.delta

    if tail_delta > 0:
        # +2 past 0...3 inserts 4...5
        diff.inserts.update(range(old_total, old_total + tail_delta))
    elif tail_delta < 0:
        last_index = old_total - 1
        lower_bound = last_index - (-total_delta - 1)
        if lower_bound > last_index:
            _unavailable(
                "inverted_tail_deletion",
                visible_range,
                total_delta=total_delta,
                tail_delta=tail_delta,
            )
            return None
        # -2 on 0...3 deletes 2...3
        diff.deletes.update(range(lower_bound, last_index + 1))

    if diff.delta != total_delta:
        log.warning(
            "Windowed diff delta does not match total count change",
            extra={
                "extra_fields": {
                    "op": "windowed_diff",
                    "visible_range": str(visible_range),
                    "expected_delta": total_delta,
                    "actual_delta": diff.delta,
                }
            },
        )
        return None

    return diff
