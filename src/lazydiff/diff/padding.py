"""Helpers for choosing the range of indices to diff.

:func:`range_from_indices` turns the positions a consumer currently shows
into a closed range, and :func:`padded_range` widens that range on both
sides so prepared-but-offscreen items (prefetched cells, for example) are
diffed too instead of being needlessly deleted and recreated.
"""

from __future__ import annotations

from collections.abc import Iterable

from lazydiff.models import IndexRange
from lazydiff.observability import get_logger

log = get_logger("lazydiff.padding")


def range_from_indices(indices: Iterable[int]) -> IndexRange | None:
    """Return the smallest range covering *indices*, or ``None`` if empty."""
    values = list(indices)
    if not values:
        return None
    return IndexRange(min(values), max(values))


def padded_range(max_total_count: int, visible_range: IndexRange) -> IndexRange:
    """Widen *visible_range* by its own width on each side.

    The result is clamped to ``0...max_total_count - 1``.  For a visible
    range of ``20...30`` with 50 items the result is ``9...41``.

    *visible_range* is returned unchanged when ``max_total_count`` is not
    positive or does not reach the range, which happens briefly after
    items were removed and the consumer has not caught up yet.
    """
    if max_total_count <= 0:
        return visible_range
    if max_total_count <= visible_range.lower:
        return visible_range

    width = visible_range.count
    lower = max(0, visible_range.lower - width)
    upper = min(max_total_count - 1, visible_range.upper + width)

    if lower > upper:
        log.warning(
            "Padded range has inverted bounds, using visible range",
            extra={
                "extra_fields": {
                    "op": "padded_range",
                    "max_total_count": max_total_count,
                    "visible_range": str(visible_range),
                    "lower": lower,
                    "upper": upper,
                }
            },
        )
        return visible_range

    return IndexRange(lower, upper)
