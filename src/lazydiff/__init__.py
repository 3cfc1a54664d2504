"""lazydiff -- identity-based list diffing for large ordered collections.

Public re-exports
-----------------

* **Diffing:** :func:`list_diff`, :func:`windowed_diff`
* **Transforms:** :func:`for_batch_apply`, :func:`shift_indices`,
  :func:`padded_range`, :func:`range_from_indices`
* **Planning:** :class:`ChangePlanner`, :class:`ListChange`
* **Configuration:** :class:`LazyDiffConfig`
* **Errors:** :class:`LazyDiffError` and subclasses, :class:`ErrorCode`
* **Models:** :class:`DiffResult`, :class:`MoveIndex`, :class:`IndexRange`,
  :class:`Diffable`, :class:`ItemStore`, :class:`ChangeAction`

Usage::

    from lazydiff import IndexRange, list_diff, windowed_diff

    result = list_diff(old_items, new_items)
    partial = windowed_diff(old_store, new_store, IndexRange(40, 63))
    if partial is None:
        ...  # reload everything
"""

from __future__ import annotations

# ── Planning ───────────────────────────────────────────────────────────
from lazydiff.changes import ChangePlanner, ListChange

# ── Configuration ───────────────────────────────────────────────────────
from lazydiff.config import DEFAULT_MAX_TOTAL_COUNT_CHANGE, LazyDiffConfig

# ── Diffing ─────────────────────────────────────────────────────────────
from lazydiff.diff import (
    for_batch_apply,
    list_diff,
    padded_range,
    range_from_indices,
    shift_indices,
    windowed_diff,
)

# ── Errors ──────────────────────────────────────────────────────────────
from lazydiff.errors import (
    ErrorCode,
    LazyDiffError,
    LazyDiffIntegrityError,
    LazyDiffRangeError,
)

# ── Models ──────────────────────────────────────────────────────────────
from lazydiff.models import (
    ChangeAction,
    Diffable,
    DiffResult,
    IndexRange,
    ItemStore,
    MoveIndex,
)

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Diffing
    "list_diff",
    "windowed_diff",
    "for_batch_apply",
    "shift_indices",
    "padded_range",
    "range_from_indices",
    # Planning
    "ChangePlanner",
    "ListChange",
    # Configuration
    "LazyDiffConfig",
    "DEFAULT_MAX_TOTAL_COUNT_CHANGE",
    # Errors
    "LazyDiffError",
    "ErrorCode",
    "LazyDiffIntegrityError",
    "LazyDiffRangeError",
    # Models
    "ChangeAction",
    "Diffable",
    "DiffResult",
    "IndexRange",
    "ItemStore",
    "MoveIndex",
]
