"""Identity-based list diff (symbol-table algorithm).

Computes inserts, deletes, updates and moves between two sequences of
:class:`~lazydiff.models.Diffable` items in ``O(len(old) + len(new))``
time.  Items are matched by ``diff_identifier``; ``==`` is only consulted
to decide whether a matched pair was updated.

The algorithm is the one popularised by Paul Heckel ("A technique for
isolating differences between files", 1978):

1. Build a symbol table entry for every identifier seen in *new*.
2. Record every occurrence of each identifier in *old*.
3. Match the k-th occurrence of an identifier in *new* to its k-th
   occurrence in *old*.

Unmatched positions become deletes (old) or inserts (new); matched
positions whose index differs from the one predicted by the deletes and
inserts before them become moves.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Sequence

from lazydiff.errors import LazyDiffIntegrityError
from lazydiff.models import DiffResult, Diffable, MoveIndex


class _Entry:
    """Per-identifier bookkeeping for one diff call."""

    __slots__ = ("new_count", "old_count", "old_indexes", "updated")

    def __init__(self) -> None:
        self.new_count = 0
        self.old_count = 0
        # Old positions in ascending order, consumed front to back.
        self.old_indexes: deque[int] = deque()
        self.updated = False

    @property
    def occurs_on_both_sides(self) -> bool:
        return self.new_count > 0 and self.old_count > 0


def _entry_index(
    key: Hashable,
    table: dict[Hashable, int],
    entries: list[_Entry],
) -> int:
    """Return the arena index for *key*, creating an entry if needed."""
    idx = table.get(key)
    if idx is None:
        idx = len(entries)
        entries.append(_Entry())
        table[key] = idx
    return idx


def list_diff(old: Sequence[Diffable], new: Sequence[Diffable]) -> DiffResult:
    """Compute the changes that turn *old* into *new*.

    Parameters
    ----------
    old:
        The previous sequence of items.
    new:
        The desired sequence of items.

    Returns
    -------
    DiffResult
        ``inserts`` hold new indices; ``deletes`` and ``updates`` hold old
        indices; ``moves`` pair an old index with a new index.

    Raises
    ------
    LazyDiffIntegrityError
        If the result does not reconcile ``len(old)`` with ``len(new)``.
        This only happens when an item's identifier changes mid-diff.
    """
    table: dict[Hashable, int] = {}
    entries: list[_Entry] = []

    # Pass 1: count every identifier occurring in new.
    new_entries: list[int] = []
    for item in new:
        idx = _entry_index(item.diff_identifier, table, entries)
        entries[idx].new_count += 1
        new_entries.append(idx)

    # Pass 2: queue up the old positions of every identifier.
    old_entries: list[int] = []
    for i, item in enumerate(old):
        idx = _entry_index(item.diff_identifier, table, entries)
        entry = entries[idx]
        entry.old_count += 1
        entry.old_indexes.append(i)
        old_entries.append(idx)

    # Pass 3: pair up occurrences present on both sides, in order.
    new_matches: list[int | None] = [None] * len(new)
    old_matches: list[int | None] = [None] * len(old)
    for i, idx in enumerate(new_entries):
        entry = entries[idx]
        if not entry.occurs_on_both_sides or not entry.old_indexes:
            # Either unique to new, or more new occurrences than old ones.
            continue
        old_index = entry.old_indexes.popleft()
        if new[i] != old[old_index]:
            entry.updated = True
        new_matches[i] = old_index
        old_matches[old_index] = i

    result = DiffResult()

    # Deletes, remembering how many came before each old position.
    delete_offsets: list[int] = []
    running_offset = 0
    for i, match in enumerate(old_matches):
        delete_offsets.append(running_offset)
        if match is None:
            result.deletes.add(i)
            running_offset += 1
        result.old_map[old[i].diff_identifier] = i

    # Inserts, updates and moves.
    running_offset = 0
    for i, old_index in enumerate(new_matches):
        if old_index is None:
            result.inserts.add(i)
            running_offset += 1
        else:
            # A matched entry can be both updated and moved.
            if entries[new_entries[i]].updated:
                result.updates.add(old_index)
            if old_index - delete_offsets[old_index] + running_offset != i:
                result.moves.append(MoveIndex(old_index, i))
        result.new_map[new[i].diff_identifier] = i

    if not result.validate(old, new):
        raise LazyDiffIntegrityError(
            f"Applying {len(result.inserts)} inserts and {len(result.deletes)} "
            f"deletes to {len(old)} items does not yield {len(new)} items",
            context={
                "old_count": len(old),
                "new_count": len(new),
                "inserts": len(result.inserts),
                "deletes": len(result.deletes),
            },
        )

    return result
