"""Public data models for lazydiff.

This module contains the result type produced by the diff engine, the
closed index range used by the windowed driver, and the capability
protocols that collaborators must satisfy (:class:`Diffable` items and
:class:`ItemStore` stores).  Aside from a handful of derived properties,
all types are plain dataclasses.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from lazydiff.errors import LazyDiffRangeError

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ChangeAction(str, Enum):
    """How a consumer should apply a planned list change."""

    RELOAD_ALL = "reload_all"
    """No incremental plan is available -- replace the whole list."""

    APPLY_DIFF = "apply_diff"
    """Apply inserts, deletes and moves from a :class:`DiffResult`."""

    UPDATE = "update"
    """Only in-place content updates; no position shifted anywhere."""


# ---------------------------------------------------------------------------
# Capability protocols
# ---------------------------------------------------------------------------

@runtime_checkable
class Diffable(Protocol):
    """An item that can take part in a diff.

    ``diff_identifier`` decides *which* items correspond across the two
    sequences; ``==`` decides whether a matched pair was updated.
    """

    @property
    def diff_identifier(self) -> Hashable: ...


@runtime_checkable
class ItemStore(Protocol):
    """A possibly partially materialised, ordered collection of items."""

    @property
    def state_id(self) -> Any: ...

    @property
    def total_count(self) -> int: ...

    def collect_items(self, index_range: IndexRange) -> Sequence[Diffable] | None:
        """Return the items in *index_range*, or ``None`` if not available."""
        ...


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class IndexRange:
    """A closed, non-empty range of list indices (``lower...upper``).

    Raises :class:`LazyDiffRangeError` when ``lower`` is negative or
    greater than ``upper``.
    """

    lower: int
    upper: int

    def __post_init__(self) -> None:
        if self.lower < 0:
            raise LazyDiffRangeError(
                f"Range lower bound must be >= 0, got {self.lower}",
                context={"lower": self.lower, "upper": self.upper},
            )
        if self.lower > self.upper:
            raise LazyDiffRangeError(
                f"Range lower bound {self.lower} exceeds upper bound {self.upper}",
                context={"lower": self.lower, "upper": self.upper},
            )

    @property
    def count(self) -> int:
        return self.upper - self.lower + 1

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.lower, self.upper + 1))

    def __len__(self) -> int:
        return self.count

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.lower <= index <= self.upper

    def __str__(self) -> str:
        return f"{self.lower}...{self.upper}"


# ---------------------------------------------------------------------------
# Diff results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MoveIndex:
    """A matched item whose position changed beyond insert/delete shifts.

    Attributes
    ----------
    from_index:
        Position in the old sequence.
    to_index:
        Position in the new sequence.
    """

    from_index: int
    to_index: int

    def shifted(self, offset: int) -> MoveIndex:
        """Return a copy with both indices moved by *offset*."""
        return MoveIndex(self.from_index + offset, self.to_index + offset)

    def __str__(self) -> str:
        return f"{self.from_index}->{self.to_index}"


@dataclass
class DiffResult:
    """Output of the diff engine.

    Attributes
    ----------
    inserts:
        Indices in the *new* sequence of items that have no old match.
    deletes:
        Indices in the *old* sequence of items that have no new match.
    updates:
        Indices in the *old* sequence of matched items whose content
        changed.
    moves:
        Matched items whose position changed, in the order the engine
        found them.
    old_map:
        Identifier -> old index.  For duplicate identifiers the last
        position wins.
    new_map:
        Identifier -> new index.  For duplicate identifiers the last
        position wins.
    """

    inserts: set[int] = field(default_factory=set)
    deletes: set[int] = field(default_factory=set)
    updates: set[int] = field(default_factory=set)
    moves: list[MoveIndex] = field(default_factory=list)
    old_map: dict[Hashable, int] = field(default_factory=dict)
    new_map: dict[Hashable, int] = field(default_factory=dict)

    @property
    def delta(self) -> int:
        """Net change in item count (``inserts - deletes``)."""
        return len(self.inserts) - len(self.deletes)

    @property
    def change_count(self) -> int:
        return len(self.inserts) + len(self.deletes) + len(self.updates) + len(self.moves)

    @property
    def has_changes(self) -> bool:
        return self.change_count > 0

    @property
    def only_contains_updates(self) -> bool:
        """``True`` when there are updates and nothing shifted position."""
        no_other_changes = not self.inserts and not self.deletes and not self.moves
        return bool(self.updates) and no_other_changes

    def validate(self, old: Sequence[Any], new: Sequence[Any]) -> bool:
        """Check that applying this result to *old* yields ``len(new)`` items."""
        return len(old) + len(self.inserts) - len(self.deletes) == len(new)

    def old_index_for(self, identifier: Hashable) -> int | None:
        return self.old_map.get(identifier)

    def new_index_for(self, identifier: Hashable) -> int | None:
        return self.new_map.get(identifier)

    def copy(self) -> DiffResult:
        """Return a copy whose containers can be mutated independently."""
        return DiffResult(
            inserts=set(self.inserts),
            deletes=set(self.deletes),
            updates=set(self.updates),
            moves=list(self.moves),
            old_map=dict(self.old_map),
            new_map=dict(self.new_map),
        )

    def debug_change_summary(self) -> str:
        """Render a multi-line, human-readable summary of the changes."""
        moves = ", ".join(str(m) for m in self.moves)
        return "\n".join([
            f"inserts: {sorted(self.inserts)}",
            f"updates: {sorted(self.updates)}",
            f"deletes: {sorted(self.deletes)}",
            f"moves: [{moves}]",
            f"has_changes: {self.has_changes}",
            f"change_count: {self.change_count}",
        ])
