"""Change planning: decide how a consumer should move between two stores.

:class:`ChangePlanner` wraps :func:`~lazydiff.diff.window.windowed_diff`
with the policy a list consumer needs: reload everything when there is no
previous state, when the total count changed too much, or when no windowed
diff is available; otherwise apply the diff, or only the in-place updates
when nothing shifted.

Plans are computed against the range the consumer shows *right now* and
must be applied before that range changes.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from lazydiff.config import LazyDiffConfig
from lazydiff.diff.padding import padded_range, range_from_indices
from lazydiff.diff.window import windowed_diff
from lazydiff.models import ChangeAction, DiffResult, ItemStore
from lazydiff.observability import NoopMetricsHook, get_logger

log = get_logger("lazydiff.changes")


@dataclass
class ListChange:
    """A planned transition of a list consumer to a new store.

    Attributes
    ----------
    action:
        What the consumer should do.
    total_count:
        Item count of the new store.
    new_state_id:
        ``state_id`` of the new store.
    prev_state_id:
        ``state_id`` of the old store, if there was one.
    diff:
        The diff to apply, set for :attr:`ChangeAction.APPLY_DIFF` and
        :attr:`ChangeAction.UPDATE`.
    updates:
        Indices to reload in place, set for :attr:`ChangeAction.UPDATE`.
    reason:
        Why a :attr:`ChangeAction.RELOAD_ALL` was chosen.
    """

    action: ChangeAction
    total_count: int
    new_state_id: Any
    prev_state_id: Any | None = None
    diff: DiffResult | None = None
    updates: set[int] = field(default_factory=set)
    reason: str | None = None

    @classmethod
    def reload_all(
        cls,
        total_count: int,
        new_state_id: Any,
        reason: str,
        prev_state_id: Any | None = None,
    ) -> ListChange:
        return cls(
            action=ChangeAction.RELOAD_ALL,
            total_count=total_count,
            new_state_id=new_state_id,
            prev_state_id=prev_state_id,
            reason=reason,
        )

    @property
    def has_changes(self) -> bool:
        if self.action == ChangeAction.APPLY_DIFF:
            return self.diff is not None and self.diff.has_changes
        if self.action == ChangeAction.UPDATE:
            return bool(self.updates)
        return True


class ChangePlanner:
    """Plans list changes between two item stores.

    Parameters
    ----------
    config:
        Planner configuration.  Defaults to ``LazyDiffConfig()``.
    """

    def __init__(self, config: LazyDiffConfig | None = None) -> None:
        self._config = config if config is not None else LazyDiffConfig()
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )

    def plan(
        self,
        old_store: ItemStore | None,
        new_store: ItemStore,
        visible_indices: Iterable[int],
    ) -> ListChange:
        """Plan the change from *old_store* to *new_store*.

        Parameters
        ----------
        old_store:
            The store currently displayed, or ``None`` on first display.
        new_store:
            The store to display next.
        visible_indices:
            Positions the consumer currently shows, in any order.

        Returns
        -------
        ListChange
        """
        change = self._plan(old_store, new_store, visible_indices)
        tags = {"action": change.action.value}
        if change.reason is not None:
            tags["reason"] = change.reason
        self._metrics.increment("lazydiff.list_change_total", tags=tags)

        if self._config.debug_dump_diff:
            _dump_change(change)
        return change

    def _plan(
        self,
        old_store: ItemStore | None,
        new_store: ItemStore,
        visible_indices: Iterable[int],
    ) -> ListChange:
        new_total = new_store.total_count
        if old_store is None:
            return ListChange.reload_all(new_total, new_store.state_id, "no_previous_state")

        prev_state_id = old_store.state_id
        count_change = abs(new_total - old_store.total_count)
        if count_change >= self._config.max_total_count_change:
            log.debug(
                "Total count change exceeds limit",
                extra={
                    "extra_fields": {
                        "op": "plan",
                        "count_change": count_change,
                        "limit": self._config.max_total_count_change,
                    }
                },
            )
            return ListChange.reload_all(
                new_total, new_store.state_id, "total_count_change_exceeded", prev_state_id,
            )

        working_range = range_from_indices(visible_indices)
        if working_range is None:
            return ListChange.reload_all(
                new_total, new_store.state_id, "no_visible_range", prev_state_id,
            )
        if self._config.prefetch_enabled:
            working_range = padded_range(old_store.total_count, working_range)
        self._metrics.gauge("lazydiff.window_size", working_range.count)

        start = time.perf_counter()
        diff = windowed_diff(old_store, new_store, working_range)
        self._metrics.timing(
            "lazydiff.diff_duration_ms", (time.perf_counter() - start) * 1000,
        )

        if diff is None:
            return ListChange.reload_all(
                new_total, new_store.state_id, "windowed_diff_unavailable", prev_state_id,
            )

        if diff.only_contains_updates:
            return ListChange(
                action=ChangeAction.UPDATE,
                total_count=new_total,
                new_state_id=new_store.state_id,
                prev_state_id=prev_state_id,
                diff=diff,
                updates=set(diff.updates),
            )
        return ListChange(
            action=ChangeAction.APPLY_DIFF,
            total_count=new_total,
            new_state_id=new_store.state_id,
            prev_state_id=prev_state_id,
            diff=diff,
        )


def _dump_change(change: ListChange) -> None:
    """Write a planned change to stderr."""
    print(f"[lazydiff] List change: {change.action.value}", file=sys.stderr)
    if change.reason is not None:
        print(f"[lazydiff] Reason: {change.reason}", file=sys.stderr)
    if change.diff is not None:
        print(change.diff.debug_change_summary(), file=sys.stderr)
