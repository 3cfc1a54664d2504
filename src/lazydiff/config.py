"""Configuration for lazydiff change planning.

:class:`LazyDiffConfig` is a dataclass that captures every tuneable knob
used by :class:`~lazydiff.changes.ChangePlanner`.  The diff functions
themselves are pure and take no configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_MAX_TOTAL_COUNT_CHANGE = 1000
"""Total-count changes of this size or larger always reload the list."""


@dataclass
class LazyDiffConfig:
    """Complete configuration for a change planner.

    Every parameter has a default, so ``LazyDiffConfig()`` is valid.

    Parameters
    ----------
    max_total_count_change:
        If the total item count changes by this many items or more, skip
        diffing and plan a full reload.  Must be positive.
    prefetch_enabled:
        Widen the visible range with :func:`~lazydiff.diff.padding.padded_range`
        before diffing, so items the consumer has already prepared just
        outside the viewport are diffed too.
    metrics:
        A :class:`~lazydiff.observability.MetricsHook` implementation.
        ``None`` uses :class:`~lazydiff.observability.NoopMetricsHook`.
    debug_dump_diff:
        Write every planned change to *stderr*.
    """

    max_total_count_change: int = DEFAULT_MAX_TOTAL_COUNT_CHANGE

    prefetch_enabled: bool = False

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_diff: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_total_count_change <= 0:
            raise ValueError(
                f"max_total_count_change must be > 0, got {self.max_total_count_change}"
            )
