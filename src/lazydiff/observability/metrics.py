"""Metrics hook protocol and no-op default implementation.

The change planner reports what it decided and how long diffing took.  By
default a :class:`NoopMetricsHook` discards everything; supply any object
satisfying :class:`MetricsHook` through
:attr:`LazyDiffConfig.metrics <lazydiff.config.LazyDiffConfig.metrics>` to
forward the data points to StatsD, Prometheus, Datadog, etc.

Emitted metric names:

* ``lazydiff.list_change_total``  -- counter, tagged ``action`` / ``reason``
* ``lazydiff.diff_duration_ms``   -- timing of the windowed diff
* ``lazydiff.window_size``        -- gauge, items in the working range
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsHook(Protocol):
    """Protocol that any metrics backend must satisfy.

    All methods accept an optional *tags* dict of string keys and values.
    """

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Increment a counter metric."""
        ...

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Record a duration in milliseconds."""
        ...

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        """Set a gauge metric to an absolute value."""
        ...


class NoopMetricsHook:
    """Metrics backend that silently discards all data points."""

    __slots__ = ()

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        pass
