"""Error hierarchy for lazydiff.

Every public error class inherits from :class:`LazyDiffError`.  Each
carries a machine-readable ``code`` (from :class:`ErrorCode`), a
human-readable ``message``, an optional structured ``context`` dict, and an
optional ``cause`` (chained exception).

Only programming and integrity problems raise.  Expected outcomes, such as
a window that cannot be diffed, are reported by returning ``None``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error lazydiff can raise."""

    INTEGRITY_ERROR = "INTEGRITY_ERROR"
    RANGE_ERROR = "RANGE_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class LazyDiffError(Exception):
    """Base exception for all lazydiff errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Subclasses
# ---------------------------------------------------------------------------

class LazyDiffIntegrityError(LazyDiffError):
    """A diff result failed its own consistency check.

    This indicates a defect, usually an item whose ``diff_identifier`` is
    not stable for the duration of the diff.

    Context keys: ``old_count``, ``new_count``, ``inserts``, ``deletes``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INTEGRITY_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class LazyDiffRangeError(LazyDiffError):
    """An index range was constructed with invalid bounds.

    Context keys: ``lower``, ``upper``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.RANGE_ERROR,
            message=message,
            context=context,
            cause=cause,
        )
