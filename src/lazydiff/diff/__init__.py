"""List diffing.

Exports
-------
list_diff
    Exact identity-based diff of two full sequences.
windowed_diff
    Approximate diff of two large stores over a visible range.
for_batch_apply
    Rewrite updates as delete+insert so a result is batch-safe.
shift_indices
    Move every index of a result by a constant offset.
padded_range
    Widen a visible range for prefetching.
range_from_indices
    Closed range covering a set of visible indices.
"""

from .engine import list_diff
from .padding import padded_range, range_from_indices
from .transforms import for_batch_apply, shift_indices
from .window import windowed_diff

__all__ = [
    "for_batch_apply",
    "list_diff",
    "padded_range",
    "range_from_indices",
    "shift_indices",
    "windowed_diff",
]
