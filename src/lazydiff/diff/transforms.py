"""Pure transforms over a :class:`~lazydiff.models.DiffResult`.

Neither function mutates its argument; each returns a new result.
"""

from __future__ import annotations

from lazydiff.models import DiffResult


def for_batch_apply(result: DiffResult) -> DiffResult:
    """Rewrite *result* so it is safe to apply as a single batch.

    Many list views cannot reload a position and shift it in the same
    batch.  Every update is therefore expressed as a delete of the old
    index plus an insert of the new index:

    * A move whose source was updated becomes delete ``from`` + insert
      ``to``, and the move is dropped.
    * Any other updated identifier found in both ``old_map`` and
      ``new_map`` becomes delete old index + insert new index.

    ``updates`` is always empty in the returned result.
    """
    converted = result.copy()

    kept_moves = []
    for move in converted.moves:
        if move.from_index in converted.updates:
            converted.updates.discard(move.from_index)
            converted.deletes.add(move.from_index)
            converted.inserts.add(move.to_index)
        else:
            kept_moves.append(move)
    converted.moves = kept_moves

    for key, old_index in converted.old_map.items():
        new_index = converted.new_map.get(key)
        if old_index in converted.updates and new_index is not None:
            converted.deletes.add(old_index)
            converted.inserts.add(new_index)

    converted.updates.clear()
    return converted


def shift_indices(result: DiffResult, offset: int) -> DiffResult:
    """Return a copy of *result* with every index moved by *offset*.

    Used to turn window-local positions into positions in the full list.

    .. note::
       ``old_map`` and ``new_map`` are **not** shifted, so
       :meth:`~lazydiff.models.DiffResult.old_index_for` and
       :meth:`~lazydiff.models.DiffResult.new_index_for` keep returning
       window-local indices.
    """
    return DiffResult(
        inserts={i + offset for i in result.inserts},
        deletes={i + offset for i in result.deletes},
        updates={i + offset for i in result.updates},
        moves=[move.shifted(offset) for move in result.moves],
        old_map=dict(result.old_map),
        new_map=dict(result.new_map),
    )
