"""List reordering used by drag-and-drop moves."""
from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


def normalize_indices(indices: Iterable[int], length: int) -> list[int]:
    """Return unique source indices in ascending order.

    Raises IndexError when any index falls outside ``range(length)``.
    """
    normalized: set[int] = set()
    for raw_index in indices:
        index = int(raw_index)
        if not 0 <= index < length:
            raise IndexError(f"Move source index out of range: {index} (length={length})")
        normalized.add(index)
    return sorted(normalized)


def move_items(items: Sequence[T], from_indices: Iterable[int], to_index: int) -> list[T]:
    """Move the selected items as one block and return the new list.

    The selected items keep their relative order. ``to_index`` is the
    position of the block's first item in the result, counted in the list
    that remains once the selection is taken out; values past the end
    append. ``[A, B, C, D, E]`` with ``{0}`` moved to 3 gives
    ``[B, C, D, A, E]``.
    """
    source = normalize_indices(from_indices, len(items))
    if to_index < 0:
        raise IndexError(f"Move destination out of range: {to_index}")
    if not source:
        return list(items)
    selected = set(source)
    block = [items[index] for index in source]
    remaining = [item for index, item in enumerate(items) if index not in selected]
    insert_at = min(int(to_index), len(remaining))
    return remaining[:insert_at] + block + remaining[insert_at:]
