"""UI-neutral helpers shared by desktop UI implementations."""
from __future__ import annotations

from typing import Sequence

from ..domain.phrase import Phrase

APP_TITLE = "Italy Phrases"
COLLAPSE_LABEL = "Collapse"
SPEAKER_ICON = "\U0001f50a"
DRAG_HANDLE = "≡"


def edit_button_label(editing: bool) -> str:
    return "Done" if editing else "Edit"


def section_header_text(title: str, expanded: bool) -> str:
    marker = "v" if expanded else ">"
    return f"{marker} {title}"


def phrase_row_text(phrase: Phrase) -> tuple[str, str]:
    """Return the (title, caption) pair shown for one row."""
    return phrase.label, phrase.subtitle


def drop_index(pointer_y: float, row_spans: Sequence[tuple[float, float]]) -> int:
    """Map a pointer position to the row index a dragged row should land on.

    ``row_spans`` holds the (top, bottom) screen coordinates of every row in
    display order. Positions above the first row land on 0 and positions
    below the last row land on the last index.
    """
    if not row_spans:
        return 0
    for index, (top, bottom) in enumerate(row_spans):
        if pointer_y < top:
            return max(0, index - 1)
        if top <= pointer_y < bottom:
            return index
    return len(row_spans) - 1
