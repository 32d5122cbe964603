"""User interface layer.

The Tk screen lives in :mod:`.tkinter_app`; this package root only exports
the toolkit-neutral pieces.
"""

from .common import (
    APP_TITLE,
    COLLAPSE_LABEL,
    SPEAKER_ICON,
    drop_index,
    edit_button_label,
    phrase_row_text,
    section_header_text,
)
from .desktop_types import DesktopApp

__all__ = [
    "APP_TITLE",
    "COLLAPSE_LABEL",
    "DesktopApp",
    "SPEAKER_ICON",
    "drop_index",
    "edit_button_label",
    "phrase_row_text",
    "section_header_text",
]
