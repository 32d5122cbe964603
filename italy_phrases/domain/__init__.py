"""Domain model for phrases, reordering and voice selection."""

from .defaults import DEFAULT_DIRECTIONS, DIRECTIONS_SECTION_TITLE, default_directions
from .phrase import Phrase, new_phrase
from .reorder import move_items, normalize_indices
from .voice import lang_code_for_locale, normalize_locale, resolve_voice

__all__ = [
    "DEFAULT_DIRECTIONS",
    "DIRECTIONS_SECTION_TITLE",
    "Phrase",
    "default_directions",
    "lang_code_for_locale",
    "move_items",
    "new_phrase",
    "normalize_indices",
    "normalize_locale",
    "resolve_voice",
]
