"""Ordered phrase list state and reordering."""

from __future__ import annotations

from typing import Callable, Iterable

from ..domain.defaults import default_directions
from ..domain.phrase import Phrase
from ..domain.reorder import move_items, normalize_indices
from .ports import PhraseStore
from .speech_trigger import SpeechTrigger

PhrasesListener = Callable[[list[Phrase]], None]


class PhraseListController:
    def __init__(
        self,
        store: PhraseStore,
        speech: SpeechTrigger,
        logger,
        *,
        defaults_factory: Callable[[], list[Phrase]] = default_directions,
    ) -> None:
        self.store = store
        self.speech = speech
        self.logger = logger
        self.defaults_factory = defaults_factory
        self._phrases: list[Phrase] = []
        self._listeners: list[PhrasesListener] = []
        self.is_expanded = False
        self.is_editing = False

    @property
    def phrases(self) -> list[Phrase]:
        return list(self._phrases)

    def add_listener(self, listener: PhrasesListener) -> None:
        self._listeners.append(listener)

    def initialize(self) -> list[Phrase]:
        """Load the saved order, falling back to the default directions."""
        stored = self.store.load()
        if stored:
            self._phrases = list(stored)
            self.logger.info("Restored %s saved phrase(s)", len(self._phrases))
        else:
            self._phrases = self.defaults_factory()
            self.logger.info("No saved order; using %s default phrase(s)", len(self._phrases))
        self._notify()
        return self.phrases

    def move(self, from_indices: Iterable[int], to_index: int) -> bool:
        """Move the selected rows to ``to_index`` and persist the new order.

        Returns False for an empty selection, which changes nothing and
        does not save.
        """
        source = normalize_indices(from_indices, len(self._phrases))
        if not source:
            return False
        self._phrases = move_items(self._phrases, source, to_index)
        self.logger.debug("Moved rows %s to %s", source, to_index)
        self._save()
        self._notify()
        return True

    def speak_phrase(self, index: int) -> None:
        phrase = self._phrases[index]
        self.logger.debug("Speak requested: label=%s", phrase.label)
        self.speech.speak(phrase.translation)

    def set_expanded(self, expanded: bool) -> None:
        self.is_expanded = bool(expanded)

    def toggle_expanded(self) -> bool:
        self.set_expanded(not self.is_expanded)
        return self.is_expanded

    def collapse(self) -> None:
        self.set_expanded(False)

    def toggle_editing(self) -> bool:
        self.is_editing = not self.is_editing
        return self.is_editing

    def _save(self) -> None:
        try:
            self.store.save(self._phrases)
        except Exception:
            self.logger.exception("Failed to save phrase order")

    def _notify(self) -> None:
        snapshot = self.phrases
        for listener in list(self._listeners):
            listener(snapshot)
