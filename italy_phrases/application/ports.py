"""Application-level ports for persistence and speech."""

from __future__ import annotations

from typing import Protocol, Sequence

from ..domain.phrase import Phrase


class PhraseStore(Protocol):
    """Port for loading and saving the ordered phrase list."""

    def load(self) -> list[Phrase] | None: ...

    def save(self, phrases: Sequence[Phrase]) -> None: ...


class SpeechService(Protocol):
    """Port for fire-and-forget speech synthesis."""

    def speak(self, text: str, locale: str, rate: float) -> None: ...
