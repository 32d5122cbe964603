"""Per-row speech playback."""

from __future__ import annotations

from ..constants import DEFAULT_SPEECH_RATE, SPEECH_LOCALE
from .ports import SpeechService


class SpeechTrigger:
    """Speaks text with a fixed locale and rate; keeps no playback state."""

    def __init__(
        self,
        service: SpeechService,
        *,
        locale: str = SPEECH_LOCALE,
        rate: float = DEFAULT_SPEECH_RATE,
    ) -> None:
        self.service = service
        self.locale = locale
        self.rate = float(rate)

    def speak(self, text: str) -> None:
        self.service.speak(str(text), self.locale, self.rate)
