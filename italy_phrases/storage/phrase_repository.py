"""Persistent phrase ordering."""

from __future__ import annotations

import json
import logging
from typing import Sequence

from ..constants import PHRASES_STORAGE_KEY
from ..domain.phrase import Phrase
from .key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


def encode_phrases(phrases: Sequence[Phrase]) -> str:
    return json.dumps([phrase.to_dict() for phrase in phrases], ensure_ascii=False)


def decode_phrases(raw_text: str) -> list[Phrase]:
    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON: {exc.msg}") from exc
    except RecursionError as exc:
        raise ValueError("Stored phrases are nested too deeply.") from exc
    if not isinstance(payload, list):
        raise ValueError("Stored phrases must be a JSON array.")
    return [Phrase.from_dict(record) for record in payload]


class PhraseRepository:
    def __init__(
        self,
        store: KeyValueStore,
        key: str = PHRASES_STORAGE_KEY,
        logger_instance=None,
    ) -> None:
        self.store = store
        self.key = key
        self.logger = logger_instance or logger

    def load(self) -> list[Phrase] | None:
        """Return the saved phrases, or None when nothing usable is stored."""
        try:
            raw_text = self.store.get(self.key)
        except Exception:
            self.logger.exception("Failed to read saved phrases: key=%s", self.key)
            return None
        if not raw_text or not raw_text.strip():
            return None
        try:
            phrases = decode_phrases(raw_text)
        except ValueError as exc:
            self.logger.warning("Ignoring saved phrases: %s", exc)
            return None
        if not phrases:
            return None
        self.logger.debug("Loaded %s saved phrase(s)", len(phrases))
        return phrases

    def save(self, phrases: Sequence[Phrase]) -> None:
        self.store.set(self.key, encode_phrases(phrases))
        self.logger.debug("Saved %s phrase(s)", len(phrases))
