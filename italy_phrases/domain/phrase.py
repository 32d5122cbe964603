"""Phrase records and their JSON-friendly mapping form."""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, Mapping

PHRASE_FIELDS = ("id", "label", "translation", "pronunciation")


@dataclass(frozen=True)
class Phrase:
    """One label/translation/pronunciation entry."""

    id: uuid.UUID
    label: str
    translation: str
    pronunciation: str

    @property
    def subtitle(self) -> str:
        return f"{self.translation} • {self.pronunciation}"

    def to_dict(self) -> dict[str, str]:
        return {
            "id": str(self.id),
            "label": self.label,
            "translation": self.translation,
            "pronunciation": self.pronunciation,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Phrase":
        """Build a phrase from a decoded record.

        Every field is required and must be a string; ``id`` must parse as a
        UUID. Unknown keys are ignored.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Phrase record must be an object.")
        values: dict[str, str] = {}
        for field_name in PHRASE_FIELDS:
            if field_name not in payload:
                raise ValueError(f"Phrase record is missing '{field_name}'.")
            value = payload[field_name]
            if not isinstance(value, str):
                raise ValueError(f"Phrase field '{field_name}' must be a string.")
            values[field_name] = value
        try:
            phrase_id = uuid.UUID(values["id"])
        except ValueError as exc:
            raise ValueError(f"Invalid phrase id: {values['id']!r}") from exc
        return cls(
            id=phrase_id,
            label=values["label"],
            translation=values["translation"],
            pronunciation=values["pronunciation"],
        )


def new_phrase(label: str, translation: str, pronunciation: str) -> Phrase:
    return Phrase(
        id=uuid.uuid4(),
        label=label,
        translation=translation,
        pronunciation=pronunciation,
    )
