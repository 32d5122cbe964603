import uuid

import pytest

from italy_phrases.domain.defaults import DEFAULT_DIRECTIONS, default_directions
from italy_phrases.domain.phrase import Phrase, new_phrase


def test_phrases_compare_by_value_and_are_immutable():
    phrase_id = uuid.uuid4()
    first = Phrase(phrase_id, "Left", "Sinistra", "See-nee-strah")
    second = Phrase(phrase_id, "Left", "Sinistra", "See-nee-strah")

    assert first == second
    assert first != new_phrase("Left", "Sinistra", "See-nee-strah")
    with pytest.raises(AttributeError):
        first.label = "Right"


def test_phrase_dict_roundtrip_ignores_unknown_keys():
    phrase = new_phrase("Speed limit", "Limite di velocità", "Lee-mee-teh dee veh-loh-chee-tah")
    payload = phrase.to_dict()
    payload["extra"] = 1

    assert payload["id"] == str(phrase.id)
    assert Phrase.from_dict(payload) == phrase
    assert phrase.subtitle == "Limite di velocità • Lee-mee-teh dee veh-loh-chee-tah"


@pytest.mark.parametrize(
    "payload",
    [
        {"label": "Left", "translation": "Sinistra", "pronunciation": "x"},
        {"id": "not-a-uuid", "label": "Left", "translation": "Sinistra", "pronunciation": "x"},
        {"id": str(uuid.uuid4()), "label": 3, "translation": "Sinistra", "pronunciation": "x"},
        ["not", "an", "object"],
    ],
)
def test_phrase_from_dict_rejects_malformed_records(payload):
    with pytest.raises(ValueError):
        Phrase.from_dict(payload)


def test_default_directions_order_and_fresh_ids():
    first = default_directions()
    second = default_directions()

    assert len(first) == 10
    assert [(p.label, p.translation, p.pronunciation) for p in first] == list(DEFAULT_DIRECTIONS)
    assert first[0].label == "Left"
    assert first[-1].translation == "Giù"
    assert len({p.id for p in first}) == 10
    assert {p.id for p in first}.isdisjoint({p.id for p in second})
