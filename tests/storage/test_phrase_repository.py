import json
from pathlib import Path

import pytest

from italy_phrases.domain.defaults import default_directions
from italy_phrases.domain.phrase import new_phrase
from italy_phrases.storage.key_value_store import JsonFileKeyValueStore, MemoryKeyValueStore
from italy_phrases.storage.phrase_repository import PhraseRepository, decode_phrases, encode_phrases


class _Logger:
    def __init__(self):
        self.warnings = []
        self.exceptions = []
        self.debugs = []

    def warning(self, message, *args):
        self.warnings.append(message % args if args else message)

    def exception(self, message, *args):
        self.exceptions.append(message % args if args else message)

    def debug(self, message, *args):
        self.debugs.append(message % args if args else message)


def test_phrase_repository_roundtrip_keeps_content_and_order(tmp_path: Path):
    path = tmp_path / "data" / "app_state.json"
    logger = _Logger()
    repo = PhraseRepository(JsonFileKeyValueStore(str(path), logger_instance=logger), logger_instance=logger)
    phrases = list(reversed(default_directions()))

    repo.save(phrases)

    assert path.is_file()
    assert repo.load() == phrases
    reopened = PhraseRepository(JsonFileKeyValueStore(str(path), logger_instance=logger), logger_instance=logger)
    assert reopened.load() == phrases


def test_phrase_repository_stores_records_in_named_slot():
    store = MemoryKeyValueStore()
    phrase = new_phrase("Go", "Vai", "Vye")

    PhraseRepository(store, logger_instance=_Logger()).save([phrase])

    records = json.loads(store.values["orderedPhrases"])
    assert records == [
        {
            "id": str(phrase.id),
            "label": "Go",
            "translation": "Vai",
            "pronunciation": "Vye",
        }
    ]


@pytest.mark.parametrize(
    "stored",
    [
        None,
        "",
        "[]",
        "{ invalid",
        '{"id": "x"}',
        '[{"label": "Left"}]',
        pytest.param("[" * 100000 + "]" * 100000, id="deeply-nested"),
    ],
)
def test_phrase_repository_treats_missing_empty_or_corrupt_slot_as_absent(stored):
    logger = _Logger()
    store = MemoryKeyValueStore({} if stored is None else {"orderedPhrases": stored})

    assert PhraseRepository(store, logger_instance=logger).load() is None
    assert logger.exceptions == []


def test_phrase_repository_load_never_raises_on_store_failure():
    class BrokenStore:
        def get(self, key):
            raise OSError("disk gone")

        def set(self, key, value):
            raise OSError("disk gone")

    logger = _Logger()
    repo = PhraseRepository(BrokenStore(), logger_instance=logger)

    assert repo.load() is None
    assert logger.exceptions
    with pytest.raises(OSError):
        repo.save(default_directions())


def test_decode_phrases_rejects_non_array_payload():
    phrases = default_directions()[:2]

    assert decode_phrases(encode_phrases(phrases)) == phrases
    with pytest.raises(ValueError, match="JSON array"):
        decode_phrases('{"orderedPhrases": []}')
    with pytest.raises(ValueError, match="nested too deeply"):
        decode_phrases("[" * 100000 + "]" * 100000)
