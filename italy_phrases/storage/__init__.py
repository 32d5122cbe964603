"""Storage layer for persisted app state."""

from .key_value_store import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore
from .phrase_repository import PhraseRepository, decode_phrases, encode_phrases

__all__ = [
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "PhraseRepository",
    "decode_phrases",
    "encode_phrases",
]
