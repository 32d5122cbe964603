"""Integrations for external services and libraries."""

from .kokoro_speech import KokoroSpeechService, Utterance, play_with_sounddevice
from .model_manager import ModelManager

__all__ = [
    "KokoroSpeechService",
    "ModelManager",
    "Utterance",
    "play_with_sounddevice",
]
