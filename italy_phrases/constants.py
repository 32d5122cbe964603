"""Fixed values shared by the storage, speech and UI layers."""

SAMPLE_RATE = 24000
PHRASES_STORAGE_KEY = "orderedPhrases"
SPEECH_LOCALE = "it-IT"
DEFAULT_SPEECH_RATE = 0.45
DEFAULT_SPEECH_VOICE = "if_sara"
