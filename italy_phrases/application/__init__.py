"""Application layer orchestration.

Service assembly lives in :mod:`.bootstrap`, which pulls in the speech model
and Tk stacks; import it directly where those are wanted.
"""

from .context import AppContext
from .phrase_list_controller import PhraseListController
from .ports import PhraseStore, SpeechService
from .speech_trigger import SpeechTrigger

__all__ = [
    "AppContext",
    "PhraseListController",
    "PhraseStore",
    "SpeechService",
    "SpeechTrigger",
]
