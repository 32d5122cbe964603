"""Application bootstrap assembly for storage, speech, and UI services."""
from __future__ import annotations

from dataclasses import dataclass

from ..config import AppConfig
from ..constants import SPEECH_LOCALE
from ..domain.voice import resolve_voice
from ..integrations.kokoro_speech import KokoroSpeechService
from ..integrations.model_manager import ModelManager
from ..storage.key_value_store import JsonFileKeyValueStore
from ..storage.phrase_repository import PhraseRepository
from ..ui.desktop_types import DesktopApp
from ..ui.tkinter_app import create_tkinter_app
from .phrase_list_controller import PhraseListController
from .speech_trigger import SpeechTrigger


@dataclass(frozen=True)
class AppServices:
    key_value_store: JsonFileKeyValueStore
    phrase_repository: PhraseRepository
    model_manager: ModelManager
    speech_service: KokoroSpeechService
    speech_trigger: SpeechTrigger
    controller: PhraseListController
    app: DesktopApp


def initialize_app_services(
    *,
    config: AppConfig,
    cuda_available: bool,
    logger,
) -> AppServices:
    """Construct all runtime services and return a typed service bundle."""
    key_value_store = JsonFileKeyValueStore(config.app_state_path, logger_instance=logger)
    phrase_repository = PhraseRepository(key_value_store, logger_instance=logger)
    logger.info("App state path: %s", config.app_state_path)

    model_manager = ModelManager(config.repo_id, cuda_available, logger)
    speech_service = KokoroSpeechService(
        model_manager,
        logger,
        preferred_voice=resolve_voice(SPEECH_LOCALE, config.speech_voice),
        use_gpu=cuda_available,
    )
    speech_trigger = SpeechTrigger(
        speech_service,
        locale=SPEECH_LOCALE,
        rate=config.speech_rate,
    )
    logger.info(
        "Speech: locale=%s voice=%s rate=%.2f",
        SPEECH_LOCALE,
        speech_service.preferred_voice,
        speech_trigger.rate,
    )

    controller = PhraseListController(phrase_repository, speech_trigger, logger)
    app = create_tkinter_app(config=config, controller=controller, logger=logger)

    return AppServices(
        key_value_store=key_value_store,
        phrase_repository=phrase_repository,
        model_manager=model_manager,
        speech_service=speech_service,
        speech_trigger=speech_trigger,
        controller=controller,
        app=app,
    )
