"""Runtime dependency container for the desktop application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..config import AppConfig
    from .bootstrap import AppServices


@dataclass
class AppContext:
    """Holds runtime dependencies assembled at startup."""

    config: "AppConfig"
    logger: Any
    cuda_available: bool
    skip_app_init: bool
    key_value_store: Any = None
    phrase_repository: Any = None
    model_manager: Any = None
    speech_service: Any = None
    speech_trigger: Any = None
    controller: Any = None
    app: Any = None

    def bind_services(self, services: "AppServices") -> None:
        self.key_value_store = services.key_value_store
        self.phrase_repository = services.phrase_repository
        self.model_manager = services.model_manager
        self.speech_service = services.speech_service
        self.speech_trigger = services.speech_trigger
        self.controller = services.controller
        self.app = services.app
