"""Desktop entrypoint for Italy Phrases."""

from __future__ import annotations

import platform
import sys
import threading

import torch

from italy_phrases.application.context import AppContext
from italy_phrases.config import load_config
from italy_phrases.constants import SPEECH_LOCALE
from italy_phrases.domain.voice import resolve_voice
from italy_phrases.logging_config import setup_logging
from italy_phrases.runtime import CUDA_AVAILABLE
from italy_phrases.utils import env_flag

CONFIG = load_config()
logger = setup_logging(CONFIG)

SKIP_APP_INIT = env_flag("PHRASES_SKIP_APP_INIT")

logger.info("Starting app")
logger.info("Log file: %s", CONFIG.log_file)
logger.debug(
    "Config: LOG_LEVEL=%s FILE_LOG_LEVEL=%s LOG_DIR=%s APP_STATE_PATH=%s "
    "KOKORO_REPO_ID=%s SPEECH_VOICE=%s SPEECH_RATE=%s TTS_PREWARM_ENABLED=%s "
    "TTS_PREWARM_ASYNC=%s TORCH_NUM_THREADS=%s",
    CONFIG.log_level,
    CONFIG.file_log_level,
    CONFIG.log_dir,
    CONFIG.app_state_path,
    CONFIG.repo_id,
    CONFIG.speech_voice,
    CONFIG.speech_rate,
    CONFIG.tts_prewarm_enabled,
    CONFIG.tts_prewarm_async,
    CONFIG.torch_num_threads,
)


def _configure_torch_runtime() -> None:
    if not CONFIG.torch_num_threads:
        return
    try:
        torch.set_num_threads(CONFIG.torch_num_threads)
        logger.info("Torch CPU threads set to %s", CONFIG.torch_num_threads)
    except Exception:
        logger.exception("Failed to set TORCH_NUM_THREADS=%s", CONFIG.torch_num_threads)


_configure_torch_runtime()

logger.info("CUDA_AVAILABLE=%s", CUDA_AVAILABLE)
logger.debug("Python version: %s", sys.version.replace("\n", " "))
logger.debug("Platform: %s", platform.platform())
logger.debug("Torch version: %s", torch.__version__)

APP_CONTEXT = AppContext(
    config=CONFIG,
    logger=logger,
    cuda_available=CUDA_AVAILABLE,
    skip_app_init=SKIP_APP_INIT,
)
_PREWARM_LOCK = threading.Lock()
_PREWARM_STARTED = False


def _prewarm_runtime() -> None:
    global _PREWARM_STARTED
    if SKIP_APP_INIT:
        return
    if not CONFIG.tts_prewarm_enabled:
        return
    with _PREWARM_LOCK:
        if _PREWARM_STARTED:
            return
        _PREWARM_STARTED = True

    def run() -> None:
        model_manager = APP_CONTEXT.model_manager
        if model_manager is None:
            return
        warm_voice = resolve_voice(SPEECH_LOCALE, CONFIG.speech_voice)
        try:
            model_manager.prewarm(warm_voice, use_gpu=CUDA_AVAILABLE)
            logger.info("TTS prewarm complete: voice=%s use_gpu=%s", warm_voice, CUDA_AVAILABLE)
        except Exception:
            logger.exception("TTS prewarm failed: voice=%s use_gpu=%s", warm_voice, CUDA_AVAILABLE)

    if CONFIG.tts_prewarm_async:
        worker = threading.Thread(target=run, name="tts-prewarm", daemon=True)
        worker.start()
        logger.info("Started asynchronous TTS prewarm")
    else:
        logger.info("Running synchronous TTS prewarm")
        run()


if not SKIP_APP_INIT:
    import kokoro

    from italy_phrases.application.bootstrap import initialize_app_services

    logger.debug("Kokoro version: %s", kokoro.__version__)
    services = initialize_app_services(
        config=CONFIG,
        cuda_available=CUDA_AVAILABLE,
        logger=logger,
    )
    APP_CONTEXT.bind_services(services)
    _prewarm_runtime()
else:
    logger.info("PHRASES_SKIP_APP_INIT enabled; skipping speech and UI initialization")


def launch() -> None:
    if SKIP_APP_INIT:
        logger.info("PHRASES_SKIP_APP_INIT enabled; launch skipped")
        return
    desktop_app = APP_CONTEXT.app
    if desktop_app is None:
        raise RuntimeError("Desktop app is not initialized.")
    logger.info("Launching desktop app")
    desktop_app.launch()


if __name__ == "__main__":
    launch()
