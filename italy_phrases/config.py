"""Configuration loading from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from .constants import DEFAULT_SPEECH_RATE, DEFAULT_SPEECH_VOICE
from .utils import env_flag, parse_float_env, parse_int_env, resolve_path


@dataclass(frozen=True)
class AppConfig:
    log_level: str
    file_log_level: str
    log_dir: str
    log_file: str
    app_state_path: str
    repo_id: str = "hexgrad/Kokoro-82M"
    speech_voice: str = DEFAULT_SPEECH_VOICE
    speech_rate: float = DEFAULT_SPEECH_RATE
    tts_prewarm_enabled: bool = True
    tts_prewarm_async: bool = True
    torch_num_threads: Optional[int] = None


def load_config() -> AppConfig:
    base_dir = str(Path(__file__).resolve().parents[1])
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    file_log_level = os.getenv("FILE_LOG_LEVEL", "DEBUG").upper()
    log_dir = resolve_path(os.getenv("LOG_DIR", "logs"), base_dir)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(
        log_dir, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.log"
    )
    app_state_path = resolve_path(
        os.getenv("APP_STATE_PATH", "data/app_state.json").strip(),
        base_dir,
    )
    repo_id = os.getenv("KOKORO_REPO_ID", "hexgrad/Kokoro-82M")
    speech_voice = os.getenv("SPEECH_VOICE", DEFAULT_SPEECH_VOICE).strip() or DEFAULT_SPEECH_VOICE
    speech_rate = parse_float_env(
        "SPEECH_RATE",
        DEFAULT_SPEECH_RATE,
        min_value=0.1,
        max_value=2.0,
    )
    tts_prewarm_enabled = env_flag("TTS_PREWARM_ENABLED", "1")
    tts_prewarm_async = env_flag("TTS_PREWARM_ASYNC", "1")
    torch_num_threads = parse_int_env("TORCH_NUM_THREADS", 0, min_value=0, max_value=512)
    if torch_num_threads == 0:
        torch_num_threads = None
    return AppConfig(
        log_level=log_level,
        file_log_level=file_log_level,
        log_dir=log_dir,
        log_file=log_file,
        app_state_path=app_state_path,
        repo_id=repo_id,
        speech_voice=speech_voice,
        speech_rate=speech_rate,
        tts_prewarm_enabled=tts_prewarm_enabled,
        tts_prewarm_async=tts_prewarm_async,
        torch_num_threads=torch_num_threads,
    )
