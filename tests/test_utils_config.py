import os

from italy_phrases.config import load_config
from italy_phrases.utils import env_flag, parse_float_env, parse_int_env, resolve_path


def test_resolve_path_handles_relative_and_absolute(tmp_path):
    base_dir = str(tmp_path)
    relative = "nested/file.json"
    absolute = str(tmp_path / "absolute.json")

    assert resolve_path(relative, base_dir) == os.path.join(base_dir, relative)
    assert resolve_path(absolute, base_dir) == absolute


def test_parse_env_helpers_apply_default_and_bounds(monkeypatch):
    monkeypatch.setenv("INT_ENV_TEST", "not-a-number")
    assert parse_int_env("INT_ENV_TEST", 7, min_value=1, max_value=10) == 7
    monkeypatch.setenv("INT_ENV_TEST", "100")
    assert parse_int_env("INT_ENV_TEST", 7, min_value=1, max_value=10) == 10

    monkeypatch.setenv("FLOAT_ENV_TEST", "fast")
    assert parse_float_env("FLOAT_ENV_TEST", 0.45, min_value=0.1, max_value=2.0) == 0.45
    monkeypatch.setenv("FLOAT_ENV_TEST", "0.01")
    assert parse_float_env("FLOAT_ENV_TEST", 0.45, min_value=0.1, max_value=2.0) == 0.1

    monkeypatch.setenv("FLAG_ENV_TEST", " Yes ")
    assert env_flag("FLAG_ENV_TEST") is True
    monkeypatch.setenv("FLAG_ENV_TEST", "off")
    assert env_flag("FLAG_ENV_TEST", "1") is False


def test_load_config_reads_env(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("FILE_LOG_LEVEL", "error")
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("APP_STATE_PATH", str(tmp_path / "state" / "app_state.json"))
    monkeypatch.setenv("KOKORO_REPO_ID", "repo/test")
    monkeypatch.setenv("SPEECH_VOICE", "im_nicola")
    monkeypatch.setenv("SPEECH_RATE", "9")  # above max -> clamped
    monkeypatch.setenv("TTS_PREWARM_ENABLED", "0")
    monkeypatch.setenv("TTS_PREWARM_ASYNC", "false")
    monkeypatch.setenv("TORCH_NUM_THREADS", "4")

    config = load_config()

    assert config.log_level == "WARNING"
    assert config.file_log_level == "ERROR"
    assert os.path.isdir(config.log_dir)
    assert config.log_file.startswith(str(tmp_path / "logs"))
    assert config.app_state_path == str(tmp_path / "state" / "app_state.json")
    assert config.repo_id == "repo/test"
    assert config.speech_voice == "im_nicola"
    assert config.speech_rate == 2.0
    assert config.tts_prewarm_enabled is False
    assert config.tts_prewarm_async is False
    assert config.torch_num_threads == 4


def test_load_config_defaults(monkeypatch, tmp_path):
    for name in (
        "APP_STATE_PATH",
        "KOKORO_REPO_ID",
        "SPEECH_VOICE",
        "SPEECH_RATE",
        "TTS_PREWARM_ENABLED",
        "TTS_PREWARM_ASYNC",
        "TORCH_NUM_THREADS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))

    config = load_config()

    assert config.app_state_path.endswith(os.path.join("data", "app_state.json"))
    assert os.path.isabs(config.app_state_path)
    assert config.repo_id == "hexgrad/Kokoro-82M"
    assert config.speech_voice == "if_sara"
    assert config.speech_rate == 0.45
    assert config.tts_prewarm_enabled is True
    assert config.tts_prewarm_async is True
    assert config.torch_num_threads is None
