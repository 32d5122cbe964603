import logging
from pathlib import Path

from italy_phrases.config import AppConfig
from italy_phrases.logging_config import setup_logging


def _build_config(tmp_path: Path) -> AppConfig:
    log_dir = tmp_path / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return AppConfig(
        log_level="INFO",
        file_log_level="DEBUG",
        log_dir=str(log_dir),
        log_file=str(log_dir / "app.log"),
        app_state_path=str(tmp_path / "data" / "app_state.json"),
    )


def test_setup_logging_replaces_handlers(tmp_path):
    config = _build_config(tmp_path)
    logger = setup_logging(config)
    logger_again = setup_logging(config)

    assert logger is logger_again
    assert logger.name == "phrases_app"
    assert len(logger.handlers) == 2
    assert Path(config.log_file).exists()
    assert len(logging.getLogger("huggingface_hub").handlers) == 1
    assert logging.getLogger("py.warnings").propagate is False


def test_setup_logging_writes_debug_to_file_only(tmp_path):
    config = _build_config(tmp_path)
    logger = setup_logging(config)

    logger.debug("Saved %s phrase(s)", 10)
    for handler in logger.handlers:
        handler.flush()

    content = Path(config.log_file).read_text(encoding="utf-8")
    assert "Saved 10 phrase(s)" in content
    assert "DEBUG" in content
    console = [h for h in logger.handlers if not isinstance(h, logging.FileHandler)][0]
    assert console.level == logging.INFO
