"""Logging configuration for the app."""

from __future__ import annotations

import logging

from .config import AppConfig


def setup_logging(config: AppConfig) -> logging.Logger:
    logger = logging.getLogger("phrases_app")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))

    file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
    file_handler.setLevel(config.file_log_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(module)s:%(lineno)d | "
            "%(funcName)s | %(message)s"
        )
    )

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    logging.captureWarnings(True)
    # Library chatter (model downloads, deprecation warnings) goes to the file only.
    for name in ("py.warnings", "huggingface_hub"):
        side_logger = logging.getLogger(name)
        side_logger.setLevel(logging.DEBUG)
        side_logger.propagate = False
        for handler in list(side_logger.handlers):
            side_logger.removeHandler(handler)
        side_logger.addHandler(file_handler)
    return logger
