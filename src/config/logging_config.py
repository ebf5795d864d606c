# Path: src/config/logging_config.py
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from src.config.constants import LOGS_DIR


def setup_logging(log_filename: str, log_dir: Path = LOGS_DIR):
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / log_filename

    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.setLevel(logging.DEBUG)

    file_handler = RotatingFileHandler(
        log_file, maxBytes=5 * 1024 * 1024, backupCount=2, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    file_handler.setFormatter(file_formatter)

    # stdout carries sorted output, keep console logging on stderr
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_formatter = logging.Formatter("%(message)s")
    console_handler.setFormatter(console_formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    return log_file
