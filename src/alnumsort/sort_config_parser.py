# Path: src/alnumsort/sort_config_parser.py
import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from src.config.constants import CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE

__all__ = ["CONFIG_SECTION", "DEFAULTS", "load_config", "resolve_config_path"]

log = logging.getLogger(__name__)

CONFIG_SECTION = "alnumsort"

DEFAULTS = {
    "log-dir": "logs",
    "log-file": "alnumsort.log",
    "strict": False,
    "unique": False,
    "reverse": False,
    "progress": False,
}


def resolve_config_path(cli_path: str | None = None) -> Path:
    if cli_path:
        return Path(cli_path)

    load_dotenv()
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    return DEFAULT_CONFIG_FILE


def load_config(config_path: Path) -> dict:
    try:
        log.debug(f"Reading config file: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict) or CONFIG_SECTION not in config:
            raise ValueError(f"Missing top-level key '{CONFIG_SECTION}'.")

        sort_config = config[CONFIG_SECTION] or {}
        if not isinstance(sort_config, dict):
            raise ValueError(f"'{CONFIG_SECTION}' must be a mapping.")

        unknown = sorted(set(sort_config) - set(DEFAULTS))
        if unknown:
            raise ValueError(f"Unknown keys in '{CONFIG_SECTION}': {', '.join(unknown)}")

        for key, default in DEFAULTS.items():
            if key in sort_config and not isinstance(sort_config[key], type(default)):
                raise ValueError(
                    f"'{key}' must be of type {type(default).__name__}, "
                    f"got {type(sort_config[key]).__name__}."
                )

        return {**DEFAULTS, **sort_config}

    except FileNotFoundError:
        log.error(f"Error: config file not found at '{config_path}'.")
        raise
    except yaml.YAMLError as e:
        log.error(f"Error: invalid YAML in config file: {e}")
        raise
    except ValueError as e:
        log.error(f"Error: invalid configuration. {e}")
        raise
