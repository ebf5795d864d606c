# Path: src/config/constants.py
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[2]


CONFIG_PATH = PROJECT_ROOT / "src" / "config"
DEFAULT_CONFIG_FILE = CONFIG_PATH / "sort_config.yaml"

LOGS_DIR = PROJECT_ROOT / "logs"

CONFIG_ENV_VAR = "ALNUMSORT_CONFIG"
