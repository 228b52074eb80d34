import json
import logging
import os

from .errors import MalformedConfigError

# ===============================
# CONFIG
# ===============================
APP_NAME = "ClickPath"
APP_VERSION = "0.1.0"
CONFIG_FILE = "config.json"
CLICK_PATH_FILE = "click_path.json"

# pynput does not swallow matched keys: no combos the OS already uses (Win+digit, Cmd+digit)
KEY_MODIFIER = "<ctrl>+<shift>"
KEY_MODIFIER_DISPLAY = "Ctrl+Shift"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

DEFAULT_CONFIG = {
    "click_path_file": CLICK_PATH_FILE,
    "log_level": "INFO",
}


def load_config(path=CONFIG_FILE):
    """Read the optional JSON config file on top of the defaults.

    Unknown keys are ignored. A missing file is not an error.
    """
    config = DEFAULT_CONFIG.copy()
    if not os.path.exists(path):
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise MalformedConfigError(f"Failed to read {path}: {e}") from e

    if not isinstance(data, dict):
        raise MalformedConfigError(f"{path} must contain a JSON object")

    for key in DEFAULT_CONFIG:
        if key in data:
            if not isinstance(data[key], str):
                raise MalformedConfigError(f"{path}: '{key}' must be a string")
            config[key] = data[key]
    return config


def setup_logging(level="INFO"):
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
