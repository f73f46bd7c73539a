"""Configuration for stackcpu: defaults, a JSON config file and the environment."""

import json
import logging
import os
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigError

load_dotenv()

log = logging.getLogger(__name__)

# -------------------- DEFAULT CONFIGURATION --------------------
DEFAULT_CONFIG = {
    "STACK_HINT": 4096 * 10,  # Working-set hint for the operand stack
    "LOG_LEVEL": "info",
    "LOG_FILE": None,  # If not provided, logs go to stdout
}

ENV_PREFIX = "STACKCPU_"


def read_config(config_path: Optional[str] = None) -> dict:
    """
    Builds the configuration. The defaults are overridden by the JSON config file
    (when a path is given), which in turn is overridden by STACKCPU_* environment
    variables, e.g. STACKCPU_STACK_HINT=1024.
    """
    config = DEFAULT_CONFIG.copy()

    if config_path is not None:
        config.update(_read_config_file(config_path))

    for key in DEFAULT_CONFIG:
        env_value = os.getenv(ENV_PREFIX + key)
        if env_value is not None:
            config[key] = env_value

    config["STACK_HINT"] = _parse_stack_hint(config["STACK_HINT"])
    return config


def _read_config_file(config_path: str) -> dict:
    if not os.path.exists(config_path):
        log.error("Config file %s does not exist.", config_path)
        raise ConfigError(f"config file {config_path} does not exist")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            content = f.read().strip()
            user_config = json.loads(content) if content else {}
    except (OSError, ValueError) as e:
        log.error("Error parsing config file %s: %s", config_path, e, exc_info=True)
        raise ConfigError(f"cannot parse config file {config_path}: {e}") from e

    if not isinstance(user_config, dict):
        log.error("Config file %s must contain a JSON object.", config_path)
        raise ConfigError(f"config file {config_path} must contain a JSON object")
    return user_config


def _parse_stack_hint(raw) -> int:
    hint = None
    if not isinstance(raw, bool) and isinstance(raw, (int, str)):
        try:
            hint = int(raw)
        except ValueError:
            pass
    if hint is None:
        log.error("STACK_HINT must be an integer, got %r.", raw)
        raise ConfigError(f"STACK_HINT must be an integer, got {raw!r}")
    if hint < 0:
        log.error("STACK_HINT must not be negative, got %d.", hint)
        raise ConfigError(f"STACK_HINT must not be negative, got {hint}")
    return hint
