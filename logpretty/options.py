"""Pretty-printer options loaded from defaults, an optional YAML file, and env vars."""

import logging
import os
from dataclasses import dataclass

import yaml

from logpretty.errors import PrettyConfigError

logger = logging.getLogger(__name__)

DEFAULT_TIME_KEY = "time"
DEFAULT_LEVEL_KEY = "level"
DEFAULT_MESSAGE_KEY = "msg"
DEFAULT_MAX_DEPTH = 64

ENV_PREFIX = "LOG_PRETTY_"
OPTION_NAMES = ("colorize", "level_first", "time_key", "level_key", "message_key", "max_depth")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


def _parse_depth(value) -> int:
    if isinstance(value, bool):
        raise PrettyConfigError(f"max_depth must be an integer, got {value!r}")
    try:
        depth = int(value)
    except (TypeError, ValueError) as e:
        raise PrettyConfigError(f"max_depth must be an integer, got {value!r}") from e
    if depth < 1:
        raise PrettyConfigError(f"max_depth must be at least 1, got {depth}")
    return depth


@dataclass(frozen=True)
class PrettyOptions:
    colorize: bool = False
    level_first: bool = False
    time_key: str = ""
    level_key: str = ""
    message_key: str = ""
    max_depth: int = DEFAULT_MAX_DEPTH

    @property
    def effective_time_key(self) -> str:
        return self.time_key or DEFAULT_TIME_KEY

    @property
    def effective_level_key(self) -> str:
        return self.level_key or DEFAULT_LEVEL_KEY

    @property
    def effective_message_key(self) -> str:
        return self.message_key or DEFAULT_MESSAGE_KEY


def load_yaml_config(path: str | None) -> dict:
    """Load option overrides from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        raise PrettyConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        logger.warning("Config file %s does not hold a mapping, ignoring it", path)
        return {}
    logger.info("Loaded YAML config from %s", path)
    return data


def load_options(env=None, yaml_data: dict | None = None) -> PrettyOptions:
    """Build PrettyOptions from parsed YAML data overlaid with LOG_PRETTY_* env vars.

    YAML keys may sit at the top level or under a ``pretty:`` section.
    Environment variables win over YAML, YAML wins over the defaults.
    """
    if env is None:
        env = os.environ
    yaml_data = yaml_data or {}
    section = yaml_data.get("pretty", yaml_data)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise PrettyConfigError("'pretty' section must be a mapping")

    raw = {name: section[name] for name in OPTION_NAMES if section.get(name) is not None}
    for name in OPTION_NAMES:
        env_value = env.get(ENV_PREFIX + name.upper())
        if env_value is not None:
            raw[name] = env_value

    return PrettyOptions(
        colorize=_parse_bool(raw.get("colorize", False)),
        level_first=_parse_bool(raw.get("level_first", False)),
        time_key=str(raw.get("time_key", "")),
        level_key=str(raw.get("level_key", "")),
        message_key=str(raw.get("message_key", "")),
        max_depth=_parse_depth(raw.get("max_depth", DEFAULT_MAX_DEPTH)),
    )
