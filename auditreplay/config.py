"""Parser configuration from an optional YAML file with env var overrides."""

import logging
import os
from dataclasses import dataclass, field
from typing import Any

import yaml

from auditreplay.errors import ParserInitializationError

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"command_parser", "log_start_time_ms", "rate_factor"}


@dataclass(frozen=True)
class ParserConfig:
    command_parser: str = "hive"
    log_start_time_ms: int = -1  # unset; required by the direct parser
    rate_factor: float = 1.0
    options: dict[str, Any] = field(default_factory=dict, hash=False)

    @classmethod
    def from_dict(cls, d: dict) -> "ParserConfig":
        return cls(
            command_parser=str(d.get("command_parser", "hive")),
            log_start_time_ms=int(d.get("log_start_time_ms", -1)),
            rate_factor=float(d.get("rate_factor", 1.0)),
            options={k: v for k, v in d.items() if k not in _KNOWN_KEYS},
        )

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Build a ParserConfig from environment variables with defaults."""
        return cls.from_dict(_env_overrides({}))


def _env_overrides(d: dict) -> dict:
    merged = dict(d)
    if "AUDIT_COMMAND_PARSER" in os.environ:
        merged["command_parser"] = os.environ["AUDIT_COMMAND_PARSER"]
    if "AUDIT_LOG_START_TIME_MS" in os.environ:
        merged["log_start_time_ms"] = int(os.environ["AUDIT_LOG_START_TIME_MS"])
    if "AUDIT_RATE_FACTOR" in os.environ:
        merged["rate_factor"] = float(os.environ["AUDIT_RATE_FACTOR"])
    return merged


def load_yaml(path: str | None = None) -> dict:
    """Load YAML config from *path* and return it as a dict.

    The path can be overridden via the ``CONFIG_PATH`` environment variable.
    A missing file yields an empty dict so env vars and defaults still apply.
    """
    path = os.environ.get("CONFIG_PATH", path)
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as exc:
        raise ParserInitializationError(f"Invalid YAML in {path}") from exc
    if not isinstance(data, dict):
        raise ParserInitializationError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(path: str | None = None) -> ParserConfig:
    """Build a ParserConfig from the ``parser`` YAML section plus env vars."""
    data = load_yaml(path)
    section = data.get("parser", data) or {}
    if not isinstance(section, dict):
        raise ParserInitializationError("'parser' config section must be a mapping")
    return ParserConfig.from_dict(_env_overrides(section))
