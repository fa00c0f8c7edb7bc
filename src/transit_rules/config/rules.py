"""Rule application configuration helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

DEFAULT_REPORT_FILENAME: Final[str] = "report.json"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"

REPORT_PATH_VAR: Final[str] = "TRANSIT_RULES_REPORT_PATH"
LOG_LEVEL_VAR: Final[str] = "TRANSIT_RULES_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class RulesConfig:
    report_path: Path
    log_level: str = DEFAULT_LOG_LEVEL

    def resolve_report_path(self) -> Path:
        return self.report_path.expanduser().resolve()

    @property
    def log_level_number(self) -> int:
        return _parse_log_level(self.log_level)


def _parse_log_level(value: str) -> int:
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise ConfigurationError(f"Invalid log level: {value}")
    return level


def get_rules_config() -> RulesConfig:
    report_path = Path(optional_env_var(REPORT_PATH_VAR, DEFAULT_REPORT_FILENAME))
    log_level = optional_env_var(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL)
    _parse_log_level(log_level)
    return RulesConfig(report_path=report_path, log_level=log_level.upper())
