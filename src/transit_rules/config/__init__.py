"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .rules import RulesConfig, get_rules_config

__all__ = [
    "ConfigurationError",
    "RulesConfig",
    "configure_logging",
    "get_rules_config",
    "optional_env_var",
]
