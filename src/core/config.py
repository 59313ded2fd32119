"""Runtime configuration model for data cubes.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

from core.constants import (
    AUDIT_DOMAINS_ENV_VAR,
    DEFAULT_AUDIT_DOMAINS,
    DEFAULT_LOG_LEVEL,
    FALSE_FLAG_VALUES,
    LOG_LEVEL_ENV_VAR,
    SUPPORTED_LOG_LEVELS,
    TRUE_FLAG_VALUES,
)
from core.errors import CubeConfigError


@dataclass(frozen=True)
class CubeConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum level emitted by data cube loggers.
        audit_domains: Recount domain counters after every fixed cube mutation.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    audit_domains: bool = False

    @classmethod
    def from_env(cls) -> "CubeConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            CubeConfigError: If environment values are invalid.
        """
        log_level = _parse_log_level(os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
        audit_domains = _parse_flag(
            AUDIT_DOMAINS_ENV_VAR,
            os.getenv(AUDIT_DOMAINS_ENV_VAR, DEFAULT_AUDIT_DOMAINS),
        )
        return cls(log_level=log_level, audit_domains=audit_domains)


@lru_cache(maxsize=1)
def load_config() -> CubeConfig:
    """Return the process-wide config, parsed once from the environment."""
    return CubeConfig.from_env()


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-cased supported level name.

    Raises:
        CubeConfigError: If the level is not supported.
    """
    normalized = raw_value.strip().upper()
    if normalized not in SUPPORTED_LOG_LEVELS:
        supported = ", ".join(SUPPORTED_LOG_LEVELS)
        raise CubeConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: got '{raw_value}'. "
            f"Choose one of: {supported}."
        )
    return normalized


def _parse_flag(env_var: str, raw_value: str) -> bool:
    """Parse a boolean flag environment value.

    Args:
        env_var: Variable name used in the error message.
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean.

    Raises:
        CubeConfigError: If value is not a recognized flag.
    """
    normalized = raw_value.strip().lower()
    if normalized in TRUE_FLAG_VALUES:
        return True
    if normalized in FALSE_FLAG_VALUES:
        return False
    raise CubeConfigError(
        f"Invalid {env_var} value: expected boolean flag, got '{raw_value}'. "
        f"Set {env_var} to one of: {', '.join(TRUE_FLAG_VALUES + FALSE_FLAG_VALUES)}."
    )
