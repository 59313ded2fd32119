"""Core constants used across data cube modules.

This module centralizes environment variable names and defaults.
Keeping values here avoids magic literals in container logic.
"""

from __future__ import annotations

LOG_LEVEL_ENV_VAR = "DATACUBE_LOG_LEVEL"
AUDIT_DOMAINS_ENV_VAR = "DATACUBE_AUDIT_DOMAINS"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_AUDIT_DOMAINS = "false"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
TRUE_FLAG_VALUES = ("1", "true", "yes", "on")
FALSE_FLAG_VALUES = ("0", "false", "no", "off")
