"""
Runtime settings read from the environment.

Environment Variables:
    AUTOMATON_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: WARNING
    AUTOMATON_LOG_FORMAT: Log format (json, text) - default: json
    AUTOMATON_JSON_INDENT: Indent width for pretty documents - default: 4
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


def _env_int(environ: Mapping[str, str], key: str) -> Optional[int]:
    val = environ.get(key)
    if not val:
        return None
    try:
        parsed = int(val)
    except ValueError:
        return None
    return parsed if parsed > 0 else None


@dataclass(frozen=True)
class Settings:
    """
    Settings for logging and document output.

    Invalid values fall back to the defaults instead of failing.
    """
    log_level: str = "WARNING"
    log_format: str = "json"
    json_indent: int = 4

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ
        defaults = Settings()

        log_level = environ.get("AUTOMATON_LOG_LEVEL", defaults.log_level).upper()
        if log_level not in LOG_LEVELS:
            log_level = defaults.log_level

        log_format = environ.get("AUTOMATON_LOG_FORMAT", defaults.log_format).lower()
        if log_format not in LOG_FORMATS:
            log_format = defaults.log_format

        return Settings(
            log_level=log_level,
            log_format=log_format,
            json_indent=_env_int(environ, "AUTOMATON_JSON_INDENT") or defaults.json_indent,
        )
