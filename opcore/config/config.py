"""
Configuration management for the operator core.
Loads settings from environment variables with sensible defaults.

Only ambient behaviour (logging) is configurable. Arithmetic constants live in
constants.py and are fixed.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .constants import DEFAULT_LOG_LEVEL


_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = DEFAULT_LOG_LEVEL
    log_dir: str = ""        # empty = console only
    use_color: bool = True

    def __post_init__(self):
        self.level = self.level.upper()
        if self.level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(
                f"OPCORE_LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, got '{self.level}'"
            )


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables (and an optional .env file)
    and provides typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=False)

        self.log = self._load_log_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("OPCORE_LOG_LEVEL", DEFAULT_LOG_LEVEL),
            log_dir=os.getenv("OPCORE_LOG_DIR", ""),
            use_color=os.getenv("OPCORE_LOG_COLOR", "true").strip().lower() in _TRUE_VALUES,
        )

    def summary_short(self) -> str:
        """Generate a short one-line configuration summary."""
        target = self.log.log_dir or "console"
        return f"opcore | log={self.log.level} -> {target}"


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment."""
    Config._instance = None
