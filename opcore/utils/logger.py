"""
Logging system for the operator core.
Provides structured, human-readable logs with console and optional file output.
"""

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config.constants import DEFAULT_LOG_LEVEL, ERROR_LOGGER_NAME, LOGGER_NAME


# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        # Color the rendered line only; the record is shared with the file handler.
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        return f"{color}{super().format(record)}{Colors.RESET}"


class OpcoreLogger:
    """
    Central logging system for the operator core.

    Features:
    - Console output (colored unless disabled)
    - Optional daily log files when a log directory is configured
    - Separate error logger
    - Structured key=value lines for arithmetic events
    """

    _instance: Optional['OpcoreLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: str = "", log_level: str = "WARNING", use_color: bool = True):
        if OpcoreLogger._initialized:
            return

        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        self.use_color = use_color

        self.main_logger = self._create_logger(LOGGER_NAME, log_level)
        self.error_logger = self._create_logger(ERROR_LOGGER_NAME, "ERROR", "errors")

        OpcoreLogger._initialized = True

    def _create_logger(self, name: str, level: str, file_prefix: str = None) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))
        logger.handlers.clear()

        fmt = "%(asctime)s | %(levelname)s | %(message)s"
        console_handler = logging.StreamHandler()
        if self.use_color:
            console_handler.setFormatter(ColoredFormatter(fmt, datefmt="%H:%M:%S"))
        else:
            console_handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))
        logger.addHandler(console_handler)

        if self.log_dir is not None:
            prefix = file_prefix or "opcore"
            log_file = self.log_dir / f"{prefix}_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        return logger

    def info(self, msg: str, *args, **kwargs):
        """Log info message."""
        self.main_logger.info(msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        """Log debug message."""
        self.main_logger.debug(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        """Log warning message."""
        self.main_logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        """Log error message."""
        self.main_logger.error(msg, *args, **kwargs)
        self.error_logger.error(msg, *args, **kwargs)

    def arith(self, event: str, operator: str, **kwargs):
        """
        Log an arithmetic event at DEBUG with structured format.

        Args:
            event: DIV_BY_ZERO, FLOAT_POW, NON_FINITE, UNKNOWN_OPERATOR
            operator: Operator symbol involved
            **kwargs: Additional fields (operands, arity, ...)
        """
        if not self.main_logger.isEnabledFor(logging.DEBUG):
            return
        parts = [f"[{event}]", f"op={operator}"]
        for key, value in kwargs.items():
            parts.append(f"{key}={value!r}")
        self.main_logger.debug(" | ".join(parts))


# Global logger instance
_logger: Optional[OpcoreLogger] = None
_logger_lock = threading.Lock()


def get_logger() -> OpcoreLogger:
    """
    Get or create the global logger instance, configured from get_config().

    A configuration that fails to load (e.g. an unknown OPCORE_LOG_LEVEL)
    falls back to console logging at DEFAULT_LOG_LEVEL and logs a warning.
    """
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                from ..config.config import get_config
                try:
                    log_cfg = get_config().log
                except ValueError as e:
                    logger = OpcoreLogger("", DEFAULT_LOG_LEVEL)
                    logger.warning(f"Invalid logging config, using {DEFAULT_LOG_LEVEL}: {e}")
                else:
                    logger = OpcoreLogger(log_cfg.log_dir, log_cfg.level, log_cfg.use_color)
                _logger = logger
    return _logger


def setup_logger(log_dir: str = "", log_level: str = DEFAULT_LOG_LEVEL, use_color: bool = True) -> OpcoreLogger:
    """Reinitialise the global logger with explicit settings."""
    global _logger
    with _logger_lock:
        OpcoreLogger._initialized = False
        OpcoreLogger._instance = None
        _logger = OpcoreLogger(log_dir, log_level, use_color)
    return _logger
