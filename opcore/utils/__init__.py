"""
Utility modules.
"""

from .logger import get_logger, setup_logger, OpcoreLogger

__all__ = [
    "get_logger",
    "setup_logger",
    "OpcoreLogger",
]
