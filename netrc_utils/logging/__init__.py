"""Module de logging."""

from netrc_utils.logging.base import Logger
from netrc_utils.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
