"""Module de gestion des fichiers."""

from netrc_utils.filesystem.base import FileManager
from netrc_utils.filesystem.linux import LinuxFileManager

__all__ = [
    "FileManager",
    "LinuxFileManager",
]
