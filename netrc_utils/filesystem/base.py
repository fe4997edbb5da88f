"""Interface abstraite pour la gestion des fichiers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union


class FileManager(ABC):
    """Interface pour la lecture et l'écriture de fichiers texte."""

    @abstractmethod
    def read_file(self, file_path: Union[str, Path]) -> str:
        """
        Lit le contenu d'un fichier texte.

        Args:
            file_path: Chemin du fichier

        Returns:
            Contenu du fichier

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            OSError: Si la lecture échoue
        """
        pass

    @abstractmethod
    def write_file(
        self,
        file_path: Union[str, Path],
        content: str,
        mode: int = 0o600,
    ) -> None:
        """
        Écrit un fichier texte avec les permissions indiquées.

        Args:
            file_path: Chemin du fichier
            content: Contenu du fichier
            mode: Permissions du fichier (défaut: 0o600)

        Raises:
            OSError: Si l'écriture échoue
        """
        pass

    @abstractmethod
    def file_exists(self, file_path: Union[str, Path]) -> bool:
        """Vérifie si un fichier existe."""
        pass
