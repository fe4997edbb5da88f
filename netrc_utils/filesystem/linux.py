"""Implémentation Linux de la gestion des fichiers."""

import os
import stat
from pathlib import Path
from typing import Optional, Union

from netrc_utils.filesystem.base import FileManager
from netrc_utils.logging.base import Logger


class LinuxFileManager(FileManager):
    """
    Implémentation Linux de la gestion des fichiers.

    Les écritures créent le fichier directement avec le mode demandé
    (aucune fenêtre où un secret serait lisible par tous) puis forcent
    ce mode si le fichier existait déjà.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        """
        Initialise le gestionnaire de fichiers.

        Args:
            logger: Instance de Logger optionnelle
        """
        self.logger = logger

    def read_file(self, file_path: Union[str, Path]) -> str:
        """
        Lit le contenu d'un fichier en UTF-8.

        Args:
            file_path: Chemin du fichier

        Returns:
            Contenu du fichier

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
        """
        with open(file_path, 'r', encoding='utf-8', newline='') as f:
            content = f.read()
        if self.logger:
            self.logger.log_info(f"Fichier {file_path} lu avec succès.")
        return content

    def write_file(
        self,
        file_path: Union[str, Path],
        content: str,
        mode: int = 0o600,
    ) -> None:
        """
        Écrit un fichier en UTF-8 avec les permissions indiquées.

        Args:
            file_path: Chemin du fichier
            content: Contenu du fichier
            mode: Permissions du fichier (défaut: 0o600)
        """
        fd = os.open(
            file_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode
        )
        with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
        os.chmod(file_path, mode)
        if self.logger:
            self.logger.log_info(
                f"Fichier {file_path} écrit (mode {oct(mode)})."
            )

    def file_exists(self, file_path: Union[str, Path]) -> bool:
        return Path(file_path).exists()

    def file_mode(self, file_path: Union[str, Path]) -> int:
        """
        Retourne les bits de permission d'un fichier.

        Args:
            file_path: Chemin du fichier

        Returns:
            Permissions (ex: 0o600)

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
        """
        return stat.S_IMODE(os.stat(file_path).st_mode)
