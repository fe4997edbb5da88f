"""Chiffrement et déchiffrement des fichiers netrc via gpg.

Le coeur netrc ignore tout du chiffrement : l'hôte Netrc déchiffre le
fichier avant le parsing et chiffre le texte après la sérialisation.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

from netrc_utils.commands.base import CommandExecutor, CommandResult
from netrc_utils.commands.builder import CommandBuilder
from netrc_utils.errors.exceptions import EncryptionError
from netrc_utils.logging.base import Logger


class ContentCipher(ABC):
    """Interface de transformation du contenu d'un fichier chiffré."""

    @abstractmethod
    def decrypt(self, path: Union[str, Path]) -> str:
        """Déchiffre un fichier et retourne le texte clair.

        Raises:
            EncryptionError: Si le déchiffrement échoue.
        """
        pass

    @abstractmethod
    def encrypt(self, text: str) -> str:
        """Chiffre un texte et retourne le contenu à écrire.

        Raises:
            EncryptionError: Si le chiffrement échoue.
        """
        pass


class GpgCipher(ContentCipher):
    """Chiffrement via la ligne de commande gpg.

    Le déchiffrement hérite de l'entrée standard pour permettre la
    saisie de la phrase secrète ; le chiffrement utilise la clé par
    défaut de l'utilisateur et produit une sortie ASCII armor.

    Attributes:
        _executor: Exécuteur de commandes injecté.
        _program: Programme gpg à invoquer.
        _timeout: Timeout en secondes (None : pas de limite).
        _logger: Logger optionnel.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        program: str = "gpg",
        timeout: Optional[int] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._executor = executor
        self._program = program
        self._timeout = timeout
        self._logger = logger

    def decrypt_command(self, path: Union[str, Path]) -> List[str]:
        return (
            CommandBuilder(self._program)
            .with_options(["--batch", "--quiet"])
            .with_flag("--decrypt")
            .with_args([str(path)])
            .build()
        )

    def encrypt_command(self) -> List[str]:
        return (
            CommandBuilder(self._program)
            .with_options(["-a", "--batch"])
            .with_flag("--default-recipient-self")
            .with_flag("-e")
            .build()
        )

    def decrypt(self, path: Union[str, Path]) -> str:
        result = self._executor.run(
            self.decrypt_command(path), timeout=self._timeout
        )
        self._check(result)
        if self._logger:
            self._logger.log_info(f"Fichier {path} déchiffré.")
        return result.stdout

    def encrypt(self, text: str) -> str:
        result = self._executor.run(
            self.encrypt_command(), input=text, timeout=self._timeout
        )
        self._check(result)
        return result.stdout

    def _check(self, result: CommandResult) -> None:
        if result.success:
            return
        message = f"{self._program} exited with code {result.return_code}"
        if result.stderr.strip():
            message += f" : {result.stderr.strip()}"
        raise EncryptionError(message)
