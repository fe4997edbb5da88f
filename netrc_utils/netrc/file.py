"""Hôte Netrc : lecture, écriture et chiffrement du fichier.

Le coeur (parse / Machines / serialize) travaille uniquement sur du
texte. Netrc s'occupe de tout ce qui l'entoure : résolution du chemin,
lecture et écriture du fichier en 0600, déchiffrement et chiffrement
gpg des fichiers `.gpg`, et journalisation.

Example:
    >>> from netrc_utils import Netrc
    >>> with Netrc("~/.netrc") as netrc:
    ...     netrc.machines["api.example.com"] = {
    ...         "login": "me", "password": "s3cr3t"
    ...     }
"""

from pathlib import Path
from types import TracebackType
from typing import Optional, Tuple, Type, Union

from netrc_utils.commands.runner import LinuxCommandExecutor
from netrc_utils.config.loader import FileSettingsLoader, SettingsLoader
from netrc_utils.config.settings import NetrcSettings
from netrc_utils.errors.exceptions import NetrcFileError
from netrc_utils.filesystem.base import FileManager
from netrc_utils.filesystem.linux import LinuxFileManager
from netrc_utils.logging.base import Logger
from netrc_utils.netrc.cipher import ContentCipher, GpgCipher
from netrc_utils.netrc.machines import Machines
from netrc_utils.netrc.parser import parse
from netrc_utils.netrc.paths import default_netrc_path
from netrc_utils.validation.permissions import NetrcPermissionChecker


class Netrc:
    """Fichier netrc chargé en mémoire et modifiable.

    Les modifications passent par `machines` (vue indexée par nom de
    machine) et ne touchent que les champs modifiés : commentaires,
    indentation, blocs macdef et default sont restitués à l'identique
    par `save()`.

    Une instance n'est pas prévue pour être partagée entre threads.

    Attributes:
        file: Chemin du fichier netrc.
        settings: Configuration de l'hôte.
        machines: Vue modifiable sur le contenu chargé.
    """

    def __init__(
        self,
        file: Optional[Union[str, Path]] = None,
        settings: Optional[NetrcSettings] = None,
        logger: Optional[Logger] = None,
        file_manager: Optional[FileManager] = None,
        cipher: Optional[ContentCipher] = None,
    ) -> None:
        """Initialise l'hôte sans lire le fichier.

        Args:
            file: Chemin du fichier. Par défaut settings.file, puis
                le chemin netrc de la plateforme.
            settings: Configuration (défaut: NetrcSettings()).
            logger: Logger optionnel partagé avec les composants
                créés par défaut.
            file_manager: Gestionnaire de fichiers (défaut:
                LinuxFileManager).
            cipher: Chiffrement des fichiers chiffrés (défaut:
                GpgCipher).
        """
        self.settings = settings or NetrcSettings()
        if file is not None:
            self.file = Path(file).expanduser()
        else:
            self.file = self.settings.file or default_netrc_path()
        self._logger = logger
        self._files = file_manager or LinuxFileManager(logger)
        self._cipher = cipher or GpgCipher(
            LinuxCommandExecutor(logger=logger),
            program=self.settings.gpg_program,
            timeout=self.settings.gpg_timeout,
            logger=logger,
        )
        self.machines: Machines = parse("")
        self._loaded_output = self.machines.serialize()

    @classmethod
    def from_config(
        cls,
        config_path: Union[str, Path],
        logger: Optional[Logger] = None,
        loader: Optional[SettingsLoader] = None,
    ) -> "Netrc":
        """Crée un hôte depuis un fichier de configuration TOML ou JSON.

        Args:
            config_path: Chemin du fichier de configuration.
            logger: Logger optionnel.
            loader: Chargeur injectable (défaut: FileSettingsLoader).

        Returns:
            Instance de Netrc non chargée.
        """
        settings = (loader or FileSettingsLoader()).load(config_path)
        return cls(settings=settings, logger=logger)

    @property
    def encrypted(self) -> bool:
        """True si le fichier doit passer par le chiffrement."""
        return self.file.name.endswith(self.settings.encrypted_suffix)

    @property
    def output(self) -> str:
        """Texte netrc correspondant à l'état courant (non chiffré)."""
        return self.machines.serialize()

    @property
    def is_changed(self) -> bool:
        """True si le contenu diffère de celui chargé ou sauvegardé."""
        return self.output != self._loaded_output

    def load(self) -> Machines:
        """Lit le fichier et remplace `machines`.

        Un fichier absent est lu comme un fichier vide.

        Returns:
            La nouvelle vue `machines`.

        Raises:
            NetrcFileError: Si la lecture échoue.
            EncryptionError: Si le déchiffrement échoue.
        """
        if self.settings.check_permissions:
            self._warn_if_insecure()
        if not self._files.file_exists(self.file):
            self._log_info(f"Fichier {self.file} absent, contenu vide.")
            body = ""
        elif self.encrypted:
            body = self._cipher.decrypt(self.file)
        else:
            body = self._read()

        self.machines = parse(body)
        self._loaded_output = self.machines.serialize()
        self._log_info(
            f"Fichier {self.file} chargé ({len(self.machines)} machines)."
        )
        return self.machines

    def save(self) -> None:
        """Écrit le contenu courant dans le fichier.

        Le fichier est chiffré si son extension l'indique, et écrit
        avec les permissions settings.file_mode.

        Raises:
            NetrcFileError: Si l'écriture échoue.
            EncryptionError: Si le chiffrement échoue.
        """
        output = self.output
        body = self._cipher.encrypt(output) if self.encrypted else output
        try:
            self._files.write_file(
                self.file, body, mode=self.settings.file_mode
            )
        except OSError as e:
            raise NetrcFileError(
                f"Écriture impossible de {self.file} : {e}"
            ) from e
        self._loaded_output = output
        self._log_info(f"Fichier {self.file} sauvegardé.")

    def authenticators(
        self, host: str
    ) -> Optional[Tuple[str, str, str]]:
        """Retourne le tuple (login, account, password) d'une machine.

        Suit la convention du module standard netrc : les champs
        absents valent "".

        Args:
            host: Nom de la machine.

        Returns:
            Tuple (login, account, password) ou None si la machine
            est inconnue.
        """
        machine = self.machines.get(host)
        if machine is None:
            return None
        return (
            machine.get("login", ""),
            machine.get("account", ""),
            machine.get("password", ""),
        )

    def _read(self) -> str:
        try:
            return self._files.read_file(self.file)
        except FileNotFoundError:
            return ""
        except OSError as e:
            raise NetrcFileError(
                f"Lecture impossible de {self.file} : {e}"
            ) from e

    def _warn_if_insecure(self) -> None:
        checker = NetrcPermissionChecker(self.file)
        if not checker.is_secure() and self._logger:
            self._logger.log_warning(
                f"Le fichier {self.file} est accessible au groupe ou "
                "aux autres utilisateurs (chmod 600 recommandé)."
            )

    def _log_info(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def __enter__(self) -> "Netrc":
        self.load()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        if exc_type is None and self.is_changed:
            self.save()

    def __repr__(self) -> str:
        return f"Netrc(file={str(self.file)!r}, machines={list(self.machines)!r})"
