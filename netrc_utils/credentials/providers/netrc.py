"""Provider de credentials adosse a un fichier netrc.

Ce module fournit NetrcCredentialProvider qui lit et ecrit les
entrees d'un hote Netrc. Chaque ecriture est sauvegardee
immediatement, sans toucher au reste du fichier.
"""

from typing import Optional

from netrc_utils.credentials.base import CredentialStore
from netrc_utils.credentials.exceptions import (
    CredentialNotFoundError,
    CredentialStoreError,
)
from netrc_utils.credentials.models import Credential
from netrc_utils.errors.exceptions import NetrcError
from netrc_utils.logging.base import Logger
from netrc_utils.netrc.file import Netrc


class NetrcCredentialProvider(CredentialStore):
    """Lit et ecrit des credentials dans un fichier netrc.

    Le fichier est charge au premier acces. Les erreurs de lecture
    rendent le provider indisponible (get() retourne None) ; les
    erreurs d'ecriture levent CredentialStoreError.

    Attributes:
        _netrc: Hote Netrc injecte.
        _logger: Logger optionnel.
        _loaded: True si le fichier a ete charge.
    """

    def __init__(
        self,
        netrc: Netrc,
        logger: Optional[Logger] = None,
    ) -> None:
        self._netrc = netrc
        self._logger = logger
        self._loaded: bool = False

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self._netrc.load()
            self._loaded = True

    def get(
        self,
        host: str,
        key: str,
    ) -> Optional[str]:
        """Lit un champ d'une machine.

        Args:
            host: Nom de la machine.
            key: Nom du champ (ex: "login", "password").

        Returns:
            Valeur du champ ou None si absent ou illisible.
        """
        if not self.is_available():
            return None
        machine = self._netrc.machines.get(host)
        if machine is None:
            return None
        return machine.get(key) or None

    def get_credential(self, host: str) -> Credential:
        """Retourne les credentials complets d'une machine.

        Raises:
            CredentialNotFoundError: si la machine est absente.
        """
        login = self.get(host, "login")
        if host not in self._netrc.machines:
            raise CredentialNotFoundError(
                f"Machine introuvable dans {self._netrc.file} : "
                f"host={host!r}"
            )
        return Credential(
            host=host,
            login=login or "",
            password=self.get(host, "password"),
            account=self.get(host, "account"),
            source=self.source_name,
        )

    def set(
        self,
        host: str,
        key: str,
        value: str,
    ) -> None:
        """Ecrit un champ (cree la machine si besoin) et sauvegarde.

        Raises:
            CredentialStoreError: si la lecture ou l'ecriture echoue.
        """
        try:
            self._ensure_loaded()
            self._netrc.machines[host] = {key: value}
            self._netrc.save()
        except NetrcError as exc:
            raise CredentialStoreError(
                f"Erreur lors du stockage netrc : {exc}"
            ) from exc
        if self._logger:
            self._logger.log_info(
                f"Credential stocke dans netrc : "
                f"host={host!r}, key={key!r}"
            )

    def delete(
        self,
        host: str,
        key: Optional[str] = None,
    ) -> None:
        """Supprime un champ, ou la machine si key est None.

        Silencieux si la machine ou le champ est absent.

        Raises:
            CredentialStoreError: si la sauvegarde echoue.
        """
        try:
            self._ensure_loaded()
            machine = self._netrc.machines.get(host)
            if machine is None:
                return
            if key is None:
                del self._netrc.machines[host]
            else:
                del machine[key]
            if self._netrc.is_changed:
                self._netrc.save()
        except NetrcError as exc:
            raise CredentialStoreError(
                f"Erreur lors de la suppression netrc : {exc}"
            ) from exc

    def is_available(self) -> bool:
        """Indique si le fichier netrc a pu etre charge."""
        try:
            self._ensure_loaded()
        except NetrcError as exc:
            if self._logger:
                self._logger.log_warning(
                    f"Fichier netrc indisponible : {exc}"
                )
            return False
        return True

    @property
    def source_name(self) -> str:
        return "netrc"
