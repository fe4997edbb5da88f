"""Interfaces abstraites pour la gestion des credentials.

Ce module definit les ABCs CredentialProvider (lecture seule)
et CredentialStore (lecture + ecriture) selon le principe ISP
(Interface Segregation Principle).
"""

from abc import ABC, abstractmethod
from typing import Optional


class CredentialProvider(ABC):
    """Interface de lecture d'un credential depuis une source."""

    @abstractmethod
    def get(
        self,
        host: str,
        key: str,
    ) -> Optional[str]:
        """Retourne la valeur du credential ou None si absent.

        Args:
            host: Nom de la machine.
            key: Nom du champ (ex: "login", "password").

        Returns:
            Valeur du credential ou None si absent.
        """
        pass  # pragma: no cover

    @abstractmethod
    def is_available(self) -> bool:
        """Indique si ce provider est operationnel."""
        pass  # pragma: no cover

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Nom court de la source (ex: "netrc")."""
        pass  # pragma: no cover


class CredentialStore(CredentialProvider):
    """Interface de lecture et d'ecriture d'un credential.

    Les clients qui lisent seulement doivent dependre de
    CredentialProvider, pas de CredentialStore (ISP).
    """

    @abstractmethod
    def set(
        self,
        host: str,
        key: str,
        value: str,
    ) -> None:
        """Stocke un credential.

        Raises:
            CredentialStoreError: si le stockage echoue.
        """
        pass  # pragma: no cover

    @abstractmethod
    def delete(
        self,
        host: str,
        key: Optional[str] = None,
    ) -> None:
        """Supprime un champ, ou la machine entiere si key est None.

        Doit etre silencieux si le credential est absent.
        """
        pass  # pragma: no cover
