"""Modele de donnees pour les credentials d'une machine."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Credential:
    """Credentials complets d'une machine.

    Attributes:
        host: Nom de la machine (ex: "api.example.com").
        login: Identifiant.
        password: Mot de passe, ou None.
        account: Compte, ou None.
        source: Source d'ou proviennent les valeurs (ex: "netrc").
    """

    host: str
    login: str
    password: Optional[str] = None
    account: Optional[str] = None
    source: str = ""

    def __post_init__(self) -> None:
        """Valide les champs apres initialisation."""
        if not self.host or not self.host.strip():
            raise ValueError(
                "Le champ 'host' ne peut pas etre vide."
            )

    def __repr__(self) -> str:
        # le mot de passe n'apparait jamais dans les logs
        return (
            f"Credential(host={self.host!r}, login={self.login!r}, "
            f"password={'***' if self.password else None}, "
            f"account={self.account!r}, source={self.source!r})"
        )
