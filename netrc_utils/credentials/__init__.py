"""Module de gestion des credentials adosses a un fichier netrc.

Exemple d'utilisation :

    from netrc_utils import Netrc
    from netrc_utils.credentials import NetrcCredentialProvider

    provider = NetrcCredentialProvider(Netrc())
    password = provider.get("api.example.com", "password")
    provider.set("api.example.com", "password", new_password)
"""

from netrc_utils.credentials.base import (
    CredentialProvider,
    CredentialStore,
)
from netrc_utils.credentials.exceptions import (
    CredentialError,
    CredentialNotFoundError,
    CredentialStoreError,
)
from netrc_utils.credentials.models import Credential
from netrc_utils.credentials.providers.netrc import (
    NetrcCredentialProvider,
)

__all__ = [
    # ABCs
    "CredentialProvider",
    "CredentialStore",
    # Modeles
    "Credential",
    # Exceptions
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialStoreError",
    # Providers
    "NetrcCredentialProvider",
]
