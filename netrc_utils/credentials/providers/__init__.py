"""Providers de credentials pour le module credentials."""

from netrc_utils.credentials.providers.netrc import (
    NetrcCredentialProvider,
)

__all__ = [
    "NetrcCredentialProvider",
]
