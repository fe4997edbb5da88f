"""Exceptions pour le module credentials.

Toutes heritent de ApplicationError pour s'integrer dans la chaine
d'error handlers (ConsoleErrorHandler, LoggerErrorHandler).
"""

from netrc_utils.errors.exceptions import ApplicationError


class CredentialError(ApplicationError):
    """Exception de base pour toutes les erreurs credentials."""


class CredentialNotFoundError(CredentialError):
    """Levee quand une machine est absente du fichier netrc."""


class CredentialStoreError(CredentialError):
    """Levee quand le stockage ou la suppression echoue."""
