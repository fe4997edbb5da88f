"""
Exceptions personnalisées de netrc_utils.

Le coeur (parse / serialize) ne lève jamais d'exception sur un texte
d'entrée : ces exceptions concernent la couche hôte (fichiers, gpg,
configuration).
"""


class ApplicationError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration illisible ou invalide."""
    pass


class ValidationError(ApplicationError):
    """Exception de base pour toutes les validations."""
    pass


class NetrcError(ApplicationError):
    """Exception de base pour les opérations sur un fichier netrc."""
    pass


class NetrcFileError(NetrcError):
    """Lecture ou écriture du fichier netrc impossible."""
    pass


class EncryptionError(NetrcError):
    """Échec du chiffrement ou du déchiffrement via gpg."""
    pass
