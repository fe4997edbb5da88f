"""
Netrc Utils - Édition de fichiers netrc préservant la mise en forme.

Modules disponibles:
- netrc: Parseur, vue modifiable et sérialiseur netrc, hôte Netrc
  (lecture/écriture, chiffrement gpg, chemin par défaut)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions et handlers d'erreurs
- config: Configuration validée par Pydantic (TOML, JSON)
- commands: Exécution de commandes système (CommandBuilder,
  LinuxCommandExecutor)
- filesystem: Lecture et écriture de fichiers (FileManager,
  LinuxFileManager)
- validation: Vérification des permissions (NetrcPermissionChecker)
- credentials: Provider de credentials adossé à netrc
"""

__version__ = "1.0.0"

from netrc_utils.logging import Logger, FileLogger
from netrc_utils.errors import (
    ApplicationError,
    ConfigurationError,
    FileConfigurationError,
    ValidationError,
    NetrcError,
    NetrcFileError,
    EncryptionError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from netrc_utils.config import (
    NetrcSettings,
    LoggingSettings,
    SettingsLoader,
    FileSettingsLoader,
    load_settings,
)
from netrc_utils.commands import (
    CommandResult,
    CommandExecutor,
    CommandBuilder,
    LinuxCommandExecutor,
)
from netrc_utils.filesystem import FileManager, LinuxFileManager
from netrc_utils.validation import Validator, NetrcPermissionChecker
from netrc_utils.netrc import (
    Layout,
    MachineToken,
    OtherToken,
    Property,
    Machines,
    MachineView,
    Netrc,
    ContentCipher,
    GpgCipher,
    parse,
    tokenize,
    serialize,
    default_netrc_path,
)
from netrc_utils.credentials import (
    Credential,
    CredentialProvider,
    CredentialStore,
    NetrcCredentialProvider,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Errors
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "ValidationError",
    "NetrcError",
    "NetrcFileError",
    "EncryptionError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Config
    "NetrcSettings",
    "LoggingSettings",
    "SettingsLoader",
    "FileSettingsLoader",
    "load_settings",
    # Commands
    "CommandResult",
    "CommandExecutor",
    "CommandBuilder",
    "LinuxCommandExecutor",
    # Filesystem
    "FileManager",
    "LinuxFileManager",
    # Validation
    "Validator",
    "NetrcPermissionChecker",
    # Netrc - Tokens
    "Layout",
    "MachineToken",
    "OtherToken",
    "Property",
    # Netrc - Coeur
    "parse",
    "tokenize",
    "serialize",
    "Machines",
    "MachineView",
    # Netrc - Hôte
    "Netrc",
    "ContentCipher",
    "GpgCipher",
    "default_netrc_path",
    # Credentials
    "Credential",
    "CredentialProvider",
    "CredentialStore",
    "NetrcCredentialProvider",
]
