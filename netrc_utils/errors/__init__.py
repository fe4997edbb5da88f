"""Module de gestion des erreurs."""

from netrc_utils.errors.base import ErrorHandler, ErrorHandlerChain
from netrc_utils.errors.exceptions import (ApplicationError,
                                           ConfigurationError,
                                           FileConfigurationError,
                                           ValidationError,
                                           NetrcError,
                                           NetrcFileError,
                                           EncryptionError)
from netrc_utils.errors.console_handler import ConsoleErrorHandler
from netrc_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "ValidationError",
    "NetrcError",
    "NetrcFileError",
    "EncryptionError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
