"""Module d'exécution de commandes système.

Classes disponibles :
    CommandResult : Résultat immuable d'une exécution.
    CommandExecutor : Interface abstraite pour les exécuteurs.
    CommandBuilder : Constructeur fluent de commandes.
    LinuxCommandExecutor : Exécuteur concret via subprocess.
"""

from netrc_utils.commands.base import (
    CommandResult,
    CommandExecutor,
)
from netrc_utils.commands.builder import CommandBuilder
from netrc_utils.commands.runner import LinuxCommandExecutor

__all__ = [
    "CommandResult",
    "CommandExecutor",
    "CommandBuilder",
    "LinuxCommandExecutor",
]
