"""Exécuteur de commandes Linux via subprocess.

Ce module fournit LinuxCommandExecutor, une implémentation concrète
de CommandExecutor utilisée notamment pour invoquer gpg.

Example :
    Déchiffrement d'un fichier :

        from netrc_utils.commands import LinuxCommandExecutor

        executor = LinuxCommandExecutor(logger=logger)
        result = executor.run(["gpg", "--decrypt", "netrc.gpg"])
        print(result.stdout)
"""

import os
import subprocess  # nosec B404
import time
from typing import Dict, List, Optional

from netrc_utils.commands.base import (
    CommandExecutor,
    CommandResult,
)
from netrc_utils.logging.base import Logger


class LinuxCommandExecutor(CommandExecutor):
    """Exécuteur de commandes Linux via subprocess.

    Les échecs (code retour non nul, timeout, erreur système) ne
    lèvent pas d'exception : ils sont loggés et retournés sous
    forme de CommandResult avec success=False. C'est à l'appelant
    de décider de l'exception métier à lever.

    Attributes:
        _logger: Logger optionnel.
        _default_env: Variables d'environnement par défaut.
        _default_timeout: Timeout par défaut en secondes.
        _dry_run: Mode simulation.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        default_env: Optional[Dict[str, str]] = None,
        default_timeout: Optional[int] = None,
        dry_run: bool = False,
    ) -> None:
        """Initialise l'exécuteur de commandes.

        Args:
            logger: Logger optionnel.
            default_env: Variables d'environnement par défaut
                (fusionnées avec os.environ).
            default_timeout: Timeout par défaut en secondes.
            dry_run: Si True, simule sans exécuter.
        """
        self._logger = logger
        self._default_env = default_env
        self._default_timeout = default_timeout
        self._dry_run = dry_run

    def _build_env(
        self,
        env: Optional[Dict[str, str]] = None,
    ) -> Optional[Dict[str, str]]:
        """Fusionne os.environ, default_env et env spécifique.

        Retourne None si aucun environnement personnalisé
        (subprocess utilisera os.environ par défaut).
        """
        if self._default_env is None and env is None:
            return None
        merged = os.environ.copy()
        if self._default_env:
            merged.update(self._default_env)
        if env:
            merged.update(env)
        return merged

    def _resolve_timeout(
        self,
        timeout: Optional[int] = None,
    ) -> Optional[int]:
        if timeout is not None:
            return timeout
        return self._default_timeout

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def run(
        self,
        command: List[str],
        input: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> CommandResult:
        """Exécute une commande et retourne le résultat.

        Utilise subprocess.run pour capturer stdout et stderr.

        Args:
            command: Commande sous forme de liste.
            input: Texte envoyé sur l'entrée standard (None :
                entrée standard héritée).
            env: Variables d'environnement supplémentaires.
            cwd: Répertoire de travail.
            timeout: Timeout en secondes (prioritaire).

        Returns:
            CommandResult avec les sorties capturées.
        """
        if self._dry_run:
            self._log(f"[dry-run] {' '.join(command)}")
            return CommandResult(
                command=command,
                return_code=0,
                stdout="",
                stderr="",
                success=True,
                duration=0.0,
            )

        effective_env = self._build_env(env)
        effective_timeout = self._resolve_timeout(timeout)
        self._log(f"Exécution : {' '.join(command)}")

        start = time.monotonic()
        try:
            proc = subprocess.run(  # nosec B603
                command,
                input=input,
                capture_output=True,
                text=True,
                env=effective_env,
                cwd=cwd,
                timeout=effective_timeout,
            )
            duration = time.monotonic() - start
            if proc.returncode != 0:
                self._log_error(
                    f"Code retour {proc.returncode} : "
                    f"{' '.join(command)}"
                )
            return CommandResult(
                command=command,
                return_code=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
                success=proc.returncode == 0,
                duration=duration,
            )
        except subprocess.TimeoutExpired as e:
            duration = time.monotonic() - start
            self._log_error(
                f"Timeout après {effective_timeout}s : "
                f"{' '.join(command)}"
            )
            return CommandResult(
                command=command,
                return_code=-1,
                stdout=_as_text(e.stdout),
                stderr=_as_text(e.stderr),
                success=False,
                duration=duration,
            )
        except OSError as e:
            duration = time.monotonic() - start
            self._log_error(f"Erreur système : {e}")
            return CommandResult(
                command=command,
                return_code=-1,
                stdout="",
                stderr=str(e),
                success=False,
                duration=duration,
            )


def _as_text(output: bytes | str | None) -> str:
    # TimeoutExpired expose des bytes même en mode texte
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output
