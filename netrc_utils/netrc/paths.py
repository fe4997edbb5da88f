"""Résolution du chemin par défaut du fichier netrc."""

import ntpath
import os
import sys
import tempfile
from pathlib import Path
from typing import Mapping, Optional

ENCRYPTED_SUFFIX = ".gpg"


def _home_directory(platform: str, environ: Mapping[str, str]) -> str:
    """Répertoire personnel de l'utilisateur.

    Sous Windows : HOME, puis HOMEDRIVE + HOMEPATH, puis USERPROFILE.
    Ailleurs (ou à défaut) : le répertoire personnel, puis le
    répertoire temporaire.
    """
    if platform == "win32":
        home = environ.get("HOME")
        if not home and environ.get("HOMEDRIVE") and environ.get("HOMEPATH"):
            home = ntpath.join(environ["HOMEDRIVE"], environ["HOMEPATH"])
        home = home or environ.get("USERPROFILE")
        if home:
            return home
    try:
        return str(Path.home())
    except RuntimeError:
        return tempfile.gettempdir()


def default_netrc_path(
    platform: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Chemin du fichier netrc de l'utilisateur courant.

    `_netrc` sous Windows, `.netrc` ailleurs. Si une version chiffrée
    (`.netrc.gpg`) existe, elle est préférée.

    Args:
        platform: Plateforme (défaut: sys.platform).
        environ: Variables d'environnement (défaut: os.environ).

    Returns:
        Chemin du fichier netrc.
    """
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ
    name = "_netrc" if platform == "win32" else ".netrc"
    path = Path(_home_directory(platform, environ)) / name
    encrypted = path.with_name(path.name + ENCRYPTED_SUFFIX)
    return encrypted if encrypted.exists() else path
