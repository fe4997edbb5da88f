"""Validateur des permissions d'un fichier netrc."""

import os
import stat
from pathlib import Path
from typing import Union

from netrc_utils.errors.exceptions import ValidationError
from netrc_utils.validation.base import Validator

INSECURE_BITS = stat.S_IRWXG | stat.S_IRWXO


class NetrcPermissionChecker(Validator):
    """Vérifie qu'un fichier netrc n'est accessible qu'à son propriétaire.

    Un fichier de credentials lisible par le groupe ou par les autres
    utilisateurs expose les mots de passe qu'il contient. Un fichier
    absent est considéré comme sûr (il sera créé en 0600).
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """Initialise le validateur.

        Args:
            path: Chemin du fichier netrc à vérifier.
        """
        self.path = Path(path)

    def is_secure(self) -> bool:
        """Indique si les permissions du fichier sont restreintes.

        Returns:
            True si le fichier est absent ou en mode 0600 (ou plus strict).
        """
        try:
            mode = os.stat(self.path).st_mode
        except FileNotFoundError:
            return True
        return not mode & INSECURE_BITS

    def validate(self) -> None:
        """Valide les permissions du fichier.

        Raises:
            ValidationError: Si le groupe ou les autres ont un accès.
        """
        if not self.is_secure():
            mode = stat.S_IMODE(os.stat(self.path).st_mode)
            raise ValidationError(
                f"Permissions trop ouvertes sur {self.path} "
                f"({oct(mode)}), 0o600 attendu."
            )
