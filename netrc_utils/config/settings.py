"""Modèles Pydantic de configuration de netrc_utils."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LoggingSettings(BaseModel):
    """Paramètres transmis à FileLogger."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"

    model_config = {"extra": "forbid"}

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in levels:
            raise ValueError(
                f"Niveau de log inconnu : {v!r}. "
                f"Valeurs autorisées : {sorted(levels)}"
            )
        return v.upper()


class NetrcSettings(BaseModel):
    """Configuration de l'hôte Netrc.

    Attributes:
        file: Chemin du fichier netrc (None : chemin par défaut
            de la plateforme).
        encrypted_suffix: Extension désignant un fichier chiffré.
        gpg_program: Programme gpg à invoquer.
        gpg_timeout: Timeout des appels gpg en secondes.
        file_mode: Permissions appliquées à l'écriture.
        check_permissions: Avertir si le fichier est lisible par
            le groupe ou les autres.
        logging: Paramètres du logger.
    """

    file: Optional[Path] = None
    encrypted_suffix: str = ".gpg"
    gpg_program: str = "gpg"
    gpg_timeout: Optional[int] = Field(default=None, gt=0)
    file_mode: int = Field(default=0o600, ge=0, le=0o777)
    check_permissions: bool = True
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {"extra": "forbid"}

    @field_validator("file")
    @classmethod
    def expand_user(cls, v: Optional[Path]) -> Optional[Path]:
        return v.expanduser() if v is not None else None

    @field_validator("encrypted_suffix")
    @classmethod
    def suffix_must_start_with_dot(cls, v: str) -> str:
        if not v.startswith("."):
            raise ValueError("L'extension doit commencer par '.'")
        return v
