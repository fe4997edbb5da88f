"""Chargement de la configuration depuis un fichier TOML ou JSON."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError as PydanticValidationError

from netrc_utils.config.settings import NetrcSettings
from netrc_utils.errors.exceptions import FileConfigurationError

SECTION = "netrc"


class SettingsLoader(ABC):
    """
    Interface abstraite pour le chargement de NetrcSettings.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(self, config_path: Union[str, Path]) -> NetrcSettings:
        """
        Charge et valide un fichier de configuration.

        Args:
            config_path: Chemin vers le fichier de configuration

        Returns:
            Instance de NetrcSettings validée

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si le format n'est pas supporté
            FileConfigurationError: Si le contenu est invalide
        """
        pass


class FileSettingsLoader(SettingsLoader):
    """
    Chargeur de NetrcSettings depuis un fichier.

    Supporte les formats TOML et JSON, détectés par l'extension.
    Si le fichier contient une section [netrc], seule cette section
    est utilisée ; sinon le document entier est validé.
    """

    def load(self, config_path: Union[str, Path]) -> NetrcSettings:
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        raw_config = self._read_raw(path)
        data = raw_config.get(SECTION, raw_config)
        if not isinstance(data, dict):
            raise FileConfigurationError(
                f"Section [{SECTION}] invalide dans {path}"
            )

        try:
            return NetrcSettings.model_validate(data)
        except PydanticValidationError as e:
            raise FileConfigurationError(
                f"Configuration invalide dans {path} : {e}"
            ) from e

    @staticmethod
    def _read_raw(path: Path) -> Dict[str, Any]:
        """Lit le fichier brut selon son extension.

        Raises:
            ValueError: Si l'extension n'est pas supportée.
            FileConfigurationError: Si le fichier est mal formé.
        """
        suffix = path.suffix.lower()
        try:
            if suffix == ".toml":
                with open(path, "rb") as f:
                    return tomllib.load(f)
            if suffix == ".json":
                with open(path, "r", encoding="utf-8") as f:
                    raw = json.load(f)
                if not isinstance(raw, dict):
                    raise FileConfigurationError(
                        f"Objet JSON attendu à la racine de {path}"
                    )
                return raw
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise FileConfigurationError(
                f"Fichier de configuration mal formé {path} : {e}"
            ) from e
        raise ValueError(
            f"Extension non supportée: {suffix}. "
            "Utilisez .toml ou .json"
        )


def load_settings(config_path: Union[str, Path]) -> NetrcSettings:
    """Charge une configuration avec le chargeur par défaut.

    Args:
        config_path: Chemin vers le fichier .toml ou .json

    Returns:
        Instance de NetrcSettings
    """
    return FileSettingsLoader().load(config_path)
