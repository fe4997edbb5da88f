"""Tests unitaires pour l'hôte Netrc."""

import os
import stat
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from netrc_utils.config.settings import NetrcSettings
from netrc_utils.errors.exceptions import (
    EncryptionError,
    NetrcFileError,
)
from netrc_utils.filesystem.base import FileManager
from netrc_utils.logging.base import Logger
from netrc_utils.netrc import ContentCipher, Netrc


CONTENT = (
    "# perso\n"
    "machine api.example.com\n"
    "  login jeff\n"
    "  password secret\n"
    "\n"
    "machine ray login demo password mypassword account acc\n"
)


@pytest.fixture
def netrc_path(tmp_path):
    """Fichier netrc en clair, créé en 0600."""
    path = tmp_path / ".netrc"
    path.write_text(CONTENT)
    os.chmod(path, 0o600)
    return path


@pytest.fixture
def cipher():
    """Chiffrement factice."""
    mock = MagicMock(spec=ContentCipher)
    mock.decrypt.return_value = "machine a login u password p\n"
    mock.encrypt.side_effect = lambda text: f"ARMOR[{text}]"
    return mock


@pytest.fixture
def file_manager():
    """Gestionnaire de fichiers factice."""
    mock = MagicMock(spec=FileManager)
    mock.file_exists.return_value = True
    mock.read_file.return_value = CONTENT
    return mock


class TestNetrcLoad:
    """Tests pour Netrc.load."""

    def test_chargement_fichier(self, netrc_path):
        """Le fichier est lu et parsé."""
        netrc = Netrc(netrc_path)
        machines = netrc.load()
        assert machines is netrc.machines
        assert list(machines) == ["api.example.com", "ray"]
        assert machines["api.example.com"].password == "secret"
        assert not netrc.is_changed

    def test_fichier_absent_est_vide(self, tmp_path):
        """Un fichier inexistant donne un modèle vide."""
        netrc = Netrc(tmp_path / "absent")
        netrc.load()
        assert len(netrc.machines) == 0
        assert netrc.output == ""

    def test_chemin_texte_et_tilde(self, monkeypatch, tmp_path):
        """Le chemin accepte une chaîne et développe ~."""
        monkeypatch.setenv("HOME", str(tmp_path))
        netrc = Netrc("~/.netrc")
        assert netrc.file == tmp_path / ".netrc"

    def test_chemin_depuis_settings(self, tmp_path):
        """Sans argument, settings.file est utilisé."""
        settings = NetrcSettings(file=tmp_path / "custom")
        assert Netrc(settings=settings).file == tmp_path / "custom"

    def test_erreur_lecture(self, tmp_path, file_manager):
        """Une erreur d'E/S devient NetrcFileError."""
        file_manager.read_file.side_effect = PermissionError("refusé")
        netrc = Netrc(tmp_path / ".netrc", file_manager=file_manager)
        with pytest.raises(NetrcFileError, match="Lecture impossible"):
            netrc.load()

    def test_disparition_pendant_lecture(self, tmp_path, file_manager):
        """Un fichier disparu entre-temps est lu comme vide."""
        file_manager.read_file.side_effect = FileNotFoundError()
        netrc = Netrc(tmp_path / ".netrc", file_manager=file_manager)
        assert len(netrc.load()) == 0

    def test_avertissement_permissions(self, netrc_path):
        """Un fichier lisible par les autres produit un avertissement."""
        os.chmod(netrc_path, 0o644)
        logger = MagicMock(spec=Logger)
        Netrc(netrc_path, logger=logger).load()
        logger.log_warning.assert_called_once()
        assert "chmod 600" in logger.log_warning.call_args[0][0]

    def test_avertissement_desactive(self, netrc_path):
        """check_permissions=False supprime l'avertissement."""
        os.chmod(netrc_path, 0o644)
        logger = MagicMock(spec=Logger)
        settings = NetrcSettings(check_permissions=False)
        Netrc(netrc_path, settings=settings, logger=logger).load()
        logger.log_warning.assert_not_called()

    def test_log_chargement(self, netrc_path):
        """Le chargement est journalisé avec le nombre de machines."""
        logger = MagicMock(spec=Logger)
        Netrc(netrc_path, logger=logger).load()
        messages = [c[0][0] for c in logger.log_info.call_args_list]
        assert any("(2 machines)" in m for m in messages)


class TestNetrcSave:
    """Tests pour Netrc.save."""

    def test_sauvegarde_preserve_le_reste(self, netrc_path):
        """Seule la valeur modifiée change dans le fichier."""
        netrc = Netrc(netrc_path)
        netrc.load()
        netrc.machines["ray"]["login"] = "demo2"
        assert netrc.is_changed
        netrc.save()
        assert netrc_path.read_text() == CONTENT.replace("demo", "demo2")
        assert not netrc.is_changed

    def test_sauvegarde_en_0600(self, tmp_path):
        """Le fichier est créé en 0600."""
        path = tmp_path / ".netrc"
        netrc = Netrc(path)
        netrc.load()
        netrc.machines["h"] = {"login": "u", "password": "p"}
        netrc.save()
        assert stat.S_IMODE(os.stat(path).st_mode) == 0o600
        assert path.read_text() == "machine h login u password p\n"

    def test_sauvegarde_mode_configurable(self, file_manager):
        """Le mode d'écriture vient de la configuration."""
        settings = NetrcSettings(file_mode=0o640)
        netrc = Netrc(
            "/tmp/x/.netrc", settings=settings, file_manager=file_manager
        )
        netrc.save()
        file_manager.write_file.assert_called_once_with(
            Path("/tmp/x/.netrc"), "", mode=0o640
        )

    def test_erreur_ecriture(self, file_manager):
        """Une erreur d'écriture devient NetrcFileError."""
        file_manager.write_file.side_effect = OSError("disque plein")
        netrc = Netrc("/tmp/x/.netrc", file_manager=file_manager)
        with pytest.raises(NetrcFileError, match="disque plein"):
            netrc.save()


class TestNetrcEncrypted:
    """Tests pour les fichiers chiffrés."""

    def test_detection_extension(self, tmp_path):
        """Un fichier .gpg est considéré comme chiffré."""
        assert Netrc(tmp_path / ".netrc.gpg").encrypted
        assert not Netrc(tmp_path / ".netrc").encrypted

    def test_lecture_dechiffre(self, tmp_path, cipher):
        """Le contenu déchiffré est parsé."""
        path = tmp_path / ".netrc.gpg"
        path.write_text("-----BEGIN PGP MESSAGE-----\n")
        netrc = Netrc(path, cipher=cipher)
        netrc.load()
        cipher.decrypt.assert_called_once_with(path)
        assert netrc.machines["a"].login == "u"

    def test_fichier_chiffre_absent(self, tmp_path, cipher):
        """Un fichier chiffré absent n'appelle pas gpg."""
        netrc = Netrc(tmp_path / ".netrc.gpg", cipher=cipher)
        netrc.load()
        cipher.decrypt.assert_not_called()
        assert len(netrc.machines) == 0

    def test_ecriture_chiffre(self, tmp_path, cipher):
        """Le texte sérialisé est chiffré avant écriture."""
        path = tmp_path / ".netrc.gpg"
        netrc = Netrc(path, cipher=cipher)
        netrc.machines["h"] = {"login": "u"}
        netrc.save()
        cipher.encrypt.assert_called_once_with("machine h login u\n")
        assert path.read_text() == "ARMOR[machine h login u\n]"
        assert not netrc.is_changed

    def test_erreur_chiffrement_propagee(self, tmp_path, cipher):
        """EncryptionError n'est pas masquée."""
        cipher.encrypt.side_effect = EncryptionError("gpg exited with code 2")
        netrc = Netrc(tmp_path / ".netrc.gpg", cipher=cipher)
        with pytest.raises(EncryptionError):
            netrc.save()
        assert not (tmp_path / ".netrc.gpg").exists()

    def test_suffixe_configurable(self, tmp_path, cipher):
        """L'extension chiffrée vient de la configuration."""
        settings = NetrcSettings(encrypted_suffix=".asc")
        assert Netrc(tmp_path / ".netrc.asc", settings=settings).encrypted
        assert not Netrc(tmp_path / ".netrc.gpg", settings=settings).encrypted


class TestNetrcHelpers:
    """Tests pour authenticators, le gestionnaire de contexte et repr."""

    def test_authenticators(self, netrc_path):
        """Le tuple suit la convention du module netrc standard."""
        netrc = Netrc(netrc_path)
        netrc.load()
        assert netrc.authenticators("ray") == ("demo", "acc", "mypassword")
        assert netrc.authenticators("api.example.com") == (
            "jeff", "", "secret"
        )
        assert netrc.authenticators("inconnue") is None

    def test_contexte_sauvegarde_si_modifie(self, file_manager):
        """La sortie du bloc sauvegarde les modifications."""
        with Netrc("/tmp/x/.netrc", file_manager=file_manager) as netrc:
            netrc.machines["ray"]["password"] = "new"
        file_manager.write_file.assert_called_once()
        written = file_manager.write_file.call_args[0][1]
        assert "password new account acc" in written

    def test_contexte_sans_modification(self, file_manager):
        """Aucune écriture si rien n'a changé."""
        with Netrc("/tmp/x/.netrc", file_manager=file_manager):
            pass
        file_manager.write_file.assert_not_called()

    def test_contexte_exception(self, file_manager):
        """Une exception dans le bloc empêche la sauvegarde."""
        with pytest.raises(RuntimeError):
            with Netrc("/tmp/x/.netrc", file_manager=file_manager) as netrc:
                netrc.machines["ray"] = None
                raise RuntimeError("boom")
        file_manager.write_file.assert_not_called()

    def test_repr(self, tmp_path):
        """repr indique le fichier et les machines."""
        netrc = Netrc(tmp_path / ".netrc")
        netrc.machines["h"] = {"login": "u"}
        assert repr(netrc) == (
            f"Netrc(file={str(tmp_path / '.netrc')!r}, machines=['h'])"
        )


class TestNetrcFromConfig:
    """Tests pour Netrc.from_config."""

    def test_depuis_toml(self, tmp_path, netrc_path):
        """La configuration TOML fixe le fichier et les options."""
        config = tmp_path / "config.toml"
        config.write_text(
            "[netrc]\n"
            f'file = "{netrc_path}"\n'
            "gpg_timeout = 30\n"
        )
        netrc = Netrc.from_config(config)
        assert netrc.file == netrc_path
        assert netrc.settings.gpg_timeout == 30
        netrc.load()
        assert "ray" in netrc.machines

    def test_chargeur_injecte(self, tmp_path):
        """Le chargeur de configuration est injectable."""
        loader = MagicMock()
        loader.load.return_value = NetrcSettings(file=tmp_path / "n")
        netrc = Netrc.from_config("ignored.toml", loader=loader)
        loader.load.assert_called_once_with("ignored.toml")
        assert netrc.file == tmp_path / "n"
