"""Tests pour le module validation."""

import os

import pytest

from netrc_utils.errors.exceptions import ValidationError
from netrc_utils.validation import NetrcPermissionChecker, Validator


class TestNetrcPermissionChecker:
    """Tests pour NetrcPermissionChecker."""

    def test_implements_validator(self, tmp_path):
        """Vérifie l'interface Validator."""
        assert isinstance(NetrcPermissionChecker(tmp_path), Validator)

    def test_fichier_0600_valide(self, tmp_path):
        """Un fichier en 0600 est sûr."""
        netrc = tmp_path / ".netrc"
        netrc.write_text("machine a login b\n")
        os.chmod(netrc, 0o600)

        checker = NetrcPermissionChecker(netrc)

        assert checker.is_secure()
        checker.validate()

    def test_fichier_0400_valide(self, tmp_path):
        """Un fichier en lecture seule pour le propriétaire est sûr."""
        netrc = tmp_path / ".netrc"
        netrc.write_text("")
        os.chmod(netrc, 0o400)

        assert NetrcPermissionChecker(netrc).is_secure()

    @pytest.mark.parametrize("mode", [0o644, 0o640, 0o604, 0o660])
    def test_fichier_ouvert_leve_erreur(self, tmp_path, mode):
        """Un accès du groupe ou des autres lève ValidationError."""
        netrc = tmp_path / ".netrc"
        netrc.write_text("")
        os.chmod(netrc, mode)

        checker = NetrcPermissionChecker(str(netrc))

        assert not checker.is_secure()
        with pytest.raises(ValidationError, match=oct(mode)):
            checker.validate()

    def test_fichier_absent_valide(self, tmp_path):
        """Un fichier absent sera créé en 0600 : il est sûr."""
        checker = NetrcPermissionChecker(tmp_path / "absent")

        assert checker.is_secure()
        checker.validate()
