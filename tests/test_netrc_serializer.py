"""Tests unitaires pour le sérialiseur netrc."""

import pytest

from netrc_utils.netrc import (
    MachineToken,
    OtherToken,
    Property,
    parse,
    serialize,
)
from netrc_utils.netrc.serializer import ordered_props


class TestSerialize:
    """Tests pour la fonction serialize."""

    def test_sequence_vide(self):
        """Une séquence vide donne un texte vide."""
        assert serialize([]) == ""

    def test_entree_inline(self):
        """Une entrée inline tient sur une ligne terminée par \\n."""
        token = MachineToken(
            host="h",
            props={"login": Property("u"), "password": Property("p")},
        )
        assert serialize([token]) == "machine h login u password p\n"

    def test_entree_multiligne_avec_commentaires(self):
        """Le commentaire d'en-tête suit le nom de machine."""
        token = MachineToken(
            host="h",
            internal_whitespace="\n\t",
            props={"login": Property("u", "  # moi")},
            comment="# hote",
        )
        assert serialize([token]) == "machine h # hote\n\tlogin u  # moi\n"

    def test_commentaire_inline_en_fin_de_ligne(self):
        """En inline, le commentaire est placé après les propriétés."""
        token = MachineToken(
            host="h", props={"login": Property("u")}, comment="# c"
        )
        assert serialize([token]) == "machine h login u # c\n"

    def test_texte_precedent(self):
        """Le texte precedent est suivi d'un saut de ligne."""
        tokens = [
            MachineToken(host="a", pre="# note", props={"login": Property("x")}),
            OtherToken("# fin\n"),
        ]
        assert serialize(tokens) == "# note\nmachine a login x\n# fin\n"

    def test_pre_vide_donne_ligne_vide(self):
        """Un pre vide (mais non None) produit une ligne vide."""
        token = MachineToken(host="a", pre="", props={"login": Property("x")})
        assert serialize([token]) == "\nmachine a login x\n"

    def test_ordre_login_password_prioritaire(self):
        """login puis password sont toujours émis en premier."""
        machines = parse("machine a account acc password p login l\n")
        assert machines.serialize() == (
            "machine a login l password p account acc\n"
        )

    def test_serialisation_repetable(self):
        """Sérialiser deux fois donne le même résultat."""
        machines = parse("# c\nmachine a\n  login u\n")
        assert machines.serialize() == machines.serialize()

    def test_ajout_saut_de_ligne_final(self):
        """Une entrée en fin de fichier est toujours terminée."""
        assert parse("machine a login b").serialize() == "machine a login b\n"


class TestOrderedProps:
    """Tests pour ordered_props."""

    def test_ordre_insertion_conserve(self):
        """Les propriétés secondaires gardent leur ordre d'insertion."""
        token = MachineToken(
            host="h",
            props={
                "port": Property("22"),
                "password": Property("p"),
                "account": Property("a"),
            },
        )
        assert list(ordered_props(token)) == ["password", "port", "account"]


class TestRoundTrip:
    """La sérialisation d'un texte non modifié est identique."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "machine a login b",
            "machine a login b\n",
            "# comment\n"
            "machine a\n"
            "  login foo  # c\n"
            "  password bar\n"
            "\n"
            "machine b login u password p # hdr\n"
            "macdef x\n"
            "put\n"
            "\n",
            "machine t\n\tlogin x\n\tpassword y\n",
            "machine a\n  login foo  \n  password bar\n",
            "machine a\n  login foo\n  # note\n  password bar\n",
            "\n\n\nmachine a login b\n\n\n",
            "default login anonymous password me@example.com\n",
        ],
    )
    def test_identite(self, text):
        """parse puis serialize restitue le texte d'origine."""
        expected = text if text.endswith("\n") or not text else text + "\n"
        assert parse(text).serialize() == expected

    def test_localite_des_modifications(self):
        """Modifier une propriété ne touche que sa ligne."""
        text = (
            "# comment\n"
            "machine a\n"
            "  login foo  # c\n"
            "  password bar\n"
            "\n"
            "machine b login u password p # hdr\n"
        )
        machines = parse(text)
        machines["b"]["password"] = "secret"
        assert machines.serialize() == text.replace(
            "password p #", "password secret #"
        )
