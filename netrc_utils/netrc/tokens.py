"""Tokens produits par le parseur netrc.

Une séquence de tokens est la seule source de vérité pour la
sérialisation : chaque entrée `machine` devient un MachineToken, tout
le reste (commentaires isolés, blocs `macdef`, `default`, lignes non
reconnues, fin de fichier) est conservé tel quel dans un OtherToken.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union

INLINE_WHITESPACE = " "
MULTILINE_WHITESPACE = "\n  "


class Layout(Enum):
    """Mise en forme d'une entrée machine."""

    INLINE = "inline"
    MULTILINE = "multiline"


@dataclass
class Property:
    """Valeur d'une propriété et son commentaire de fin de ligne.

    Attributes:
        value: Valeur de la propriété.
        comment: Commentaire brut, espaces de tête compris
            (ex: "  # compte perso"), ou None.
    """

    value: str
    comment: Optional[str] = None


@dataclass
class MachineToken:
    """Entrée `machine` d'un fichier netrc.

    Attributes:
        host: Nom de la machine.
        internal_whitespace: Séparateur émis avant chaque propriété.
            " " pour une entrée sur une ligne, "\\n" suivi de
            l'indentation d'origine pour une entrée multiligne.
        props: Propriétés dans l'ordre d'insertion.
        pre: Texte brut précédant l'entrée, sans le saut de ligne
            final. None si aucune ligne ne précède l'entrée.
        comment: Commentaire de la ligne d'en-tête ("# ...").
    """

    host: str
    internal_whitespace: str = INLINE_WHITESPACE
    props: Dict[str, Property] = field(default_factory=dict)
    pre: Optional[str] = None
    comment: Optional[str] = None

    @property
    def layout(self) -> Layout:
        if "\n" in self.internal_whitespace:
            return Layout.MULTILINE
        return Layout.INLINE


@dataclass
class OtherToken:
    """Contenu non reconnu, restitué à l'identique."""

    content: str


Token = Union[MachineToken, OtherToken]
