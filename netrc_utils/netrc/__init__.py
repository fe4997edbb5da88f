"""Module netrc : édition de fichiers netrc préservant la mise en forme.

Le coeur transforme du texte en séquence de tokens (parse), expose
une vue modifiable indexée par machine (Machines / MachineView) et
reconstruit le texte (serialize) à l'octet près, hors champs modifiés.

Classes principales:
    - Machines: Vue indexée par nom de machine
    - MachineView: Vue sur les propriétés d'une machine
    - Netrc: Hôte gérant le fichier (lecture, écriture, gpg)
    - GpgCipher: Chiffrement via gpg

Fonctions:
    - parse: Texte -> Machines
    - tokenize: Texte -> liste de tokens
    - serialize: Tokens -> texte
    - default_netrc_path: Chemin netrc par défaut de la plateforme

Example:
    >>> from netrc_utils.netrc import parse
    >>> machines = parse("machine a\\n  login foo\\n  password bar\\n")
    >>> machines["a"]["login"] = "foo2"
    >>> machines.serialize()
    'machine a\\n  login foo2\\n  password bar\\n'
"""

from netrc_utils.netrc.cipher import ContentCipher, GpgCipher
from netrc_utils.netrc.file import Netrc
from netrc_utils.netrc.machines import MachineView, Machines
from netrc_utils.netrc.parser import parse, tokenize
from netrc_utils.netrc.paths import default_netrc_path
from netrc_utils.netrc.serializer import serialize
from netrc_utils.netrc.tokens import (
    Layout,
    MachineToken,
    OtherToken,
    Property,
    Token,
)

__all__ = [
    # Tokens
    "Layout",
    "MachineToken",
    "OtherToken",
    "Property",
    "Token",
    # Coeur
    "parse",
    "tokenize",
    "serialize",
    "Machines",
    "MachineView",
    # Hôte
    "Netrc",
    "ContentCipher",
    "GpgCipher",
    "default_netrc_path",
]
