"""Parseur netrc préservant la mise en forme.

Le texte est consommé ligne par ligne. Une ligne d'en-tête `machine`
ouvre une entrée ; si elle porte aussi des propriétés, l'entrée est
sur une seule ligne, sinon les lignes indentées suivantes sont lues
comme propriétés. Tout le reste est accumulé et rattaché à l'entrée
suivante (ou au token final), si bien que rien n'est perdu.

Le parseur ne lève jamais d'exception : une ligne non reconnue est
simplement conservée comme contenu opaque.
"""

import re
from collections import deque
from typing import Deque, List, Optional

from netrc_utils.netrc.machines import Machines
from netrc_utils.netrc.tokens import (
    MULTILINE_WHITESPACE,
    MachineToken,
    OtherToken,
    Property,
    Token,
)

# machine <host> [<clé> <valeur> ...] [#commentaire]
HEADER_RE = re.compile(r"^machine\s+([^#\s]+(?:\s+[^#\s]+)*\s*)(#.*)?$")
# <indentation><clé> <valeur>[<espaces>#commentaire | <espaces>]
PROPERTY_RE = re.compile(r"^(\s+)([^#\s]\S*)\s+(\S+)(\s+#.*|\s+)?$")


def tokenize(text: Optional[str]) -> List[Token]:
    """Découpe un texte netrc en séquence de tokens.

    Args:
        text: Contenu brut du fichier (None est traité comme "").

    Returns:
        Les entrées machine dans l'ordre du fichier, suivies d'un
        OtherToken portant le texte restant (éventuellement vide).
    """
    lines: Deque[str] = deque((text or "").split("\n"))
    pre: List[str] = []
    machines: List[MachineToken] = []

    while lines:
        line = lines.popleft()
        match = HEADER_RE.match(line)
        if not match:
            pre.append(line)
            continue

        body, comment = match.groups()
        fields = body.split()
        token = MachineToken(host=fields[0] if fields else "", comment=comment)
        if len(fields) > 1:
            _read_inline(token, fields[1:])
        else:
            token.internal_whitespace = MULTILINE_WHITESPACE
            _read_multiline(token, lines)

        # première occurrence gagnante, la suivante disparaît
        if any(m.host == token.host for m in machines):
            continue

        if pre:
            token.pre = "\n".join(pre)
            pre = []
        machines.append(token)

    return [*machines, OtherToken("\n".join(pre))]


def _read_inline(token: MachineToken, fields: List[str]) -> None:
    # un jeton final sans valeur est ignoré
    for name, value in zip(fields[::2], fields[1::2]):
        token.props[name] = Property(value)


def _read_multiline(token: MachineToken, lines: Deque[str]) -> None:
    while lines:
        match = PROPERTY_RE.match(lines[0])
        if not match:
            return
        lines.popleft()
        whitespace, name, value, comment = match.groups()
        token.props[name] = Property(value, comment)
        token.internal_whitespace = "\n" + whitespace


def parse(text: Optional[str]) -> Machines:
    """Parse un texte netrc et retourne la vue indexée par machine.

    Args:
        text: Contenu brut du fichier netrc.

    Returns:
        Vue modifiable sur la séquence de tokens.

    Example:
        >>> machines = parse("machine a\\n  login foo\\n")
        >>> machines["a"]["login"] = "bar"
        >>> machines.serialize()
        'machine a\\n  login bar\\n'
    """
    return Machines(tokenize(text))
