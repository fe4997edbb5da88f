"""Reconstruction du texte netrc depuis une séquence de tokens."""

from typing import Iterable, Iterator, List

from netrc_utils.netrc.tokens import Layout, MachineToken, OtherToken, Token

PRIORITY_PROPS = ("login", "password")


def ordered_props(token: MachineToken) -> Iterator[str]:
    """Noms de propriétés dans l'ordre d'émission.

    `login` puis `password` s'ils sont présents, puis les autres
    propriétés dans leur ordre d'insertion.
    """
    for name in PRIORITY_PROPS:
        if name in token.props:
            yield name
    for name in token.props:
        if name not in PRIORITY_PROPS:
            yield name


def serialize(tokens: Iterable[Token]) -> str:
    """Sérialise une séquence de tokens en texte netrc.

    Ne modifie pas les tokens et peut être appelée autant de fois
    que nécessaire.

    Args:
        tokens: Séquence produite par le parseur, éventuellement
            modifiée via la vue Machines.

    Returns:
        Texte du fichier netrc.
    """
    output: List[str] = []
    for token in tokens:
        if isinstance(token, OtherToken):
            output.append(token.content)
        else:
            _serialize_machine(token, output)
    return "".join(output)


def _serialize_machine(token: MachineToken, output: List[str]) -> None:
    if token.pre is not None:
        output.append(token.pre + "\n")
    output.append(f"machine {token.host}")

    multiline = token.layout is Layout.MULTILINE
    if multiline and token.comment:
        output.append(" " + token.comment)
    for name in ordered_props(token):
        prop = token.props[name]
        output.append(
            f"{token.internal_whitespace}{name} {prop.value}"
            f"{prop.comment or ''}"
        )
    if not multiline and token.comment:
        output.append(" " + token.comment)
    output.append("\n")
