"""Vue modifiable, indexée par machine, sur une séquence de tokens.

Machines ne stocke aucune donnée propre : chaque lecture et chaque
écriture est traduite en opération sur la séquence de tokens qu'elle
possède, ce qui garantit que la sérialisation reflète toujours l'état
visible par l'appelant.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, List, Optional

from netrc_utils.netrc.serializer import serialize
from netrc_utils.netrc.tokens import (
    INLINE_WHITESPACE,
    MachineToken,
    OtherToken,
    Property,
    Token,
)

HOST_KEY = "host"


class MachineView(MutableMapping[str, str]):
    """Vue vivante sur les propriétés d'une entrée machine.

    - `view["host"]` retourne (ou renomme) la machine ; "host" n'est
      pas listé parmi les propriétés.
    - Affecter une valeur vide ou None supprime la propriété.
    - Une propriété existante garde son commentaire quand sa valeur
      change.
    """

    def __init__(self, token: MachineToken) -> None:
        self._token = token

    @property
    def token(self) -> MachineToken:
        return self._token

    @property
    def host(self) -> str:
        return self._token.host

    @host.setter
    def host(self, value: str) -> None:
        self._token.host = "" if value is None else str(value)

    @property
    def login(self) -> Optional[str]:
        return self.get("login")

    @login.setter
    def login(self, value: Optional[str]) -> None:
        self["login"] = value

    @property
    def password(self) -> Optional[str]:
        return self.get("password")

    @password.setter
    def password(self, value: Optional[str]) -> None:
        self["password"] = value

    @property
    def account(self) -> Optional[str]:
        return self.get("account")

    @account.setter
    def account(self, value: Optional[str]) -> None:
        self["account"] = value

    def __getitem__(self, name: str) -> str:
        if name == HOST_KEY:
            return self._token.host
        prop = self._token.props.get(name) if isinstance(name, str) else None
        if prop is None:
            raise KeyError(name)
        return prop.value

    def __setitem__(self, name: str, value: Optional[str]) -> None:
        if name == HOST_KEY:
            self.host = value
            return
        if not value:
            self._token.props.pop(name, None)
            return
        prop = self._token.props.get(name)
        if prop is None:
            self._token.props[name] = Property(str(value))
        else:
            prop.value = str(value)

    def __delitem__(self, name: str) -> None:
        self._token.props.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._token.props

    def __iter__(self) -> Iterator[str]:
        return iter(self._token.props)

    def __len__(self) -> int:
        return len(self._token.props)

    def __repr__(self) -> str:
        return f"MachineView(host={self.host!r}, props={dict(self)!r})"


class Machines(MutableMapping[str, MachineView]):
    """Accès aux entrées d'un fichier netrc par nom de machine.

    L'ordre d'itération est celui de la séquence de tokens : ordre du
    fichier pour les entrées existantes, puis ordre d'ajout. Les
    tokens opaques (commentaires, macdef, default...) ne sont jamais
    listés mais restent dans la séquence.

    Les lectures ne lèvent jamais d'autre exception que KeyError
    (protocole Mapping) : `get()` retourne None pour une clé inconnue,
    quel que soit son type.

    Example:
        >>> machines = parse("")
        >>> machines["h"] = {"login": "u", "password": "p"}
        >>> machines.serialize()
        'machine h login u password p\\n'
    """

    def __init__(self, tokens: List[Token]) -> None:
        """Initialise la vue.

        Args:
            tokens: Séquence de tokens, possédée par la vue et
                modifiée en place.
        """
        self._tokens = tokens

    @property
    def tokens(self) -> List[Token]:
        return self._tokens

    def _entries(self) -> Iterator[MachineToken]:
        return (t for t in self._tokens if isinstance(t, MachineToken))

    def _find(self, host: Any) -> Optional[MachineToken]:
        if not isinstance(host, str):
            return None
        return next((t for t in self._entries() if t.host == host), None)

    def _append(self, host: str) -> MachineToken:
        """Ajoute une nouvelle entrée en fin de séquence.

        L'entrée reprend la mise en forme de la dernière entrée
        définie, ou la forme sur une ligne si le modèle est vide.
        """
        entries = list(self._entries())
        last = entries[-1] if entries else None
        token = MachineToken(
            host=host,
            internal_whitespace=(
                last.internal_whitespace if last else INLINE_WHITESPACE
            ),
        )
        tail = self._tokens[-1] if self._tokens else None
        if (
            isinstance(tail, OtherToken)
            and tail.content
            and not tail.content.endswith("\n")
        ):
            # l'en-tête doit commencer sur sa propre ligne
            token.pre = ""
        self._tokens.append(token)
        return token

    def __getitem__(self, host: str) -> MachineView:
        token = self._find(host)
        if token is None:
            raise KeyError(host)
        return MachineView(token)

    def __setitem__(
        self,
        host: str,
        value: Optional[Mapping[str, Optional[str]]],
    ) -> None:
        """Crée, complète ou supprime une entrée.

        Args:
            host: Nom de la machine.
            value: None pour supprimer l'entrée ; sinon un mapping
                nom -> valeur fusionné dans l'entrée (créée si besoin).
        """
        if value is None:
            del self[host]
            return
        token = self._find(host)
        if isinstance(value, MachineView) and value.token is token:
            return
        items = list(value.items())
        if token is None:
            token = self._append(host)
        view = MachineView(token)
        for name, prop_value in items:
            view[name] = prop_value

    def __delitem__(self, host: str) -> None:
        token = self._find(host)
        if token is not None:
            self._tokens[:] = [t for t in self._tokens if t is not token]

    def __contains__(self, host: object) -> bool:
        return self._find(host) is not None

    def __iter__(self) -> Iterator[str]:
        seen = set()
        for token in self._entries():
            if token.host not in seen:
                seen.add(token.host)
                yield token.host

    def __len__(self) -> int:
        return len({t.host for t in self._entries()})

    def __repr__(self) -> str:
        return f"Machines({list(self)!r})"

    def serialize(self) -> str:
        """Retourne le texte netrc correspondant à l'état courant."""
        return serialize(self._tokens)
