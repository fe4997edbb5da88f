"""Constructeur fluent pour assembler des commandes système.

Example:
    Construction de la commande de chiffrement gpg :

        from netrc_utils.commands import CommandBuilder

        cmd = (
            CommandBuilder("gpg")
            .with_options(["-a", "--batch"])
            .with_flag("--default-recipient-self")
            .with_flag("-e")
            .build()
        )
        # Résultat : ["gpg", "-a", "--batch",
        #             "--default-recipient-self", "-e"]
"""

from typing import List, Optional


class CommandBuilder:
    """Constructeur fluent pour assembler des commandes système."""

    def __init__(self, program: str) -> None:
        """Initialise le constructeur avec le programme.

        Args:
            program: Nom ou chemin du programme à exécuter.

        Raises:
            ValueError: Si program est vide.
        """
        if not program or not program.strip():
            raise ValueError("Le programme est requis.")
        self._program: str = program
        self._options: List[str] = []
        self._args: List[str] = []

    def with_options(
        self, options: List[str]
    ) -> "CommandBuilder":
        """Ajoute une liste d'options (ex: ['--batch', '--quiet'])."""
        self._options.extend(options)
        return self

    def with_flag(self, flag: str) -> "CommandBuilder":
        """Ajoute un flag simple (ex: '--decrypt')."""
        self._options.append(flag)
        return self

    def with_option(
        self, key: str, value: str
    ) -> "CommandBuilder":
        """Ajoute une option au format 'clé=valeur'.

        Args:
            key: Clé de l'option (ex: '--homedir').
            value: Valeur de l'option.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._options.append(f"{key}={value}")
        return self

    def with_option_if(
        self,
        key: str,
        value: Optional[str],
        condition: bool = True,
    ) -> "CommandBuilder":
        """Ajoute une option seulement si la condition est vraie.

        L'option est ignorée si condition est False ou si
        value est None.
        """
        if condition and value is not None:
            self._options.append(f"{key}={value}")
        return self

    def with_args(
        self, args: List[str]
    ) -> "CommandBuilder":
        """Ajoute les arguments positionnels finaux."""
        self._args.extend(args)
        return self

    def build(self) -> List[str]:
        """Construit et retourne la commande sous forme de liste."""
        return [self._program] + self._options + self._args
