"""
    ConsoleErrorHandler : affichage des erreurs netrc pour l'utilisateur.
"""
from netrc_utils.errors.base import ErrorHandler
from netrc_utils.errors.exceptions import (ApplicationError,
                                           ConfigurationError,
                                           EncryptionError,
                                           NetrcFileError,
                                           ValidationError)

DEFAULT_SOLUTIONS: dict[type[Exception], str] = {
    EncryptionError: (
        "Vérifiez que gpg est installé et qu'une clé par défaut "
        "est configurée."
    ),
    NetrcFileError: (
        "Vérifiez le chemin et les permissions du fichier netrc."
    ),
    ValidationError: (
        "Restreignez les permissions du fichier (chmod 600)."
    ),
    ConfigurationError: "Vérifiez votre fichier de configuration.",
}


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche un message de solution adapté au type
    d'erreur.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs
                connues/inconnues (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"}
                fusionné avec les solutions par défaut. Les entrées
                fournies sont prioritaires.
        """
        self.base_error_type = base_error_type
        self.solutions = dict(solutions or {})
        for error_type, solution in DEFAULT_SOLUTIONS.items():
            self.solutions.setdefault(error_type, solution)

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console."""
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: Exception) -> str:
        """Retourne la solution du premier type correspondant.

        Les types sont testés dans l'ordre d'insertion du dictionnaire.
        """
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: Exception) -> None:
        print(f"\n🛑 {type(error).__name__}: {str(error)}")
        print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue "
            "avec ces informations."
        )
