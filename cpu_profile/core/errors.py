"""
Exceptions levées lors de la construction d'un profil CPU

Toute erreur interrompt la requête : il n'y a ni résultat partiel
ni nouvelle tentative.
"""

from typing import Optional, Sequence


class ProfileError(Exception):
    """Classe de base de toutes les erreurs de profilage"""


class ToolNotFoundError(ProfileError):
    """
    Un utilitaire requis est introuvable dans le PATH

    Levée avant qu'aucun processus ne soit lancé pour la plateforme.
    """

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"{command} est introuvable dans le PATH")


class CommandExecutionError(ProfileError):
    """
    Un utilitaire a été lancé mais a échoué

    exit_status vaut None lorsque la commande n'a pas pu être lancée
    ou a dépassé le délai imparti.
    """

    def __init__(self, command: str, args: Sequence[str] = (),
                 exit_status: Optional[int] = None, timed_out: bool = False):
        self.command = command
        self.args_list = list(args)
        self.exit_status = exit_status
        self.timed_out = timed_out

        command_line = " ".join([command] + self.args_list)
        if timed_out:
            message = f"'{command_line}' a dépassé le délai d'exécution"
        elif exit_status is None:
            message = f"'{command_line}' n'a pas pu être exécutée"
        else:
            message = f"'{command_line}' a échoué (code: {exit_status})"
        super().__init__(message)


class ParseError(ProfileError):
    """Sortie d'un utilitaire impossible à interpréter"""

    def __init__(self, source: str, detail: str):
        self.source = source
        self.detail = detail
        super().__init__(f"{source}: {detail}")


class ParseNotFoundError(ParseError):
    """Le marqueur attendu est absent de la sortie"""

    def __init__(self, source: str, marker: str):
        self.marker = marker
        super().__init__(source, f"'{marker}' introuvable dans la sortie")


class UnexpectedOutputError(ParseError):
    """La sortie ne correspond pas au format attendu"""

    def __init__(self, source: str, output: str):
        self.output = output
        super().__init__(source, f"sortie inattendue: {output!r}")


class DivisionByZeroError(ProfileError, ZeroDivisionError):
    """Nombre de processeurs physiques nul"""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"{source}: nombre de processeurs égal à 0")
