"""
Exécution des utilitaires système

Les commandes sont toujours lancées sous forme de vecteur d'arguments,
jamais via un shell, avec un délai maximal configurable.
"""

import shutil
import subprocess
from typing import List, Optional, Sequence

from .errors import CommandExecutionError, ToolNotFoundError
from .logger import get_logger


class CommandResult:
    """
    Résultat brut d'une commande : sortie standard et code de retour
    """

    def __init__(self, command: str, args: Sequence[str], stdout: str, exit_status: int):
        self.command = command
        self.args = list(args)
        self.stdout = stdout
        self.exit_status = exit_status

    @property
    def ok(self) -> bool:
        return self.exit_status == 0

    def __repr__(self):
        return (f"CommandResult(command={self.command!r}, args={self.args!r}, "
                f"exit_status={self.exit_status!r})")


class CommandRunner:
    """
    Lance les utilitaires de la plateforme et vérifie leur présence

    Args:
        timeout: Délai maximal par commande en secondes (None ou 0 = illimité)
        logger: Logger à utiliser
    """

    def __init__(self, timeout: Optional[float] = 30, logger=None):
        self.timeout = timeout or None
        self.logger = logger or get_logger()

    def which(self, command: str) -> Optional[str]:
        """Retourne le chemin de la commande ou None"""
        return shutil.which(command)

    def ensure_available(self, *commands: str):
        """
        Vérifie que toutes les commandes sont résolues dans le PATH

        Raises:
            ToolNotFoundError: pour la première commande manquante
        """
        for command in commands:
            path = self.which(command)
            if path is None:
                self.logger.debug(f"Commande introuvable: {command}")
                raise ToolNotFoundError(command)
            self.logger.debug(f"Commande {command} trouvée: {path}")

    def run(self, command: str, args: Sequence[str] = ()) -> CommandResult:
        """
        Exécute une commande et capture sa sortie standard

        Args:
            command: Nom de l'exécutable
            args: Arguments

        Returns:
            CommandResult: Sortie et code de retour

        Raises:
            CommandExecutionError: délai dépassé ou lancement impossible
        """
        argv: List[str] = [command] + list(args)
        self.logger.debug(f"Exécution: {' '.join(argv)}")

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace',
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired:
            self.logger.debug(f"Timeout pour la commande: {' '.join(argv)}")
            raise CommandExecutionError(command, args, timed_out=True)
        except OSError as e:
            self.logger.debug(f"Erreur lors de l'exécution de '{' '.join(argv)}': {e}")
            raise CommandExecutionError(command, args) from e

        if completed.returncode != 0:
            self.logger.debug(f"Commande échouée: {' '.join(argv)} (code: {completed.returncode})")

        return CommandResult(command, args, completed.stdout, completed.returncode)

    def run_checked(self, command: str, args: Sequence[str] = ()) -> str:
        """
        Exécute une commande dont l'échec est fatal

        Returns:
            str: Sortie standard brute

        Raises:
            CommandExecutionError: code de retour non nul
        """
        result = self.run(command, args)
        if not result.ok:
            raise CommandExecutionError(command, args, result.exit_status)
        return result.stdout
