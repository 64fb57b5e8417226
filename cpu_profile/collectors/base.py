"""
Classe de base pour toutes les stratégies de plateforme

Ce module définit l'interface commune des stratégies ainsi que les
fonctions d'analyse de texte partagées. Les fonctions d'analyse sont
pures : elles prennent la sortie capturée et retournent une valeur
ou lèvent une erreur nommée.
"""

import re
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..core.errors import DivisionByZeroError, ParseNotFoundError, UnexpectedOutputError
from ..core.logger import get_logger

_INTEGER_RE = re.compile(r'[0-9]+')


def split_trim(text: str) -> List[str]:
    """Découpe une sortie en lignes débarrassées des espaces de bord"""
    return [line.strip() for line in text.split('\n')]


def lines_matching(lines: Sequence[str], pattern: str) -> List[str]:
    """Retourne les lignes où l'expression régulière est trouvée"""
    regex = re.compile(pattern)
    return [line for line in lines if regex.search(line)]


def first_line_matching(lines: Sequence[str], pattern: str, source: str) -> str:
    """
    Retourne la première ligne où l'expression est trouvée

    Raises:
        ParseNotFoundError: si aucune ligne ne correspond
    """
    matched = lines_matching(lines, pattern)
    if not matched:
        raise ParseNotFoundError(source, pattern)
    return matched[0]


def drop_tokens(line: str, count: int) -> str:
    """
    Supprime les premiers mots d'une ligne et rejoint le reste

    Exemple: drop_tokens("Kernel Version: Darwin 23.1.0", 2) -> "Darwin 23.1.0"
    """
    return ' '.join(line.split()[count:])


def match_to_integer(text: str, source: str, marker: str) -> int:
    """
    Extrait le premier entier présent dans le texte

    Raises:
        ParseNotFoundError: si le texte ne contient aucun chiffre
    """
    match = _INTEGER_RE.search(text)
    if match is None:
        raise ParseNotFoundError(source, marker)
    return int(match.group(0))


def parse_int(text: str, source: str) -> int:
    """
    Convertit une sortie entière brute (ex: sortie de sysctl -n)

    Raises:
        UnexpectedOutputError: si la sortie n'est pas un entier
    """
    value = text.strip()
    try:
        return int(value)
    except ValueError:
        raise UnexpectedOutputError(source, value)


def checked_div(dividend: int, divisor: int, source: str) -> int:
    """
    Division entière refusant un diviseur nul

    Raises:
        DivisionByZeroError: si divisor vaut 0
    """
    if divisor == 0:
        raise DivisionByZeroError(source)
    return dividend // divisor


class BaseStrategy(ABC):
    """
    Classe de base abstraite des stratégies de plateforme

    Chaque stratégie déclare les commandes qu'elle utilise, les vérifie
    avant tout lancement puis produit un fragment de profil.
    """

    # Commandes vérifiées avant toute exécution
    required_commands: Tuple[str, ...] = ()

    def __init__(self, runner, logger=None, check_executables: bool = True):
        """
        Initialise la stratégie

        Args:
            runner: Instance de CommandRunner
            logger: Logger à utiliser
            check_executables: Vérifie la présence des commandes avant exécution
        """
        self.runner = runner
        self.logger = logger or get_logger()
        self.check_executables = check_executables

        self.strategy_name = self.__class__.__name__
        self.collection_start_time: Optional[float] = None
        self.last_collection_duration = 0.0

    @abstractmethod
    def collect(self) -> Dict[str, Any]:
        """
        Produit le fragment de profil de la plateforme

        Returns:
            dict: Champs du profil (hors identifiants du runtime)
        """

    def _start_collection(self):
        """Démarre une session de collecte et vérifie les commandes requises"""
        self.collection_start_time = time.time()
        self.logger.debug(f"Début collecte {self.strategy_name}")

        if self.check_executables and self.required_commands:
            self.runner.ensure_available(*self.required_commands)

    def _end_collection(self) -> float:
        """
        Termine une session de collecte

        Returns:
            float: Durée de collecte en secondes
        """
        if self.collection_start_time:
            duration = time.time() - self.collection_start_time
            self.logger.debug(f"Collecte {self.strategy_name} terminée en {duration:.2f}s")
            return duration
        return 0.0

    def _run(self, command: str, *args: str) -> str:
        """Exécute une commande obligatoire et retourne sa sortie nettoyée"""
        return self.runner.run_checked(command, args).strip()
