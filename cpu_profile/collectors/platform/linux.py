"""
Stratégie spécifique Linux pour le profil CPU

Ce module utilise les interfaces Linux :
- uname pour le noyau et l'architecture
- /etc/issue pour la bannière de distribution
- /proc/cpuinfo pour la topologie du processeur
"""

from typing import Any, Dict, List

from ..base import (
    BaseStrategy, checked_div, lines_matching, match_to_integer
)
from ...core.errors import ParseNotFoundError
from ...core.profile import HyperThreading, OsType

CPUINFO_PATH = '/proc/cpuinfo'
ISSUE_PATH = '/etc/issue'


def _sort_unique(lines: List[str]) -> List[str]:
    """Équivalent de `sort -u` sur des lignes déjà filtrées"""
    return sorted(set(lines))


def parse_cpu_models(cpuinfo: str) -> List[str]:
    """
    Extrait les noms de modèle distincts de /proc/cpuinfo

    Chaque ligne "model name : <modèle>" perd ses trois premiers mots
    (clé et séparateur) ; les lignes vides et les doublons sont écartés.

    Returns:
        list: Modèles distincts, dans l'ordre de `sort -u`
    """
    models = []
    for line in _sort_unique(lines_matching(cpuinfo.split('\n'), r'model.name')):
        line = line.strip()
        if not line:
            continue
        model = ' '.join(line.split()[3:])
        if model and model not in models:
            models.append(model)
    return models


def parse_num_of_processors(cpuinfo: str) -> int:
    """Nombre de valeurs "physical id" distinctes (sockets)"""
    return len(_sort_unique(lines_matching(cpuinfo.split('\n'), r'physical.id')))


def parse_cores_of_a_processor(cpuinfo: str) -> int:
    """
    Nombre de cœurs physiques par processeur

    Raises:
        ParseNotFoundError: si aucune ligne "cpu cores" n'est présente
    """
    lines = _sort_unique(lines_matching(cpuinfo.split('\n'), r'cpu.cores'))
    return match_to_integer('\n'.join(lines).strip(), CPUINFO_PATH, 'cpu cores')


def parse_total_threads(cpuinfo: str) -> int:
    """
    Nombre de threads logiques (lignes commençant par "processor")

    Raises:
        ParseNotFoundError: si aucune ligne "processor" n'est présente
    """
    count = sum(1 for line in cpuinfo.split('\n') if line.startswith('processor'))
    if count == 0:
        raise ParseNotFoundError(CPUINFO_PATH, 'processor')
    return count


def parse_cpuinfo(cpuinfo: str) -> Dict[str, Any]:
    """
    Calcule la topologie CPU à partir du contenu de /proc/cpuinfo

    Args:
        cpuinfo: Contenu brut de /proc/cpuinfo

    Returns:
        dict: Modèles, processeurs, cœurs, threads et statut hyper-threading

    Raises:
        ParseNotFoundError: marqueur attendu absent
        DivisionByZeroError: aucune ligne "physical id"
    """
    cpu_models = parse_cpu_models(cpuinfo)
    if not cpu_models:
        raise ParseNotFoundError(CPUINFO_PATH, 'model name')

    num_of_processors = parse_num_of_processors(cpuinfo)
    num_of_cores_of_a_processor = parse_cores_of_a_processor(cpuinfo)
    total_num_of_cores = num_of_cores_of_a_processor * num_of_processors
    total_num_of_threads = parse_total_threads(cpuinfo)
    num_of_threads_of_a_processor = checked_div(total_num_of_threads, num_of_processors, CPUINFO_PATH)

    if total_num_of_cores < total_num_of_threads:
        hyper_threading = HyperThreading.ENABLED
    else:
        hyper_threading = HyperThreading.DISABLED

    return {
        'cpu_model': cpu_models[0],
        'cpu_models': cpu_models,
        'num_of_processors': num_of_processors,
        'num_of_cores_of_a_processor': num_of_cores_of_a_processor,
        'total_num_of_cores': total_num_of_cores,
        'num_of_threads_of_a_processor': num_of_threads_of_a_processor,
        'total_num_of_threads': total_num_of_threads,
        'hyper_threading': hyper_threading
    }


class LinuxStrategy(BaseStrategy):
    """
    Stratégie pour Linux

    Les filtres grep / sort -u / wc -l sont appliqués en Python sur
    le contenu de /proc/cpuinfo lu une seule fois.
    """

    required_commands = ('cat', 'grep', 'sort', 'wc', 'uname')

    def collect(self) -> Dict[str, Any]:
        """
        Collecte le profil Linux

        Returns:
            dict: Fragment de profil Linux
        """
        self._start_collection()

        kernel_release = self._run('uname', '-r')
        system_version = self._read_issue()
        kernel_version = self._run('uname', '-v')
        cpu_type = self._run('uname', '-m')

        cpuinfo = self.runner.run_checked('cat', [CPUINFO_PATH])
        topology = parse_cpuinfo(cpuinfo)
        self.logger.debug(f"Topologie CPU: {topology}")

        linux_info = {
            'kernel_release': kernel_release,
            'kernel_version': kernel_version,
            'system_version': system_version,
            'cpu_type': cpu_type,
            'os_type': OsType.LINUX
        }
        linux_info.update(topology)

        self.last_collection_duration = self._end_collection()
        return linux_info

    def _read_issue(self) -> str:
        """
        Lit la bannière de distribution

        Returns:
            str: Contenu nettoyé de /etc/issue, ou "" si la lecture échoue
        """
        result = self.runner.run('cat', [ISSUE_PATH])
        if not result.ok:
            self.logger.debug(f"Lecture {ISSUE_PATH} impossible (code: {result.exit_status})")
            return ""
        return result.stdout.strip()
