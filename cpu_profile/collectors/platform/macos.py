"""
Stratégie spécifique macOS pour le profil CPU

Ce module utilise les outils natifs macOS :
- uname pour la version du noyau et l'architecture
- system_profiler SPSoftwareDataType pour les versions système
- system_profiler SPHardwareDataType pour la topologie CPU
"""

from typing import Any, Dict

from ..base import (
    BaseStrategy, checked_div, drop_tokens, first_line_matching,
    lines_matching, match_to_integer, split_trim
)
from ...core.profile import HyperThreading, OsType

SOFTWARE_SOURCE = 'system_profiler SPSoftwareDataType'
HARDWARE_SOURCE = 'system_profiler SPHardwareDataType'


def parse_software_overview(output: str) -> Dict[str, str]:
    """
    Extrait les versions noyau et système de SPSoftwareDataType

    Raises:
        ParseNotFoundError: si "Kernel Version" ou "System Version" manque
    """
    lines = split_trim(output)
    return {
        'kernel_version': drop_tokens(
            first_line_matching(lines, r'Kernel Version', SOFTWARE_SOURCE), 2),
        'system_version': drop_tokens(
            first_line_matching(lines, r'System Version', SOFTWARE_SOURCE), 2)
    }


def parse_hardware_overview(output: str) -> Dict[str, Any]:
    """
    Calcule la topologie CPU à partir de SPHardwareDataType

    Le nombre de threads est déduit du statut Hyper-Threading : une ligne
    "Hyper-Threading Technology" absente vaut désactivé.

    Raises:
        ParseNotFoundError: libellé attendu absent
        DivisionByZeroError: "Number of Processors" vaut 0
    """
    lines = split_trim(output)

    cpu_model = drop_tokens(first_line_matching(lines, r'Processor Name', HARDWARE_SOURCE), 2)

    num_of_processors = match_to_integer(
        first_line_matching(lines, r'Number of Processors', HARDWARE_SOURCE),
        HARDWARE_SOURCE, 'Number of Processors')

    total_num_of_cores = match_to_integer(
        first_line_matching(lines, r'Total Number of Cores', HARDWARE_SOURCE),
        HARDWARE_SOURCE, 'Total Number of Cores')

    num_of_cores_of_a_processor = checked_div(total_num_of_cores, num_of_processors, HARDWARE_SOURCE)

    ht_lines = lines_matching(lines, r'Hyper-Threading Technology')
    if ht_lines and 'Enabled' in ht_lines[0]:
        hyper_threading = HyperThreading.ENABLED
    else:
        hyper_threading = HyperThreading.DISABLED

    threads_per_core = 2 if hyper_threading is HyperThreading.ENABLED else 1
    total_num_of_threads = total_num_of_cores * threads_per_core

    return {
        'cpu_model': cpu_model,
        'cpu_models': [cpu_model],
        'num_of_processors': num_of_processors,
        'num_of_cores_of_a_processor': num_of_cores_of_a_processor,
        'total_num_of_cores': total_num_of_cores,
        'num_of_threads_of_a_processor': checked_div(total_num_of_threads, num_of_processors, HARDWARE_SOURCE),
        'total_num_of_threads': total_num_of_threads,
        'hyper_threading': hyper_threading
    }


class MacOSStrategy(BaseStrategy):
    """
    Stratégie pour macOS

    Utilise uname et system_profiler ; tout échec de commande est fatal.
    """

    required_commands = ('uname', 'system_profiler')

    def collect(self) -> Dict[str, Any]:
        """
        Collecte le profil macOS

        Returns:
            dict: Fragment de profil macOS
        """
        self._start_collection()

        macos_info = {
            'kernel_release': self._run('uname', '-r'),
            'cpu_type': self._run('uname', '-m'),
            'os_type': OsType.MACOS
        }

        software = self.runner.run_checked('system_profiler', ['SPSoftwareDataType'])
        macos_info.update(parse_software_overview(software))

        hardware = self.runner.run_checked('system_profiler', ['SPHardwareDataType'])
        macos_info.update(parse_hardware_overview(hardware))

        self.last_collection_duration = self._end_collection()
        return macos_info
