"""
Stratégie spécifique FreeBSD pour le profil CPU

Ce module utilise uname et sysctl. La répartition par processeur
physique n'est pas exposée par les clés sysctl utilisées.
"""

from typing import Any, Dict

from ..base import BaseStrategy, parse_int
from ...core.errors import UnexpectedOutputError
from ...core.profile import UNKNOWN, HyperThreading, OsType

HT_SYSCTL = 'machdep.hyperthreading_allowed'


def parse_hyperthreading_allowed(output: str) -> HyperThreading:
    """
    Interprète la sortie de `sysctl -n machdep.hyperthreading_allowed`

    Raises:
        UnexpectedOutputError: valeur autre que 0 ou 1
    """
    value = output.strip()
    if value == '1':
        return HyperThreading.ENABLED
    if value == '0':
        return HyperThreading.DISABLED
    raise UnexpectedOutputError(f"sysctl -n {HT_SYSCTL}", value)


class FreeBSDStrategy(BaseStrategy):
    """
    Stratégie pour FreeBSD
    """

    required_commands = ('uname', 'sysctl')

    def collect(self) -> Dict[str, Any]:
        """
        Collecte le profil FreeBSD

        Returns:
            dict: Fragment de profil FreeBSD
        """
        self._start_collection()

        # system_version et kernel_version reprennent uname -r
        kernel_release = self._run('uname', '-r')
        cpu_type = self._run('uname', '-m')
        cpu_model = self._sysctl('hw.model')

        freebsd_info = {
            'kernel_release': kernel_release,
            'kernel_version': kernel_release,
            'system_version': kernel_release,
            'cpu_type': cpu_type,
            'os_type': OsType.FREEBSD,
            'cpu_model': cpu_model,
            'cpu_models': [cpu_model],
            'num_of_processors': UNKNOWN,
            'num_of_cores_of_a_processor': UNKNOWN,
            'total_num_of_cores': parse_int(self._sysctl('kern.smp.cores'), 'sysctl -n kern.smp.cores'),
            'num_of_threads_of_a_processor': UNKNOWN,
            'total_num_of_threads': parse_int(self._sysctl('kern.smp.cpus'), 'sysctl -n kern.smp.cpus'),
            'hyper_threading': parse_hyperthreading_allowed(self._sysctl(HT_SYSCTL))
        }

        self.last_collection_duration = self._end_collection()
        return freebsd_info

    def _sysctl(self, key: str) -> str:
        """Lit une valeur sysctl (échec fatal)"""
        return self._run('sysctl', '-n', key)
