"""
Stratégie Windows et systèmes non reconnus

Aucun outil n'est lancé : seuls le type de système et le nombre de
threads ordonnançables par le runtime sont renseignés.
"""

from typing import Any, Dict

from ..base import BaseStrategy
from ...core.profile import UNKNOWN, HyperThreading, OsType


class UnsupportedPlatformStrategy(BaseStrategy):
    """
    Stratégie minimale pour Windows et les plateformes non reconnues

    Args:
        runner: Instance de CommandRunner (non utilisée)
        os_type: OsType.WINDOWS ou OsType.OTHER
        runtime: Instance de RuntimeInfo fournissant le nombre de threads
        logger: Logger à utiliser
    """

    def __init__(self, runner, os_type: OsType, runtime, logger=None, check_executables: bool = True):
        super().__init__(runner, logger, check_executables)
        self.os_type = os_type
        self.runtime = runtime

    def collect(self) -> Dict[str, Any]:
        self._start_collection()

        stub_info = {
            'kernel_release': UNKNOWN,
            'kernel_version': UNKNOWN,
            'system_version': UNKNOWN,
            'cpu_type': UNKNOWN,
            'os_type': self.os_type,
            'cpu_model': UNKNOWN,
            'cpu_models': UNKNOWN,
            'num_of_processors': UNKNOWN,
            'num_of_cores_of_a_processor': UNKNOWN,
            'total_num_of_cores': UNKNOWN,
            'num_of_threads_of_a_processor': UNKNOWN,
            'total_num_of_threads': self.runtime.schedulable_threads(),
            'hyper_threading': HyperThreading.UNKNOWN
        }

        self.last_collection_duration = self._end_collection()
        return stub_info
