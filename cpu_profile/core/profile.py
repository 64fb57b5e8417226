"""
Modèle de données du profil CPU

Le profil est une valeur figée, reconstruite à chaque requête.
"""

from enum import Enum
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Union

UNKNOWN = 'unknown'


class OsType(str, Enum):
    """Famille de système d'exploitation de l'hôte"""
    LINUX = 'linux'
    MACOS = 'macos'
    FREEBSD = 'freebsd'
    WINDOWS = 'windows'
    OTHER = 'other'


class HyperThreading(str, Enum):
    """Statut du multithreading simultané (SMT)"""
    ENABLED = 'enabled'
    DISABLED = 'disabled'
    UNKNOWN = 'unknown'


# Valeur connue ou la chaîne 'unknown'
MaybeInt = Union[int, str]


@dataclass(frozen=True)
class CpuProfile:
    """
    Profil CPU et système de l'hôte

    Les champs non déterminés valent UNKNOWN ; total_num_of_threads
    est toujours un entier.
    """
    os_type: OsType
    kernel_release: str
    kernel_version: str
    system_version: str
    cpu_type: str
    cpu_model: str
    cpu_models: Union[List[str], str]
    num_of_processors: MaybeInt
    num_of_cores_of_a_processor: MaybeInt
    total_num_of_cores: MaybeInt
    num_of_threads_of_a_processor: MaybeInt
    total_num_of_threads: int
    hyper_threading: HyperThreading
    python_release: int
    python_version: str

    def to_dict(self) -> Dict[str, Any]:
        """
        Convertit le profil en dictionnaire sérialisable en JSON

        Returns:
            dict: Champs du profil, énumérations converties en chaînes
        """
        data = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, list):
                value = list(value)
            data[field.name] = value
        return data


PROFILE_FIELDS = tuple(field.name for field in fields(CpuProfile))


def assemble_profile(fragment: Mapping[str, Any], python_release: int,
                     python_version: str) -> CpuProfile:
    """
    Fusionne le fragment d'une stratégie avec les identifiants du runtime

    Args:
        fragment: Champs produits par la stratégie de plateforme
        python_release: Version de l'interpréteur sous forme d'entier (3.12 -> 312)
        python_version: Version complète de l'interpréteur

    Returns:
        CpuProfile: Profil complet
    """
    values = dict(fragment)
    values['os_type'] = OsType(values['os_type'])
    values['hyper_threading'] = HyperThreading(values['hyper_threading'])
    values['python_release'] = python_release
    values['python_version'] = python_version
    return CpuProfile(**values)
