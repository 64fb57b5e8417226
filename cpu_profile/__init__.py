"""
CPU Profile - Profil CPU et système multi-plateforme

Ce package interroge les outils natifs du système (uname, /proc/cpuinfo,
sysctl, system_profiler) et construit un profil uniforme : modèle,
nombre de processeurs, de cœurs et de threads, statut hyper-threading,
versions du noyau et du système.
"""

__version__ = "1.0.0"

from .core.config import ProfileConfig
from .core.errors import (
    CommandExecutionError, DivisionByZeroError, ParseError, ParseNotFoundError,
    ProfileError, ToolNotFoundError, UnexpectedOutputError
)
from .core.logger import ProfileLogger
from .core.profile import UNKNOWN, CpuProfile, HyperThreading, OsType
from .core.prober import PlatformProber, all_profile, detect_os_type

__all__ = [
    'all_profile', 'detect_os_type', 'PlatformProber', 'CpuProfile', 'OsType',
    'HyperThreading', 'UNKNOWN', 'ProfileConfig', 'ProfileLogger', 'ProfileError',
    'ToolNotFoundError', 'CommandExecutionError', 'ParseError', 'ParseNotFoundError',
    'UnexpectedOutputError', 'DivisionByZeroError'
]
