"""
Informations sur l'interpréteur Python hôte

Ces valeurs sont indépendantes de la détection CPU ; elles sont
fournies explicitement à l'assembleur du profil.
"""

import sys
import platform

import psutil


class RuntimeInfo:
    """
    Identifiants de l'environnement d'exécution courant
    """

    def __init__(self, release: int = None, version: str = None):
        if release is None:
            # 3.12 -> 312
            release = sys.version_info.major * 100 + sys.version_info.minor
        self.release = release
        self.version = version or platform.python_version()

    def schedulable_threads(self) -> int:
        """
        Nombre de CPU logiques sur lesquels le processus peut être ordonnancé

        Returns:
            int: Nombre de threads logiques (au moins 1)
        """
        try:
            affinity = psutil.Process().cpu_affinity()
            if affinity:
                return len(affinity)
        except (AttributeError, NotImplementedError, psutil.Error):
            # cpu_affinity n'existe pas sur macOS
            pass

        return psutil.cpu_count(logical=True) or 1
