"""
Module de sondage de la plateforme

Ce module orchestre la construction du profil CPU :
- Détection de la famille de système d'exploitation
- Choix de la stratégie correspondante
- Assemblage du profil final avec les identifiants du runtime
"""

import platform
from typing import Optional

from .errors import ProfileError
from .logger import get_logger
from .profile import CpuProfile, OsType, assemble_profile
from .runner import CommandRunner
from .runtime import RuntimeInfo
from ..collectors.platform.freebsd import FreeBSDStrategy
from ..collectors.platform.linux import LinuxStrategy
from ..collectors.platform.macos import MacOSStrategy
from ..collectors.platform.windows import UnsupportedPlatformStrategy

_SYSTEM_NAMES = {
    'Linux': OsType.LINUX,
    'Darwin': OsType.MACOS,
    'FreeBSD': OsType.FREEBSD,
    'Windows': OsType.WINDOWS
}

# Une entrée par membre de OsType
STRATEGIES = {
    OsType.LINUX: LinuxStrategy,
    OsType.MACOS: MacOSStrategy,
    OsType.FREEBSD: FreeBSDStrategy,
    OsType.WINDOWS: UnsupportedPlatformStrategy,
    OsType.OTHER: UnsupportedPlatformStrategy
}


def detect_os_type(system_name: Optional[str] = None) -> OsType:
    """
    Associe le nom de système rapporté par la plateforme à une famille

    Args:
        system_name: Valeur de platform.system() (détectée si absente)

    Returns:
        OsType: Famille du système, OTHER si non reconnue
    """
    if system_name is None:
        system_name = platform.system()
    return _SYSTEM_NAMES.get(system_name, OsType.OTHER)


class PlatformProber:
    """
    Point d'entrée du profilage CPU

    Chaque appel à all_profile() relance la détection complète ;
    aucun résultat n'est conservé entre deux appels.
    """

    def __init__(self, config=None, logger=None, runner=None, runtime=None,
                 system_name: Optional[str] = None):
        """
        Initialise le sondeur

        Args:
            config: Instance de ProfileConfig (optionnelle)
            logger: Logger à utiliser (ProfileLogger ou logging.Logger)
            runner: CommandRunner à utiliser (créé depuis la configuration sinon)
            runtime: RuntimeInfo à utiliser
            system_name: Force le nom de système au lieu de platform.system()
        """
        if logger is None:
            self.logger = get_logger()
        elif hasattr(logger, 'get_logger'):
            self.logger = logger.get_logger()
        else:
            self.logger = logger

        if config is not None:
            probe_config = config.get_probe_config()
        else:
            probe_config = {'command_timeout': 30.0, 'check_executables': True}

        self.check_executables = probe_config['check_executables']
        self.runner = runner or CommandRunner(probe_config['command_timeout'], self.logger)
        self.runtime = runtime or RuntimeInfo()
        self.system_name = system_name

    def _create_strategy(self, os_type: OsType):
        strategy_class = STRATEGIES[os_type]
        if strategy_class is UnsupportedPlatformStrategy:
            return UnsupportedPlatformStrategy(
                self.runner, os_type, self.runtime, self.logger, self.check_executables
            )
        return strategy_class(self.runner, self.logger, self.check_executables)

    def all_profile(self) -> CpuProfile:
        """
        Construit le profil CPU complet de l'hôte

        Returns:
            CpuProfile: Profil de la machine

        Raises:
            ProfileError: toute erreur interrompt le profilage
        """
        os_type = detect_os_type(self.system_name)
        self.logger.info(f"Système détecté: {os_type.value}")

        strategy = self._create_strategy(os_type)
        try:
            fragment = strategy.collect()
        except ProfileError as e:
            self.logger.debug(f"Échec du profilage {os_type.value}: {e}")
            raise

        profile = assemble_profile(fragment, self.runtime.release, self.runtime.version)
        self.logger.info(f"Profil construit en {strategy.last_collection_duration:.2f}s")
        return profile


def all_profile(config=None, logger=None) -> CpuProfile:
    """
    Raccourci : construit le profil CPU de l'hôte courant

    Returns:
        CpuProfile: Profil de la machine
    """
    return PlatformProber(config=config, logger=logger).all_profile()
