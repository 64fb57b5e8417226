"""
Module de configuration du profileur CPU

Ce module gère la configuration, incluant :
- Lecture du fichier de configuration INI
- Valeurs par défaut
- Validation des paramètres
"""

import os
import sys
import configparser
from typing import Dict, Any, Optional

OUTPUT_FORMATS = ('json', 'text')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ProfileConfig:
    """
    Gestionnaire de configuration du profileur CPU

    Cette classe centralise les paramètres de sondage (délai des commandes,
    vérification des exécutables), de sortie et de logging.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialise la configuration

        Args:
            config_file: Chemin vers le fichier de configuration (optionnel)
        """
        self.config = configparser.ConfigParser()
        self.config_file = config_file or self._get_default_config_path()

        self._set_defaults()
        self._load_config()

    def _get_default_config_path(self) -> str:
        """
        Détermine le chemin par défaut du fichier de configuration selon la plateforme

        Returns:
            str: Chemin vers le fichier de configuration
        """
        if sys.platform == "win32":
            return os.path.join(
                os.environ.get("APPDATA", os.path.expanduser("~")),
                "cpu-profile",
                "config.ini"
            )
        else:
            return os.path.join(
                os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config")),
                "cpu-profile",
                "config.ini"
            )

    def _set_defaults(self):
        """
        Définit les valeurs de configuration par défaut

        Ces valeurs sont utilisées si aucun fichier n'est trouvé ou si
        certaines sections/clés sont manquantes.
        """
        self.config.add_section('probe')
        self.config.set('probe', 'command_timeout', '30')
        self.config.set('probe', 'check_executables', 'true')

        self.config.add_section('output')
        self.config.set('output', 'format', 'json')
        self.config.set('output', 'indent', '2')

        self.config.add_section('logging')
        self.config.set('logging', 'log_level', 'WARNING')
        self.config.set('logging', 'log_file', '')
        self.config.set('logging', 'max_log_size', '10485760')  # 10MB
        self.config.set('logging', 'backup_count', '5')

    def _load_config(self):
        """
        Charge la configuration depuis le fichier s'il existe

        En cas d'erreur de lecture, continue avec les valeurs par défaut.
        """
        if not os.path.exists(self.config_file):
            return

        try:
            self.config.read(self.config_file, encoding='utf-8')
        except configparser.Error as e:
            print(f"Erreur lors du chargement de la configuration: {e}", file=sys.stderr)
            print("Utilisation des valeurs par défaut", file=sys.stderr)

    def get(self, section: str, option: str, fallback: Any = None) -> str:
        """Récupère une valeur de configuration"""
        return self.config.get(section, option, fallback=fallback)

    def getboolean(self, section: str, option: str, fallback: bool = False) -> bool:
        """Récupère une valeur booléenne de configuration"""
        return self.config.getboolean(section, option, fallback=fallback)

    def getint(self, section: str, option: str, fallback: int = 0) -> int:
        """Récupère une valeur entière de configuration"""
        return self.config.getint(section, option, fallback=fallback)

    def getfloat(self, section: str, option: str, fallback: float = 0.0) -> float:
        """Récupère une valeur décimale de configuration"""
        return self.config.getfloat(section, option, fallback=fallback)

    def set(self, section: str, option: str, value: Any):
        """
        Définit une valeur de configuration

        Args:
            section: Nom de la section
            option: Nom de l'option
            value: Nouvelle valeur
        """
        if not self.config.has_section(section):
            self.config.add_section(section)
        self.config.set(section, option, str(value))

    def save(self):
        """
        Sauvegarde la configuration dans le fichier

        Crée les dossiers parents si nécessaire.
        """
        config_dir = os.path.dirname(self.config_file)
        if config_dir and not os.path.exists(config_dir):
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_file, 'w', encoding='utf-8') as f:
            self.config.write(f)

    def get_probe_config(self) -> Dict[str, Any]:
        """
        Récupère la configuration du sondage

        Returns:
            dict: command_timeout (secondes, 0 = illimité) et check_executables
        """
        return {
            'command_timeout': self.getfloat('probe', 'command_timeout', 30.0),
            'check_executables': self.getboolean('probe', 'check_executables', True)
        }

    def get_output_config(self) -> Dict[str, Any]:
        """
        Récupère la configuration de sortie

        Returns:
            dict: format et indentation JSON
        """
        return {
            'format': self.get('output', 'format', 'json'),
            'indent': self.getint('output', 'indent', 2)
        }

    def get_logging_config(self) -> Dict[str, Any]:
        """
        Récupère la configuration du logging

        Returns:
            dict: Configuration logging
        """
        return {
            'log_level': self.get('logging', 'log_level', 'WARNING'),
            'log_file': self.get('logging', 'log_file', ''),
            'max_log_size': self.getint('logging', 'max_log_size', 10485760),
            'backup_count': self.getint('logging', 'backup_count', 5)
        }

    def validation_errors(self) -> list:
        """
        Liste les erreurs de la configuration courante

        Returns:
            list: Messages d'erreur (vide si valide)
        """
        errors = []

        try:
            timeout = self.getfloat('probe', 'command_timeout')
            if timeout < 0:
                errors.append("Délai des commandes invalide (doit être positif ou nul)")
        except ValueError:
            errors.append("Délai des commandes invalide (nombre attendu)")

        try:
            self.getboolean('probe', 'check_executables')
        except ValueError:
            errors.append("check_executables invalide (booléen attendu)")

        output_format = self.get('output', 'format')
        if output_format not in OUTPUT_FORMATS:
            errors.append("Format de sortie invalide (doit être: json, text)")

        try:
            if self.getint('output', 'indent') < 0:
                errors.append("Indentation invalide (doit être positive ou nulle)")
        except ValueError:
            errors.append("Indentation invalide (entier attendu)")

        log_level = self.get('logging', 'log_level')
        if log_level not in LOG_LEVELS:
            errors.append("Niveau de log invalide")

        return errors

    def validate(self) -> bool:
        """
        Valide la configuration courante

        Returns:
            bool: True si la configuration est valide, False sinon
        """
        errors = self.validation_errors()
        for error in errors:
            print(f"Erreur de configuration: {error}", file=sys.stderr)
        return not errors


def create_default_config(config_path: str) -> ProfileConfig:
    """
    Crée un fichier de configuration par défaut

    Args:
        config_path: Chemin où créer le fichier de configuration

    Returns:
        ProfileConfig: Instance de configuration créée
    """
    config = ProfileConfig(config_path)
    config.save()
    return config
