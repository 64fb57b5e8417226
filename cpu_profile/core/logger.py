"""
Module de logging pour le profileur CPU

Ce module fournit un système de logging centralisé avec :
- Sortie console sur stderr (stdout porte le profil)
- Rotation optionnelle d'un fichier de log
- Formatage cohérent
"""

import os
import sys
import logging
import logging.handlers

LOGGER_NAME = 'CpuProfile'


class ProfileLogger:
    """
    Gestionnaire de logging pour le profileur CPU

    Cette classe configure le logger de l'application à partir de la
    configuration : niveau, console et fichier avec rotation.
    """

    def __init__(self, config=None, level: str = None):
        """
        Initialise le système de logging

        Args:
            config: Instance de ProfileConfig (optionnelle)
            level: Niveau de log imposé (prioritaire sur la configuration)
        """
        self.config = config
        self.logger = logging.getLogger(LOGGER_NAME)

        # Éviter la duplication si déjà configuré
        if not self.logger.handlers:
            self._setup_logging(level)
        elif level:
            self._apply_level(level)

    def _setup_logging(self, level: str = None):
        """
        Configure les handlers et le format des messages
        """
        if self.config:
            log_level_str = level or self.config.get('logging', 'log_level', 'WARNING')
            log_file = self.config.get('logging', 'log_file', '')
            max_size = self.config.getint('logging', 'max_log_size', 10485760)  # 10MB
            backup_count = self.config.getint('logging', 'backup_count', 5)
        else:
            log_level_str = level or 'WARNING'
            log_file = ''
            max_size = 10485760
            backup_count = 5

        log_level = getattr(logging, log_level_str.upper(), logging.WARNING)
        self.logger.setLevel(log_level)

        # Handler fichier avec rotation (seulement si configuré)
        if log_file:
            formatter = logging.Formatter(
                fmt='%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            try:
                log_dir = os.path.dirname(log_file)
                if log_dir and not os.path.exists(log_dir):
                    os.makedirs(log_dir, exist_ok=True)

                file_handler = logging.handlers.RotatingFileHandler(
                    filename=log_file,
                    maxBytes=max_size,
                    backupCount=backup_count,
                    encoding='utf-8'
                )
                file_handler.setLevel(log_level)
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)

            except OSError as e:
                print(f"Erreur lors de la configuration du logging fichier: {e}", file=sys.stderr)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(fmt='%(levelname)s - %(message)s'))
        self.logger.addHandler(console_handler)

        self.logger.debug(f"Niveau de log: {log_level_str}")
        if log_file:
            self.logger.debug(f"Fichier de log: {log_file}")

    def _apply_level(self, level: str):
        log_level = getattr(logging, level.upper(), logging.WARNING)
        self.logger.setLevel(log_level)
        for handler in self.logger.handlers:
            handler.setLevel(log_level)

    def get_logger(self) -> logging.Logger:
        """
        Retourne l'instance du logger

        Returns:
            logging.Logger: Instance du logger configuré
        """
        return self.logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Fonction utilitaire pour récupérer un logger nommé

    Aucun handler n'est installé : la configuration reste à la charge
    de l'application appelante.

    Args:
        name: Nom du logger

    Returns:
        logging.Logger: Instance du logger
    """
    return logging.getLogger(name)
