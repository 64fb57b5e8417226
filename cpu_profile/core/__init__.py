"""
Module Core - Composants principaux du profileur CPU

Ce module contient les fonctionnalités de base :
- Configuration
- Logging
- Exécution des commandes système
- Modèle du profil et sondage de la plateforme
"""
