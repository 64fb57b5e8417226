"""
Package des stratégies de collecte du profil CPU

Ce package contient :
- La stratégie de base et les fonctions d'analyse partagées
- Les stratégies spécifiques par plateforme
"""
