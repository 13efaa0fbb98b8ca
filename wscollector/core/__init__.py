"""
Module Core - Composants principaux de l'outil de collecte

Ce module contient :
- Configuration
- Contexte d'exécution
- Logging
- Orchestration de la collecte
"""
