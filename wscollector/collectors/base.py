"""
Classe de base pour tous les collecteurs

Ce module définit l'interface commune que tous les collecteurs
doivent implémenter, ainsi que des utilitaires partagés.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Callable

from ..core.errors import CollectionLogError


class BaseCollector(ABC):
    """
    Classe de base abstraite pour tous les collecteurs

    Un collecteur lit une source de données, formate zéro ou plusieurs
    faits et les écrit dans le journal de l'exécution.
    """

    def __init__(self, context, logger):
        """
        Initialise le collecteur de base

        Args:
            context: Instance de RunContext
            logger: Instance de CollectionLogger
        """
        self.context = context
        self.logger = logger

        # Métadonnées du collecteur
        self.collector_name = self.__class__.__name__
        self.collection_start_time = None
        self.collection_errors = []

    @abstractmethod
    def collect(self):
        """
        Méthode principale de collecte - doit être implémentée par chaque collecteur

        Returns:
            list: Enregistrements écrits dans le journal
        """

    def _start_collection(self):
        """Démarre une session de collecte"""
        self.collection_start_time = time.time()
        self.collection_errors = []
        self.logger.debug(f"Début collecte {self.collector_name}")

    def _end_collection(self) -> float:
        """
        Termine une session de collecte

        Returns:
            float: Durée de collecte en secondes
        """
        if self.collection_start_time:
            duration = time.time() - self.collection_start_time
            self.logger.debug(f"Collecte {self.collector_name} terminée en {duration:.2f}s")
            return duration
        return 0.0

    def _safe_execute(self, func: Callable[[], Any], error_message: str, default_value=None):
        """
        Exécute une fonction de manière sécurisée avec gestion d'erreur

        L'échec est journalisé une seule fois au niveau Error avec
        error_message ; le détail part au niveau Debug. Les erreurs du
        journal lui-même ne sont jamais absorbées.

        Args:
            func: Fonction à exécuter
            error_message: Ligne Error écrite en cas d'échec
            default_value: Valeur renvoyée en cas d'erreur

        Returns:
            Résultat de la fonction ou default_value
        """
        try:
            return func()
        except CollectionLogError:
            raise
        except Exception as e:
            self.collection_errors.append(f"{error_message}: {e}")
            self.logger.error(error_message)
            self.logger.debug(f"{self.collector_name}: {type(e).__name__}: {e}")
            return default_value

    def get_collection_stats(self):
        """
        Retourne les statistiques de la dernière collecte

        Returns:
            dict: Statistiques du collecteur
        """
        return {
            'collector_name': self.collector_name,
            'errors_count': len(self.collection_errors)
        }
