"""
Workstation Config Collector - Inventaire de la configuration d'un poste

Ce module relève la configuration propre à l'utilisateur (applications,
imprimantes, lecteurs réseau, fichiers PST, proxy, fichier hosts) dans un
journal horodaté et copie certains fichiers dans un dossier de travail,
en préparation d'une migration de poste.

Version: 1.0.0
"""

__version__ = "1.0.0"

from .core.collector import ConfigurationCollector
from .core.config import CollectorConfig
from .core.context import RunContext
from .core.logger import CollectionLogger

__all__ = ['ConfigurationCollector', 'CollectorConfig', 'RunContext', 'CollectionLogger']
