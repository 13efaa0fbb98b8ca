"""
Module collecteur principal de l'outil de collecte

Ce module orchestre la collecte :
- Préparation du dossier de travail
- En-tête du journal (version, date, utilisateur)
- Appel séquentiel de chaque collecteur, dans un ordre fixe
- Notification de progression avant chaque étape
"""

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from ..collectors import (
    ApplicationInventory,
    DriveInventory,
    FileCollector,
    HostsFileInspector,
    MailStoreInventory,
    PrinterInventory,
    ProxyInspector,
)
from ..collectors.base import BaseCollector
from .errors import WorkingDirectoryError


ProgressCallback = Callable[[int, int, str], None]


@dataclass(frozen=True)
class CollectionSummary:
    """Résultat d'une exécution, affiché en fin de collecte"""
    working_directory: Path
    log_file_path: Path
    duration: float
    errors: Dict[str, int] = field(default_factory=dict)


class ConfigurationCollector:
    """
    Collecteur principal qui orchestre toute la collecte

    Les fournisseurs de données sont injectés ; à défaut, les
    fournisseurs Windows (WMI, Outlook, registre) sont utilisés.
    """

    def __init__(self, context, logger, inventory=None, mail=None, proxy=None,
                 progress: Optional[ProgressCallback] = None):
        """
        Initialise le collecteur principal

        Args:
            context: Instance de RunContext
            logger: Instance de CollectionLogger
            inventory: Fournisseur applications/imprimantes/lecteurs
            mail: Fournisseur du client de messagerie
            proxy: Fournisseur des paramètres proxy
            progress: Fonction appelée avant chaque étape (étape, total, libellé)
        """
        self.context = context
        self.logger = logger
        self.progress = progress

        if inventory is None or mail is None or proxy is None:
            from ..collectors.platform.windows import OutlookProvider, RegistryProxyProvider, WmiProvider
            inventory = inventory or WmiProvider()
            mail = mail or OutlookProvider()
            proxy = proxy or RegistryProxyProvider()

        self.inventory = inventory
        self.mail = mail
        self.proxy = proxy

    def _build_stages(self) -> List[Tuple[str, BaseCollector]]:
        """
        Liste ordonnée des étapes de collecte

        Returns:
            list: Couples (libellé de progression, collecteur)
        """
        context, logger = self.context, self.logger
        return [
            ("Collecting printers", PrinterInventory(context, logger, self.inventory)),
            ("Collecting installed programs", ApplicationInventory(context, logger, self.inventory)),
            ("Collecting mapped drives", DriveInventory(context, logger, self.inventory)),
            ("Collecting Outlook data files", MailStoreInventory(context, logger, self.mail)),
            ("Checking proxy settings", ProxyInspector(context, logger, self.proxy)),
            ("Reading hosts file", HostsFileInspector(context, logger)),
            ("Copying user files", FileCollector(context, logger)),
        ]

    def prepare_working_directory(self) -> bool:
        """
        Crée le dossier de travail s'il n'existe pas

        Returns:
            bool: True si le dossier vient d'être créé

        Raises:
            WorkingDirectoryError: Si le dossier ne peut pas être créé
        """
        working_directory = self.context.working_directory
        if working_directory.is_dir():
            return False

        try:
            os.makedirs(working_directory, exist_ok=True)
        except OSError as e:
            raise WorkingDirectoryError(
                f"Impossible de créer le dossier de travail {working_directory}: {e}"
            ) from e
        return True

    def run(self) -> CollectionSummary:
        """
        Lance la collecte complète

        Returns:
            CollectionSummary: Emplacement des résultats et erreurs par collecteur

        Raises:
            WorkingDirectoryError: Dossier de travail inaccessible
            CollectionLogError: Journal inaccessible
        """
        start_time = time.time()
        context = self.context

        created = self.prepare_working_directory()
        if created:
            self.logger.info(f"Created working directory {context.working_directory}")

        self.logger.info(f"Collection script version {context.version}")
        self.logger.info(f"Run date: {context.run_date}")
        self.logger.info(f"Running as {context.domain_name}\\{context.user_name} on {context.host_name}")

        stages = self._build_stages()
        errors = {}
        for step, (label, collector) in enumerate(stages, start=1):
            if self.progress:
                self.progress(step, len(stages), label)
            collector.collect()

            stats = collector.get_collection_stats()
            if stats['errors_count']:
                errors[stats['collector_name']] = stats['errors_count']

        duration = time.time() - start_time
        self.logger.debug(f"Collecte terminée en {duration:.2f} secondes")
        self.logger.info("Collection complete")

        return CollectionSummary(
            working_directory=context.working_directory,
            log_file_path=context.log_file_path,
            duration=round(duration, 2),
            errors=errors
        )
