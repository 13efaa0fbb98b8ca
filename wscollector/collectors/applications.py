"""
Collecteur des applications installées

Interroge l'inventaire des applications du système (WMI Win32_Product
sous Windows). Attention : cette énumération est lente et peut
déclencher une vérification des paquets MSI côté système.
"""

from typing import List

from .base import BaseCollector
from .models import InstalledProgramRecord


class ApplicationInventory(BaseCollector):
    """Journalise chaque programme installé avec sa version"""

    def __init__(self, context, logger, provider):
        """
        Args:
            context: Instance de RunContext
            logger: Instance de CollectionLogger
            provider: Objet exposant installed_programs()
        """
        super().__init__(context, logger)
        self.provider = provider

    def collect(self) -> List[InstalledProgramRecord]:
        """
        Journalise les programmes dont le nom et la version sont renseignés

        Returns:
            list: Programmes journalisés, dans l'ordre du fournisseur
        """
        self._start_collection()

        programs = self._safe_execute(
            lambda: list(self.provider.installed_programs()),
            "Program: Unable to get installed programs",
            []
        )

        logged = []
        for program in programs:
            if not program.name or not program.version:
                continue
            self.logger.info(f"Program: {program.name}; Version: {program.version}")
            logged.append(program)

        self.logger.debug(f"{len(logged)} programmes sur {len(programs)} journalisés")
        self._end_collection()
        return logged
