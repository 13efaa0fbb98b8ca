"""
Collecteur des imprimantes de l'utilisateur

Les imprimantes virtuelles (PDF, XPS, Fax, OneNote...) sont ignorées.
"""

from typing import Iterable, List

from ..core.config import BOGUS_PRINTERS
from .base import BaseCollector
from .models import PrinterRecord


class PrinterInventory(BaseCollector):
    """Journalise les imprimantes connectées, hors imprimantes virtuelles"""

    def __init__(self, context, logger, provider, denylist: Iterable[str] = BOGUS_PRINTERS):
        """
        Args:
            context: Instance de RunContext
            logger: Instance de CollectionLogger
            provider: Objet exposant printers()
            denylist: Noms d'imprimantes à ignorer (comparaison exacte)
        """
        super().__init__(context, logger)
        self.provider = provider
        self.denylist = frozenset(denylist)

    def collect(self) -> List[PrinterRecord]:
        """
        Journalise les imprimantes

        Returns:
            list: Imprimantes journalisées
        """
        self._start_collection()

        printers = self._safe_execute(
            lambda: list(self.provider.printers()),
            "Printer: Unable to enumerate printers",
            None
        )
        if printers is None:
            self._end_collection()
            return []

        if not printers:
            self.logger.info("Printer: No connected printers.")
            self._end_collection()
            return []

        logged = []
        for printer in printers:
            if printer.name in self.denylist:
                self.logger.debug(f"Imprimante virtuelle ignorée: {printer.name}")
                continue
            self.logger.info(
                f'Printer: "{printer.name}", on {printer.host_computer} '
                f'port {printer.port_name} using {printer.driver_name}'
            )
            logged.append(printer)

        if not logged:
            self.logger.info("Printer: No user printers found")

        self._end_collection()
        return logged
