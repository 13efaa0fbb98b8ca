"""
Inspection des paramètres proxy de l'utilisateur

Seule la valeur 9 de l'octet de détection automatique (désactivé, case
cochée) est considérée comme "détection automatique" ; les trois autres
états du tableau sont traités comme non configurés.
"""

from typing import Optional

from ..core.config import AUTODETECT_CHECKED
from .base import BaseCollector
from .models import ProxyConfig


class ProxyInspector(BaseCollector):
    """Journalise le proxy personnalisé et l'état de la détection automatique"""

    def __init__(self, context, logger, provider):
        super().__init__(context, logger)
        self.provider = provider

    def collect(self) -> Optional[ProxyConfig]:
        """
        Returns:
            ProxyConfig: Paramètres lus, None si le registre est inaccessible
        """
        self._start_collection()

        proxy = self._safe_execute(
            self.provider.proxy_config,
            "Proxy: Unable to read proxy settings",
            None
        )

        if proxy is not None:
            if proxy.proxy_enabled:
                self.logger.info(f"Proxy is enabled with a custom setting: {proxy.proxy_server}")

            self.logger.debug(
                f"Octet détection automatique: {proxy.auto_detect_flag} ({proxy.auto_detect_state.value})"
            )
            if proxy.auto_detect_flag != AUTODETECT_CHECKED:
                self.logger.warning("Proxy: Autodetect proxy setting is un-set!")
            else:
                self.logger.info("Proxy: Proxy is set to autodetect")

        self._end_collection()
        return proxy
