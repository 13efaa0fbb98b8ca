"""
Collecteur des fichiers de données Outlook (PST/OST)

Le client de messagerie est instancié à chaque appel et toujours libéré,
que l'énumération réussisse, échoue ou que le client soit introuvable.
"""

from typing import List

from ..core.config import ARCHIVE_STORE_TYPE
from ..core.errors import CollectionLogError, ProviderUnavailable
from .base import BaseCollector
from .models import MailStoreRecord


class MailStoreInventory(BaseCollector):
    """Journalise les magasins Outlook adossés à un fichier local"""

    def __init__(self, context, logger, provider):
        """
        Args:
            context: Instance de RunContext
            logger: Instance de CollectionLogger
            provider: Objet exposant acquire() et release(client)
        """
        super().__init__(context, logger)
        self.provider = provider

    def collect(self) -> List[MailStoreRecord]:
        """
        Journalise les fichiers PST ouverts dans Outlook

        Returns:
            list: Magasins journalisés
        """
        self._start_collection()
        logged = []
        client = None

        try:
            client = self.provider.acquire()
            if client is None:
                raise ProviderUnavailable("Client de messagerie introuvable")

            for store in client.stores():
                if store.store_type != ARCHIVE_STORE_TYPE:
                    continue
                self.logger.info(f'Outlook PST: "{store.display_name}" found at {store.file_path}')
                logged.append(store)

        except CollectionLogError:
            raise
        except Exception as e:
            self.collection_errors.append(str(e))
            self.logger.error("Outlook PST: Unable to get PST Information")
            self.logger.debug(f"{self.collector_name}: {type(e).__name__}: {e}")

        finally:
            self._release(client)

        self._end_collection()
        return logged

    def _release(self, client):
        """Libère le client de messagerie sans jamais interrompre la collecte"""
        try:
            self.provider.release(client)
        except Exception as e:
            self.logger.debug(f"Erreur libération client de messagerie: {e}")
