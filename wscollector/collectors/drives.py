"""Collecteur des lecteurs réseau mappés"""

from typing import List

from .base import BaseCollector
from .models import MappedDriveRecord


class DriveInventory(BaseCollector):
    """Journalise chaque lecteur mappé et sa cible UNC"""

    def __init__(self, context, logger, provider):
        super().__init__(context, logger)
        self.provider = provider

    def collect(self) -> List[MappedDriveRecord]:
        self._start_collection()

        drives = self._safe_execute(
            lambda: list(self.provider.mapped_drives()),
            "Drive: Unable to enumerate mapped drives",
            None
        )

        if drives is not None:
            if not drives:
                self.logger.info("Drive: No mapped drives found")
            for drive in drives:
                self.logger.info(f"Drive: {drive.local_path} is mapped to {drive.remote_path}")

        self._end_collection()
        return drives or []
