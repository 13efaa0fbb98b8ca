"""
Collecteur de fichiers utilisateur

Copie les fichiers de la liste de sauvegarde dans le dossier de travail.
Un fichier déjà présent est écrasé ; un chemin en double est copié deux
fois.
"""

import os
import shutil
from typing import Iterable, List, Optional

from .base import BaseCollector


class FileCollector(BaseCollector):
    """Copie les fichiers à sauvegarder dans le dossier de travail"""

    def __init__(self, context, logger, paths: Optional[Iterable[str]] = None):
        """
        Args:
            context: Instance de RunContext
            logger: Instance de CollectionLogger
            paths: Chemins absolus candidats (context.backup_files par défaut)
        """
        super().__init__(context, logger)
        self.paths = tuple(context.backup_files if paths is None else paths)

    def collect(self) -> List[str]:
        """
        Returns:
            list: Chemins copiés
        """
        self._start_collection()
        self.logger.info("Looking for files to back up")

        copied = []
        if not self.paths:
            self.logger.info("No backup files found.")
            self._end_collection()
            return copied

        destination = self.context.working_directory
        for path in self.paths:
            if not os.path.isfile(path):
                self.logger.info(f"Misc Files: File {path} not found, skipping")
                continue

            try:
                shutil.copy2(path, destination)
            except OSError as e:
                self.collection_errors.append(f"{path}: {e}")
                self.logger.error(f"Misc Files: Unable to copy {path}: {e}")
                continue

            self.logger.info(f"Misc Files: Copied {path} to {destination}")
            copied.append(path)

        # TODO: compresser les fichiers copiés avant la migration
        self._end_collection()
        return copied
