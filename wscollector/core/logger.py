"""
Module de logging de l'outil de collecte

Le journal d'une exécution est un fichier texte en ajout seul :
- Une ligne par événement, horodatée ISO-8601 avec décalage horaire
- Niveaux Info, Warn, Error (Debug en verbosité 2)
- Écriture vidée après chaque ligne
- Toute erreur d'écriture interrompt la collecte
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from .errors import CollectionLogError


LOGGER_NAME = 'WorkstationCollector'

# Noms de niveaux tels qu'écrits dans le journal
LEVEL_NAMES = {
    logging.DEBUG: 'Debug',
    logging.INFO: 'Info',
    logging.WARNING: 'Warn',
    logging.ERROR: 'Error',
}

LEVELS = {name: level for level, name in LEVEL_NAMES.items()}


class CollectionLogFormatter(logging.Formatter):
    """Formate une ligne `<horodatage>  <Niveau>: <message>`"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).astimezone().isoformat()
        level = LEVEL_NAMES.get(record.levelno, record.levelname.title())
        return f"{timestamp}  {level}: {record.getMessage()}"


class StrictFileHandler(logging.FileHandler):
    """
    Handler fichier qui ne masque pas les erreurs d'écriture

    logging.FileHandler appelle handleError() et continue ; ici l'erreur
    remonte à l'appelant sous forme de CollectionLogError.
    """

    def emit(self, record: logging.LogRecord):
        try:
            super().emit(record)
        except CollectionLogError:
            raise
        except OSError as e:
            # Échec d'ouverture du fichier (premier emit, delay=True)
            raise CollectionLogError(f"Impossible d'ouvrir le journal {self.baseFilename}: {e}") from e

    def handleError(self, record: logging.LogRecord):
        raise CollectionLogError(f"Impossible d'écrire dans le journal {self.baseFilename}")


class CollectionLogger:
    """
    Journal d'une exécution de collecte

    Cette classe configure le logger nommé de l'outil avec un unique
    handler fichier. En verbosité 0 aucun handler n'est installé et aucun
    fichier n'est créé.
    """

    def __init__(self, log_file: Path, verbosity: int = 1):
        """
        Initialise le journal

        Args:
            log_file: Chemin du fichier journal (dossier déjà créé)
            verbosity: 0 = désactivé, 1 = normal, 2 = détaillé
        """
        self.log_file = Path(log_file)
        self.verbosity = verbosity
        self.logger = logging.getLogger(LOGGER_NAME)
        self._handler: Optional[StrictFileHandler] = None

        self._setup_logging()

    @property
    def enabled(self) -> bool:
        return self.verbosity > 0

    def _setup_logging(self):
        """
        Configure le logger avec le handler fichier

        Configure :
        - Le niveau selon la verbosité
        - Le formatage des lignes
        - Le fichier en mode ajout, ouvert à la première écriture
        """
        # Une seule exécution à la fois : on remplace les handlers existants
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            _close_quietly(handler)

        self.logger.propagate = False
        self.logger.setLevel(logging.DEBUG if self.verbosity >= 2 else logging.INFO)

        if not self.enabled:
            return

        self._handler = StrictFileHandler(
            filename=str(self.log_file),
            mode='a',
            encoding='utf-8',
            delay=True
        )
        self._handler.setFormatter(CollectionLogFormatter())
        self.logger.addHandler(self._handler)

    def log(self, level: str, message: str):
        """
        Ajoute une ligne au journal

        Args:
            level: 'Info', 'Warn', 'Error' ou 'Debug'
            message: Texte de la ligne

        Raises:
            CollectionLogError: Si le fichier journal n'est pas accessible
        """
        if not self.enabled:
            return
        try:
            levelno = LEVELS[level]
        except KeyError:
            raise ValueError(f"Niveau de log inconnu: {level}") from None
        self.logger.log(levelno, message)

    def debug(self, message: str):
        """Log un message de niveau Debug"""
        self.log('Debug', message)

    def info(self, message: str):
        """Log un message de niveau Info"""
        self.log('Info', message)

    def warning(self, message: str):
        """Log un message de niveau Warn"""
        self.log('Warn', message)

    def error(self, message: str):
        """Log un message de niveau Error"""
        self.log('Error', message)

    def close(self):
        """
        Ferme le fichier journal

        Ne lève jamais d'erreur : un journal devenu inaccessible a déjà
        provoqué une CollectionLogError lors de l'écriture.
        """
        if self._handler is not None:
            handler, self._handler = self._handler, None
            self.logger.removeHandler(handler)
            _close_quietly(handler)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def _close_quietly(handler: logging.Handler):
    """Ferme un handler dont le flux peut être cassé (disque plein, média retiré)"""
    try:
        handler.close()
    except OSError:
        # Flush final impossible ; l'erreur a déjà été signalée à l'écriture
        pass
