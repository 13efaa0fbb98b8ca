"""
Module de configuration de l'outil de collecte

Toute la configuration est constante : aucun fichier n'est lu. Ce module
regroupe :
- Les valeurs par défaut (version, verbosité, chemins)
- La liste des imprimantes virtuelles à ignorer
- La liste des fichiers utilisateur à sauvegarder
"""

import configparser
from typing import Any, Tuple


# Imprimantes virtuelles ou logicielles, exclues du rapport (comparaison exacte)
BOGUS_PRINTERS: Tuple[str, ...] = (
    "Microsoft XPS Document Writer",
    "Microsoft Print to PDF",
    "Fax",
    "Send To OneNote 2010",
    "Send To OneNote 2013",
    "Send To OneNote 2016",
    "OneNote",
    "OneNote for Windows 10",
    "OneNote (Desktop)",
    "Adobe PDF",
    "Webex Document Loader",
)

# Fichiers à copier dans le dossier de travail (variables d'environnement
# développées à la création du contexte)
BACKUP_FILES: Tuple[str, ...] = (
    r"%APPDATA%\Microsoft\Sticky Notes\StickyNotes.snt",
    r"%LOCALAPPDATA%\Packages\Microsoft.MicrosoftStickyNotes_8wekyb3d8bbwe\LocalState\plum.sqlite",
)

# Type de magasin Outlook correspondant à un fichier local (PST/OST)
ARCHIVE_STORE_TYPE = 3

# Octet "détection automatique" dans DefaultConnectionSettings
AUTODETECT_OFFSET = 8
AUTODETECT_CHECKED = 9


class CollectorConfig:
    """
    Paramètres de l'outil de collecte

    Même interface que la configuration de l'agent (get, getint, set)
    mais uniquement alimentée par les valeurs par défaut.
    """

    def __init__(self):
        # Interpolation désactivée : les chemins contiennent des '%'
        self.config = configparser.ConfigParser(interpolation=None)
        self._set_defaults()

    def _set_defaults(self):
        """
        Définit les valeurs de configuration

        Ces valeurs sont fixées à la compilation ; les tests peuvent les
        remplacer via set().
        """
        self.config.add_section('agent')
        self.config.set('agent', 'version', '1.0.0')
        # 0 = aucun journal, 1 = Info/Warn/Error, 2 = ajoute Debug
        self.config.set('agent', 'verbosity', '1')

        self.config.add_section('paths')
        self.config.set('paths', 'working_folder', 'Config')
        self.config.set('paths', 'log_name_template', '{date}-CollectionLog-{host}-{user}.log')
        # Racines OneDrive, par ordre de préférence
        self.config.set('paths', 'onedrive_variables', 'OneDriveCommercial,OneDrive')

    def get(self, section: str, option: str, fallback: Any = None) -> str:
        """
        Récupère une valeur de configuration

        Args:
            section: Nom de la section
            option: Nom de l'option
            fallback: Valeur par défaut si non trouvée

        Returns:
            str: Valeur de configuration
        """
        return self.config.get(section, option, fallback=fallback)

    def getint(self, section: str, option: str, fallback: int = 0) -> int:
        """Récupère une valeur entière de configuration"""
        return self.config.getint(section, option, fallback=fallback)

    def getlist(self, section: str, option: str) -> Tuple[str, ...]:
        """
        Récupère une liste séparée par des virgules

        Returns:
            tuple: Éléments non vides, espaces supprimés
        """
        raw = self.get(section, option, '') or ''
        return tuple(item.strip() for item in raw.split(',') if item.strip())

    def set(self, section: str, option: str, value):
        """
        Définit une valeur de configuration

        Args:
            section: Nom de la section
            option: Nom de l'option
            value: Nouvelle valeur
        """
        if not self.config.has_section(section):
            self.config.add_section(section)
        self.config.set(section, option, str(value))

    @property
    def version(self) -> str:
        return self.get('agent', 'version', '1.0.0')

    @property
    def verbosity(self) -> int:
        return self.getint('agent', 'verbosity', 1)

    def validate(self) -> bool:
        """
        Valide la configuration courante

        Returns:
            bool: True si la configuration est valide, False sinon
        """
        errors = []

        if self.verbosity not in (0, 1, 2):
            errors.append("Verbosité invalide (doit être: 0, 1 ou 2)")

        template = self.get('paths', 'log_name_template', '')
        for placeholder in ('{date}', '{host}', '{user}'):
            if placeholder not in template:
                errors.append(f"Modèle de nom de journal incomplet: {placeholder} manquant")

        if not self.get('paths', 'working_folder'):
            errors.append("Dossier de travail non défini")

        if errors:
            for error in errors:
                print(f"Erreur de configuration: {error}")
            return False

        return True
