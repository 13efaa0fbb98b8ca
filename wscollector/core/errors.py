"""
Exceptions de l'outil de collecte

Deux familles d'erreurs :
- Sources de données indisponibles (WMI, COM, registre) : journalisées
  par chaque collecteur, la collecte continue
- Erreurs du journal ou du dossier de travail : fatales, elles remontent
  jusqu'au point d'entrée qui termine avec un code non nul
"""


class CollectorError(Exception):
    """Erreur de base de l'outil de collecte"""


class ProviderUnavailable(CollectorError):
    """
    Source de données externe inaccessible

    Levée par les fournisseurs quand WMI, Outlook ou le registre ne
    répondent pas (ou quand le module Python correspondant est absent).
    """


class CollectionLogError(CollectorError, OSError):
    """Le fichier journal ne peut pas être écrit"""


class WorkingDirectoryError(CollectorError, OSError):
    """Le dossier de travail ne peut pas être créé"""
