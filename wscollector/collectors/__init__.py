"""
Package des collecteurs de l'outil de collecte

Ce package contient :
- Le collecteur de base (classe abstraite)
- Les collecteurs applications, imprimantes, lecteurs, Outlook, proxy,
  fichier hosts et fichiers utilisateur
- Les fournisseurs de données spécifiques à Windows
"""

from .applications import ApplicationInventory
from .drives import DriveInventory
from .files import FileCollector
from .hostsfile import HostsFileInspector
from .mailstores import MailStoreInventory
from .printers import PrinterInventory
from .proxy import ProxyInspector

__all__ = [
    'ApplicationInventory', 'DriveInventory', 'FileCollector', 'HostsFileInspector',
    'MailStoreInventory', 'PrinterInventory', 'ProxyInspector',
]
