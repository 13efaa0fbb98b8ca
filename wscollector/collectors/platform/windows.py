"""
Fournisseurs de données spécifiques Windows

Ce module utilise les API Windows spécifiques :
- WMI (applications, imprimantes, lecteurs réseau)
- COM/pywin32 (Outlook)
- Registre Windows (proxy)

Sur une autre plateforme, ou si un module est absent, chaque appel lève
ProviderUnavailable ; le collecteur concerné le journalise et la
collecte continue.
"""

import re
from typing import Iterator, List, Optional

from ...core.errors import ProviderUnavailable
from ..models import (
    InstalledProgramRecord,
    MailStoreRecord,
    MappedDriveRecord,
    PrinterRecord,
    ProxyConfig,
)


INTERNET_SETTINGS_KEY = r"Software\Microsoft\Windows\CurrentVersion\Internet Settings"
CONNECTIONS_KEY = INTERNET_SETTINGS_KEY + r"\Connections"


def _clean_string(value) -> str:
    """
    Nettoie une chaîne renvoyée par WMI ou COM

    Args:
        value: Valeur brute (None accepté)

    Returns:
        str: Chaîne sans espaces superflus ni caractères de contrôle
    """
    if not value:
        return ""

    value = str(value).strip()
    value = ''.join(char for char in value if char.isprintable())
    return re.sub(r'\s+', ' ', value)


class WmiProvider:
    """
    Inventaire via WMI

    Une connexion WMI est ouverte à chaque requête : chaque collecteur
    lit sa source une seule fois par exécution.
    """

    def _connect(self):
        try:
            import wmi
        except ImportError as e:
            raise ProviderUnavailable("Module WMI non disponible") from e

        try:
            return wmi.WMI()
        except wmi.x_wmi as e:
            raise ProviderUnavailable(f"Connexion WMI impossible: {e}") from e

    def installed_programs(self) -> List[InstalledProgramRecord]:
        """
        Applications installées (Win32_Product)

        Returns:
            list: Programmes dans l'ordre renvoyé par WMI
        """
        c = self._connect()
        return [
            InstalledProgramRecord(
                name=_clean_string(product.Name),
                version=_clean_string(product.Version)
            )
            for product in c.Win32_Product()
        ]

    def printers(self) -> List[PrinterRecord]:
        """
        Imprimantes de l'utilisateur (Win32_Printer)

        Le nom du serveur d'impression est vide pour une imprimante locale ;
        on utilise alors le nom de la machine.
        """
        c = self._connect()
        return [
            PrinterRecord(
                name=_clean_string(printer.Name),
                host_computer=_clean_string(printer.ServerName or printer.SystemName),
                port_name=_clean_string(printer.PortName),
                driver_name=_clean_string(printer.DriverName)
            )
            for printer in c.Win32_Printer()
        ]

    def mapped_drives(self) -> List[MappedDriveRecord]:
        """Lecteurs réseau de la session (Win32_NetworkConnection)"""
        c = self._connect()
        return [
            MappedDriveRecord(
                local_path=_clean_string(connection.LocalName),
                remote_path=_clean_string(connection.RemoteName)
            )
            for connection in c.Win32_NetworkConnection()
            if connection.LocalName
        ]


class OutlookClient:
    """Poignée sur l'objet COM Outlook.Application"""

    def __init__(self, application):
        self.application = application

    def stores(self) -> Iterator[MailStoreRecord]:
        """
        Magasins ouverts dans le profil MAPI

        Returns:
            iterator: Un enregistrement par magasin
        """
        namespace = self.application.GetNamespace("MAPI")
        for store in namespace.Stores:
            yield MailStoreRecord(
                display_name=_clean_string(store.DisplayName),
                file_path=_clean_string(store.FilePath),
                store_type=int(store.ExchangeStoreType)
            )

    def close(self):
        self.application = None


class OutlookProvider:
    """
    Accès à Outlook via pywin32

    acquire() crée un nouvel objet COM ; release() doit être appelé une
    fois par acquire(), même si celui-ci a échoué.
    """

    def __init__(self):
        self._com_initialized = False

    def acquire(self) -> Optional[OutlookClient]:
        try:
            import pythoncom
            import win32com.client
        except ImportError as e:
            raise ProviderUnavailable("Module pywin32 non disponible") from e

        pythoncom.CoInitialize()
        self._com_initialized = True

        try:
            application = win32com.client.Dispatch("Outlook.Application")
        except pythoncom.com_error as e:
            raise ProviderUnavailable(f"Outlook non disponible: {e}") from e

        return OutlookClient(application)

    def release(self, client: Optional[OutlookClient]):
        if client is not None:
            client.close()

        if self._com_initialized:
            import pythoncom
            pythoncom.CoUninitialize()
            self._com_initialized = False


class RegistryProxyProvider:
    """Paramètres proxy de l'utilisateur courant (HKCU)"""

    def proxy_config(self) -> ProxyConfig:
        """
        Lit ProxyEnable, ProxyServer et DefaultConnectionSettings

        Une valeur absente prend sa valeur par défaut (proxy désactivé,
        serveur vide, blob vide).
        """
        try:
            import winreg
        except ImportError as e:
            raise ProviderUnavailable("Module winreg non disponible") from e

        enabled = self._read_value(winreg, INTERNET_SETTINGS_KEY, "ProxyEnable", 0)
        server = self._read_value(winreg, INTERNET_SETTINGS_KEY, "ProxyServer", "")
        settings = self._read_value(winreg, CONNECTIONS_KEY, "DefaultConnectionSettings", b"")

        return ProxyConfig(
            proxy_enabled=bool(enabled),
            proxy_server=_clean_string(server),
            connection_settings=bytes(settings or b"")
        )

    def _read_value(self, winreg, path: str, name: str, default):
        try:
            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, path) as key:
                return winreg.QueryValueEx(key, name)[0]
        except FileNotFoundError:
            return default
        except OSError as e:
            raise ProviderUnavailable(f"Lecture registre impossible ({path}\\{name}): {e}") from e
