"""Enregistrements renvoyés par les sources de données"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.config import AUTODETECT_OFFSET


@dataclass(frozen=True)
class InstalledProgramRecord:
    name: str
    version: str


@dataclass(frozen=True)
class PrinterRecord:
    name: str
    host_computer: str
    port_name: str
    driver_name: str


@dataclass(frozen=True)
class MappedDriveRecord:
    local_path: str   # lettre de lecteur, ex. "Z:"
    remote_path: str  # cible UNC


@dataclass(frozen=True)
class MailStoreRecord:
    display_name: str
    file_path: str
    store_type: int


@dataclass(frozen=True)
class HostsEntry:
    ip: str
    hostname: str


class AutoDetectState(str, Enum):
    """État de la case "Détecter automatiquement les paramètres" """
    ENABLED_CHECKED = "enabled, checked"
    ENABLED_UNCHECKED = "enabled, unchecked"
    DISABLED_CHECKED = "disabled, checked"
    DISABLED_UNCHECKED = "disabled, unchecked"
    UNKNOWN = "unknown"


_AUTODETECT_STATES = {
    11: AutoDetectState.ENABLED_CHECKED,
    3: AutoDetectState.ENABLED_UNCHECKED,
    9: AutoDetectState.DISABLED_CHECKED,
    1: AutoDetectState.DISABLED_UNCHECKED,
}


@dataclass(frozen=True)
class ProxyConfig:
    """Paramètres proxy de l'utilisateur"""
    proxy_enabled: bool
    proxy_server: str
    connection_settings: bytes = b''

    @property
    def auto_detect_flag(self) -> Optional[int]:
        """Octet de détection automatique, None si le blob est trop court"""
        if len(self.connection_settings) <= AUTODETECT_OFFSET:
            return None
        return self.connection_settings[AUTODETECT_OFFSET]

    @property
    def auto_detect_state(self) -> AutoDetectState:
        return _AUTODETECT_STATES.get(self.auto_detect_flag, AutoDetectState.UNKNOWN)
