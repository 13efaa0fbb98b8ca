"""Inspection du fichier hosts"""

import re
from pathlib import Path
from typing import List, Optional

from .base import BaseCollector
from .models import HostsEntry


HOSTS_ENTRY = re.compile(r'^(\d{1,3}(?:\.\d{1,3}){3})\s+(\S.*)$')


def parse_hosts(lines) -> List[HostsEntry]:
    """
    Extrait les entrées IPv4 d'un fichier hosts

    Les commentaires, lignes vides et entrées IPv6 sont ignorés.
    """
    entries = []
    for line in lines:
        match = HOSTS_ENTRY.match(line.rstrip('\r\n'))
        if match:
            entries.append(HostsEntry(ip=match.group(1), hostname=match.group(2)))
    return entries


class HostsFileInspector(BaseCollector):
    """Journalise chaque entrée IPv4 du fichier hosts"""

    def __init__(self, context, logger, hosts_file: Optional[Path] = None):
        super().__init__(context, logger)
        self.hosts_file = Path(hosts_file or context.hosts_file_path)

    def collect(self) -> List[HostsEntry]:
        self._start_collection()

        lines = self._safe_execute(
            self._read_lines,
            f"Hosts file entry: Unable to read {self.hosts_file}",
            None
        )

        entries = []
        if lines is not None:
            entries = parse_hosts(lines)
            for entry in entries:
                self.logger.info(f"Hosts file entry: {entry.ip}, {entry.hostname}")
            if not entries:
                self.logger.info("Hosts file entry: No entries found.")

        self._end_collection()
        return entries

    def _read_lines(self) -> List[str]:
        with open(self.hosts_file, 'r', encoding='utf-8', errors='replace') as f:
            return f.readlines()
