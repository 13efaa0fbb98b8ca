"""
Contexte d'exécution de la collecte

Instantané immuable pris une fois au démarrage : utilisateur, domaine,
machine, date, dossier de travail et fichier journal. Il est transmis à
tous les collecteurs.
"""

import os
import re
import sys
import socket
import getpass
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional, Tuple

import psutil

from .config import BACKUP_FILES, CollectorConfig


_ENV_VARIABLE = re.compile(r'%([^%]+)%')


@dataclass(frozen=True)
class RunContext:
    """Paramètres d'une exécution, figés pour toute sa durée"""
    run_date: str
    host_name: str
    user_name: str
    domain_name: str
    working_directory: Path
    log_file_path: Path
    verbosity: int
    version: str = '1.0.0'
    hosts_file_path: Path = Path('/etc/hosts')
    backup_files: Tuple[str, ...] = ()

    @property
    def log_file_name(self) -> str:
        return self.log_file_path.name

    @classmethod
    def build(cls, config: CollectorConfig, now: Optional[datetime] = None,
              environ: Optional[Mapping[str, str]] = None) -> 'RunContext':
        """
        Construit le contexte à partir de l'environnement courant

        Args:
            config: Configuration de l'outil
            now: Date d'exécution (maintenant par défaut)
            environ: Variables d'environnement (os.environ par défaut)

        Returns:
            RunContext: Contexte de l'exécution
        """
        environ = os.environ if environ is None else environ
        now = now or datetime.now()

        run_date = now.strftime('%Y-%m-%d')
        host_name = _get_hostname()
        domain_name, user_name = _get_identity(environ, host_name)

        working_directory = _get_sync_root(config, environ) / config.get('paths', 'working_folder', 'Config')
        log_name = config.get('paths', 'log_name_template').format(
            date=run_date, host=host_name, user=user_name
        )

        return cls(
            run_date=run_date,
            host_name=host_name,
            user_name=user_name,
            domain_name=domain_name,
            working_directory=working_directory,
            log_file_path=working_directory / log_name,
            verbosity=config.verbosity,
            version=config.version,
            hosts_file_path=_get_hosts_file(environ),
            backup_files=tuple(expand_variables(path, environ) for path in BACKUP_FILES),
        )


def expand_variables(path: str, environ: Mapping[str, str]) -> str:
    """
    Développe les variables %NOM% d'un chemin Windows

    Les variables inconnues sont laissées telles quelles.
    """
    return _ENV_VARIABLE.sub(lambda m: environ.get(m.group(1), m.group(0)), path)


def _get_hostname() -> str:
    """Récupère le nom d'hôte de la machine"""
    try:
        return socket.gethostname()
    except OSError:
        return "Unknown"


def _get_identity(environ: Mapping[str, str], host_name: str) -> Tuple[str, str]:
    """
    Détermine le domaine et l'utilisateur du processus courant

    psutil renvoie 'DOMAINE\\utilisateur' sous Windows et 'utilisateur'
    ailleurs ; le domaine manquant est lu dans USERDOMAIN puis remplacé
    par le nom de la machine.

    Returns:
        tuple: (domaine, utilisateur)
    """
    try:
        account = psutil.Process().username()
    except (psutil.Error, KeyError):
        account = environ.get('USERNAME') or getpass.getuser()

    domain, _, user = account.rpartition('\\')
    if not domain:
        domain = environ.get('USERDOMAIN') or host_name
    return domain, user


def _get_sync_root(config: CollectorConfig, environ: Mapping[str, str]) -> Path:
    """Racine OneDrive de l'utilisateur, ou son dossier personnel à défaut"""
    for variable in config.getlist('paths', 'onedrive_variables'):
        root = environ.get(variable)
        if root:
            return Path(root)
    home = environ.get('USERPROFILE') or environ.get('HOME')
    return Path(home) if home else Path.home()


def _get_hosts_file(environ: Mapping[str, str]) -> Path:
    """Chemin du fichier hosts selon la plateforme"""
    if sys.platform == "win32":
        system_root = environ.get('SystemRoot', 'C:\\Windows')
        return Path(system_root) / 'System32' / 'drivers' / 'etc' / 'hosts'
    return Path('/etc/hosts')
