"""Fixtures partagées et faux fournisseurs"""

import errno
from pathlib import Path

import pytest

from wscollector.core.context import RunContext
from wscollector.core.logger import CollectionLogger, StrictFileHandler


class FakeInventory:
    """Remplace WmiProvider"""

    def __init__(self, programs=(), printers=(), drives=(), error=None):
        self._programs = list(programs)
        self._printers = list(printers)
        self._drives = list(drives)
        self.error = error

    def _check(self):
        if self.error:
            raise self.error

    def installed_programs(self):
        self._check()
        return self._programs

    def printers(self):
        self._check()
        return self._printers

    def mapped_drives(self):
        self._check()
        return self._drives


class FakeMailClient:
    def __init__(self, stores=(), error=None):
        self._stores = list(stores)
        self.error = error

    def stores(self):
        if self.error:
            raise self.error
        return iter(self._stores)


class FakeMailProvider:
    """Remplace OutlookProvider en comptant les acquisitions et libérations"""

    def __init__(self, client=None, acquire_error=None):
        self.client = client
        self.acquire_error = acquire_error
        self.acquire_calls = 0
        self.released = []

    def acquire(self):
        self.acquire_calls += 1
        if self.acquire_error:
            raise self.acquire_error
        return self.client

    def release(self, client):
        self.released.append(client)


class FakeProxyProvider:
    def __init__(self, config=None, error=None):
        self.config = config
        self.error = error

    def proxy_config(self):
        if self.error:
            raise self.error
        return self.config


def read_log(path: Path):
    """
    Relit un journal

    Returns:
        list: Couples (niveau, message), dans l'ordre du fichier
    """
    entries = []
    for line in Path(path).read_text(encoding='utf-8').splitlines():
        _, rest = line.split('  ', 1)
        level, message = rest.split(': ', 1)
        entries.append((level, message))
    return entries


def messages(path: Path, level=None):
    return [message for lvl, message in read_log(path) if level is None or lvl == level]


@pytest.fixture
def run_context(tmp_path):
    working_directory = tmp_path / "OneDrive" / "Config"
    return RunContext(
        run_date="2024-03-15",
        host_name="WS042",
        user_name="jdoe",
        domain_name="CORP",
        working_directory=working_directory,
        log_file_path=working_directory / "2024-03-15-CollectionLog-WS042-jdoe.log",
        verbosity=1,
        version="1.0.0",
        hosts_file_path=tmp_path / "hosts",
        backup_files=(),
    )


@pytest.fixture
def logger(run_context):
    run_context.working_directory.mkdir(parents=True, exist_ok=True)
    collection_logger = CollectionLogger(run_context.log_file_path, run_context.verbosity)
    yield collection_logger
    collection_logger.close()


@pytest.fixture
def log_path(run_context):
    return run_context.log_file_path


class DiskFullStream:
    """Flux de journal qui accepte quelques lignes puis échoue (ENOSPC)"""

    def __init__(self, good_writes):
        self.good_writes = good_writes
        self.lines = []
        self.broken = False

    def write(self, text):
        if self.good_writes <= 0:
            self.broken = True
            raise OSError(errno.ENOSPC, "No space left on device")
        self.good_writes -= 1
        self.lines.append(text)

    def flush(self):
        if self.broken:
            raise OSError(errno.ENOSPC, "No space left on device")

    def close(self):
        pass


@pytest.fixture
def disk_full_after(monkeypatch):
    """Remplace le fichier journal par un DiskFullStream ; renvoie une fabrique"""
    streams = []

    def install(good_writes):
        def fake_open(handler):
            stream = DiskFullStream(good_writes)
            streams.append(stream)
            return stream

        monkeypatch.setattr(StrictFileHandler, "_open", fake_open)
        return streams

    return install
