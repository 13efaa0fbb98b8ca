from datetime import datetime
from pathlib import Path

import pytest

from wscollector.core import context as context_module
from wscollector.core.config import CollectorConfig
from wscollector.core.context import RunContext, expand_variables


class FakeProcess:
    account = "CORP\\jdoe"

    def username(self):
        return self.account


@pytest.fixture(autouse=True)
def fixed_machine(monkeypatch):
    monkeypatch.setattr(context_module.socket, "gethostname", lambda: "WS042")
    monkeypatch.setattr(context_module.psutil, "Process", FakeProcess)


def test_build_uses_onedrive_root(tmp_path):
    environ = {"OneDrive": str(tmp_path / "OneDrive - Corp"), "APPDATA": "C:\\Users\\jdoe\\AppData\\Roaming"}

    ctx = RunContext.build(CollectorConfig(), now=datetime(2024, 3, 15, 9, 30), environ=environ)

    assert ctx.run_date == "2024-03-15"
    assert ctx.host_name == "WS042"
    assert ctx.user_name == "jdoe"
    assert ctx.domain_name == "CORP"
    assert ctx.working_directory == tmp_path / "OneDrive - Corp" / "Config"
    assert ctx.log_file_name == "2024-03-15-CollectionLog-WS042-jdoe.log"
    assert ctx.log_file_path.parent == ctx.working_directory
    assert ctx.verbosity == 1
    assert ctx.version == "1.0.0"
    assert ctx.backup_files[0] == "C:\\Users\\jdoe\\AppData\\Roaming\\Microsoft\\Sticky Notes\\StickyNotes.snt"


def test_commercial_onedrive_preferred(tmp_path):
    environ = {"OneDrive": str(tmp_path / "personal"), "OneDriveCommercial": str(tmp_path / "work")}

    ctx = RunContext.build(CollectorConfig(), environ=environ)

    assert ctx.working_directory == tmp_path / "work" / "Config"


def test_falls_back_to_profile(tmp_path):
    ctx = RunContext.build(CollectorConfig(), environ={"USERPROFILE": str(tmp_path)})

    assert ctx.working_directory == tmp_path / "Config"


def test_domain_from_environment_when_account_has_none(monkeypatch, tmp_path):
    monkeypatch.setattr(FakeProcess, "account", "jdoe")

    ctx = RunContext.build(CollectorConfig(), environ={"HOME": str(tmp_path), "USERDOMAIN": "LAB"})

    assert (ctx.domain_name, ctx.user_name) == ("LAB", "jdoe")


def test_context_is_immutable(tmp_path):
    ctx = RunContext.build(CollectorConfig(), environ={"HOME": str(tmp_path)})

    with pytest.raises(AttributeError):
        ctx.working_directory = Path("/elsewhere")


def test_verbosity_from_config(tmp_path):
    config = CollectorConfig()
    config.set('agent', 'verbosity', 0)

    ctx = RunContext.build(config, environ={"HOME": str(tmp_path)})

    assert ctx.verbosity == 0


def test_expand_variables_keeps_unknown():
    assert expand_variables(r"%KNOWN%\a\%UNKNOWN%", {"KNOWN": "C:"}) == r"C:\a\%UNKNOWN%"
