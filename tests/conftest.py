from __future__ import annotations

from pathlib import Path

import pytest

from zonetime import Env, Log, LogLevel


@pytest.fixture(autouse=True)
def zonetime_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """
    Isolates configuration for every test: no ZONETIME_* variables from the
    outer environment and a fresh working directory with no etc/ files.
    """
    for key in ("ZONETIME_DEFAULTZONE", "ZONETIME_LOGLEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    Env.cur().reload()
    yield
    Env.cur().reload()


@pytest.fixture
def config_props(tmp_path: Path):
    """
    Writes etc/zonetime/config.props under the test working directory.
    """
    def write(text: str) -> Path:
        path = tmp_path / "etc" / "zonetime" / "config.props"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        Env.cur().reload()
        return path

    return write


@pytest.fixture
def log_records():
    """
    Collects LogRecs from the zonetime log at debug level.
    """
    log = Log.get("zonetime")
    old = log.level()
    log.level(LogLevel.debug())
    recs = []
    Log.add_handler(recs.append)
    yield recs
    Log.remove_handler(recs.append)
    log.level(old)
