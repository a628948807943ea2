import logging
from pathlib import Path
from typing import Callable

import pytest

from prefab_metadata.config import LOG_DIR_ENV, LOG_LEVEL_ENV
from prefab_metadata.loader import DESCRIPTOR_FILENAME


@pytest.fixture
def write_descriptor(tmp_path) -> Callable[[str, str], Path]:
    """
    Return a helper that writes ``<tmp>/<package>/prefab.json`` and returns its path.
    Usage: path = write_descriptor("foo", '{"schema_version": 1, ...}')
    """
    def _write(package: str, text: str) -> Path:
        pkg_dir = tmp_path / package
        pkg_dir.mkdir(parents=True, exist_ok=True)
        path = pkg_dir / DESCRIPTOR_FILENAME
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """
    Keep logging settings from the developer's environment out of the tests.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(LOG_DIR_ENV, raising=False)
    yield


@pytest.fixture(autouse=True)
def restore_package_loggers():
    """
    Undo levels and file handlers that ``configure`` (e.g. ``-v`` in CLI tests)
    applied to the package loggers.
    """
    logging.getLogger("prefab_metadata")
    saved = {
        name: (lg.level, list(lg.handlers))
        for name, lg in list(logging.Logger.manager.loggerDict.items())
        if (name == "prefab_metadata" or name.startswith("prefab_metadata.")) and isinstance(lg, logging.Logger)
    }
    yield
    for name, (level, handlers) in saved.items():
        lg = logging.getLogger(name)
        for h in lg.handlers:
            if h not in handlers:
                lg.removeHandler(h)
                h.close()
        lg.setLevel(level)
