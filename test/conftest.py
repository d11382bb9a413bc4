import logging

import pytest

from bcls import compute
from bcls_test_util import FakeGcloud


@pytest.fixture(autouse=True)
def isolated_config_path(tmp_path, monkeypatch):
    """Prevent the config files of the user running the tests from being loaded"""
    home = tmp_path / 'home'
    home.mkdir()
    work_dir = tmp_path / 'work'
    work_dir.mkdir()
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.chdir(work_dir)
    monkeypatch.delenv('BCLS_ENV', raising=False)
    return home


@pytest.fixture
def gcloud(monkeypatch) -> FakeGcloud:
    fake = FakeGcloud()
    monkeypatch.setattr(compute.subprocess, 'run', fake)
    return fake


@pytest.fixture(autouse=True)
def restore_logging():
    """The app reconfigures the root logger on each run"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
