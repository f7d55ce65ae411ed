import logging

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep user environment and root logger state out of the tests"""
    monkeypatch.delenv("VIDEOGRAB_OUTPUT_DIRECTORY", raising=False)
    monkeypatch.delenv("VIDEOGRAB_VERBOSE", raising=False)

    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty temporary directory"""
    monkeypatch.chdir(tmp_path)
    return tmp_path
