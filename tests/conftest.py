"""Pytest configuration helpers for test collection.

Ensure the project root is on sys.path so tests can import the package
without requiring PYTHONPATH to be set externally.
"""
import logging
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    # Insert repo root (one level up from tests/) to sys.path
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def container():
    from registrar_lib.services import Container
    return Container()


@pytest.fixture
def client(container):
    from fastapi.testclient import TestClient
    from registrar_lib.main import create_app, Config
    app = create_app(Config(configure_logging=False), container=container)
    return TestClient(app)


@pytest.fixture
def reset_logging():
    """Undo root logger changes made by `configure_logging`."""
    level = logging.root.level
    yield
    for handler in logging.root.handlers[:]:
        # basicConfig installs a plain StreamHandler; pytest's own handlers are subclasses
        if type(handler) is logging.StreamHandler:
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)
