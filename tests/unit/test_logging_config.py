import logging

import pytest

from registrar_lib.logging_config import configure_logging
from registrar_lib.main import Config, create_container


pytestmark = pytest.mark.usefixtures('reset_logging')


def test_default_level_is_warning():
    configure_logging()
    assert logging.root.level == logging.WARNING


def test_level_name_is_case_insensitive():
    configure_logging('debug')
    assert logging.root.level == logging.DEBUG


def test_unknown_level_falls_back():
    configure_logging('LOUD')
    assert logging.root.level == logging.WARNING


def test_single_root_handler():
    configure_logging()
    configure_logging()
    assert len(logging.root.handlers) == 1


def test_create_container_uses_wiring_log_level(tmp_path):
    p = tmp_path / 'wiring.yml'
    p.write_text('log_level: ERROR\nservices: {}\n', encoding='utf-8')
    create_container(Config(wiring_path=str(p)))
    assert logging.root.level == logging.ERROR


def test_create_container_without_log_level_uses_default(tmp_path):
    p = tmp_path / 'wiring.yml'
    p.write_text('services: {}\n', encoding='utf-8')
    create_container(Config(wiring_path=str(p)))
    assert logging.root.level == logging.WARNING
