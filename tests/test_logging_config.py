"""Tests for JSON logging configuration."""

import json
import logging

import pytest

from rocketchat_facade.logging_config import LOGGING_CONFIG, configure_logging


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    root.setLevel(level)
    root.handlers = handlers


def test_configure_logging_sets_root_level():
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_unknown_level_falls_back_to_info():
    configure_logging("chatty")
    assert logging.getLogger().level == logging.INFO


def test_configure_logging_does_not_mutate_template():
    configure_logging("ERROR")
    assert LOGGING_CONFIG["root"]["level"] == "INFO"


def test_log_records_are_json_with_severity(capsys):
    configure_logging("INFO")
    logging.getLogger("rocketchat_facade.test").info("Created channel %s", "general")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["severity"] == "INFO"
    assert record["message"] == "Created channel general"
    assert record["logger"] == "rocketchat_facade.test"
    assert record["service"] == "rocketchat-facade"
