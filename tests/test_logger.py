import io
import logging
import sys
import uuid

import pytest

from maybe_baby.logger import logger, setup_logger
from maybe_baby.logger.logger import CONSOLE_HANDLER


def stdout_handlers(target):
    return [
        handler
        for handler in target.handlers
        if isinstance(handler, logging.StreamHandler) and handler.stream is sys.stdout
    ]


@pytest.fixture
def name():
    return f"maybe_baby.test.{uuid.uuid4().hex}"


def test_package_logger_is_silent_library_logger():
    assert logger.name == "maybe_baby"
    assert logger.propagate is True
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
    assert not [h for h in logger.handlers if h.get_name() == CONSOLE_HANDLER]


def test_setup_logger_attaches_one_stdout_handler(name):
    configured = setup_logger(name=name, level="debug")
    assert configured.level == logging.DEBUG
    assert len(stdout_handlers(configured)) == 1


def test_setup_logger_configures_once(name):
    first = setup_logger(name=name, level="ERROR")
    second = setup_logger(name=name, level="DEBUG")
    assert first is second
    assert len(stdout_handlers(second)) == 1
    assert second.level == logging.ERROR


def test_setup_logger_writes_to_stream(name):
    stream = io.StringIO()
    configured = setup_logger(name=name, level="INFO", format_string="%(message)s", stream=stream)
    configured.info("hello")
    assert stream.getvalue() == "hello\n"


def test_package_messages_reach_application_handlers(caplog):
    with caplog.at_level(logging.DEBUG, logger="maybe_baby"):
        logger.debug("from the package")
    assert "from the package" in caplog.text
