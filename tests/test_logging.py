"""Tests for loguru integration."""

import logging

import pytest
from loguru import logger

from service_registry import ServiceRegistry
from service_registry.logging import PACKAGE_NAME, setup_logging


@pytest.fixture
def captured():
    """Collect loguru messages emitted while the package logger is enabled."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="TRACE")
    logger.enable(PACKAGE_NAME)
    yield messages
    logger.disable(PACKAGE_NAME)
    logger.remove(handler_id)


def test_package_logging_disabled_by_default():
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="TRACE")
    try:
        ServiceRegistry().bind("quiet", lambda: 1)
    finally:
        logger.remove(handler_id)

    assert messages == []


def test_state_transitions_are_logged(captured: list[str]):
    registry = ServiceRegistry()
    registry.bind("service", lambda: 1, locked=True).snapshot().resolve("service")
    registry.restore()

    assert "Bound service service (singleton, locked)" in captured
    assert any(m.startswith("Took snapshot of 1 bindings") for m in captured)
    assert "Resolving service service (singleton)" in captured
    assert any(m.startswith("Restored snapshot of 1 bindings") for m in captured)


def test_setup_logging_enables_package_and_intercepts_stdlib():
    messages: list[str] = []
    root = logging.getLogger()
    root_handlers, root_level = root.handlers[:], root.level

    handler_id = setup_logging("debug", colorize=False)
    capture_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    try:
        ServiceRegistry().bind("visible", lambda: 1)
        logging.getLogger("thirdparty").warning("from stdlib")
    finally:
        logger.remove(capture_id)
        logger.remove(handler_id)
        logger.disable(PACKAGE_NAME)
        root.handlers = root_handlers
        root.setLevel(root_level)

    assert "Bound service visible (singleton)" in messages
    assert "from stdlib" in messages
