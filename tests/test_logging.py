"""
Tests for the content-safe logger.
"""
import logging

import app.core.logging as logging_module
from app.core.logging import SafeLogger, get_safe_logger


def test_unsafe_context_is_dropped(caplog):
    logger = get_safe_logger("tests.safe")

    with caplog.at_level(logging.INFO, logger="tests.safe"):
        logger.info("Institution created", collection="institution", bannerTitle="secret text")

    assert caplog.messages == ["Institution created | collection=institution"]


def test_error_code_is_rendered(caplog):
    logger = SafeLogger("tests.safe")

    with caplog.at_level(logging.ERROR, logger="tests.safe"):
        logger.error("Content error", error_code="SCHEMA_ERROR", status_code=500)

    assert caplog.messages == ["Content error | status_code=500 | error_code=SCHEMA_ERROR"]


def test_only_safe_logger_factory_is_exposed():
    assert not hasattr(logging_module, "get_logger")
