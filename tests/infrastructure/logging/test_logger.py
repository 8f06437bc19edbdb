"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from ledger_dashboard.infrastructure.logging import logger as logger_module


def test_logger_builder_creates_configured_logger(tmp_path, monkeypatch):
    """LoggerBuilder should write into the project logs directory."""
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240101"),
    )

    builder = logger_module.LoggerBuilder()
    custom_logger = (
        builder.name("ledger_dashboard.tests.custom")
        .subdir("reports")
        .prefix("report_logs")
        .console(True)
        .level(logging.WARNING)
        .formatter(logger_module.LoggerBuilder._default_formatter)
        .file_handler(logger_module.LoggerBuilder._default_file_handler)
        .console_handler(logger_module.LoggerBuilder._default_console_handler)
        .build()
    )

    assert custom_logger.name == "ledger_dashboard.tests.custom"
    assert custom_logger.level == logging.WARNING
    file_handlers = [
        h
        for h in custom_logger.handlers
        if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    expected_path = tmp_path / "logs" / "reports" / "20240101_report_logs.log"
    assert file_handlers[0].baseFilename == str(expected_path)
    # Building again reuses the configured logger.
    assert builder.build() is custom_logger
    assert len(custom_logger.handlers) == 2

    for handler in list(custom_logger.handlers):
        handler.close()
        custom_logger.removeHandler(handler)


def test_console_can_be_disabled(tmp_path, monkeypatch):
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )

    quiet_logger = (
        logger_module.LoggerBuilder()
        .name("ledger_dashboard.tests.quiet")
        .console(False)
        .build()
    )

    assert len(quiet_logger.handlers) == 1
    assert isinstance(quiet_logger.handlers[0], logging.FileHandler)

    for handler in list(quiet_logger.handlers):
        handler.close()
        quiet_logger.removeHandler(handler)


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "logs.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt

    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger methods should call the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("ledger")
    logger.info("hello")
    logger.warning("warn")
    logger.error("err")
    logger.debug("dbg")
    logger.critical("crit")

    fake_logger.info.assert_called_with("hello")
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("ledger") is logger


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should return singletons."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger_1 = logger_module.get_app_logger()
    app_logger_2 = logger_module.get_app_logger()
    usage_logger_1 = logger_module.get_usage_logger()
    usage_logger_2 = logger_module.get_usage_logger()

    assert app_logger_1 is app_logger_2
    assert usage_logger_1 is usage_logger_2
    assert app_logger_1 is not usage_logger_1
    assert isinstance(app_logger_1.logger, MagicMock)
