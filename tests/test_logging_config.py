"""Tests for logging setup and private-mode redaction."""

import logging

from rich.logging import RichHandler

from holdings_charts.utils.logging_config import (
    AmountFilter,
    ChartsFormatter,
    configure_root_logger,
    get_logger,
    parse_level,
)


def _record(msg, args=None):
    return logging.LogRecord("test", logging.INFO, __file__, 1, msg, args, None)


class TestAmountFilter:
    def test_redacts_money(self):
        record = _record("Built charts worth $1,234.56 and C$20")

        assert AmountFilter().filter(record) is True
        assert record.getMessage() == "Built charts worth [AMOUNT] and [AMOUNT]"

    def test_redacts_currency_suffix(self):
        record = _record("Gain: 300 CAD, loss -12.5 USD")

        AmountFilter().filter(record)

        assert record.getMessage() == "Gain: [AMOUNT], loss [AMOUNT]"

    def test_redacts_interpolated_args(self):
        record = _record("Total %s", ("$99.00",))

        AmountFilter().filter(record)

        assert record.getMessage() == "Total [AMOUNT]"

    def test_leaves_plain_text(self):
        record = _record("Indexed transactions for 3 symbols")

        AmountFilter().filter(record)

        assert record.getMessage() == "Indexed transactions for 3 symbols"


class TestConfigureRootLogger:
    def test_installs_single_stderr_handler(self, restore_root_logger):
        root = configure_root_logger("debug")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ChartsFormatter)
        assert root.handlers[0].filters == []

    def test_private_mode_adds_filter(self, restore_root_logger):
        root = configure_root_logger(logging.INFO, private_mode=True)

        assert any(isinstance(f, AmountFilter) for f in root.handlers[0].filters)

    def test_rich_output(self, restore_root_logger):
        root = configure_root_logger(rich_output=True)

        assert isinstance(root.handlers[0], RichHandler)

    def test_reconfigure_replaces_handlers(self, restore_root_logger):
        configure_root_logger()
        root = configure_root_logger()

        assert len(root.handlers) == 1


class TestFormatter:
    def test_prefix_and_level(self):
        text = ChartsFormatter().format(_record("hello"))

        assert "CHARTS" in text
        assert "INFO" in text
        assert text.endswith("test: hello")


def test_parse_level():
    assert parse_level("warning") == logging.WARNING
    assert parse_level(logging.ERROR) == logging.ERROR
    assert parse_level("bogus") == logging.INFO


def test_get_logger():
    assert get_logger("holdings_charts.x").name == "holdings_charts.x"
