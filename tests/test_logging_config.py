"""Tests for fracfmt_core.logging_config and the library's DEBUG records."""

import json
import logging

import pytest

from fracfmt_core.config import LoggingConfig
from fracfmt_core.errors import MalformedLiteral
from fracfmt_core.expander import to_decimal_parts
from fracfmt_core.fraction import Fraction
from fracfmt_core.logging_config import (
    LOGGER_NAME,
    _HumanFormatter,
    _JSONFormatter,
    setup_logging,
    setup_logging_from_config,
)
from fracfmt_core.parser import parse_decimal


@pytest.fixture
def fracfmt_logger():
    log = logging.getLogger(LOGGER_NAME)
    saved = (log.level, list(log.handlers))
    yield log
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    log.setLevel(saved[0])
    for handler in saved[1]:
        log.addHandler(handler)


def _record(msg: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("fracfmt.test", level, __file__, 1, msg, None, None)


class TestFormatters:

    def test_json_formatter(self):
        out = json.loads(_JSONFormatter().format(_record("0.₍₇₎1234")))
        assert out["level"] == "INFO"
        assert out["component"] == "test"
        assert out["msg"] == "0.₍₇₎1234"
        assert "ts" in out
        assert out["where"].endswith(":1")

    def test_json_context_fields(self):
        record = _record("Expansion truncated at 5 digits", logging.DEBUG)
        record.max_frac_digits = 5
        record.den_bits = 2
        out = json.loads(_JSONFormatter().format(record))
        assert out["max_frac_digits"] == 5
        assert out["den_bits"] == 2

    def test_foreign_logger_keeps_name(self):
        record = logging.LogRecord("app.view", logging.INFO, __file__, 1, "x", None, None)
        assert json.loads(_JSONFormatter().format(record))["component"] == "app.view"

    def test_human_formatter(self):
        out = _HumanFormatter().format(_record("hello", logging.WARNING))
        assert "WARNING test: hello" in out
        assert "\033[" not in out

    def test_human_formatter_context_and_colour(self):
        record = _record("Rejected literal", logging.ERROR)
        record.reason = "non-digit characters"
        out = _HumanFormatter(colour=True).format(record)
        assert out.startswith("\033[31m")
        assert out.endswith("reason=non-digit characters\033[0m")


class TestSetupLogging:

    def test_single_console_handler(self, fracfmt_logger):
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        assert len(fracfmt_logger.handlers) == 1
        assert fracfmt_logger.level == logging.DEBUG

    def test_json_console(self, fracfmt_logger):
        setup_logging(fmt="json")
        assert isinstance(fracfmt_logger.handlers[0].formatter, _JSONFormatter)

    def test_unknown_format(self, fracfmt_logger):
        with pytest.raises(ValueError):
            setup_logging(fmt="xml")

    def test_file_handler_writes_json(self, fracfmt_logger, tmp_path):
        log_file = tmp_path / "logs" / "fracfmt.log"
        setup_logging("DEBUG", log_file=str(log_file))
        to_decimal_parts(Fraction(1, 3), 4)
        for handler in fracfmt_logger.handlers:
            handler.flush()
        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        entry = json.loads(line)
        assert entry["component"] == "expander"
        assert entry["max_frac_digits"] == 4

    def test_from_config(self, fracfmt_logger):
        setup_logging_from_config(LoggingConfig(level="WARNING", format="json"))
        assert fracfmt_logger.level == logging.WARNING


class TestLibraryRecords:

    def test_truncation_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fracfmt"):
            to_decimal_parts(Fraction(1, 3), 5)
        assert any("truncated at 5 digits" in r.getMessage() for r in caplog.records)

    def test_exact_expansion_not_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fracfmt"):
            to_decimal_parts(Fraction(1, 4))
        assert not caplog.records

    def test_rejected_literal_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fracfmt"):
            with pytest.raises(MalformedLiteral):
                parse_decimal("1.2.3")
        assert any(r.name == "fracfmt.parser" for r in caplog.records)

    def test_rejected_literal_not_echoed(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fracfmt"):
            with pytest.raises(MalformedLiteral):
                parse_decimal("1x" * 3000)
        record = next(r for r in caplog.records if r.name == "fracfmt.parser")
        assert record.reason == "non-digit characters"
        assert "1x" not in record.getMessage()
