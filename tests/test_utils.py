"""Tests for logging, memory monitoring and argument validation."""

import argparse
import json
import logging
from unittest.mock import Mock, patch

import pytest

from asosim.utils.logging_setup import JsonFormatter, setup_logger
from asosim.utils.memory_monitor import MemoryMonitor
from asosim.utils.validation import resolve_delimiter, validate_cli_arguments


class TestLoggingSetup:
    """Tests for setup_logger."""

    def test_levels(self):
        assert setup_logger("asosim_test_levels").level == logging.INFO
        assert setup_logger("asosim_test_levels", verbose=False).level == logging.WARNING
        assert setup_logger("asosim_test_levels", "debug").level == logging.DEBUG

    def test_single_handler_and_format_switch(self):
        logger = setup_logger("asosim_test_fmt")
        setup_logger("asosim_test_fmt", format_type="json")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)

    def test_json_formatter(self):
        record = logging.LogRecord(
            "asosim", logging.INFO, __file__, 1, "Read %d ASO(s)", (3,), None
        )
        payload = json.loads(JsonFormatter().format(record))
        assert payload["level"] == "INFO"
        assert payload["message"] == "Read 3 ASO(s)"
        assert payload["logger"] == "asosim"


class TestMemoryMonitor:
    """Tests for MemoryMonitor warnings."""

    def test_no_warning_below_threshold(self):
        logger = Mock()
        monitor = MemoryMonitor(logger)
        with patch.object(monitor, "get_memory_usage_mb", return_value=0.0):
            monitor.check_memory_and_warn("matching")
        logger.warning.assert_not_called()

    def test_warning_above_threshold(self):
        logger = Mock()
        monitor = MemoryMonitor(logger)
        usage = monitor.warning_threshold_mb + 1
        with patch.object(monitor, "get_memory_usage_mb", return_value=usage):
            monitor.check_memory_and_warn("matching")
        assert "matching" in logger.warning.call_args.args[0]

    def test_large_screen_warning(self):
        logger = Mock()
        monitor = MemoryMonitor(logger)
        with patch.object(monitor, "get_available_memory_mb", return_value=1.0):
            monitor.warn_for_large_screen(1_000_000, 20)
        logger.warning.assert_called_once()


def _args(**kwargs) -> argparse.Namespace:
    defaults = dict(
        aso_seq=None, multiple_aso=False, input_aso_file=None, input_header=True
    )
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


class TestValidation:
    """Tests for CLI argument combinations."""

    def test_single_sequence_ok(self):
        validate_cli_arguments(_args(aso_seq="AATA"))

    def test_multiple_ok(self):
        validate_cli_arguments(
            _args(multiple_aso=True, input_aso_file="q.csv", input_header=False)
        )

    @pytest.mark.parametrize(
        "kwargs",
        [
            {},
            {"aso_seq": "   "},
            {"multiple_aso": True},
            {"input_aso_file": "q.csv"},
            {"aso_seq": "AATA", "multiple_aso": True, "input_aso_file": "q.csv"},
            {"aso_seq": "AATA", "input_header": False},
            {"aso_seq": "AA\udcffA"},
        ],
    )
    def test_invalid_combinations_exit(self, kwargs):
        with pytest.raises(SystemExit):
            validate_cli_arguments(_args(**kwargs))

    def test_resolve_delimiter(self):
        assert resolve_delimiter("tab") == "\t"
        assert resolve_delimiter(";") == ";"
        with pytest.raises(argparse.ArgumentTypeError):
            resolve_delimiter("::")
