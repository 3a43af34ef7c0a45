from __future__ import annotations

import io
import logging

import pytest

from liquidity_rates.logger import (
    NOISY_LOGGERS,
    TRACE,
    ColoredFormatter,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    noisy_levels = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, noisy_level in noisy_levels.items():
        logging.getLogger(name).setLevel(noisy_level)


def test_resolve_level_handles_trace_and_unknown_names():
    assert resolve_level("trace") == TRACE
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO


def test_non_tty_stream_gets_plain_lines():
    stream = io.StringIO()
    setup_logging("INFO", stream=stream)

    logging.getLogger("liquidity_rates.test").info("hello")

    output = stream.getvalue()
    assert "liquidity_rates.test - INFO - hello" in output
    assert "\033[" not in output


def test_colors_can_be_forced_on():
    stream = io.StringIO()
    setup_logging("INFO", stream=stream, use_colors=True)

    logging.getLogger("liquidity_rates.test").warning("careful")

    assert "\033[33m" in stream.getvalue()


def test_colored_formatter_leaves_record_untouched():
    record = logging.makeLogRecord(
        {"levelno": logging.ERROR, "levelname": "ERROR", "msg": "boom"}
    )

    formatted = ColoredFormatter(fmt="%(levelname)s %(message)s").format(record)

    assert formatted.endswith("boom")
    assert "\033[31m" in formatted
    assert record.levelname == "ERROR"


def test_debug_quiets_noisy_libraries():
    setup_logging("DEBUG", stream=io.StringIO())

    assert logging.getLogger().level == logging.DEBUG
    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_trace_enables_noisy_libraries():
    stream = io.StringIO()
    setup_logging("TRACE", stream=stream)

    logging.getLogger("web3.providers").log(TRACE, "raw payload")

    assert logging.getLogger("web3").level == TRACE
    assert "TRACE - raw payload" in stream.getvalue()
