"""
Unit tests for logging module.
"""

import logging as std_logging

import pytest
from loguru import logger

from mini_stats import logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


def _config(handlers: dict) -> dict:
    return {
        "formatters": {
            "named": "{extra[logger_name]}: {message}",
            "plain": "[{level}] {message}",
        },
        "handlers": handlers,
    }


def test_records_routed_by_logger_name(capsys):
    logging.configure(
        _config({"mini-stats": {"sink": "stdout", "level": "INFO", "format": "named"}})
    )

    logging.info("rate {} KB/s", 2.0)
    logging.getLogger("other").info("dropped")
    logging.debug("below level")

    assert capsys.readouterr().out == "mini-stats: rate 2.0 KB/s\n"


def test_standard_logging_intercepted(capsys):
    logging.configure(
        _config({"mini-stats": {"sink": "stderr", "level": "DEBUG", "format": "named"}})
    )

    std_logging.getLogger("mini-stats").warning("from %s", "logging")

    assert capsys.readouterr().err == "mini-stats: from logging\n"


def test_filter_handler(capsys):
    logging.configure(
        _config(
            {
                "modules": {
                    "sink": "stdout",
                    "format": "plain",
                    "filter": {__name__: "WARNING"},
                },
            }
        )
    )

    logging.getLogger("any").info("dropped")
    logging.getLogger("any").warning("passed")

    assert capsys.readouterr().out == "[WARNING] passed\n"


def test_exception(capsys):
    logging.configure(
        _config({"mini-stats": {"sink": "stdout", "format": "named"}})
    )

    try:
        raise ValueError("bad value")
    except ValueError:
        logging.exception("Command '{}' failed", "size")

    out = capsys.readouterr().out
    assert out.startswith("mini-stats: Command 'size' failed\n")
    assert "ValueError: bad value" in out


def test_file_sink(tmp_path):
    log_file = tmp_path / "mini-stats.log"
    logging.configure(
        _config({"mini-stats": {"sink": str(log_file), "format": "named"}})
    )

    logging.info("written")
    logger.remove()

    assert log_file.read_text() == "mini-stats: written\n"
