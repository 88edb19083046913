"""
Logging module.

Records are routed to loguru handlers by the "logger_name" bound to them. Records
from the standard logging module are intercepted and bound to the name of the
originating logger.
"""

import inspect
import logging
import sys
from typing import Any, Callable

from loguru import logger

LOGGER_NAME = "mini-stats"

STANDARD_SINKS = ("stderr", "stdout")


def make_filter(name: str) -> Callable[[dict], bool]:
    """
    Return loguru filter passing only records bound to the logger name.
    """

    def _filter(record: dict) -> bool:
        return record["extra"].get("logger_name") == name

    return _filter


class InterceptHandler(logging.Handler):
    """
    Redirect records of the standard logging module into loguru.
    """

    def emit(self, record: logging.LogRecord) -> None:
        level: Any
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip frames of the logging module to report the actual caller.
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.bind(logger_name=record.name).opt(
            depth=depth, exception=record.exc_info
        ).log(level, record.getMessage())


def _resolve_sink(sink: Any) -> Any:
    # Standard streams are looked up on each call as they can be replaced (e.g. in tests).
    if sink in STANDARD_SINKS:
        return getattr(sys, sink)
    return sink


def _build_handler(name: str, options: dict, formatters: dict) -> dict:
    handler = {
        "sink": _resolve_sink(options["sink"]),
        "format": formatters[options["format"]],
        "diagnose": False,
    }
    if "level" in options:
        handler["level"] = options["level"]

    if "filter" in options:
        # Mapping of module names to minimum levels, records of other modules are dropped.
        handler["filter"] = {**options["filter"], "": False}
    else:
        handler["filter"] = make_filter(name)

    return handler


def configure(config_loguru: dict) -> None:
    """
    Configure loguru handlers from "loguru" config section and intercept standard logging.
    """
    handlers = [
        _build_handler(name, options, config_loguru["formatters"])
        for name, options in config_loguru["handlers"].items()
    ]
    logger.configure(handlers=handlers, activation=[("", True)])

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def info(msg, *args, **kwargs):
    """
    Log a message with severity 'INFO'.
    """
    getLogger(LOGGER_NAME).info(msg, *args, **kwargs)


def debug(msg, *args, **kwargs):
    """
    Log a message with severity 'DEBUG'.
    """
    getLogger(LOGGER_NAME).debug(msg, *args, **kwargs)


def exception(msg, *args, **kwargs):
    """
    Log a message with severity 'ERROR' along with the current exception.
    """
    getLogger(LOGGER_NAME).opt(exception=True).error(msg, *args, **kwargs)


# pylint: disable=invalid-name
def getLogger(name: str) -> Any:
    """
    Get logger with specific name.
    """
    return logger.bind(logger_name=name)
