"""
Errors specific to mini-stats.
"""


class MiniStatsError(Exception):
    """
    Base class for mini-stats related errors.
    """


class ConfigurationError(MiniStatsError):
    """
    Configuration errors (e.g. invalid value of configuration parameter).
    """


class InvalidArgumentError(MiniStatsError, ValueError):
    """
    Argument is out of the contract of the called function (e.g. negative byte count).
    """
