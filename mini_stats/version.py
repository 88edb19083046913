"""
Version module.
"""

from importlib import resources

__version__ = resources.files("mini_stats").joinpath("version.txt").read_text().strip()


def get_version() -> str:
    """
    Return mini-stats version.
    """
    return __version__
