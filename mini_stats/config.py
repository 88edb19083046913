"""
config module defines Config class and default values
"""

import copy
from typing import Any, Optional

import yaml
from loguru import logger

from mini_stats.exceptions import ConfigurationError

DEFAULT_CONFIG = {
    "colors": {
        # Usage ratio ranges. Values in [warning_from, critical_from] are
        # highlighted as warning, values in (critical_from, ceiling] as critical.
        "usage": {
            "warning_from": 0.6,
            "critical_from": 0.8,
            "ceiling": 1.0,
        },
        # Battery level ranges. Levels below warning_from are critical.
        "battery": {
            "warning_from": 0.2,
            "normal_from": 0.4,
            "ceiling": 1.0,
        },
        # Actual colors of indicator categories.
        "palette": {
            "default": "#000000",
            "normal": "#34c759",
            "warning": "#ff9500",
            "critical": "#ff3b30",
        },
    },
    "loguru": {
        "formatters": {
            "mini-stats": "{time:YYYY-MM-DD H:m:s,SSS} {process.id:5} [{level:8}] {extra[logger_name]}: {message}",
        },
        "handlers": {
            "mini-stats": {
                "sink": "stderr",
                "level": "WARNING",
                "format": "mini-stats",
            },
        },
    },
}


class Config:
    """
    Config for all components
    """

    def __init__(self, config_file: Optional[str] = None) -> None:
        self._conf = copy.deepcopy(DEFAULT_CONFIG)
        if config_file is not None:
            self._read_config(file_name=config_file)

    def _recursively_update(self, base_dict, update_dict):
        for key, value in update_dict.items():
            if isinstance(value, dict):
                if not isinstance(base_dict.get(key), dict):
                    base_dict[key] = {}
                self._recursively_update(base_dict[key], update_dict[key])
            else:
                base_dict[key] = value

    def merge(self, patch_dict):
        """
        Merge config with the patch.
        """
        self._recursively_update(self._conf, update_dict=patch_dict)
        return self._conf

    def _read_config(self, file_name):
        with open(file_name, "r", encoding="utf-8") as fileobj:
            try:
                custom_config = yaml.safe_load(fileobj)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Failed to load config file: {e}")

        if custom_config is None:
            return
        if not isinstance(custom_config, dict):
            raise ConfigurationError(
                f"Config file {file_name} must contain a mapping at the top level"
            )
        self._recursively_update(self._conf, custom_config)

    def __getitem__(self, item):
        try:
            return self._conf[item]
        except KeyError:
            logger.critical('Config item "{}" was not defined', item)
            raise

    def __setitem__(self, item, value):
        self._conf[item] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Returns value by key or default
        """

        return self._conf.get(key, default)
