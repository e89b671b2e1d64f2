# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import TypedDict

import platformdirs

APP_NAME = "propfilter"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    filter_prefix: str
    ignore_empty_value: bool
    show_header: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "filter_prefix": "filter",
        "ignore_empty_value": True,
        "show_header": True,
        "log_level": "WARNING",
    }


def set_config_path(path: Path) -> None:
    """Point the application at a different config file (the `--config` option)."""
    global CONFIG_PATH, APP_CONFIG_PATH

    APP_CONFIG_PATH = path
    CONFIG_PATH = path.parent
