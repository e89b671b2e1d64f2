# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any

import pytest
from yaml import dump

from propfilter import configuration
from propfilter.query.memory import MemoryQueryContext
from propfilter.repository.configuration import CONFIGURATION_REPO


@pytest.fixture
def people() -> list[dict[str, Any]]:
    return [
        {
            "name": "vincent",
            "nickname": "vin",
            "age": 31,
            "score": 7,
            "height": 1.82,
            "active": True,
            "joined": "2021-03-15",
            "address": {"city": "lyon"},
        },
        {
            "name": "admin",
            "nickname": "root",
            "age": 45,
            "score": 31,
            "height": 1.70,
            "active": False,
            "joined": "2019-11-02",
            "address": {"city": "paris"},
        },
        {
            "name": "maria",
            "nickname": None,
            "age": 27,
            "score": 12,
            "height": 1.65,
            "active": True,
            "joined": "2023-07-30",
            "address": {"city": "lyon"},
        },
    ]


@pytest.fixture
def context() -> MemoryQueryContext:
    return MemoryQueryContext()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        dump(
            {
                "filter_prefix": "filter",
                "ignore_empty_value": True,
                "show_header": False,
                "log_level": "WARNING",
            }
        )
    )
    return path


@pytest.fixture(autouse=True)
def isolated_configuration(tmp_path: Path):
    original = configuration.APP_CONFIG_PATH
    configuration.set_config_path(tmp_path / "missing" / "config.yaml")
    CONFIGURATION_REPO.reload()
    yield
    configuration.set_config_path(original)
    CONFIGURATION_REPO.reload()
