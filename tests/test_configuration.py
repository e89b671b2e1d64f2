# SPDX-License-Identifier: MIT

from yaml import safe_load

from propfilter import configuration
from propfilter.repository.configuration import ConfigurationRepository


def test_missing_file_gives_defaults():
    repository = ConfigurationRepository()
    assert repository.get_config() == configuration.get_default_configuration()


def test_partial_file_keeps_defaults_for_missing_keys(config_file):
    config_file.write_text("filter_prefix: search\n")
    configuration.set_config_path(config_file)

    config = ConfigurationRepository().get_config()
    assert config["filter_prefix"] == "search"
    assert config["ignore_empty_value"] is True
    assert config["log_level"] == "WARNING"


def test_get_config_returns_a_copy(config_file):
    configuration.set_config_path(config_file)
    repository = ConfigurationRepository()
    repository.get_config()["filter_prefix"] = "changed"
    assert repository.get_config()["filter_prefix"] == "filter"


def test_update_and_flush(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    configuration.set_config_path(path)
    repository = ConfigurationRepository()
    repository.update_config(filter_prefix="q", log_level="debug")
    repository.flush()

    saved = safe_load(path.read_text())
    assert saved["filter_prefix"] == "q"
    assert saved["log_level"] == "DEBUG"
    assert not repository.is_dirty
