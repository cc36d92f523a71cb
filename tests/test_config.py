import logging

import pytest

from gravefinder.config import Settings, load_settings
from gravefinder.exceptions import ConfigError
from gravefinder.log import setup_logging


def test_defaults() -> None:
    settings = Settings()
    assert settings.app.transport == "stdio"
    assert settings.data.max_results == 100


def test_nested_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRAVEFINDER_DATA__BURIALS_PATH", "/data/Geo_Burials.json")
    monkeypatch.setenv("GRAVEFINDER_APP__LOG_LEVEL", "DEBUG")
    settings = load_settings()
    assert settings.data.burials_path == "/data/Geo_Burials.json"
    assert settings.app.log_level == "DEBUG"


def test_invalid_value_raises_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRAVEFINDER_APP__TRANSPORT", "carrier-pigeon")
    with pytest.raises(ConfigError):
        load_settings()


def test_setup_logging_installs_single_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("debug")
        setup_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        setup_logging("nonsense")
        assert root.level == logging.INFO
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_negative_max_results_raises_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRAVEFINDER_DATA__MAX_RESULTS", "-1")
    with pytest.raises(ConfigError):
        load_settings()
