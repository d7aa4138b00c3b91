"""Unit tests for application settings configuration."""

import logging
from pathlib import Path

from launch_tracker.config import Settings, get_settings
from launch_tracker.infrastructure.logging.log_config import setup_logging


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_default_seed_file_ships_with_the_package():
    assert Path(Settings().seed_data_file).name == "seed_launches.json"
    assert Path(Settings().seed_data_file).exists()


def test_cutoff_year_can_be_overridden_from_environment(monkeypatch):
    monkeypatch.setenv("TIMELINE_CUTOFF_YEAR", "2028")
    assert Settings().timeline_cutoff_year == 2028


def test_setup_logging_applies_category_levels(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL_STORE", "DEBUG")
    monkeypatch.setenv("LOG_LEVEL_UVICORN", "WARNING")
    get_settings.cache_clear()
    try:
        setup_logging()
        assert logging.getLogger("launch_tracker.infrastructure.memory").level == logging.DEBUG
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
        assert not hasattr(get_settings(), "log_level_http")
    finally:
        get_settings.cache_clear()
