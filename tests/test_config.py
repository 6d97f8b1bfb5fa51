"""
Tests for settings loading and logging setup.
"""

import logging

from showgraph.config import Settings
from showgraph.logging import configure_logging


def test_defaults():
    config = Settings()

    assert config.upstream_base_url == "https://api.tvmaze.com"
    assert config.schedule_date == "2023-01-01"
    assert config.api_port == 4000
    assert config.cors_origins == ["*"]
    assert config.debug is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SHOWGRAPH_SCHEDULE_DATE", "2024-12-25")
    monkeypatch.setenv("SHOWGRAPH_LOG_LEVEL", "debug")

    config = Settings()

    assert config.schedule_date == "2024-12-25"
    assert config.debug is True


def test_only_service_settings_are_declared():
    assert set(Settings.model_fields) == {
        "upstream_base_url",
        "upstream_timeout",
        "schedule_date",
        "api_host",
        "api_port",
        "cors_origins",
        "graphiql",
        "log_level",
        "log_json",
    }


def test_configure_logging_sets_root_level():
    configure_logging("WARNING")
    assert logging.getLogger().level == logging.WARNING

    configure_logging("info", json_logs=True)
    assert logging.getLogger().level == logging.INFO
