"""Tests for runtime settings."""
import logging

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from range_split.config import RangeSplitSettings
from range_split.utils.logging import get_logger


@pytest.mark.unit
def test_defaults():
    settings = RangeSplitSettings()
    assert settings.log_level == "INFO"
    assert settings.log_json is True
    assert settings.service_name == "range-split"


@pytest.mark.unit
def test_log_level_is_normalized():
    assert RangeSplitSettings(log_level="debug").log_level == "DEBUG"


@pytest.mark.unit
def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        RangeSplitSettings(log_level="chatty")


@pytest.mark.unit
def test_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RANGE_SPLIT_LOG_LEVEL", "warning")
    monkeypatch.setenv("RANGE_SPLIT_LOG_JSON", "false")
    monkeypatch.setenv("SERVICE_NAME", "ingest")

    settings = RangeSplitSettings.from_env()

    assert settings.log_level == "WARNING"
    assert settings.log_json is False
    assert settings.service_name == "ingest"


@pytest.mark.unit
def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("RANGE_SPLIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("RANGE_SPLIT_LOG_JSON", raising=False)
    monkeypatch.delenv("SERVICE_NAME", raising=False)

    assert RangeSplitSettings.from_env() == RangeSplitSettings()


@pytest.mark.unit
def test_from_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "log_level: error\nlog_json: false\nservice_name: batch\n", encoding="utf-8"
    )

    settings = RangeSplitSettings.from_yaml(str(path))

    assert settings.log_level == "ERROR"
    assert settings.log_json is False
    assert settings.service_name == "batch"


@pytest.mark.unit
def test_from_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert RangeSplitSettings.from_yaml(str(path)) == RangeSplitSettings()


@pytest.mark.unit
def test_from_dict():
    settings = RangeSplitSettings.from_dict({"log_level": "DEBUG"})
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True


@pytest.mark.unit
def test_configure_logging_applies_level(restore_service_name):
    RangeSplitSettings(log_level="DEBUG", log_json=False).configure_logging()
    assert logging.getLogger().level == logging.DEBUG

    RangeSplitSettings().configure_logging()
    assert logging.getLogger().level == logging.INFO


@pytest.mark.unit
def test_empty_service_name_rejected():
    with pytest.raises(ValidationError):
        RangeSplitSettings(service_name="")


@pytest.mark.unit
def test_configure_logging_binds_service_name(restore_service_name):
    RangeSplitSettings(service_name="ingest").configure_logging()

    with capture_logs() as logs:
        get_logger("range_split.test").info("configured")

    assert logs[0]["service_name"] == "ingest"
