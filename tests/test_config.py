"""Tests for receipt_processor.config."""

import pytest

from receipt_processor.config import Settings, load_settings

ENV_VARS = (
    "RECEIPT_PROCESSOR_HOST",
    "RECEIPT_PROCESSOR_PORT",
    "RECEIPT_PROCESSOR_LOG_LEVEL",
    "RECEIPT_PROCESSOR_RELOAD",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert load_settings() == Settings(host="0.0.0.0", port=8080, log_level="INFO", reload=False)


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("RECEIPT_PROCESSOR_HOST", "127.0.0.1")
    monkeypatch.setenv("RECEIPT_PROCESSOR_PORT", "9000")
    monkeypatch.setenv("RECEIPT_PROCESSOR_LOG_LEVEL", "debug")
    monkeypatch.setenv("RECEIPT_PROCESSOR_RELOAD", "true")

    assert load_settings() == Settings(host="127.0.0.1", port=9000, log_level="DEBUG", reload=True)


def test_bad_port(monkeypatch):
    monkeypatch.setenv("RECEIPT_PROCESSOR_PORT", "eighty")
    with pytest.raises(ValueError, match="RECEIPT_PROCESSOR_PORT"):
        load_settings()


def test_bad_log_level(monkeypatch):
    monkeypatch.setenv("RECEIPT_PROCESSOR_LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError, match="RECEIPT_PROCESSOR_LOG_LEVEL"):
        load_settings()


def test_bad_port_hides_int_parse_error(monkeypatch):
    monkeypatch.setenv("RECEIPT_PROCESSOR_PORT", "eighty")
    with pytest.raises(ValueError) as excinfo:
        load_settings()
    assert excinfo.value.__suppress_context__
    assert excinfo.value.__cause__ is None
