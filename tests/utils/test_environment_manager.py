import logging
from unittest.mock import patch

import pytest

from seq_pow.utils import EnvironmentManager, EnvironmentVariables, SystemSpecs, configure_logging


def test_defaults(monkeypatch):
    monkeypatch.delenv("PARALLELISM_DIVISOR", raising=False)
    monkeypatch.delenv("SEQ_POW_PROGRESS_INTERVAL", raising=False)
    monkeypatch.delenv("SEQ_POW_LOG_LEVEL", raising=False)
    assert EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR) == 2
    assert EnvironmentManager.get_int(EnvironmentVariables.PROGRESS_INTERVAL) == 1_000_000
    assert EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL) == "INFO"


def test_override_default(monkeypatch):
    monkeypatch.delenv("PARALLELISM_DIVISOR", raising=False)
    assert EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR, 4) == 4


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SEQ_POW_PROGRESS_INTERVAL", "250")
    assert EnvironmentManager.get_int(EnvironmentVariables.PROGRESS_INTERVAL) == 250


def test_bad_integer_falls_back_to_default(monkeypatch, caplog):
    """Test that a malformed integer is logged and ignored."""
    monkeypatch.setenv("PARALLELISM_DIVISOR", "many")
    with caplog.at_level(logging.WARNING):
        assert EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR) == 2
    assert "PARALLELISM_DIVISOR" in caplog.text


@pytest.mark.parametrize("value, expected", [("true", True), ("Y", True), ("1", True), ("no", False)])
def test_get_bool(monkeypatch, value, expected):
    monkeypatch.setenv("DATABASE_ECHO", value)
    assert EnvironmentManager.get_bool(EnvironmentVariables.DATABASE_ECHO) is expected


def test_get_bool_default(monkeypatch):
    monkeypatch.delenv("DATABASE_ECHO", raising=False)
    assert EnvironmentManager.get_bool(EnvironmentVariables.DATABASE_ECHO) is False


def test_parallel_processes_divides_cores(monkeypatch):
    monkeypatch.setenv("PARALLELISM_DIVISOR", "4")
    with patch("multiprocessing.cpu_count", return_value=16):
        assert SystemSpecs.get_num_parallel_processes() == 4


@pytest.mark.parametrize("divisor", ["0", "-3", "64"])
def test_parallel_processes_never_below_one(monkeypatch, divisor):
    monkeypatch.setenv("PARALLELISM_DIVISOR", divisor)
    with patch("multiprocessing.cpu_count", return_value=8):
        assert SystemSpecs.get_num_parallel_processes() >= 1


def test_configure_logging_levels(monkeypatch):
    root = logging.getLogger()
    previous = root.level
    monkeypatch.setenv("SEQ_POW_LOG_LEVEL", "warning")
    try:
        assert configure_logging() == logging.WARNING
        assert configure_logging("debug") == logging.DEBUG
        assert configure_logging("nonsense") == logging.INFO
    finally:
        root.setLevel(previous)
