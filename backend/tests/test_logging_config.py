# test_logging_config.py
import logging

import pytest

from pdfsearch.logging_config import log_latency


@log_latency("test.add")
def _add(a, b):
    return a + b


@log_latency("test.explode")
def _explode():
    raise ValueError("bad page")


def test_log_latency_logs_duration_and_returns_result(caplog):
    with caplog.at_level(logging.INFO):
        assert _add(2, 3) == 5
    assert any(r.levelno == logging.INFO and r.getMessage().startswith("test.add took ") for r in caplog.records)


def test_log_latency_logs_failure_and_reraises(caplog):
    with caplog.at_level(logging.INFO):
        with pytest.raises(ValueError, match="bad page"):
            _explode()
    errors = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].startswith("test.explode failed after ")
    assert errors[0].endswith("ms: bad page")


def test_log_latency_keeps_function_name():
    assert _add.__name__ == "_add"
