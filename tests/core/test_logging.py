"""Tests for JSON logging and settings validation."""
import json
import logging

import pytest
from pydantic import ValidationError

from app.core.config import Settings
from app.core.logging import JsonFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "paywall_decision", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_known_extras():
    payload = json.loads(JsonFormatter().format(_record(article_id="premium-kittens", decision="BLOCK")))
    assert payload["message"] == "paywall_decision"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "app.test"
    assert payload["article_id"] == "premium-kittens"
    assert payload["decision"] == "BLOCK"


def test_json_formatter_skips_unknown_extras():
    payload = json.loads(JsonFormatter().format(_record(secret="x")))
    assert "secret" not in payload


def test_settings_defaults():
    s = Settings(_env_file=None)
    assert s.paywall_article_id == "premium-kittens"
    assert s.paywall_path == "/paywall"
    assert s.request_id_header == "X-Request-Id"


def test_settings_paywall_path_normalized():
    assert Settings(_env_file=None, paywall_path="/decide/").paywall_path == "/decide"


@pytest.mark.parametrize("path", ["decide", "/", ""])
def test_settings_paywall_path_rejected(path):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, paywall_path=path)
