import pytest
from pydantic import ValidationError

from config import Settings


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("UNICALC_MAX_NESTING_DEPTH", "12")
    monkeypatch.setenv("UNICALC_INTEGRATION_METHOD", "trapezoid")

    settings = Settings()

    assert settings.max_nesting_depth == 12
    assert settings.integration_method == "trapezoid"
    assert settings.strict_parentheses is False


def test_nesting_depth_above_stack_budget_is_rejected(monkeypatch):
    monkeypatch.setenv("UNICALC_MAX_NESTING_DEPTH", "100000")

    with pytest.raises(ValidationError):
        Settings()
