from __future__ import annotations

import pytest
from pydantic import ValidationError

from sr_calculator.core.config import load_settings
from sr_calculator.schemas.calculator import CalculateRequest, coerce_number


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 0.0),
        ("", 0.0),
        ("  42.5 ", 42.5),
        ("abc", 0.0),
        (True, 1.0),
        (False, 0.0),
        (7, 7.0),
        (float("nan"), 0.0),
        ("1_000", 0.0),
        ("inf", 0.0),
        ("nan", 0.0),
        ("1e", 0.0),
        ("-Infinity", float("-inf")),
        ("0x1F", 31.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e400", float("inf")),
        (10 ** 400, float("inf")),
        ([], 0.0),
        (["12"], 12.0),
        ([1, 2], 0.0),
        ([True], 0.0),
        ({"a": 1}, 0.0),
    ],
)
def test_coerce_number(raw, expected):
    assert coerce_number(raw) == expected


def test_request_defaults_missing_fields_to_zero():
    data = CalculateRequest.model_validate({"currentAge": "30"}).to_input()

    assert data.currentAge == 30
    assert data.retirementAge == 0
    assert data.monthlyContribution == 0.0


def test_request_ignores_unknown_fields():
    data = CalculateRequest.model_validate({"currentAge": 30, "userId": "abc"}).to_input()

    assert data.currentAge == 30


def test_request_rejects_fractional_age():
    with pytest.raises(ValidationError):
        CalculateRequest.model_validate({"currentAge": 30.5})


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SR_PORT", "8080")
    monkeypatch.setenv("SR_DEBUG", "yes")
    monkeypatch.setenv("SR_CORS_ORIGINS", "http://a.test, http://b.test,")

    settings = load_settings()

    assert settings.port == 8080
    assert settings.debug is True
    assert settings.cors_origins == ("http://a.test", "http://b.test")


def test_settings_fall_back_on_bad_port(monkeypatch):
    monkeypatch.setenv("SR_PORT", "eighty")

    assert load_settings().port == 3000
