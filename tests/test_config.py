"""Tests for environment-driven settings."""

import pytest

from plan_advisor.config import DEFAULT_API_KEY, load_settings


def test_defaults_use_placeholders():
    settings = load_settings({})
    assert set(settings.providers) == {"hdfc", "bajaj", "care", "goDigit", "icici"}
    assert settings.providers["care"].base_url == "https://api.careinsurance.com/v1"
    assert all(ep.api_key == DEFAULT_API_KEY for ep in settings.providers.values())
    assert settings.backend == "mock"
    assert settings.usd_to_inr_rate == 83.0
    assert settings.simulate_latency is True


def test_environment_overrides():
    settings = load_settings(
        {
            "GODIGIT_API_KEY": "secret",
            "GODIGIT_API_URL": "https://sandbox.godigit.test",
            "USD_TO_INR_RATE": "84.5",
            "SIMULATE_LATENCY": "false",
            "PLAN_PROVIDER_BACKEND": "HTTP",
        }
    )
    assert settings.endpoint_for("goDigit").api_key == "secret"
    assert settings.endpoint_for("goDigit").base_url == "https://sandbox.godigit.test"
    assert settings.usd_to_inr_rate == 84.5
    assert settings.simulate_latency is False
    assert settings.backend == "http"


def test_invalid_values_raise():
    with pytest.raises(ValueError):
        load_settings({"PLAN_PROVIDER_BACKEND": "grpc"})
    with pytest.raises(ValueError):
        load_settings({"USD_TO_INR_RATE": "lots"})
    with pytest.raises(ValueError):
        load_settings({}).endpoint_for("unknown")


def test_cors_origins_from_comma_list():
    settings = load_settings({"CORS_ORIGINS": "https://plans.example.com, http://localhost:3000"})
    assert settings.cors_origins == ["https://plans.example.com", "http://localhost:3000"]
    assert load_settings({}).cors_origins == ["http://localhost:5173", "http://127.0.0.1:5173"]
