"""Tests for DemoSettings."""

from walletgate_demo.config import DEV_API_BASE, PROD_API_BASE, DemoSettings


def test_development_defaults_to_local_api():
    assert DemoSettings(app_env="development", demo_api_base="").demo_api_base == DEV_API_BASE


def test_other_environments_use_public_api():
    assert DemoSettings(app_env="production", demo_api_base="").demo_api_base == PROD_API_BASE
    assert DemoSettings(app_env="staging", demo_api_base="").demo_api_base == PROD_API_BASE


def test_explicit_base_wins_and_is_trimmed():
    settings = DemoSettings(app_env="production", demo_api_base="https://sandbox.walletgate.app///")
    assert settings.demo_api_base == "https://sandbox.walletgate.app"


def test_env_variable_is_read(monkeypatch):
    monkeypatch.setenv("DEMO_API_BASE", "http://gateway.internal:9000/")
    assert DemoSettings().demo_api_base == "http://gateway.internal:9000"


def test_cors_origins_from_json(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["https://demo.walletgate.app"]')
    assert DemoSettings().cors_origins == ["https://demo.walletgate.app"]


def test_polling_defaults(settings):
    assert settings.request_timeout_seconds == 12
    assert settings.poll_interval_seconds == 10
    assert settings.poll_max_attempts == 90
