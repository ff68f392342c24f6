import pytest

from sirene_ui import config


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in (
        "INSEE_API_KEY",
        "SIRENE_UI_COMPLETION_URL",
        "SIRENE_UI_ADDRESS_URL",
        "SIRENE_UI_SIRENE_URL",
        "SIRENE_UI_TIMEOUT",
        "SIRENE_UI_SERVICE",
        "SIRENE_UI_PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


def test_defaults_without_environment():
    settings = config.get_settings()
    assert settings.insee_api_key is None
    assert settings.completion_url == config.COMPLETION_URL
    assert settings.address_url == config.ADDRESS_URL
    assert settings.sirene_url == config.SIRENE_URL
    assert settings.request_timeout == 10.0
    assert settings.service_kind == "impl"
    assert settings.app_port == 8000


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("INSEE_API_KEY", " abc123 ")
    monkeypatch.setenv("SIRENE_UI_TIMEOUT", "4")
    monkeypatch.setenv("SIRENE_UI_SERVICE", "Demo")
    monkeypatch.setenv("SIRENE_UI_PORT", "3000")

    settings = config.get_settings()

    assert settings.insee_api_key == "abc123"
    assert settings.request_timeout == 4.0
    assert settings.service_kind == "demo"
    assert settings.app_port == 3000


def test_blank_key_counts_as_missing(monkeypatch):
    monkeypatch.setenv("INSEE_API_KEY", "   ")
    assert config.get_settings().insee_api_key is None
