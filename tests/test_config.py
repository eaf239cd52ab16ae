"""
Tests for environment-driven settings.
"""
import pytest
from pydantic import ValidationError

from app.core.config import DEFAULT_STRAPI_URL, PUBLIC_READ_COLLECTIONS, Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("STRAPI_URL", "SERVICE_ENV", "API_TOKEN"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.strapi_url == DEFAULT_STRAPI_URL
    assert settings.service_env == "dev"
    assert settings.public_read_collections == PUBLIC_READ_COLLECTIONS


def test_strapi_url_from_env(monkeypatch):
    monkeypatch.setenv("STRAPI_URL", "https://cms.example.edu/")
    settings = Settings(_env_file=None)
    assert settings.strapi_url == "https://cms.example.edu"


def test_blank_strapi_url_falls_back(monkeypatch):
    monkeypatch.setenv("STRAPI_URL", "   ")
    assert Settings(_env_file=None).strapi_url == DEFAULT_STRAPI_URL


def test_default_token_forbidden_in_prod(monkeypatch):
    monkeypatch.setenv("SERVICE_ENV", "prod")
    with pytest.raises(ValidationError, match="API_TOKEN must be set"):
        Settings(_env_file=None)


def test_custom_token_allowed_in_prod(monkeypatch):
    monkeypatch.setenv("SERVICE_ENV", "prod")
    monkeypatch.setenv("API_TOKEN", "long-random-token")
    settings = Settings(_env_file=None)
    assert settings.api_token == "long-random-token"
