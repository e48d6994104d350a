import pytest

from spotipage import load_settings
from spotipage.config import API_BASE_DEFAULT, DEFAULT_TIMEOUT


def test_defaults(monkeypatch):
    for name in ("SPOTIFY_ACCESS_TOKEN", "SPOTIFY_API_BASE", "SPOTIFY_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.token is None
    assert settings.api_base == API_BASE_DEFAULT
    assert settings.timeout == DEFAULT_TIMEOUT


def test_bad_timeout(monkeypatch):
    monkeypatch.setenv("SPOTIFY_TIMEOUT", "soon")
    with pytest.raises(ValueError, match="SPOTIFY_TIMEOUT"):
        load_settings()
