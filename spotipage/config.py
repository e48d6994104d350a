import os
from dataclasses import dataclass
from typing import Optional

API_BASE_DEFAULT = "https://api.spotify.com/v1"
DEFAULT_TIMEOUT = 15.0


@dataclass(frozen=True)
class Settings:
    token: Optional[str]
    api_base: str
    timeout: float


def load_settings() -> Settings:
    """
    Reads the client settings from the environment:
      SPOTIFY_ACCESS_TOKEN  bearer token (already obtained elsewhere)
      SPOTIFY_API_BASE      base URL of the Web API
      SPOTIFY_TIMEOUT       per-request timeout in seconds
    """
    raw_timeout = os.getenv("SPOTIFY_TIMEOUT", "")
    try:
        timeout = float(raw_timeout) if raw_timeout.strip() else DEFAULT_TIMEOUT
    except ValueError:
        raise ValueError(f"SPOTIFY_TIMEOUT must be a number of seconds, got {raw_timeout!r}") from None
    return Settings(
        token=os.getenv("SPOTIFY_ACCESS_TOKEN") or None,
        api_base=os.getenv("SPOTIFY_API_BASE", API_BASE_DEFAULT).rstrip("/"),
        timeout=timeout,
    )
