class SpotifyError(Exception):
    """Base class for errors raised by spotipage."""


class SpotifyHTTPError(SpotifyError):
    def __init__(self, status: int, text: str):
        self.status = status
        self.text = text
        super().__init__(f"HTTP {status}: {text[:200]}")


class PageDecodeError(SpotifyError, ValueError):
    """The response body does not have the shape of the requested page type."""


class NoMorePages(SpotifyError):
    """Raised when following an empty ``next``/``previous`` link."""

    def __init__(self, message: str = "spotify: no more pages"):
        super().__init__(message)
