import logging
import requests
from typing import Any, Dict, Iterator, Optional, Type, TypeVar

from .config import API_BASE_DEFAULT, DEFAULT_TIMEOUT, load_settings
from .errors import SpotifyHTTPError, NoMorePages
from .page import BasePage

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BasePage)


class SpotifyClient:
    """
    Thin synchronous client over a requests.Session.

    One call = one GET; nothing is retried or cached. Transport errors from
    requests propagate unchanged, non-2xx answers raise SpotifyHTTPError.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        base_url: str = API_BASE_DEFAULT,
    ):
        self._timeout = timeout
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        if token:
            self._session.headers.update({"Authorization": f"Bearer {token}"})
        self.base_url = base_url.rstrip("/")

    @classmethod
    def from_env(cls) -> "SpotifyClient":
        settings = load_settings()
        return cls(token=settings.token, timeout=settings.timeout, base_url=settings.api_base)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "SpotifyClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GETs url and returns the decoded JSON body."""
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        logger.debug("GET %s params=%s", url, params)
        # the response is released on every path, including a failed decode
        with self._session.get(url, params=params or None, timeout=self._timeout, stream=True) as resp:
            if not 200 <= resp.status_code < 300:
                logger.debug("GET %s -> HTTP %s", url, resp.status_code)
                raise SpotifyHTTPError(resp.status_code, resp.text)
            return resp.json()

    def get_page(self, url: str, page_type: Type[P], params: Optional[Dict[str, Any]] = None) -> P:
        """GETs the paging object at url and decodes it into page_type."""
        return page_type.from_dict(self.get(url, params=params))

    def next_page(self, page: P) -> P:
        """Fetches the page after `page`; raises NoMorePages at the end."""
        if not page.next:
            raise NoMorePages()
        return self.get_page(page.next, type(page))

    def previous_page(self, page: P) -> P:
        """Fetches the page before `page`; raises NoMorePages at the start."""
        if not page.previous:
            raise NoMorePages()
        return self.get_page(page.previous, type(page))

    def iter_pages(self, page: P) -> Iterator[P]:
        """Yields `page` and every following page until `next` is empty."""
        while True:
            yield page
            try:
                page = self.next_page(page)
            except NoMorePages:
                return

    def iter_items(self, page: BasePage) -> Iterator[Any]:
        for p in self.iter_pages(page):
            yield from p.items
