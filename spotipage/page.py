"""
Typed pages over the Web API paging object:

    {"href": ..., "items": [...], "limit": ..., "next": ...,
     "offset": ..., "previous": ..., "total": ...}

BasePage holds the pagination metadata; each variant adds one named list of
items and knows how to map a single item.
See https://developer.spotify.com/documentation/web-api/concepts/api-calls
"""
import logging
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, ClassVar, Dict, List, Optional, Type, TypeVar

from .errors import PageDecodeError
from .mappers import (
    map_full_artist, map_simple_album, map_saved_album, map_simple_playlist,
    map_simple_track, map_full_track, map_saved_track, map_playlist_track,
    map_category,
)
from .models import (
    FullArtist, SimpleAlbum, SavedAlbum, SimplePlaylist, SimpleTrack,
    FullTrack, SavedTrack, PlaylistTrack, Category,
)

logger = logging.getLogger(__name__)

P = TypeVar("P", bound="BasePage")


def _str_field(cls: type, data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise PageDecodeError(f"{cls.__name__}: '{key}' must be a string, got {type(value).__name__}")
    return value


def _int_field(cls: type, data: Dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass; JSON true/false is not a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise PageDecodeError(f"{cls.__name__}: '{key}' must be an integer, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class BasePage:
    # link to the Web API endpoint returning the full result of the request
    endpoint: str = ""
    # maximum number of items in the response (as requested, or the default)
    limit: int = 0
    offset: int = 0
    # total number of items available across all pages
    total: int = 0
    next: Optional[str] = None
    previous: Optional[str] = None

    # name of the dataclass field holding the items
    items_field: ClassVar[str] = ""
    # top-level key wrapping the paging object on search/browse endpoints
    envelope: ClassVar[Optional[str]] = None
    map_item: ClassVar[Callable[[Dict[str, Any]], Any]]

    @property
    def items(self) -> List[Any]:
        return getattr(self, self.items_field) if self.items_field else []

    @classmethod
    def from_dict(cls: Type[P], data: Any) -> P:
        """
        Builds a page from a decoded paging object (or its envelope).
        Absent/null links become None (an empty string is kept), null items
        stay None, unknown keys are ignored and the total is taken as-is.
        Raises PageDecodeError on a shape mismatch, including wrongly typed
        paging fields.
        """
        if not cls.items_field:
            raise TypeError(f"{cls.__name__} has no items; decode into a page variant")
        if not isinstance(data, dict):
            raise PageDecodeError(f"{cls.__name__}: expected a JSON object, got {type(data).__name__}")
        if cls.envelope and "items" not in data and isinstance(data.get(cls.envelope), dict):
            data = data[cls.envelope]

        raw_items = data.get("items")
        if raw_items is None:
            raw_items = []
        if not isinstance(raw_items, list):
            raise PageDecodeError(f"{cls.__name__}: 'items' must be a list, got {type(raw_items).__name__}")

        endpoint = _str_field(cls, data, "href") or ""
        limit = _int_field(cls, data, "limit")
        offset = _int_field(cls, data, "offset")
        total = _int_field(cls, data, "total")
        next_url = _str_field(cls, data, "next")
        previous_url = _str_field(cls, data, "previous")

        try:
            # null entries (e.g. unavailable playlists in search results) stay None
            items = [cls.map_item(x) if x is not None else None for x in raw_items]
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise PageDecodeError(f"{cls.__name__}: malformed item ({e!r})") from e

        page = cls(
            endpoint=endpoint,
            limit=limit,
            offset=offset,
            total=total,
            next=next_url,
            previous=previous_url,
            **{cls.items_field: items},
        )

        logger.debug("decoded %s: %d item(s), offset=%d total=%d",
                     cls.__name__, len(items), page.offset, page.total)
        return page

    def to_dict(self) -> Dict[str, Any]:
        """Serializes back into the paging-object JSON shape."""
        return {
            "href": self.endpoint,
            "items": [asdict(x) if x is not None else None for x in self.items],
            "limit": self.limit,
            "next": self.next,
            "offset": self.offset,
            "previous": self.previous,
            "total": self.total,
        }


@dataclass(frozen=True)
class FullArtistPage(BasePage):
    artists: List[Optional[FullArtist]] = field(default_factory=list)

    items_field: ClassVar[str] = "artists"
    envelope: ClassVar[Optional[str]] = "artists"
    map_item = staticmethod(map_full_artist)


@dataclass(frozen=True)
class SimpleAlbumPage(BasePage):
    albums: List[Optional[SimpleAlbum]] = field(default_factory=list)

    items_field: ClassVar[str] = "albums"
    envelope: ClassVar[Optional[str]] = "albums"
    map_item = staticmethod(map_simple_album)


@dataclass(frozen=True)
class SavedAlbumPage(BasePage):
    albums: List[Optional[SavedAlbum]] = field(default_factory=list)

    items_field: ClassVar[str] = "albums"
    map_item = staticmethod(map_saved_album)


@dataclass(frozen=True)
class SimplePlaylistPage(BasePage):
    playlists: List[Optional[SimplePlaylist]] = field(default_factory=list)

    items_field: ClassVar[str] = "playlists"
    envelope: ClassVar[Optional[str]] = "playlists"
    map_item = staticmethod(map_simple_playlist)


@dataclass(frozen=True)
class SimpleTrackPage(BasePage):
    tracks: List[Optional[SimpleTrack]] = field(default_factory=list)

    items_field: ClassVar[str] = "tracks"
    map_item = staticmethod(map_simple_track)


@dataclass(frozen=True)
class FullTrackPage(BasePage):
    tracks: List[Optional[FullTrack]] = field(default_factory=list)

    items_field: ClassVar[str] = "tracks"
    envelope: ClassVar[Optional[str]] = "tracks"
    map_item = staticmethod(map_full_track)


@dataclass(frozen=True)
class SavedTrackPage(BasePage):
    tracks: List[Optional[SavedTrack]] = field(default_factory=list)

    items_field: ClassVar[str] = "tracks"
    map_item = staticmethod(map_saved_track)


@dataclass(frozen=True)
class PlaylistTrackPage(BasePage):
    tracks: List[Optional[PlaylistTrack]] = field(default_factory=list)

    items_field: ClassVar[str] = "tracks"
    map_item = staticmethod(map_playlist_track)


@dataclass(frozen=True)
class CategoryPage(BasePage):
    categories: List[Optional[Category]] = field(default_factory=list)

    items_field: ClassVar[str] = "categories"
    envelope: ClassVar[Optional[str]] = "categories"
    map_item = staticmethod(map_category)
