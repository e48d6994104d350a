from typing import Dict, Optional, Type
from .client import SpotifyClient
from .page import (
    BasePage, FullArtistPage, SimpleAlbumPage, SavedAlbumPage, SimplePlaylistPage,
    SimpleTrackPage, FullTrackPage, SavedTrackPage, PlaylistTrackPage, CategoryPage,
)

MAX_LIMIT = 50

SEARCH_PAGE_TYPES: Dict[str, Type[BasePage]] = {
    "artist": FullArtistPage,
    "album": SimpleAlbumPage,
    "playlist": SimplePlaylistPage,
    "track": FullTrackPage,
}

def _paging(limit: int, offset: int) -> Dict[str, int]:
    return {"limit": max(1, min(MAX_LIMIT, limit)), "offset": max(0, offset)}

def artist_albums(client: SpotifyClient, artist_id: str, limit: int = 20, offset: int = 0,
                  include_groups: Optional[str] = None, market: Optional[str] = None) -> SimpleAlbumPage:
    return client.get_page(client.url(f"artists/{artist_id}/albums"), SimpleAlbumPage, params={
        **_paging(limit, offset), "include_groups": include_groups, "market": market,
    })

def album_tracks(client: SpotifyClient, album_id: str, limit: int = 20, offset: int = 0,
                 market: Optional[str] = None) -> SimpleTrackPage:
    return client.get_page(client.url(f"albums/{album_id}/tracks"), SimpleTrackPage, params={
        **_paging(limit, offset), "market": market,
    })

def playlist_tracks(client: SpotifyClient, playlist_id: str, limit: int = 100, offset: int = 0,
                    market: Optional[str] = None) -> PlaylistTrackPage:
    # this endpoint allows up to 100 items per page
    return client.get_page(client.url(f"playlists/{playlist_id}/tracks"), PlaylistTrackPage, params={
        "limit": max(1, min(100, limit)), "offset": max(0, offset), "market": market,
    })

def current_user_playlists(client: SpotifyClient, limit: int = 20, offset: int = 0) -> SimplePlaylistPage:
    return client.get_page(client.url("me/playlists"), SimplePlaylistPage, params=_paging(limit, offset))

def user_playlists(client: SpotifyClient, user_id: str, limit: int = 20, offset: int = 0) -> SimplePlaylistPage:
    return client.get_page(client.url(f"users/{user_id}/playlists"), SimplePlaylistPage,
                           params=_paging(limit, offset))

def saved_tracks(client: SpotifyClient, limit: int = 20, offset: int = 0,
                 market: Optional[str] = None) -> SavedTrackPage:
    return client.get_page(client.url("me/tracks"), SavedTrackPage, params={
        **_paging(limit, offset), "market": market,
    })

def saved_albums(client: SpotifyClient, limit: int = 20, offset: int = 0,
                 market: Optional[str] = None) -> SavedAlbumPage:
    return client.get_page(client.url("me/albums"), SavedAlbumPage, params={
        **_paging(limit, offset), "market": market,
    })

def top_artists(client: SpotifyClient, limit: int = 20, offset: int = 0,
                time_range: str = "medium_term") -> FullArtistPage:
    return client.get_page(client.url("me/top/artists"), FullArtistPage, params={
        **_paging(limit, offset), "time_range": time_range,
    })

def top_tracks(client: SpotifyClient, limit: int = 20, offset: int = 0,
               time_range: str = "medium_term") -> FullTrackPage:
    return client.get_page(client.url("me/top/tracks"), FullTrackPage, params={
        **_paging(limit, offset), "time_range": time_range,
    })

def categories(client: SpotifyClient, limit: int = 20, offset: int = 0,
               locale: Optional[str] = None) -> CategoryPage:
    return client.get_page(client.url("browse/categories"), CategoryPage, params={
        **_paging(limit, offset), "locale": locale,
    })

def new_releases(client: SpotifyClient, limit: int = 20, offset: int = 0) -> SimpleAlbumPage:
    return client.get_page(client.url("browse/new-releases"), SimpleAlbumPage, params=_paging(limit, offset))

def featured_playlists(client: SpotifyClient, limit: int = 20, offset: int = 0,
                       locale: Optional[str] = None) -> SimplePlaylistPage:
    return client.get_page(client.url("browse/featured-playlists"), SimplePlaylistPage, params={
        **_paging(limit, offset), "locale": locale,
    })

def search(client: SpotifyClient, q: str, type_: str = "track", limit: int = 20, offset: int = 0,
           market: Optional[str] = None) -> BasePage:
    """
    Runs /search for a single type and returns the matching page variant
    (artist -> FullArtistPage, album -> SimpleAlbumPage, playlist ->
    SimplePlaylistPage, track -> FullTrackPage).
    """
    try:
        page_type = SEARCH_PAGE_TYPES[type_]
    except KeyError:
        raise ValueError(f"unsupported search type {type_!r}; expected one of {sorted(SEARCH_PAGE_TYPES)}") from None
    return client.get_page(client.url("search"), page_type, params={
        "q": q, "type": type_, **_paging(limit, offset), "market": market,
    })
