"""Typed paging for the Spotify Web API."""
from .client import SpotifyClient
from .config import Settings, load_settings
from .errors import SpotifyError, SpotifyHTTPError, PageDecodeError, NoMorePages
from .page import (
    BasePage, FullArtistPage, SimpleAlbumPage, SavedAlbumPage, SimplePlaylistPage,
    SimpleTrackPage, FullTrackPage, SavedTrackPage, PlaylistTrackPage, CategoryPage,
)

__all__ = [
    "SpotifyClient", "Settings", "load_settings",
    "SpotifyError", "SpotifyHTTPError", "PageDecodeError", "NoMorePages",
    "BasePage", "FullArtistPage", "SimpleAlbumPage", "SavedAlbumPage", "SimplePlaylistPage",
    "SimpleTrackPage", "FullTrackPage", "SavedTrackPage", "PlaylistTrackPage", "CategoryPage",
]
