from dataclasses import dataclass, field
from typing import List, Optional, Dict

# Field names follow the Web API's JSON keys, so dataclasses.asdict() yields
# the wire representation back.

@dataclass(frozen=True)
class Image:
    url: str
    height: Optional[int] = None
    width: Optional[int] = None

@dataclass(frozen=True)
class Followers:
    total: int = 0
    href: Optional[str] = None

@dataclass(frozen=True)
class SimpleArtist:
    id: str
    name: str
    uri: str = ""
    href: str = ""
    external_urls: Dict[str, str] = field(default_factory=dict)

@dataclass(frozen=True)
class FullArtist(SimpleArtist):
    genres: List[str] = field(default_factory=list)
    popularity: int = 0
    followers: Optional[Followers] = None
    images: List[Image] = field(default_factory=list)

@dataclass(frozen=True)
class SimpleAlbum:
    id: str
    name: str
    uri: str = ""
    href: str = ""
    external_urls: Dict[str, str] = field(default_factory=dict)
    album_type: Optional[str] = None
    artists: List[SimpleArtist] = field(default_factory=list)
    images: List[Image] = field(default_factory=list)
    release_date: Optional[str] = None
    release_date_precision: Optional[str] = None
    total_tracks: Optional[int] = None
    available_markets: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class FullAlbum(SimpleAlbum):
    genres: List[str] = field(default_factory=list)
    popularity: int = 0
    label: Optional[str] = None

@dataclass(frozen=True)
class SavedAlbum:
    added_at: str
    album: FullAlbum

@dataclass(frozen=True)
class SimpleTrack:
    # local files in playlists have no id
    id: Optional[str]
    name: str
    uri: str = ""
    href: Optional[str] = None
    external_urls: Dict[str, str] = field(default_factory=dict)
    artists: List[SimpleArtist] = field(default_factory=list)
    duration_ms: int = 0
    explicit: bool = False
    track_number: int = 0
    disc_number: int = 1
    preview_url: Optional[str] = None

@dataclass(frozen=True)
class FullTrack(SimpleTrack):
    album: Optional[SimpleAlbum] = None
    popularity: int = 0

@dataclass(frozen=True)
class SavedTrack:
    added_at: str
    track: FullTrack

@dataclass(frozen=True)
class PublicUser:
    id: str
    display_name: Optional[str] = None
    uri: str = ""
    href: str = ""
    external_urls: Dict[str, str] = field(default_factory=dict)

@dataclass(frozen=True)
class PlaylistTrack:
    added_at: Optional[str]
    added_by: Optional[PublicUser]
    is_local: bool
    # null when the track was removed from the catalog
    track: Optional[FullTrack]

@dataclass(frozen=True)
class PlaylistTracksRef:
    href: str
    total: int

@dataclass(frozen=True)
class SimplePlaylist:
    id: str
    name: str
    uri: str = ""
    href: str = ""
    external_urls: Dict[str, str] = field(default_factory=dict)
    collaborative: bool = False
    description: Optional[str] = None
    images: List[Image] = field(default_factory=list)
    owner: Optional[PublicUser] = None
    public: Optional[bool] = None
    snapshot_id: Optional[str] = None
    tracks: Optional[PlaylistTracksRef] = None

@dataclass(frozen=True)
class Category:
    id: str
    name: str
    href: str = ""
    icons: List[Image] = field(default_factory=list)
