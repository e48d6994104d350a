from typing import Dict, Any, List, Optional
from .models import (
    Image, Followers, SimpleArtist, FullArtist, SimpleAlbum, FullAlbum,
    SavedAlbum, SimpleTrack, FullTrack, SavedTrack, PublicUser,
    PlaylistTrack, PlaylistTracksRef, SimplePlaylist, Category,
)

def map_image(i: Dict[str, Any]) -> Image:
    return Image(url=i["url"], height=i.get("height"), width=i.get("width"))

def map_images(items: Optional[List[Dict[str, Any]]]) -> List[Image]:
    return [map_image(x) for x in items or []]

def map_followers(f: Optional[Dict[str, Any]]) -> Optional[Followers]:
    if f is None:
        return None
    return Followers(total=int(f.get("total") or 0), href=f.get("href"))

def map_simple_artist(a: Dict[str, Any]) -> SimpleArtist:
    return SimpleArtist(
        id=a["id"], name=a["name"],
        uri=a.get("uri", ""), href=a.get("href", ""),
        external_urls=dict(a.get("external_urls") or {}),
    )

def map_full_artist(a: Dict[str, Any]) -> FullArtist:
    return FullArtist(
        id=a["id"], name=a["name"],
        uri=a.get("uri", ""), href=a.get("href", ""),
        external_urls=dict(a.get("external_urls") or {}),
        genres=list(a.get("genres") or []),
        popularity=int(a.get("popularity") or 0),
        followers=map_followers(a.get("followers")),
        images=map_images(a.get("images")),
    )

def _album_fields(a: Dict[str, Any]) -> Dict[str, Any]:
    return dict(
        id=a["id"], name=a["name"],
        uri=a.get("uri", ""), href=a.get("href", ""),
        external_urls=dict(a.get("external_urls") or {}),
        album_type=a.get("album_type"),
        artists=[map_simple_artist(x) for x in a.get("artists") or []],
        images=map_images(a.get("images")),
        release_date=a.get("release_date"),
        release_date_precision=a.get("release_date_precision"),
        total_tracks=a.get("total_tracks"),
        available_markets=list(a.get("available_markets") or []),
    )

def map_simple_album(a: Dict[str, Any]) -> SimpleAlbum:
    return SimpleAlbum(**_album_fields(a))

def map_full_album(a: Dict[str, Any]) -> FullAlbum:
    # the nested "tracks" paging object of a full album is not kept
    return FullAlbum(
        **_album_fields(a),
        genres=list(a.get("genres") or []),
        popularity=int(a.get("popularity") or 0),
        label=a.get("label"),
    )

def map_saved_album(s: Dict[str, Any]) -> SavedAlbum:
    return SavedAlbum(added_at=s["added_at"], album=map_full_album(s["album"]))

def _track_fields(t: Dict[str, Any]) -> Dict[str, Any]:
    return dict(
        id=t.get("id"), name=t["name"],
        uri=t.get("uri", ""), href=t.get("href"),
        external_urls=dict(t.get("external_urls") or {}),
        artists=[map_simple_artist(x) for x in t.get("artists") or []],
        duration_ms=int(t.get("duration_ms") or 0),
        explicit=bool(t.get("explicit", False)),
        track_number=int(t.get("track_number") or 0),
        disc_number=1 if t.get("disc_number") is None else int(t["disc_number"]),
        preview_url=t.get("preview_url"),
    )

def map_simple_track(t: Dict[str, Any]) -> SimpleTrack:
    return SimpleTrack(**_track_fields(t))

def map_full_track(t: Dict[str, Any]) -> FullTrack:
    album = t.get("album")
    return FullTrack(
        **_track_fields(t),
        album=map_simple_album(album) if album else None,
        popularity=int(t.get("popularity") or 0),
    )

def map_saved_track(s: Dict[str, Any]) -> SavedTrack:
    return SavedTrack(added_at=s["added_at"], track=map_full_track(s["track"]))

def map_public_user(u: Optional[Dict[str, Any]]) -> Optional[PublicUser]:
    if u is None:
        return None
    return PublicUser(
        id=u["id"], display_name=u.get("display_name"),
        uri=u.get("uri", ""), href=u.get("href", ""),
        external_urls=dict(u.get("external_urls") or {}),
    )

def map_playlist_track(p: Dict[str, Any]) -> PlaylistTrack:
    track = p.get("track")
    return PlaylistTrack(
        added_at=p.get("added_at"),
        added_by=map_public_user(p.get("added_by")),
        is_local=bool(p.get("is_local", False)),
        track=map_full_track(track) if track else None,
    )

def map_simple_playlist(p: Dict[str, Any]) -> SimplePlaylist:
    tracks = p.get("tracks")
    return SimplePlaylist(
        id=p["id"], name=p["name"],
        uri=p.get("uri", ""), href=p.get("href", ""),
        external_urls=dict(p.get("external_urls") or {}),
        collaborative=bool(p.get("collaborative", False)),
        description=p.get("description"),
        images=map_images(p.get("images")),
        owner=map_public_user(p.get("owner")),
        public=p.get("public"),
        snapshot_id=p.get("snapshot_id"),
        tracks=PlaylistTracksRef(href=tracks["href"], total=int(tracks["total"])) if tracks else None,
    )

def map_category(c: Dict[str, Any]) -> Category:
    return Category(id=c["id"], name=c["name"], href=c.get("href", ""), icons=map_images(c.get("icons")))
