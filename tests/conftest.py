import io
import json
from unittest.mock import Mock

import pytest
import requests

from spotipage import SpotifyClient

API = "https://api.example/v1"


def make_response(payload=None, status=200, body=None, url=API):
    """A real requests.Response backed by an in-memory body, with close() spied."""
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    resp.encoding = "utf-8"
    text = body if body is not None else json.dumps(payload)
    resp.raw = io.BytesIO(text.encode("utf-8"))
    resp.close = Mock(wraps=resp.close)
    return resp


def artist_json(artist_id, name):
    return {
        "id": artist_id,
        "name": name,
        "uri": f"spotify:artist:{artist_id}",
        "href": f"{API}/artists/{artist_id}",
        "external_urls": {"spotify": f"https://open.spotify.com/artist/{artist_id}"},
        "genres": ["fado"],
        "popularity": 61,
        "followers": {"href": None, "total": 12034},
        "images": [{"url": f"https://i.scdn.co/image/{artist_id}", "height": 640, "width": 640}],
        "type": "artist",
    }


def album_json(album_id, name):
    return {
        "id": album_id,
        "name": name,
        "uri": f"spotify:album:{album_id}",
        "href": f"{API}/albums/{album_id}",
        "external_urls": {"spotify": f"https://open.spotify.com/album/{album_id}"},
        "album_type": "album",
        "artists": [{"id": "a1", "name": "Amália Rodrigues", "uri": "spotify:artist:a1",
                     "href": f"{API}/artists/a1", "external_urls": {}}],
        "images": [],
        "release_date": "1962",
        "release_date_precision": "year",
        "total_tracks": 12,
        "available_markets": ["PT", "BR"],
    }


def track_json(track_id, name, with_album=True):
    t = {
        "id": track_id,
        "name": name,
        "uri": f"spotify:track:{track_id}",
        "href": f"{API}/tracks/{track_id}",
        "external_urls": {"spotify": f"https://open.spotify.com/track/{track_id}"},
        "artists": [{"id": "a1", "name": "Amália Rodrigues"}],
        "duration_ms": 184000,
        "explicit": False,
        "track_number": 3,
        "disc_number": 1,
        "preview_url": None,
        "popularity": 40,
        "is_playable": True,
    }
    if with_album:
        t["album"] = album_json("al1", "Busto")
    return t


def paging_json(items, href, limit=2, offset=0, total=None, next=None, previous=None):
    return {
        "href": href,
        "items": items,
        "limit": limit,
        "next": next,
        "offset": offset,
        "previous": previous,
        "total": len(items) if total is None else total,
    }


@pytest.fixture
def session():
    return Mock()


@pytest.fixture
def client(session):
    return SpotifyClient(session=session, base_url=API)
