from spotipage.mappers import map_full_track, map_playlist_track, map_simple_playlist, map_full_artist
from conftest import track_json


def test_local_track_has_no_id():
    item = map_playlist_track({
        "added_at": "2024-02-02T00:00:00Z", "added_by": None, "is_local": True,
        "track": {"id": None, "name": "demo.mp3", "uri": "spotify:local:::demo.mp3:0",
                  "href": None, "artists": [], "duration_ms": 0, "album": None},
    })
    assert item.is_local
    assert item.track.id is None
    assert item.track.album is None


def test_full_track_nested_album_and_artists():
    t = map_full_track(track_json("t1", "Barco Negro"))
    assert t.album.release_date == "1962"
    assert t.album.available_markets == ["PT", "BR"]
    assert t.artists[0].name == "Amália Rodrigues"
    assert t.external_urls["spotify"].endswith("/t1")


def test_null_collections_become_empty():
    a = map_full_artist({"id": "a1", "name": "X", "genres": None, "images": None, "followers": None})
    assert a.genres == [] and a.images == [] and a.followers is None


def test_playlist_without_tracks_ref():
    p = map_simple_playlist({"id": "p1", "name": "Mix", "owner": {"id": "u1"}})
    assert p.tracks is None
    assert p.owner.id == "u1"
    assert p.public is None
