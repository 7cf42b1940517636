from __future__ import annotations

from autosubsync.models import Track, TrackKind
from autosubsync.track_inspector import TrackInspector, track_label


def _track_list() -> list[dict[str, object]]:
    return [
        {"type": "video", "id": 1, "ff-index": 0, "selected": True},
        {"type": "audio", "id": 1, "ff-index": 1, "lang": "jpn", "selected": True},
        {"type": "sub", "id": 1, "ff-index": 2, "lang": "eng", "selected": False},
        {
            "type": "sub",
            "id": 2,
            "external": True,
            "external-filename": "/media/movie.srt",
            "title": "movie.srt",
            "selected": True,
        },
    ]


def test_get_loaded_tracks_filters_by_kind(session) -> None:
    session.tracks = _track_list()
    inspector = TrackInspector(session)

    subtitles = inspector.get_loaded_tracks(TrackKind.SUBTITLE)

    assert subtitles == [
        Track(kind=TrackKind.SUBTITLE, index=3, track_id=1, stream_index=2, label="eng"),
        Track(
            kind=TrackKind.SUBTITLE,
            index=4,
            track_id=2,
            is_external=True,
            external_path="/media/movie.srt",
            label="srt",
            is_active=True,
        ),
    ]
    assert [t.index for t in inspector.get_loaded_tracks(TrackKind.AUDIO)] == [2]


def test_snapshots_are_fresh_on_every_query(session) -> None:
    inspector = TrackInspector(session)
    assert inspector.get_loaded_tracks(TrackKind.SUBTITLE) == []

    session.tracks = _track_list()

    assert len(inspector.get_loaded_tracks(TrackKind.SUBTITLE)) == 2


def test_get_active_track(session) -> None:
    session.tracks = _track_list()
    inspector = TrackInspector(session)

    audio = inspector.get_active_track(TrackKind.AUDIO)

    assert audio is not None
    assert audio.stream_index == 1
    assert audio.label == "jpn"


def test_active_subtitle_path_for_external_track(session) -> None:
    session.tracks = _track_list()
    assert TrackInspector(session).get_active_subtitle_path() == "/media/movie.srt"


def test_active_subtitle_path_is_none_for_internal_track(session) -> None:
    session.tracks = [{"type": "sub", "id": 1, "ff-index": 2, "selected": True}]
    assert TrackInspector(session).get_active_subtitle_path() is None


def test_active_subtitle_path_is_none_without_subtitles(session) -> None:
    session.tracks = [{"type": "audio", "id": 1, "selected": True}]
    assert TrackInspector(session).get_active_subtitle_path() is None


def test_track_label_prefers_language() -> None:
    assert track_label({"lang": "eng", "title": "English"}) == "eng"
    assert track_label({"title": "Commentary"}) == "Commentary"
    assert track_label({"title": "movie.en.srt"}) == "srt"
    assert track_label({}) == "unknown"
