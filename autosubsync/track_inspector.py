"""Builds track snapshots from the player's track list."""

import logging
from typing import Any, Dict, List, Optional

from .models import Track, TrackKind
from .session import HostSession

logger = logging.getLogger(__name__)

def _optional_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None

def track_label(raw: Dict[str, Any]) -> str:
    """Language of the track, else the last dot-separated part of its title."""
    lang = raw.get('lang')
    if lang:
        return str(lang)
    title = raw.get('title')
    if title:
        return str(title).rsplit('.', 1)[-1]
    return "unknown"

class TrackInspector:
    """Queries the host session for tracks. Snapshots are never cached."""

    def __init__(self, session: HostSession):
        self.session = session

    def _snapshot(self) -> List[Track]:
        tracks = []
        for position, raw in enumerate(self.session.track_list(), start=1):
            try:
                kind = TrackKind(raw.get('type'))
            except ValueError:
                continue  # video and other track types
            external = bool(raw.get('external'))
            tracks.append(Track(
                kind=kind,
                index=position,
                track_id=_optional_int(raw.get('id')),
                stream_index=_optional_int(raw.get('ff-index')),
                is_external=external,
                external_path=raw.get('external-filename') if external else None,
                label=track_label(raw),
                is_active=bool(raw.get('selected')),
            ))
        return tracks

    def get_loaded_tracks(self, kind: TrackKind) -> List[Track]:
        tracks = [track for track in self._snapshot() if track.kind is kind]
        logger.debug(f"Found {len(tracks)} loaded {kind.value} track(s)")
        return tracks

    def get_active_track(self, kind: TrackKind) -> Optional[Track]:
        for track in self._snapshot():
            if track.kind is kind and track.is_active:
                return track
        return None

    def get_active_subtitle_path(self) -> Optional[str]:
        """File backing the active subtitle, None for internal or no subtitle."""
        track = self.get_active_track(TrackKind.SUBTITLE)
        if track is not None and track.is_external:
            return track.external_path
        return None
