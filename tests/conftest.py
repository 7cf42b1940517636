from __future__ import annotations

from typing import Any, Callable

import pytest

from autosubsync.session import HostSession


class FakeSession(HostSession):
    """Records every call the add-on makes to the player."""

    def __init__(self) -> None:
        self.path: str | None = "/media/movie.mkv"
        self.tracks: list[dict[str, Any]] = []
        self.sid: int | None = None
        self.bindings: dict[str, Callable[[], None]] = {}
        self.messages: list[tuple[str, float]] = []
        self.overlays: list[str] = []
        self.overlay_visible = False
        self.added: list[str] = []
        self.removed: list[int] = []
        self.accept_subtitles = True
        self.size: tuple[int, int] | None = (1920, 1080)

    def media_path(self) -> str | None:
        return self.path

    def track_list(self) -> list[dict[str, Any]]:
        return [dict(track) for track in self.tracks]

    def active_subtitle_id(self) -> int | None:
        return self.sid

    def add_subtitle(self, subtitle_path: str) -> bool:
        if not self.accept_subtitles:
            return False
        self.added.append(subtitle_path)
        return True

    def remove_subtitle(self, track_id: int) -> bool:
        self.removed.append(track_id)
        return True

    def bind_key(self, key: str, callback: Callable[[], None]) -> None:
        self.bindings[key] = callback

    def unbind_key(self, key: str) -> None:
        self.bindings.pop(key, None)

    def show_message(self, message: str, duration: float) -> None:
        self.messages.append((message, duration))

    def draw_overlay(self, ass_events: str, width: int, height: int) -> None:
        self.overlays.append(ass_events)
        self.overlay_visible = True

    def clear_overlay(self) -> None:
        self.overlay_visible = False

    def osd_size(self) -> tuple[int, int] | None:
        return self.size

    def press(self, key: str) -> None:
        self.bindings[key]()


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()
