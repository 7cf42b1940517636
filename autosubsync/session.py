"""Interface to the media player hosting the add-on."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Tuple

class HostSession(ABC):
    """Abstract base class for the playback session the add-on runs in."""

    @abstractmethod
    def media_path(self) -> Optional[str]:
        """Path of the media currently playing, None when nothing is loaded."""
        pass

    @abstractmethod
    def track_list(self) -> List[Dict[str, Any]]:
        """
        Returns the player's raw track list.

        Each entry is a mapping with at least ``type`` (``audio``, ``sub``,
        ``video``) and optionally ``id``, ``ff-index``, ``lang``, ``title``,
        ``external``, ``external-filename`` and ``selected``.
        """
        pass

    @abstractmethod
    def active_subtitle_id(self) -> Optional[int]:
        pass

    @abstractmethod
    def add_subtitle(self, subtitle_path: str) -> bool:
        """Loads a subtitle file as a new track. Returns False if the player refused it."""
        pass

    @abstractmethod
    def remove_subtitle(self, track_id: int) -> bool:
        pass

    @abstractmethod
    def bind_key(self, key: str, callback: Callable[[], None]) -> None:
        """Binds ``key`` with priority over the player's own bindings."""
        pass

    @abstractmethod
    def unbind_key(self, key: str) -> None:
        pass

    @abstractmethod
    def show_message(self, message: str, duration: float) -> None:
        """Shows a transient on-screen message for ``duration`` seconds."""
        pass

    @abstractmethod
    def draw_overlay(self, ass_events: str, width: int, height: int) -> None:
        pass

    @abstractmethod
    def clear_overlay(self) -> None:
        pass

    @abstractmethod
    def osd_size(self) -> Optional[Tuple[int, int]]:
        """Current OSD canvas size, None when the player cannot tell yet."""
        pass
