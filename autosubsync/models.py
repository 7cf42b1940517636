"""Data models for AutoSubSync."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class TrackKind(Enum):
    """Track types the add-on cares about, keyed by the player's type name."""
    AUDIO = "audio"
    SUBTITLE = "sub"


class Engine(Enum):
    """Supported synchronization engines."""
    FFSUBSYNC = "ffsubsync"
    ALASS = "alass"


class ReferenceKind(Enum):
    """What the subtitle gets synchronized against."""
    AUDIO = "audio"
    SUBTITLE = "subtitle"


@dataclass(frozen=True)
class Track:
    """Snapshot of one player track."""
    kind: TrackKind
    index: int  # 1-based position in the player's track list
    track_id: Optional[int] = None
    stream_index: Optional[int] = None  # container stream index (ff-index)
    is_external: bool = False
    external_path: Optional[str] = None
    label: str = "unknown"
    is_active: bool = False

    @property
    def number(self) -> int:
        """Number shown to the user: stream index when known, list position otherwise."""
        return self.stream_index if self.stream_index is not None else self.index


@dataclass(frozen=True)
class MenuStyle:
    """Presentation settings of the selection menus. Colors are RRGGBB hex."""
    pos_x: int = 50
    pos_y: int = 50
    font_size: int = 24
    line_spacing: int = 8
    border_size: int = 2
    border_color: str = "2f1728"
    active_color: str = "ff6b71"
    inactive_color: str = "fff5da"


@dataclass(frozen=True)
class Config:
    """Add-on configuration, loaded once at startup."""
    ffmpeg_path: str = ""
    ffsubsync_path: str = ""
    alass_path: str = ""
    subsync_tool: Optional[Engine] = None  # None means ask every time
    unload_old_sub: bool = True
    keybinding: str = "n"
    menu_style: MenuStyle = field(default_factory=MenuStyle)
    log_dir: str = "logs"
    log_file: str = "autosubsync.log"

    def engine_path(self, engine: Engine) -> str:
        if engine is Engine.FFSUBSYNC:
            return self.ffsubsync_path
        if engine is Engine.ALASS:
            return self.alass_path
        raise ValueError(f"Unsupported engine: {engine!r}")


@dataclass(frozen=True)
class OverlayRect:
    """One styled line of the on-screen menu."""
    x: int
    y: int
    text: str
    text_color: str
    border_color: str
    font_size: int
    border_size: int


@dataclass
class Attempt:
    """Choices made during a single synchronization attempt."""
    reference: Optional[ReferenceKind] = None
    engine: Optional[Engine] = None
    tracks: List[Track] = field(default_factory=list)
    track: Optional[Track] = None
