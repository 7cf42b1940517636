"""Selection menus shown by the add-on."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from .models import Engine, MenuStyle, ReferenceKind, Track

CANCEL = "Cancel"


class MenuAction(Enum):
    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    CANCEL = "cancel"


class Level(Enum):
    REFERENCE = 1
    ENGINE = 2
    TRACK = 3


def default_keymap() -> Dict[str, MenuAction]:
    """Keys bound while a menu is open."""
    return {
        'k': MenuAction.UP,
        'UP': MenuAction.UP,
        'j': MenuAction.DOWN,
        'DOWN': MenuAction.DOWN,
        'l': MenuAction.CONFIRM,
        'ENTER': MenuAction.CONFIRM,
        'h': MenuAction.CANCEL,
        'ESC': MenuAction.CANCEL,
    }


class Menu(ABC):
    """
    A vertical list of choices whose last item is always Cancel.

    ``selected`` is 1-based and wraps around at both ends. Opening and
    closing only track state; key bindings and drawing belong to the
    selection state machine.
    """

    level: Level

    def __init__(self, labels: Sequence[str], style: MenuStyle, selected: int = 1):
        self.items: List[str] = list(labels) + [CANCEL]
        self.style = style
        self.selected = 1
        self.is_open = False
        self.select(selected)

    def select(self, number: int) -> None:
        if not 1 <= number <= len(self.items):
            raise ValueError(f"Item {number} is out of range 1..{len(self.items)}")
        self.selected = number

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def down(self) -> None:
        self.selected = self.selected % len(self.items) + 1

    def up(self) -> None:
        self.selected = (self.selected - 2) % len(self.items) + 1

    def cancel_selected(self) -> bool:
        return self.selected == len(self.items)

    def choice(self) -> Optional[Any]:
        """Value behind the highlighted item, None for Cancel."""
        if self.cancel_selected():
            return None
        return self.value_at(self.selected)

    @abstractmethod
    def value_at(self, number: int) -> Any:
        pass


class ReferenceMenu(Menu):
    level = Level.REFERENCE
    REFERENCES = (ReferenceKind.AUDIO, ReferenceKind.SUBTITLE)

    def __init__(self, style: MenuStyle):
        super().__init__(['Sync to audio', 'Sync to an internal subtitle'], style)

    def value_at(self, number: int) -> ReferenceKind:
        return self.REFERENCES[number - 1]


class EngineMenu(Menu):
    level = Level.ENGINE
    ENGINES = (Engine.FFSUBSYNC, Engine.ALASS)

    def __init__(self, style: MenuStyle, last_choice: Engine = Engine.FFSUBSYNC):
        super().__init__([engine.value for engine in self.ENGINES], style,
                         selected=self.ENGINES.index(last_choice) + 1)

    def value_at(self, number: int) -> Engine:
        return self.ENGINES[number - 1]


def track_item(track: Track) -> str:
    origin = 'External' if track.is_external else 'Internal'
    active = ' (active)' if track.is_active else ''
    return f"{origin} #{track.number} - {track.label}{active}"


class TrackMenu(Menu):
    level = Level.TRACK

    def __init__(self, tracks: Sequence[Track], style: MenuStyle):
        self.tracks = list(tracks)
        super().__init__([track_item(track) for track in self.tracks], style)

    def value_at(self, number: int) -> Track:
        return self.tracks[number - 1]
