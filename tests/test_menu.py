from __future__ import annotations

import random

import pytest

from autosubsync.menu import (
    CANCEL,
    EngineMenu,
    ReferenceMenu,
    TrackMenu,
    default_keymap,
    MenuAction,
    track_item,
)
from autosubsync.models import Engine, MenuStyle, ReferenceKind, Track, TrackKind


def test_down_wraps_from_last_to_first() -> None:
    menu = ReferenceMenu(MenuStyle())
    menu.down()
    menu.down()
    assert menu.selected == 3
    menu.down()
    assert menu.selected == 1


def test_up_wraps_from_first_to_last() -> None:
    menu = ReferenceMenu(MenuStyle())
    menu.up()
    assert menu.selected == 3
    menu.up()
    assert menu.selected == 2


def test_selection_stays_in_range_for_any_navigation() -> None:
    rng = random.Random(7)
    for size in range(1, 6):
        tracks = [Track(kind=TrackKind.SUBTITLE, index=i) for i in range(1, size)]
        menu = TrackMenu(tracks, MenuStyle())
        for _ in range(200):
            if rng.random() < 0.5:
                menu.up()
            else:
                menu.down()
            assert 1 <= menu.selected <= len(menu.items)


def test_last_item_is_cancel() -> None:
    menu = ReferenceMenu(MenuStyle())
    assert menu.items[-1] == CANCEL
    menu.select(3)
    assert menu.cancel_selected()
    assert menu.choice() is None


def test_reference_menu_choices() -> None:
    menu = ReferenceMenu(MenuStyle())
    assert menu.choice() is ReferenceKind.AUDIO
    menu.down()
    assert menu.choice() is ReferenceKind.SUBTITLE


def test_engine_menu_highlights_last_choice() -> None:
    menu = EngineMenu(MenuStyle(), Engine.ALASS)
    assert menu.items == ["ffsubsync", "alass", "Cancel"]
    assert menu.selected == 2
    assert menu.choice() is Engine.ALASS


def test_select_rejects_out_of_range() -> None:
    menu = ReferenceMenu(MenuStyle())
    with pytest.raises(ValueError):
        menu.select(4)
    with pytest.raises(ValueError):
        menu.select(0)


def test_track_item_labels() -> None:
    internal = Track(kind=TrackKind.SUBTITLE, index=3, stream_index=2, label="eng")
    external = Track(
        kind=TrackKind.SUBTITLE,
        index=4,
        is_external=True,
        external_path="/m/movie.srt",
        label="srt",
        is_active=True,
    )
    assert track_item(internal) == "Internal #2 - eng"
    assert track_item(external) == "External #4 - srt (active)"


def test_track_menu_has_one_item_per_track_plus_cancel() -> None:
    tracks = [Track(kind=TrackKind.SUBTITLE, index=i, label=f"t{i}") for i in (1, 2, 3)]
    menu = TrackMenu(tracks, MenuStyle())
    assert len(menu.items) == 4
    menu.select(3)
    assert menu.choice() == tracks[2]


def test_default_keymap_covers_four_actions() -> None:
    assert set(default_keymap().values()) == set(MenuAction)
