from __future__ import annotations

from autosubsync.models import MenuStyle
from autosubsync.overlay import OverlayPresenter, ass_color, ass_escape, render, to_ass


def test_render_stacks_items_and_highlights_selection() -> None:
    style = MenuStyle(pos_x=10, pos_y=20, font_size=30, line_spacing=5)

    rects = render(["Sync to audio", "Sync to an internal subtitle", "Cancel"], 2, style)

    assert [(r.x, r.y) for r in rects] == [(10, 20), (10, 55), (10, 90)]
    assert [r.text_color for r in rects] == [style.inactive_color, style.active_color, style.inactive_color]
    assert {r.border_color for r in rects} == {style.border_color}


def test_render_empty_menu() -> None:
    assert render([], 1, MenuStyle()) == []
    assert to_ass([]) == ""


def test_ass_color_swaps_to_bgr() -> None:
    assert ass_color("ff6b71") == "&H716BFF&"
    assert ass_color("#2f1728") == "&H28172F&"


def test_ass_escape_neutralizes_override_blocks() -> None:
    assert ass_escape("a{b}c") == "a\\{b\\}c"
    assert "\\N" not in ass_escape("C:\\New")


def test_to_ass_one_event_per_item() -> None:
    style = MenuStyle()
    text = to_ass(render(["ffsubsync", "alass", "Cancel"], 1, style))

    lines = text.split("\n")
    assert len(lines) == 3
    assert lines[0].startswith("{\\an7\\pos(50,50)")
    assert lines[0].endswith("ffsubsync")
    assert ass_color(style.active_color) in lines[0]
    assert ass_color(style.active_color) not in lines[1]


def test_presenter_draws_and_clears(session) -> None:
    presenter = OverlayPresenter(session)

    presenter.show(["alass", "Cancel"], 1, MenuStyle())
    assert session.overlay_visible
    assert session.overlays[-1].count("\n") == 1

    presenter.clear()
    assert not session.overlay_visible


def test_presenter_keeps_last_known_canvas(session) -> None:
    presenter = OverlayPresenter(session)
    assert presenter.canvas_size() == (1920, 1080)

    session.size = None
    assert presenter.canvas_size() == (1920, 1080)

    session.size = (0, 0)
    assert presenter.canvas_size() == (1920, 1080)


def test_presenter_clears_for_empty_menu(session) -> None:
    presenter = OverlayPresenter(session)
    presenter.show(["Cancel"], 1, MenuStyle())
    presenter.show([], 1, MenuStyle())
    assert not session.overlay_visible
