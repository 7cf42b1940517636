"""Renders the open menu as an ASS overlay."""

import logging
from typing import List, Optional, Sequence, Tuple

from .models import MenuStyle, OverlayRect
from .session import HostSession

logger = logging.getLogger(__name__)

DEFAULT_CANVAS = (1280, 720)

def render(items: Sequence[str], selected: int, style: MenuStyle) -> List[OverlayRect]:
    """
    Lays out menu items top to bottom from the style's origin.

    Args:
        items: Item labels in display order.
        selected: 1-based index of the highlighted item.
        style: Colors, position and sizes.

    Returns:
        One rect per item; the selected one uses the active color.
    """
    step = style.font_size + style.line_spacing
    rects = []
    for number, text in enumerate(items, start=1):
        rects.append(OverlayRect(
            x=style.pos_x,
            y=style.pos_y + (number - 1) * step,
            text=text,
            text_color=style.active_color if number == selected else style.inactive_color,
            border_color=style.border_color,
            font_size=style.font_size,
            border_size=style.border_size,
        ))
    return rects

def ass_color(rgb: str) -> str:
    """RRGGBB hex to ASS &HBBGGRR& notation."""
    rgb = rgb.lstrip('#')
    return f"&H{rgb[4:6]}{rgb[2:4]}{rgb[0:2]}&".upper()

def ass_escape(text: str) -> str:
    # Braces open override blocks, backslashes start tags
    return text.replace('\\', '\\\u200b').replace('{', '\\{').replace('}', '\\}')

def to_ass(rects: Sequence[OverlayRect]) -> str:
    """Serializes rects to mpv ``ass-events``, one event per line."""
    lines = []
    for rect in rects:
        lines.append(
            f"{{\\an7\\pos({rect.x},{rect.y})\\fs{rect.font_size}\\bord{rect.border_size}"
            f"\\1c{ass_color(rect.text_color)}\\3c{ass_color(rect.border_color)}}}{ass_escape(rect.text)}"
        )
    return "\n".join(lines)

class OverlayPresenter:
    """Draws menus on the host OSD, redrawing fully on every change."""

    def __init__(self, session: HostSession):
        self.session = session
        self._canvas: Tuple[int, int] = DEFAULT_CANVAS

    def canvas_size(self) -> Tuple[int, int]:
        size: Optional[Tuple[int, int]] = self.session.osd_size()
        if size and size[0] > 0 and size[1] > 0:
            self._canvas = size
        return self._canvas

    def show(self, items: Sequence[str], selected: int, style: MenuStyle) -> None:
        logger.debug(f"Drawing menu with {len(items)} item(s), item {selected} highlighted")
        data = to_ass(render(items, selected, style))
        if not data:
            self.clear()
            return
        width, height = self.canvas_size()
        self.session.draw_overlay(data, width, height)

    def clear(self) -> None:
        self.session.clear_overlay()
