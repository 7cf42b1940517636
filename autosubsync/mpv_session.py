"""HostSession implementation on top of python-mpv."""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import mpv

from .session import HostSession

logger = logging.getLogger(__name__)
mpv_logger = logging.getLogger("autosubsync.mpv")

OVERLAY_ID = 63
MPV_LOG_LEVELS = {
    'fatal': logging.CRITICAL,
    'error': logging.ERROR,
    'warn': logging.WARNING,
    'info': logging.INFO,
    'v': logging.DEBUG,
    'debug': logging.DEBUG,
    'trace': logging.DEBUG,
}

def handle_mpv_log(loglevel: str, component: str, message: str) -> None:
    mpv_logger.log(MPV_LOG_LEVELS.get(loglevel, logging.DEBUG), f"[{component}] {message.strip()}")

class MpvSession(HostSession):
    """Drives an mpv player window."""

    def __init__(self, player: Optional[mpv.MPV] = None):
        self.player = player or mpv.MPV(
            input_default_bindings=True,
            input_vo_keyboard=True,
            osc=True,
            log_handler=handle_mpv_log,
            loglevel='warn',
        )

    def play(self, media_path: str) -> None:
        logger.info(f"Loading media: {media_path}")
        self.player.play(media_path)

    def wait_for_shutdown(self) -> None:
        self.player.wait_for_shutdown()

    def terminate(self) -> None:
        self.player.terminate()

    def media_path(self) -> Optional[str]:
        return self.player.path

    def track_list(self) -> List[Dict[str, Any]]:
        return list(self.player.track_list or [])

    def active_subtitle_id(self) -> Optional[int]:
        sid = self.player.sid
        # mpv reports False (or 'no') when no subtitle is selected
        if isinstance(sid, bool) or not isinstance(sid, int):
            return None
        return sid

    def _command(self, *args: Any) -> bool:
        try:
            self.player.command(*args)
            return True
        except (SystemError, ValueError, AttributeError) as e:
            logger.error(f"mpv command {args[0]} failed: {e}")
            return False

    def add_subtitle(self, subtitle_path: str) -> bool:
        return self._command('sub-add', subtitle_path)

    def remove_subtitle(self, track_id: int) -> bool:
        return self._command('sub-remove', track_id)

    def bind_key(self, key: str, callback: Callable[[], None]) -> None:
        def on_key(state: str, name: str, char: Optional[str] = None) -> None:
            # d: key down, p: press, r: auto-repeat
            if state and state[0] in 'dpr':
                callback()
        self.player.register_key_binding(key, on_key, mode='force')

    def unbind_key(self, key: str) -> None:
        try:
            self.player.unregister_key_binding(key)
        except KeyError:
            logger.debug(f"Key {key} was not bound")

    def show_message(self, message: str, duration: float) -> None:
        self.player.show_text(message, int(duration * 1000))

    def draw_overlay(self, ass_events: str, width: int, height: int) -> None:
        self._command('osd-overlay', OVERLAY_ID, 'ass-events', ass_events, width, height)

    def clear_overlay(self) -> None:
        self._command('osd-overlay', OVERLAY_ID, 'none', '')

    def osd_size(self) -> Optional[Tuple[int, int]]:
        width, height = self.player.osd_width, self.player.osd_height
        if not width or not height:
            return None
        return int(width), int(height)
