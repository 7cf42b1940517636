"""Interactive selection of reference, engine and track, then dispatch to the tools."""

import logging
from functools import partial
from typing import Dict, Optional

from .exceptions import AutoSubSyncError
from .menu import (
    EngineMenu,
    Level,
    Menu,
    MenuAction,
    ReferenceMenu,
    TrackMenu,
    default_keymap,
)
from .models import Attempt, Config, Engine, ReferenceKind, Track, TrackKind
from .notifier import Notifier
from .overlay import OverlayPresenter
from .session import HostSession
from .subtitle_extractor import SubtitleExtractor
from .subtitle_syncer import SubtitleSyncer
from .track_inspector import TrackInspector
from .utils import remove_temp_file

logger = logging.getLogger(__name__)

class SelectionStateMachine:
    """
    Walks the user through the synchronization choices.

    Level 1 picks the reference (audio or subtitle), level 2 the engine and
    level 3 the reference subtitle track. Levels 2 and 3 are skipped when the
    answer is already known. At most one menu is open at any time; closing it
    always unbinds the menu keys and clears the overlay.
    """

    def __init__(
        self,
        config: Config,
        session: HostSession,
        notifier: Notifier,
        inspector: TrackInspector,
        syncer: SubtitleSyncer,
        extractor: SubtitleExtractor,
        presenter: OverlayPresenter,
        keymap: Optional[Dict[str, MenuAction]] = None,
    ):
        self.config = config
        self.session = session
        self.notifier = notifier
        self.inspector = inspector
        self.syncer = syncer
        self.extractor = extractor
        self.presenter = presenter
        keymap = keymap if keymap is not None else default_keymap()
        # The entry key keeps starting attempts while a menu is open
        self.keymap = {key: action for key, action in keymap.items() if key != config.keybinding}
        self.last_engine = Engine.FFSUBSYNC
        self.current_menu: Optional[Menu] = None
        self.attempt: Optional[Attempt] = None

    def install(self) -> None:
        """Binds the entry key in the host session."""
        self.session.bind_key(self.config.keybinding, self.start)
        logger.info(f"Synchronization menu bound to '{self.config.keybinding}'")

    # --- Menu handling ---

    def _open_menu(self, menu: Menu) -> None:
        self._close_menu()
        self.current_menu = menu
        menu.open()
        for key, action in self.keymap.items():
            self.session.bind_key(key, partial(self.handle, action))
        self._redraw()

    def _close_menu(self) -> None:
        menu = self.current_menu
        if menu is None:
            return
        for key in self.keymap:
            self.session.unbind_key(key)
        self.presenter.clear()
        menu.close()
        self.current_menu = None

    def _redraw(self) -> None:
        menu = self.current_menu
        if menu is None:
            self.presenter.clear()
            return
        self.presenter.show(menu.items, menu.selected, menu.style)

    def start(self) -> None:
        """Entry action: opens the reference menu for a new attempt."""
        if isinstance(self.current_menu, ReferenceMenu):
            self.current_menu.select(1)
            self._redraw()
            return
        self._close_menu()
        self.attempt = Attempt()
        self._open_menu(ReferenceMenu(self.config.menu_style))

    def handle(self, action: MenuAction) -> None:
        """Applies one of the four menu actions to the open menu."""
        menu = self.current_menu
        if menu is None:
            return
        if action is MenuAction.UP:
            menu.up()
            self._redraw()
        elif action is MenuAction.DOWN:
            menu.down()
            self._redraw()
        elif action is MenuAction.CONFIRM:
            choice = menu.choice()
            self._close_menu()
            if choice is None:
                self._cancel(menu.level)
            else:
                self._advance(menu.level, choice)
        elif action is MenuAction.CANCEL:
            self._close_menu()
            self._cancel(menu.level)
        else:
            raise ValueError(f"Unsupported menu action: {action!r}")

    def _cancel(self, level: Level) -> None:
        logger.info(f"Synchronization cancelled at level {level.value}")
        self.attempt = None

    def _advance(self, level: Level, choice) -> None:
        if level is Level.REFERENCE:
            self._on_reference(choice)
        elif level is Level.ENGINE:
            self._on_engine(choice)
        elif level is Level.TRACK:
            self._on_track(choice)
        else:
            raise ValueError(f"Unsupported menu level: {level!r}")

    # --- Level transitions ---

    def _on_reference(self, reference: ReferenceKind) -> None:
        self.attempt.reference = reference
        if self.config.subsync_tool is not None:
            self.attempt.engine = self.config.subsync_tool
            self._select_track()
            return
        self._open_menu(EngineMenu(self.config.menu_style, self.last_engine))

    def _on_engine(self, engine: Engine) -> None:
        self.last_engine = engine
        self.attempt.engine = engine
        self._select_track()

    def _select_track(self) -> None:
        attempt = self.attempt
        if attempt.reference is ReferenceKind.AUDIO:
            self._invoke()
            return
        attempt.tracks = self.inspector.get_loaded_tracks(TrackKind.SUBTITLE)
        if len(attempt.tracks) < 2:
            # An external or active sole track is the subtitle being retimed,
            # so fall back to the container's first subtitle stream
            sole = attempt.tracks[0] if attempt.tracks else None
            if sole is not None and not sole.is_external and not sole.is_active:
                attempt.track = sole
            self._invoke()
            return
        self._open_menu(TrackMenu(attempt.tracks, self.config.menu_style))

    def _on_track(self, track: Track) -> None:
        self.attempt.track = track
        self._invoke()

    # --- Invocation ---

    def _invoke(self) -> None:
        attempt, self.attempt = self.attempt, None
        try:
            self._dispatch(attempt)
        except AutoSubSyncError as e:
            self.notifier.notify(str(e), e.level, e.duration)
        except Exception as e:
            logger.critical(f"Unexpected error during synchronization: {e}", exc_info=True)
            self.notifier.notify(f"Subtitle synchronization failed unexpectedly:\n{e}", "fatal", 3)

    def _dispatch(self, attempt: Attempt) -> None:
        subtitle_path = self.inspector.get_active_subtitle_path()
        if attempt.reference is ReferenceKind.AUDIO:
            audio = self.inspector.get_active_track(TrackKind.AUDIO)
            self.syncer.sync(
                attempt.engine,
                subtitle_path,
                audio_stream_index=audio.stream_index if audio is not None else None,
            )
        elif attempt.reference is ReferenceKind.SUBTITLE:
            track = attempt.track
            if track is not None and track.is_external:
                self.syncer.sync(attempt.engine, subtitle_path, reference_path=track.external_path)
            else:
                self._sync_to_internal(attempt.engine, subtitle_path, track)
        else:
            raise ValueError(f"Unsupported reference: {attempt.reference!r}")

    def _sync_to_internal(self, engine: Engine, subtitle_path: Optional[str], track: Optional[Track]) -> None:
        self.syncer.validate(engine, subtitle_path)
        self.notifier.notify("Extracting internal subtitles...", "info", 3)
        reference_path = self.extractor.extract(
            self.session.media_path(),
            track.stream_index if track is not None else None,
        )
        try:
            self.syncer.sync(engine, subtitle_path, reference_path=reference_path)
        finally:
            remove_temp_file(reference_path)


def create_state_machine(config: Config, session: HostSession) -> SelectionStateMachine:
    """Wires the tools around a host session."""
    notifier = Notifier(session)
    return SelectionStateMachine(
        config=config,
        session=session,
        notifier=notifier,
        inspector=TrackInspector(session),
        syncer=SubtitleSyncer(config, session, notifier),
        extractor=SubtitleExtractor(config.ffmpeg_path),
        presenter=OverlayPresenter(session),
    )
