"""Runs the synchronization engines and swaps the retimed subtitle in."""

import logging
import subprocess
from typing import List, Optional

from .exceptions import (
    InvocationFailedError,
    SubtitleNotFoundError,
    SyncFailedError,
    ToolNotFoundError,
    TrackAddFailedError,
)
from .models import Config, Engine
from .notifier import Notifier
from .session import HostSession
from .utils import derive_retimed_path, file_exists

logger = logging.getLogger(__name__)

class SubtitleSyncer:
    """Retimes the active subtitle with ffsubsync or alass."""

    def __init__(self, config: Config, session: HostSession, notifier: Notifier):
        self.config = config
        self.session = session
        self.notifier = notifier

    def validate(self, engine: Engine, subtitle_path: Optional[str]) -> None:
        """
        Checks that a sync could start.

        Raises:
            ToolNotFoundError: If the engine executable does not exist.
            SubtitleNotFoundError: If the subtitle to retime does not exist.
        """
        engine_path = self.config.engine_path(engine)
        if not file_exists(engine_path):
            raise ToolNotFoundError(
                f"Can't find {engine.value} executable.\nPlease specify the correct path in the config."
            )
        if not file_exists(subtitle_path):
            raise SubtitleNotFoundError(
                f"Subtitle synchronization failed:\nCouldn't find {subtitle_path or 'external subtitle file.'}"
            )

    def build_command(
        self,
        engine: Engine,
        reference_path: str,
        subtitle_path: str,
        output_path: str,
        audio_stream_index: Optional[int] = None,
    ) -> List[str]:
        """
        Builds the engine's argument list.

        ``audio_stream_index`` is only understood by ffsubsync; alass always
        takes reference, input and output positionally.
        """
        if engine is Engine.FFSUBSYNC:
            command = [self.config.ffsubsync_path, reference_path, "-i", subtitle_path, "-o", output_path]
            if audio_stream_index is not None:
                command.extend(["--reference-stream", f"0:{audio_stream_index}"])
            return command
        if engine is Engine.ALASS:
            return [self.config.alass_path, reference_path, subtitle_path, output_path]
        raise ValueError(f"Unsupported engine: {engine!r}")

    def sync(
        self,
        engine: Engine,
        subtitle_path: Optional[str],
        reference_path: Optional[str] = None,
        audio_stream_index: Optional[int] = None,
    ) -> str:
        """
        Synchronizes ``subtitle_path`` and loads the result into the player.

        Args:
            engine: The engine to run.
            subtitle_path: The external subtitle file to retime.
            reference_path: Subtitle to sync against. When None, the playing
                            media is the reference and ``audio_stream_index``
                            selects its audio stream.
            audio_stream_index: Container index of the reference audio stream.

        Returns:
            The path of the retimed subtitle.

        Raises:
            ToolNotFoundError, SubtitleNotFoundError, InvocationFailedError,
            SyncFailedError, TrackAddFailedError.
        """
        self.validate(engine, subtitle_path)
        retimed_path = derive_retimed_path(subtitle_path)
        if reference_path is None:
            reference = self.session.media_path() or ""
            stream_index = audio_stream_index
        else:
            reference = reference_path
            stream_index = None
        command = self.build_command(engine, reference, subtitle_path, retimed_path, stream_index)

        self.notifier.notify(f"Starting {engine.value}...", "info", 2)
        logger.info(f"Running: {' '.join(command)}")
        try:
            result = subprocess.run(command, capture_output=True, text=True, check=False)
        except (OSError, ValueError) as e:
            logger.error(f"Could not start {engine.value}: {e}", exc_info=True)
            raise InvocationFailedError("Parsing failed or no args passed.") from e

        if result.returncode != 0:
            logger.error(f"{engine.value} exited with status {result.returncode}: {(result.stderr or '').strip()}")
            raise SyncFailedError("Subtitle synchronization failed.")

        old_sid = self.session.active_subtitle_id()
        if not self.session.add_subtitle(retimed_path):
            raise TrackAddFailedError("Error: couldn't add synchronized subtitle.")
        self.notifier.notify("Subtitle synchronized.", "info", 2)

        if self.config.unload_old_sub and old_sid is not None:
            if not self.session.remove_subtitle(old_sid):
                logger.warning(f"Could not unload previous subtitle track {old_sid}")
        return retimed_path
