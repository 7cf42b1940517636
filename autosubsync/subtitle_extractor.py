"""Handles subtitle extraction from media containers using ffmpeg."""

import ffmpeg
import logging
from typing import Optional

from .exceptions import ExtractionFailedError
from .utils import extracted_subtitle_path, file_exists, remove_temp_file

logger = logging.getLogger(__name__)

DEFAULT_SUBTITLE_SELECTOR = "s:0"

class SubtitleExtractor:
    """Extracts an internal subtitle stream to a temporary SRT file."""

    def __init__(self, ffmpeg_path: str):
        """
        Initializes the SubtitleExtractor.

        Args:
            ffmpeg_path: Path to the ffmpeg executable.
        """
        self.ffmpeg_cmd = ffmpeg_path
        logger.info(f"Using ffmpeg command: {self.ffmpeg_cmd}")

    def build_stream(self, media_path: str, output_path: str, stream_index: Optional[int] = None):
        """Builds the ffmpeg-python graph for one subtitle stream, without audio or video."""
        selector = str(stream_index) if stream_index is not None else DEFAULT_SUBTITLE_SELECTOR
        return (
            ffmpeg
            .input(media_path)[selector]
            .output(output_path, f='srt', an=None, vn=None)
            .global_args('-hide_banner', '-nostdin', '-loglevel', 'quiet')
            .overwrite_output()
        )

    def extract(self, media_path: Optional[str], stream_index: Optional[int] = None) -> str:
        """
        Writes the selected subtitle stream of ``media_path`` to the temp directory.

        Args:
            media_path: The media file holding the subtitle stream.
            stream_index: Container stream index. When None, the first
                          subtitle stream is used.

        Returns:
            Path of the extracted file. The caller is responsible for removing it.

        Raises:
            ExtractionFailedError: If ffmpeg is missing or fails.
        """
        if not file_exists(self.ffmpeg_cmd):
            raise ExtractionFailedError("Can't find ffmpeg executable.\nPlease specify the correct path in the config.")
        if not media_path:
            raise ExtractionFailedError("Couldn't extract internal subtitle.\nNo media is loaded.")

        output_path = extracted_subtitle_path()
        logger.info(f"Extracting subtitle stream {stream_index if stream_index is not None else DEFAULT_SUBTITLE_SELECTOR} "
                    f"of {media_path} to {output_path}")
        try:
            ffmpeg.run(
                self.build_stream(media_path, output_path, stream_index),
                cmd=self.ffmpeg_cmd, capture_stdout=True, capture_stderr=True,
            )
        except (ffmpeg.Error, OSError) as e:
            logger.error(f"ffmpeg error during subtitle extraction for {media_path}: {e}")
            # Attempt cleanup if extraction failed mid-way
            remove_temp_file(output_path)
            raise ExtractionFailedError(
                "Couldn't extract internal subtitle.\nMake sure the video has internal subtitles."
            ) from e
        logger.info(f"Successfully extracted subtitle to: {output_path}")
        return output_path
