"""Utility functions for AutoSubSync."""

import os
import re
import logging
import tempfile
from typing import Any, Optional
from .exceptions import FileSystemError

logger = logging.getLogger(__name__)

RETIMED_SUFFIX = "_retimed"
EXTRACTED_SUBTITLE_NAME = "autosubsync_extracted.srt"

_EXTENSION_RE = re.compile(r"\.[A-Za-z0-9]+$")

def ensure_dir_exists(dir_path: str) -> None:
    """
    Ensures that a directory exists. Creates it if it doesn't.

    Args:
        dir_path: The path to the directory.

    Raises:
        FileSystemError: If the directory cannot be created due to permissions
                         or if the path exists but is not a directory.
    """
    if not dir_path:
        raise ValueError("Directory path cannot be empty.")
    try:
        if not os.path.exists(dir_path):
            os.makedirs(dir_path)
            logger.info(f"Created directory: {dir_path}")
        elif not os.path.isdir(dir_path):
            raise FileSystemError(f"Path exists but is not a directory: {dir_path}")
    except OSError as e:
        logger.error(f"Error creating or accessing directory {dir_path}: {e}", exc_info=True)
        raise FileSystemError(f"Could not create or access directory {dir_path}: {e}") from e

def is_empty(value: Any) -> bool:
    """True for None, empty strings and empty containers."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False

def file_exists(file_path: Optional[str]) -> bool:
    return bool(file_path) and os.path.isfile(file_path)

def derive_retimed_path(subtitle_path: str) -> str:
    """
    Builds the output path of a retimed subtitle.

    Only the last dot-separated alphanumeric suffix counts as the extension:
    ``movie.srt`` becomes ``movie_retimed.srt`` and ``a.b.ass`` becomes
    ``a.b_retimed.ass``. A path without extension just gets the suffix.
    """
    match = _EXTENSION_RE.search(subtitle_path)
    if match is None:
        return subtitle_path + RETIMED_SUFFIX
    return subtitle_path[:match.start()] + RETIMED_SUFFIX + match.group(0)

def extracted_subtitle_path() -> str:
    """Fixed location of the subtitle extracted from the media container."""
    return os.path.join(tempfile.gettempdir(), EXTRACTED_SUBTITLE_NAME)

def remove_temp_file(file_path: Optional[str]) -> None:
    """Removes a temporary file, logging instead of raising on failure."""
    if not file_path or not os.path.exists(file_path):
        return
    try:
        os.remove(file_path)
        logger.info(f"Cleaned up temporary file: {file_path}")
    except OSError as e:
        logger.warning(f"Could not remove temporary file {file_path}: {e}", exc_info=False)
