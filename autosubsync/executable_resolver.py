"""Locates the external tools the add-on runs."""

import os
import shutil
import logging
from dataclasses import replace
from typing import Optional

from .models import Config
from .utils import is_empty

logger = logging.getLogger(__name__)

TOOLS = ("ffmpeg", "ffsubsync", "alass")
FALLBACK_DIR = "/usr/bin"

def find_executable(name: str, search_path: Optional[str] = None) -> str:
    """
    Looks ``name`` up in ``search_path`` (``PATH`` by default) with ``shutil.which``.

    Returns the first existing candidate, or ``/usr/bin/<name>`` when nothing
    is found so that a later existence check reports the tool as missing.
    """
    found = shutil.which(name, path=search_path)
    if found:
        logger.debug(f"Found {name} at {found}")
        return found
    file_name = f"{name}.exe" if os.name == "nt" else name
    fallback = os.path.join(FALLBACK_DIR, file_name)
    logger.debug(f"{name} not found in search path, falling back to {fallback}")
    return fallback

def resolve_executables(config: Config, search_path: Optional[str] = None) -> Config:
    """Returns a copy of ``config`` with every empty tool path guessed."""
    resolved = {}
    for tool in TOOLS:
        key = f"{tool}_path"
        if is_empty(getattr(config, key)):
            resolved[key] = find_executable(tool, search_path)
            logger.info(f"Resolved {tool} executable: {resolved[key]}")
    return replace(config, **resolved) if resolved else config
