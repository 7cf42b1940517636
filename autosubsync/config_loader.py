"""Handles loading configuration from YAML files."""

import yaml
import os
import logging
from dataclasses import fields
from typing import Any, Dict, Optional

from .exceptions import ConfigurationError
from .models import Config, Engine, MenuStyle
from .utils import is_empty

logger = logging.getLogger(__name__)

ASK = "ask"
_PATH_KEYS = ("ffmpeg_path", "ffsubsync_path", "alass_path")

class ConfigLoader:
    """Loads configuration settings from a YAML file."""

    def load_config(self, config_path: str) -> dict:
        """
        Loads configuration from the specified YAML file path.

        Args:
            config_path: The path to the YAML configuration file.

        Returns:
            A dictionary containing the loaded configuration settings.

        Raises:
            FileNotFoundError: If the configuration file does not exist.
            ConfigurationError: If the file cannot be parsed as YAML or
                              if there are other reading errors.
        """
        logger.info(f"Attempting to load configuration from: {config_path}")
        if not os.path.exists(config_path):
            logger.error(f"Configuration file not found at path: {config_path}")
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        if not os.path.isfile(config_path):
            logger.error(f"Configuration path is not a file: {config_path}")
            raise ConfigurationError(f"Configuration path is not a file: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML configuration file {config_path}: {e}", exc_info=True)
            raise ConfigurationError(f"Invalid YAML format in {config_path}: {e}") from e
        except OSError as e:
            logger.error(f"Error reading configuration file {config_path}: {e}", exc_info=True)
            raise ConfigurationError(f"Could not read configuration file {config_path}: {e}") from e

        if config is None:
            # An empty file is a valid "all defaults" configuration
            logger.info(f"Configuration file {config_path} is empty, using defaults.")
            return {}
        if not isinstance(config, dict):
            logger.error(f"Configuration file {config_path} did not load as a dictionary (root object).")
            raise ConfigurationError(f"Invalid YAML structure in {config_path}. Root must be a mapping (dictionary).")
        logger.info(f"Configuration loaded successfully from {config_path}")
        return config


def parse_engine(value: Any) -> Optional[Engine]:
    """Maps a ``subsync_tool`` value to an engine, ``None`` meaning ask."""
    if is_empty(value):
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"subsync_tool must be a string, got {type(value).__name__}.")
    name = value.strip().lower()
    if name == ASK:
        return None
    try:
        return Engine(name)
    except ValueError:
        allowed = ", ".join([e.value for e in Engine] + [ASK])
        raise ConfigurationError(f"Unknown subsync_tool '{value}'. Allowed options: {allowed}.") from None


def _build_menu_style(raw: Any) -> MenuStyle:
    if raw is None:
        return MenuStyle()
    if not isinstance(raw, dict):
        raise ConfigurationError("'menu' must be a mapping.")
    known = {f.name: f for f in fields(MenuStyle)}
    values = {}
    for key, value in raw.items():
        if key not in known:
            logger.warning(f"Ignoring unknown menu option: {key}")
            continue
        default = getattr(MenuStyle, key)
        if isinstance(default, int):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"menu.{key} must be an integer.")
        else:
            value = str(value).strip().lstrip('#')
            if len(value) != 6 or any(c not in "0123456789abcdefABCDEF" for c in value):
                raise ConfigurationError(f"menu.{key} must be a RRGGBB hex color, got '{value}'.")
        values[key] = value
    return MenuStyle(**values)


def build_config(raw: Dict[str, Any]) -> Config:
    """
    Validates a loaded configuration mapping and turns it into a Config.

    Unknown keys are logged and ignored. Empty tool paths are kept empty here;
    they are filled in by the executable resolver.

    Raises:
        ConfigurationError: If a value has the wrong type or is not allowed.
    """
    values: Dict[str, Any] = {}
    for key in _PATH_KEYS:
        value = raw.get(key)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ConfigurationError(f"{key} must be a string path.")
        values[key] = value.strip()

    values['subsync_tool'] = parse_engine(raw.get('subsync_tool', ASK))

    unload_old_sub = raw.get('unload_old_sub', True)
    if not isinstance(unload_old_sub, bool):
        raise ConfigurationError("unload_old_sub must be true or false.")
    values['unload_old_sub'] = unload_old_sub

    keybinding = raw.get('keybinding', 'n')
    if is_empty(keybinding) or not isinstance(keybinding, str):
        raise ConfigurationError("keybinding must be a non-empty key name.")
    values['keybinding'] = keybinding.strip()

    values['menu_style'] = _build_menu_style(raw.get('menu'))
    values['log_dir'] = str(raw.get('log_dir', 'logs'))
    values['log_file'] = str(raw.get('log_file', 'autosubsync.log'))

    known = set(_PATH_KEYS) | {'subsync_tool', 'unload_old_sub', 'keybinding', 'menu', 'log_dir', 'log_file'}
    for key in raw:
        if key not in known:
            logger.warning(f"Ignoring unknown configuration option: {key}")

    return Config(**values)
