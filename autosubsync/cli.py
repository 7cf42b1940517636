"""Command-Line Interface handler for AutoSubSync."""

import argparse
import logging
import os
import sys
from dataclasses import replace

from .config_loader import ConfigLoader, build_config, parse_engine
from .executable_resolver import resolve_executables
from .log_setup import setup_logging
from .selection import create_state_machine
from .exceptions import AutoSubSyncError, ConfigurationError

logger = logging.getLogger(__name__) # Get logger for this module

DEFAULT_CONFIG_PATH = "autosubsync.yaml"

class CLIHandler:
    """Parses arguments, opens the player and installs the synchronization menu."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Creates the argument parser for the CLI."""
        parser = argparse.ArgumentParser(
            description="AutoSubSync: play a video in mpv and resynchronize its subtitles with ffsubsync or alass.",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter # Show defaults in help
        )
        parser.add_argument(
            "media",
            help="Path to the video file to play."
        )
        parser.add_argument(
            "-c", "--config",
            default=DEFAULT_CONFIG_PATH,
            help="Path to the configuration YAML file. Built-in defaults are used if the default file is absent."
        )
        parser.add_argument(
            "--subsync-tool",
            default=None, # Default taken from config
            choices=["ffsubsync", "alass", "ask"],
            help="Override the synchronization engine specified in config."
        )
        parser.add_argument(
            "--key",
            default=None, # Default taken from config
            help="Override the key that opens the synchronization menu."
        )
        parser.add_argument(
            "--log-level",
            default="INFO",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            help="Set the logging level for console and file output."
        )
        return parser

    def _load_raw_config(self, config_path: str) -> dict:
        if config_path == DEFAULT_CONFIG_PATH and not os.path.exists(config_path):
            logger.info(f"No configuration file at {config_path}, using defaults.")
            return {}
        return ConfigLoader().load_config(config_path)

    def run(self) -> None:
        """Parses arguments, sets up logging, loads config and runs the player."""
        args = self.parser.parse_args()

        log_level = getattr(logging, args.log_level.upper(), logging.INFO)
        setup_logging(log_level=log_level)

        # --- Load Configuration ---
        try:
            config = build_config(self._load_raw_config(args.config))
        except ConfigurationError as e:
            logger.critical(f"Failed to load configuration from {args.config}: {e}")
            sys.exit(1)
        except FileNotFoundError:
            logger.critical(f"Configuration file not found: {args.config}")
            sys.exit(1)

        setup_logging(log_level=log_level, log_dir=config.log_dir, log_file=config.log_file)

        # --- Apply CLI Overrides ---
        if args.subsync_tool:
            logger.info(f"Overriding subsync_tool from config with CLI argument: {args.subsync_tool}")
            config = replace(config, subsync_tool=parse_engine(args.subsync_tool))
        if args.key:
            logger.info(f"Overriding keybinding from config with CLI argument: {args.key}")
            config = replace(config, keybinding=args.key)

        config = resolve_executables(config)

        if not os.path.isfile(args.media):
            logger.critical(f"Input media file not found or is not a file: {args.media}")
            sys.exit(1)

        # libmpv is loaded when the module is imported
        from .mpv_session import MpvSession

        session = None
        try:
            session = MpvSession()
            create_state_machine(config, session).install()
            session.play(args.media)
            session.wait_for_shutdown()
            logger.info("Player closed.")
        except AutoSubSyncError as e:
            logger.error(f"An AutoSubSync error occurred: {e}")
            sys.exit(1)
        except KeyboardInterrupt:
            logger.warning("Process interrupted by user (Ctrl+C). Exiting.")
            sys.exit(1)
        except Exception as e:
            logger.critical(f"An unexpected critical error occurred at the top level: {e}", exc_info=True)
            sys.exit(2) # Use a different exit code for unexpected crashes
        finally:
            if session is not None:
                session.terminate()


def main() -> None:
    CLIHandler().run()
