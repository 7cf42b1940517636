#!/usr/bin/env python3
"""
AutoSubSync Entry Point Script

This script opens the player with the subtitle synchronization menu installed.
"""

import sys
from autosubsync.cli import CLIHandler

if __name__ == "__main__":
    if sys.version_info < (3, 8):
        sys.stderr.write("AutoSubSync requires Python 3.8 or later.\n")
        sys.exit(1)

    cli = CLIHandler()
    cli.run()
