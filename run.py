#!/usr/bin/env python3
"""Quick run script for the shellprompt CLI"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from shellprompt.cli.commands import cli

if __name__ == "__main__":
    cli()
