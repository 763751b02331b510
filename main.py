#!/usr/bin/env python3
"""
exlint - Main Entry Point

Static analysis for Elixir sources, usable on the terminal and as a
Code Climate engine.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from exlint.cli.main import main

if __name__ == "__main__":
    main()
