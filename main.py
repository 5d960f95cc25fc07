#!/usr/bin/env python3
"""
Minesweeper - terminal entry point.

Usage:
    python main.py [--difficulty {easy,medium,hard}] [--seed N]
"""
import os
import sys

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
