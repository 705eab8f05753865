#!/usr/bin/env python3
"""
run.py - Main entry point for the four-in-a-row engine
"""

import os
import sys

# Add the project root to Python path so a source checkout runs without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from fourinarow.interfaces.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
