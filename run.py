#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

Examples:
    python run.py play
    python run.py play --ai none
    python run.py --debug play --ai-side first
    python run.py analyze --position 0,0,0,...,1,2
"""

import sys

from connect4engine.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
