#!/usr/bin/env python3
"""Launch the terminal-to-Markdown converter.

Usage:
    python run.py [inputs...] [--html] [--dark|--light] [--debug] [--trace] [--verbose]
"""
import asyncio
import sys

from mdconverter.main import main

if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
