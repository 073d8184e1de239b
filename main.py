#!/usr/bin/env python3
"""Tickwatch entry point.

Run with:
    python main.py
    python -m tickwatch
"""

from tickwatch.__main__ import main


if __name__ == "__main__":
    main()
