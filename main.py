#!/usr/bin/env python3
"""ArcTimer — entry point.

Run with:
    python main.py
    python -m arctimer
"""

from arctimer.__main__ import main


if __name__ == "__main__":
    main()
